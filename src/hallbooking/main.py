"""
FastAPI application entry point
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from contextlib import asynccontextmanager
from slowapi.errors import RateLimitExceeded
import logging

from hallbooking.core.config import settings
from hallbooking.core.database import engine, init_db, check_database_health
from hallbooking.core.logging_config import setup_logging
from hallbooking.core.metrics import render_latest
from hallbooking.api import auth, bookings, frontend
from hallbooking.middleware.rate_limiter import limiter
from hallbooking.middleware.tracing import TracingMiddleware

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    if settings.AUTO_CREATE_TABLES:
        await init_db()
        logger.info("Database tables ready")

    yield

    logger.info("Shutting down...")
    await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Event hall bookings with signup, login and per-client sessions",
    lifespan=lifespan,
)

# Add rate limiter state
app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Handle rate limit exceeded errors"""
    logger.warning(f"Rate limit exceeded for {request.url.path}: {exc.detail}")

    # Seconds until the window of the limit that fired resets
    retry_after = exc.limit.limit.get_expiry()

    return JSONResponse(
        status_code=429,
        content={"message": "Too many requests. Please slow down."},
        headers={"Retry-After": str(retry_after)},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject malformed bodies before anything reaches the database"""
    logger.info(f"Rejected invalid body for {request.url.path}")

    return JSONResponse(
        status_code=422,
        content={
            "message": "Invalid request body.",
            "ok": False,
            "errors": jsonable_encoder(exc.errors()),
        },
    )


app.add_middleware(TracingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-ID"],
)


@app.get("/", response_class=PlainTextResponse, tags=["Root"])
async def root():
    """Liveness check"""
    return "Backend API is running!"


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    db_healthy = await check_database_health()

    return JSONResponse(
        status_code=200 if db_healthy else 503,
        content={
            "status": "healthy" if db_healthy else "degraded",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "database": "up" if db_healthy else "down",
        },
    )


@app.get("/metrics", tags=["Health"])
async def metrics():
    """Prometheus scrape endpoint"""
    payload, content_type = render_latest()
    return Response(content=payload, media_type=content_type)


# Include routers; the front end catch-all must stay last
app.include_router(bookings.router, tags=["Bookings"])
app.include_router(auth.router, tags=["Auth"])
app.include_router(frontend.router, tags=["Frontend"])


def run():
    """Console entry point"""
    import uvicorn
    uvicorn.run(
        "hallbooking.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
