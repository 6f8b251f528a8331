"""
Request tracing middleware
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from hallbooking.core.logging_config import set_trace_id, generate_trace_id, trace_id_var
from hallbooking.core.metrics import record_request

logger = logging.getLogger(__name__)


def _endpoint_label(request: Request) -> str:
    """Route template if one matched, so metrics don't explode per path"""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or "unmatched"


class TracingMiddleware(BaseHTTPMiddleware):
    """Middleware to add trace ID to all requests"""

    async def dispatch(self, request: Request, call_next):
        # Generate or extract trace ID
        trace_id = request.headers.get('X-Trace-ID') or generate_trace_id()
        token = set_trace_id(trace_id)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else None

        logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={
                'method': request.method,
                'path': request.url.path,
                'client_ip': client_ip,
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            record_request(request.method, _endpoint_label(request), 500, duration)

            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                extra={
                    'method': request.method,
                    'path': request.url.path,
                    'duration_ms': round(duration * 1000, 2),
                    'error': str(e),
                },
                exc_info=True
            )
            raise
        finally:
            trace_id_var.reset(token)

        duration = time.perf_counter() - start_time
        record_request(request.method, _endpoint_label(request), response.status_code, duration)

        logger.info(
            f"Request completed: {request.method} {request.url.path}",
            extra={
                'trace_id': trace_id,
                'method': request.method,
                'path': request.url.path,
                'status_code': response.status_code,
                'duration_ms': round(duration * 1000, 2),
            }
        )

        # Add trace ID to response headers
        response.headers['X-Trace-ID'] = trace_id
        return response
