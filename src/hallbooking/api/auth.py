"""Signup, login and session endpoints"""
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from hallbooking.api.dependencies import get_current_identity
from hallbooking.api.responses import internal_failure
from hallbooking.core.config import settings
from hallbooking.core.database import get_db
from hallbooking.core.metrics import logins_total, signups_total
from hallbooking.core.security import SessionIdentity, issue_token
from hallbooking.middleware.rate_limiter import limiter
from hallbooking.schemas import LoginRequest, SignupRequest
from hallbooking.services import AuthService, DuplicateEmailError, InvalidCredentialsError

router = APIRouter()


@router.post("/submit-signup")
@limiter.limit(settings.SIGNUP_RATE_LIMIT)
async def signup(
    request: Request,
    user_data: SignupRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new account

    Request body:
    {
        "email": "alice@example.com",
        "username": "alice",
        "password": "..."
    }
    """
    try:
        await AuthService.signup(db=db, user_data=user_data)
    except DuplicateEmailError as e:
        signups_total.labels(outcome="duplicate").inc()
        return JSONResponse(status_code=400, content={"message": str(e)})
    except Exception as e:
        return internal_failure("submit-signup", "Error in signup.", e)

    signups_total.labels(outcome="created").inc()
    return {"message": "Signup successful!"}


@router.post("/submit-login")
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Check credentials and hand the caller a signed session token

    The token is set as an HTTP-only cookie and also returned in the body
    for clients that prefer an Authorization: Bearer header.
    """
    try:
        user = await AuthService.authenticate(
            db=db,
            email=credentials.email,
            password=credentials.password,
        )
    except InvalidCredentialsError as e:
        logins_total.labels(outcome="invalid").inc()
        return JSONResponse(status_code=400, content={"message": str(e)})
    except Exception as e:
        return internal_failure("submit-login", "Error in login.", e)

    logins_total.labels(outcome="success").inc()
    token = issue_token(user.email, user.username)

    response = JSONResponse(
        status_code=200,
        content={"message": "Login successful!", "success": True, "token": token},
    )
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )
    return response


@router.get("/is-logged-in")
async def is_logged_in(
    identity: Optional[SessionIdentity] = Depends(get_current_identity),
):
    """Whether this caller holds a valid session token"""
    return {"loggedIn": identity is not None}


@router.post("/logout")
async def logout():
    """Drop the caller's session cookie"""
    response = JSONResponse(status_code=200, content={"message": "Logged out successfully!"})
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )
    return response
