"""
FastAPI Dependencies
"""
from typing import Optional
from fastapi import Request

from hallbooking.core.config import settings
from hallbooking.core.security import SessionIdentity, read_token


def get_request_token(request: Request) -> Optional[str]:
    """Session token from the auth cookie, else from a Bearer header"""
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    return None


async def get_current_identity(request: Request) -> Optional[SessionIdentity]:
    """Identity of the caller, or None if anonymous"""
    return read_token(get_request_token(request))
