"""
Rate limiting using SlowAPI
Throttles credential endpoints against password guessing and signup spam
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request
import logging

from hallbooking.core.config import settings

logger = logging.getLogger(__name__)


def get_identifier(request: Request) -> str:
    """
    Get identifier for rate limiting
    Keys on the peer address only; X-Forwarded-For is client controlled.
    Behind a proxy, run uvicorn with --proxy-headers and --forwarded-allow-ips
    so the peer address is already the real client.
    """
    return f"ip:{get_remote_address(request)}"


# Create limiter instance
limiter = Limiter(
    key_func=get_identifier,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)
