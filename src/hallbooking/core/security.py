"""
Password hashing and signed session credentials
"""
from dataclasses import dataclass
from typing import Optional

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from hallbooking.core.config import settings
import logging

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

serializer = URLSafeTimedSerializer(settings.SECRET_KEY, salt="hallbooking-auth")


@dataclass(frozen=True)
class SessionIdentity:
    """Who a request is authenticated as"""
    email: str
    username: str


# ==================== Passwords ====================

async def hash_password(password: str) -> str:
    """Hash a password with bcrypt off the event loop"""
    return await run_in_threadpool(pwd_context.hash, password)


async def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash"""
    try:
        return await run_in_threadpool(pwd_context.verify, password, password_hash)
    except ValueError:
        # Stored value isn't a recognizable hash
        logger.warning("Stored password hash could not be parsed")
        return False


async def dummy_verify() -> None:
    """Spend the same time as a real verify when the user doesn't exist"""
    await run_in_threadpool(pwd_context.dummy_verify)


# ==================== Session credentials ====================

def issue_token(email: str, username: str) -> str:
    """Sign an identity into a URL-safe, timestamped token"""
    return serializer.dumps({"email": email, "username": username})


def read_token(token: Optional[str], max_age: Optional[int] = None) -> Optional[SessionIdentity]:
    """
    Verify a token and return the identity it carries.

    Returns None if the token is missing, tampered with, malformed or older
    than ACCESS_TOKEN_EXPIRE_MINUTES.
    """
    if not token:
        return None

    if max_age is None:
        max_age = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    try:
        data = serializer.loads(token, max_age=max_age)
    except SignatureExpired:
        logger.info("Session token expired")
        return None
    except BadData:
        logger.warning("Session token failed signature check")
        return None

    if not isinstance(data, dict) or not data.get("email"):
        return None

    return SessionIdentity(email=data["email"], username=data.get("username") or "")
