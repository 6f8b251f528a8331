"""
Auth service - signup and credential checks
"""
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hallbooking.core.errors import StoreIntegrityError, translate_store_errors
from hallbooking.core.security import hash_password, verify_password, dummy_verify
from hallbooking.models import User
from hallbooking.schemas.user import SignupRequest
import logging

logger = logging.getLogger(__name__)


class AuthServiceError(Exception):
    """Base exception for auth service errors"""
    pass


class DuplicateEmailError(AuthServiceError):
    """Raised when signing up with an email that is already registered"""
    pass


class InvalidCredentialsError(AuthServiceError):
    """Raised for an unknown email or a wrong password (deliberately the same)"""
    pass


class AuthService:
    """Service for user registration and login"""

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
        """Get user by email"""
        with translate_store_errors():
            result = await db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()

    @staticmethod
    async def signup(db: AsyncSession, user_data: SignupRequest) -> User:
        """
        Create a new user

        Args:
            db: Database session
            user_data: Signup data with the clear-text password

        Returns:
            Created user

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        # Only email is checked; usernames may repeat
        if await AuthService.get_by_email(db, user_data.email):
            logger.info("Signup rejected: email already registered")
            raise DuplicateEmailError("Email already exists!")

        password_hash = await hash_password(user_data.password)

        user = User(
            email=user_data.email,
            username=user_data.username,
            password_hash=password_hash,
        )

        try:
            with translate_store_errors():
                db.add(user)
                await db.commit()
        except StoreIntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            await db.rollback()
            raise DuplicateEmailError("Email already exists!") from e

        logger.info(f"User {user.id} signed up", extra={'user_id': user.id})
        return user

    @staticmethod
    async def authenticate(db: AsyncSession, email: str, password: str) -> User:
        """
        Check an email/password pair

        Raises:
            InvalidCredentialsError: unknown email or wrong password
        """
        user = await AuthService.get_by_email(db, email)

        if user is None:
            await dummy_verify()
            raise InvalidCredentialsError("Invalid email or password")

        if not await verify_password(password, user.password_hash):
            raise InvalidCredentialsError("Invalid email or password")

        logger.info(f"User {user.id} logged in", extra={'user_id': user.id})
        return user
