"""
Auth Pydantic schemas

Passwords are taken exactly as sent; only email and username are trimmed.
"""
from pydantic import BaseModel, Field, field_validator

from hallbooking.schemas.booking import EMAIL_PATTERN


class SignupRequest(BaseModel):
    """Body of POST /submit-signup"""
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email", "username", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(BaseModel):
    """Body of POST /submit-login"""
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()
