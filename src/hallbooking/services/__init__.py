"""
Services package exports
"""
from hallbooking.services.booking_service import (
    BookingService,
    BookingServiceError,
    UnauthorizedAccessError,
    BookingNotFoundError,
)
from hallbooking.services.auth_service import (
    AuthService,
    AuthServiceError,
    DuplicateEmailError,
    InvalidCredentialsError,
)

__all__ = [
    "BookingService",
    "BookingServiceError",
    "UnauthorizedAccessError",
    "BookingNotFoundError",
    "AuthService",
    "AuthServiceError",
    "DuplicateEmailError",
    "InvalidCredentialsError",
]
