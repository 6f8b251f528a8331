"""
Pydantic schemas for API request/response validation
"""
from hallbooking.schemas.booking import BookingCreate, BookingResponse, BookingLookup
from hallbooking.schemas.user import SignupRequest, LoginRequest

__all__ = [
    # Bookings
    "BookingCreate",
    "BookingResponse",
    "BookingLookup",
    # Auth
    "SignupRequest",
    "LoginRequest",
]
