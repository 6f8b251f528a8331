"""Pydantic schemas for Booking resources"""
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class BookingCreate(BaseModel):
    """Body of POST /submit-form; wire names follow the front end's camelCase"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid", str_strip_whitespace=True)

    full_name: str = Field(..., alias="fullName", min_length=1, max_length=200)
    aadhar_number: Optional[str] = Field(None, alias="aadharNumber", pattern=r"^\d{12}$")
    phone_number: Optional[str] = Field(None, alias="phoneNumber", pattern=r"^\+?[0-9 -]{7,20}$", max_length=20)
    gender: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=500)
    age: Optional[int] = Field(None, ge=0, le=150)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    event_date: date = Field(..., alias="eventDate")
    event: str = Field(..., min_length=1, max_length=200)
    hall: str = Field(..., min_length=1, max_length=100)
    booking_ref: Optional[str] = Field(None, alias="BID", max_length=64)

    @field_validator("aadhar_number", mode="before")
    @classmethod
    def strip_aadhar_spaces(cls, v):
        # Aadhaar numbers are often written as 1234 5678 9012
        if isinstance(v, str):
            return v.replace(" ", "")
        return v

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class BookingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    full_name: Optional[str] = Field(None, alias="fullName")
    aadhar_number: Optional[str] = Field(None, alias="aadharNumber")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    gender: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = None
    email: Optional[str] = None
    event_date: Optional[date] = Field(None, alias="eventDate")
    event: Optional[str] = None
    hall: Optional[str] = None
    booking_ref: Optional[str] = Field(None, alias="BID")
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_booking(cls, booking):
        """Convert Booking ORM model to response"""
        return cls(
            id=booking.id,
            full_name=booking.full_name,
            aadhar_number=booking.aadhar_number,
            phone_number=booking.phone_number,
            gender=booking.gender,
            address=booking.address,
            age=booking.age,
            email=booking.email,
            event_date=booking.event_date,
            event=booking.event,
            hall=booking.hall,
            booking_ref=booking.booking_ref,
            created_at=booking.created_at,
        )

    def to_wire(self) -> dict:
        """JSON-ready dict using the front end's field names"""
        return self.model_dump(mode="json", by_alias=True)


class BookingLookup(BaseModel):
    """Body of POST /bookings"""
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()
