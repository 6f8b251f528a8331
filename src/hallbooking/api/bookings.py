"""Bookings API endpoints"""
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from hallbooking.api.dependencies import get_current_identity
from hallbooking.api.responses import internal_failure
from hallbooking.core.database import get_db
from hallbooking.core.metrics import bookings_submitted_total
from hallbooking.core.security import SessionIdentity
from hallbooking.schemas import BookingCreate, BookingLookup, BookingResponse
from hallbooking.services import (
    BookingService,
    BookingNotFoundError,
    UnauthorizedAccessError,
)

router = APIRouter()


@router.post("/submit-form")
async def submit_booking(
    booking_data: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a hall booking

    The body is validated before anything is stored; see BookingCreate for
    required fields and formats.
    """
    try:
        await BookingService.submit_booking(db=db, booking_data=booking_data)
    except Exception as e:
        return internal_failure("submit-form", "Error in registration.", e, ok=False)

    bookings_submitted_total.inc()
    return {"message": "Booking registered successfully!", "ok": True}


@router.post("/bookings")
async def list_user_bookings(
    lookup: BookingLookup,
    identity: Optional[SessionIdentity] = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """List bookings for the logged-in caller's own email"""
    try:
        bookings = await BookingService.get_user_bookings(
            db=db,
            identity=identity,
            email=lookup.email,
        )
    except UnauthorizedAccessError as e:
        return JSONResponse(status_code=403, content={"message": str(e)})
    except BookingNotFoundError as e:
        return JSONResponse(status_code=404, content={"message": str(e)})
    except Exception as e:
        return internal_failure("bookings", "Error fetching bookings.", e)

    return [BookingResponse.from_booking(b).to_wire() for b in bookings]
