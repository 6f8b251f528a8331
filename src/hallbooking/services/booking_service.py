"""
Booking Service - persistence and lookups for hall bookings
"""
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hallbooking.core.errors import translate_store_errors
from hallbooking.core.security import SessionIdentity
from hallbooking.models import Booking
from hallbooking.schemas.booking import BookingCreate
import logging

logger = logging.getLogger(__name__)


class BookingServiceError(Exception):
    """Base exception for booking service errors"""
    pass


class UnauthorizedAccessError(BookingServiceError):
    """Raised when the caller asks for bookings that aren't theirs"""
    pass


class BookingNotFoundError(BookingServiceError):
    """Raised when no bookings match the requested email"""
    pass


class BookingService:
    """Service for creating and listing bookings"""

    @staticmethod
    async def submit_booking(db: AsyncSession, booking_data: BookingCreate) -> Booking:
        """
        Persist a validated booking.

        No deduplication: every submission creates a new row, and the BID is
        stored as given.
        """
        booking = Booking(**booking_data.model_dump())

        with translate_store_errors():
            db.add(booking)
            await db.commit()

        logger.info(
            f"Booking {booking.id} registered for hall {booking.hall}",
            extra={'booking_id': booking.id}
        )
        return booking

    @staticmethod
    async def get_bookings_by_email(db: AsyncSession, email: str) -> List[Booking]:
        """All bookings made with this email, oldest first"""
        query = (
            select(Booking)
            .where(Booking.email == email)
            .order_by(Booking.id)
        )
        with translate_store_errors():
            result = await db.execute(query)
            return list(result.scalars().all())

    @staticmethod
    async def get_user_bookings(
        db: AsyncSession,
        identity: Optional[SessionIdentity],
        email: str,
    ) -> List[Booking]:
        """
        Bookings for the authenticated caller.

        Raises:
            UnauthorizedAccessError: caller is anonymous or asked for another email
            BookingNotFoundError: caller has no bookings
        """
        if identity is None or identity.email != email:
            raise UnauthorizedAccessError("Unauthorized access")

        bookings = await BookingService.get_bookings_by_email(db, email)
        if not bookings:
            raise BookingNotFoundError("No bookings found")

        return bookings
