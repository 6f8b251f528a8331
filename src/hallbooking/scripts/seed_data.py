"""
Seed script to populate database with sample data for testing

Usage:
    python -m hallbooking.scripts.seed_data
"""
import asyncio
import logging
from datetime import date, timedelta

from hallbooking.core.database import AsyncSessionLocal, init_db
from hallbooking.core.logging_config import setup_logging
from hallbooking.core.security import hash_password
from hallbooking.models import Booking, User
from hallbooking.services import AuthService

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"email": "john@example.com", "username": "john", "password": "password123"},
    {"email": "jane@example.com", "username": "jane", "password": "password123"},
]

SAMPLE_BOOKINGS = [
    {
        "full_name": "John Doe",
        "phone_number": "+91 98765 43210",
        "gender": "male",
        "address": "12 MG Road, Bengaluru",
        "age": 34,
        "event": "Wedding Reception",
        "hall": "HALL-A",
        "days_ahead": 30,
    },
    {
        "full_name": "Jane Smith",
        "phone_number": "+91 91234 56789",
        "gender": "female",
        "address": "4 Park Street, Kolkata",
        "age": 29,
        "event": "Product Launch",
        "hall": "HALL-B",
        "days_ahead": 45,
    },
]


async def create_sample_users(db) -> list:
    """Create sample users, skipping emails that already exist"""
    created = []
    for user_data in SAMPLE_USERS:
        if await AuthService.get_by_email(db, user_data["email"]):
            logger.info(f"User {user_data['email']} already exists, skipping...")
            continue

        user = User(
            email=user_data["email"],
            username=user_data["username"],
            password_hash=await hash_password(user_data["password"]),
        )
        db.add(user)
        created.append(user)
        logger.info(f"Created user: {user.email}")

    await db.commit()
    return created


async def create_sample_bookings(db, users: list) -> list:
    """One booking per newly created user"""
    today = date.today()
    bookings = []
    for user, booking_data in zip(users, SAMPLE_BOOKINGS):
        data = dict(booking_data)
        days_ahead = data.pop("days_ahead")
        booking = Booking(
            email=user.email,
            event_date=today + timedelta(days=days_ahead),
            booking_ref=f"BID-{user.username.upper()}-{days_ahead}",
            **data,
        )
        db.add(booking)
        bookings.append(booking)

    await db.commit()
    logger.info(f"Created {len(bookings)} bookings")
    return bookings


async def seed() -> dict:
    """Create tables and sample rows; returns how many rows were added"""
    await init_db()

    async with AsyncSessionLocal() as db:
        users = await create_sample_users(db)
        bookings = await create_sample_bookings(db, users)

    return {"users": len(users), "bookings": len(bookings)}


def main():
    setup_logging()
    counts = asyncio.run(seed())
    logger.info(f"Seeding complete: {counts}")


if __name__ == "__main__":
    main()
