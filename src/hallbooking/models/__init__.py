"""
SQLAlchemy Models for the Hall Booking API

Import all models here so they register with Base before create_all.
"""
from hallbooking.core.database import Base

from hallbooking.models.user import User
from hallbooking.models.booking import Booking

__all__ = [
    "Base",
    "User",
    "Booking",
]
