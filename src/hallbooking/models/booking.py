"""
Booking model - one event hall reservation
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime

from hallbooking.core.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(200))
    aadhar_number = Column(String(12))
    phone_number = Column(String(20))
    gender = Column(String(20))
    address = Column(String(500))
    age = Column(Integer)
    email = Column(String(255), index=True)
    event_date = Column(Date)
    event = Column(String(200))
    hall = Column(String(100))
    booking_ref = Column(String(64))  # BID on the wire, supplied by the client
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return (f"<Booking(id={self.id}, email='{self.email}', hall='{self.hall}', "
                f"event_date='{self.event_date}')>")
