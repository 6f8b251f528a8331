"""
User model
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime

from hallbooking.core.database import Base


class User(Base):
    """Registered account; password is only ever stored hashed"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(100), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', username='{self.username}')>"
