"""ORM model for hotel bookings."""

import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.models.base import Base


class BookingStatus(str, enum.Enum):
    """Booking status. PENDING and FAILED are reserved; no operation produces them."""

    BOOKED = "BOOKED"
    CANCELLED = "CANCELLED"
    PENDING = "PENDING"
    FAILED = "FAILED"


class Booking(Base):
    """One room at one hotel, held by one user."""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=False, index=True)
    status = Column(Enum(BookingStatus, name="booking_status"), nullable=False, index=True)

    user = relationship("User", back_populates="bookings")
    hotel = relationship("Hotel", back_populates="bookings")
