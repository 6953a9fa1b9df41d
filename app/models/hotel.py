"""ORM models for hotels and their one-to-one locations."""

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.models.base import Base


class Location(Base):
    """Street address and optional coordinates, owned by exactly one hotel."""

    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    address = Column(String(1024), nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    hotel = relationship("Hotel", back_populates="location", uselist=False)


class Hotel(Base):
    """
    Hotel with a room inventory counter.

    no_of_rooms is decremented on booking and incremented on cancellation;
    it never goes below zero.
    """

    __tablename__ = "hotels"
    __table_args__ = (
        CheckConstraint("no_of_rooms >= 0", name="ck_hotels_no_of_rooms_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    no_of_rooms = Column(Integer, nullable=False, default=0)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=True, unique=True)

    location = relationship("Location", back_populates="hotel", lazy="joined")
    bookings = relationship("Booking", back_populates="hotel", lazy="select")
