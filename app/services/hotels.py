"""Hotel inventory: CRUD over hotels and their locations, plus the availability query."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationFailure
from app.models import Booking, Hotel, Location
from app.schemas.hotel import HotelRequest

logger = logging.getLogger(__name__)

HOTEL_FIELDS = ("name", "description", "no_of_rooms")
LOCATION_FIELDS = ("address", "latitude", "longitude")

DEFAULT_MIN_ROOMS = 1


def create_hotel(db: Session, request: HotelRequest) -> Hotel:
    """Create a hotel and its location in a single transaction. Room count defaults to 0."""
    location = Location(
        address=request.address,
        latitude=request.latitude,
        longitude=request.longitude,
    )
    hotel = Hotel(
        name=request.name,
        description=request.description,
        no_of_rooms=request.no_of_rooms if request.no_of_rooms is not None else 0,
        location=location,
    )
    db.add(location)
    db.add(hotel)
    db.commit()
    db.refresh(hotel)
    logger.info("Hotel created", extra={"hotel_id": hotel.id, "no_of_rooms": hotel.no_of_rooms})
    return hotel


def update_hotel(db: Session, hotel_id: int, fields: dict[str, Any]) -> Hotel:
    """
    Apply a partial update. Keys that are missing or None are left untouched.

    A hotel without a location gets one created when location fields are
    given; an address is then required.
    """
    hotel = get_hotel(db, hotel_id)
    for name in HOTEL_FIELDS:
        if fields.get(name) is not None:
            setattr(hotel, name, fields[name])

    location_updates = {n: fields[n] for n in LOCATION_FIELDS if fields.get(n) is not None}
    location = hotel.location
    if location is None and location_updates:
        if "address" not in location_updates:
            raise ValidationFailure("Address cannot be null")
        location = Location()
        hotel.location = location
        db.add(location)
    for name, value in location_updates.items():
        setattr(location, name, value)

    db.commit()
    db.refresh(hotel)
    return hotel


def list_hotels(db: Session) -> list[Hotel]:
    return db.query(Hotel).order_by(Hotel.id).all()


def get_hotel(db: Session, hotel_id: int) -> Hotel:
    hotel = db.get(Hotel, hotel_id)
    if hotel is None:
        raise NotFound("Hotel not found")
    return hotel


def delete_hotel(db: Session, hotel_id: int) -> bool:
    """Delete the hotel with its bookings and location in one transaction."""
    hotel = get_hotel(db, hotel_id)
    location = hotel.location
    bookings_deleted = (
        db.query(Booking)
        .filter(Booking.hotel_id == hotel.id)
        .delete(synchronize_session=False)
    )
    db.delete(hotel)
    if location is not None:
        db.flush()
        db.delete(location)
    db.commit()
    logger.info(
        "Hotel deleted",
        extra={"hotel_id": hotel_id, "bookings_deleted": bookings_deleted},
    )
    return True


def available_with_at_least(db: Session, minimum: int | None = None) -> list[Hotel]:
    """
    Hotels with at least `minimum` rooms left.

    None means the default of 1; an explicit 0 is honored and returns every hotel.
    """
    if minimum is None:
        minimum = DEFAULT_MIN_ROOMS
    return (
        db.query(Hotel)
        .filter(Hotel.no_of_rooms >= minimum)
        .order_by(Hotel.id)
        .all()
    )
