"""
Booking lifecycle: book, update, cancel, delete, and lookups.

Room inventory changes are done with single conditional UPDATE statements
committed in the same transaction as the booking change, so concurrent
bookings cannot take the last room twice.
"""

import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound
from app.models import Booking, BookingStatus, Hotel, User
from app.schemas.auth import Principal
from app.services.hotels import available_with_at_least

logger = logging.getLogger(__name__)

# HTTP statuses kept from the existing API contract.
ROOM_NOT_AVAILABLE_STATUS = 404
CANCEL_VIA_UPDATE_STATUS = 417


def available_rooms(db: Session, minimum: int | None = None) -> list[Hotel]:
    return available_with_at_least(db, minimum)


def book(db: Session, hotel_id: int | None, principal: Principal) -> Booking:
    """Take one room at the hotel for the caller and record a BOOKED booking."""
    hotel = db.get(Hotel, hotel_id) if hotel_id is not None else None
    if hotel is None:
        raise NotFound("Hotel not found")
    user = db.query(User).filter(User.email == principal.email).first()
    if user is None:
        raise NotFound("User not found")

    result = db.execute(
        update(Hotel)
        .where(Hotel.id == hotel.id, Hotel.no_of_rooms >= 1)
        .values(no_of_rooms=Hotel.no_of_rooms - 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        db.rollback()
        raise Conflict("Room not available", status_code=ROOM_NOT_AVAILABLE_STATUS)

    booking = Booking(user_id=user.id, hotel_id=hotel.id, status=BookingStatus.BOOKED)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info(
        "Booking created",
        extra={"booking_id": booking.id, "hotel_id": hotel.id, "user_id": user.id},
    )
    return booking


def update_booking(
    db: Session, booking_id: int | None, status: BookingStatus | None
) -> Booking:
    """
    Overwrite a booking's status.

    CANCELLED is refused regardless of the booking's state: cancellation must
    go through cancel_booking so the room is returned to inventory.
    """
    if status == BookingStatus.CANCELLED:
        raise Conflict("Booking can't be cancelled", status_code=CANCEL_VIA_UPDATE_STATUS)
    if booking_id is None or status is None:
        raise NotFound("Booking not found")
    booking = db.get(Booking, booking_id)
    if booking is None:
        raise NotFound("Booking not found")
    booking.status = status
    db.commit()
    db.refresh(booking)
    return booking


def cancel_booking(db: Session, booking_id: int) -> Booking:
    """
    Cancel a booking and return its room to the hotel.

    Cancelling an already cancelled booking changes nothing. If the hotel no
    longer exists only the booking status is updated.
    """
    booking = db.get(Booking, booking_id)
    if booking is None:
        raise NotFound("Booking not found")
    if booking.status == BookingStatus.CANCELLED:
        return booking

    booking.status = BookingStatus.CANCELLED
    result = db.execute(
        update(Hotel)
        .where(Hotel.id == booking.hotel_id)
        .values(no_of_rooms=Hotel.no_of_rooms + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        logger.warning(
            "Hotel missing on cancellation; room count not restored",
            extra={"booking_id": booking.id, "hotel_id": booking.hotel_id},
        )
    db.commit()
    db.refresh(booking)
    logger.info("Booking cancelled", extra={"booking_id": booking.id, "hotel_id": booking.hotel_id})
    return booking


def list_bookings(db: Session) -> list[Booking]:
    return db.query(Booking).order_by(Booking.id).all()


def get_booking(db: Session, booking_id: int) -> Booking | None:
    return db.get(Booking, booking_id)


def list_bookings_by_status(db: Session, status: BookingStatus) -> list[Booking]:
    return db.query(Booking).filter(Booking.status == status).order_by(Booking.id).all()


def delete_booking(db: Session, booking_id: int) -> bool:
    booking = db.get(Booking, booking_id)
    if booking is None:
        raise NotFound("Booking not found")
    db.delete(booking)
    db.commit()
    return True
