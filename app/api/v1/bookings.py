"""Booking endpoints: availability, book, update, cancel, lookups, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import enforce_access_policy, require_principal
from app.core.database import get_db
from app.core.errors import NotFound
from app.models import BookingStatus
from app.schemas.auth import Principal
from app.schemas.booking import BookingRequest, BookingResponse
from app.schemas.hotel import HotelResponse
from app.services import bookings as booking_service

router = APIRouter(dependencies=[Depends(enforce_access_policy)])


@router.get("/available-rooms", response_model=list[HotelResponse])
def get_hotels_having_required_rooms(
    db: Annotated[Session, Depends(get_db)],
    room: Annotated[int | None, Query(ge=0, description="Minimum rooms left; defaults to 1")] = None,
) -> list[HotelResponse]:
    """Hotels with at least `room` rooms left. Pass room=0 to list every hotel."""
    return booking_service.available_rooms(db, room)


@router.get("/status", response_model=list[BookingResponse])
def get_bookings_by_status(
    status_: Annotated[BookingStatus, Query(alias="status")],
    db: Annotated[Session, Depends(get_db)],
) -> list[BookingResponse]:
    return booking_service.list_bookings_by_status(db, status_)


@router.post("", response_model=BookingResponse)
def book_hotel(
    body: BookingRequest,
    db: Annotated[Session, Depends(get_db)],
    principal: Annotated[Principal, Depends(require_principal)],
) -> BookingResponse:
    """Book one room at `hotel_id` for the caller."""
    return booking_service.book(db, body.hotel_id, principal)


@router.put("/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: int,
    body: BookingRequest,
    db: Annotated[Session, Depends(get_db)],
) -> BookingResponse:
    """Change a booking's status. Use PUT /bookings/{id}/cancel to cancel."""
    return booking_service.update_booking(db, booking_id, body.status)


@router.put("/{booking_id}/cancel", response_model=BookingResponse)
def cancel_booking(
    booking_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> BookingResponse:
    return booking_service.cancel_booking(db, booking_id)


@router.get("", response_model=list[BookingResponse])
def get_all_bookings(db: Annotated[Session, Depends(get_db)]) -> list[BookingResponse]:
    return booking_service.list_bookings(db)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking_by_id(
    booking_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> BookingResponse:
    booking = booking_service.get_booking(db, booking_id)
    if booking is None:
        raise NotFound("Booking not found")
    return booking


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(
    booking_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    booking_service.delete_booking(db, booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
