"""Pydantic schemas for booking requests and responses."""

from pydantic import AliasChoices, BaseModel, Field

from app.models.booking import BookingStatus


class BookingRequest(BaseModel):
    """
    Body for POST /bookings (hotel_id) and PUT /bookings/{id} (status).

    Accepts the legacy `hotelID`/`hotelId` and `bookingID`/`bookingId` names.
    """

    hotel_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("hotel_id", "hotelID", "hotelId"),
    )
    booking_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("booking_id", "bookingID", "bookingId"),
    )
    status: BookingStatus | None = None


class BookingResponse(BaseModel):
    id: int
    user_id: int
    hotel_id: int
    status: BookingStatus

    class Config:
        from_attributes = True
