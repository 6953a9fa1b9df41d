"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthenticationRequest,
    AuthenticationResponse,
    ChangePasswordRequest,
    Principal,
    RegisterRequest,
    UserResponse,
)
from app.schemas.booking import BookingRequest, BookingResponse
from app.schemas.health import HealthResponse
from app.schemas.hotel import (
    HotelRequest,
    HotelResponse,
    HotelUpdateRequest,
    LocationResponse,
)

__all__ = [
    "AuthenticationRequest",
    "AuthenticationResponse",
    "BookingRequest",
    "BookingResponse",
    "ChangePasswordRequest",
    "HealthResponse",
    "HotelRequest",
    "HotelResponse",
    "HotelUpdateRequest",
    "LocationResponse",
    "Principal",
    "RegisterRequest",
    "UserResponse",
]
