"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.booking import Booking, BookingStatus
from app.models.hotel import Hotel, Location
from app.models.token import Token, TokenType
from app.models.user import Permission, Role, User

__all__ = [
    "Base",
    "Booking",
    "BookingStatus",
    "Hotel",
    "Location",
    "Permission",
    "Role",
    "Token",
    "TokenType",
    "User",
]
