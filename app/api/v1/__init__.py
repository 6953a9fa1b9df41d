"""API v1 routes.

`router` is mounted under API_V1_PREFIX (auth, health); `resource_router`
holds the hotel, booking and user resources at the application root.
"""

from fastapi import APIRouter

from app.api.v1 import auth, bookings, health, hotels, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])

resource_router = APIRouter()
resource_router.include_router(hotels.router, prefix="/hotels", tags=["hotels"])
resource_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
resource_router.include_router(users.router, prefix="/users", tags=["users"])
