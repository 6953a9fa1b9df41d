"""Hotel inventory endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import enforce_access_policy
from app.core.database import get_db
from app.schemas.hotel import HotelRequest, HotelResponse, HotelUpdateRequest
from app.services import hotels as hotel_service

router = APIRouter(dependencies=[Depends(enforce_access_policy)])


@router.get("", response_model=list[HotelResponse])
def get_all_hotels(db: Annotated[Session, Depends(get_db)]) -> list[HotelResponse]:
    return hotel_service.list_hotels(db)


@router.get("/{hotel_id}", response_model=HotelResponse)
def get_hotel_by_id(
    hotel_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> HotelResponse:
    return hotel_service.get_hotel(db, hotel_id)


@router.post("", response_model=HotelResponse)
def save_hotel(
    body: HotelRequest,
    db: Annotated[Session, Depends(get_db)],
) -> HotelResponse:
    """Create a hotel with its location. `no_of_rooms` defaults to 0."""
    return hotel_service.create_hotel(db, body)


@router.put("/{hotel_id}", response_model=HotelResponse)
def update_hotel(
    hotel_id: int,
    body: HotelUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> HotelResponse:
    """Partially update a hotel; only fields present in the body are changed."""
    return hotel_service.update_hotel(db, hotel_id, body.model_dump(exclude_none=True))


@router.delete("/{hotel_id}", response_model=bool)
def delete_hotel_by_id(
    hotel_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> bool:
    return hotel_service.delete_hotel(db, hotel_id)
