"""User directory endpoints and self-service password change."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import enforce_access_policy, require_principal
from app.core.database import get_db
from app.schemas.auth import ChangePasswordRequest, Principal, UserResponse
from app.services import auth as auth_service
from app.services import users as user_service

router = APIRouter(dependencies=[Depends(enforce_access_policy)])


@router.get("", response_model=list[UserResponse])
def get_all_users(db: Annotated[Session, Depends(get_db)]) -> list[UserResponse]:
    """List all users (admin only)."""
    return user_service.list_users(db)


@router.get("/me", response_model=UserResponse)
def about_me(
    db: Annotated[Session, Depends(get_db)],
    principal: Annotated[Principal, Depends(require_principal)],
) -> UserResponse:
    return user_service.about_me(db, principal)


@router.patch("/me/password")
def change_password(
    body: ChangePasswordRequest,
    db: Annotated[Session, Depends(get_db)],
    principal: Annotated[Principal, Depends(require_principal)],
) -> Response:
    auth_service.change_password(
        db,
        principal,
        current_password=body.current_password,
        new_password=body.new_password,
        confirmation_password=body.confirmation_password,
    )
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    return user_service.get_user(db, user_id)
