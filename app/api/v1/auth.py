"""Auth endpoints (register, login, refresh, logout) and access-control dependencies."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.access import is_authorized, policy_path, resolve_principal
from app.core.database import get_db
from app.core.errors import AccessDenied
from app.schemas.auth import (
    AuthenticationRequest,
    AuthenticationResponse,
    Principal,
    RegisterRequest,
)
from app.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/register", response_model=AuthenticationResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthenticationResponse:
    """Create an account and return an access/refresh token pair."""
    return auth_service.register(
        db,
        email=body.email,
        password=body.password,
        role=body.role,
        firstname=body.firstname,
        lastname=body.lastname,
    )


@router.post("/login", response_model=AuthenticationResponse)
def login(
    body: AuthenticationRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthenticationResponse:
    """
    Authenticate with email and password; returns a new token pair and revokes older tokens.
    Include the access token in the Authorization header as: Bearer <access_token>
    """
    return auth_service.authenticate(db, email=body.email, password=body.password)


@router.post("/refresh-token", response_model=AuthenticationResponse | None)
def refresh_token(
    db: Annotated[Session, Depends(get_db)],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticationResponse | Response:
    """
    Send the refresh token as `Authorization: Bearer <refresh_token>` to get a new access token.
    Without a Bearer header the response is an empty 200.
    """
    result = auth_service.refresh(db, authorization)
    if result is None:
        return Response(status_code=status.HTTP_200_OK)
    return result


@router.post("/logout")
def logout(
    db: Annotated[Session, Depends(get_db)],
    authorization: Annotated[str | None, Header()] = None,
) -> Response:
    """Revoke the presented access token."""
    auth_service.logout(db, authorization)
    return Response(status_code=status.HTTP_200_OK)


def get_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> Principal | None:
    """Dependency: resolve the bearer token to a principal, or None for anonymous callers."""
    if credentials is None:
        return None
    principal = resolve_principal(db, credentials.credentials)
    request.state.principal = principal
    return principal


def enforce_access_policy(
    request: Request,
    principal: Annotated[Principal | None, Depends(get_principal)],
) -> None:
    """Router dependency: apply the route policy. Raises AccessDenied (403) when not allowed."""
    path = policy_path(request.url.path, request.scope.get("root_path", ""))
    if not is_authorized(request.method, path, principal):
        raise AccessDenied()


def require_principal(
    principal: Annotated[Principal | None, Depends(get_principal)],
) -> Principal:
    """Dependency: the authenticated principal. Raises AccessDenied (403) for anonymous callers."""
    if principal is None:
        raise AccessDenied()
    return principal
