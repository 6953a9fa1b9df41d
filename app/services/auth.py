"""Credential and token issuer: register, login, refresh, logout, change password."""

import logging

import jwt
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthFailure, Conflict, NotFound, ValidationFailure
from app.core.security import (
    REFRESH_TOKEN_USE,
    create_access_token,
    create_refresh_token,
    decode_token,
    extract_bearer_token,
    hash_password,
    is_token_valid,
    verify_password,
)
from app.models import Role, Token, TokenType, User
from app.schemas.auth import AuthenticationResponse, Principal

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def _save_user_token(db: Session, user: User, access_token: str) -> Token:
    token = Token(
        user_id=user.id,
        token=access_token,
        token_type=TokenType.BEARER,
        expired=False,
        revoked=False,
    )
    db.add(token)
    return token


def revoke_all_user_tokens(db: Session, user: User) -> int:
    """Flag every not-fully-invalidated token of the user as expired and revoked. Returns the count."""
    valid_tokens = (
        db.query(Token)
        .filter(
            Token.user_id == user.id,
            or_(Token.expired.is_(False), Token.revoked.is_(False)),
        )
        .all()
    )
    for token in valid_tokens:
        token.expired = True
        token.revoked = True
    return len(valid_tokens)


def _issue_pair(user: User) -> tuple[str, str]:
    return (
        create_access_token(sub=user.email, role=user.role.value),
        create_refresh_token(sub=user.email, role=user.role.value),
    )


def register(
    db: Session,
    *,
    email: str,
    password: str,
    role: Role = Role.CUSTOMER,
    firstname: str | None = None,
    lastname: str | None = None,
) -> AuthenticationResponse:
    """Create an account and issue a token pair; the access token is persisted."""
    email = email.strip()
    if get_user_by_email(db, email) is not None:
        raise Conflict("Email already registered")
    user = User(
        firstname=firstname,
        lastname=lastname,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        raise Conflict("Email already registered") from e
    access_token, refresh_token = _issue_pair(user)
    _save_user_token(db, user, access_token)
    db.commit()
    logger.info("User registered", extra={"user_id": user.id, "role": user.role.value})
    return AuthenticationResponse(access_token=access_token, refresh_token=refresh_token)


def authenticate(db: Session, *, email: str, password: str) -> AuthenticationResponse:
    """
    Verify credentials and issue a new token pair.

    All previously valid tokens of the user are revoked first, so only one
    session per user stays active.
    """
    user = get_user_by_email(db, email.strip())
    if user is None or not verify_password(password, user.password_hash):
        raise AuthFailure("Invalid email or password.")
    access_token, refresh_token = _issue_pair(user)
    revoked = revoke_all_user_tokens(db, user)
    _save_user_token(db, user, access_token)
    db.commit()
    logger.info("User logged in", extra={"user_id": user.id, "tokens_revoked": revoked})
    return AuthenticationResponse(access_token=access_token, refresh_token=refresh_token)


def refresh(db: Session, authorization: str | None) -> AuthenticationResponse | None:
    """
    Issue a new access token from a refresh token in the Authorization header.

    Returns None without touching state when the header is absent or not a
    Bearer header. The refresh token itself is echoed back unchanged.
    """
    refresh_token = extract_bearer_token(authorization)
    if refresh_token is None:
        return None
    try:
        email = decode_token(refresh_token).get("sub")
    except jwt.PyJWTError as e:
        raise AuthFailure("Invalid or expired refresh token") from e
    user = get_user_by_email(db, email) if email else None
    if user is None or not is_token_valid(refresh_token, user.email, REFRESH_TOKEN_USE):
        raise AuthFailure("Invalid or expired refresh token")
    access_token = create_access_token(sub=user.email, role=user.role.value)
    revoked = revoke_all_user_tokens(db, user)
    _save_user_token(db, user, access_token)
    db.commit()
    logger.info("Access token refreshed", extra={"user_id": user.id, "tokens_revoked": revoked})
    return AuthenticationResponse(access_token=access_token, refresh_token=refresh_token)


def logout(db: Session, authorization: str | None) -> None:
    """Flag the presented token as expired and revoked. No-op for a missing header or unknown token."""
    jwt_token = extract_bearer_token(authorization)
    if jwt_token is None:
        return
    stored = db.query(Token).filter(Token.token == jwt_token).first()
    if stored is None:
        return
    stored.expired = True
    stored.revoked = True
    db.commit()
    logger.info("User logged out", extra={"user_id": stored.user_id})


def change_password(
    db: Session,
    principal: Principal,
    *,
    current_password: str,
    new_password: str,
    confirmation_password: str,
) -> None:
    """Replace the caller's password after checking the current one and the confirmation."""
    user = db.get(User, principal.id)
    if user is None:
        raise NotFound("User not found")
    if not verify_password(current_password, user.password_hash):
        raise AuthFailure("Wrong password")
    if new_password != confirmation_password:
        raise ValidationFailure("Passwords are not the same")
    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info("Password changed", extra={"user_id": user.id})
