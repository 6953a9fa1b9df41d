"""Password hashing and JWT creation/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any, Literal

import bcrypt
import jwt

from app.core.config import settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for email and password validation.
EMAIL_MIN_LEN = 3
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

ACCESS_TOKEN_USE = "access"
REFRESH_TOKEN_USE = "refresh"

BEARER_PREFIX = "Bearer "

TokenUse = Literal["access", "refresh"]


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _create_token(sub: str, role: str, token_use: TokenUse, expire_minutes: int) -> str:
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": sub,
        "role": role,
        "token_use": token_use,
        # Unique per token so two tokens issued in the same second never collide.
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def create_access_token(sub: str, role: str) -> str:
    """Create a short-lived access JWT whose subject is the account email."""
    return _create_token(sub, role, ACCESS_TOKEN_USE, settings.JWT_EXPIRE_MINUTES)


def create_refresh_token(sub: str, role: str) -> str:
    """Create a long-lived refresh JWT whose subject is the account email."""
    return _create_token(sub, role, REFRESH_TOKEN_USE, settings.JWT_REFRESH_EXPIRE_MINUTES)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, token_use, jti, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def is_token_valid(token: str, email: str, token_use: TokenUse) -> bool:
    """True if the token verifies, has not expired, names `email` and is of the given use."""
    try:
        payload = decode_token(token)
    except jwt.PyJWTError:
        return False
    return payload.get("sub") == email and payload.get("token_use") == token_use


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an `Authorization: Bearer <token>` header, or None if absent/malformed."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None
