"""Request/response schemas for auth endpoints and the authenticated principal."""

from pydantic import BaseModel, Field

from app.core.security import (
    EMAIL_MAX_LEN,
    EMAIL_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from app.models.user import Role


class RegisterRequest(BaseModel):
    """New account details."""

    firstname: str | None = Field(default=None, max_length=255)
    lastname: str | None = Field(default=None, max_length=255)
    email: str = Field(..., min_length=EMAIL_MIN_LEN, max_length=EMAIL_MAX_LEN, description="Login email")
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password")
    role: Role = Field(default=Role.CUSTOMER, description="Account role")


class AuthenticationRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN, description="Login email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class AuthenticationResponse(BaseModel):
    """Access and refresh JWTs returned after register, login or refresh."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)
    new_password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    confirmation_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class Principal(BaseModel):
    """Authenticated caller (id, email, role, authorities), resolved once per request."""

    id: int
    email: str
    role: Role
    authorities: list[str]

    def has_any_authority(self, *authorities: str) -> bool:
        return any(a in self.authorities for a in authorities)


class UserResponse(BaseModel):
    """User entry (no password hash)."""

    id: int
    firstname: str | None = None
    lastname: str | None = None
    email: str
    role: Role

    class Config:
        from_attributes = True
