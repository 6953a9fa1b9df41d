"""
Access control: bearer-token principal resolution and the fixed route policy.

The policy is checked against the concrete request path (e.g. "/bookings/7/cancel");
{param} segments in a rule match any single path segment. A pattern ending in
"/**" matches the base path and everything below it.
Routes with no matching rule are admin-only.
"""

import logging
import re
from dataclasses import dataclass, field

import jwt
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import ACCESS_TOKEN_USE, decode_token, is_token_valid
from app.models import Role, Token, User
from app.schemas.auth import Principal

logger = logging.getLogger(__name__)

ANY_ROLE = (Role.CUSTOMER.value, Role.MANAGER.value, Role.ADMIN.value)
DEFAULT_AUTHORITIES = (Role.ADMIN.value,)

PUBLIC_PATH_PREFIXES = (
    f"{settings.API_V1_PREFIX}/auth",
    f"{settings.API_V1_PREFIX}/health",
    "/docs",
    "/redoc",
    "/openapi.json",
)

# Matched exactly; "/" as a prefix would make every path public.
PUBLIC_PATHS = ("/",)


def _compile(pattern: str) -> re.Pattern[str]:
    suffix = ""
    if pattern.endswith("/**"):
        pattern, suffix = pattern[:-3], "(/.*)?"
    parts = re.split(r"(\{[^/]+\})", pattern)
    body = "".join("[^/]+" if p.startswith("{") else re.escape(p) for p in parts)
    return re.compile(f"^{body}{suffix}$")


@dataclass(frozen=True)
class AccessRule:
    """`pattern` may contain {param} segments and a trailing /**."""

    method: str
    pattern: str
    authorities: tuple[str, ...]
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", _compile(self.pattern))

    def matches(self, method: str, path: str) -> bool:
        return method.upper() == self.method and self.regex.match(path) is not None


ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule("GET", "/hotels/**", ANY_ROLE),
    # Customers (only) may create hotels; kept as the product policy.
    AccessRule("POST", "/hotels", (Role.CUSTOMER.value,)),
    AccessRule("PUT", "/bookings/{booking_id}/cancel", (Role.MANAGER.value, Role.ADMIN.value)),
    AccessRule("GET", "/users/me", ANY_ROLE),
    AccessRule("PATCH", "/users/me/password", ANY_ROLE),
)


def policy_path(path: str, root_path: str = "") -> str:
    """The concrete request path with any mount prefix (ASGI root_path) removed."""
    if root_path and path.startswith(root_path):
        path = path[len(root_path):]
    return path or "/"


def is_public(path: str) -> bool:
    if path in PUBLIC_PATHS:
        return True
    return any(path == p or path.startswith(p + "/") for p in PUBLIC_PATH_PREFIXES)


def required_authorities(method: str, path: str) -> tuple[str, ...] | None:
    """Authorities of which the caller needs at least one, or None for public paths."""
    if is_public(path):
        return None
    for rule in ACCESS_RULES:
        if rule.matches(method, path):
            return rule.authorities
    return DEFAULT_AUTHORITIES


def is_authorized(method: str, path: str, principal: Principal | None) -> bool:
    required = required_authorities(method, path)
    if required is None:
        return True
    if principal is None:
        return False
    return principal.has_any_authority(*required)


def principal_for(user: User) -> Principal:
    return Principal(
        id=user.id,
        email=user.email,
        role=user.role,
        authorities=user.role.authorities,
    )


def resolve_principal(db: Session, token: str) -> Principal | None:
    """
    Return the principal for a bearer access token, or None if it is not usable.

    Usable means: signature and expiry verify, the subject is a live account,
    and the persisted token record exists and is neither expired nor revoked.
    """
    try:
        email = decode_token(token).get("sub")
    except jwt.PyJWTError as e:
        logger.warning("Rejected bearer token: %s", type(e).__name__)
        return None
    user = db.query(User).filter(User.email == email).first() if email else None
    if user is None:
        logger.warning("Rejected bearer token: unknown subject")
        return None
    stored = db.query(Token).filter(Token.token == token).first()
    stored_ok = stored is not None and stored.is_usable
    if not (is_token_valid(token, user.email, ACCESS_TOKEN_USE) and stored_ok):
        logger.warning("Token validation failed", extra={"user_id": user.id})
        return None
    return principal_for(user)
