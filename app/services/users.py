"""Read-only user directory."""

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models import User
from app.schemas.auth import Principal


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def about_me(db: Session, principal: Principal) -> User:
    """Resolve the caller's own account from the authenticated principal."""
    user = db.query(User).filter(User.email == principal.email).first()
    if user is None:
        raise NotFound("User not found")
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()
