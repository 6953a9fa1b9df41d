"""Shared test helpers: in-memory SQLite sessions and fixture builders."""

import bcrypt
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token
from app.models import Base, Hotel, Location, Role, Token, TokenType, User

# Low bcrypt cost keeps fixture creation fast; verify_password reads the cost from the hash.
FAST_ROUNDS = 4


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with all tables; one shared connection so every session sees it."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def fast_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=FAST_ROUNDS)).decode("utf-8")


def add_user(
    db: Session,
    email: str = "guest@example.com",
    password: str = "password123",
    role: Role = Role.CUSTOMER,
) -> User:
    user = User(email=email, password_hash=fast_hash(password), role=role, firstname="Test", lastname="User")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def add_hotel(db: Session, no_of_rooms: int = 1, name: str = "Grand Hotel") -> Hotel:
    hotel = Hotel(
        name=name,
        description="A hotel for tests",
        no_of_rooms=no_of_rooms,
        location=Location(address="1 Test Street", latitude=37.77, longitude=-122.42),
    )
    db.add(hotel)
    db.commit()
    db.refresh(hotel)
    return hotel


def issue_access_token(db: Session, user: User) -> str:
    """Create and persist a usable access token for `user`, as login would."""
    token = create_access_token(sub=user.email, role=user.role.value)
    db.add(Token(user_id=user.id, token=token, token_type=TokenType.BEARER, expired=False, revoked=False))
    db.commit()
    return token
