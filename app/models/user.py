"""ORM model for application users (accounts, auth and RBAC)."""

import enum

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class Permission(str, enum.Enum):
    """Fine-grained authority strings granted by roles."""

    ADMIN_READ = "admin:read"
    ADMIN_WRITE = "admin:write"
    MANAGER_READ = "management:read"
    MANAGER_WRITE = "management:write"
    CUSTOMER_READ = "customer:read"
    CUSTOMER_WRITE = "customer:write"


class Role(str, enum.Enum):
    """Account role; exactly one per user."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    CUSTOMER = "CUSTOMER"

    @property
    def permissions(self) -> frozenset[Permission]:
        return ROLE_PERMISSIONS[self]

    @property
    def authorities(self) -> list[str]:
        """Permission strings plus the role name itself."""
        return sorted(p.value for p in self.permissions) + [self.value]


ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset({Permission.ADMIN_READ, Permission.ADMIN_WRITE}),
    Role.MANAGER: frozenset({Permission.MANAGER_READ, Permission.MANAGER_WRITE}),
    Role.CUSTOMER: frozenset({Permission.CUSTOMER_READ}),
}


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    email is the login identity and the JWT subject.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    firstname = Column(String(255), nullable=True)
    lastname = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(Role, name="user_role"), nullable=False, default=Role.CUSTOMER)

    tokens = relationship("Token", back_populates="user", lazy="select")
    bookings = relationship("Booking", back_populates="user", lazy="select")
