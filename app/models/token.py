"""ORM model for issued bearer tokens (soft revocation via flags)."""

import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class TokenType(str, enum.Enum):
    BEARER = "BEARER"


class Token(Base):
    """
    Persisted access token. Rows are flagged expired/revoked on logout,
    login and refresh; they are only removed by the retention job.
    """

    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(1024), nullable=False, unique=True, index=True)
    token_type = Column(Enum(TokenType, name="token_type"), nullable=False, default=TokenType.BEARER)
    revoked = Column(Boolean, nullable=False, default=False)
    expired = Column(Boolean, nullable=False, default=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    user = relationship("User", back_populates="tokens")

    @property
    def is_usable(self) -> bool:
        return not self.expired and not self.revoked
