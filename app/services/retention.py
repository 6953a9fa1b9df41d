"""Token retention: delete revoked and expired token rows older than TOKEN_RETENTION_HOURS."""

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.models import Token

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def run_retention(session: Session, settings: "Settings") -> int:
    """
    Delete tokens that are both expired and revoked and older than the cutoff.

    Still-usable tokens are never touched. Returns the number of rows deleted.
    Idempotent: safe to run repeatedly.
    """
    if not settings.TOKEN_RETENTION_ENABLED:
        logger.info("Token retention is disabled (TOKEN_RETENTION_ENABLED=false); skipping.")
        return 0

    cutoff = datetime.now(UTC) - timedelta(hours=settings.TOKEN_RETENTION_HOURS)
    deleted_count = (
        session.query(Token)
        .filter(
            Token.expired.is_(True),
            Token.revoked.is_(True),
            Token.created_at < cutoff,
        )
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Token retention run: cutoff=%s, tokens_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
