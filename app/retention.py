"""
CLI entrypoint for the token retention job. Run from cron, e.g.:

  python -m app.retention

Or daily: 0 3 * * * cd /path/to/stayease && .venv/bin/python -m app.retention
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.retention import run_retention

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run retention: delete revoked+expired tokens older than TOKEN_RETENTION_HOURS."""
    settings = get_settings()
    db = SessionLocal()
    try:
        tokens_deleted = run_retention(db, settings)
        logger.info("Token retention completed: tokens_deleted=%s", tokens_deleted)
        return 0
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Token retention job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
