"""
Session helpers shared by the services.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from models import db

logger = logging.getLogger(__name__)


def commit_or_rollback():
    """Commit the session; on a database error roll back and re-raise."""
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Commit failed, session rolled back")
        raise
