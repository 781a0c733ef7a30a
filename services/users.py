"""
User Service

Resolves the user a request acts for. Every grocery operation takes the
user id explicitly; this module only makes sure the row exists.
"""

import logging

from sqlalchemy.exc import IntegrityError

from constants import MAX_LENGTHS
from models import db, User
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_user_id(user_id):
    """Return the cleaned user id or raise ValidationError."""
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError('User id required')
    user_id = user_id.strip()
    if len(user_id) > MAX_LENGTHS['user_id']:
        raise ValidationError('User id too long')
    return user_id


def ensure_user(user_id, name=None, email=None):
    """Return the User for user_id, creating it on first use."""
    user_id = validate_user_id(user_id)
    user = db.session.get(User, user_id)
    if user is not None:
        return user

    try:
        with db.session.begin_nested():
            user = User(id=user_id, name=name or '', email=email)
            db.session.add(user)
    except IntegrityError:
        # Created by a concurrent request between the lookup and the insert
        user = db.session.get(User, user_id)
        if user is None:
            raise
    else:
        logger.info("Created user %s", user_id)
    return user
