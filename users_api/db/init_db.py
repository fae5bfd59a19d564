"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before ``create_all`` runs.
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from users_api.models.base import Base
from users_api.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> bool:
    """
    Create the users table if it does not exist yet.

    A failure is logged and reported through the return value; the process
    keeps running since the store itself was opened successfully.
    """
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        logger.error("Table creation error: %s", exc)
        return False
    logger.info("Table created or existed")
    return True
