# File: users_api/services/user_store.py

"""
Storage adapter for the users table.

``UserStore`` is the single point of access to the store. It owns the engine,
opens a short-lived session per call, and turns every driver failure into a
``StorageError`` carrying the driver's own message. Each operation is one
statement committed on its own.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from users_api.core.errors import StorageError
from users_api.db.init_db import init_db
from users_api.db.session import create_session_factory
from users_api.models.user import User

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    # SQLAlchemy wraps DBAPI errors; the original carries the plain message
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


class UserStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = create_session_factory(engine)

    def open(self) -> None:
        """
        Connect to the store and make sure the users table exists.

        Failing to connect is fatal and raises ``StorageError``. Failing to
        create the table is only logged.
        """
        try:
            with self.engine.connect():
                pass
        except SQLAlchemyError as exc:
            message = _driver_message(exc)
            logger.critical("Error opening database %s: %s", self.engine.url, message)
            raise StorageError(message) from exc

        logger.info("Connected to the database at %s", self.engine.url)
        init_db(self.engine)

    def close(self) -> None:
        self.engine.dispose()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db: Session = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as exc:
            db.rollback()
            raise StorageError(_driver_message(exc)) from exc
        finally:
            db.close()

    def insert(self, name: Optional[str], email: Optional[str], address: Optional[str]) -> int:
        """Append one row and return the id the store assigned to it."""
        with self._session() as db:
            user = User(name=name, email=email, address=address)
            db.add(user)
            db.flush()
            new_id = user.id
            db.commit()
            return new_id

    def select_all(self) -> List[User]:
        with self._session() as db:
            return list(db.scalars(select(User).order_by(User.id)))

    def select_by_id(self, user_id: int) -> Optional[User]:
        with self._session() as db:
            return db.get(User, user_id)

    def update_by_id(
        self,
        user_id: int,
        name: Optional[str],
        email: Optional[str],
        address: Optional[str],
    ) -> int:
        """Overwrite all mutable fields; returns the number of rows changed."""
        with self._session() as db:
            result = db.execute(
                update(User)
                .where(User.id == user_id)
                .values(name=name, email=email, address=address)
                .execution_options(synchronize_session=False)
            )
            db.commit()
            return result.rowcount

    def delete_by_id(self, user_id: int) -> int:
        with self._session() as db:
            result = db.execute(
                delete(User)
                .where(User.id == user_id)
                .execution_options(synchronize_session=False)
            )
            db.commit()
            return result.rowcount
