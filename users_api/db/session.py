# File: users_api/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def create_db_engine(database_url: str) -> Engine:
    """
    Build the process-wide engine.

    Request handlers run on a thread pool, so SQLite connections must be
    usable from threads other than the one that opened them.
    """
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False} if "sqlite" in database_url else {},
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
