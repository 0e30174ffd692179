import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from ..utils import EnvironmentManager, EnvironmentVariables
from .constants import get_database_url

logger = logging.getLogger(__name__)

# Global variable to hold the singleton engine
_engine = None


def get_engine() -> Engine:
    """
    Creates and returns a singleton SQLAlchemy engine for the configured database.

    :return: SQLAlchemy Engine instance.
    :rtype: sqlalchemy.engine.Engine
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            get_database_url(),
            echo=EnvironmentManager.get_bool(EnvironmentVariables.DATABASE_ECHO),
        )
    return _engine


def set_engine(engine: Optional[Engine]) -> None:
    """
    Replace the singleton engine, e.g. with an in-memory SQLite engine.

    :param engine: Engine to use, or None to rebuild from the environment on next use.
    """
    global _engine
    _engine = engine


Base = declarative_base()  # Single instance of Base


def get_orm_base():
    return Base


def initialize_database() -> None:
    """
    Creates all tables defined in the ORM models.
    """
    engine = get_engine()
    try:
        logger.info("Initializing the database...")
        Base.metadata.create_all(engine)
        logger.info("Database initialized successfully.")
    except OperationalError:
        logger.exception("Failed to initialize the database")
        raise


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Yield a session that commits on success and rolls back on any error.

    Loaded objects stay usable after the session closes.
    """
    session = sessionmaker(bind=get_engine(), expire_on_commit=False)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def save_instance(instance: Any) -> None:
    """
    Save an instance of an ORM model to the database.

    :param instance: The ORM model instance to save.
    """
    with session_scope() as session:
        session.add(instance)
