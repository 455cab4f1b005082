import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from diary_backend.core.errors import InternalError

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory databases only live as long as their connection
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ----------------------------------------------------
# Store failure boundary
# ----------------------------------------------------
@contextmanager
def store_operation(db: Session, action: str) -> Iterator[None]:
    """
    Wrap a unit of store work.

    Any SQLAlchemy failure rolls the session back, is logged with its
    traceback and surfaces as ``InternalError``.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("[STORE] Failed while %s", action)
        raise InternalError("Server error") from exc
