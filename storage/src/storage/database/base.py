"""Engine and session management for the SQL repositories."""

from contextlib import contextmanager
from typing import Iterator

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storage.entity.base import Base

_engine = None
_SessionLocal = None


def init_db(database_url: str) -> None:
    """Create the engine, the session factory and any missing tables."""
    global _engine, _SessionLocal
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty db
            kwargs["poolclass"] = StaticPool
    _engine = create_engine(database_url, **kwargs)
    _SessionLocal = sessionmaker(bind=_engine, expire_on_commit=False)

    # register entities on the metadata before create_all
    from storage.entity import user, todo, holiday  # noqa: F401
    Base.metadata.create_all(_engine)
    logger.info("Database initialized: {}", _engine.url.render_as_string(hide_password=True))


def dispose_db() -> None:
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


@contextmanager
def get_db() -> Iterator[Session]:
    if _SessionLocal is None:
        raise RuntimeError("Database is not initialized, call init_db() first")
    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
