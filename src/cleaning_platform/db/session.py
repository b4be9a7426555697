"""Database session configuration."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from cleaning_platform.core.errors import StoreError
from cleaning_platform.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


def utcnow() -> datetime:
    """Timezone-aware default for ``created_at`` columns."""
    return datetime.now(UTC)


# Ensure model modules are imported so that metadata is populated when create_all runs.
import cleaning_platform.models  # noqa: E402,F401

_connect_args = (
    {"check_same_thread": False}
    if settings.database_url.startswith("sqlite")
    else {}
)

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    echo=settings.sql_debug,
    connect_args=_connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_raise(session: Session) -> None:
    """Commit ``session``; on failure roll back and raise ``StoreError``."""
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StoreError(detail=str(exc)) from exc


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)
