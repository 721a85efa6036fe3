"""Database configuration and session management."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, create_engine
from sqlalchemy.engine import Dialect, Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.types import TypeDecorator

from conditions_api.config import Settings, get_settings
from conditions_api.utils import ensure_app_naive_datetime, ensure_app_timezone


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


class AppDateTime(TypeDecorator):
    """Timestamp stored as a naive wall-clock value of the application timezone.

    Aware values are converted to the application timezone before they are
    written, since backends such as SQLite keep the digits and drop the
    offset. Values read back are aware again.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        return ensure_app_naive_datetime(value)

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        return ensure_app_timezone(value)


logger = logging.getLogger(__name__)


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Return ``create_engine`` keyword arguments suited to the configured backend."""

    options: dict[str, Any] = {"pool_pre_ping": True}
    if settings.database_url.startswith("sqlite"):
        # Lookups run in worker threads; each one opens its own session.
        options["connect_args"] = {"check_same_thread": False}
    return options


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for ``settings.database_url``."""

    logger.debug("Creating database engine for %s", settings.database_url.split("://", 1)[0])
    return create_engine(settings.database_url, **_engine_options(settings))


settings = get_settings()
engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from conditions_api.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


__all__ = [
    "AppDateTime",
    "Base",
    "SessionLocal",
    "build_engine",
    "engine",
    "initialize_database",
]
