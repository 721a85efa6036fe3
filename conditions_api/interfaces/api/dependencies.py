"""FastAPI dependency utilities."""

from conditions_api.application.ports import EntityStore
from conditions_api.config import get_settings
from conditions_api.infrastructure.database import SessionLocal
from conditions_api.infrastructure.entity_store import SqlAlchemyEntityStore


def get_entity_store() -> EntityStore:
    """Return the store the integration use cases read from."""

    return SqlAlchemyEntityStore(SessionLocal)


def get_resolution_timeout() -> float | None:
    """Return the deadline applied to each resolution request."""

    return get_settings().resolution_timeout_seconds
