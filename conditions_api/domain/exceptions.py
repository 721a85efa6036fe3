"""Errors raised while resolving commercial conditions."""

from __future__ import annotations

from typing import Any


class CommercialConditionsError(RuntimeError):
    """Base class for errors raised by the resolution core."""


class NotFoundError(CommercialConditionsError, LookupError):
    """Raised when a requested user or company does not exist."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id '{entity_id}' not found")


class DataIntegrityError(CommercialConditionsError, ValueError):
    """Raised for a stored rule that violates discount invariants."""

    def __init__(self, rule_id: Any, reason: str) -> None:
        self.rule_id = rule_id
        self.reason = reason
        super().__init__(f"Rule '{rule_id}' is malformed: {reason}")


class StoreUnavailableError(CommercialConditionsError):
    """Raised when the entity store cannot be reached."""


class ResolutionTimeoutError(StoreUnavailableError, TimeoutError):
    """Raised when a resolution request exceeds its deadline."""


__all__ = [
    "CommercialConditionsError",
    "DataIntegrityError",
    "NotFoundError",
    "ResolutionTimeoutError",
    "StoreUnavailableError",
]
