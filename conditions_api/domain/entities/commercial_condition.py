"""Domain entity representing a commercial condition."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from .condition_rule import ConditionRule


@dataclass
class CommercialCondition:
    """A named, prioritized and time-bounded bundle of rules."""

    id: UUID
    name: str
    priority: int
    is_active: bool
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    description: str | None = None
    rules: list[ConditionRule] = field(default_factory=list)


__all__ = ["CommercialCondition"]
