"""Domain entity linking a company to a commercial condition."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class ConditionAssignment:
    """Association granting a company access to a condition's rules."""

    company_id: UUID
    condition_id: UUID
    is_active: bool
    assigned_at: datetime | None = None


__all__ = ["ConditionAssignment"]
