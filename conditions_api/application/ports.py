"""Read-side contract the resolution use cases expect from persistence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from conditions_api.domain.entities import (
    CommercialCondition,
    Company,
    CompanyMembership,
    ConditionAssignment,
    User,
)


class EntityStore(Protocol):
    """Lookups over users, companies, their links and conditions.

    Missing records are reported as ``None``. Implementations raise
    ``StoreUnavailableError`` when the backing store cannot be reached.
    """

    async def get_user(self, user_id: UUID) -> User | None: ...

    async def get_company(self, company_id: UUID) -> Company | None: ...

    async def get_active_memberships_for_user(
        self, user_id: UUID
    ) -> Sequence[CompanyMembership]: ...

    async def get_active_assignments_for_company(
        self, company_id: UUID
    ) -> Sequence[ConditionAssignment]: ...

    async def get_condition_with_rules(
        self, condition_id: UUID
    ) -> CommercialCondition | None: ...


__all__ = ["EntityStore"]
