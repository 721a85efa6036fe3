"""Use case reporting the state an external gateway needs to decide on access."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from conditions_api.application.ports import EntityStore
from conditions_api.domain.exceptions import NotFoundError
from conditions_api.domain.validity import is_effective
from conditions_api.utils import ensure_app_timezone, now_in_app_timezone

from .concurrency import deadline
from .resolve_conditions import list_active_memberships, resolve_company_conditions
from .views import AccessResult


async def check_access(
    store: EntityStore,
    user_id: UUID,
    *,
    now: datetime | None = None,
    timeout: float | None = None,
) -> AccessResult:
    """Aggregate the user, membership, company and condition state of ``user_id``."""

    current = ensure_app_timezone(now) or now_in_app_timezone()
    has_company = False
    company_is_active = False
    conditions = []

    async with deadline(timeout):
        user = await store.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        # Without memberships the user path reaches no conditions.
        memberships = await list_active_memberships(store, user_id)
        if memberships:
            has_company = True
            company = await store.get_company(memberships[0].company_id)
            company_is_active = company is not None and company.is_active
            if company_is_active:
                conditions = await resolve_company_conditions(store, company.id)

    return AccessResult(
        user_id=user.id,
        is_active=user.is_active,
        has_company=has_company,
        company_is_active=company_is_active,
        has_active_conditions=any(
            is_effective(condition, current) for condition in conditions
        ),
    )


__all__ = ["check_access"]
