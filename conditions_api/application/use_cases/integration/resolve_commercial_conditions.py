"""Use cases listing the effective conditions of a user or company with their rules."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from conditions_api.application.ports import EntityStore
from conditions_api.domain.entities import CommercialCondition
from conditions_api.domain.validity import is_effective
from conditions_api.utils import ensure_app_timezone, now_in_app_timezone

from .concurrency import deadline, new_limiter
from .project_rules import effective_rules, to_rule_view
from .resolve_conditions import resolve_company_conditions, resolve_user_reach
from .views import CommercialConditionsReport, ConditionWithRules


def _condition_sort_key(condition: CommercialCondition) -> tuple[int, str, UUID]:
    return (-condition.priority, condition.name, condition.id)


def build_condition_entries(
    conditions: Iterable[CommercialCondition], *, now: datetime
) -> list[ConditionWithRules]:
    """Keep effective conditions, highest priority first, each with its effective rules."""

    entries: list[ConditionWithRules] = []
    for condition in sorted(conditions, key=_condition_sort_key):
        if not is_effective(condition, now):
            continue
        views = [to_rule_view(condition, rule) for rule in effective_rules(condition)]
        views.sort(key=lambda view: (-view.priority, view.rule_id))
        entries.append(
            ConditionWithRules(
                condition_id=condition.id,
                name=condition.name,
                description=condition.description,
                priority=condition.priority,
                valid_from=condition.valid_from,
                valid_until=condition.valid_until,
                rules=views,
            )
        )
    return entries


async def resolve_user_commercial_conditions(
    store: EntityStore,
    user_id: UUID,
    *,
    now: datetime | None = None,
    timeout: float | None = None,
) -> CommercialConditionsReport:
    """Return the effective conditions of every company ``user_id`` belongs to.

    The report's ``company_id`` is the user's most recent active membership.
    """

    current = ensure_app_timezone(now) or now_in_app_timezone()
    async with deadline(timeout):
        memberships, conditions = await resolve_user_reach(
            store, user_id, limiter=new_limiter()
        )
    return CommercialConditionsReport(
        user_id=user_id,
        company_id=memberships[0].company_id if memberships else None,
        conditions=build_condition_entries(conditions, now=current),
    )


async def resolve_company_commercial_conditions(
    store: EntityStore,
    company_id: UUID,
    *,
    now: datetime | None = None,
    timeout: float | None = None,
) -> CommercialConditionsReport:
    """Return the effective conditions assigned to ``company_id``."""

    current = ensure_app_timezone(now) or now_in_app_timezone()
    async with deadline(timeout):
        conditions = await resolve_company_conditions(store, company_id)
    return CommercialConditionsReport(
        user_id=None,
        company_id=company_id,
        conditions=build_condition_entries(conditions, now=current),
    )


__all__ = [
    "build_condition_entries",
    "resolve_company_commercial_conditions",
    "resolve_user_commercial_conditions",
]
