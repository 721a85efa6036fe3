"""Traverse memberships and assignments to find the reachable conditions.

The user path is ``user -> active membership -> company -> active assignment
-> condition``; the company path starts at the company. Each link predicate
is applied separately so every activation flag can be reasoned about on its
own. Validity windows are not checked here; see ``is_effective``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from uuid import UUID

import anyio

from conditions_api.application.ports import EntityStore
from conditions_api.domain.entities import (
    CommercialCondition,
    CompanyMembership,
    ConditionAssignment,
)
from conditions_api.domain.exceptions import NotFoundError
from conditions_api.utils import ensure_app_timezone

from .concurrency import gather_bounded, new_limiter

logger = logging.getLogger(__name__)


def is_membership_active(membership: CompanyMembership) -> bool:
    return membership.is_active


def is_assignment_active(assignment: ConditionAssignment) -> bool:
    return assignment.is_active


async def list_active_memberships(
    store: EntityStore, user_id: UUID
) -> list[CompanyMembership]:
    """Return the user's active memberships, most recently associated first."""

    memberships = await store.get_active_memberships_for_user(user_id)
    active = [membership for membership in memberships if is_membership_active(membership)]
    active.sort(
        key=lambda membership: ensure_app_timezone(membership.associated_at),
        reverse=True,
    )
    return active


async def resolve_company_conditions(
    store: EntityStore,
    company_id: UUID,
    *,
    limiter: anyio.CapacityLimiter | None = None,
) -> list[CommercialCondition]:
    """Return the conditions reachable through the company's active assignments."""

    company = await store.get_company(company_id)
    if company is None:
        raise NotFoundError("Company", company_id)
    return await _conditions_for_companies(
        store, [company_id], limiter=limiter or new_limiter()
    )


async def resolve_user_conditions(
    store: EntityStore,
    user_id: UUID,
    *,
    limiter: anyio.CapacityLimiter | None = None,
) -> list[CommercialCondition]:
    """Return the union of conditions of every company the user actively belongs to.

    A user without active memberships has no conditions.
    """

    _, conditions = await resolve_user_reach(store, user_id, limiter=limiter)
    return conditions


async def resolve_user_reach(
    store: EntityStore,
    user_id: UUID,
    *,
    limiter: anyio.CapacityLimiter | None = None,
) -> tuple[list[CompanyMembership], list[CommercialCondition]]:
    """Return the user's active memberships and the conditions they reach.

    Memberships are ordered most recent first, as ``list_active_memberships``
    returns them, so callers can pick the primary company without another
    lookup.
    """

    user = await store.get_user(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    memberships = await list_active_memberships(store, user_id)
    if not memberships:
        logger.debug("User %s has no active company memberships", user_id)
        return memberships, []
    conditions = await _conditions_for_companies(
        store,
        [membership.company_id for membership in memberships],
        limiter=limiter or new_limiter(),
    )
    return memberships, conditions


async def _conditions_for_companies(
    store: EntityStore,
    company_ids: Iterable[UUID],
    *,
    limiter: anyio.CapacityLimiter,
) -> list[CommercialCondition]:
    unique_company_ids = list(dict.fromkeys(company_ids))
    if not unique_company_ids:
        return []

    assignments_by_company: Sequence[Sequence[ConditionAssignment]] = await gather_bounded(
        store.get_active_assignments_for_company, unique_company_ids, limiter=limiter
    )
    condition_ids = list(
        dict.fromkeys(
            assignment.condition_id
            for assignments in assignments_by_company
            for assignment in assignments
            if is_assignment_active(assignment)
        )
    )
    if not condition_ids:
        return []

    conditions = await gather_bounded(
        store.get_condition_with_rules, condition_ids, limiter=limiter
    )
    resolved: list[CommercialCondition] = []
    for condition_id, condition in zip(condition_ids, conditions):
        if condition is None:
            logger.warning(
                "Assigned condition %s no longer exists; skipping it", condition_id
            )
            continue
        resolved.append(condition)
    return resolved


__all__ = [
    "is_assignment_active",
    "is_membership_active",
    "list_active_memberships",
    "resolve_company_conditions",
    "resolve_user_conditions",
    "resolve_user_reach",
]
