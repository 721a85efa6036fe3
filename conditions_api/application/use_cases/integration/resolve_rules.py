"""Use cases returning the visibility or discount rules that apply to a user."""

from __future__ import annotations

import logging
from datetime import datetime
from functools import partial
from uuid import UUID

from conditions_api.application.ports import EntityStore
from conditions_api.domain.entities import RuleType
from conditions_api.utils import ensure_app_timezone, now_in_app_timezone

from .concurrency import deadline, new_limiter, run_concurrently
from .project_rules import project_rules
from .resolve_conditions import (
    resolve_company_conditions,
    resolve_user_conditions,
    resolve_user_reach,
)
from .views import RuleSet

logger = logging.getLogger(__name__)


async def resolve_rules(
    store: EntityStore,
    user_id: UUID,
    kind: RuleType,
    *,
    company_id: UUID | None = None,
    now: datetime | None = None,
    timeout: float | None = None,
) -> RuleSet:
    """Return the effective ``kind`` rules for ``user_id`` in priority order.

    With ``company_id`` the result is scoped to that company, and it is empty
    unless the user holds an active membership there.
    """

    current = ensure_app_timezone(now) or now_in_app_timezone()
    result = RuleSet(user_id=user_id, company_id=company_id, rule_type=kind)

    async with deadline(timeout):
        limiter = new_limiter()
        if company_id is None:
            conditions = await resolve_user_conditions(store, user_id, limiter=limiter)
            result.rules = await project_rules(store, conditions, kind, now=current)
            return result

        (memberships, conditions), company_conditions = await run_concurrently(
            partial(resolve_user_reach, store, user_id, limiter=limiter),
            partial(resolve_company_conditions, store, company_id, limiter=limiter),
        )
        if company_id not in {membership.company_id for membership in memberships}:
            logger.info(
                "User %s has no active membership in company %s; no %s rules apply",
                user_id,
                company_id,
                kind.value,
            )
            return result

        result.rules = await project_rules(
            store,
            conditions,
            kind,
            now=current,
            company_filter=company_id,
            company_conditions=company_conditions,
        )
    return result


async def resolve_visibility_rules(
    store: EntityStore,
    user_id: UUID,
    *,
    company_id: UUID | None = None,
    now: datetime | None = None,
    timeout: float | None = None,
) -> RuleSet:
    """Return the visibility rules applying to ``user_id``."""

    return await resolve_rules(
        store,
        user_id,
        RuleType.VISIBILITY,
        company_id=company_id,
        now=now,
        timeout=timeout,
    )


async def resolve_discount_rules(
    store: EntityStore,
    user_id: UUID,
    *,
    company_id: UUID | None = None,
    now: datetime | None = None,
    timeout: float | None = None,
) -> RuleSet:
    """Return the discount rules applying to ``user_id``."""

    return await resolve_rules(
        store,
        user_id,
        RuleType.DISCOUNT,
        company_id=company_id,
        now=now,
        timeout=timeout,
    )


__all__ = ["resolve_discount_rules", "resolve_rules", "resolve_visibility_rules"]
