"""Extract and order the effective rules of resolved conditions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

import anyio

from conditions_api.application.ports import EntityStore
from conditions_api.domain.entities import CommercialCondition, ConditionRule, RuleType
from conditions_api.domain.exceptions import DataIntegrityError
from conditions_api.domain.validity import ensure_discount_integrity, is_effective

from .resolve_conditions import resolve_company_conditions
from .views import RuleView

logger = logging.getLogger(__name__)


def rule_sort_key(view: RuleView) -> tuple[int, int, str, UUID, UUID]:
    """Condition priority desc, rule priority desc, then name and identifiers asc."""

    return (
        -view.condition_priority,
        -view.priority,
        view.condition_name,
        view.condition_id,
        view.rule_id,
    )


def to_rule_view(condition: CommercialCondition, rule: ConditionRule) -> RuleView:
    return RuleView(
        rule_id=rule.id,
        condition_id=condition.id,
        condition_name=condition.name,
        condition_priority=condition.priority,
        rule_type=rule.rule_type,
        expression=rule.expression,
        priority=rule.priority,
        description=rule.description,
        discount_type=rule.discount_type,
        discount_value=rule.discount_value,
    )


def effective_rules(
    condition: CommercialCondition, kind: RuleType | None = None
) -> list[ConditionRule]:
    """Return the active rules of ``condition``, skipping malformed discounts.

    ``kind`` restricts the result to one rule type. Integrity violations are
    logged and the offending rule is dropped; they never fail the request.
    """

    rules: list[ConditionRule] = []
    for rule in condition.rules:
        if not rule.is_active:
            continue
        if kind is not None and rule.rule_type is not kind:
            continue
        try:
            ensure_discount_integrity(rule)
        except DataIntegrityError as exc:
            logger.warning(
                "Skipping rule %s of condition %s (%s): %s",
                rule.id,
                condition.id,
                condition.name,
                exc.reason,
            )
            continue
        rules.append(rule)
    return rules


def select_rules(
    conditions: Iterable[CommercialCondition],
    kind: RuleType,
    *,
    now: datetime,
) -> list[RuleView]:
    """Return the ordered views of effective ``kind`` rules in ``conditions``."""

    views = [
        to_rule_view(condition, rule)
        for condition in conditions
        if is_effective(condition, now)
        for rule in effective_rules(condition, kind)
    ]
    views.sort(key=rule_sort_key)
    return views


async def project_rules(
    store: EntityStore,
    conditions: Iterable[CommercialCondition],
    kind: RuleType,
    *,
    now: datetime,
    company_filter: UUID | None = None,
    company_conditions: Iterable[CommercialCondition] | None = None,
    limiter: anyio.CapacityLimiter | None = None,
) -> list[RuleView]:
    """Project resolved conditions into the ordered rules of one kind.

    When ``company_filter`` is given, only conditions that are also assigned
    to that company through an active assignment are kept. Callers that
    already resolved the company's conditions pass them as
    ``company_conditions`` to skip the lookup.
    """

    candidates = [condition for condition in conditions if is_effective(condition, now)]
    if company_filter is not None:
        if company_conditions is None:
            company_conditions = await resolve_company_conditions(
                store, company_filter, limiter=limiter
            )
        scoped_ids = {condition.id for condition in company_conditions}
        candidates = [condition for condition in candidates if condition.id in scoped_ids]
    return select_rules(candidates, kind, now=now)


__all__ = [
    "effective_rules",
    "project_rules",
    "rule_sort_key",
    "select_rules",
    "to_rule_view",
]
