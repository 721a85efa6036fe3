"""Predicates deciding whether conditions and rules are effective."""

from __future__ import annotations

from datetime import datetime

from conditions_api.domain.entities import (
    MAX_PERCENTAGE_DISCOUNT,
    CommercialCondition,
    ConditionRule,
    DiscountType,
    RuleType,
)
from conditions_api.domain.exceptions import DataIntegrityError
from conditions_api.utils import ensure_app_timezone


def is_effective(condition: CommercialCondition, now: datetime) -> bool:
    """Return ``True`` when ``condition`` is active and ``now`` is within its window.

    Both bounds are inclusive and a missing bound leaves that side open.
    """

    if not condition.is_active:
        return False
    current = ensure_app_timezone(now)
    valid_from = ensure_app_timezone(condition.valid_from)
    if valid_from is not None and current < valid_from:
        return False
    valid_until = ensure_app_timezone(condition.valid_until)
    if valid_until is not None and current > valid_until:
        return False
    return True


def ensure_discount_integrity(rule: ConditionRule) -> ConditionRule:
    """Return ``rule`` unchanged or raise ``DataIntegrityError``.

    Only discount rules are checked; visibility rules carry no discount fields.
    """

    if rule.rule_type is not RuleType.DISCOUNT:
        return rule
    if rule.discount_type is None:
        raise DataIntegrityError(rule.id, "discount type is missing")
    if rule.discount_value is None:
        raise DataIntegrityError(rule.id, "discount value is missing")
    if rule.discount_value < 0:
        raise DataIntegrityError(rule.id, "discount value is negative")
    if (
        rule.discount_type is DiscountType.PERCENTAGE
        and rule.discount_value > MAX_PERCENTAGE_DISCOUNT
    ):
        raise DataIntegrityError(rule.id, "percentage discount exceeds 100")
    return rule


__all__ = ["ensure_discount_integrity", "is_effective"]
