"""Aggregate application use cases."""

from .integration import (
    build_user_context,
    check_access,
    resolve_company_commercial_conditions,
    resolve_discount_rules,
    resolve_user_commercial_conditions,
    resolve_visibility_rules,
)

__all__ = [
    "build_user_context",
    "check_access",
    "resolve_company_commercial_conditions",
    "resolve_discount_rules",
    "resolve_user_commercial_conditions",
    "resolve_visibility_rules",
]
