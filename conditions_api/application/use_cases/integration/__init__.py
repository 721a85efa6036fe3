"""Use cases consumed by catalog, cart and quote services."""

from .build_user_context import build_user_context
from .check_access import check_access
from .project_rules import project_rules, select_rules
from .resolve_commercial_conditions import (
    resolve_company_commercial_conditions,
    resolve_user_commercial_conditions,
)
from .resolve_conditions import (
    resolve_company_conditions,
    resolve_user_conditions,
    resolve_user_reach,
)
from .resolve_rules import (
    resolve_discount_rules,
    resolve_rules,
    resolve_visibility_rules,
)
from .views import (
    AccessResult,
    CommercialConditionsReport,
    CompanyContext,
    ConditionWithRules,
    RuleSet,
    RuleView,
    UserContext,
)

__all__ = [
    "AccessResult",
    "CommercialConditionsReport",
    "CompanyContext",
    "ConditionWithRules",
    "RuleSet",
    "RuleView",
    "UserContext",
    "build_user_context",
    "check_access",
    "project_rules",
    "resolve_company_commercial_conditions",
    "resolve_company_conditions",
    "resolve_discount_rules",
    "resolve_rules",
    "resolve_user_commercial_conditions",
    "resolve_user_conditions",
    "resolve_user_reach",
    "resolve_visibility_rules",
    "select_rules",
]
