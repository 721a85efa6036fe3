"""Domain entities exposed by the application."""

from .commercial_condition import CommercialCondition
from .company import Company
from .company_membership import CompanyMembership
from .condition_assignment import ConditionAssignment
from .condition_rule import (
    MAX_EXPRESSION_LENGTH,
    MAX_PERCENTAGE_DISCOUNT,
    ConditionRule,
    DiscountType,
    RuleType,
)
from .user import User, UserRole, UserType

__all__ = [
    "CommercialCondition",
    "Company",
    "CompanyMembership",
    "ConditionAssignment",
    "ConditionRule",
    "DiscountType",
    "MAX_EXPRESSION_LENGTH",
    "MAX_PERCENTAGE_DISCOUNT",
    "RuleType",
    "User",
    "UserRole",
    "UserType",
]
