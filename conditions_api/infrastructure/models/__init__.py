"""ORM models used by the application infrastructure."""

from .commercial_condition import CommercialConditionModel
from .company import CompanyModel
from .company_commercial_condition import CompanyCommercialConditionModel
from .company_user import CompanyUserModel
from .condition_rule import ConditionRuleModel
from .user import UserModel

__all__ = [
    "CommercialConditionModel",
    "CompanyCommercialConditionModel",
    "CompanyModel",
    "CompanyUserModel",
    "ConditionRuleModel",
    "UserModel",
]
