"""Repository implementations for infrastructure layer."""

from .commercial_condition_repository import CommercialConditionRepository
from .company_repository import CompanyRepository
from .user_repository import UserRepository

__all__ = [
    "CommercialConditionRepository",
    "CompanyRepository",
    "UserRepository",
]
