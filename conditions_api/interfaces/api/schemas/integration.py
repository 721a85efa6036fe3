"""Schemas for the integration endpoints consumed by other services."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from conditions_api.domain.entities import (
    DiscountType,
    RuleType,
    UserRole,
    UserType,
)


class _ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ConditionRuleRead(_ReadModel):
    rule_id: UUID
    rule_type: RuleType
    expression: str
    description: str | None
    priority: int
    discount_type: DiscountType | None
    discount_value: Decimal | None


class CommercialConditionWithRulesRead(_ReadModel):
    condition_id: UUID
    name: str
    description: str | None
    priority: int
    valid_from: datetime | None
    valid_until: datetime | None
    rules: list[ConditionRuleRead]


class CommercialConditionsRead(_ReadModel):
    user_id: UUID | None
    company_id: UUID | None
    conditions: list[CommercialConditionWithRulesRead]


class VisibilityRuleRead(_ReadModel):
    rule_id: UUID
    condition_id: UUID
    condition_name: str
    expression: str
    priority: int


class VisibilityRulesRead(_ReadModel):
    user_id: UUID
    company_id: UUID | None
    rules: list[VisibilityRuleRead]


class DiscountRuleRead(_ReadModel):
    rule_id: UUID
    condition_id: UUID
    condition_name: str
    expression: str
    discount_type: DiscountType
    discount_value: Decimal
    priority: int


class DiscountRulesRead(_ReadModel):
    user_id: UUID
    company_id: UUID | None
    rules: list[DiscountRuleRead]


class CompanyContextRead(_ReadModel):
    company_id: UUID
    tax_id: str
    trade_name: str


class UserExpressionContextRead(_ReadModel):
    user_id: UUID
    user_type: UserType
    role: UserRole
    is_active: bool
    company: CompanyContextRead | None


class AccessCheckRead(_ReadModel):
    user_id: UUID
    is_active: bool
    has_company: bool
    company_is_active: bool
    has_active_conditions: bool
    has_access: bool


class HealthRead(BaseModel):
    status: str
    timestamp: datetime
    service: str


__all__ = [
    "AccessCheckRead",
    "CommercialConditionWithRulesRead",
    "CommercialConditionsRead",
    "CompanyContextRead",
    "ConditionRuleRead",
    "DiscountRuleRead",
    "DiscountRulesRead",
    "HealthRead",
    "UserExpressionContextRead",
    "VisibilityRuleRead",
    "VisibilityRulesRead",
]
