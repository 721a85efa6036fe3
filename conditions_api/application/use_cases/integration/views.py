"""Read models returned by the integration use cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from conditions_api.domain.entities import (
    DiscountType,
    RuleType,
    UserRole,
    UserType,
)


@dataclass(frozen=True)
class RuleView:
    """Projection of an effective rule handed to catalog and pricing services."""

    rule_id: UUID
    condition_id: UUID
    condition_name: str
    condition_priority: int
    rule_type: RuleType
    expression: str
    priority: int
    description: str | None = None
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = None


@dataclass
class ConditionWithRules:
    """An effective condition together with its effective rules."""

    condition_id: UUID
    name: str
    description: str | None
    priority: int
    valid_from: datetime | None
    valid_until: datetime | None
    rules: list[RuleView] = field(default_factory=list)


@dataclass
class CommercialConditionsReport:
    """Conditions applying to a user or company, highest priority first."""

    user_id: UUID | None
    company_id: UUID | None
    conditions: list[ConditionWithRules] = field(default_factory=list)


@dataclass
class RuleSet:
    """Rules of a single kind applying to a user, optionally scoped to a company."""

    user_id: UUID
    company_id: UUID | None
    rule_type: RuleType
    rules: list[RuleView] = field(default_factory=list)


@dataclass(frozen=True)
class CompanyContext:
    """Company attributes available to expression evaluators."""

    company_id: UUID
    tax_id: str
    trade_name: str


@dataclass(frozen=True)
class UserContext:
    """User attributes available to expression evaluators."""

    user_id: UUID
    user_type: UserType
    role: UserRole
    is_active: bool
    company: CompanyContext | None = None


@dataclass(frozen=True)
class AccessResult:
    """Aggregate of the state an external gateway needs to grant access."""

    user_id: UUID
    is_active: bool
    has_company: bool
    company_is_active: bool
    has_active_conditions: bool

    @property
    def has_access(self) -> bool:
        return (
            self.is_active
            and self.has_company
            and self.company_is_active
            and self.has_active_conditions
        )


__all__ = [
    "AccessResult",
    "CommercialConditionsReport",
    "CompanyContext",
    "ConditionWithRules",
    "RuleSet",
    "RuleView",
    "UserContext",
]
