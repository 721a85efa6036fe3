"""Domain entity representing a visibility or discount rule."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

MAX_EXPRESSION_LENGTH = 2000
MAX_PERCENTAGE_DISCOUNT = Decimal("100")


class RuleType(str, Enum):
    """Kind of directive a rule carries."""

    VISIBILITY = "visibility"
    DISCOUNT = "discount"


class DiscountType(str, Enum):
    """How a discount rule adjusts the price."""

    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"
    SPECIAL_PRICE = "special_price"


@dataclass
class ConditionRule:
    """A single directive whose expression is forwarded verbatim to evaluators."""

    id: UUID
    condition_id: UUID
    rule_type: RuleType
    expression: str
    priority: int
    is_active: bool
    description: str | None = None
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "ConditionRule",
    "DiscountType",
    "MAX_EXPRESSION_LENGTH",
    "MAX_PERCENTAGE_DISCOUNT",
    "RuleType",
]
