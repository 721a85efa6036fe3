"""SQLAlchemy model for visibility and discount rules."""

from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import relationship

from conditions_api.domain.entities import (
    MAX_EXPRESSION_LENGTH,
    DiscountType,
    RuleType,
)
from conditions_api.infrastructure.database import AppDateTime, Base
from conditions_api.utils import now_in_app_timezone


class ConditionRuleModel(Base):
    """Database representation of a rule belonging to a commercial condition."""

    __tablename__ = "condition_rule"
    __table_args__ = (
        Index("ix_condition_rule_condition_type", "commercial_condition_id", "rule_type"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    commercial_condition_id = Column(
        Uuid,
        ForeignKey("commercial_condition.id", ondelete="CASCADE"),
        nullable=False,
    )
    rule_type = Column(Enum(RuleType, native_enum=False, length=20), nullable=False)
    expression = Column(String(MAX_EXPRESSION_LENGTH), nullable=False)
    discount_type = Column(
        Enum(DiscountType, native_enum=False, length=20), nullable=True
    )
    discount_value = Column(Numeric(10, 2, asdecimal=True), nullable=True)
    description = Column(String(500), nullable=True)
    priority = Column(Integer, nullable=False, default=0, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(
        AppDateTime(), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        AppDateTime(), nullable=True, onupdate=now_in_app_timezone
    )

    condition = relationship("CommercialConditionModel", back_populates="rules")


__all__ = ["ConditionRuleModel"]
