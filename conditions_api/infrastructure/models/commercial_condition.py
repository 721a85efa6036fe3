"""SQLAlchemy model for commercial conditions."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, Index, Integer, String, Uuid
from sqlalchemy.orm import relationship

from conditions_api.infrastructure.database import AppDateTime, Base
from conditions_api.utils import now_in_app_timezone


class CommercialConditionModel(Base):
    """Database representation of a prioritized, time-bounded bundle of rules."""

    __tablename__ = "commercial_condition"
    __table_args__ = (
        Index("ix_commercial_condition_validity", "valid_from", "valid_until"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    name = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=True)
    valid_from = Column(AppDateTime(), nullable=True)
    valid_until = Column(AppDateTime(), nullable=True)
    priority = Column(Integer, nullable=False, default=0, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(
        AppDateTime(), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        AppDateTime(), nullable=True, onupdate=now_in_app_timezone
    )

    rules = relationship(
        "ConditionRuleModel",
        back_populates="condition",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    company_assignments = relationship(
        "CompanyCommercialConditionModel",
        back_populates="condition",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["CommercialConditionModel"]
