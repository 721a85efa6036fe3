"""SQLAlchemy model for the company table."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, String, Uuid
from sqlalchemy.orm import relationship

from conditions_api.infrastructure.database import AppDateTime, Base
from conditions_api.utils import now_in_app_timezone


class CompanyModel(Base):
    """Database representation of a customer company."""

    __tablename__ = "company"

    id = Column(Uuid, primary_key=True, default=uuid4)
    tax_id = Column(String(20), nullable=False, unique=True)
    corporate_name = Column(String(300), nullable=False)
    trade_name = Column(String(300), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(AppDateTime(), nullable=False, default=now_in_app_timezone)

    members = relationship(
        "CompanyUserModel",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    condition_assignments = relationship(
        "CompanyCommercialConditionModel",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["CompanyModel"]
