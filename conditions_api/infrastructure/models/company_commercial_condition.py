"""SQLAlchemy model for commercial conditions assigned to companies."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from conditions_api.infrastructure.database import AppDateTime, Base
from conditions_api.utils import now_in_app_timezone


class CompanyCommercialConditionModel(Base):
    """Database representation of a condition assignment."""

    __tablename__ = "company_commercial_condition"
    __table_args__ = (
        UniqueConstraint(
            "company_id", "commercial_condition_id", name="uq_company_condition"
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    company_id = Column(
        Uuid, ForeignKey("company.id", ondelete="CASCADE"), nullable=False, index=True
    )
    commercial_condition_id = Column(
        Uuid,
        ForeignKey("commercial_condition.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    assigned_at = Column(
        AppDateTime(), nullable=False, default=now_in_app_timezone
    )

    company = relationship("CompanyModel", back_populates="condition_assignments")
    condition = relationship(
        "CommercialConditionModel", back_populates="company_assignments"
    )


__all__ = ["CompanyCommercialConditionModel"]
