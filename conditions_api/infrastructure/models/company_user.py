"""SQLAlchemy model for user memberships in companies."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from conditions_api.infrastructure.database import AppDateTime, Base
from conditions_api.utils import now_in_app_timezone


class CompanyUserModel(Base):
    """Database representation of a user's membership in a company."""

    __tablename__ = "company_user"
    __table_args__ = (
        UniqueConstraint("company_id", "user_id", name="uq_company_user"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    company_id = Column(
        Uuid, ForeignKey("company.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        Uuid, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_administrator = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    associated_at = Column(
        AppDateTime(), nullable=False, default=now_in_app_timezone
    )
    disassociated_at = Column(AppDateTime(), nullable=True)

    company = relationship("CompanyModel", back_populates="members")
    user = relationship("UserModel", back_populates="memberships")


__all__ = ["CompanyUserModel"]
