"""SQLAlchemy model for the user table."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, Enum, String, Uuid
from sqlalchemy.orm import relationship

from conditions_api.domain.entities import UserRole, UserType
from conditions_api.infrastructure.database import AppDateTime, Base
from conditions_api.utils import now_in_app_timezone


class UserModel(Base):
    """Database representation of a platform user."""

    __tablename__ = "user"

    id = Column(Uuid, primary_key=True, default=uuid4)
    name = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False, unique=True, index=True)
    user_type = Column(
        Enum(UserType, native_enum=False, length=30),
        nullable=False,
        default=UserType.SELF_REGISTERED,
    )
    role = Column(
        Enum(UserRole, native_enum=False, length=30),
        nullable=False,
        default=UserRole.CUSTOMER,
    )
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(AppDateTime(), nullable=False, default=now_in_app_timezone)

    memberships = relationship(
        "CompanyUserModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["UserModel"]
