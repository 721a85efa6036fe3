"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class UserType(str, Enum):
    """How the user account was registered."""

    SELF_REGISTERED = "self_registered"
    INTERNAL = "internal"
    EMPLOYEE = "employee"


class UserRole(str, Enum):
    """Role tag exposed to external expression evaluators."""

    CUSTOMER = "customer"
    ADMINISTRATOR = "administrator"


@dataclass
class User:
    """Core attributes describing a platform user."""

    id: UUID
    name: str
    email: str
    user_type: UserType
    role: UserRole
    is_active: bool
    created_at: datetime | None = None


__all__ = ["User", "UserRole", "UserType"]
