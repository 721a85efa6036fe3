"""Domain entity linking a user to a company."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class CompanyMembership:
    """Association granting a user access to a company's assignments."""

    company_id: UUID
    user_id: UUID
    is_active: bool
    associated_at: datetime
    is_administrator: bool = False
    disassociated_at: datetime | None = None


__all__ = ["CompanyMembership"]
