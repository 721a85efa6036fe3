"""Domain entity representing a customer company."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Company:
    """Core attributes describing a company that groups users."""

    id: UUID
    tax_id: str
    corporate_name: str
    trade_name: str | None
    is_active: bool
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        """Return the trade name, falling back to the corporate name."""

        return self.trade_name or self.corporate_name


__all__ = ["Company"]
