"""Persistence layer for company data."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from conditions_api.domain.entities import Company, ConditionAssignment
from conditions_api.infrastructure.models import (
    CompanyCommercialConditionModel,
    CompanyModel,
)


class CompanyRepository:
    """Provide read access to companies and their condition assignments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, company_id: UUID) -> Company | None:
        model = self.session.get(CompanyModel, company_id)
        return self._to_entity(model) if model else None

    def list_active_assignments(self, company_id: UUID) -> Sequence[ConditionAssignment]:
        query = (
            self.session.query(CompanyCommercialConditionModel)
            .filter(CompanyCommercialConditionModel.company_id == company_id)
            .filter(CompanyCommercialConditionModel.is_active.is_(True))
            .order_by(CompanyCommercialConditionModel.assigned_at.asc())
        )
        return [self._assignment_to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: CompanyModel) -> Company:
        return Company(
            id=model.id,
            tax_id=model.tax_id,
            corporate_name=model.corporate_name,
            trade_name=model.trade_name,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    @staticmethod
    def _assignment_to_entity(
        model: CompanyCommercialConditionModel,
    ) -> ConditionAssignment:
        return ConditionAssignment(
            company_id=model.company_id,
            condition_id=model.commercial_condition_id,
            is_active=model.is_active,
            assigned_at=model.assigned_at,
        )


__all__ = ["CompanyRepository"]
