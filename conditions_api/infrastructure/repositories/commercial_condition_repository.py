"""Persistence layer for commercial conditions and their rules."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from conditions_api.domain.entities import CommercialCondition, ConditionRule
from conditions_api.infrastructure.models import (
    CommercialConditionModel,
    ConditionRuleModel,
)


class CommercialConditionRepository:
    """Provide read access to commercial conditions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_with_rules(self, condition_id: UUID) -> CommercialCondition | None:
        model = (
            self.session.query(CommercialConditionModel)
            .options(selectinload(CommercialConditionModel.rules))
            .filter(CommercialConditionModel.id == condition_id)
            .first()
        )
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: CommercialConditionModel) -> CommercialCondition:
        return CommercialCondition(
            id=model.id,
            name=model.name,
            priority=model.priority,
            is_active=model.is_active,
            valid_from=model.valid_from,
            valid_until=model.valid_until,
            description=model.description,
            rules=[
                CommercialConditionRepository._rule_to_entity(rule)
                for rule in model.rules
            ],
        )

    @staticmethod
    def _rule_to_entity(model: ConditionRuleModel) -> ConditionRule:
        return ConditionRule(
            id=model.id,
            condition_id=model.commercial_condition_id,
            rule_type=model.rule_type,
            expression=model.expression,
            priority=model.priority,
            is_active=model.is_active,
            description=model.description,
            discount_type=model.discount_type,
            discount_value=model.discount_value,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["CommercialConditionRepository"]
