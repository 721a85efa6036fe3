"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from conditions_api.domain.entities import CompanyMembership, User
from conditions_api.infrastructure.models import CompanyUserModel, UserModel


class UserRepository:
    """Provide read access to users and their company memberships."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: UUID) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def list_active_memberships(self, user_id: UUID) -> Sequence[CompanyMembership]:
        query = (
            self.session.query(CompanyUserModel)
            .filter(CompanyUserModel.user_id == user_id)
            .filter(CompanyUserModel.is_active.is_(True))
            .order_by(CompanyUserModel.associated_at.desc())
        )
        return [self._membership_to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            user_type=model.user_type,
            role=model.role,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    @staticmethod
    def _membership_to_entity(model: CompanyUserModel) -> CompanyMembership:
        return CompanyMembership(
            company_id=model.company_id,
            user_id=model.user_id,
            is_active=model.is_active,
            associated_at=model.associated_at,
            is_administrator=model.is_administrator,
            disassociated_at=model.disassociated_at,
        )


__all__ = ["UserRepository"]
