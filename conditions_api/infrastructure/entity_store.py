"""SQLAlchemy-backed implementation of the resolution entity store."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar
from uuid import UUID

import anyio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from conditions_api.domain.entities import (
    CommercialCondition,
    Company,
    CompanyMembership,
    ConditionAssignment,
    User,
)
from conditions_api.domain.exceptions import StoreUnavailableError
from conditions_api.infrastructure.repositories import (
    CommercialConditionRepository,
    CompanyRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyEntityStore:
    """Run repository lookups in worker threads, one session per lookup.

    Sessions are not shared between lookups, so the resolution use cases can
    fan out over several companies at once.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    async def get_user(self, user_id: UUID) -> User | None:
        return await self._run(lambda session: UserRepository(session).get(user_id))

    async def get_company(self, company_id: UUID) -> Company | None:
        return await self._run(
            lambda session: CompanyRepository(session).get(company_id)
        )

    async def get_active_memberships_for_user(
        self, user_id: UUID
    ) -> Sequence[CompanyMembership]:
        return await self._run(
            lambda session: UserRepository(session).list_active_memberships(user_id)
        )

    async def get_active_assignments_for_company(
        self, company_id: UUID
    ) -> Sequence[ConditionAssignment]:
        return await self._run(
            lambda session: CompanyRepository(session).list_active_assignments(
                company_id
            )
        )

    async def get_condition_with_rules(
        self, condition_id: UUID
    ) -> CommercialCondition | None:
        return await self._run(
            lambda session: CommercialConditionRepository(session).get_with_rules(
                condition_id
            )
        )

    async def _run(self, query: Callable[[Session], T]) -> T:
        return await anyio.to_thread.run_sync(
            self._execute, query, abandon_on_cancel=True
        )

    def _execute(self, query: Callable[[Session], T]) -> T:
        try:
            with self._session_factory() as session:
                return query(session)
        except SQLAlchemyError as exc:
            logger.error("Entity store lookup failed: %s", exc)
            raise StoreUnavailableError("Entity store is unavailable") from exc


__all__ = ["SqlAlchemyEntityStore"]
