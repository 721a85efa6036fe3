"""Use case assembling the variables external expression evaluators may reference."""

from __future__ import annotations

import logging
from uuid import UUID

from conditions_api.application.ports import EntityStore
from conditions_api.domain.exceptions import NotFoundError

from .concurrency import deadline
from .resolve_conditions import list_active_memberships
from .views import CompanyContext, UserContext

logger = logging.getLogger(__name__)


async def build_user_context(
    store: EntityStore,
    user_id: UUID,
    *,
    timeout: float | None = None,
) -> UserContext:
    """Return the user's tags plus a summary of their primary company.

    The primary company is the one of the most recent active membership; it
    is omitted when that company is missing or inactive.
    """

    async with deadline(timeout):
        user = await store.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        company_context = None
        memberships = await list_active_memberships(store, user_id)
        if memberships:
            company = await store.get_company(memberships[0].company_id)
            if company is not None and company.is_active:
                company_context = CompanyContext(
                    company_id=company.id,
                    tax_id=company.tax_id,
                    trade_name=company.display_name,
                )
            else:
                logger.debug(
                    "Primary company %s of user %s is unavailable for context",
                    memberships[0].company_id,
                    user_id,
                )

    return UserContext(
        user_id=user.id,
        user_type=user.user_type,
        role=user.role,
        is_active=user.is_active,
        company=company_context,
    )


__all__ = ["build_user_context"]
