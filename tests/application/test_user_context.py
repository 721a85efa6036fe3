"""Tests for the expression context and access check use cases."""

from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest

from conditions_api.application.use_cases import build_user_context, check_access
from conditions_api.domain.entities import UserRole, UserType
from conditions_api.domain.exceptions import NotFoundError
from fakes import NOW

pytestmark = pytest.mark.anyio


async def test_context_carries_user_tags_and_primary_company(store) -> None:
    user = store.add_user(user_type=UserType.EMPLOYEE, role=UserRole.ADMINISTRATOR)
    older = store.add_company(trade_name="Antiga", tax_id="11.111.111/0001-11")
    newer = store.add_company(trade_name="Nova", tax_id="22.222.222/0001-22")
    store.add_membership(user, older, associated_at=NOW - timedelta(days=30))
    store.add_membership(user, newer, associated_at=NOW)

    context = await build_user_context(store, user.id)

    assert context.user_id == user.id
    assert context.user_type is UserType.EMPLOYEE
    assert context.role is UserRole.ADMINISTRATOR
    assert context.is_active is True
    assert context.company is not None
    assert context.company.company_id == newer.id
    assert context.company.tax_id == "22.222.222/0001-22"
    assert context.company.trade_name == "Nova"


async def test_context_falls_back_to_corporate_name(store) -> None:
    user = store.add_user()
    company = store.add_company(trade_name=None, corporate_name="Canetas Brasil SA")
    store.add_membership(user, company)

    context = await build_user_context(store, user.id)

    assert context.company.trade_name == "Canetas Brasil SA"


async def test_context_omits_inactive_company(store) -> None:
    user = store.add_user()
    store.add_membership(user, store.add_company(is_active=False))

    context = await build_user_context(store, user.id)

    assert context.company is None


async def test_context_without_membership_has_no_company(store) -> None:
    user = store.add_user(is_active=False)

    context = await build_user_context(store, user.id)

    assert context.company is None
    assert context.is_active is False


async def test_context_for_unknown_user_raises(store) -> None:
    with pytest.raises(NotFoundError):
        await build_user_context(store, uuid4())


async def test_access_granted_when_everything_is_in_place(store) -> None:
    user = store.add_user()
    company = store.add_company()
    store.add_membership(user, company)
    store.assign(company, store.add_condition("Atacado"))

    result = await check_access(store, user.id, now=NOW)

    assert result.is_active
    assert result.has_company
    assert result.company_is_active
    assert result.has_active_conditions
    assert result.has_access is True


async def test_access_denied_without_membership(store) -> None:
    user = store.add_user()

    result = await check_access(store, user.id, now=NOW)

    assert result.has_company is False
    assert result.company_is_active is False
    assert result.has_active_conditions is False
    assert result.has_access is False


async def test_access_denied_for_inactive_company(store) -> None:
    user = store.add_user()
    company = store.add_company(is_active=False)
    store.add_membership(user, company)
    store.assign(company, store.add_condition("Atacado"))

    result = await check_access(store, user.id, now=NOW)

    assert result.has_company is True
    assert result.company_is_active is False
    assert result.has_active_conditions is False
    assert result.has_access is False


async def test_access_denied_when_conditions_are_not_effective(store) -> None:
    user = store.add_user()
    company = store.add_company()
    store.add_membership(user, company)
    store.assign(company, store.add_condition("Futura", valid_from=NOW + timedelta(days=1)))
    store.assign(company, store.add_condition("Desligada", is_active=False))

    result = await check_access(store, user.id, now=NOW)

    assert result.has_active_conditions is False
    assert result.has_access is False


async def test_access_reports_inactive_user(store) -> None:
    user = store.add_user(is_active=False)
    company = store.add_company()
    store.add_membership(user, company)
    store.assign(company, store.add_condition("Atacado"))

    result = await check_access(store, user.id, now=NOW)

    assert result.is_active is False
    assert result.has_active_conditions is True
    assert result.has_access is False


async def test_access_for_unknown_user_raises(store) -> None:
    with pytest.raises(NotFoundError):
        await check_access(store, uuid4(), now=NOW)


async def test_access_check_without_membership_reads_the_user_once(store) -> None:
    user = store.add_user()

    await check_access(store, user.id, now=NOW)

    names = [name for name, key in store.calls]
    assert names == ["get_user", "get_active_memberships_for_user"]
