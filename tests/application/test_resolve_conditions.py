"""Tests for condition resolution through memberships and assignments."""

from __future__ import annotations

from uuid import uuid4

import anyio
import pytest

from conditions_api.application.use_cases.integration import (
    resolve_company_commercial_conditions,
    resolve_company_conditions,
    resolve_user_commercial_conditions,
    resolve_user_conditions,
)
from conditions_api.application.use_cases.integration.concurrency import (
    deadline,
    gather_bounded,
)
from conditions_api.domain.exceptions import (
    NotFoundError,
    ResolutionTimeoutError,
    StoreUnavailableError,
)
from fakes import NOW

pytestmark = pytest.mark.anyio


async def test_company_conditions_follow_active_assignments(store) -> None:
    company = store.add_company()
    wholesale = store.add_condition("Atacado", priority=10)
    retail = store.add_condition("Varejo", priority=5)
    store.add_condition("Sem vinculo")
    store.assign(company, wholesale)
    store.assign(company, retail, is_active=False)

    conditions = await resolve_company_conditions(store, company.id)

    assert [condition.id for condition in conditions] == [wholesale.id]


async def test_unknown_company_raises_not_found(store) -> None:
    missing = uuid4()

    with pytest.raises(NotFoundError) as excinfo:
        await resolve_company_conditions(store, missing)

    assert excinfo.value.entity == "Company"
    assert excinfo.value.entity_id == missing


async def test_unknown_user_raises_not_found(store) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        await resolve_user_conditions(store, uuid4())

    assert excinfo.value.entity == "User"


async def test_user_without_memberships_has_no_conditions(store) -> None:
    user = store.add_user()

    assert await resolve_user_conditions(store, user.id) == []


async def test_inactive_membership_hides_company_conditions(store) -> None:
    user = store.add_user()
    company = store.add_company()
    condition = store.add_condition("Atacado")
    store.assign(company, condition)
    store.add_membership(user, company, is_active=False)

    assert await resolve_user_conditions(store, user.id) == []


async def test_user_conditions_are_the_union_across_companies(store) -> None:
    user = store.add_user()
    south = store.add_company(trade_name="Sul")
    north = store.add_company(trade_name="Norte")
    shared = store.add_condition("Compartilhada")
    south_only = store.add_condition("Somente Sul")
    north_only = store.add_condition("Somente Norte")
    store.assign(south, shared)
    store.assign(south, south_only)
    store.assign(north, shared)
    store.assign(north, north_only)
    store.add_membership(user, south)
    store.add_membership(user, north)

    conditions = await resolve_user_conditions(store, user.id)

    ids = [condition.id for condition in conditions]
    assert sorted(ids) == sorted([shared.id, south_only.id, north_only.id])
    assert len(ids) == len(set(ids))
    assert [name for name, key in store.calls].count("get_condition_with_rules") == 3


async def test_missing_assigned_condition_is_skipped(store) -> None:
    company = store.add_company()
    kept = store.add_condition("Atacado")
    dangling = store.add_condition("Removida")
    store.assign(company, kept)
    store.assign(company, dangling)
    del store.conditions[dangling.id]

    conditions = await resolve_company_conditions(store, company.id)

    assert [condition.id for condition in conditions] == [kept.id]


async def test_unavailable_company_fails_the_whole_request(store) -> None:
    user = store.add_user()
    healthy = store.add_company()
    broken = store.add_company()
    store.assign(healthy, store.add_condition("Atacado"))
    store.assign(broken, store.add_condition("Varejo"))
    store.add_membership(user, healthy)
    store.add_membership(user, broken)
    store.unavailable_companies.add(broken.id)

    with pytest.raises(StoreUnavailableError):
        await resolve_user_conditions(store, user.id)


async def test_slow_store_hits_the_deadline(store) -> None:
    user = store.add_user()
    company = store.add_company()
    store.assign(company, store.add_condition("Atacado"))
    store.add_membership(user, company)
    store.delay = 0.5

    with pytest.raises(ResolutionTimeoutError):
        await resolve_user_commercial_conditions(store, user.id, now=NOW, timeout=0.05)


async def test_deadline_without_timeout_does_not_interfere() -> None:
    async with deadline(None):
        await anyio.sleep(0)


async def test_gather_bounded_keeps_key_order() -> None:
    async def lookup(key: int) -> int:
        await anyio.sleep(0.01 * (5 - key))
        return key * 10

    results = await gather_bounded(lookup, range(5), limiter=anyio.CapacityLimiter(2))

    assert results == [0, 10, 20, 30, 40]


async def test_gather_bounded_respects_the_limiter() -> None:
    running = 0
    peak = 0

    async def lookup(key: int) -> int:
        nonlocal running, peak
        running += 1
        peak = max(peak, running)
        await anyio.sleep(0.01)
        running -= 1
        return key

    await gather_bounded(lookup, range(8), limiter=anyio.CapacityLimiter(3))

    assert peak == 3


async def test_user_report_lists_effective_conditions_by_priority(store) -> None:
    user = store.add_user()
    company = store.add_company()
    low = store.add_condition("Varejo", priority=1)
    high = store.add_condition("Atacado", priority=10)
    expired = store.add_condition("Black Friday", priority=50, valid_until=NOW.replace(year=2024))
    for condition in (low, high, expired):
        store.assign(company, condition)
    first = store.add_rule(high, priority=1)
    second = store.add_rule(high, priority=5)
    store.add_rule(high, priority=9, is_active=False)
    store.add_membership(user, company)

    report = await resolve_user_commercial_conditions(store, user.id, now=NOW)

    assert report.user_id == user.id
    assert report.company_id == company.id
    assert [entry.name for entry in report.conditions] == ["Atacado", "Varejo"]
    assert [view.rule_id for view in report.conditions[0].rules] == [second.id, first.id]
    assert report.conditions[1].rules == []


async def test_user_report_points_at_the_most_recent_membership(store) -> None:
    user = store.add_user()
    older = store.add_company()
    newer = store.add_company()
    store.add_membership(user, older, associated_at=NOW.replace(year=2023))
    store.add_membership(user, newer, associated_at=NOW.replace(year=2024))

    report = await resolve_user_commercial_conditions(store, user.id, now=NOW)

    assert report.company_id == newer.id
    assert report.conditions == []


async def test_company_report_has_no_user(store) -> None:
    company = store.add_company()
    condition = store.add_condition("Atacado")
    store.assign(company, condition)

    report = await resolve_company_commercial_conditions(store, company.id, now=NOW)

    assert report.user_id is None
    assert report.company_id == company.id
    assert [entry.condition_id for entry in report.conditions] == [condition.id]


async def test_user_report_reads_memberships_once(store) -> None:
    user = store.add_user()
    company = store.add_company()
    store.assign(company, store.add_condition("Atacado"))
    store.add_membership(user, company)

    await resolve_user_commercial_conditions(store, user.id, now=NOW)

    names = [name for name, key in store.calls]
    assert names.count("get_user") == 1
    assert names.count("get_active_memberships_for_user") == 1
