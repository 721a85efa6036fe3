"""Tests for the integration endpoints consumed by other services."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from conditions_api.domain.entities import DiscountType, RuleType
from conditions_api.interfaces.api.dependencies import (
    get_entity_store,
    get_resolution_timeout,
)
from fakes import NOW


@pytest.fixture()
def timeout_override():
    return {"value": None}


@pytest.fixture()
def client(store, timeout_override):
    """Return a test client whose routes read from the in-memory store."""

    from main import create_app

    app = create_app()
    app.dependency_overrides[get_entity_store] = lambda: store
    app.dependency_overrides[get_resolution_timeout] = lambda: timeout_override["value"]
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def catalog(store):
    """User belonging to one company with a visibility and a discount rule."""

    user = store.add_user()
    company = store.add_company()
    store.add_membership(user, company)
    condition = store.add_condition("Atacado", priority=10)
    discount = store.add_rule(
        condition,
        priority=2,
        expression="cart.total >= 1000",
        discount_type=DiscountType.FIXED_AMOUNT,
        discount_value=Decimal("12.50"),
    )
    visibility = store.add_rule(
        condition, rule_type=RuleType.VISIBILITY, expression="product.brand == 'Acme'"
    )
    store.assign(company, condition)
    return {
        "user": user,
        "company": company,
        "condition": condition,
        "discount": discount,
        "visibility": visibility,
    }


def test_health_reports_service_status(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Healthy"
    assert body["service"] == "Commercial Conditions API"
    assert "timestamp" in body


def test_user_commercial_conditions(client: TestClient, catalog) -> None:
    response = client.get(
        f"/integration/users/{catalog['user'].id}/commercial-conditions"
    )

    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == str(catalog["user"].id)
    assert body["company_id"] == str(catalog["company"].id)
    assert len(body["conditions"]) == 1
    condition = body["conditions"][0]
    assert condition["name"] == "Atacado"
    assert [rule["rule_id"] for rule in condition["rules"]] == [
        str(catalog["discount"].id),
        str(catalog["visibility"].id),
    ]


def test_company_commercial_conditions(client: TestClient, catalog) -> None:
    response = client.get(
        f"/integration/companies/{catalog['company'].id}/commercial-conditions"
    )

    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] is None
    assert body["conditions"][0]["condition_id"] == str(catalog["condition"].id)


def test_discount_rules_serialize_exact_values(client: TestClient, catalog) -> None:
    response = client.get(
        "/integration/discount-rules", params={"user_id": str(catalog["user"].id)}
    )

    assert response.status_code == 200
    rules = response.json()["rules"]
    assert len(rules) == 1
    assert rules[0]["rule_id"] == str(catalog["discount"].id)
    assert rules[0]["discount_type"] == "fixed_amount"
    assert Decimal(rules[0]["discount_value"]) == Decimal("12.50")
    assert rules[0]["condition_name"] == "Atacado"


def test_visibility_rules_scoped_to_company(client: TestClient, catalog) -> None:
    response = client.get(
        "/integration/visibility-rules",
        params={
            "user_id": str(catalog["user"].id),
            "company_id": str(catalog["company"].id),
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["company_id"] == str(catalog["company"].id)
    assert [rule["rule_id"] for rule in body["rules"]] == [str(catalog["visibility"].id)]
    assert "discount_value" not in body["rules"][0]


def test_rules_require_a_user(client: TestClient) -> None:
    response = client.get("/integration/discount-rules")

    assert response.status_code == 422


def test_expired_conditions_are_not_listed(client: TestClient, store, catalog) -> None:
    catalog["condition"].valid_until = NOW - timedelta(days=1)

    response = client.get(
        "/integration/discount-rules", params={"user_id": str(catalog["user"].id)}
    )

    assert response.status_code == 200
    assert response.json()["rules"] == []


def test_expression_context(client: TestClient, catalog) -> None:
    response = client.get(
        f"/integration/users/{catalog['user'].id}/expression-context"
    )

    assert response.status_code == 200
    body = response.json()
    assert body["user_type"] == "self_registered"
    assert body["role"] == "customer"
    assert body["company"] == {
        "company_id": str(catalog["company"].id),
        "tax_id": catalog["company"].tax_id,
        "trade_name": "Brindes Sul",
    }


def test_access_check(client: TestClient, store, catalog) -> None:
    granted = client.get(f"/integration/users/{catalog['user'].id}/access-check")
    loner = store.add_user()
    denied = client.get(f"/integration/users/{loner.id}/access-check")

    assert granted.status_code == 200
    assert granted.json()["has_access"] is True
    assert denied.status_code == 200
    assert denied.json()["has_company"] is False
    assert denied.json()["has_access"] is False


@pytest.mark.parametrize(
    ("path", "detail"),
    [
        ("/integration/users/{id}/commercial-conditions", "Usuario no encontrado"),
        ("/integration/companies/{id}/commercial-conditions", "Empresa no encontrada"),
        ("/integration/users/{id}/expression-context", "Usuario no encontrado"),
        ("/integration/users/{id}/access-check", "Usuario no encontrado"),
    ],
)
def test_unknown_entities_return_404(client: TestClient, path: str, detail: str) -> None:
    response = client.get(path.format(id=uuid4()))

    assert response.status_code == 404
    assert response.json()["detail"] == detail


def test_unknown_scoping_company_returns_404(client: TestClient, catalog) -> None:
    response = client.get(
        "/integration/discount-rules",
        params={"user_id": str(catalog["user"].id), "company_id": str(uuid4())},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Empresa no encontrada"


def test_unavailable_store_returns_503(client: TestClient, store, catalog) -> None:
    store.unavailable_companies.add(catalog["company"].id)

    response = client.get(
        "/integration/discount-rules", params={"user_id": str(catalog["user"].id)}
    )

    assert response.status_code == 503


def test_slow_store_returns_504(
    client: TestClient, store, catalog, timeout_override
) -> None:
    store.delay = 0.5
    timeout_override["value"] = 0.05

    response = client.get(
        f"/integration/users/{catalog['user'].id}/commercial-conditions"
    )

    assert response.status_code == 504
