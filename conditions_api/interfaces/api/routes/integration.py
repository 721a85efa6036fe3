"""Rutas de integración consumidas por catálogo, carrito y cotizaciones."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from conditions_api.application.ports import EntityStore
from conditions_api.application.use_cases.integration import (
    build_user_context as build_user_context_uc,
    check_access as check_access_uc,
    resolve_company_commercial_conditions as resolve_company_commercial_conditions_uc,
    resolve_discount_rules as resolve_discount_rules_uc,
    resolve_user_commercial_conditions as resolve_user_commercial_conditions_uc,
    resolve_visibility_rules as resolve_visibility_rules_uc,
)
from conditions_api.domain.exceptions import CommercialConditionsError
from conditions_api.interfaces.api.dependencies import (
    get_entity_store,
    get_resolution_timeout,
)
from conditions_api.interfaces.api.routes_helpers import to_http_exception
from conditions_api.interfaces.api.schemas import (
    AccessCheckRead,
    CommercialConditionsRead,
    DiscountRulesRead,
    UserExpressionContextRead,
    VisibilityRulesRead,
)

router = APIRouter(prefix="/integration", tags=["integration"])
logger = logging.getLogger(__name__)


@router.get(
    "/users/{user_id}/commercial-conditions",
    response_model=CommercialConditionsRead,
)
async def read_user_commercial_conditions(
    user_id: UUID,
    store: EntityStore = Depends(get_entity_store),
    timeout: float | None = Depends(get_resolution_timeout),
) -> CommercialConditionsRead:
    """Devuelve las condiciones comerciales vigentes de las empresas del usuario."""

    logger.info("Resolviendo condiciones comerciales del usuario %s", user_id)
    try:
        report = await resolve_user_commercial_conditions_uc(
            store, user_id, timeout=timeout
        )
    except CommercialConditionsError as exc:
        raise to_http_exception(exc) from exc
    return CommercialConditionsRead.model_validate(report)


@router.get(
    "/companies/{company_id}/commercial-conditions",
    response_model=CommercialConditionsRead,
)
async def read_company_commercial_conditions(
    company_id: UUID,
    store: EntityStore = Depends(get_entity_store),
    timeout: float | None = Depends(get_resolution_timeout),
) -> CommercialConditionsRead:
    """Devuelve las condiciones comerciales vigentes asignadas a la empresa."""

    logger.info("Resolviendo condiciones comerciales de la empresa %s", company_id)
    try:
        report = await resolve_company_commercial_conditions_uc(
            store, company_id, timeout=timeout
        )
    except CommercialConditionsError as exc:
        raise to_http_exception(exc) from exc
    return CommercialConditionsRead.model_validate(report)


@router.get("/visibility-rules", response_model=VisibilityRulesRead)
async def read_visibility_rules(
    user_id: UUID = Query(..., description="Usuario para el que se resuelven las reglas"),
    company_id: UUID | None = Query(
        None,
        description="Si se indica, limita las reglas a las asignadas a esta empresa.",
    ),
    store: EntityStore = Depends(get_entity_store),
    timeout: float | None = Depends(get_resolution_timeout),
) -> VisibilityRulesRead:
    """Devuelve las reglas de visibilidad ordenadas por prioridad."""

    logger.info(
        "Resolviendo reglas de visibilidad del usuario %s (empresa %s)",
        user_id,
        company_id,
    )
    try:
        rules = await resolve_visibility_rules_uc(
            store, user_id, company_id=company_id, timeout=timeout
        )
    except CommercialConditionsError as exc:
        raise to_http_exception(exc) from exc
    return VisibilityRulesRead.model_validate(rules)


@router.get("/discount-rules", response_model=DiscountRulesRead)
async def read_discount_rules(
    user_id: UUID = Query(..., description="Usuario para el que se resuelven las reglas"),
    company_id: UUID | None = Query(
        None,
        description="Si se indica, limita las reglas a las asignadas a esta empresa.",
    ),
    store: EntityStore = Depends(get_entity_store),
    timeout: float | None = Depends(get_resolution_timeout),
) -> DiscountRulesRead:
    """Devuelve las reglas de descuento ordenadas por prioridad."""

    logger.info(
        "Resolviendo reglas de descuento del usuario %s (empresa %s)",
        user_id,
        company_id,
    )
    try:
        rules = await resolve_discount_rules_uc(
            store, user_id, company_id=company_id, timeout=timeout
        )
    except CommercialConditionsError as exc:
        raise to_http_exception(exc) from exc
    return DiscountRulesRead.model_validate(rules)


@router.get(
    "/users/{user_id}/expression-context",
    response_model=UserExpressionContextRead,
)
async def read_user_expression_context(
    user_id: UUID,
    store: EntityStore = Depends(get_entity_store),
    timeout: float | None = Depends(get_resolution_timeout),
) -> UserExpressionContextRead:
    """Devuelve las variables del usuario disponibles para evaluar expresiones."""

    try:
        context = await build_user_context_uc(store, user_id, timeout=timeout)
    except CommercialConditionsError as exc:
        raise to_http_exception(exc) from exc
    return UserExpressionContextRead.model_validate(context)


@router.get("/users/{user_id}/access-check", response_model=AccessCheckRead)
async def read_access_check(
    user_id: UUID,
    store: EntityStore = Depends(get_entity_store),
    timeout: float | None = Depends(get_resolution_timeout),
) -> AccessCheckRead:
    """Informa el estado del usuario, su empresa y sus condiciones vigentes."""

    try:
        result = await check_access_uc(store, user_id, timeout=timeout)
    except CommercialConditionsError as exc:
        raise to_http_exception(exc) from exc
    return AccessCheckRead.model_validate(result)


__all__ = ["router"]
