"""Helper utilities shared across API route handlers."""

import logging

from fastapi import HTTPException, status

from conditions_api.domain.exceptions import (
    CommercialConditionsError,
    NotFoundError,
    ResolutionTimeoutError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

_NOT_FOUND_MESSAGES = {
    "User": "Usuario no encontrado",
    "Company": "Empresa no encontrada",
}


def to_http_exception(exc: CommercialConditionsError) -> HTTPException:
    """Translate a resolution error into the HTTP error returned to callers."""

    if isinstance(exc, NotFoundError):
        detail = _NOT_FOUND_MESSAGES.get(exc.entity, str(exc))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    if isinstance(exc, ResolutionTimeoutError):
        logger.warning("Resolución de condiciones excedió el tiempo límite: %s", exc)
        return HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail="La resolución de condiciones excedió el tiempo límite",
        )
    if isinstance(exc, StoreUnavailableError):
        logger.error("Almacén de entidades no disponible: %s", exc)
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Servicio de datos no disponible",
        )
    logger.exception("Error inesperado al resolver condiciones: %s", exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Error al resolver condiciones comerciales",
    )
