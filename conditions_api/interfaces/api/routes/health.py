from fastapi import APIRouter

from conditions_api.config import get_settings
from conditions_api.interfaces.api.schemas import HealthRead
from conditions_api.utils import now_in_app_timezone

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthRead)
async def health() -> HealthRead:
    return HealthRead(
        status="Healthy",
        timestamp=now_in_app_timezone(),
        service=get_settings().service_name,
    )
