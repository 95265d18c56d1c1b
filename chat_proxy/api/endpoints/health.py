"""
Health check endpoint.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from chat_proxy.api.models import HealthResponse
from chat_proxy.config.settings import Settings, get_settings

router = APIRouter(tags=["health"])


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-01-01T00:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Report liveness and whether the upstream API key is configured."""
    return HealthResponse(has_key=bool(settings.chat_api_key), time=utc_timestamp())
