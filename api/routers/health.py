"""Liveness and readiness endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from api.deps import SettingsDep, get_site
from api.exceptions import ConfigurationError
from pagegate import __version__

router = APIRouter(tags=["Health"])

_server_start_time = time.time()


def _uptime() -> int:
    return int(time.time() - _server_start_time)


class HealthResponse(BaseModel):
    status: str = Field(..., description="Health status")
    timestamp: str = Field(..., description="ISO 8601 timestamp")
    version: str = Field(..., description="API version")
    uptime_seconds: int = Field(..., description="Server uptime in seconds")


class SiteConfigCheck(BaseModel):
    status: str = Field(..., description="healthy or unhealthy")
    path: str = Field(..., description="Configured SITE_CONFIG_PATH")
    services: int | None = None
    service_areas: int | None = None
    error: str | None = None


class ReadyResponse(HealthResponse):
    site_config: SiteConfigCheck


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns healthy if the API is running. Does not load the site configuration;
    use /ready for that.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        uptime_seconds=_uptime(),
    )


@router.get("/ready", response_model=ReadyResponse)
async def readiness_check(response: Response, settings: SettingsDep) -> ReadyResponse:
    """Load the site configuration; 503 while it cannot be served."""
    path = str(settings.site_config_path)
    try:
        site = get_site(settings)
    except ConfigurationError as e:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        check = SiteConfigCheck(status="unhealthy", path=path, error=e.message)
    else:
        check = SiteConfigCheck(
            status="healthy",
            path=path,
            services=len(site.services),
            service_areas=len(site.service_areas),
        )

    return ReadyResponse(
        status=check.status,
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        uptime_seconds=_uptime(),
        site_config=check,
    )
