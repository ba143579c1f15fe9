"""FastAPI dependencies for dependency injection."""

from functools import lru_cache
from pathlib import Path
from typing import Annotated

import structlog
from fastapi import Depends

from api.config import Settings, get_settings
from api.exceptions import ConfigurationError
from pagegate.site import SiteConfig, SiteConfigError, load_site_config
from pagegate.tasks import SiteEvaluation, evaluate_site

__all__ = ["EvaluationDep", "SettingsDep", "SiteDep", "get_evaluation", "get_site"]

logger = structlog.get_logger(__name__)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def _load_site(path: Path, site_url: str | None) -> SiteConfig:
    return load_site_config(path, base_url=site_url)


def get_site(settings: SettingsDep) -> SiteConfig:
    """Get the business configuration, loaded once per path."""
    try:
        return _load_site(settings.site_config_path, settings.site_url)
    except SiteConfigError as e:
        logger.error(
            "site_config_failed",
            path=str(settings.site_config_path),
            error=str(e),
        )
        raise ConfigurationError(
            str(e),
            details={"path": str(settings.site_config_path)},
        ) from e


SiteDep = Annotated[SiteConfig, Depends(get_site)]


def get_evaluation(site: SiteDep, settings: SettingsDep) -> SiteEvaluation:
    """Score every candidate of the configured site."""
    return evaluate_site(site, max_workers=settings.get_evaluation_workers())


EvaluationDep = Annotated[SiteEvaluation, Depends(get_evaluation)]
