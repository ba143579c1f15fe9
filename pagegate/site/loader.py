"""Load the business configuration file into a SiteConfig."""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from pagegate.site.errors import SiteConfigError
from pagegate.site.models import SiteConfig

logger = structlog.get_logger(__name__)


def parse_site_config(data: Any, base_url: str | None = None) -> SiteConfig:
    """
    Validate raw configuration data.

    Args:
        data: Decoded JSON document
        base_url: Optional override for ``business.url``

    Returns:
        Immutable SiteConfig

    Raises:
        SiteConfigError: on a non-object document, a missing identity field
            or duplicate slugs
    """
    if not isinstance(data, dict):
        raise SiteConfigError("Site configuration must be a JSON object")

    if base_url:
        business = data.get("business")
        business = dict(business) if isinstance(business, dict) else {}
        business["url"] = base_url
        data = {**data, "business": business}

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise SiteConfigError(
            f"Invalid site configuration at '{location}': {first.get('msg', 'invalid value')}"
        ) from e


def load_site_config(path: str | Path, base_url: str | None = None) -> SiteConfig:
    """
    Read and validate the business configuration JSON file.

    Args:
        path: Location of the configuration file
        base_url: Optional override for ``business.url``

    Returns:
        Immutable SiteConfig

    Raises:
        SiteConfigError: if the file is missing, not JSON, or invalid
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SiteConfigError(f"Cannot read site configuration {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SiteConfigError(f"Site configuration {path} is not valid JSON: {e}") from e

    site = parse_site_config(data, base_url=base_url)

    logger.info(
        "site_config_loaded",
        path=str(path),
        business=site.profile.business.name,
        services=len(site.services),
        service_areas=len(site.service_areas),
    )
    return site
