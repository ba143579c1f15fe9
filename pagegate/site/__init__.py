"""Business profile, catalogs, and the predicates that test them."""

from pagegate.site.errors import DuplicateSlugError, SiteConfigError
from pagegate.site.loader import load_site_config, parse_site_config
from pagegate.site.models import (
    BusinessProfile,
    Service,
    ServiceArea,
    SiteConfig,
)

__all__ = [
    "BusinessProfile",
    "DuplicateSlugError",
    "Service",
    "ServiceArea",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
    "parse_site_config",
]
