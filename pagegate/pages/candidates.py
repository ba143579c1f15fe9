"""Candidate pages derived from the catalogs.

Candidates are ephemeral: they are produced fresh on every run and carry
only references to the entities they describe.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from pagegate.site.models import Service, ServiceArea, SiteConfig


class PageType(str, Enum):
    """Kinds of page the template can generate."""

    HOME = "home"
    SERVICE = "service"
    LOCATION = "location"
    COMBO = "combo"
    ABOUT = "about"
    CONTACT = "contact"


@dataclass(frozen=True)
class PageCandidate:
    """One page the site could publish."""

    page_type: PageType
    service: Service | None = None
    area: ServiceArea | None = None

    def __post_init__(self) -> None:
        needs_service = self.page_type in (PageType.SERVICE, PageType.COMBO)
        needs_area = self.page_type in (PageType.LOCATION, PageType.COMBO)
        if needs_service != (self.service is not None) or needs_area != (self.area is not None):
            raise ValueError(f"{self.page_type.value} candidate has the wrong entities")

    @property
    def path(self) -> str:
        """Site-relative route for this page."""
        if self.page_type == PageType.SERVICE:
            return f"/services/{self.service.slug}"
        if self.page_type == PageType.LOCATION:
            return f"/locations/{self.area.slug}"
        if self.page_type == PageType.COMBO:
            return f"/locations/{self.area.slug}/{self.service.slug}"
        if self.page_type == PageType.ABOUT:
            return "/about"
        if self.page_type == PageType.CONTACT:
            return "/contact"
        return "/"

    def url(self, base_url: str) -> str:
        """Absolute URL; the home page is the bare base URL."""
        base = base_url.rstrip("/")
        return base if self.page_type == PageType.HOME else f"{base}{self.path}"

    @property
    def name(self) -> str:
        if self.page_type == PageType.SERVICE:
            return f"Service: {self.service.name}"
        if self.page_type == PageType.LOCATION:
            return f"Location: {self.area.label}"
        if self.page_type == PageType.COMBO:
            return f"{self.service.name} in {self.area.city}"
        return {
            PageType.HOME: "Homepage",
            PageType.ABOUT: "About Page",
            PageType.CONTACT: "Contact Page",
        }[self.page_type]


HOME = PageCandidate(PageType.HOME)
ABOUT = PageCandidate(PageType.ABOUT)
CONTACT = PageCandidate(PageType.CONTACT)


def service_candidates(site: SiteConfig) -> list[PageCandidate]:
    return [PageCandidate(PageType.SERVICE, service=s) for s in site.services]


def location_candidates(site: SiteConfig) -> list[PageCandidate]:
    return [PageCandidate(PageType.LOCATION, area=a) for a in site.service_areas]


def enumerate_combos(site: SiteConfig) -> Iterator[PageCandidate]:
    """Every (area, service) pair, areas in catalog order then services."""
    for area in site.service_areas:
        for service in site.services:
            yield PageCandidate(PageType.COMBO, service=service, area=area)


def enumerate_candidates(site: SiteConfig) -> list[PageCandidate]:
    """All candidates: home, services, locations, combos, about, contact."""
    return [
        HOME,
        *service_candidates(site),
        *location_candidates(site),
        *enumerate_combos(site),
        ABOUT,
        CONTACT,
    ]


def candidate_for_path(site: SiteConfig, path: str) -> PageCandidate | None:
    """Resolve a route back to its candidate, or None if it is not a known page."""
    parts = [p for p in path.strip().split("/") if p]
    if not parts:
        return HOME
    if parts == ["about"]:
        return ABOUT
    if parts == ["contact"]:
        return CONTACT
    if len(parts) == 2 and parts[0] == "services":
        service = site.service_by_slug(parts[1])
        return PageCandidate(PageType.SERVICE, service=service) if service else None
    if len(parts) in (2, 3) and parts[0] == "locations":
        area = site.area_by_slug(parts[1])
        if area is None:
            return None
        if len(parts) == 2:
            return PageCandidate(PageType.LOCATION, area=area)
        service = site.service_by_slug(parts[2])
        return PageCandidate(PageType.COMBO, service=service, area=area) if service else None
    return None
