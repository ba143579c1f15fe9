"""Per-page selection of structured-metadata documents.

The home page is the designated primary identity page: it is the only page
whose business document carries the aggregate rating. Every other page that
describes the business omits it.
"""

from typing import Any

import structlog

from pagegate.pages.candidates import PageCandidate, PageType
from pagegate.schema.builders import (
    BreadcrumbItem,
    GalleryImage,
    breadcrumb_schema,
    faq_schema,
    how_to_schema,
    image_gallery_schema,
    local_business_schema,
    offer_schema,
    owner_schema,
    service_schema,
    web_page_schema,
    website_schema,
)
from pagegate.site.models import Service, ServiceArea, SiteConfig

logger = structlog.get_logger(__name__)

PRIMARY_IDENTITY_PAGE = PageType.HOME

# Projects shown in a service's image gallery
MAX_GALLERY_PROJECTS = 6


class PageSchemaAssembler:
    """Builds the JSON-LD documents for each candidate page."""

    def __init__(self, site: SiteConfig):
        self.site = site

    def documents_for(self, candidate: PageCandidate) -> list[dict[str, Any]]:
        """
        Assemble the documents for one page.

        Args:
            candidate: Page to describe

        Returns:
            List of JSON-LD dicts; builders that have nothing to say are dropped
        """
        builders = {
            PageType.HOME: self._home,
            PageType.SERVICE: lambda: self._service(candidate.service),
            PageType.LOCATION: lambda: self._location(candidate.area),
            PageType.COMBO: lambda: self._combo(candidate.area, candidate.service),
            PageType.ABOUT: self._about,
            PageType.CONTACT: self._contact,
        }
        documents = [doc for doc in builders[candidate.page_type]() if doc is not None]

        logger.debug(
            "page_schema_assembled",
            path=candidate.path,
            types=[doc["@type"] for doc in documents],
        )
        return documents

    def _breadcrumbs(self, *trail: tuple[str, str]) -> dict[str, Any] | None:
        base = self.site.base_url
        items = [BreadcrumbItem("Home", base)]
        items.extend(BreadcrumbItem(name, f"{base}{path}") for name, path in trail)
        return breadcrumb_schema(items)

    def _business(
        self,
        page_type: PageType,
        area: ServiceArea | None = None,
        page_url: str | None = None,
    ) -> dict[str, Any]:
        return local_business_schema(
            self.site,
            include_aggregate_rating=page_type == PRIMARY_IDENTITY_PAGE,
            area=area,
            page_url=page_url,
        )

    def _home(self) -> list[dict[str, Any] | None]:
        return [
            self._business(PageType.HOME),
            website_schema(self.site),
            faq_schema(self.site.profile.default_faqs),
        ]

    def _gallery(self, service: Service) -> dict[str, Any] | None:
        if not service.show_projects:
            return None
        images: list[GalleryImage] = []
        for project in self.site.projects_for(service.slug)[:MAX_GALLERY_PROJECTS]:
            for label, url in (("After", project.after_image), ("Before", project.before_image)):
                if url:
                    images.append(
                        GalleryImage(
                            url=url,
                            name=f"{project.title} - {label}",
                            description=project.description,
                            caption=f"{label}: {project.title}",
                            content_location=project.location,
                        )
                    )
        return image_gallery_schema(self.site, f"{service.name} Projects", images)

    def _how_to(self, service: Service) -> dict[str, Any] | None:
        address = self.site.profile.address
        estimated_cost = None
        if service.price_min is not None and service.price_max is not None:
            estimated_cost = {
                "currency": service.price_currency,
                "minValue": service.price_min,
                "maxValue": service.price_max,
            }
        return how_to_schema(
            name=f"How We Handle {service.name}",
            description=(
                f"Our step-by-step {service.name.lower()} process in "
                f"{address.city}, {address.state}."
            ),
            steps=service.process,
            estimated_cost=estimated_cost,
            supplies=service.materials,
        )

    def _service(self, service: Service) -> list[dict[str, Any] | None]:
        return [
            service_schema(self.site, service),
            offer_schema(self.site, service),
            self._how_to(service),
            self._gallery(service),
            self._breadcrumbs(
                ("Services", "/services"),
                (service.name, f"/services/{service.slug}"),
            ),
            faq_schema(service.faqs),
        ]

    def _location(self, area: ServiceArea) -> list[dict[str, Any] | None]:
        url = f"{self.site.base_url}/locations/{area.slug}"
        return [
            self._business(PageType.LOCATION, area=area, page_url=url),
            self._breadcrumbs(
                ("Locations", "/locations"),
                (area.city, f"/locations/{area.slug}"),
            ),
        ]

    def _combo(self, area: ServiceArea, service: Service) -> list[dict[str, Any] | None]:
        url = f"{self.site.base_url}/locations/{area.slug}/{service.slug}"
        return [
            service_schema(self.site, service, url=url, area=area),
            self._business(PageType.COMBO, area=area, page_url=url),
            self._breadcrumbs(
                ("Locations", "/locations"),
                (area.city, f"/locations/{area.slug}"),
                (service.name, f"/locations/{area.slug}/{service.slug}"),
            ),
            faq_schema(service.faqs),
        ]

    def _about(self) -> list[dict[str, Any] | None]:
        business = self.site.profile.business
        return [
            web_page_schema(
                self.site,
                url=f"{self.site.base_url}/about",
                name=f"About {business.name}",
                description=self.site.profile.about.story,
            ),
            self._business(PageType.ABOUT),
            owner_schema(self.site),
            self._breadcrumbs(("About", "/about")),
        ]

    def _contact(self) -> list[dict[str, Any] | None]:
        business = self.site.profile.business
        return [
            web_page_schema(
                self.site,
                url=f"{self.site.base_url}/contact",
                name=f"Contact {business.name}",
            ),
            self._business(PageType.CONTACT),
            self._breadcrumbs(("Contact", "/contact")),
        ]


def assemble_page_schema(site: SiteConfig, candidate: PageCandidate) -> list[dict[str, Any]]:
    """Convenience wrapper around PageSchemaAssembler."""
    return PageSchemaAssembler(site).documents_for(candidate)
