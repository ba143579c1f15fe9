"""Tests for per-page structured-metadata assembly."""

import json

from pagegate.pages import PageCandidate, PageType, enumerate_candidates
from pagegate.schema import PageSchemaAssembler, assemble_page_schema


def _types(documents: list[dict]) -> list[str]:
    return [doc["@type"] for doc in documents]


class TestPageSchemaAssembler:
    """Tests for PageSchemaAssembler."""

    def test_home_documents(self, site) -> None:
        """Home carries the business, website and default FAQs."""
        documents = assemble_page_schema(site, PageCandidate(PageType.HOME))
        assert _types(documents) == ["HousePainter", "WebSite", "FAQPage"]

    def test_service_documents(self, site) -> None:
        """Service pages carry service, offer, how-to, gallery, breadcrumb and FAQ."""
        candidate = PageCandidate(PageType.SERVICE, service=site.services[0])
        documents = assemble_page_schema(site, candidate)

        assert _types(documents) == [
            "Service",
            "Offer",
            "HowTo",
            "ImageGallery",
            "BreadcrumbList",
            "FAQPage",
        ]

    def test_service_without_optional_content(self, site, make_service) -> None:
        """No process, projects or FAQs leaves those documents out."""
        service = make_service(process=[], faqs=[], showProjects=False)
        documents = assemble_page_schema(site, PageCandidate(PageType.SERVICE, service=service))

        assert _types(documents) == ["Service", "Offer", "BreadcrumbList"]

    def test_how_to_estimated_cost(self, site) -> None:
        """The how-to cost uses the numeric price bounds."""
        candidate = PageCandidate(PageType.SERVICE, service=site.services[0])
        how_to = next(d for d in assemble_page_schema(site, candidate) if d["@type"] == "HowTo")

        assert how_to["estimatedCost"] == {
            "@type": "MonetaryAmount",
            "currency": "USD",
            "minValue": 2500,
            "maxValue": 8000,
        }
        assert len(how_to["step"]) == 5

    def test_gallery_pairs_before_and_after(self, site) -> None:
        """Each project contributes its after and before images."""
        candidate = PageCandidate(PageType.SERVICE, service=site.services[0])
        gallery = next(
            d for d in assemble_page_schema(site, candidate) if d["@type"] == "ImageGallery"
        )

        assert [img["caption"] for img in gallery["image"]] == [
            "After: Colonial Living Room",
            "Before: Colonial Living Room",
        ]

    def test_location_documents(self, site) -> None:
        """Location pages carry an area-scoped business and breadcrumbs."""
        candidate = PageCandidate(PageType.LOCATION, area=site.service_areas[0])
        business, breadcrumbs = assemble_page_schema(site, candidate)

        assert business["areaServed"] == [{"@type": "City", "name": "Framingham, MA"}]
        assert [i["name"] for i in breadcrumbs["itemListElement"]] == [
            "Home",
            "Locations",
            "Framingham",
        ]

    def test_combo_documents(self, site) -> None:
        """Combo pages describe the service in the area."""
        candidate = PageCandidate(
            PageType.COMBO, service=site.services[0], area=site.service_areas[0]
        )
        documents = assemble_page_schema(site, candidate)

        assert _types(documents) == ["Service", "HousePainter", "BreadcrumbList", "FAQPage"]
        assert documents[0]["@id"] == (
            "https://metrowestpropainters.com/locations/framingham/interior-painting"
        )

    def test_about_documents(self, site) -> None:
        """About carries the web page, business, owner and breadcrumbs."""
        documents = assemble_page_schema(site, PageCandidate(PageType.ABOUT))
        assert _types(documents) == ["WebPage", "HousePainter", "Person", "BreadcrumbList"]

    def test_contact_documents(self, site) -> None:
        """Contact carries the web page, business and breadcrumbs."""
        documents = assemble_page_schema(site, PageCandidate(PageType.CONTACT))
        assert _types(documents) == ["WebPage", "HousePainter", "BreadcrumbList"]


class TestGlobalFacts:
    """Site-wide facts appear exactly once."""

    def test_aggregate_rating_once_across_site(self, site) -> None:
        """Only the home page carries the aggregate rating."""
        assembler = PageSchemaAssembler(site)
        carriers = [
            candidate.path
            for candidate in enumerate_candidates(site)
            for doc in assembler.documents_for(candidate)
            if "aggregateRating" in doc
        ]

        assert carriers == ["/"]

    def test_documents_are_json_serializable(self, site) -> None:
        """Every document serializes without custom encoders."""
        assembler = PageSchemaAssembler(site)
        for candidate in enumerate_candidates(site):
            json.dumps(assembler.documents_for(candidate))
