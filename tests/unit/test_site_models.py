"""Tests for the business configuration models."""

import pytest
from pydantic import ValidationError

from pagegate.site import DuplicateSlugError, SiteConfig
from pagegate.site.models import Address, Reviews, Service


class TestSiteConfig:
    """Tests for SiteConfig parsing."""

    def test_flat_layout_nests_profile(self, site: SiteConfig) -> None:
        """Profile sections at the top level end up under profile."""
        assert site.profile.business.name == "Metrowest Pro Painters"
        assert site.profile.address.city == "Framingham"
        assert len(site.profile.default_faqs) == 3

    def test_camel_case_keys_map_to_attributes(self, site: SiteConfig) -> None:
        """camelCase keys populate snake_case attributes."""
        area = site.service_areas[0]
        assert area.local_paragraph.startswith("Homes near")
        assert area.regional_issues == ("Lead paint in pre-1978 homes",)
        assert site.services[0].common_issues[0] == "Peeling paint from bathroom moisture"

    def test_base_url_strips_trailing_slash(self, site: SiteConfig) -> None:
        """base_url never ends with a slash."""
        assert site.base_url == "https://metrowestpropainters.com"

    def test_models_are_frozen(self, site: SiteConfig) -> None:
        """Entities cannot be mutated after loading."""
        with pytest.raises(ValidationError):
            site.services[0].name = "Changed"

    def test_duplicate_service_slug(self, site_data: dict) -> None:
        """Two services sharing a slug are rejected."""
        site_data["services"] = [site_data["services"][0], site_data["services"][0]]

        with pytest.raises(DuplicateSlugError) as exc_info:
            SiteConfig.model_validate(site_data)

        assert exc_info.value.catalog == "services"
        assert exc_info.value.slugs == ["interior-painting"]

    def test_duplicate_area_slug(self, site_data: dict) -> None:
        """Two areas sharing a slug are rejected."""
        area = site_data["serviceAreas"][0]
        site_data["serviceAreas"] = [area, {**area, "city": "Elsewhere"}]

        with pytest.raises(DuplicateSlugError) as exc_info:
            SiteConfig.model_validate(site_data)

        assert exc_info.value.catalog == "serviceAreas"

    def test_lookups_by_slug(self, site: SiteConfig) -> None:
        """Services and areas resolve by slug; unknown slugs give None."""
        assert site.service_by_slug("interior-painting").name == "Interior Painting"
        assert site.area_by_slug("framingham").city == "Framingham"
        assert site.service_by_slug("roofing") is None
        assert site.area_by_slug("boston") is None

    def test_projects_for_unknown_service(self, site: SiteConfig) -> None:
        """A service without projects gets an empty tuple."""
        assert site.projects_for("exterior-painting") == ()
        assert len(site.projects_for("interior-painting")) == 1


class TestOptionalFields:
    """Tests for optional field normalization."""

    def test_blank_strings_become_none(self) -> None:
        """Blank optional text is treated as absent."""
        service = Service.model_validate(
            {"name": "Wallpaper", "slug": "wallpaper", "priceRange": "  ", "duration": ""}
        )
        assert service.price_range is None
        assert service.duration is None

    def test_collections_default_empty(self) -> None:
        """Missing lists default to empty tuples."""
        service = Service.model_validate({"name": "Wallpaper", "slug": "wallpaper"})
        assert service.process == ()
        assert service.faqs == ()
        assert service.index is True
        assert service.show_projects is False

    def test_wrong_type_rejected(self) -> None:
        """A list where a string belongs is a validation error."""
        with pytest.raises(ValidationError):
            Service.model_validate({"name": ["Wallpaper"], "slug": "wallpaper"})


class TestAddress:
    """Tests for Address helpers."""

    def test_street_line_with_suite(self) -> None:
        """Suite is appended to the street."""
        address = Address(street="245 Main Street", suite="Suite 102", city="X", state="MA")
        assert address.street_line == "245 Main Street, Suite 102"

    def test_full_without_street(self) -> None:
        """Missing street still produces a usable line."""
        address = Address(city="Framingham", state="MA", zip="01701")
        assert address.full() == "Framingham, MA 01701"


class TestReviews:
    """Tests for Reviews parsing."""

    def test_flat_platform_form(self) -> None:
        """Platforms listed beside aggregate are collected."""
        reviews = Reviews.model_validate(
            {
                "google": {"reviewCount": 10, "rating": 4.5},
                "aggregate": {"totalReviews": 10, "averageRating": 4.5},
            }
        )
        assert set(reviews.platforms) == {"google"}
        assert reviews.platforms["google"].review_count == 10
        assert reviews.aggregate.total_reviews == 10

    def test_without_aggregate(self) -> None:
        """Aggregate is optional."""
        reviews = Reviews.model_validate({"yelp": {"reviewCount": 3, "rating": 4.0}})
        assert reviews.aggregate is None
