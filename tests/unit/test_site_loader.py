"""Tests for loading the business configuration file."""

import json
from pathlib import Path

import pytest

from pagegate.schema.builders import opening_hours
from pagegate.site import DuplicateSlugError, SiteConfigError, load_site_config, parse_site_config
from pagegate.site.predicates import has_valid_aggregate_rating, has_valid_geo


class TestParseSiteConfig:
    """Tests for parse_site_config."""

    def test_parses_valid_data(self, site_data: dict) -> None:
        """Valid data produces a SiteConfig."""
        site = parse_site_config(site_data)
        assert len(site.services) == 1
        assert len(site.service_areas) == 1

    def test_rejects_non_object(self) -> None:
        """A JSON array is not a configuration."""
        with pytest.raises(SiteConfigError, match="JSON object"):
            parse_site_config([])

    def test_reports_location_of_invalid_field(self, site_data: dict) -> None:
        """Invalid identity fields are fatal and the error names the offending path."""
        site_data["services"][0]["slug"] = ["interior-painting"]

        with pytest.raises(SiteConfigError, match="services"):
            parse_site_config(site_data)

    @pytest.mark.parametrize(
        "section,index,key,value",
        [
            ("serviceAreas", 0, "landmarks", None),
            ("serviceAreas", 0, "neighborhoods", "Nobscot"),
            ("services", 0, "features", None),
            ("services", 0, "process", "five steps"),
            ("services", 0, "priceMin", "call us"),
            ("services", 0, "index", None),
        ],
    )
    def test_malformed_catalog_field_is_absent(
        self, site_data: dict, section: str, index: int, key: str, value: object
    ) -> None:
        """Null or wrongly typed optional catalog data loads as absent."""
        site_data[section][index][key] = value

        site = parse_site_config(site_data)

        entity = getattr(site, "service_areas" if section == "serviceAreas" else "services")[0]
        attribute = {"priceMin": "price_min"}.get(key, key)
        assert getattr(entity, attribute) in ((), None, True)

    def test_null_average_rating_is_absent(self, site_data: dict) -> None:
        """A null aggregate rating loads and fails the rating predicate."""
        site_data["reviews"]["aggregate"]["averageRating"] = None

        site = parse_site_config(site_data)

        assert site.profile.reviews.aggregate.average_rating is None
        assert not has_valid_aggregate_rating(site.profile)

    def test_non_numeric_latitude_is_absent(self, site_data: dict) -> None:
        """A non-numeric coordinate loads and fails the geo predicate."""
        site_data["geo"]["latitude"] = "n/a"

        site = parse_site_config(site_data)

        assert site.profile.geo.latitude is None
        assert not has_valid_geo(site.profile)

    def test_malformed_hours_entry_is_skipped(self, site_data: dict) -> None:
        """A non-string hours entry loads and is left out of the opening hours."""
        site_data["hours"]["monday"] = {"open": "07:00", "close": "18:00"}

        site = parse_site_config(site_data)

        days = [spec["dayOfWeek"] for spec in opening_hours(site.profile.hours)]
        assert "Monday" not in days
        assert "Tuesday" in days

    def test_null_sections_load_as_empty(self, site_data: dict) -> None:
        """Null profile sections and catalogs fall back to their empty defaults."""
        site_data.update(
            trustSignals=None, reviews=None, social=None, about=None, sitemap=None, projects=None
        )
        site_data["serviceAreas"] = None

        site = parse_site_config(site_data)

        assert site.profile.trust_signals.license is None
        assert site.profile.reviews.aggregate is None
        assert site.profile.social == {}
        assert site.profile.about.owner is None
        assert site.service_areas == ()
        assert site.projects == {}

    def test_malformed_list_entries_are_dropped(self, site_data: dict) -> None:
        """FAQ and step entries without their required text are skipped."""
        service = site_data["services"][0]
        service["faqs"] = [{"question": "Only a question?"}, "text", service["faqs"][0]]
        service["process"] = [None, {"step": 1}, service["process"][0]]

        site = parse_site_config(site_data)

        assert len(site.services[0].faqs) == 1
        assert len(site.services[0].process) == 1

    def test_missing_business_is_fatal(self, site_data: dict) -> None:
        """The business section is required."""
        del site_data["business"]

        with pytest.raises(SiteConfigError):
            parse_site_config(site_data)

    def test_base_url_override(self, site_data: dict) -> None:
        """An explicit base URL replaces business.url."""
        site = parse_site_config(site_data, base_url="https://staging.example.com/")
        assert site.base_url == "https://staging.example.com"

    def test_duplicate_slug_propagates(self, site_data: dict) -> None:
        """Duplicate slugs surface as DuplicateSlugError."""
        site_data["services"].append(dict(site_data["services"][0]))

        with pytest.raises(DuplicateSlugError):
            parse_site_config(site_data)


class TestLoadSiteConfig:
    """Tests for load_site_config."""

    def test_loads_file(self, tmp_path: Path, site_data: dict) -> None:
        """Reads and validates a JSON file."""
        path = tmp_path / "site.config.json"
        path.write_text(json.dumps(site_data), encoding="utf-8")

        site = load_site_config(path)

        assert site.profile.business.name == "Metrowest Pro Painters"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is a configuration error."""
        with pytest.raises(SiteConfigError, match="Cannot read"):
            load_site_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON is a configuration error."""
        path = tmp_path / "site.config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SiteConfigError, match="not valid JSON"):
            load_site_config(path)

    def test_example_configuration_loads(self) -> None:
        """The shipped example configuration is valid."""
        path = Path(__file__).resolve().parents[2] / "site.config.json"
        site = load_site_config(path)

        assert len(site.services) == 3
        assert len(site.service_areas) == 3
