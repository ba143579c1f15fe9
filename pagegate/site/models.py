"""Typed, immutable representation of the business configuration.

The configuration file uses camelCase keys (``trustSignals``, ``serviceAreas``,
``localParagraph`` ...); attributes are snake_case. Every optional attribute is
either ``None`` or an empty collection when absent. Blank strings, ``null`` and
values of the wrong JSON type are normalized to that same absent value, so a
malformed optional field never fails the load and predicates only ever test one
"absent" value. Identity fields (names, slugs, the business URL, city and
state) are still required.
"""

import math
from collections import Counter
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from pagegate.site.errors import DuplicateSlugError


def _text(value: Any) -> str | None:
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return None


def _text_items(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list | tuple):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item.strip())


def _number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.replace(",", "").strip())
        except ValueError:
            return None
    if isinstance(value, int | float) and math.isfinite(value):
        return float(value)
    return None


def _count(value: Any) -> int:
    number = _number(value)
    return max(int(number), 0) if number is not None else 0


def _mapping(value: Any) -> Any:
    return value if isinstance(value, dict | BaseModel) else None


def _mapping_or_empty(value: Any) -> Any:
    mapping = _mapping(value)
    return {} if mapping is None else mapping


def _list_or_empty(value: Any) -> Any:
    return value if isinstance(value, list | tuple) else ()


def _text_mapping(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): v for k, v in value.items() if isinstance(v, str) and v.strip()}


def _number_mapping(value: Any) -> dict[str, float]:
    if not isinstance(value, dict):
        return {}
    numbers = {str(k): _number(v) for k, v in value.items()}
    return {k: v for k, v in numbers.items() if v is not None}


def _records(*required: str) -> BeforeValidator:
    """Keep list entries that are objects carrying every required text key."""

    def keep(value: Any) -> tuple:
        if not isinstance(value, list | tuple):
            return ()
        return tuple(
            item
            for item in value
            if isinstance(item, BaseModel)
            or (isinstance(item, dict) and all(_text(item.get(key)) for key in required))
        )

    return BeforeValidator(keep)


def _flag(default: bool) -> BeforeValidator:
    def parse(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        return default

    return BeforeValidator(parse)


def _text_or(default: str) -> BeforeValidator:
    return BeforeValidator(lambda value: _text(value) or default)


OptionalText = Annotated[str | None, BeforeValidator(_text)]
RequiredText = Annotated[str, BeforeValidator(_text)]
TextList = Annotated[tuple[str, ...], BeforeValidator(_text_items)]
OptionalNumber = Annotated[float | None, BeforeValidator(_number)]
Count = Annotated[int, BeforeValidator(_count)]
IndexFlag = Annotated[bool, _flag(True)]
OptInFlag = Annotated[bool, _flag(False)]


class ConfigModel(BaseModel):
    """Base for configuration entities: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ==============================================================================
# Business profile
# ==============================================================================


class Business(ConfigModel):
    name: str
    legal_name: OptionalText = None
    schema_type: Annotated[str, _text_or("LocalBusiness")] = "LocalBusiness"
    tagline: OptionalText = None
    description: OptionalText = None
    phone: OptionalText = None
    email: OptionalText = None
    url: str
    logo: OptionalText = None
    image: OptionalText = None
    price_range: OptionalText = None
    founding_date: OptionalText = None


class Address(ConfigModel):
    street: OptionalText = None
    suite: OptionalText = None
    city: str
    state: str
    zip: OptionalText = None
    country: Annotated[str, _text_or("US")] = "US"

    @property
    def street_line(self) -> str | None:
        if self.street and self.suite:
            return f"{self.street}, {self.suite}"
        return self.street

    def full(self) -> str:
        """Single-line postal address."""
        parts = [p for p in (self.street_line, self.city) if p]
        region = " ".join(p for p in (self.state, self.zip) if p)
        return ", ".join([*parts, region]) if region else ", ".join(parts)


class GeoCoordinates(ConfigModel):
    latitude: OptionalNumber = None
    longitude: OptionalNumber = None


class License(ConfigModel):
    number: OptionalText = None
    type: OptionalText = None
    state: OptionalText = None
    display: OptionalText = None


class Insurance(ConfigModel):
    coverage: OptionalText = None
    provider: OptionalText = None
    bonded: OptInFlag = False


class TrustSignals(ConfigModel):
    license: Annotated[License | None, BeforeValidator(_mapping)] = None
    insurance: Annotated[Insurance | None, BeforeValidator(_mapping)] = None
    certifications: TextList = ()
    affiliations: TextList = ()


class PlatformReviews(ConfigModel):
    """Review totals published on one platform (Google, Yelp, ...)."""

    url: OptionalText = None
    place_id: OptionalText = None
    review_count: Count = 0
    rating: OptionalNumber = None


class ReviewAggregate(ConfigModel):
    total_reviews: Count = 0
    average_rating: OptionalNumber = None


class Reviews(ConfigModel):
    """Per-platform review totals plus an optional cross-platform aggregate.

    Accepts the flat form ``{"google": {...}, "yelp": {...}, "aggregate": {...}}``.
    """

    platforms: dict[str, PlatformReviews] = Field(default_factory=dict)
    aggregate: Annotated[ReviewAggregate | None, BeforeValidator(_mapping)] = None

    @model_validator(mode="before")
    @classmethod
    def _collect_platforms(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "platforms" in data:
            return data
        platforms = {k: v for k, v in data.items() if k != "aggregate" and isinstance(v, dict)}
        return {"platforms": platforms, "aggregate": data.get("aggregate")}


class Owner(ConfigModel):
    name: OptionalText = None
    title: OptionalText = None
    bio: OptionalText = None
    image: OptionalText = None
    credentials: TextList = ()


class About(ConfigModel):
    story: OptionalText = None
    owner: Annotated[Owner | None, BeforeValidator(_mapping)] = None
    certifications: TextList = ()
    awards: TextList = ()


class FAQ(ConfigModel):
    question: RequiredText
    answer: RequiredText


class BusinessProfile(ConfigModel):
    """The singleton business profile shared by every page."""

    business: Business
    address: Address
    geo: Annotated[GeoCoordinates | None, BeforeValidator(_mapping)] = None
    # Day name to "HH:MM-HH:MM" or "Closed"; other values are skipped when rendered
    hours: Annotated[dict[str, Any], BeforeValidator(_mapping_or_empty)] = Field(
        default_factory=dict
    )
    trust_signals: Annotated[TrustSignals, BeforeValidator(_mapping_or_empty)] = Field(
        default_factory=TrustSignals
    )
    reviews: Annotated[Reviews, BeforeValidator(_mapping_or_empty)] = Field(
        default_factory=Reviews
    )
    social: Annotated[dict[str, str], BeforeValidator(_text_mapping)] = Field(
        default_factory=dict
    )
    about: Annotated[About, BeforeValidator(_mapping_or_empty)] = Field(default_factory=About)
    default_faqs: Annotated[tuple[FAQ, ...], _records("question", "answer")] = Field(
        default=(), alias="defaultFAQs"
    )


# ==============================================================================
# Catalogs
# ==============================================================================


class ProcessStep(ConfigModel):
    step: Count = 0
    name: RequiredText
    description: Annotated[str, _text_or("")] = ""
    image: OptionalText = None


class Service(ConfigModel):
    name: str
    slug: str
    description: OptionalText = None
    long_description: OptionalText = None
    price_range: OptionalText = None
    price_min: OptionalNumber = None
    price_max: OptionalNumber = None
    price_currency: Annotated[str, _text_or("USD")] = "USD"
    duration: OptionalText = None
    features: TextList = ()
    process: Annotated[tuple[ProcessStep, ...], _records("name")] = ()
    materials: TextList = ()
    common_issues: TextList = ()
    faqs: Annotated[tuple[FAQ, ...], _records("question", "answer")] = ()
    index: IndexFlag = True
    show_projects: OptInFlag = False


class ServiceArea(ConfigModel):
    city: str
    slug: str
    state: str
    county: OptionalText = None
    zip_codes: TextList = ()
    neighborhoods: TextList = ()
    landmarks: TextList = ()
    description: OptionalText = None
    local_paragraph: OptionalText = None
    regional_issues: TextList = ()
    housing_types: TextList = ()
    permits: OptionalText = None
    index: IndexFlag = True

    @property
    def label(self) -> str:
        return f"{self.city}, {self.state}"


class Project(ConfigModel):
    """A before/after portfolio entry shown in a service's gallery."""

    id: RequiredText
    title: RequiredText
    location: OptionalText = None
    before_image: OptionalText = None
    after_image: OptionalText = None
    description: OptionalText = None


class SitemapSettings(ConfigModel):
    priorities: Annotated[dict[str, float], BeforeValidator(_number_mapping)] = Field(
        default_factory=dict
    )
    change_frequency: Annotated[dict[str, str], BeforeValidator(_text_mapping)] = Field(
        default_factory=dict
    )


_PROFILE_KEYS = (
    "business",
    "address",
    "geo",
    "hours",
    "trustSignals",
    "trust_signals",
    "reviews",
    "social",
    "about",
    "defaultFAQs",
    "default_faqs",
)


class SiteConfig(ConfigModel):
    """Profile plus service and service-area catalogs, loaded once per run."""

    profile: BusinessProfile
    services: Annotated[tuple[Service, ...], BeforeValidator(_list_or_empty)] = ()
    service_areas: Annotated[tuple[ServiceArea, ...], BeforeValidator(_list_or_empty)] = ()
    sitemap: Annotated[SitemapSettings, BeforeValidator(_mapping_or_empty)] = Field(
        default_factory=SitemapSettings
    )
    projects: Annotated[
        dict[str, Annotated[tuple[Project, ...], _records("id", "title")]],
        BeforeValidator(_mapping_or_empty),
    ] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _nest_profile(cls, data: Any) -> Any:
        """Accept the flat file layout where profile sections sit at the top level."""
        if not isinstance(data, dict) or "profile" in data:
            return data
        profile = {k: data[k] for k in _PROFILE_KEYS if k in data}
        rest = {k: v for k, v in data.items() if k not in _PROFILE_KEYS}
        return {**rest, "profile": profile}

    @model_validator(mode="after")
    def _check_unique_slugs(self) -> "SiteConfig":
        for catalog, slugs in (
            ("services", [s.slug for s in self.services]),
            ("serviceAreas", [a.slug for a in self.service_areas]),
        ):
            duplicates = sorted(slug for slug, n in Counter(slugs).items() if n > 1)
            if duplicates:
                raise DuplicateSlugError(catalog, duplicates)
        return self

    @property
    def base_url(self) -> str:
        return self.profile.business.url.rstrip("/")

    def service_by_slug(self, slug: str) -> Service | None:
        return next((s for s in self.services if s.slug == slug), None)

    def area_by_slug(self, slug: str) -> ServiceArea | None:
        return next((a for a in self.service_areas if a.slug == slug), None)

    def projects_for(self, service_slug: str) -> tuple[Project, ...]:
        return self.projects.get(service_slug, ())
