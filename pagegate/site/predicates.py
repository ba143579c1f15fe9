"""Pure predicates over the business profile and catalog entities.

Every function here is total: missing or malformed data makes a predicate
return ``False`` (or ``None`` / an empty value for derived scalars). Nothing
raises, nothing logs, nothing mutates its input. These are the single source
of truth for "is this field usable" across scoring, gating and metadata.
"""

import math

from pagegate.site.models import BusinessProfile, ReviewAggregate, Service, ServiceArea

# Minimums for local proof on location and combo pages
MIN_NEIGHBORHOODS = 2
MIN_LANDMARKS = 2
MIN_LOCAL_PARAGRAPH_WORDS = 50

# Aggregate rating is only surfaced with enough reviews and a sane average
MIN_AGGREGATE_REVIEWS = 5
MIN_RATING = 1.0
MAX_RATING = 5.0

# Number of trust attributes needed for the holistic trust check
MIN_TRUST_SIGNALS = 3


def word_count(text: str | None) -> int:
    """Count whitespace-delimited words."""
    if not text:
        return 0
    return len(text.split())


def _is_coordinate(value: float | None) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value != 0
    )


def has_valid_geo(profile: BusinessProfile) -> bool:
    """Both coordinates finite and non-zero; (0, 0) is a placeholder, not a place."""
    geo = profile.geo
    if geo is None:
        return False
    return _is_coordinate(geo.latitude) and _is_coordinate(geo.longitude)


def effective_aggregate(profile: BusinessProfile) -> ReviewAggregate | None:
    """The cross-platform review aggregate.

    An explicitly configured aggregate wins. Otherwise it is derived from the
    per-platform totals: counts are summed and ratings averaged weighted by count.
    """
    reviews = profile.reviews
    if reviews.aggregate is not None:
        return reviews.aggregate

    rated = [
        p
        for p in reviews.platforms.values()
        if p.review_count > 0 and p.rating is not None and math.isfinite(p.rating)
    ]
    total = sum(p.review_count for p in rated)
    if total == 0:
        return None

    weighted = sum(p.review_count * p.rating for p in rated) / total
    return ReviewAggregate(total_reviews=total, average_rating=round(weighted, 1))


def has_valid_aggregate_rating(profile: BusinessProfile) -> bool:
    """At least 5 reviews and an average rating within [1, 5]."""
    aggregate = effective_aggregate(profile)
    if aggregate is None:
        return False
    rating = aggregate.average_rating
    return (
        aggregate.total_reviews >= MIN_AGGREGATE_REVIEWS
        and rating is not None
        and MIN_RATING <= rating <= MAX_RATING
    )


def has_local_proof(area: ServiceArea) -> bool:
    """County, 2+ neighborhoods or 2+ landmarks, and a 50+ word local paragraph."""
    has_places = (
        len(area.neighborhoods) >= MIN_NEIGHBORHOODS or len(area.landmarks) >= MIN_LANDMARKS
    )
    return (
        bool(area.county)
        and has_places
        and word_count(area.local_paragraph) >= MIN_LOCAL_PARAGRAPH_WORDS
    )


def has_pricing(service: Service) -> bool:
    """A price range string or a non-zero minimum price."""
    return bool(service.price_range) or bool(service.price_min)


def has_duration(service: Service) -> bool:
    return bool(service.duration)


def has_pricing_and_duration(service: Service) -> bool:
    return has_pricing(service) and has_duration(service)


def license_display(profile: BusinessProfile) -> str | None:
    license_ = profile.trust_signals.license
    return license_.display if license_ else None


def insurance_coverage(profile: BusinessProfile) -> str | None:
    insurance = profile.trust_signals.insurance
    return insurance.coverage if insurance else None


def founding_year(profile: BusinessProfile) -> str | None:
    return profile.business.founding_date


def owner_name(profile: BusinessProfile) -> str | None:
    owner = profile.about.owner
    return owner.name if owner else None


def has_trust_signals(profile: BusinessProfile) -> bool:
    """At least 3 of license, insurance, founding year, valid rating, owner name."""
    present = [
        bool(license_display(profile)),
        bool(insurance_coverage(profile)),
        bool(founding_year(profile)),
        has_valid_aggregate_rating(profile),
        bool(owner_name(profile)),
    ]
    return sum(present) >= MIN_TRUST_SIGNALS


def social_urls(profile: BusinessProfile) -> list[str]:
    """Configured social profile URLs, skipping empty entries."""
    return [url for url in profile.social.values() if url and url.strip()]


def absolute_url(base_url: str, path: str) -> str:
    """Resolve a site-relative asset path against the business URL."""
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
