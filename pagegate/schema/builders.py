"""Schema.org JSON-LD document builders.

Each builder returns a plain dict ready for ``json.dumps``, or ``None`` when
there is nothing truthful to describe (no FAQs, no breadcrumb items, no
process steps, no images, no owner). Optional fields are added only when the
predicate for their source data holds, so a document never carries an empty,
null, or placeholder value.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from pagegate.site import predicates
from pagegate.site.models import FAQ, ProcessStep, Service, ServiceArea, SiteConfig

SCHEMA_CONTEXT = "https://schema.org"

DAY_NAMES = {
    "monday": "Monday",
    "tuesday": "Tuesday",
    "wednesday": "Wednesday",
    "thursday": "Thursday",
    "friday": "Friday",
    "saturday": "Saturday",
    "sunday": "Sunday",
}


@dataclass(frozen=True)
class BreadcrumbItem:
    name: str
    url: str


@dataclass(frozen=True)
class GalleryImage:
    """An image to describe in an ImageObject or ImageGallery document."""

    url: str
    name: str | None = None
    description: str | None = None
    caption: str | None = None
    content_location: str | None = None


def organization_id(site: SiteConfig) -> str:
    return f"{site.base_url}/#organization"


def website_id(site: SiteConfig) -> str:
    return f"{site.base_url}/#website"


def _put(doc: dict[str, Any], key: str, value: Any) -> None:
    """Set ``key`` only when ``value`` is meaningful."""
    if value is None:
        return
    if isinstance(value, str) and not value.strip():
        return
    if isinstance(value, list | tuple | dict) and not value:
        return
    doc[key] = value


def opening_hours(hours: dict[str, Any]) -> list[dict[str, str]]:
    """
    OpeningHoursSpecification entries from a ``{"monday": "07:00-18:00"}`` table.

    Closed days, unknown day names and entries without an ``open-close`` pair
    are skipped.
    """
    specs: list[dict[str, str]] = []
    for day, value in hours.items():
        day_name = DAY_NAMES.get(str(day).lower())
        if not day_name or not isinstance(value, str):
            continue
        if value.strip().lower() == "closed" or "-" not in value:
            continue
        opens, _, closes = value.partition("-")
        opens, closes = opens.strip(), closes.strip()
        if not opens or not closes:
            continue
        specs.append(
            {
                "@type": "OpeningHoursSpecification",
                "dayOfWeek": day_name,
                "opens": opens,
                "closes": closes,
            }
        )
    return specs


def aggregate_rating(site: SiteConfig) -> dict[str, Any] | None:
    """AggregateRating node, or None unless the aggregate is valid."""
    if not predicates.has_valid_aggregate_rating(site.profile):
        return None
    aggregate = predicates.effective_aggregate(site.profile)
    return {
        "@type": "AggregateRating",
        "ratingValue": aggregate.average_rating,
        "reviewCount": aggregate.total_reviews,
        "bestRating": 5,
        "worstRating": 1,
    }


def _city(name: str) -> dict[str, str]:
    return {"@type": "City", "name": name}


def _price_nodes(service: Service) -> dict[str, Any]:
    """Numeric PriceSpecification when min and max exist, else the free-text range."""
    if service.price_min is not None and service.price_max is not None:
        return {
            "priceSpecification": {
                "@type": "PriceSpecification",
                "priceCurrency": service.price_currency,
                "minPrice": service.price_min,
                "maxPrice": service.price_max,
            }
        }
    if service.price_range:
        return {"price": service.price_range, "priceCurrency": service.price_currency}
    return {}


# ==============================================================================
# Business identity
# ==============================================================================


def local_business_schema(
    site: SiteConfig,
    include_aggregate_rating: bool = False,
    area: ServiceArea | None = None,
    page_url: str | None = None,
) -> dict[str, Any]:
    """
    LocalBusiness (or configured subtype) document.

    Args:
        site: Site configuration
        include_aggregate_rating: Emit the site-wide rating. Only the primary
            identity page passes True so the fact appears once per site.
        area: Scope the address to a service area instead of the head office
        page_url: Page the area-scoped document belongs to

    Returns:
        JSON-LD dict
    """
    profile = site.profile
    business = profile.business

    doc: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": business.schema_type,
        "@id": organization_id(site),
        "name": business.name,
        "url": site.base_url,
    }
    _put(doc, "description", business.description)
    _put(doc, "telephone", business.phone)
    _put(doc, "email", business.email)

    if area is None:
        address = profile.address
        postal: dict[str, Any] = {"@type": "PostalAddress"}
        _put(postal, "streetAddress", address.street_line)
        _put(postal, "addressLocality", address.city)
        _put(postal, "addressRegion", address.state)
        _put(postal, "postalCode", address.zip)
        _put(postal, "addressCountry", address.country)
    else:
        # Area pages describe where the business works, not where it is based
        doc["@id"] = f"{page_url or site.base_url}#localbusiness"
        postal = {
            "@type": "PostalAddress",
            "addressLocality": area.city,
            "addressRegion": area.state,
            "addressCountry": profile.address.country,
        }
        doc["parentOrganization"] = {"@id": organization_id(site)}
    doc["address"] = postal

    _put(doc, "legalName", business.legal_name)
    _put(doc, "priceRange", business.price_range)
    _put(doc, "foundingDate", business.founding_date)

    if business.logo:
        doc["logo"] = {
            "@type": "ImageObject",
            "url": predicates.absolute_url(site.base_url, business.logo),
        }
    if business.image:
        doc["image"] = predicates.absolute_url(site.base_url, business.image)

    if area is None and predicates.has_valid_geo(profile):
        doc["geo"] = {
            "@type": "GeoCoordinates",
            "latitude": profile.geo.latitude,
            "longitude": profile.geo.longitude,
        }

    _put(doc, "openingHoursSpecification", opening_hours(profile.hours))
    _put(doc, "sameAs", predicates.social_urls(profile))

    if include_aggregate_rating:
        _put(doc, "aggregateRating", aggregate_rating(site))

    if area is not None:
        doc["areaServed"] = [_city(area.label)]
    else:
        _put(doc, "areaServed", [_city(a.label) for a in site.service_areas])

    return doc


def website_schema(site: SiteConfig) -> dict[str, Any]:
    """WebSite document. No SearchAction: the site has no search route."""
    business = site.profile.business
    doc: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "@id": website_id(site),
        "url": site.base_url,
        "name": business.name,
        "publisher": {"@id": organization_id(site)},
    }
    _put(doc, "description", business.description)
    return doc


def web_page_schema(
    site: SiteConfig,
    url: str,
    name: str,
    description: str | None = None,
) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebPage",
        "@id": url,
        "url": url,
        "name": name,
        "isPartOf": {"@id": website_id(site)},
        "about": {"@id": organization_id(site)},
    }
    _put(doc, "description", description)
    return doc


# ==============================================================================
# Service offering
# ==============================================================================


def service_schema(
    site: SiteConfig,
    service: Service,
    url: str | None = None,
    area: ServiceArea | None = None,
) -> dict[str, Any]:
    """Service document with provider reference and, when priced, an Offer."""
    service_url = url or f"{site.base_url}/services/{service.slug}"
    address = site.profile.address
    doc: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "@id": service_url,
        "url": service_url,
        "name": service.name,
        "provider": {
            "@type": site.profile.business.schema_type,
            "name": site.profile.business.name,
            "@id": organization_id(site),
        },
        "areaServed": _city(area.label if area else f"{address.city}, {address.state}"),
    }
    _put(doc, "description", service.description)

    price = _price_nodes(service)
    if price:
        doc["offers"] = {"@type": "Offer", **price}
    return doc


def offer_schema(
    site: SiteConfig,
    service: Service,
    area_served: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Offer document for a service, listing the areas it is sold in."""
    areas = list(area_served) if area_served else [a.label for a in site.service_areas]
    doc: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Offer",
        "name": service.name,
        "availability": "https://schema.org/InStock",
        "url": f"{site.base_url}/services/{service.slug}",
        "seller": {
            "@type": site.profile.business.schema_type,
            "name": site.profile.business.name,
            "url": site.base_url,
        },
    }
    _put(doc, "description", service.description)
    doc.update(_price_nodes(service))
    _put(doc, "areaServed", [_city(a) for a in areas])
    return doc


def how_to_schema(
    name: str,
    description: str,
    steps: Sequence[ProcessStep],
    total_time: str | None = None,
    estimated_cost: dict[str, Any] | None = None,
    tools: Iterable[str] = (),
    supplies: Iterable[str] = (),
) -> dict[str, Any] | None:
    """HowTo document for a service process, or None without steps."""
    if not steps:
        return None

    ordered = sorted(steps, key=lambda s: s.step)
    step_nodes = []
    for position, step in enumerate(ordered, start=1):
        node: dict[str, Any] = {"@type": "HowToStep", "position": position, "name": step.name}
        _put(node, "text", step.description)
        _put(node, "image", step.image)
        step_nodes.append(node)

    doc: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "HowTo",
        "name": name,
        "description": description,
        "step": step_nodes,
    }
    _put(doc, "totalTime", total_time)
    if estimated_cost:
        doc["estimatedCost"] = {"@type": "MonetaryAmount", **estimated_cost}
    _put(doc, "tool", [{"@type": "HowToTool", "name": t} for t in tools if t])
    _put(doc, "supply", [{"@type": "HowToSupply", "name": s} for s in supplies if s])
    return doc


# ==============================================================================
# FAQ and breadcrumbs
# ==============================================================================


def faq_schema(faqs: Sequence[FAQ] | None) -> dict[str, Any] | None:
    """FAQPage document, or None when there are no questions."""
    if not faqs:
        return None
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in faqs
        ],
    }


def breadcrumb_schema(items: Sequence[BreadcrumbItem] | None) -> dict[str, Any] | None:
    """BreadcrumbList document, or None for an empty trail."""
    if not items:
        return None
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": i, "name": item.name, "item": item.url}
            for i, item in enumerate(items, start=1)
        ],
    }


# ==============================================================================
# People and images
# ==============================================================================


def person_schema(
    site: SiteConfig,
    name: str | None,
    job_title: str | None = None,
    description: str | None = None,
    image: str | None = None,
    telephone: str | None = None,
    knows_about: Sequence[str] = (),
    credentials: Sequence[str] = (),
    works_for: bool = True,
) -> dict[str, Any] | None:
    """Person document, or None without a name."""
    if not name:
        return None

    doc: dict[str, Any] = {"@context": SCHEMA_CONTEXT, "@type": "Person", "name": name}
    _put(doc, "jobTitle", job_title)
    _put(doc, "description", description)
    if image:
        doc["image"] = predicates.absolute_url(site.base_url, image)
    _put(doc, "telephone", telephone)
    if works_for:
        doc["worksFor"] = {
            "@type": "Organization",
            "@id": organization_id(site),
            "name": site.profile.business.name,
            "url": site.base_url,
        }
    _put(doc, "knowsAbout", [k for k in knows_about if k])
    _put(
        doc,
        "hasCredential",
        [{"@type": "EducationalOccupationalCredential", "name": c} for c in credentials if c],
    )
    return doc


def owner_schema(site: SiteConfig) -> dict[str, Any] | None:
    """Person document for the configured owner."""
    owner = site.profile.about.owner
    if owner is None:
        return None
    return person_schema(
        site,
        name=owner.name,
        job_title=owner.title,
        description=owner.bio,
        image=owner.image,
        telephone=site.profile.business.phone,
        knows_about=owner.credentials,
    )


def _image_node(site: SiteConfig, image: GalleryImage) -> dict[str, Any]:
    url = predicates.absolute_url(site.base_url, image.url)
    node: dict[str, Any] = {"@type": "ImageObject", "url": url, "contentUrl": url}
    _put(node, "name", image.name)
    _put(node, "description", image.description)
    _put(node, "caption", image.caption)
    if image.content_location:
        node["contentLocation"] = {"@type": "Place", "name": image.content_location}
    return node


def image_gallery_schema(
    site: SiteConfig,
    name: str,
    images: Sequence[GalleryImage],
) -> dict[str, Any] | None:
    """ImageGallery document, or None when no image has a URL."""
    nodes = [_image_node(site, img) for img in images if img.url]
    if not nodes:
        return None
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ImageGallery",
        "name": name,
        "about": {"@id": organization_id(site)},
        "image": nodes,
    }
