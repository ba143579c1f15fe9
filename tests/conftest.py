"""Pytest configuration and fixtures."""

import copy
import os
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import pytest
import structlog
from httpx import ASGITransport, AsyncClient

# Set test environment before any app code runs
os.environ["ENV"] = "test"

from pagegate.site import Service, ServiceArea, SiteConfig, parse_site_config  # noqa: E402

# Ten words, repeated to a 60-word local paragraph
LOCAL_SENTENCE = "Homes near the town common often need careful lead-safe prep."
LOCAL_PARAGRAPH = " ".join([LOCAL_SENTENCE] * 6)

SERVICE_DATA: dict[str, Any] = {
    "name": "Interior Painting",
    "slug": "interior-painting",
    "description": "Walls, ceilings and trim painted by licensed crews.",
    "longDescription": (
        "We handle everything from single rooms to whole-home repaints, including walls, "
        "ceilings, trim, doors and cabinet refinishing with premium paints."
    ),
    "priceRange": "$2,500-8,000",
    "priceMin": 2500,
    "priceMax": 8000,
    "duration": "2-5 days",
    "features": [
        "Premium paint brands",
        "Thorough surface preparation",
        "Dust-free work environment",
        "Furniture protection",
        "Touch-up kit provided",
    ],
    "process": [
        {"step": 1, "name": "Color Consultation", "description": "Pick colors and finishes"},
        {"step": 2, "name": "Surface Preparation", "description": "Fill, sand and prime"},
        {"step": 3, "name": "Protection Setup", "description": "Cover floors and furniture"},
        {"step": 4, "name": "Painting", "description": "Two coats with full dry time"},
        {"step": 5, "name": "Final Inspection", "description": "Walk-through and touch-ups"},
    ],
    "materials": [
        "Benjamin Moore Regal Select",
        "Sherwin-Williams Duration",
        "Purdy brushes",
        "3M painter's tape",
    ],
    "commonIssues": [
        "Peeling paint from bathroom moisture",
        "Nail pops from settling",
        "Water stains bleeding through",
        "Poor coverage from DIY jobs",
    ],
    "faqs": [
        {
            "question": "How long does interior painting take?",
            "answer": "Most projects take 2-5 days.",
        },
    ],
    "index": True,
    "showProjects": True,
}

AREA_DATA: dict[str, Any] = {
    "city": "Framingham",
    "slug": "framingham",
    "state": "MA",
    "county": "Middlesex County",
    "zipCodes": ["01701", "01702"],
    "neighborhoods": ["Nobscot", "Saxonville", "Downtown", "Framingham Centre", "Lokerville"],
    "landmarks": [
        "Shoppers World",
        "Framingham State University",
        "Danforth Museum",
        "Garden in the Woods",
        "Callahan State Park",
    ],
    "localParagraph": LOCAL_PARAGRAPH,
    "regionalIssues": ["Lead paint in pre-1978 homes"],
    "permits": "Building permits required for exterior work over $10,000",
    "index": True,
}

SITE_DATA: dict[str, Any] = {
    "business": {
        "name": "Metrowest Pro Painters",
        "legalName": "Metrowest Pro Painters LLC",
        "schemaType": "HousePainter",
        "description": "Painting contractor serving MetroWest Massachusetts.",
        "phone": "(508) 555-0147",
        "email": "info@metrowestpropainters.com",
        "url": "https://metrowestpropainters.com/",
        "logo": "/images/logo.png",
        "priceRange": "$$",
        "foundingDate": "2008",
    },
    "address": {
        "street": "245 Main Street",
        "suite": "Suite 102",
        "city": "Framingham",
        "state": "MA",
        "zip": "01701",
        "country": "US",
    },
    "geo": {"latitude": 42.2793, "longitude": -71.4162},
    "hours": {
        "monday": "07:00-18:00",
        "tuesday": "07:00-18:00",
        "saturday": "08:00-14:00",
        "sunday": "Closed",
    },
    "trustSignals": {
        "license": {"number": "HIC #187542", "display": "Licensed MA Contractor HIC #187542"},
        "insurance": {"coverage": "$2,000,000", "provider": "Liberty Mutual", "bonded": True},
        "certifications": ["EPA Lead-Safe Certified"],
    },
    "reviews": {
        "google": {"reviewCount": 127, "rating": 4.9},
        "yelp": {"reviewCount": 43, "rating": 4.5},
        "facebook": {"reviewCount": 38, "rating": 4.8},
        "aggregate": {"totalReviews": 208, "averageRating": 4.8},
    },
    "social": {
        "facebook": "https://facebook.com/metrowestpropainters",
        "twitter": "",
    },
    "about": {
        "story": (
            "Founded in 2008 by lifelong Framingham residents, we grew from a two-person "
            "crew into a team of twelve painters serving all of MetroWest."
        ),
        "owner": {
            "name": "Mike Rodriguez",
            "title": "Owner & Lead Estimator",
            "bio": "Mike has painted professionally for over 20 years and holds EPA certification.",
            "credentials": ["EPA Lead-Safe Certified"],
        },
        "certifications": ["EPA Lead-Safe Certified Firm"],
    },
    "defaultFAQs": [
        {"question": "Do you offer free estimates?", "answer": "Yes, within 48 hours."},
        {"question": "Are you insured?", "answer": "Yes, $2 million in liability coverage."},
        {"question": "Which areas do you serve?", "answer": "All of MetroWest."},
    ],
    "services": [SERVICE_DATA],
    "serviceAreas": [AREA_DATA],
    "projects": {
        "interior-painting": [
            {
                "id": "living-room",
                "title": "Colonial Living Room",
                "location": "Framingham, MA",
                "beforeImage": "/images/living-before.jpg",
                "afterImage": "/images/living-after.jpg",
            }
        ]
    },
}


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo logging configuration and bound context done by a test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def site_data() -> dict[str, Any]:
    """Fully populated configuration; safe to mutate."""
    return copy.deepcopy(SITE_DATA)


@pytest.fixture
def site(site_data: dict[str, Any]) -> SiteConfig:
    return parse_site_config(site_data)


@pytest.fixture
def make_site(site_data: dict[str, Any]) -> Callable[..., SiteConfig]:
    """Build a site with top-level sections replaced."""

    def _make(**sections: Any) -> SiteConfig:
        data = copy.deepcopy(site_data)
        data.update(sections)
        return parse_site_config(data)

    return _make


@pytest.fixture
def make_service() -> Callable[..., Service]:
    """Build a service from the full example with fields overridden (camelCase keys)."""

    def _make(**overrides: Any) -> Service:
        return Service.model_validate({**copy.deepcopy(SERVICE_DATA), **overrides})

    return _make


@pytest.fixture
def make_area() -> Callable[..., ServiceArea]:
    """Build a service area from the full example with fields overridden (camelCase keys)."""

    def _make(**overrides: Any) -> ServiceArea:
        return ServiceArea.model_validate({**copy.deepcopy(AREA_DATA), **overrides})

    return _make


@pytest.fixture
async def client(site: SiteConfig) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client serving the full example site."""
    from api.deps import get_site
    from api.main import app

    app.dependency_overrides[get_site] = lambda: site
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
