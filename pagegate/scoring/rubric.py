"""Content-sufficiency rubric.

Defines every scored item, its category, its point value, and the page types
it applies to, together with the page-type thresholds. The table is fixed:
scoring reads it, nothing writes it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pagegate.pages.candidates import PageType
from pagegate.site import predicates
from pagegate.site.models import Service, ServiceArea, SiteConfig


class ScoreCategory(str, Enum):
    """Rubric categories."""

    HARD_TRUST = "Hard Trust"
    LOCAL_PROOF = "Local Proof"
    EXPERTISE = "Expertise"
    UNIQUE_CONTENT = "Unique Content"
    AI_CITATION = "AI Citation"
    CONTENT = "Content"  # home/about extras


# Pages scoring at or below this are pure boilerplate and are not built
DO_NOT_GENERATE = 3
# Pages at or above this are priority pages for internal linking
PRIORITY = 10
# Hard-trust points below this produce a warning
LOW_TRUST_WARNING = 6
# Unmet items reported as suggestions
MAX_SUGGESTIONS = 5

PAGE_TYPE_MINIMUMS: dict[PageType, int] = {
    PageType.HOME: 10,
    PageType.SERVICE: 8,
    PageType.LOCATION: 7,
    PageType.COMBO: 7,
    PageType.ABOUT: 6,
    PageType.CONTACT: 5,
}


@dataclass(frozen=True)
class ScoringContext:
    """Entities visible to a rubric check for one candidate."""

    site: SiteConfig
    service: Service | None = None
    area: ServiceArea | None = None


@dataclass(frozen=True)
class RubricItem:
    """A single scored fact."""

    id: str
    category: ScoreCategory
    description: str
    points: int
    page_types: frozenset[PageType]
    check: Callable[[ScoringContext], bool]

    def applies_to(self, page_type: PageType) -> bool:
        return page_type in self.page_types

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category.value,
            "description": self.description,
            "points": self.points,
            "page_types": sorted(p.value for p in self.page_types),
        }


ALL_PAGES = frozenset(PageType)
LOCATION_PAGES = frozenset({PageType.LOCATION, PageType.COMBO})
SERVICE_PAGES = frozenset({PageType.SERVICE, PageType.COMBO})
HOME_PAGE = frozenset({PageType.HOME})
ABOUT_PAGE = frozenset({PageType.ABOUT})


def _profile(ctx: ScoringContext):
    return ctx.site.profile


def _about_owner_bio(ctx: ScoringContext) -> str:
    owner = ctx.site.profile.about.owner
    return (owner.bio or "") if owner else ""


RUBRIC: tuple[RubricItem, ...] = (
    # Hard Trust (max 10)
    RubricItem(
        id="license",
        category=ScoreCategory.HARD_TRUST,
        description="License number displayed",
        points=2,
        page_types=ALL_PAGES,
        check=lambda ctx: bool(predicates.license_display(_profile(ctx))),
    ),
    RubricItem(
        id="insurance",
        category=ScoreCategory.HARD_TRUST,
        description="Insurance coverage displayed",
        points=2,
        page_types=ALL_PAGES,
        check=lambda ctx: bool(predicates.insurance_coverage(_profile(ctx))),
    ),
    RubricItem(
        id="founding_year",
        category=ScoreCategory.HARD_TRUST,
        description="Founding year displayed",
        points=2,
        page_types=ALL_PAGES,
        check=lambda ctx: bool(predicates.founding_year(_profile(ctx))),
    ),
    RubricItem(
        id="aggregate_rating",
        category=ScoreCategory.HARD_TRUST,
        description="Review count with rating (5+ reviews)",
        points=2,
        page_types=ALL_PAGES,
        check=lambda ctx: predicates.has_valid_aggregate_rating(_profile(ctx)),
    ),
    RubricItem(
        id="owner_name",
        category=ScoreCategory.HARD_TRUST,
        description="Owner name displayed",
        points=2,
        page_types=ALL_PAGES,
        check=lambda ctx: bool(predicates.owner_name(_profile(ctx))),
    ),
    # Local Proof (max 5)
    RubricItem(
        id="neighborhoods",
        category=ScoreCategory.LOCAL_PROOF,
        description="Neighborhoods mentioned (2+)",
        points=1,
        page_types=LOCATION_PAGES,
        check=lambda ctx: len(ctx.area.neighborhoods) >= predicates.MIN_NEIGHBORHOODS,
    ),
    RubricItem(
        id="landmarks",
        category=ScoreCategory.LOCAL_PROOF,
        description="Landmarks mentioned (2+)",
        points=1,
        page_types=LOCATION_PAGES,
        check=lambda ctx: len(ctx.area.landmarks) >= predicates.MIN_LANDMARKS,
    ),
    RubricItem(
        id="county",
        category=ScoreCategory.LOCAL_PROOF,
        description="County name mentioned",
        points=1,
        page_types=LOCATION_PAGES,
        check=lambda ctx: bool(ctx.area.county),
    ),
    RubricItem(
        id="permits",
        category=ScoreCategory.LOCAL_PROOF,
        description="Permit requirements mentioned",
        points=1,
        page_types=LOCATION_PAGES,
        check=lambda ctx: bool(ctx.area.permits),
    ),
    RubricItem(
        id="regional_issues",
        category=ScoreCategory.LOCAL_PROOF,
        description="Regional issues mentioned",
        points=1,
        page_types=LOCATION_PAGES,
        check=lambda ctx: len(ctx.area.regional_issues) >= 1,
    ),
    # Expertise (max 4)
    RubricItem(
        id="process_steps",
        category=ScoreCategory.EXPERTISE,
        description="Step-by-step process (3+ steps)",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: len(ctx.service.process) >= 3,
    ),
    RubricItem(
        id="common_issues",
        category=ScoreCategory.EXPERTISE,
        description="Common problems addressed (2+)",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: len(ctx.service.common_issues) >= 2,
    ),
    RubricItem(
        id="materials",
        category=ScoreCategory.EXPERTISE,
        description="Materials/brands mentioned (2+)",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: len(ctx.service.materials) >= 2,
    ),
    RubricItem(
        id="features",
        category=ScoreCategory.EXPERTISE,
        description="Service features listed (3+)",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: len(ctx.service.features) >= 3,
    ),
    # Unique Content (max 3)
    RubricItem(
        id="local_paragraph",
        category=ScoreCategory.UNIQUE_CONTENT,
        description="Local deep paragraph (50+ words)",
        points=1,
        page_types=LOCATION_PAGES,
        check=lambda ctx: (
            predicates.word_count(ctx.area.local_paragraph)
            >= predicates.MIN_LOCAL_PARAGRAPH_WORDS
        ),
    ),
    RubricItem(
        id="service_faqs",
        category=ScoreCategory.UNIQUE_CONTENT,
        description="Service-specific FAQs (2+)",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: len(ctx.service.faqs) >= 2,
    ),
    RubricItem(
        id="long_description",
        category=ScoreCategory.UNIQUE_CONTENT,
        description="Custom service description (100+ chars)",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: len(ctx.service.long_description or "") >= 100,
    ),
    # AI Citation readiness (max 2)
    RubricItem(
        id="pricing",
        category=ScoreCategory.AI_CITATION,
        description="Pricing information provided",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: predicates.has_pricing(ctx.service),
    ),
    RubricItem(
        id="duration",
        category=ScoreCategory.AI_CITATION,
        description="Service duration provided",
        points=1,
        page_types=SERVICE_PAGES,
        check=lambda ctx: predicates.has_duration(ctx.service),
    ),
    # Home page extras
    RubricItem(
        id="services_listed",
        category=ScoreCategory.CONTENT,
        description="Services listed (3+)",
        points=2,
        page_types=HOME_PAGE,
        check=lambda ctx: len(ctx.site.services) >= 3,
    ),
    RubricItem(
        id="areas_listed",
        category=ScoreCategory.CONTENT,
        description="Service areas listed (3+)",
        points=2,
        page_types=HOME_PAGE,
        check=lambda ctx: len(ctx.site.service_areas) >= 3,
    ),
    RubricItem(
        id="default_faqs",
        category=ScoreCategory.CONTENT,
        description="Default FAQs (3+)",
        points=1,
        page_types=HOME_PAGE,
        check=lambda ctx: len(ctx.site.profile.default_faqs) >= 3,
    ),
    # About page extras
    RubricItem(
        id="story",
        category=ScoreCategory.CONTENT,
        description="Company story (100+ chars)",
        points=1,
        page_types=ABOUT_PAGE,
        check=lambda ctx: len(ctx.site.profile.about.story or "") >= 100,
    ),
    RubricItem(
        id="owner_bio",
        category=ScoreCategory.CONTENT,
        description="Owner bio (50+ chars)",
        points=1,
        page_types=ABOUT_PAGE,
        check=lambda ctx: len(_about_owner_bio(ctx)) >= 50,
    ),
    RubricItem(
        id="certifications",
        category=ScoreCategory.CONTENT,
        description="Certifications listed",
        points=1,
        page_types=ABOUT_PAGE,
        check=lambda ctx: len(ctx.site.profile.about.certifications) >= 1,
    ),
)


def items_for(page_type: PageType) -> list[RubricItem]:
    """Rubric items applicable to a page type, in table order."""
    return [item for item in RUBRIC if item.applies_to(page_type)]


def category_max(category: ScoreCategory, page_type: PageType | None = None) -> int:
    """Maximum points for a category, optionally restricted to one page type."""
    return sum(
        item.points
        for item in RUBRIC
        if item.category == category and (page_type is None or item.applies_to(page_type))
    )


def max_score(page_type: PageType) -> int:
    return sum(item.points for item in items_for(page_type))
