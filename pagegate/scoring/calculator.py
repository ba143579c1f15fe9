"""Content score calculator with "Show the Math" functionality.

Scores one candidate page against the rubric, then runs the indexability
gate. Every call recomputes from the entities it is given; there is no
cached or persisted score state.
"""

from dataclasses import dataclass, field

import structlog

from pagegate.pages.candidates import ABOUT, CONTACT, HOME, PageCandidate, PageType
from pagegate.scoring.gate import REASON_MESSAGES, GateVerdict, NoindexReason, apply_gate
from pagegate.scoring.rubric import (
    DO_NOT_GENERATE,
    LOW_TRUST_WARNING,
    MAX_SUGGESTIONS,
    PRIORITY,
    RubricItem,
    ScoreCategory,
    ScoringContext,
    items_for,
)
from pagegate.site.models import Service, ServiceArea, SiteConfig

logger = structlog.get_logger(__name__)


@dataclass
class BreakdownItem:
    """One scored line in a page's breakdown."""

    category: ScoreCategory
    item: str
    points: int
    max_points: int
    present: bool

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "item": self.item,
            "points": self.points,
            "max_points": self.max_points,
            "present": self.present,
        }


@dataclass
class ContentScore:
    """Score, breakdown and the generate/index/priority decisions for one page."""

    page_type: PageType
    page_name: str
    path: str
    total_score: int
    max_possible_score: int
    breakdown: list[BreakdownItem]
    should_generate: bool
    should_index: bool
    is_priority: bool
    minimum: int
    noindex_reasons: list[NoindexReason] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def category_points(self, category: ScoreCategory) -> tuple[int, int]:
        """(awarded, max) for one category of this page's breakdown."""
        items = [b for b in self.breakdown if b.category == category]
        return sum(b.points for b in items), sum(b.max_points for b in items)

    def to_dict(self) -> dict:
        return {
            "page_type": self.page_type.value,
            "page_name": self.page_name,
            "path": self.path,
            "score": self.total_score,
            "max_score": self.max_possible_score,
            "generate": self.should_generate,
            "index": self.should_index,
            "priority": self.is_priority,
            "minimum": self.minimum,
            "noindex_reasons": [r.value for r in self.noindex_reasons],
            "breakdown": [b.to_dict() for b in self.breakdown],
            "warnings": self.warnings,
            "suggestions": self.suggestions,
        }

    def show_the_math(self) -> str:
        """Generate human-readable calculation breakdown."""
        verdict = "INDEX" if self.should_index else "NOINDEX"
        if not self.should_generate:
            verdict = "DO NOT GENERATE"
        lines = [
            "=" * 50,
            self.page_name.upper(),
            "=" * 50,
            "",
            f"Path: {self.path}",
            f"Score: {self.total_score}/{self.max_possible_score} "
            f"(minimum {self.minimum}) -> {verdict}",
            "",
            "-" * 50,
            "BREAKDOWN",
            "-" * 50,
        ]

        for b in self.breakdown:
            mark = "+" if b.present else "-"
            lines.append(f"  {mark} [{b.category.value}] {b.item}: {b.points}/{b.max_points}")

        if self.warnings:
            lines.extend(["", "-" * 50, "WARNINGS", "-" * 50])
            lines.extend(f"  * {w}" for w in self.warnings)

        if self.suggestions:
            lines.extend(["", "-" * 50, "SUGGESTIONS", "-" * 50])
            lines.extend(f"  * {s}" for s in self.suggestions)

        lines.append("")
        lines.append("=" * 50)
        return "\n".join(lines)


def _score_item(item: RubricItem, ctx: ScoringContext) -> BreakdownItem:
    present = bool(item.check(ctx))
    return BreakdownItem(
        category=item.category,
        item=item.description,
        points=item.points if present else 0,
        max_points=item.points,
        present=present,
    )


def generate_warnings(breakdown: list[BreakdownItem], verdict: GateVerdict) -> list[str]:
    """Low-trust warning plus one warning per failed hard requirement."""
    warnings: list[str] = []

    hard_trust = sum(b.points for b in breakdown if b.category == ScoreCategory.HARD_TRUST)
    if hard_trust < LOW_TRUST_WARNING:
        warnings.append("Low trust signals - add license, insurance, or reviews")

    for reason in verdict.reasons:
        if reason != NoindexReason.BELOW_MINIMUM:
            warnings.append(REASON_MESSAGES[reason])

    return warnings


def generate_suggestions(breakdown: list[BreakdownItem]) -> list[str]:
    """The first unmet items, in rubric order."""
    return [f"Add: {b.item}" for b in breakdown if not b.present][:MAX_SUGGESTIONS]


class ContentScoreCalculator:
    """Scores candidate pages for one site configuration."""

    def __init__(self, site: SiteConfig):
        self.site = site

    def score_candidate(self, candidate: PageCandidate) -> ContentScore:
        """
        Score a candidate and apply the indexability gate.

        Args:
            candidate: Page to score

        Returns:
            ContentScore with breakdown and decisions
        """
        ctx = ScoringContext(site=self.site, service=candidate.service, area=candidate.area)
        breakdown = [_score_item(item, ctx) for item in items_for(candidate.page_type)]

        total = sum(b.points for b in breakdown)
        max_possible = sum(b.max_points for b in breakdown)
        verdict = apply_gate(candidate, total)

        score = ContentScore(
            page_type=candidate.page_type,
            page_name=candidate.name,
            path=candidate.path,
            total_score=total,
            max_possible_score=max_possible,
            breakdown=breakdown,
            should_generate=total > DO_NOT_GENERATE,
            should_index=verdict.should_index,
            is_priority=total >= PRIORITY,
            minimum=verdict.minimum,
            noindex_reasons=verdict.reasons,
            warnings=generate_warnings(breakdown, verdict),
            suggestions=generate_suggestions(breakdown),
        )

        logger.debug(
            "page_scored",
            path=score.path,
            score=total,
            index=score.should_index,
            reasons=[r.value for r in verdict.reasons],
        )
        return score

    def score_home(self) -> ContentScore:
        return self.score_candidate(HOME)

    def score_service(self, service: Service) -> ContentScore:
        return self.score_candidate(PageCandidate(PageType.SERVICE, service=service))

    def score_location(self, area: ServiceArea) -> ContentScore:
        return self.score_candidate(PageCandidate(PageType.LOCATION, area=area))

    def score_combo(self, area: ServiceArea, service: Service) -> ContentScore:
        return self.score_candidate(PageCandidate(PageType.COMBO, service=service, area=area))

    def score_about(self) -> ContentScore:
        return self.score_candidate(ABOUT)

    def score_contact(self) -> ContentScore:
        return self.score_candidate(CONTACT)


def calculate_content_score(site: SiteConfig, candidate: PageCandidate) -> ContentScore:
    """
    Convenience function to score a single candidate.

    Args:
        site: Loaded site configuration
        candidate: Page to score

    Returns:
        ContentScore with full breakdown
    """
    return ContentScoreCalculator(site).score_candidate(candidate)


def should_index_service(site: SiteConfig, service: Service) -> bool:
    return ContentScoreCalculator(site).score_service(service).should_index


def should_index_location(site: SiteConfig, area: ServiceArea) -> bool:
    return ContentScoreCalculator(site).score_location(area).should_index


def should_index_combo(site: SiteConfig, area: ServiceArea, service: Service) -> bool:
    return ContentScoreCalculator(site).score_combo(area, service).should_index
