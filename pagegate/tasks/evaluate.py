"""Site evaluation task runner.

Scores every candidate page in one pass. Each candidate depends only on its
own entities plus the read-only profile, so the combo fan-out can run on a
thread pool; results keep enumeration order regardless of completion order.
"""

import concurrent.futures
from dataclasses import dataclass, field

import structlog

from pagegate.pages.candidates import (
    ABOUT,
    CONTACT,
    HOME,
    PageCandidate,
    enumerate_combos,
    location_candidates,
    service_candidates,
)
from pagegate.scoring.calculator import ContentScore, ContentScoreCalculator
from pagegate.site.models import SiteConfig
from pagegate.site.predicates import has_trust_signals

logger = structlog.get_logger(__name__)


@dataclass
class EvaluationSummary:
    """Order-independent totals over every scored page."""

    total_pages: int
    indexable_pages: int
    noindex_pages: int  # Generated but marked noindex
    skipped_pages: int  # Below the do-not-generate floor
    priority_pages: int
    average_score: float
    trust_signals: bool = False  # Holistic check on the profile, not a gate

    def to_dict(self) -> dict:
        return {
            "total_pages": self.total_pages,
            "indexable_pages": self.indexable_pages,
            "noindex_pages": self.noindex_pages,
            "skipped_pages": self.skipped_pages,
            "priority_pages": self.priority_pages,
            "average_score": self.average_score,
            "trust_signals": self.trust_signals,
        }


@dataclass
class RobotsDirective:
    """Per-route robots meta directive for a page that must not be indexed."""

    path: str
    index: bool = False
    follow: bool = True

    @property
    def content(self) -> str:
        return ", ".join(
            ["index" if self.index else "noindex", "follow" if self.follow else "nofollow"]
        )

    def to_dict(self) -> dict:
        return {"path": self.path, "index": self.index, "follow": self.follow}


@dataclass
class SiteEvaluation:
    """Verdicts for every candidate page of a site."""

    home: ContentScore
    services: list[ContentScore]
    locations: list[ContentScore]
    combos: list[ContentScore]
    about: ContentScore
    contact: ContentScore
    trust_signals: bool = False
    summary: EvaluationSummary = field(init=False)

    def __post_init__(self) -> None:
        self.summary = summarize(self.all_scores(), trust_signals=self.trust_signals)

    def all_scores(self) -> list[ContentScore]:
        """Every verdict in enumeration order."""
        return [
            self.home,
            *self.services,
            *self.locations,
            *self.combos,
            self.about,
            self.contact,
        ]

    def verdict_for(self, path: str) -> ContentScore | None:
        normalized = "/" + path.strip("/") if path.strip("/") else "/"
        return next((s for s in self.all_scores() if s.path == normalized), None)

    def noindex_paths(self) -> list[str]:
        return [s.path for s in self.all_scores() if not s.should_index]

    def robots_directives(self) -> list[RobotsDirective]:
        return [RobotsDirective(path=p) for p in self.noindex_paths()]

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "home": self.home.to_dict(),
            "services": [s.to_dict() for s in self.services],
            "locations": [s.to_dict() for s in self.locations],
            "combos": [s.to_dict() for s in self.combos],
            "about": self.about.to_dict(),
            "contact": self.contact.to_dict(),
        }


def summarize(scores: list[ContentScore], trust_signals: bool = False) -> EvaluationSummary:
    """Reduce individual verdicts to site-level totals."""
    total = len(scores)
    average = sum(s.total_score for s in scores) / total if total else 0.0
    return EvaluationSummary(
        total_pages=total,
        indexable_pages=sum(1 for s in scores if s.should_index),
        noindex_pages=sum(1 for s in scores if s.should_generate and not s.should_index),
        skipped_pages=sum(1 for s in scores if not s.should_generate),
        priority_pages=sum(1 for s in scores if s.is_priority),
        average_score=round(average, 1),
        trust_signals=trust_signals,
    )


def _score_all(
    calculator: ContentScoreCalculator,
    candidates: list[PageCandidate],
    max_workers: int,
) -> list[ContentScore]:
    if max_workers <= 1 or len(candidates) <= 1:
        return [calculator.score_candidate(c) for c in candidates]

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(calculator.score_candidate, candidates))


def evaluate_site(site: SiteConfig, max_workers: int = 1) -> SiteEvaluation:
    """
    Score and gate every candidate page.

    Args:
        site: Loaded site configuration
        max_workers: Worker threads for combo scoring (1 = sequential)

    Returns:
        SiteEvaluation with per-page verdicts and summary
    """
    logger.info(
        "site_evaluation_starting",
        services=len(site.services),
        service_areas=len(site.service_areas),
        max_workers=max_workers,
    )

    calculator = ContentScoreCalculator(site)
    evaluation = SiteEvaluation(
        home=calculator.score_candidate(HOME),
        services=[calculator.score_candidate(c) for c in service_candidates(site)],
        locations=[calculator.score_candidate(c) for c in location_candidates(site)],
        combos=_score_all(calculator, list(enumerate_combos(site)), max_workers),
        about=calculator.score_candidate(ABOUT),
        contact=calculator.score_candidate(CONTACT),
        trust_signals=has_trust_signals(site.profile),
    )

    summary = evaluation.summary
    logger.info(
        "site_evaluation_completed",
        total_pages=summary.total_pages,
        indexable_pages=summary.indexable_pages,
        noindex_pages=summary.noindex_pages,
        skipped_pages=summary.skipped_pages,
        average_score=summary.average_score,
        trust_signals=summary.trust_signals,
    )
    return evaluation
