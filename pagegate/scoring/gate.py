"""Indexability gate.

A page is indexed only when its score meets the page-type minimum AND every
hard requirement for its page type holds. Hard requirements catch pages that
score well on site-wide trust signals but carry no unique local or service
detail.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from pagegate.pages.candidates import PageCandidate, PageType
from pagegate.scoring.rubric import PAGE_TYPE_MINIMUMS
from pagegate.site import predicates


class NoindexReason(str, Enum):
    """Why a candidate was not indexed."""

    BELOW_MINIMUM = "below_minimum"  # Score under the page-type minimum
    MISSING_LOCAL_PROOF = "missing_local_proof"  # Area fails has_local_proof
    MISSING_PRICING_OR_DURATION = "missing_pricing_or_duration"  # Service not citable
    SERVICE_OPTED_OUT = "service_opted_out"  # Author set index: false on the service
    AREA_OPTED_OUT = "area_opted_out"  # Author set index: false on the area


REASON_MESSAGES: dict[NoindexReason, str] = {
    NoindexReason.BELOW_MINIMUM: "Score below the page-type minimum",
    NoindexReason.MISSING_LOCAL_PROOF: (
        "Missing local proof (needs county, neighborhoods/landmarks and a local paragraph)"
    ),
    NoindexReason.MISSING_PRICING_OR_DURATION: "Missing pricing or duration for AI citation",
    NoindexReason.SERVICE_OPTED_OUT: "Service is explicitly excluded from indexing",
    NoindexReason.AREA_OPTED_OUT: "Service area is explicitly excluded from indexing",
}


@dataclass(frozen=True)
class HardRequirement:
    """A boolean precondition for indexing, independent of score."""

    reason: NoindexReason
    page_types: frozenset[PageType]
    check: Callable[[PageCandidate], bool]


HARD_REQUIREMENTS: tuple[HardRequirement, ...] = (
    HardRequirement(
        reason=NoindexReason.SERVICE_OPTED_OUT,
        page_types=frozenset({PageType.SERVICE, PageType.COMBO}),
        check=lambda c: c.service.index,
    ),
    HardRequirement(
        reason=NoindexReason.AREA_OPTED_OUT,
        page_types=frozenset({PageType.LOCATION, PageType.COMBO}),
        check=lambda c: c.area.index,
    ),
    HardRequirement(
        reason=NoindexReason.MISSING_LOCAL_PROOF,
        page_types=frozenset({PageType.LOCATION, PageType.COMBO}),
        check=lambda c: predicates.has_local_proof(c.area),
    ),
    HardRequirement(
        reason=NoindexReason.MISSING_PRICING_OR_DURATION,
        page_types=frozenset({PageType.SERVICE, PageType.COMBO}),
        check=lambda c: predicates.has_pricing_and_duration(c.service),
    ),
)


@dataclass
class GateVerdict:
    """Outcome of the gate for one candidate."""

    should_index: bool
    minimum: int
    reasons: list[NoindexReason] = field(default_factory=list)

    @property
    def opted_out(self) -> bool:
        """True when an author flag, not thin content, blocked indexing."""
        return any(
            r in (NoindexReason.SERVICE_OPTED_OUT, NoindexReason.AREA_OPTED_OUT)
            for r in self.reasons
        )

    def to_dict(self) -> dict:
        return {
            "should_index": self.should_index,
            "minimum": self.minimum,
            "reasons": [r.value for r in self.reasons],
        }


def failed_hard_requirements(candidate: PageCandidate) -> list[NoindexReason]:
    """Hard requirements the candidate does not meet, in table order."""
    return [
        req.reason
        for req in HARD_REQUIREMENTS
        if candidate.page_type in req.page_types and not req.check(candidate)
    ]


def apply_gate(candidate: PageCandidate, total_score: int) -> GateVerdict:
    """
    Decide whether a scored candidate may be indexed.

    Args:
        candidate: The page being judged
        total_score: Its rubric total

    Returns:
        GateVerdict; ``should_index`` is the AND of the score test and every
        hard requirement for the page type
    """
    minimum = PAGE_TYPE_MINIMUMS[candidate.page_type]
    reasons: list[NoindexReason] = []
    if total_score < minimum:
        reasons.append(NoindexReason.BELOW_MINIMUM)
    reasons.extend(failed_hard_requirements(candidate))

    return GateVerdict(should_index=not reasons, minimum=minimum, reasons=reasons)
