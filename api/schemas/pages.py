"""Page verdict and structured-metadata API schemas."""

from typing import Any

from pydantic import BaseModel, Field

# ============================================================================
# Verdict Schemas
# ============================================================================


class BreakdownItemResponse(BaseModel):
    """One scored rubric line."""

    category: str
    item: str
    points: int
    max_points: int
    present: bool


class PageVerdictResponse(BaseModel):
    """Score and gate decisions for one candidate page."""

    page_type: str = Field(..., description="home, service, location, combo, about, contact")
    page_name: str
    path: str = Field(..., description="Site-relative route")
    score: int
    max_score: int
    generate: bool = Field(..., description="Score clears the do-not-generate floor")
    index: bool = Field(..., description="Page may be indexed by search engines")
    priority: bool
    minimum: int = Field(..., description="Minimum score for this page type")
    noindex_reasons: list[str] = Field(default_factory=list)
    breakdown: list[BreakdownItemResponse]
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class EvaluationSummaryResponse(BaseModel):
    """Site-level totals."""

    total_pages: int
    indexable_pages: int
    noindex_pages: int = Field(..., description="Generated but marked noindex")
    skipped_pages: int = Field(..., description="Below the do-not-generate floor")
    priority_pages: int
    average_score: float
    trust_signals: bool = Field(
        False, description="3+ of license, insurance, founding year, valid rating, owner name"
    )


class SiteReportResponse(BaseModel):
    """Every verdict for the configured site."""

    summary: EvaluationSummaryResponse
    home: PageVerdictResponse
    services: list[PageVerdictResponse]
    locations: list[PageVerdictResponse]
    combos: list[PageVerdictResponse]
    about: PageVerdictResponse
    contact: PageVerdictResponse


# ============================================================================
# Robots and Schema Documents
# ============================================================================


class RobotsDirectiveResponse(BaseModel):
    """Robots meta directive for a noindexed route."""

    path: str
    index: bool = False
    follow: bool = True


class PageSchemaResponse(BaseModel):
    """JSON-LD documents to embed in one page."""

    path: str
    index: bool
    documents: list[dict[str, Any]] = Field(..., description="JSON-LD documents, in page order")
