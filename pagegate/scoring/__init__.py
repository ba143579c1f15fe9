"""Scoring package: rubric, calculator and indexability gate."""

from pagegate.scoring.calculator import (
    BreakdownItem,
    ContentScore,
    ContentScoreCalculator,
    calculate_content_score,
    should_index_combo,
    should_index_location,
    should_index_service,
)
from pagegate.scoring.gate import GateVerdict, NoindexReason, apply_gate
from pagegate.scoring.rubric import PAGE_TYPE_MINIMUMS, RUBRIC, RubricItem, ScoreCategory

__all__ = [
    "PAGE_TYPE_MINIMUMS",
    "RUBRIC",
    "BreakdownItem",
    "ContentScore",
    "ContentScoreCalculator",
    "GateVerdict",
    "NoindexReason",
    "RubricItem",
    "ScoreCategory",
    "apply_gate",
    "calculate_content_score",
    "should_index_combo",
    "should_index_location",
    "should_index_service",
]
