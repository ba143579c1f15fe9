"""Batch tasks over a whole site configuration."""

from pagegate.tasks.evaluate import (
    EvaluationSummary,
    RobotsDirective,
    SiteEvaluation,
    evaluate_site,
)

__all__ = ["EvaluationSummary", "RobotsDirective", "SiteEvaluation", "evaluate_site"]
