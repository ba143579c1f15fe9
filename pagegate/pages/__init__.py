"""Candidate pages and their enumeration."""

from pagegate.pages.candidates import (
    PageCandidate,
    PageType,
    candidate_for_path,
    enumerate_candidates,
    enumerate_combos,
)

__all__ = [
    "PageCandidate",
    "PageType",
    "candidate_for_path",
    "enumerate_candidates",
    "enumerate_combos",
]
