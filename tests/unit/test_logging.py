"""Tests for structured logging setup."""

import io
import sys

import pytest

from api.logging import bind_site_context, setup_logging
from pagegate.site import SiteConfig
from pagegate.tasks import evaluate_site


class TestSetupLogging:
    def test_logs_follow_replaced_stderr(self, site: SiteConfig, monkeypatch) -> None:
        """Logging keeps working after the stderr it was configured with is closed."""
        first = io.StringIO()
        monkeypatch.setattr(sys, "stderr", first)
        setup_logging(level="INFO", json_output=True)
        evaluate_site(site)
        first.close()

        second = io.StringIO()
        monkeypatch.setattr(sys, "stderr", second)
        evaluation = evaluate_site(site)

        assert evaluation.summary.total_pages == 6
        assert "site_evaluation_completed" in second.getvalue()

    def test_level_override_filters_debug(self, site: SiteConfig, monkeypatch) -> None:
        """Per-page scoring lines appear only at DEBUG."""
        quiet = io.StringIO()
        monkeypatch.setattr(sys, "stderr", quiet)
        setup_logging(level="INFO", json_output=True)
        evaluate_site(site)
        assert "page_scored" not in quiet.getvalue()

        verbose = io.StringIO()
        monkeypatch.setattr(sys, "stderr", verbose)
        setup_logging(level="DEBUG", json_output=True)
        evaluate_site(site)
        assert "page_scored" in verbose.getvalue()

    def test_site_context_is_bound(self, site: SiteConfig, monkeypatch) -> None:
        """Bound site context is added to every log line."""
        stream = io.StringIO()
        monkeypatch.setattr(sys, "stderr", stream)
        setup_logging(level="INFO", json_output=True)
        bind_site_context("site.config.json", "Metrowest Pro Painters")

        evaluate_site(site)

        assert '"business": "Metrowest Pro Painters"' in stream.getvalue()


@pytest.mark.parametrize("level", ["warning", "ERROR"])
def test_level_names_are_case_insensitive(level: str, site: SiteConfig, monkeypatch) -> None:
    """Levels above INFO silence the evaluation summary."""
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stderr", stream)
    setup_logging(level=level, json_output=True)

    evaluate_site(site)

    assert stream.getvalue() == ""
