#!/usr/bin/env python
"""Score every candidate page of a site configuration.

Prints the per-page breakdown ("show the math") followed by a site summary.

Usage:
    python scripts/score_site.py site.config.json
    python scripts/score_site.py site.config.json --json
    python scripts/score_site.py site.config.json --only-noindex
"""

import argparse
import json
import sys

# Add project root to path
sys.path.insert(0, ".")

from api.config import get_settings  # noqa: E402
from api.logging import bind_site_context, setup_logging  # noqa: E402
from pagegate.site import SiteConfigError, load_site_config  # noqa: E402
from pagegate.tasks import SiteEvaluation, evaluate_site  # noqa: E402


def print_report(evaluation: SiteEvaluation, only_noindex: bool = False) -> None:
    for score in evaluation.all_scores():
        if only_noindex and score.should_index:
            continue
        print(score.show_the_math())
        print()

    summary = evaluation.summary
    print(f"{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(f"  Total pages:      {summary.total_pages}")
    print(f"  Indexable:        {summary.indexable_pages}")
    print(f"  Noindex:          {summary.noindex_pages}")
    print(f"  Not generated:    {summary.skipped_pages}")
    print(f"  Priority:         {summary.priority_pages}")
    print(f"  Average score:    {summary.average_score}")
    print(f"  Trust signals:    {'yes' if summary.trust_signals else 'no'}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score site pages for indexability")
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to the site configuration JSON (defaults to SITE_CONFIG_PATH)",
    )
    parser.add_argument("--base-url", default=None, help="Override business.url")
    parser.add_argument("--workers", type=int, default=None, help="Combo scoring threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-page scoring")
    parser.add_argument("--log-json", action="store_true", help="Emit log lines as JSON")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--only-noindex", action="store_true", help="Only show pages that will not be indexed"
    )
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else None, json_output=args.log_json or None)
    settings = get_settings()
    path = args.config or settings.site_config_path

    try:
        site = load_site_config(path, base_url=args.base_url or settings.site_url)
    except SiteConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    bind_site_context(str(path), site.profile.business.name)
    evaluation = evaluate_site(site, max_workers=settings.get_evaluation_workers(args.workers))

    if args.json:
        print(json.dumps(evaluation.to_dict(), indent=2))
    else:
        print_report(evaluation, only_noindex=args.only_noindex)
    return 0


if __name__ == "__main__":
    sys.exit(main())
