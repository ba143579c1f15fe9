#!/usr/bin/env python
"""Build the static SEO artifacts for a site configuration.

Writes into the output directory:
    sitemap.xml       Fixed pages plus every indexable candidate
    robots.txt        Site-wide crawler rules
    report.json       Every verdict with its breakdown
    noindex.json      Robots directives for noindexed routes
    schema/<page>.json  JSON-LD documents per generated page

Usage:
    python scripts/build_artifacts.py site.config.json --out dist/seo
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

# Add project root to path
sys.path.insert(0, ".")

import structlog  # noqa: E402

from api.config import get_settings  # noqa: E402
from api.logging import bind_site_context, setup_logging  # noqa: E402
from pagegate.pages import PageCandidate, candidate_for_path  # noqa: E402
from pagegate.schema import PageSchemaAssembler  # noqa: E402
from pagegate.site import SiteConfig, SiteConfigError, load_site_config  # noqa: E402
from pagegate.sitemap import build_sitemap, render_robots_txt, render_sitemap_xml  # noqa: E402
from pagegate.tasks import evaluate_site  # noqa: E402

logger = structlog.get_logger(__name__)


def schema_filename(candidate: PageCandidate) -> str:
    """Flatten a route into a file name: / -> index.json, /a/b -> a__b.json."""
    stem = "__".join(p for p in candidate.path.split("/") if p) or "index"
    return f"{stem}.json"


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def build_artifacts(site: SiteConfig, out_dir: Path, workers: int = 1) -> dict[str, int]:
    """
    Evaluate the site and write every artifact.

    Returns:
        Counts of what was written
    """
    evaluation = evaluate_site(site, max_workers=workers)

    out_dir.mkdir(parents=True, exist_ok=True)
    schema_dir = out_dir / "schema"
    schema_dir.mkdir(exist_ok=True)

    entries = build_sitemap(site, evaluation)
    (out_dir / "sitemap.xml").write_text(
        render_sitemap_xml(entries, lastmod=date.today()), encoding="utf-8"
    )
    (out_dir / "robots.txt").write_text(render_robots_txt(site), encoding="utf-8")
    _write_json(out_dir / "report.json", evaluation.to_dict())

    directives = [d.to_dict() for d in evaluation.robots_directives()]
    _write_json(out_dir / "noindex.json", directives)

    # Pages below the do-not-generate floor are not built, so they get no JSON-LD
    assembler = PageSchemaAssembler(site)
    schema_files = 0
    for score in evaluation.all_scores():
        if not score.should_generate:
            continue
        candidate = candidate_for_path(site, score.path)
        _write_json(schema_dir / schema_filename(candidate), assembler.documents_for(candidate))
        schema_files += 1

    counts = {
        "sitemap_entries": len(entries),
        "noindex_routes": len(directives),
        "schema_files": schema_files,
        "skipped_pages": evaluation.summary.skipped_pages,
    }
    logger.info("artifacts_written", out_dir=str(out_dir), **counts)
    return counts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write sitemap, robots and JSON-LD artifacts")
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to the site configuration JSON (defaults to SITE_CONFIG_PATH)",
    )
    parser.add_argument("--out", type=Path, default=Path("dist/seo"), help="Output directory")
    parser.add_argument("--base-url", default=None, help="Override business.url")
    parser.add_argument("--workers", type=int, default=None, help="Combo scoring threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-page scoring")
    parser.add_argument("--log-json", action="store_true", help="Emit log lines as JSON")
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
    counts = build_artifacts(site, args.out, workers=settings.get_evaluation_workers(args.workers))
    print(
        f"Wrote {counts['sitemap_entries']} sitemap entries, "
        f"{counts['noindex_routes']} noindex routes, "
        f"{counts['schema_files']} schema files to {args.out}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
