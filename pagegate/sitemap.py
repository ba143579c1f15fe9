"""Sitemap and robots.txt projection of the indexability verdicts."""

from dataclasses import dataclass
from datetime import date
from xml.etree import ElementTree as ET

import structlog

from pagegate.pages.candidates import PageType
from pagegate.scoring.calculator import ContentScore
from pagegate.site.models import SiteConfig
from pagegate.tasks.evaluate import SiteEvaluation

logger = structlog.get_logger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Keys used under ``sitemap.priorities`` / ``sitemap.changeFrequency`` in the config
SITEMAP_KEYS: dict[PageType, str] = {
    PageType.HOME: "homepage",
    PageType.SERVICE: "services",
    PageType.LOCATION: "locations",
    PageType.COMBO: "locationService",
    PageType.ABOUT: "about",
    PageType.CONTACT: "contact",
}

DEFAULT_PRIORITIES: dict[str, float] = {
    "homepage": 1.0,
    "services": 0.9,
    "locations": 0.8,
    "locationService": 0.7,
    "about": 0.6,
    "contact": 0.6,
}

DEFAULT_CHANGE_FREQUENCIES: dict[str, str] = {
    "homepage": "weekly",
    "services": "monthly",
    "locations": "monthly",
    "locationService": "monthly",
    "about": "yearly",
    "contact": "yearly",
}

FALLBACK_PRIORITY = 0.5
FALLBACK_CHANGE_FREQUENCY = "monthly"

ROBOTS_DISALLOW = ("/admin/", "/api/", "/private/")


@dataclass(frozen=True)
class SitemapEntry:
    """A URL published in sitemap.xml."""

    url: str
    priority: float
    change_frequency: str

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "priority": self.priority,
            "change_frequency": self.change_frequency,
        }


def sitemap_priority(site: SiteConfig, page_type: PageType) -> float:
    key = SITEMAP_KEYS[page_type]
    configured = site.sitemap.priorities.get(key)
    if configured is not None:
        return configured
    return DEFAULT_PRIORITIES.get(key, FALLBACK_PRIORITY)


def sitemap_change_frequency(site: SiteConfig, page_type: PageType) -> str:
    key = SITEMAP_KEYS[page_type]
    return (
        site.sitemap.change_frequency.get(key)
        or DEFAULT_CHANGE_FREQUENCIES.get(key)
        or FALLBACK_CHANGE_FREQUENCY
    )


def _entry(site: SiteConfig, score: ContentScore) -> SitemapEntry:
    base = site.base_url
    url = base if score.page_type == PageType.HOME else f"{base}{score.path}"
    return SitemapEntry(
        url=url,
        priority=sitemap_priority(site, score.page_type),
        change_frequency=sitemap_change_frequency(site, score.page_type),
    )


def build_sitemap(site: SiteConfig, evaluation: SiteEvaluation) -> list[SitemapEntry]:
    """
    Project the evaluation onto sitemap entries.

    Fixed pages (home, about, contact) are always listed first. Services,
    locations and combos follow, each only when its verdict is "index".

    Args:
        site: Site configuration (base URL and sitemap settings)
        evaluation: Verdicts for every candidate

    Returns:
        Ordered list of SitemapEntry
    """
    fixed = [evaluation.home, evaluation.about, evaluation.contact]
    gated = [*evaluation.services, *evaluation.locations, *evaluation.combos]

    entries = [_entry(site, score) for score in fixed]
    entries.extend(_entry(site, score) for score in gated if score.should_index)

    logger.info(
        "sitemap_built",
        entries=len(entries),
        excluded=len(gated) + len(fixed) - len(entries),
    )
    return entries


def render_sitemap_xml(entries: list[SitemapEntry], lastmod: date | None = None) -> str:
    """Serialize entries as a sitemaps.org 0.9 urlset document."""
    ET.register_namespace("", SITEMAP_NS)
    urlset = ET.Element(f"{{{SITEMAP_NS}}}urlset")
    for entry in entries:
        url = ET.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
        ET.SubElement(url, f"{{{SITEMAP_NS}}}loc").text = entry.url
        if lastmod is not None:
            ET.SubElement(url, f"{{{SITEMAP_NS}}}lastmod").text = lastmod.isoformat()
        ET.SubElement(url, f"{{{SITEMAP_NS}}}changefreq").text = entry.change_frequency
        ET.SubElement(url, f"{{{SITEMAP_NS}}}priority").text = f"{entry.priority:.1f}"

    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def render_robots_txt(site: SiteConfig) -> str:
    """Site-wide robots.txt pointing crawlers at the sitemap."""
    lines = ["User-agent: *", "Allow: /"]
    lines.extend(f"Disallow: {path}" for path in ROBOTS_DISALLOW)
    lines.extend(["", f"Sitemap: {site.base_url}/sitemap.xml", ""])
    return "\n".join(lines)
