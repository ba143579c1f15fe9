"""Crawler-facing artifacts: sitemap.xml and robots.txt."""

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from api.deps import EvaluationDep, SiteDep
from pagegate.sitemap import build_sitemap, render_robots_txt, render_sitemap_xml

router = APIRouter(tags=["SEO"])


@router.get("/sitemap.xml", response_class=Response)
async def sitemap_xml(site: SiteDep, evaluation: EvaluationDep) -> Response:
    """Sitemap listing the fixed pages plus every indexable candidate."""
    entries = build_sitemap(site, evaluation)
    body = render_sitemap_xml(entries, lastmod=datetime.now(UTC).date())
    return Response(content=body, media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt(site: SiteDep) -> PlainTextResponse:
    return PlainTextResponse(render_robots_txt(site))
