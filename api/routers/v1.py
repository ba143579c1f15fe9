"""V1 API router - read-only verdicts and structured metadata."""

from fastapi import APIRouter, Query

from api.deps import EvaluationDep, SiteDep
from api.exceptions import NotFoundError, ValidationError
from api.schemas.pages import (
    PageSchemaResponse,
    PageVerdictResponse,
    RobotsDirectiveResponse,
    SiteReportResponse,
)
from api.schemas.responses import ListMeta, SuccessResponse
from pagegate.pages import candidate_for_path
from pagegate.schema import assemble_page_schema

router = APIRouter(tags=["Pages"])


def _require_route(path: str) -> str:
    if not path.startswith("/"):
        raise ValidationError("Path must be site-relative and start with '/'", field="path")
    return path


@router.get(
    "/report",
    response_model=SuccessResponse[SiteReportResponse],
    summary="Score report for every candidate page",
)
async def get_report(evaluation: EvaluationDep) -> SuccessResponse[SiteReportResponse]:
    return SuccessResponse(data=SiteReportResponse.model_validate(evaluation.to_dict()))


@router.get(
    "/verdict",
    response_model=SuccessResponse[PageVerdictResponse],
    summary="Verdict for one page",
)
async def get_verdict(
    evaluation: EvaluationDep,
    path: str = Query(..., description="Site-relative route, e.g. /locations/natick/painting"),
) -> SuccessResponse[PageVerdictResponse]:
    score = evaluation.verdict_for(_require_route(path))
    if score is None:
        raise NotFoundError("Page", path)
    return SuccessResponse(data=PageVerdictResponse.model_validate(score.to_dict()))


@router.get(
    "/schema",
    response_model=SuccessResponse[PageSchemaResponse],
    summary="JSON-LD documents for one page",
)
async def get_page_schema(
    site: SiteDep,
    evaluation: EvaluationDep,
    path: str = Query(..., description="Site-relative route"),
) -> SuccessResponse[PageSchemaResponse]:
    """
    Structured-metadata documents for a page.

    Documents are returned for noindexed pages too; the rendering layer pairs
    them with the robots directive.
    """
    candidate = candidate_for_path(site, _require_route(path))
    if candidate is None:
        raise NotFoundError("Page", path)
    score = evaluation.verdict_for(candidate.path)
    return SuccessResponse(
        data=PageSchemaResponse(
            path=candidate.path,
            index=score.should_index,
            documents=assemble_page_schema(site, candidate),
        )
    )


@router.get(
    "/robots-directives",
    response_model=SuccessResponse[list[RobotsDirectiveResponse]],
    summary="Robots directives for noindexed pages",
)
async def get_robots_directives(
    evaluation: EvaluationDep,
) -> SuccessResponse[list[RobotsDirectiveResponse]]:
    directives = [
        RobotsDirectiveResponse.model_validate(d.to_dict())
        for d in evaluation.robots_directives()
    ]
    return SuccessResponse(data=directives, meta=ListMeta(total=len(directives)))


@router.get("/")
async def v1_root() -> dict[str, str]:
    """V1 API root endpoint."""
    return {
        "version": "1",
        "status": "active",
    }
