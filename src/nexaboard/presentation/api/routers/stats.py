"""Dashboard statistics router."""

from fastapi import APIRouter

from nexaboard.presentation.api.dependencies import CurrentUser, StatsQueryDep
from nexaboard.presentation.api.schemas.stats import StatsResponse, to_stats_response

router = APIRouter()


@router.get("", summary="Headline counts")
async def get_stats(_: CurrentUser, query: StatsQueryDep) -> StatsResponse:
    return to_stats_response(await query.execute())
