"""Dashboard statistics schema."""

from pydantic import BaseModel

from nexaboard.application.queries import BoardStats


class StatsResponse(BaseModel):
    projects: int
    members: int
    messages: int


def to_stats_response(stats: BoardStats) -> StatsResponse:
    return StatsResponse(
        projects=stats.projects,
        members=stats.members,
        messages=stats.messages,
    )
