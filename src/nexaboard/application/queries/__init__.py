"""Read-only queries."""

from nexaboard.application.queries.list_users_query import ListUsersQuery
from nexaboard.application.queries.stats_query import BoardStats, StatsQuery

__all__ = ["BoardStats", "ListUsersQuery", "StatsQuery"]
