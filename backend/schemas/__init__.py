from schemas.dashboard import TaskListResponse
from schemas.insights import (
    ErrorResponse,
    FavouritedIdsResponse,
    InsightListResponse,
    InsightOut,
    SeriesResponse,
    StatusInsightOut,
    TimeseriesInsightOut,
)

__all__ = [
    "InsightOut",
    "TimeseriesInsightOut",
    "StatusInsightOut",
    "InsightListResponse",
    "FavouritedIdsResponse",
    "SeriesResponse",
    "ErrorResponse",
    "TaskListResponse",
]
