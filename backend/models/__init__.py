from models.insight import (
    RANGES,
    InsightRecord,
    Range,
    SeriesPoint,
    StatusInsight,
    StatusPoint,
    TimeseriesInsight,
    TimeseriesLatest,
)
from models.summary import (
    AgentSummary,
    DashboardMetrics,
    DataSummary,
    OpenTask,
    TasksSummary,
    WorkflowsSummary,
)

__all__ = [
    "RANGES",
    "Range",
    "InsightRecord",
    "SeriesPoint",
    "TimeseriesLatest",
    "TimeseriesInsight",
    "StatusPoint",
    "StatusInsight",
    "DashboardMetrics",
    "WorkflowsSummary",
    "TasksSummary",
    "DataSummary",
    "AgentSummary",
    "OpenTask",
]
