"""Error hierarchy for insight queries."""
from typing import Any


class InsightsError(Exception):
    """Base exception for insight query errors."""

    code = "InternalError"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class InvalidRange(InsightsError):
    """Range token outside the recognized set."""

    code = "InvalidRange"
    status_code = 400

    def __init__(self, value: Any, allowed: tuple[str, ...]):
        super().__init__(
            f"Invalid range {value!r}. Range must be one of: {', '.join(allowed)}",
            details={"range": value, "allowed": list(allowed)},
        )
        self.value = value


class MissingMetric(InsightsError):
    code = "MissingMetric"
    status_code = 400

    def __init__(self):
        super().__init__("metric parameter is required")


class MetricNotFound(InsightsError):
    code = "MetricNotFound"
    status_code = 404

    def __init__(self, metric: str, range_: str):
        super().__init__(
            f"No time series data found for metric: {metric}",
            details={"metric": metric, "range": range_},
        )
        self.metric = metric


class NotATimeseries(InsightsError):
    """The key addresses a status insight, which has no series."""

    code = "NotATimeseries"
    status_code = 400

    def __init__(self, metric: str, insight_id: str):
        super().__init__(
            f"Metric {metric} is not a time series",
            details={"metric": metric, "insight_id": insight_id},
        )
        self.metric = metric


class InsightNotFound(InsightsError):
    code = "InsightNotFound"
    status_code = 404

    def __init__(self, insight_id: str, range_: str):
        super().__init__(
            f"No insight {insight_id} in range {range_}",
            details={"insight_id": insight_id, "range": range_},
        )
