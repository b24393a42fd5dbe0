from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

Range = Literal["24h", "7d", "30d"]
RANGES: tuple[str, ...] = ("24h", "7d", "30d")

Severity = Literal["low", "medium", "high"]


def parse_ts(ts: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing Z."""
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SeriesPoint(_Frozen):
    ts: str  # ISO string
    value: float


class TimeseriesLatest(_Frozen):
    ts: str
    value: float
    delta_pct: float | None = Field(default=None, alias="deltaPct")


class StatusPoint(_Frozen):
    ts: str
    value: str
    severity: Severity | None = None


class TimeseriesInsight(_Frozen):
    id: str
    title: str
    type: Literal["timeseries"] = "timeseries"
    metric: str
    currency: str | None = None
    latest: TimeseriesLatest
    series: tuple[SeriesPoint, ...]


class StatusInsight(_Frozen):
    id: str
    title: str
    type: Literal["status"] = "status"
    status: str
    latest: StatusPoint
    history: tuple[StatusPoint, ...]


InsightRecord = Annotated[
    TimeseriesInsight | StatusInsight, Field(discriminator="type")
]
