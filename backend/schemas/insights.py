from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from models.insight import SeriesPoint, StatusInsight, TimeseriesInsight


class TimeseriesInsightOut(TimeseriesInsight):
    favourited: bool


class StatusInsightOut(StatusInsight):
    favourited: bool


InsightOut = Annotated[
    TimeseriesInsightOut | StatusInsightOut, Field(discriminator="type")
]


class InsightListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: list[InsightOut]
    page: int
    page_size: int = Field(alias="pageSize")
    total: int


class FavouritedIdsResponse(BaseModel):
    items: list[str]


class SeriesResponse(BaseModel):
    metric: str
    market: str
    currency: str | None = None
    series: list[SeriesPoint]


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: dict = {}
