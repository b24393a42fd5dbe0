"""
Insight queries over the in-memory snapshot: range selection, favourite
filtering, pagination and metric series lookup.
Pure functions of (store, request parameters); nothing here mutates the store.
"""
from collections.abc import Sequence
from typing import assert_never

import structlog

from core.errors import (
    InsightNotFound,
    InvalidRange,
    MetricNotFound,
    MissingMetric,
    NotATimeseries,
)
from models.insight import (
    RANGES,
    InsightRecord,
    Range,
    StatusInsight,
    TimeseriesInsight,
)
from schemas.insights import (
    FavouritedIdsResponse,
    InsightListResponse,
    InsightOut,
    SeriesResponse,
    StatusInsightOut,
    TimeseriesInsightOut,
)
from services.pagination import paginate
from services.store import InsightStore

logger = structlog.get_logger(__name__)

# Each endpoint keeps its own default range.
LIST_DEFAULT_RANGE: Range = "24h"
FAVOURITES_DEFAULT_RANGE: Range = "30d"
SERIES_DEFAULT_RANGE: Range = "30d"
DETAIL_DEFAULT_RANGE: Range = "24h"

DEFAULT_MARKET = "GB"


def resolve_range(raw: str | None, default: Range) -> Range:
    """Return raw if it is a known range, default if absent. No normalization."""
    if raw is None or raw == "":
        return default
    if raw not in RANGES:
        raise InvalidRange(raw, RANGES)
    return raw


def parse_flag(raw: str | bool | None) -> bool:
    """Query flags are on only for the exact string "true"."""
    if isinstance(raw, bool):
        return raw
    return raw == "true"


def filter_favourited(
    store: InsightStore,
    items: Sequence[InsightRecord],
    favourited_only: bool,
) -> Sequence[InsightRecord]:
    if not favourited_only:
        return items
    return tuple(item for item in items if store.is_favourited(item.id))


def project(store: InsightStore, record: InsightRecord) -> InsightOut:
    """Attach the derived favourited flag to a stored record."""
    data = {**record.model_dump(), "favourited": store.is_favourited(record.id)}
    if isinstance(record, TimeseriesInsight):
        return TimeseriesInsightOut.model_validate(data)
    if isinstance(record, StatusInsight):
        return StatusInsightOut.model_validate(data)
    assert_never(record)


def resolve_series(
    items: Sequence[InsightRecord],
    metric: str,
    market: str,
    range_: str,
) -> SeriesResponse:
    for item in items:
        if isinstance(item, TimeseriesInsight) and item.metric == metric:
            return SeriesResponse(
                metric=metric,
                market=market,
                currency=item.currency,
                series=list(item.series),
            )
    for item in items:
        if isinstance(item, StatusInsight) and metric in (item.id, item.title):
            raise NotATimeseries(metric, item.id)
    raise MetricNotFound(metric, range_)


def list_insights(
    store: InsightStore,
    range_: str | None = None,
    favourited_only: bool = False,
    page: int | str | None = None,
    page_size: int | str | None = None,
) -> InsightListResponse:
    """
    Insights for one range, optionally favourites only, one page at a time.
    total counts the filtered collection before slicing.
    """
    range_ = resolve_range(range_, LIST_DEFAULT_RANGE)
    items = filter_favourited(store, store.get_by_range(range_), favourited_only)
    result = paginate(items, page, page_size)
    logger.debug(
        "insights_listed",
        range=range_,
        favourited_only=favourited_only,
        page=result.page,
        page_size=result.page_size,
        total=result.total,
    )
    return InsightListResponse(
        items=[project(store, record) for record in result.items],
        page=result.page,
        page_size=result.page_size,
        total=result.total,
    )


def list_favourited_ids(
    store: InsightStore, range_: str | None = None
) -> FavouritedIdsResponse:
    # Favourites do not vary by range; the range is still validated.
    resolve_range(range_, FAVOURITES_DEFAULT_RANGE)
    return FavouritedIdsResponse(items=list(store.favourite_ids()))


def get_series(
    store: InsightStore,
    metric: str | None,
    market: str | None = None,
    range_: str | None = None,
) -> SeriesResponse:
    if not metric:
        raise MissingMetric()
    range_ = resolve_range(range_, SERIES_DEFAULT_RANGE)
    market = market or DEFAULT_MARKET
    response = resolve_series(store.get_by_range(range_), metric, market, range_)
    logger.debug("series_resolved", metric=metric, market=market, range=range_)
    return response


def get_insight(
    store: InsightStore, insight_id: str, range_: str | None = None
) -> InsightOut:
    range_ = resolve_range(range_, DETAIL_DEFAULT_RANGE)
    record = store.get_by_id(insight_id, range_)
    if record is None:
        raise InsightNotFound(insight_id, range_)
    return project(store, record)
