from fastapi import APIRouter, Depends, Query

from core.deps import get_store
from schemas.insights import (
    ErrorResponse,
    FavouritedIdsResponse,
    InsightListResponse,
    InsightOut,
    SeriesResponse,
)
from services.insights import (
    get_insight,
    get_series,
    list_favourited_ids,
    list_insights,
    parse_flag,
)
from services.store import InsightStore

router = APIRouter(
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)


@router.get("", response_model=InsightListResponse, response_model_exclude_none=True)
def insights(
    range: str | None = Query(None, description="24h | 7d | 30d (default 24h)"),
    favourited: str | None = Query(None, description="'true' to return favourites only"),
    page: str | None = Query(None, description="1-indexed page (default 1)"),
    page_size: str | None = Query(None, alias="pageSize", description="Items per page (default 20)"),
    store: InsightStore = Depends(get_store),
):
    return list_insights(
        store,
        range_=range,
        favourited_only=parse_flag(favourited),
        page=page,
        page_size=page_size,
    )


@router.get("/favourited", response_model=FavouritedIdsResponse)
def favourited_ids(
    range: str | None = Query(None, description="24h | 7d | 30d (default 30d)"),
    store: InsightStore = Depends(get_store),
):
    return list_favourited_ids(store, range_=range)


@router.get("/series", response_model=SeriesResponse, response_model_exclude_none=True)
def series(
    metric: str | None = Query(None, description="Metric key, e.g. sales or buybox_pct"),
    market: str | None = Query(None, description="Market code (default GB)"),
    range: str | None = Query(None, description="24h | 7d | 30d (default 30d)"),
    store: InsightStore = Depends(get_store),
):
    return get_series(store, metric, market=market, range_=range)


@router.get("/{insight_id}", response_model=InsightOut, response_model_exclude_none=True)
def insight_detail(
    insight_id: str,
    range: str | None = Query(None, description="24h | 7d | 30d (default 24h)"),
    store: InsightStore = Depends(get_store),
):
    return get_insight(store, insight_id, range_=range)
