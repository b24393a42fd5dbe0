"""Unit tests for the insight snapshot."""

import pytest
from pydantic import ValidationError

from core.errors import InvalidRange
from core.mock_data import INSIGHTS_7D, INSIGHTS_24H, INSIGHTS_30D
from models.insight import (
    RANGES,
    SeriesPoint,
    StatusInsight,
    StatusPoint,
    TimeseriesInsight,
    TimeseriesLatest,
    parse_ts,
)
from services.store import InsightStore


def _timeseries(insight_id="ins_x", metric="x", values=(1.0, 2.0), latest=None):
    series = tuple(
        SeriesPoint(ts=f"2025-09-0{i + 1}T00:00:00Z", value=v)
        for i, v in enumerate(values)
    )
    return TimeseriesInsight(
        id=insight_id,
        title=insight_id,
        metric=metric,
        latest=TimeseriesLatest(
            ts=series[-1].ts, value=values[-1] if latest is None else latest
        ),
        series=series,
    )


def _store(records_24h):
    return InsightStore({"24h": records_24h, "7d": (), "30d": ()}, [])


@pytest.mark.parametrize("range_", RANGES)
def test_every_range_non_empty_with_unique_ids(store, range_):
    records = store.get_by_range(range_)
    ids = [r.id for r in records]
    assert ids
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("range_", RANGES)
def test_series_sorted_and_ends_at_latest(store, range_):
    for record in store.get_by_range(range_):
        points = record.series if isinstance(record, TimeseriesInsight) else record.history
        stamps = [parse_ts(p.ts) for p in points]
        assert stamps == sorted(stamps)
        assert points[-1].value == record.latest.value


def test_get_by_range_keeps_stored_order(store):
    assert [r.id for r in store.get_by_range("24h")] == [r.id for r in INSIGHTS_24H]
    assert [r.id for r in store.get_by_range("7d")] == [r.id for r in INSIGHTS_7D]
    assert [r.id for r in store.get_by_range("30d")] == [r.id for r in INSIGHTS_30D]


@pytest.mark.parametrize("bad", ["90d", "24H", "", "error", None])
def test_get_by_range_rejects_unknown_token(store, bad):
    with pytest.raises(InvalidRange) as exc_info:
        store.get_by_range(bad)
    assert exc_info.value.details["range"] == bad


def test_favourites_shared_across_ranges(store):
    assert store.favourite_ids() == ("ins_sales_gb", "ins_account_health")
    assert store.is_favourited("ins_sales_gb")
    assert store.is_favourited("ins_account_health")
    assert not store.is_favourited("ins_buybox_pct")


def test_get_by_id(store):
    assert store.get_by_id("ins_inventory_days", "7d").metric == "inventory_days"
    assert store.get_by_id("ins_inventory_days", "24h") is None


def test_ranges_are_independent_snapshots(store):
    sales_24h = store.get_by_id("ins_sales_gb", "24h")
    sales_30d = store.get_by_id("ins_sales_gb", "30d")
    assert len(sales_24h.series) == 5
    assert len(sales_30d.series) == 6
    assert sales_24h.latest.delta_pct == 12.4
    assert sales_30d.latest.delta_pct == 18.7


def test_records_are_frozen(store):
    record = store.get_by_range("24h")[0]
    with pytest.raises(ValidationError):
        record.title = "changed"
    assert isinstance(store.get_by_range("24h"), tuple)


def test_rejects_duplicate_id():
    with pytest.raises(ValueError, match="duplicate insight id"):
        _store((_timeseries(metric="a"), _timeseries(metric="b")))


def test_rejects_duplicate_metric():
    with pytest.raises(ValueError, match="duplicate metric"):
        _store((_timeseries("ins_a", "m"), _timeseries("ins_b", "m")))


def test_rejects_unsorted_series():
    record = TimeseriesInsight(
        id="ins_x",
        title="x",
        metric="x",
        latest=TimeseriesLatest(ts="2025-09-01T00:00:00Z", value=1.0),
        series=(
            SeriesPoint(ts="2025-09-02T00:00:00Z", value=2.0),
            SeriesPoint(ts="2025-09-01T00:00:00Z", value=1.0),
        ),
    )
    with pytest.raises(ValueError, match="ascending"):
        _store((record,))


def test_rejects_latest_mismatch():
    with pytest.raises(ValueError, match="latest.value"):
        _store((_timeseries(latest=99.0),))


def test_rejects_empty_history():
    record = StatusInsight(
        id="ins_s",
        title="s",
        status="ok",
        latest=StatusPoint(ts="2025-09-01T00:00:00Z", value="fine"),
        history=(),
    )
    with pytest.raises(ValueError, match="must not be empty"):
        _store((record,))


def test_rejects_missing_range():
    with pytest.raises(ValueError, match="ranges mismatch"):
        InsightStore({"24h": (), "7d": ()}, [])


def test_rejects_unknown_range():
    with pytest.raises(ValueError, match="ranges mismatch"):
        InsightStore({"24h": (), "7d": (), "30d": (), "90d": ()}, [])
