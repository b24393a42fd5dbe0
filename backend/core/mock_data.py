"""
Deterministic mock data for the demo dashboard.

- Three precomputed insight snapshots (24h, 7d, 30d). The same insight id can
  appear in several ranges with a different series granularity and latest value.
- Favourites are a separate id list shared by every range.
- Static dashboard, workflow, task, data-source and agent summaries.
All timestamps are ISO 8601 UTC, generated against a fixed demo clock.
"""
from models.insight import (
    SeriesPoint,
    StatusInsight,
    StatusPoint,
    TimeseriesInsight,
    TimeseriesLatest,
)
from models.summary import (
    AgentSummary,
    DashboardMetrics,
    DataSource,
    DataSummary,
    OpenTask,
    TaskCounts,
    TasksSummary,
    WorkflowsSummary,
)
from services.store import InsightStore

FAVOURITE_INSIGHT_IDS = ("ins_sales_gb", "ins_account_health")

LATEST_TS = "2025-09-04T11:00:00Z"
HEALTH_TS = "2025-09-04T08:12:00Z"


def _series(*points: tuple[str, float]) -> tuple[SeriesPoint, ...]:
    return tuple(SeriesPoint(ts=ts, value=value) for ts, value in points)


def _history(*points: tuple[str, str, str]) -> tuple[StatusPoint, ...]:
    return tuple(
        StatusPoint(ts=ts, value=value, severity=severity)
        for ts, value, severity in points
    )


def _sales(delta_pct: float, series: tuple[SeriesPoint, ...]) -> TimeseriesInsight:
    return TimeseriesInsight(
        id="ins_sales_gb",
        title="Sales (UK)",
        metric="sales",
        currency="GBP",
        latest=TimeseriesLatest(ts=LATEST_TS, value=4821.34, delta_pct=delta_pct),
        series=series,
    )


def _account_health(history: tuple[StatusPoint, ...]) -> StatusInsight:
    return StatusInsight(
        id="ins_account_health",
        title="Account Health",
        status="At Risk",
        latest=StatusPoint(ts=HEALTH_TS, value="ASIN policy warning", severity="high"),
        history=history,
    )


def _buybox(delta_pct: float, series: tuple[SeriesPoint, ...]) -> TimeseriesInsight:
    return TimeseriesInsight(
        id="ins_buybox_pct",
        title="Buy Box %",
        metric="buybox_pct",
        latest=TimeseriesLatest(ts=LATEST_TS, value=84.2, delta_pct=delta_pct),
        series=series,
    )


def _inventory(delta_pct: float, series: tuple[SeriesPoint, ...]) -> TimeseriesInsight:
    return TimeseriesInsight(
        id="ins_inventory_days",
        title="Inventory Days of Cover",
        metric="inventory_days",
        latest=TimeseriesLatest(ts=LATEST_TS, value=24, delta_pct=delta_pct),
        series=series,
    )


INSIGHTS_24H = (
    _sales(
        12.4,
        _series(
            ("2025-09-03T12:00:00Z", 4102.10),
            ("2025-09-03T18:00:00Z", 4388.53),
            ("2025-09-04T00:00:00Z", 4605.22),
            ("2025-09-04T06:00:00Z", 4719.88),
            ("2025-09-04T11:00:00Z", 4821.34),
        ),
    ),
    _account_health(
        _history(
            ("2025-09-03T17:41:00Z", "Late shipment spike", "medium"),
            (HEALTH_TS, "ASIN policy warning", "high"),
        )
    ),
    _buybox(
        -3.1,
        _series(
            ("2025-09-03T11:00:00Z", 87.3),
            ("2025-09-04T11:00:00Z", 84.2),
        ),
    ),
)

INSIGHTS_7D = (
    _sales(
        12.4,
        _series(
            ("2025-08-29T11:00:00Z", 3410.21),
            ("2025-08-30T11:00:00Z", 3555.18),
            ("2025-08-31T11:00:00Z", 3721.44),
            ("2025-09-01T11:00:00Z", 4290.11),
            ("2025-09-02T11:00:00Z", 4012.77),
            ("2025-09-03T11:00:00Z", 4560.05),
            ("2025-09-04T11:00:00Z", 4821.34),
        ),
    ),
    _account_health(
        _history(
            ("2025-09-02T17:41:00Z", "Late shipment spike", "medium"),
            (HEALTH_TS, "ASIN policy warning", "high"),
        )
    ),
    _buybox(
        -3.1,
        _series(
            ("2025-08-30T11:00:00Z", 90.4),
            ("2025-09-01T11:00:00Z", 88.0),
            ("2025-09-03T11:00:00Z", 87.3),
            ("2025-09-04T11:00:00Z", 84.2),
        ),
    ),
    _inventory(
        -7.5,
        _series(
            ("2025-08-29T11:00:00Z", 28),
            ("2025-09-01T11:00:00Z", 26),
            ("2025-09-04T11:00:00Z", 24),
        ),
    ),
)

INSIGHTS_30D = (
    _sales(
        18.7,
        _series(
            ("2025-08-06T11:00:00Z", 2980.11),
            ("2025-08-13T11:00:00Z", 3450.52),
            ("2025-08-20T11:00:00Z", 3722.09),
            ("2025-08-27T11:00:00Z", 4211.73),
            ("2025-09-03T11:00:00Z", 4560.05),
            ("2025-09-04T11:00:00Z", 4821.34),
        ),
    ),
    _account_health(
        _history(
            ("2025-08-15T14:21:00Z", "Performance metrics declining", "low"),
            ("2025-09-02T17:41:00Z", "Late shipment spike", "medium"),
            (HEALTH_TS, "ASIN policy warning", "high"),
        )
    ),
    _buybox(
        -8.4,
        _series(
            ("2025-08-06T11:00:00Z", 92.1),
            ("2025-08-13T11:00:00Z", 91.5),
            ("2025-08-20T11:00:00Z", 90.8),
            ("2025-08-27T11:00:00Z", 89.2),
            ("2025-09-03T11:00:00Z", 87.3),
            ("2025-09-04T11:00:00Z", 84.2),
        ),
    ),
    _inventory(
        -20.0,
        _series(
            ("2025-08-06T11:00:00Z", 30),
            ("2025-08-13T11:00:00Z", 29),
            ("2025-08-20T11:00:00Z", 28),
            ("2025-08-27T11:00:00Z", 27),
            ("2025-09-03T11:00:00Z", 25),
            ("2025-09-04T11:00:00Z", 24),
        ),
    ),
)

DASHBOARD_METRICS = DashboardMetrics(
    workflows_run_last_24h=46,
    tasks=TaskCounts(outstanding=18, due_today=7, overdue=3, finished_last_24h=22),
)

WORKFLOWS_SUMMARY = WorkflowsSummary(
    total=128, active=37, last_run_at="2025-09-04T10:42:15Z"
)

TASKS_SUMMARY = TasksSummary(
    outstanding=18,
    due_today=7,
    overdue=3,
    completed=942,
    last_completed_at="2025-09-04T10:58:09Z",
)

DATA_SUMMARY = DataSummary(
    last_sync_at="2025-09-04T09:30:00Z",
    status="ok",
    sources=(
        DataSource(name="Amazon SP-API", status="ok"),
        DataSource(name="Shopify", status="delayed"),
    ),
)

AGENT_SUMMARY = AgentSummary(
    last_run_at="2025-09-04T10:12:00Z",
    last_run_status="success",
    runs_last_24h=12,
)

OPEN_TASKS = (
    OpenTask(id="t1", title="Fix bullets for ASIN B07...", due_at="2025-09-04T18:00:00Z", priority="high"),
    OpenTask(id="t2", title="Raise case for suppressed SKU", due_at="2025-09-03T17:00:00Z", priority="medium"),
    OpenTask(id="t3", title="Restock Plan - UK", due_at="2025-09-05T12:00:00Z", priority="low"),
)


def build_demo_store() -> InsightStore:
    """Validate the demo insights and freeze them into a snapshot."""
    return InsightStore(
        {"24h": INSIGHTS_24H, "7d": INSIGHTS_7D, "30d": INSIGHTS_30D},
        FAVOURITE_INSIGHT_IDS,
    )
