from fastapi import APIRouter, Query

from core.mock_data import (
    AGENT_SUMMARY,
    DASHBOARD_METRICS,
    DATA_SUMMARY,
    TASKS_SUMMARY,
    WORKFLOWS_SUMMARY,
)
from models.summary import (
    AgentSummary,
    DashboardMetrics,
    DataSummary,
    TasksSummary,
    WorkflowsSummary,
)
from schemas.dashboard import TaskListResponse
from services.summaries import list_tasks

router = APIRouter()


@router.get("/dashboard/metrics", response_model=DashboardMetrics)
def dashboard_metrics():
    return DASHBOARD_METRICS


@router.get("/workflows/summary", response_model=WorkflowsSummary)
def workflows_summary():
    return WORKFLOWS_SUMMARY


@router.get("/tasks/summary", response_model=TasksSummary)
def tasks_summary():
    return TASKS_SUMMARY


@router.get("/tasks", response_model=TaskListResponse)
def tasks(
    status: str | None = Query(None, description="open | completed (default open)"),
    limit: str | None = Query(None, description="Max tasks (default 50)"),
):
    return list_tasks(status=status, limit=limit)


@router.get("/data/summary", response_model=DataSummary)
def data_summary():
    return DATA_SUMMARY


@router.get("/agent/summary", response_model=AgentSummary)
def agent_summary():
    return AGENT_SUMMARY
