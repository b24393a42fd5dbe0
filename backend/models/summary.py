from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SyncStatus = Literal["ok", "delayed", "error"]


class _Summary(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class TaskCounts(_Summary):
    outstanding: int
    due_today: int
    overdue: int
    finished_last_24h: int = Field(alias="finishedLast24h")


class DashboardMetrics(_Summary):
    workflows_run_last_24h: int = Field(alias="workflowsRunLast24h")
    tasks: TaskCounts


class WorkflowsSummary(_Summary):
    total: int
    active: int
    last_run_at: str


class TasksSummary(_Summary):
    outstanding: int
    due_today: int
    overdue: int
    completed: int
    last_completed_at: str


class DataSource(_Summary):
    name: str
    status: SyncStatus


class DataSummary(_Summary):
    last_sync_at: str
    status: SyncStatus
    sources: tuple[DataSource, ...]


class AgentSummary(_Summary):
    last_run_at: str
    last_run_status: Literal["success", "warning", "failed"]
    runs_last_24h: int = Field(alias="runsLast24h")


class OpenTask(_Summary):
    id: str
    title: str
    due_at: str
    priority: Literal["high", "medium", "low"]
