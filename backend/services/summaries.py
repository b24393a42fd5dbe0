from core.mock_data import OPEN_TASKS
from schemas.dashboard import TaskListResponse
from services.pagination import coerce_positive_int

DEFAULT_TASK_LIMIT = 50


def list_tasks(status: str | None = None, limit: int | str | None = None) -> TaskListResponse:
    """Open tasks up to limit. Only open tasks exist in the demo data."""
    status = status or "open"
    limit = coerce_positive_int(limit, DEFAULT_TASK_LIMIT)
    if status != "open":
        return TaskListResponse(items=[])
    return TaskListResponse(items=list(OPEN_TASKS[:limit]))
