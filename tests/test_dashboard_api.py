"""API tests for the static summary endpoints."""


def test_dashboard_metrics(client):
    response = client.get("/api/dashboard/metrics")
    assert response.status_code == 200
    assert response.json() == {
        "workflowsRunLast24h": 46,
        "tasks": {"outstanding": 18, "dueToday": 7, "overdue": 3, "finishedLast24h": 22},
    }


def test_workflows_summary(client):
    assert client.get("/api/workflows/summary").json() == {
        "total": 128,
        "active": 37,
        "lastRunAt": "2025-09-04T10:42:15Z",
    }


def test_tasks_summary(client):
    body = client.get("/api/tasks/summary").json()
    assert body["completed"] == 942
    assert body["lastCompletedAt"] == "2025-09-04T10:58:09Z"


def test_data_summary(client):
    body = client.get("/api/data/summary").json()
    assert body["status"] == "ok"
    assert body["sources"] == [
        {"name": "Amazon SP-API", "status": "ok"},
        {"name": "Shopify", "status": "delayed"},
    ]


def test_agent_summary(client):
    assert client.get("/api/agent/summary").json() == {
        "lastRunAt": "2025-09-04T10:12:00Z",
        "lastRunStatus": "success",
        "runsLast24h": 12,
    }


def test_tasks_list(client):
    body = client.get("/api/tasks").json()
    assert [task["id"] for task in body["items"]] == ["t1", "t2", "t3"]
    assert body["items"][0]["dueAt"] == "2025-09-04T18:00:00Z"


def test_tasks_list_limit(client):
    assert len(client.get("/api/tasks", params={"limit": 2}).json()["items"]) == 2
    assert len(client.get("/api/tasks", params={"limit": "abc"}).json()["items"]) == 3


def test_tasks_list_completed_is_empty(client):
    assert client.get("/api/tasks", params={"status": "completed"}).json() == {"items": []}


def test_tasks_list_oversized_limit(client):
    response = client.get("/api/tasks", params={"limit": "9" * 5000})
    assert response.status_code == 200
    assert len(response.json()["items"]) == 3
