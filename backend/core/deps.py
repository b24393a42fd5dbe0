from fastapi import Request

from services.store import InsightStore


def get_store(request: Request) -> InsightStore:
    """The snapshot built at startup, shared read-only by every request."""
    return request.app.state.store
