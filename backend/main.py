import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import API_PREFIX, APP_NAME, CORS_ORIGINS, DEMO_NOW
from core.errors import InsightsError
from core.logging import setup_logging
from core.mock_data import build_demo_store
from routers.dashboard import router as dashboard_router
from routers.insights import router as insights_router

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=APP_NAME)

    # Snapshot is built once; a bad dataset fails startup here.
    app.state.store = build_demo_store()
    logger.info(
        "insight_store_ready",
        ranges=app.state.store.sizes(),
        demo_now=DEMO_NOW,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(InsightsError)
    async def insights_error_handler(request: Request, exc: InsightsError) -> JSONResponse:
        logger.warning(
            "insights_request_rejected",
            path=request.url.path,
            error=exc.code,
            details=exc.details,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(insights_router, prefix=f"{API_PREFIX}/insights")
    app.include_router(dashboard_router, prefix=API_PREFIX)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
