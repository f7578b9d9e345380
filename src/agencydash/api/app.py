"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from agencydash import __version__
from agencydash.domain.exceptions import RemoteStoreError
from agencydash.infra.store.base import RemoteStore


def create_app(store: RemoteStore | None = None) -> FastAPI:
    """Build the API. ``store`` overrides the configured backend (tests pass their own)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from agencydash.logging import logger
        from agencydash.infra.store import create_store
        owned = store is None
        app.state.store = store if store is not None else create_store()
        logger.info("Dashboard API started with %s", type(app.state.store).__name__)
        try:
            yield
        finally:
            if owned:
                await app.state.store.aclose()

    app = FastAPI(
        title="Agency Dashboard API",
        version=__version__,
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from agencydash.api.routers.dashboard import router as dashboard_router
    from agencydash.api.routers.agents import router as agents_router

    app.include_router(dashboard_router)
    app.include_router(agents_router)

    @app.exception_handler(RemoteStoreError)
    def _remote_failed(request: Request, exc: RemoteStoreError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
