"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from punchsync.domain.exceptions import ConnectivityError, FormatError
from punchsync.logging import logger, get_run_id


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from punchsync.infra.db.engine import engine  # triggers WAL pragma + mapper registration
        SQLModel.metadata.create_all(engine)
        logger.info("punchsync API ready (run %s)", get_run_id())
        yield

    app = FastAPI(
        title="punchsync API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from punchsync.api.routers.reports import router as reports_router
    from punchsync.api.routers.preferences import router as preferences_router

    app.include_router(reports_router)
    app.include_router(preferences_router)

    @app.exception_handler(FormatError)
    def _bad_format(request: Request, exc: FormatError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.message})

    @app.exception_handler(ConnectivityError)
    def _unreachable(request: Request, exc: ConnectivityError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
