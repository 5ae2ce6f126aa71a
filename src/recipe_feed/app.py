from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipe_feed.api.middleware.correlation_id import CorrelationIdMiddleware
from recipe_feed.api.middleware.metrics import RequestTimingMiddleware
from recipe_feed.api.v1.routers import health, recipes
from recipe_feed.application.exceptions import (
    FetchFailedError,
    NotFoundError,
    ValidationError,
)
from recipe_feed.config import settings
from recipe_feed.infrastructure.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    logger.info("Recipe feed service starting")

    yield

    await engine.dispose()
    logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Recipe Feed Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(recipes.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(_req: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.detail})

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.detail})

    @app.exception_handler(FetchFailedError)
    async def _fetch_failed(_req: Request, exc: FetchFailedError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": exc.detail})
