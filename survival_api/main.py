"""App factory and ASGI entrypoint for the Titanic Survival API.

- Configures CORS from settings
- Configures structured logging on startup
- Registers routers for health, prediction/analysis, and UI support endpoints
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import get_settings
from .core.logging import configure_logging, get_logger
from .routers import health, misc, predict

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging()
    settings = get_settings()
    logger.info(
        "application_startup",
        version=app.version,
        latency_min_seconds=settings.latency_min_seconds,
        latency_jitter_seconds=settings.latency_jitter_seconds,
    )
    yield
    logger.info("application_shutdown")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Titanic Survival API",
        version="1.0.0",
        description="Estimate hypothetical Titanic survival odds and what-if improvements",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(misc.router)
    app.include_router(predict.router)

    return app


# ASGI entrypoint (uvicorn: `uvicorn survival_api.main:app`)
app = create_app()
