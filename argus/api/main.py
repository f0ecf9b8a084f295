"""FastAPI application entry point for Argus."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from argus import __version__
from argus.api.dependencies.workflow import (
    has_workflow_services,
    set_workflow_services,
)
from argus.api.middleware.logging_middleware import LoggingMiddleware
from argus.api.routes.candidatures import router as candidatures_router
from argus.api.routes.health import router as health_router
from argus.api.routes.mandates import router as mandates_router
from argus.api.routes.notifications import router as notifications_router
from argus.bootstrap.logging import configure_structlog
from argus.bootstrap.workflow import create_workflow_services
from argus.config.app_config import AppConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and build the workflow services on startup.

    Services registered beforehand (tests) are kept as-is.
    """
    app_config = AppConfig.from_environment()
    configure_structlog(app_config.environment)
    log = structlog.get_logger().bind(component="startup")

    if not has_workflow_services():
        set_workflow_services(await create_workflow_services(app_config))
        log.info("workflow_services_ready", environment=app_config.environment)

    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Argus Mandate Workflow API",
        description="Mandate lifecycle for the Quebec investigator marketplace",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(LoggingMiddleware)

    app.include_router(health_router)
    app.include_router(mandates_router)
    app.include_router(candidatures_router)
    app.include_router(notifications_router)
    return app


app = create_app()
