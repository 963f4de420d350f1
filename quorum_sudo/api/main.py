"""FastAPI application entry point for Quorum Sudo."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from quorum_sudo import __version__
from quorum_sudo.api.middleware.logging_middleware import LoggingMiddleware
from quorum_sudo.api.routes.health import router as health_router
from quorum_sudo.api.routes.sudo import router as sudo_router
from quorum_sudo.bootstrap.logging import configure_structlog
from quorum_sudo.bootstrap.sudo import close_sudo_dependencies, get_sudo_config

configure_structlog(get_sudo_config().environment)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: release adapter connections on shutdown."""
    logger.info("quorum_sudo_api_starting", version=__version__)
    yield
    await close_sudo_dependencies()
    logger.info("quorum_sudo_api_stopped")


app = FastAPI(
    title="Quorum Sudo API",
    description="Majority-signature authorization gate for privileged account operations",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(health_router)
app.include_router(sudo_router)
