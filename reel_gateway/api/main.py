"""
FastAPI application entry point.

Builds the application, wires the command publisher, secrets and run status
store into app.state, and mounts the reel, run and health routers.
"""

import logging
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from .routers import health, reels, runs
from .errors import register_exception_handlers
from .dependencies.services import get_settings
from reel_gateway import __version__
from reel_gateway.bus.base import CommandPublisher
from reel_gateway.bus.sqs import SQSPublisher, create_sqs_client
from reel_gateway.config.environment import EnvironmentConfig, configure_logging, load_environment_config
from reel_gateway.config.secrets import SecretBundle, load_secrets
from reel_gateway.runs.store import RunStatusStore, StubRunStatusStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Loads secrets and builds the SQS publisher once at startup, unless they
    were injected into create_app. A secret store that cannot be reached at
    all aborts startup.
    """
    settings: EnvironmentConfig = app.state.settings
    configure_logging(settings.log_level)
    logger.info(f"Starting reel gateway (environment={settings.environment})")

    if app.state.secrets is None:
        app.state.secrets = load_secrets(settings.environment, region=settings.aws_region)

    if app.state.publisher is None:
        sqs_client = create_sqs_client(settings.aws_region, settings.queue_send_timeout)
        app.state.publisher = SQSPublisher(settings.sqs_queue_url, sqs_client)
        logger.info(f"Command publisher ready for queue={settings.sqs_queue_url}")

    logger.info("Reel gateway ready to accept requests")

    yield  # Server runs here

    logger.info("Shutting down reel gateway")


def create_app(
    settings: Optional[EnvironmentConfig] = None,
    secrets: Optional[SecretBundle] = None,
    publisher: Optional[CommandPublisher] = None,
    run_store: Optional[RunStatusStore] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Any collaborator passed in is used as-is; the rest are built from the
    environment during startup.
    """
    settings = settings or load_environment_config()

    app = FastAPI(
        title="Reel Gateway API",
        description="Intake and status API for reel generation runs",
        version=__version__,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.secrets = secrets
    app.state.publisher = publisher
    app.state.run_store = run_store or StubRunStatusStore()

    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_allow_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(reels.router, prefix="/reels", tags=["reels"])
    app.include_router(runs.router, prefix="/runs", tags=["runs"])

    @app.get("/")
    def root(settings: EnvironmentConfig = Depends(get_settings)):
        """Basic API information."""
        return {
            "name": "Reel Gateway API",
            "version": __version__,
            "environment": str(settings.environment),
            "status": "operational",
            "endpoints": {
                "health": "/health",
                "reels": "/reels",
                "runs": "/runs/{runId}",
                "docs": "/docs",
                "redoc": "/redoc"
            }
        }

    return app


# Create the FastAPI app instance
app = create_app()
