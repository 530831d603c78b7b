"""
Shared services for request handlers.

Config, secrets, the command publisher and the run status store are built
once per application (see main.create_app) and stored on app.state. These
dependency functions hand them to endpoints, so tests can swap any of them
through create_app arguments or app.dependency_overrides.
"""

from typing import Optional
from fastapi import HTTPException, Request

from reel_gateway.bus.base import CommandPublisher
from reel_gateway.config.environment import EnvironmentConfig
from reel_gateway.config.secrets import SecretBundle
from reel_gateway.runs.store import RunStatusStore


def get_settings(request: Request) -> EnvironmentConfig:
    """FastAPI dependency to get the environment configuration."""
    return request.app.state.settings


def get_secrets(request: Request) -> Optional[SecretBundle]:
    """FastAPI dependency to get the loaded secret bundle (None before startup)."""
    return getattr(request.app.state, "secrets", None)


def get_publisher(request: Request) -> CommandPublisher:
    """FastAPI dependency to get the command publisher."""
    publisher = getattr(request.app.state, "publisher", None)
    if publisher is None:
        raise HTTPException(status_code=503, detail="Command queue is not configured")
    return publisher


def get_run_store(request: Request) -> RunStatusStore:
    """FastAPI dependency to get the run status store."""
    return request.app.state.run_store
