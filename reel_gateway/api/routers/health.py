"""
Health check endpoints for load balancers and monitoring.

GET /health answers without touching configuration so it stays usable as a
liveness probe even when startup wiring is incomplete.
"""

import time
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ..models.common import HealthStatus
from ..dependencies.services import get_secrets, get_settings
from reel_gateway import __version__
from reel_gateway.config.environment import EnvironmentConfig
from reel_gateway.config.secrets import SecretBundle

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()


@router.get("", response_class=PlainTextResponse)
def health_check():
    """Liveness probe."""
    return "OK"


@router.get("/detailed", response_model=HealthStatus)
def detailed_health_check(
    request: Request,
    settings: EnvironmentConfig = Depends(get_settings),
    secrets: Optional[SecretBundle] = Depends(get_secrets)
):
    """
    Uptime and wiring status of the service.

    Reports whether the queue publisher, run store and secrets are in place.
    Never includes secret values or queue URLs.
    """
    state = request.app.state

    dependencies = {
        "command_queue": "available" if getattr(state, "publisher", None) is not None else "not configured",
        "run_store": type(state.run_store).__name__ if getattr(state, "run_store", None) is not None else "not configured",
    }
    if secrets is None:
        dependencies["secrets"] = "not loaded"
    else:
        missing = secrets.missing()
        dependencies["secrets"] = f"missing: {', '.join(missing)}" if missing else "loaded"

    return HealthStatus(
        status="healthy",
        version=__version__,
        environment=str(settings.environment),
        uptime=time.time() - _server_start_time,
        dependencies=dependencies
    )


@router.get("/ready")
def readiness_check(request: Request):
    """
    Readiness probe for container deployments.

    Ready once a command publisher is wired, since intake cannot work
    without one.
    """
    if getattr(request.app.state, "publisher", None) is None:
        return {"ready": False, "reason": "Command publisher not initialized"}

    return {"ready": True, "message": "Service ready to handle requests"}
