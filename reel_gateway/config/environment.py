from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Mapping, Optional, Tuple, Union
import logging
import os

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"

    def __str__(self) -> str:
        return self.value


EnvironmentLike = Union[Environment, str, None]

DEFAULT_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/reel-commands"
DEFAULT_API_PORT = 8080
DEFAULT_LOG_LEVEL = "info"
DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_QUEUE_SEND_TIMEOUT = 5.0
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


def parse_environment(label: EnvironmentLike) -> Environment:
    """Map a deployment label to an Environment, defaulting to dev."""
    if isinstance(label, Environment):
        return label
    try:
        return Environment((label or "").strip().lower())
    except ValueError:
        return Environment.DEV


def current_environment(environ: Optional[Mapping[str, str]] = None) -> Environment:
    environ = os.environ if environ is None else environ
    return parse_environment(environ.get("ENVIRONMENT"))


def resolve_key(base_name: str, environment: EnvironmentLike = None) -> str:
    """
    Environment-specific secret name for a base name.

    resolve_key("api-key", "staging") -> "api-key-staging"
    resolve_key("api-key", "unknown") -> "api-key-dev"
    """
    env = parse_environment(environment)
    return f"{base_name}-{env.value}"


def env_var_key(base_name: str, environment: EnvironmentLike = None) -> str:
    """Environment-specific variable name, e.g. SQS_QUEUE_URL_PROD."""
    env = parse_environment(environment)
    return f"{base_name}_{env.value.upper()}"


def candidate_keys(
    base_name: str,
    environment: EnvironmentLike = None,
    resolver: Callable[[str, EnvironmentLike], str] = resolve_key,
    is_available: Optional[Callable[[str], bool]] = None,
) -> List[str]:
    """
    Ordered lookup candidates for a base name: the environment-specific key
    first, then the unsuffixed base key. When is_available is given, only
    candidates it accepts are returned.
    """
    candidates = [resolver(base_name, environment), base_name]
    if is_available is None:
        return candidates
    return [name for name in candidates if is_available(name)]


def is_local_development(environ: Optional[Mapping[str, str]] = None) -> bool:
    # Only for local testing; never set in CI/CD or deployed environments
    environ = os.environ if environ is None else environ
    return environ.get("USE_LOCAL_SECRETS", "").strip().lower() == "true"


@dataclass(frozen=True)
class EnvironmentConfig:
    environment: Environment
    sqs_queue_url: str
    s3_bucket: str
    ecs_cluster: str
    cluster_name: str
    api_port: int = DEFAULT_API_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    aws_region: str = DEFAULT_AWS_REGION
    queue_send_timeout: float = DEFAULT_QUEUE_SEND_TIMEOUT
    cors_allow_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS


def _lookup(environ: Mapping[str, str], base_name: str, environment: Environment, default: str = "") -> str:
    for key in candidate_keys(base_name, environment, resolver=env_var_key):
        value = environ.get(key)
        if value:
            return value
    return default


def _parse_int(raw: Optional[str], default: int, name: str) -> int:
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


def _parse_float(raw: Optional[str], default: float, name: str) -> float:
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


def load_environment_config(environ: Optional[Mapping[str, str]] = None) -> EnvironmentConfig:
    """Snapshot the process configuration from environment variables."""
    environ = os.environ if environ is None else environ
    env = current_environment(environ)

    origins_raw = environ.get("CORS_ALLOW_ORIGINS")
    if origins_raw is None:
        origins = DEFAULT_CORS_ORIGINS
    else:
        origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())

    return EnvironmentConfig(
        environment=env,
        sqs_queue_url=_lookup(environ, "SQS_QUEUE_URL", env, DEFAULT_QUEUE_URL),
        s3_bucket=_lookup(environ, "S3_BUCKET", env),
        ecs_cluster=_lookup(environ, "ECS_CLUSTER", env),
        cluster_name=_lookup(environ, "CLUSTER_NAME", env),
        api_port=_parse_int(environ.get("API_PORT"), DEFAULT_API_PORT, "API_PORT"),
        log_level=(environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower(),
        aws_region=environ.get("AWS_REGION") or DEFAULT_AWS_REGION,
        queue_send_timeout=_parse_float(
            environ.get("QUEUE_SEND_TIMEOUT_SECONDS"), DEFAULT_QUEUE_SEND_TIMEOUT, "QUEUE_SEND_TIMEOUT_SECONDS"
        ),
        cors_allow_origins=origins,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(numeric)
