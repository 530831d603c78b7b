"""
Process configuration: environment resolution and secrets.
"""

from .environment import (
    Environment,
    EnvironmentConfig,
    candidate_keys,
    configure_logging,
    current_environment,
    env_var_key,
    is_local_development,
    load_environment_config,
    parse_environment,
    resolve_key,
)
from .secrets import SecretBundle, SecretStoreError, load_secrets

__all__ = [
    "Environment",
    "EnvironmentConfig",
    "SecretBundle",
    "SecretStoreError",
    "candidate_keys",
    "configure_logging",
    "current_environment",
    "env_var_key",
    "is_local_development",
    "load_environment_config",
    "load_secrets",
    "parse_environment",
    "resolve_key",
]
