from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
import json
import logging
import os

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .environment import EnvironmentLike, current_environment, candidate_keys, is_local_development, parse_environment

logger = logging.getLogger(__name__)


class SecretStoreError(RuntimeError): ...


# base secret name -> SecretBundle attribute
SECRET_FIELDS: Dict[str, str] = {
    "api-key": "api_key",
    "database-url": "database_url",
    "jwt-secret": "jwt_secret",
    "oauth-client-id": "oauth_client_id",
    "oauth-client-secret": "oauth_client_secret",
}

LOCAL_SECRET_VARS: Dict[str, str] = {
    "api_key": "LOCAL_API_KEY",
    "database_url": "LOCAL_DATABASE_URL",
    "jwt_secret": "LOCAL_JWT_SECRET",
    "oauth_client_id": "LOCAL_OAUTH_CLIENT_ID",
    "oauth_client_secret": "LOCAL_OAUTH_CLIENT_SECRET",
}


@dataclass(frozen=True)
class SecretBundle:
    api_key: str = field(default="", repr=False)
    database_url: str = field(default="", repr=False)
    jwt_secret: str = field(default="", repr=False)
    oauth_client_id: str = field(default="", repr=False)
    oauth_client_secret: str = field(default="", repr=False)

    def missing(self) -> list:
        """Base names of secrets that resolved to an empty value."""
        return [base for base, attr in SECRET_FIELDS.items() if not getattr(self, attr)]


def extract_secret_value(base_name: str, secret_string: Optional[str]) -> str:
    """
    Unwrap a Secrets Manager value.

    JSON objects holding the base name as a key yield that key's value;
    anything else is returned verbatim.
    """
    if not secret_string:
        return ""
    try:
        data = json.loads(secret_string)
    except ValueError:
        return secret_string
    if isinstance(data, dict) and base_name in data:
        value = data[base_name]
        return value if isinstance(value, str) else json.dumps(value)
    return secret_string


def create_secrets_client(region: Optional[str] = None):
    try:
        return boto3.client("secretsmanager", region_name=region)
    except BotoCoreError as e:
        raise SecretStoreError(f"Unable to create Secrets Manager client: {e}") from e


def _fetch(client: Any, secret_id: str) -> Optional[str]:
    """Returns the SecretString, or None when the lookup failed."""
    try:
        result = client.get_secret_value(SecretId=secret_id)
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "ClientError")
        logger.info(f"Secret '{secret_id}' lookup failed: {code}")
        return None
    except BotoCoreError as e:
        logger.info(f"Secret '{secret_id}' lookup failed: {e.__class__.__name__}")
        return None
    return result.get("SecretString") or ""


def _load_local_secrets(environ: Mapping[str, str]) -> SecretBundle:
    logger.warning("WARNING: Loading secrets from environment variables (LOCAL DEVELOPMENT ONLY)")
    return SecretBundle(**{attr: environ.get(var, "") for attr, var in LOCAL_SECRET_VARS.items()})


def load_secrets(
    environment: EnvironmentLike = None,
    client: Any = None,
    environ: Optional[Mapping[str, str]] = None,
    region: Optional[str] = None,
) -> SecretBundle:
    """
    Load the credential bundle for the current environment.

    Each secret is looked up under its environment-specific name first and
    its base name second. A secret missing under both names is logged and
    left empty; only failing to build the Secrets Manager client raises.
    """
    environ = os.environ if environ is None else environ
    if is_local_development(environ):
        return _load_local_secrets(environ)

    env = current_environment(environ) if environment is None else parse_environment(environment)
    if client is None:
        client = create_secrets_client(region or environ.get("AWS_REGION"))

    values: Dict[str, str] = {}
    for base_name, attr in SECRET_FIELDS.items():
        candidates = candidate_keys(base_name, env)
        for i, secret_id in enumerate(candidates):
            if i > 0:
                logger.info(f"Secret '{candidates[i - 1]}' not found, trying fallback '{secret_id}'")
            secret_string = _fetch(client, secret_id)
            if secret_string is None:
                continue
            values[attr] = extract_secret_value(base_name, secret_string)
            logger.info(f"Loaded secret '{secret_id}' for environment '{env}'")
            break
        else:
            logger.warning(f"Secret '{base_name}' not found under any of {candidates}, leaving it empty")

    return SecretBundle(**values)
