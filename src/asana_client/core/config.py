"""Configuration Model - Pydantic model for the Asana client.

The configuration is fixed when a Client is constructed and never changes
afterwards. It carries the bearer token, the API location, the request
timeout, tracing switches and the default options merged under every call.

Environment Variable Mapping:
| Config Key | Environment Variable |
|------------|----------------------|
| token      | ASANA_TOKEN          |
| base_url   | ASANA_BASE_URL       |
| timeout    | ASANA_TIMEOUT        |
| debug      | ASANA_DEBUG          |
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError
from .options import Options

DEFAULT_BASE_URL = "https://app.asana.com/api/1.0"
DEFAULT_TIMEOUT = 30.0

ENV_MAPPING = {
    "token": "ASANA_TOKEN",
    "base_url": "ASANA_BASE_URL",
    "timeout": "ASANA_TIMEOUT",
    "debug": "ASANA_DEBUG",
}

_TRUTHY = {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Immutable client configuration.

    Example:
        >>> config = ClientConfig(token="0/abc", verbose=1)
        >>> config.base_url
        'https://app.asana.com/api/1.0'
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        min_length=1,
        description="Personal access token sent as a bearer token. Overridden by ASANA_TOKEN.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API base URL. Overridden by ASANA_BASE_URL.",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Default per-request timeout in seconds. Overridden by ASANA_TIMEOUT.",
    )
    verbose: int = Field(
        default=0,
        ge=0,
        description="Trace verbosity. 1 logs every request, 2 also logs pagination.",
    )
    debug: bool = Field(
        default=False,
        description="Log request and response bodies. Overridden by ASANA_DEBUG.",
    )
    default_options: Options = Field(
        default_factory=Options,
        description="Options merged underneath every request.",
    )


def _env_values() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key, env_var in ENV_MAPPING.items():
        raw = os.environ.get(env_var)
        if raw is None or raw == "":
            continue
        if key == "debug":
            values[key] = raw.strip().lower() in _TRUTHY
        else:
            values[key] = raw
    return values


def load_config(**overrides: Any) -> ClientConfig:
    """Build a ClientConfig from the environment and explicit overrides.

    Explicit keyword arguments win over environment variables. Overrides
    that are None are ignored so CLI defaults do not mask the environment.

    Raises:
        ConfigurationError: If no token is available or a value is invalid.
    """
    values = _env_values()
    values.update({k: v for k, v in overrides.items() if v is not None})

    if not values.get("token"):
        raise ConfigurationError(
            "No Asana access token configured",
            f"Pass --token or set the {ENV_MAPPING['token']} environment variable.",
        )

    try:
        return ClientConfig(**values)
    except ValidationError as e:
        invalid = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise ConfigurationError("Invalid client configuration", "; ".join(invalid)) from e
