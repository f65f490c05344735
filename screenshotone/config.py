"""
Client configuration: credentials, endpoint and timeout.
"""
from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

API_BASE_URL = "https://api.screenshotone.com"
DEFAULT_TIMEOUT = 60.0

ENV_ACCESS_KEY = "SCREENSHOTONE_ACCESS_KEY"
ENV_SECRET_KEY = "SCREENSHOTONE_SECRET_KEY"
ENV_BASE_URL = "SCREENSHOTONE_BASE_URL"


class ClientConfig(BaseModel):
    """Immutable settings shared by every request a client makes."""

    model_config = ConfigDict(frozen=True)

    access_key: str = Field(min_length=1, description="Public access key, sent with every request.")
    secret_key: str = Field(
        min_length=1,
        repr=False,
        description="Signing key. Never transmitted.",
    )
    base_url: str = Field(default=API_BASE_URL, min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Local HTTP timeout in seconds.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "ClientConfig":
        """
        Build a config from `SCREENSHOTONE_*` environment variables.

        Keyword overrides that are not `None` win over the environment.
        """

        env = os.environ if environ is None else environ
        raw: dict[str, Any] = {
            "access_key": env.get(ENV_ACCESS_KEY, ""),
            "secret_key": env.get(ENV_SECRET_KEY, ""),
        }
        if env.get(ENV_BASE_URL):
            raw["base_url"] = env[ENV_BASE_URL]
        raw.update({key: value for key, value in overrides.items() if value is not None})
        return load_config(raw)


def load_config(raw: Mapping[str, Any]) -> ClientConfig:
    """
    Validate raw settings and wrap failures with ConfigurationError.
    """

    try:
        return ClientConfig.model_validate(dict(raw))
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
        raise ConfigurationError(
            f"Invalid client configuration: {', '.join(fields)}.",
            {"validation_errors": exc.errors(include_input=False, include_context=False, include_url=False)},
        ) from exc


__all__ = [
    "API_BASE_URL",
    "ClientConfig",
    "DEFAULT_TIMEOUT",
    "ENV_ACCESS_KEY",
    "ENV_BASE_URL",
    "ENV_SECRET_KEY",
    "load_config",
]
