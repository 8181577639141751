"""Startup configuration.

Values come from the command line, falling back to ``LOGSTALKER_<FIELD>``
environment variables (e.g. ``LOGSTALKER_PROJECT_ID``).
"""

from __future__ import annotations

import os
import socket
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .formats.registry import DEFAULT_PARSER_TYPE, resolve_parser

ENV_PREFIX = "LOGSTALKER_"


class StalkerConfig(BaseModel):
    """Validated process configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_filename: str = Field(min_length=1, description="Full path to the log file to tail.")
    credentials_file: str = Field(
        min_length=1, description="Service-account JSON key used to reach the sink."
    )
    service_name: str = Field(
        default="", description="Service generating the logs (nginx, rails, user-service, ...)."
    )
    parser_type: str = Field(default=DEFAULT_PARSER_TYPE, description="Log format parser.")
    project_id: str = Field(min_length=1, description="Google Cloud project id.")
    dataset_id: str = Field(min_length=1, description="BigQuery dataset id.")
    host: str = Field(default_factory=socket.gethostname, description="Host name stamped on records.")

    poll_interval: float = Field(default=0.25, gt=0, description="Seconds between tail polls.")
    provision_days: int = Field(default=5, ge=1, description="Partitions created per provisioning run.")
    provision_interval_hours: float = Field(
        default=24, gt=0, description="Hours between provisioning runs."
    )

    @field_validator("parser_type")
    @classmethod
    def known_parser(cls, v: str) -> str:
        resolve_parser(v)
        return v

    @property
    def provision_interval(self) -> timedelta:
        return timedelta(hours=self.provision_interval_hours)


def _from_env(environ: Mapping[str, str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for name in StalkerConfig.model_fields:
        value = environ.get(ENV_PREFIX + name.upper())
        if value:
            out[name] = value
    return out


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        if err["type"] == "missing":
            problems.append(f"{loc} is required")
        else:
            problems.append(f"{loc}: {err['msg']}")
    return "; ".join(problems)


def load_config(environ: Mapping[str, str] | None = None, **values: Any) -> StalkerConfig:
    """Build a config from explicit values, falling back to the environment.

    ``None`` values are treated as unset.
    """
    merged: dict[str, Any] = _from_env(os.environ if environ is None else environ)
    merged.update({k: v for k, v in values.items() if v is not None})
    try:
        return StalkerConfig(**merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {_describe(e)}") from e
