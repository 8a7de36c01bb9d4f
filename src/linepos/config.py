"""Settings shared by the command line entry point."""
from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "LINEPOS_"


class Settings(BaseModel):
    log_level: str = Field(default="warning", description="Logging verbosity level")
    one_based: bool = Field(default=False, description="Report 1-based lines and columns")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"critical", "error", "warning", "info", "debug"}:
            raise ValueError(f"unknown log level: {value!r}")
        return normalized


def load_settings(environ: Mapping[str, str] | None = None, **overrides: object) -> Settings:
    """Build `Settings` from ``LINEPOS_*`` environment variables.

    Keyword ``overrides`` that are not None win over the environment.
    """
    env = os.environ if environ is None else environ
    data: dict[str, object] = {}
    for name in Settings.model_fields:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None:
            data[name] = raw
    data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(data)
