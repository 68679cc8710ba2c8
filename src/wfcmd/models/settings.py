"""Environment channel settings."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import Error

SETTINGS_ENV_VAR = "WFCMD_SETTINGS"


class ChannelSettings(BaseModel):
    """Names of the environment variables shared with the orchestrator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    input_prefix: str = "INPUT_"
    state_prefix: str = "STATE_"
    path_variable: str = "PATH"
    debug_variable: str = "RUNNER_DEBUG"
    path_separator: str = Field(default=os.pathsep)

    @field_validator("path_variable", "debug_variable", "path_separator")
    @classmethod
    def not_empty(cls, v: str) -> str:
        """Variable names and the separator cannot be empty."""

        if not v:
            raise ValueError("Value cannot be empty")
        return v


def load_settings(path: Path | str) -> ChannelSettings | Error:
    """Load settings from a JSON file.

    Returns an ``Error`` result when the file is missing, is not valid JSON,
    or does not validate against ``ChannelSettings``.
    """

    settings_path = Path(path)
    if not settings_path.is_file():
        return Error(message=f"Settings file not found: {settings_path}")

    try:
        text = settings_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Error(message=f"Cannot read {settings_path}: {e}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Error(message=f"Invalid JSON in {settings_path}: {e}")

    try:
        return ChannelSettings.model_validate(data)
    except ValidationError as e:
        return Error(message=f"Invalid settings in {settings_path}: {e}")


def resolve_settings(
    settings_option: str | None, environ: dict | None = None
) -> ChannelSettings | Error:
    """Resolve settings for the CLI.

    Resolution order:
    1. --settings CLI flag
    2. $WFCMD_SETTINGS environment variable
    3. Built-in defaults
    """
    if settings_option:
        return load_settings(settings_option)

    environ = os.environ if environ is None else environ
    env_path = environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return load_settings(env_path)

    return ChannelSettings()


__all__ = [
    "SETTINGS_ENV_VAR",
    "ChannelSettings",
    "load_settings",
    "resolve_settings",
]
