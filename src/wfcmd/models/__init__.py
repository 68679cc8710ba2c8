"""Error, result and settings models."""

from .errors import (
    ConversionError,
    Error,
    InvalidArgumentError,
    MissingRequiredInputError,
    WfcmdError,
)
from .settings import ChannelSettings, load_settings, resolve_settings

__all__ = [
    "ChannelSettings",
    "ConversionError",
    "Error",
    "InvalidArgumentError",
    "MissingRequiredInputError",
    "WfcmdError",
    "load_settings",
    "resolve_settings",
]
