"""wfcmd: workflow commands for steps of an orchestrated pipeline."""

from .action import Action
from .context import StepEnvironment
from .models import (
    ChannelSettings,
    ConversionError,
    Error,
    InvalidArgumentError,
    MissingRequiredInputError,
)
from .status import ExitCode

__all__ = [
    "__version__",
    "Action",
    "ChannelSettings",
    "ConversionError",
    "Error",
    "ExitCode",
    "InvalidArgumentError",
    "MissingRequiredInputError",
    "StepEnvironment",
]

__version__ = "0.0.1"
