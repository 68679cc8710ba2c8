"""Exceptions and result models used across wfcmd."""

from __future__ import annotations

from pydantic import BaseModel


class WfcmdError(Exception):
    """Base class for wfcmd errors."""


class InvalidArgumentError(WfcmdError, ValueError):
    """API misuse: a required collaborator or argument is missing."""


class MissingRequiredInputError(WfcmdError):
    """A required step input was not supplied (or was blank)."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class ConversionError(WfcmdError):
    """A value could not be converted to its command text form."""


class Error(BaseModel):
    """Error result from operations."""

    message: str

    def __str__(self) -> str:
        return self.message


__all__ = [
    "ConversionError",
    "Error",
    "InvalidArgumentError",
    "MissingRequiredInputError",
    "WfcmdError",
]
