"""Workflow command encoding.

A command is written as a single line:
    ::name[ key1=value1,key2=value2]::message

Examples:
    encode("set-env", {"name": "GREETING"}, "hi") → "::set-env name=GREETING::hi"
    encode("endgroup") → "::endgroup::"
    encode("warning", None, "50%") → "::warning::50%25"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..models.errors import InvalidArgumentError
from ..serialization import Serializer, to_command_value
from .escaping import escape_data, escape_property

CMD_STRING = "::"


class CommandProperties(dict):
    """Ordered command properties; ``None`` values are left out of the line."""

    @classmethod
    def named(cls, name: str) -> "CommandProperties":
        """Properties carrying only ``name``, as used by set-env and friends."""
        return cls(name=name)


@dataclass(frozen=True)
class Command:
    """A single protocol command, built right before it is written."""

    command: str
    """Command identifier, e.g. "set-output"."""

    properties: Optional[Mapping[str, Any]] = None
    """Ordered key/value properties, or None for a bare command."""

    message: str = ""
    """Payload written after the closing ``::``."""

    def __post_init__(self):
        if not self.command:
            raise InvalidArgumentError("missing.command")

    def to_line(self, serializer: Optional[Serializer] = None) -> str:
        """Render the command as one protocol line (without line terminator)."""
        parts = [CMD_STRING, self.command]

        entries = [
            f"{key}={escape_property(to_command_value(value, serializer))}"
            for key, value in (self.properties or {}).items()
            if value is not None
        ]
        if entries:
            parts.append(" ")
            parts.append(",".join(entries))

        parts.append(CMD_STRING)
        parts.append(escape_data(self.message))
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_line()


def encode(
    command: str,
    properties: Optional[Mapping[str, Any]] = None,
    message: Any = None,
    serializer: Optional[Serializer] = None,
) -> str:
    """Encode a command as a protocol line.

    Args:
        command: Command identifier (must be non-empty)
        properties: Ordered properties; entries with None values are skipped
        message: Payload; non-string values are converted first
        serializer: Conversion used for non-string values

    Raises:
        InvalidArgumentError: If ``command`` is empty
        ConversionError: If a value cannot be converted
    """
    cmd = Command(command, properties, to_command_value(message, serializer))
    return cmd.to_line(serializer)


__all__ = ["CMD_STRING", "Command", "CommandProperties", "encode"]
