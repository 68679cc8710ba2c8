"""Writing encoded commands to the output stream."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TextIO

from ..models.errors import InvalidArgumentError
from ..serialization import Serializer
from .command import encode

logger = logging.getLogger(__name__)


def issue_command(
    stream: Optional[TextIO],
    command: str,
    properties: Optional[Mapping[str, Any]] = None,
    message: Any = None,
    serializer: Optional[Serializer] = None,
) -> None:
    """Write one command line to ``stream`` and flush it.

    Args:
        stream: Output stream the orchestrator reads
        command: Command identifier
        properties: Ordered properties, or None for a bare command
        message: Payload; None is written as an empty payload
        serializer: Conversion used for non-string values

    Raises:
        InvalidArgumentError: If ``stream`` is None or ``command`` is empty
    """
    if stream is None:
        raise InvalidArgumentError("Output stream is required")

    line = encode(command, properties, message, serializer)
    stream.write(line + "\n")
    # Commands must interleave correctly with other output
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()
    logger.debug("Issued %s command", command)


def issue(stream: Optional[TextIO], command: str, message: str = "") -> None:
    """Write a command without properties."""
    issue_command(stream, command, None, message)


__all__ = ["issue", "issue_command"]
