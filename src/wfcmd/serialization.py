"""Conversion of arbitrary values into command text.

Strings pass through unchanged and ``None`` becomes an empty string. Every
other value goes through a serializer: a callable that returns the value's
canonical string form and raises on failure. The default serializer writes
compact JSON, so ``True`` becomes ``true`` and ``{"a": 1}`` becomes
``{"a":1}``.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, Optional

from pydantic import BaseModel

from .models.errors import ConversionError

Serializer = Callable[[Any], str]


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(
        f"Object of type {type(value).__name__} is not JSON serializable"
    )


def json_serializer(value: Any) -> str:
    """Serialize ``value`` to compact JSON."""
    return json.dumps(
        value,
        default=_json_default,
        ensure_ascii=False,
        separators=(",", ":"),
    )


def to_command_value(
    value: Any, serializer: Optional[Serializer] = None
) -> str:
    """Sanitize a value into a string so it can be issued as a command.

    Args:
        value: Value to convert
        serializer: Callable used for non-string values (default: JSON)

    Returns:
        The command text for ``value``

    Raises:
        ConversionError: If the serializer cannot convert the value
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value

    serialize = serializer or json_serializer
    try:
        result = serialize(value)
    except (TypeError, ValueError) as e:
        raise ConversionError(
            f"Cannot convert {type(value).__name__} to command value: {e}"
        ) from e

    if not isinstance(result, str):
        raise ConversionError(
            f"Serializer returned {type(result).__name__}, expected str"
        )
    return result


__all__ = ["Serializer", "json_serializer", "to_command_value"]
