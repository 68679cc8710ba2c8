"""Escaping rules for command payloads and property values.

Payload (data) escaping:
    %  -> %25
    CR -> %0D
    LF -> %0A

Property escaping applies data escaping, then:
    :  -> %3A
    ,  -> %2C

``%`` is always replaced first so the sequences inserted afterwards are not
escaped a second time.
"""

import re

_DATA_ESCAPES = (("%", "%25"), ("\r", "%0D"), ("\n", "%0A"))
_PROPERTY_ESCAPES = ((":", "%3A"), (",", "%2C"))

_DATA_CODES = {"25": "%", "0D": "\r", "0A": "\n"}
_PROPERTY_CODES = {**_DATA_CODES, "3A": ":", "2C": ","}

_DATA_PATTERN = re.compile(r"%(25|0D|0A)")
_PROPERTY_PATTERN = re.compile(r"%(25|0D|0A|3A|2C)")


def escape_data(value: str) -> str:
    """Escape a command payload."""
    for raw, escaped in _DATA_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def escape_property(value: str) -> str:
    """Escape a command property value."""
    value = escape_data(value)
    for raw, escaped in _PROPERTY_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def unescape_data(value: str) -> str:
    """Reverse ``escape_data`` in a single pass.

    Unknown ``%`` sequences are left as they are.
    """
    return _DATA_PATTERN.sub(lambda m: _DATA_CODES[m.group(1)], value)


def unescape_property(value: str) -> str:
    """Reverse ``escape_property`` in a single pass."""
    return _PROPERTY_PATTERN.sub(lambda m: _PROPERTY_CODES[m.group(1)], value)


__all__ = [
    "escape_data",
    "escape_property",
    "unescape_data",
    "unescape_property",
]
