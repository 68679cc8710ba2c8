"""Workflow command protocol: escaping, encoding, parsing and emitting."""

from .command import CMD_STRING, Command, CommandProperties, encode
from .emitter import issue, issue_command
from .escaping import (
    escape_data,
    escape_property,
    unescape_data,
    unescape_property,
)
from .parser import iter_commands, parse_command

__all__ = [
    "CMD_STRING",
    "Command",
    "CommandProperties",
    "encode",
    "escape_data",
    "escape_property",
    "issue",
    "issue_command",
    "iter_commands",
    "parse_command",
    "unescape_data",
    "unescape_property",
]
