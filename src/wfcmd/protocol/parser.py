"""Command line parsing, as done by the orchestrator reading a step's output.

This module implements parsing for the line syntax:
    ::name[ key1=value1,key2=value2]::message

Lines that do not follow it are plain log lines and parse to None.
"""

from typing import Dict, Iterator, Optional, TextIO, Tuple, Union

from .command import CMD_STRING, Command
from .escaping import unescape_data, unescape_property


def parse_command(line: str) -> Optional[Command]:
    """Parse one output line into a Command.

    Args:
        line: Raw output line, with or without its line terminator

    Returns:
        Parsed Command, or None if the line is not a command

    Examples:
        >>> parse_command("::set-output name=result::42")
        Command(command='set-output', properties={'name': 'result'}, message='42')

        >>> parse_command("::endgroup::")
        Command(command='endgroup', properties=None, message='')

        >>> parse_command("just a log line") is None
        True
    """
    line = line.rstrip("\r\n")
    if not line.startswith(CMD_STRING):
        return None

    # The command section ends at the first "::" after the prefix.
    # Property values never contain ":" once escaped.
    end = line.find(CMD_STRING, len(CMD_STRING))
    if end == -1:
        return None

    info = line[len(CMD_STRING):end]
    message = unescape_data(line[end + len(CMD_STRING):])

    if " " in info:
        name, property_string = info.split(" ", 1)
    else:
        name, property_string = info, ""

    if not name:
        return None

    properties = _parse_properties(property_string) if property_string else None
    return Command(name, properties, message)


def _parse_properties(property_string: str) -> Dict[str, str]:
    """Parse comma-separated key=value pairs, skipping malformed entries."""
    properties: Dict[str, str] = {}
    for entry in property_string.split(","):
        if "=" not in entry:
            continue
        key, value = entry.split("=", 1)
        if key:
            properties[key] = unescape_property(value)
    return properties


def iter_commands(
    stream: TextIO, include_logs: bool = False
) -> Iterator[Union[Command, Tuple[str, str]]]:
    """Yield commands parsed from a stream of output lines.

    Args:
        stream: Text stream to read
        include_logs: Also yield plain lines as ("log", line) tuples

    Notes:
        - Fully streaming, one line at a time
    """
    for raw in stream:
        cmd = parse_command(raw)
        if cmd is not None:
            yield cmd
        elif include_logs:
            yield ("log", raw.rstrip("\r\n"))


__all__ = ["iter_commands", "parse_command"]
