"""Codec commands - raw command encoding and NDJSON decoding."""

import json
import sys

import click

from ...models.errors import InvalidArgumentError
from ...protocol.command import Command, CommandProperties
from ...protocol.emitter import issue_command
from ...protocol.parser import iter_commands


def _parse_properties(items):
    """Parse ('k=v', 'x=y') into ordered CommandProperties."""
    properties = CommandProperties()
    for item in items:
        if "=" not in item:
            raise click.BadParameter(
                f"Expected KEY=VALUE, got: {item!r}", param_hint="--property"
            )
        key, value = item.split("=", 1)
        if not key:
            raise click.BadParameter(
                f"Property key cannot be empty: {item!r}", param_hint="--property"
            )
        properties[key] = value
    return properties


@click.command()
@click.argument("name")
@click.argument("message", required=False, default="")
@click.option(
    "-p",
    "--property",
    "props",
    multiple=True,
    help="KEY=VALUE property (repeatable, order is kept)",
)
def encode(name, message, props):
    """Write an arbitrary command NAME with MESSAGE.

    Examples:
        wfcmd encode notice "Deployed" -p title=Release
        # ::notice title=Release::Deployed
    """
    properties = _parse_properties(props) if props else None
    try:
        issue_command(sys.stdout, name, properties, message)
    except InvalidArgumentError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _record(cmd: Command) -> dict:
    return {
        "command": cmd.command,
        "properties": dict(cmd.properties) if cmd.properties else {},
        "message": cmd.message,
    }


@click.command()
@click.option(
    "--all", "include_logs", is_flag=True, help="Also emit plain log lines"
)
def decode(include_logs):
    """Decode workflow commands from stdin into NDJSON.

    Examples:
        ./step.sh | wfcmd decode
        ./step.sh | wfcmd decode --all    # keep plain lines as {"log": ...}
    """
    for item in iter_commands(sys.stdin, include_logs=include_logs):
        if isinstance(item, Command):
            record = _record(item)
        else:
            record = {"log": item[1]}
        print(json.dumps(record, ensure_ascii=False), flush=True)
