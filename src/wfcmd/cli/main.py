"""wfcmd CLI main entry point with global options."""

import logging
import sys

import click

from ..action import Action
from ..context import StepEnvironment, WfcmdContext
from ..models.errors import Error
from ..models.settings import resolve_settings


@click.group()
@click.option(
    "--settings",
    type=click.Path(dir_okay=False),
    help="Channel settings JSON file (overrides $WFCMD_SETTINGS)",
)
@click.option(
    "--verbose", "-v", is_flag=True, help="Log diagnostics to stderr"
)
@click.pass_context
def cli(ctx, settings, verbose):
    """wfcmd - workflow commands for pipeline steps."""
    ctx.ensure_object(WfcmdContext)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    resolved = resolve_settings(settings)
    if isinstance(resolved, Error):
        click.echo(f"Error: {resolved}", err=True)
        sys.exit(1)

    ctx.obj.action = Action(
        out=sys.stdout,
        env=StepEnvironment.from_os(resolved),
        settings=resolved,
    )


# Register commands at module level so tests can import cli with commands attached
from .commands.codec import decode, encode
from .commands.log import (
    debug,
    echo,
    endgroup,
    error,
    fail,
    group,
    info,
    is_debug,
    warning,
)
from .commands.state import get_state, save_state
from .commands.variables import add_path, export, get_input, mask, set_output

cli.add_command(export)
cli.add_command(mask)
cli.add_command(add_path)
cli.add_command(get_input)
cli.add_command(set_output)
cli.add_command(echo)
cli.add_command(debug)
cli.add_command(warning)
cli.add_command(error)
cli.add_command(info)
cli.add_command(fail)
cli.add_command(group)
cli.add_command(endgroup)
cli.add_command(is_debug)
cli.add_command(save_state)
cli.add_command(get_state)
cli.add_command(encode)
cli.add_command(decode)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
