"""Logging commands - annotations, groups, echo and failure."""

import sys

import click

from ...context import pass_context


@click.command()
@click.argument("state", type=click.Choice(["on", "off"]))
@pass_context
def echo(ctx, state):
    """Turn command echoing on or off."""
    ctx.action.set_command_echo(state == "on")


@click.command()
@click.argument("message")
@pass_context
def debug(ctx, message):
    """Write a debug message (shown when step debugging is enabled)."""
    ctx.action.debug(message)


@click.command()
@click.argument("message")
@pass_context
def warning(ctx, message):
    """Add a warning annotation."""
    ctx.action.warning(message)


@click.command()
@click.argument("message")
@pass_context
def error(ctx, message):
    """Add an error annotation (does not fail the step)."""
    ctx.action.error(message)


@click.command()
@click.argument("message")
@pass_context
def info(ctx, message):
    """Write MESSAGE as a plain log line."""
    ctx.action.info(message)


@click.command()
@click.argument("message")
@pass_context
def fail(ctx, message):
    """Report MESSAGE as an error and exit with the failure code."""
    ctx.action.set_failed(message)
    sys.exit(ctx.action.exit_code)


@click.command()
@click.argument("name")
@pass_context
def group(ctx, name):
    """Start a foldable output group called NAME."""
    ctx.action.start_group(name)


@click.command()
@pass_context
def endgroup(ctx):
    """End the current output group."""
    ctx.action.end_group()


@click.command("is-debug")
@pass_context
def is_debug(ctx):
    """Print whether step debugging is on; exit 1 when it is off.

    Examples:
        if wfcmd is-debug >/dev/null; then set -x; fi
    """
    enabled = ctx.action.is_debug()
    click.echo("true" if enabled else "false")
    if not enabled:
        sys.exit(1)
