"""State commands - pass values between phases of one step."""

import click

from ...context import pass_context


@click.command("save-state")
@click.argument("name")
@click.argument("value")
@pass_context
def save_state(ctx, name, value):
    """Save NAME=VALUE for a later phase of this step."""
    ctx.action.save_state(name, value)


@click.command("get-state")
@click.argument("name")
@pass_context
def get_state(ctx, name):
    """Print the state NAME saved by an earlier phase (empty if unset)."""
    click.echo(ctx.action.get_state(name))
