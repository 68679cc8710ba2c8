"""Variable commands - environment exports, masking, inputs and outputs."""

import sys

import click

from ...context import pass_context
from ...models.errors import MissingRequiredInputError


@click.command()
@click.argument("name")
@click.argument("value")
@pass_context
def export(ctx, name, value):
    """Export NAME=VALUE to this step and later steps of the job.

    Examples:
        wfcmd export GREETING hi     # ::set-env name=GREETING::hi
    """
    ctx.action.export_variable(name, value)


@click.command()
@click.argument("secret")
@pass_context
def mask(ctx, secret):
    """Mask SECRET in the job's logs."""
    ctx.action.set_secret(secret)


@click.command("add-path")
@click.argument("path")
@pass_context
def add_path(ctx, path):
    """Prepend PATH to the search path of later steps."""
    ctx.action.add_path(path)


@click.command("get-input")
@click.argument("name")
@click.option(
    "--required", is_flag=True, help="Fail if the input is missing or blank"
)
@pass_context
def get_input(ctx, name, required):
    """Print the trimmed value of step input NAME.

    Examples:
        wfcmd get-input "api token" --required   # reads INPUT_API_TOKEN
    """
    try:
        value = ctx.action.get_input(name, required)
    except MissingRequiredInputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(value)


@click.command("set-output")
@click.argument("name")
@click.argument("value")
@pass_context
def set_output(ctx, name, value):
    """Set step output NAME to VALUE."""
    ctx.action.set_output(name, value)
