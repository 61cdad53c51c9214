"""``state`` command: interpret a value as on/off."""

import click

from toolshed.state import is_off, is_on


@click.command("state")
@click.argument("value")
@click.option(
    "--default",
    "default",
    type=click.Choice(["on", "off", "unknown"], case_sensitive=False),
    default="unknown",
    show_default=True,
    help="Result when VALUE is not recognized.",
)
def state_cmd(value: str, default: str) -> None:
    """Print "on" or "off" for VALUE (yes/no, true/false, 1/0, ...)."""
    if is_on(value, False):
        click.echo("on")
    elif is_off(value, False):
        click.echo("off")
    else:
        click.echo(default.lower())
