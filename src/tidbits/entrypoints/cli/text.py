"""TIDBITS text CLI: ``tidbits text case|censor-email``."""

from __future__ import annotations

import click
import click_extra as clickx

from tidbits.strings import CensorMode, censor_email
from tidbits.strings.case import CASE_CONVERTERS

from .helpers import warn


@click.group(cls=clickx.ExtraGroup)
def text() -> None:
    """Convert and censor strings."""


@text.command()
@click.argument("style", type=click.Choice(sorted(CASE_CONVERTERS), case_sensitive=False))
@click.argument("value", metavar="TEXT")
def case(style: str, value: str) -> None:
    """Convert TEXT to camel, pascal, kebab, snake, dot case or a slug."""
    click.echo(CASE_CONVERTERS[style.lower()](value))


@text.command(name="censor-email")
@click.argument("email")
@click.option(
    "--fixed/--random",
    "fixed",
    default=False,
    help="Mask the same characters on every run (derived from the address).",
)
def censor_email_cmd(email: str, fixed: bool) -> None:
    """Mask part of EMAIL, e.g. j*hn.**e@ex**ple.c*m."""
    censored = censor_email(email, CensorMode.FIXED if fixed else CensorMode.RANDOM)
    if not censored:
        warn(f"{email!r} is not a valid email address.")
        raise click.exceptions.Exit(1)
    click.echo(censored)
