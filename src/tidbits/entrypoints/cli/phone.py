"""TIDBITS phone CLI: ``tidbits phone format``."""

from __future__ import annotations

import click
import click_extra as clickx

from tidbits.phone import format_phone_number, is_valid_phone_number

from .helpers import warn


@click.group(cls=clickx.ExtraGroup)
def phone() -> None:
    """Phone number helpers."""


@phone.command(name="format")
@click.argument("value")
@click.option("--country", default="", help="Calling code to prefix, e.g. +62.")
@click.option("--separator", default=" ", show_default=True, help="Between digit blocks.")
@click.option("--brackets/--no-brackets", default=False, help="Wrap the calling code: (+62).")
def format_cmd(value: str, country: str, separator: str, brackets: bool) -> None:
    """Group the digits of VALUE in blocks of four."""
    if not is_valid_phone_number(value):
        warn(f"{value!r} does not look like a phone number; formatting its digits anyway.")
    click.echo(
        format_phone_number(
            value,
            separator=separator,
            plus_country=country,
            opening="(" if brackets else "",
            closing=")" if brackets else "",
        )
    )
