"""TIDBITS CLI entry point.

Defines the top-level ``tidbits`` command (via Click-Extra), configures
logging for every subcommand and registers the command groups.

Currently available groups
- ``tidbits currency``: parse and format currency amounts.
- ``tidbits text``: case conversion and email censoring.
- ``tidbits phone``: phone number formatting.

Notes
- The CLI version is sourced from `tidbits.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ tidbits currency format 1500000 --preset id
    $ tidbits -v text case snake "Hello World"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from tidbits import __version__
from tidbits.logging import config_console_handler, config_flight_recorder, log_startup

from .currency import currency as currency_group
from .helpers import hyperlink
from .helpers.log_level_parser import DEFAULT_LIB_LEVELS, parse_log_level
from .phone import phone as phone_group
from .text import text as text_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """TIDBITS command-line interface.

    Small, dependable text helpers: locale-agnostic currency parsing and
    formatting, string case conversion, email censoring and phone number
    formatting. Results go to stdout; notices and logs go to stderr.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://tidbits.readthedocs.io/"),
        "  Issues: " + hyperlink("https://github.com/tidbits-dev/tidbits/issues"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("tidbits", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="TIDBITS_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="TIDBITS_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via TIDBITS_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity (unaffected by -v/-q) "
        "and writes them to --log-path when a WARNING/ERROR occurs, or on clean exit "
        "if --force-flush is set. Use --no-flight-recorder to disable."
    ),
    default=True,
    envvar="TIDBITS_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected."
    ),
    default=False,
    envvar="TIDBITS_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L tidbits.currency=DEBUG "
        "-L click_extra=ERROR) or via TIDBITS_LOGGER_LEVELS (comma/space list)."
    ),
    default=tuple(f"{name}={logging.getLevelName(lvl)}" for name, lvl in DEFAULT_LIB_LEVELS.items()),
    envvar="TIDBITS_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def tidbits(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """TIDBITS command-line interface."""

    # 0) effective console verbosity, clamped to DEBUG..CRITICAL
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(config_console_handler(level=level, debug_mode=debug, color=use_color))

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)  # runs after the subcommand returns


tidbits.add_command(currency_group)
tidbits.add_command(text_group)
tidbits.add_command(phone_group)
