"""tmx-utils CLI entry point.

Defines the top-level ``tmx-utils`` command (via Click-Extra), sets up
console logging for the whole process, and registers the helper commands.

Currently available commands
- ``tmx-utils format-list`` / ``tmx-utils loves``: list formatting.
- ``tmx-utils read-line``: read one trimmed line from stdin.
- ``tmx-utils clamp`` / ``tmx-utils lerp``: numeric helpers.

Examples
    $ tmx-utils --version
    $ tmx-utils format-list Nona Samantha Lucy
    $ echo "  hello " | tmx-utils read-line
    $ tmx-utils clamp -1.0 0.0 1.0
"""

import logging

import click
import click_extra as clickx

from tmx_utils import __version__, config
from tmx_utils.logging import setup_logging, shift_level

from .numbers import clamp_cmd, lerp_cmd
from .strings import format_list_cmd, loves_cmd, read_line_cmd

logger = logging.getLogger(__name__)


HELP = """tmx-utils command-line interface.

    Small everyday helpers: join names into an English list with an Oxford
    comma, read a trimmed line from standard input, and clamp or interpolate
    numbers.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--log-level",
    type=click.Choice(config.LOG_LEVELS, case_sensitive=False),
    default=config.DEFAULT_LOG_LEVEL,
    envvar=config.LOG_LEVEL_ENV,
    show_default=True,
    show_envvar=True,
    help="Base console level that -v and -q move from.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show one more level of detail per repetition (-vv for DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show one level less per repetition (-qq for CRITICAL only).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything, with timestamps, logger names and source lines.",
)
@clickx.pass_context
def tmx_utils(
    ctx: click.Context,
    log_level: str,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
) -> None:
    """tmx-utils command-line interface."""
    level = shift_level(config.level_number(log_level), verbose_count, quiet_count)
    setup_logging(level, debug=debug, color=ctx.color is not False)
    logger.debug(
        "tmx-utils %s, console level %s, command %s",
        __version__,
        logging.getLevelName(level),
        ctx.invoked_subcommand,
    )
    ctx.call_on_close(logging.shutdown)


tmx_utils.add_command(format_list_cmd)
tmx_utils.add_command(loves_cmd)
tmx_utils.add_command(read_line_cmd)
tmx_utils.add_command(clamp_cmd)
tmx_utils.add_command(lerp_cmd)
