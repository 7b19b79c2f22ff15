"""String commands for the tmx-utils CLI.

Commands
- `format-list` : Join the given items into an English list.
- `loves`       : Print "I love ...!" for the given (or demo) names.
- `read-line`   : Read one line from stdin and print it trimmed.

Results go to stdout; warnings and errors go to stderr.
"""

from __future__ import annotations

import logging

import click

from tmx_utils.errors import EmptyInputError, LineReadError
from tmx_utils.string_ext import format_list, read_string_stdin, string_list

from .helpers import error, warn

logger = logging.getLogger(__name__)

DEMO_LOVES = string_list("Nona", "Samantha", "Lucy", "Charles", "myself")


@click.command("format-list")
@click.argument("items", nargs=-1)
def format_list_cmd(items: tuple[str, ...]) -> None:
    """Join ITEMS with commas and a final "and" (Oxford comma)."""
    click.echo(format_list(list(items)))


@click.command("loves")
@click.argument("names", nargs=-1)
@click.option(
    "--demo/--no-demo",
    default=True,
    show_default=True,
    help="Fall back to the demo list of names when no NAMES are given.",
)
def loves_cmd(names: tuple[str, ...], demo: bool) -> None:
    """Declare love for NAMES, e.g. "I love Nona and Lucy!"."""
    loved = list(names) if names or not demo else DEMO_LOVES
    click.echo(f"I love {format_list(loved) or 'nobody'}!")


@click.command("read-line")
@click.option("--prompt", "-p", default=None, help="Text shown on stderr before reading.")
@click.pass_context
def read_line_cmd(ctx: click.Context, prompt: str | None) -> None:
    """Read one line from standard input and print it without surrounding whitespace.

    Exits with status 1 when stdin is exhausted, the line is blank, or the
    read fails.
    """
    if prompt:
        click.echo(prompt, nl=False, err=True)
    try:
        line = read_string_stdin()
    except EmptyInputError as e:
        logger.info("Blank line on stdin")
        warn(str(e))
        ctx.exit(1)
    except LineReadError as e:
        logger.warning("Could not read from stdin: %s", e)
        error(str(e))
        ctx.exit(1)
    else:
        click.echo(line)
