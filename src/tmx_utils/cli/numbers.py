"""Numeric commands for the tmx-utils CLI.

Arguments may be negative (``tmx-utils clamp -1.0 0.0 1.0``); a leading
``-`` that is not one of the command's own options is read as a number.
"""

from __future__ import annotations

import click

from tmx_utils.math_utils import clamp, lerp, lerp_clamped

# Unknown "-1"-style tokens stay positional instead of failing as options.
NUMERIC_ARGS = {"ignore_unknown_options": True}


class NumberParamType(click.ParamType):
    """Accept integers as ``int`` and anything else numeric as ``float``."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()


@click.command("clamp", context_settings=NUMERIC_ARGS)
@click.argument("value", type=NUMBER)
@click.argument("min_val", metavar="MIN", type=NUMBER)
@click.argument("max_val", metavar="MAX", type=NUMBER)
def clamp_cmd(value, min_val, max_val) -> None:
    """Clamp VALUE between MIN and MAX (MIN wins if the bounds cross)."""
    click.echo(clamp(value, min_val, max_val))


@click.command("lerp", context_settings=NUMERIC_ARGS)
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
@click.argument("t", type=NUMBER)
@click.option("--clamped", is_flag=True, help="Clamp T between 0 and 1 first.")
def lerp_cmd(a, b, t, clamped: bool) -> None:
    """Linearly interpolate between A and B by T."""
    click.echo((lerp_clamped if clamped else lerp)(a, b, t))
