"""Unit tests for the NUMBER parameter type of the numeric commands."""

import click
import pytest

from tmx_utils.cli.numbers import NUMBER


@pytest.mark.parametrize(
    ("raw", "expected", "kind"),
    [("3", 3, int), ("-7", -7, int), ("0.5", 0.5, float), ("1e3", 1000.0, float), (2, 2, int)],
)
def test_number_conversion(raw, expected, kind):
    """Integers stay ints; other numeric text becomes float."""
    value = NUMBER.convert(raw, None, None)
    assert value == expected
    assert isinstance(value, kind)


@pytest.mark.parametrize("raw", ["one", "", "1,5"])
def test_number_rejects_non_numbers(raw):
    """Non-numeric text is a parameter error."""
    with pytest.raises(click.BadParameter):
        NUMBER.convert(raw, None, None)
