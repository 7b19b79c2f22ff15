"""String helpers: list formatting and line reading.

Lists are formatted as English prose with an Oxford comma
(``"Nona, Samantha, Lucy, and Charles"``). Line readers pull a single line
from a text stream, trim it, and report failures through
:class:`~tmx_utils.errors.LineReadError` instead of returning an empty string.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from tmx_utils.errors import EmptyInputError, EndOfInputError, LineReadError

if TYPE_CHECKING:
    from typing import BinaryIO, TextIO

logger = logging.getLogger(__name__)

# Held while a line is read from stdin so concurrent readers don't interleave.
_STDIN_LOCK = threading.Lock()


# ============================================================================
#                           List formatting
# ============================================================================


def string_list(*items: object) -> list[str]:
    """Build a new ``list[str]`` from the given values.

    Each item is converted with ``str()``.

    Example:
        >>> string_list("I was once a literal", 3)
        ['I was once a literal', '3']
    """
    return [str(item) for item in items]


def format_list(items: Sequence[str]) -> str:
    """Format a list of strings with commas and "and" where needed.

    Uses the Oxford comma.

    Args:
        items: The strings to join, in order.

    Returns:
        str: ``""`` for no items, the item itself for one, ``"A and B"`` for
        two, and ``"A, B, and C"`` for three or more.

    Example:
        >>> format_list(["Nona", "Samantha", "Lucy", "Charles"])
        'Nona, Samantha, Lucy, and Charles'
    """
    return format_list_slices(items)


def format_list_slices(items: Iterable[str]) -> str:
    """Format any iterable of string-like values like :func:`format_list`.

    The iterable is consumed exactly once; items that are not ``str`` are
    converted with ``str()``.

    Args:
        items: String-like values to join, in order (tuples, generators, ...).

    Returns:
        str: The joined phrase.
    """
    words = [str(item) for item in items]
    match len(words):
        case 0:
            return ""
        case 1:
            return words[0]
        case 2:
            return f"{words[0]} and {words[1]}"
        case _:
            return f"{', '.join(words[:-1])}, and {words[-1]}"


# ============================================================================
#                           Line reading
# ============================================================================


def read_string(reader: TextIO | BinaryIO) -> str:
    """Read a single line from ``reader`` and trim it.

    Args:
        reader: Any stream providing ``readline()``. Lines from binary
            streams are decoded as UTF-8.

    Returns:
        str: The line without its terminator or surrounding whitespace.

    Raises:
        EndOfInputError: If the stream is already exhausted.
        EmptyInputError: If the line holds only whitespace.
        LineReadError: If the stream itself fails; the original exception is
            chained and available as ``cause``.
    """
    try:
        line = reader.readline()
        if isinstance(line, bytes):
            line = line.decode("utf-8")
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # ValueError: reading from a closed file
        logger.debug("Line read failed: %r", e)
        raise LineReadError(f"Failed to read line: {e}", cause=e) from e

    if not line:
        logger.debug("Line read hit end of input")
        raise EndOfInputError

    if not (trimmed := line.strip()):
        logger.debug("Line read got a blank line")
        raise EmptyInputError

    logger.debug("Read line of %d characters", len(trimmed))
    return trimmed


def read_string_stdin() -> str:
    """Read a single trimmed line from standard input.

    Standard input is held exclusively for the duration of the read and
    released on every exit path.

    Returns:
        str: The trimmed line.

    Raises:
        LineReadError: See :func:`read_string`.
    """
    with _STDIN_LOCK:
        return read_string(sys.stdin)


def read_local_file(path: str | os.PathLike[str]) -> str:
    """Read a text file located relative to the current working directory.

    Args:
        path: File path, resolved against :func:`pathlib.Path.cwd`.

    Returns:
        str: The whole file content.

    Raises:
        FileNotFoundError: If no such file exists.
        OSError: For any other I/O failure.
    """
    input_file = Path.cwd() / path
    logger.debug("Reading local file %s", input_file)
    return input_file.read_text(encoding="utf-8")
