"""Terminal message helpers for the tmx-utils CLI.

Messages go to stderr so stdout only ever carries command results. Emoji
markers fall back to ASCII on terminals that cannot encode them.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call; Click may swap it (e.g. under
    ``CliRunner``).
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, fallback)`` pair when stderr can show it."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  Input was empty.``
    """
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  End of input reached before a line was read.``
    """
    click.secho(f"{glyph(ERROR)}  {msg}", fg="red", bold=True, err=True)
