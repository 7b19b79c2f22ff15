"""Console logging for the tmx-utils CLI.

Library modules only create module loggers. The CLI installs one Rich
handler on the root logger, writing to stderr so stdout carries nothing but
command results. The console level starts from a base level and moves one
step per ``-v`` (more detail) or ``-q`` (less).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LEVEL_STEP = 10

# Libraries whose INFO/DEBUG chatter is never useful on our console.
QUIET_LIBRARIES = ("click_extra",)  # pragma: no mutate


def shift_level(base: int, verbose: int = 0, quiet: int = 0) -> int:
    """Move ``base`` one level down per ``verbose`` and up per ``quiet``.

    Example:
        >>> shift_level(logging.WARNING, verbose=1)
        20
        >>> shift_level(logging.WARNING, quiet=5)
        50

    Returns:
        The resulting level, kept within DEBUG..CRITICAL.
    """
    level = base - LEVEL_STEP * verbose + LEVEL_STEP * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def console_handler(level: int, *, debug: bool = False, color: bool = True) -> RichHandler:
    """Build the stderr handler.

    Args:
        level: Minimum level shown. Ignored in debug mode, which shows
            everything.
        debug: Show timestamps, logger names and source locations.
        color: Allow ANSI colors.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=console,
        show_time=debug,
        show_path=debug,
        enable_link_path=debug,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(
        logging.Formatter("%(name)s: %(message)s" if debug else "%(message)s")
    )
    return handler


def setup_logging(level: int, *, debug: bool = False, color: bool = True) -> RichHandler:
    """Route every record through a single console handler.

    The root logger accepts everything and the handler filters, so a later
    ``-v`` never needs to touch individual loggers. Replaces any handlers
    installed by an earlier call.

    Returns:
        The installed handler.
    """
    handler = console_handler(level, debug=debug, color=color)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    for name in QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.NOTSET if debug else logging.WARNING)
    return handler
