"""Configuration constants for tmx_utils.

Settings come from command-line options or their ``TMX_UTILS_*`` environment
variables; nothing is read from disk.
"""

import logging

ENV_PREFIX = "TMX_UTILS_"

LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"  # pragma: no mutate

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def level_number(name: str) -> int:
    """Convert a level name such as ``"info"`` to its numeric value.

    Args:
        name: One of `LOG_LEVELS`, in any case and with optional padding.

    Returns:
        The numeric `logging` level.

    Raises:
        ValueError: If `name` is not a known level.
    """
    if (key := name.strip().upper()) not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {name!r}; expected one of {', '.join(LOG_LEVELS)}"
        )
    return logging.getLevelNamesMapping()[key]
