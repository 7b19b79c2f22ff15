"""CLI helpers for tmx-utils.

Message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .messages import error, warn

__all__ = ["error", "warn"]
