"""Error definitions for tmx_utils."""

from __future__ import annotations

from pathlib import Path

# ============================================================================
#                           General errors
# ============================================================================


class TmxUtilsError(Exception):
    """Base class for all tmx_utils errors."""


# ============================================================================
#                           Line reading errors
# ============================================================================


class LineReadError(TmxUtilsError):
    """Raised when a line could not be read from an input source.

    Attributes:
        cause: The underlying exception reported by the source, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EndOfInputError(LineReadError):
    """Raised when the input source is exhausted before a line was read."""

    def __init__(self) -> None:
        super().__init__("End of input reached before a line was read.")


class EmptyInputError(LineReadError):
    """Raised when the line read contains nothing but whitespace."""

    def __init__(self) -> None:
        super().__init__("Input was empty.")


# ============================================================================
#                           Test runner errors
# ============================================================================


class FixtureSetupError(TmxUtilsError):
    """Raised when a test fixture file cannot be prepared."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Couldn't open {path} after writing, deleting. {reason}")
        self.path = Path(path)
