"""Test helpers that guarantee a teardown step.

The runners call a test body with a resource and then always call a teardown
with the same resource, whether the body returned or raised. Exceptions from
the body (including ``pytest`` failures and ``KeyboardInterrupt``) reach the
caller only after teardown has finished.

If teardown itself raises, its exception propagates. When the body had
already failed, that earlier exception is kept as the teardown exception's
``__context__`` and the double failure is logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, TypeVar

from tmx_utils.errors import FixtureSetupError

if TYPE_CHECKING:
    import os

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


def run_test(
    resource: R, test: Callable[[R], T], teardown: Callable[[R], Any]
) -> T:
    """Run ``test(resource)`` and then ``teardown(resource)`` exactly once.

    Args:
        resource: Value handed to both callables.
        test: The test body.
        teardown: Cleanup, called after ``test`` on every exit path.

    Returns:
        The value returned by ``test``.

    Raises:
        BaseException: Whatever ``test`` raised, re-raised after teardown, or
            whatever ``teardown`` raised.
    """
    failure: BaseException | None = None
    logger.debug("Running test %s", _name(test))
    try:
        return test(resource)
    except BaseException as e:
        failure = e
        raise
    finally:
        logger.debug("Tearing down after %s", _name(test))
        _teardown(resource, teardown, failure)


def run_file_test(
    file: IO[Any], test: Callable[[IO[Any]], T], teardown: Callable[[IO[Any]], Any]
) -> T:
    """Run a test against an open file with a guaranteed teardown.

    Same ordering and guarantee as :func:`run_test`; ``file`` is passed to
    both ``test`` and ``teardown``.
    """
    return run_test(file, test, teardown)


def run_temp_file_test(
    test: Callable[[IO[str]], T], path: str | os.PathLike[str], contents: str
) -> T:
    """Run a test on a freshly written file that is deleted afterwards.

    Writes ``contents`` to ``path``, opens it for reading and passes the open
    file to ``test``. The file is closed and removed once the test finishes.

    Example:
        >>> run_temp_file_test(lambda f: f.read(), "./run_file_test.txt", "input_string")
        'input_string'

    Raises:
        FixtureSetupError: If the file cannot be opened after writing.
    """
    target = Path(path)

    def teardown(f: IO[str]) -> None:
        f.close()
        target.unlink()

    target.write_text(contents, encoding="utf-8")
    try:
        file = target.open(encoding="utf-8")  # pylint: disable=consider-using-with
    except OSError as e:
        target.unlink(missing_ok=True)
        raise FixtureSetupError(target, f"Error: {e!r}") from e

    return run_file_test(file, test, teardown)


def _teardown(
    resource: Any, teardown: Callable[[Any], Any], failure: BaseException | None
) -> None:
    try:
        teardown(resource)
    except BaseException:
        if failure is not None:
            logger.error(
                "Teardown %s failed while handling test failure: %r",
                _name(teardown),
                failure,
            )
        raise


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", repr(func))
