"""Numeric helpers for clamping and linear interpolation."""

from __future__ import annotations

from typing import Any, TypeVar

N = TypeVar("N", bound=Any)  # int, float, Fraction, Decimal, ...


def clamp(val: N, min_val: N, max_val: N) -> N:
    """Clamp ``val`` between ``min_val`` and ``max_val``.

    The lower bound is checked first, so with crossed bounds anything below
    ``min_val`` comes back as ``min_val``.

    Example:
        >>> clamp(3, 0, 2)
        2
        >>> clamp(-1.0, 0.0, 1.0)
        0.0
        >>> clamp(1, 2, 0)
        2
    """
    if val < min_val:
        return min_val
    if val > max_val:
        return max_val
    return val


def clamp01(val: N) -> N:
    """Clamp ``val`` between 0 and 1, keeping the type of ``val``.

    Example:
        >>> clamp01(-1)
        0
        >>> clamp01(3.0)
        1.0
    """
    kind = type(val)
    return clamp(val, kind(0), kind(1))


def lerp(a: N, b: N, t: N) -> N:
    """Linearly interpolate between ``a`` and ``b`` by ``t``.

    ``t`` is NOT clamped, so values outside [0, 1] extrapolate.
    """
    return a + (b - a) * t


def lerp_clamped(a: N, b: N, t: N) -> N:
    """Linearly interpolate between ``a`` and ``b`` with ``t`` clamped to [0, 1]."""
    return a + (b - a) * clamp01(t)
