"""Split a float into integer and fixed-precision fractional digits for printing."""

from __future__ import annotations

_MAX_PRECISION = 5


def integer_part(value: float) -> int:
    """Return the integer part of ``value``, truncated toward zero."""
    return int(value)


def fractional_part(value: float, precision: int) -> int:
    """Return the first ``precision`` fractional digits of ``value`` as a non-negative integer.

    ``precision`` must be within 0..5; otherwise ValueError is raised.
    """
    if not 0 <= precision <= _MAX_PRECISION:
        raise ValueError(f"precision must be within 0..{_MAX_PRECISION}, got {precision}")
    scale = 10**precision
    return abs(int(value * scale)) % scale