"""Numeric helpers for attribute values. No engine imports."""

from __future__ import annotations

import math

from vd2svg.errors import StructuralError


def to_float(value: str, name: str) -> float:
    """Parse an authored numeric attribute, e.g. ``android:trimPathEnd="0.75"``.

    ``nan`` and ``inf`` are rejected along with non-numeric text.
    """
    try:
        result = float(value)
    except ValueError:
        raise StructuralError(f"{name} is not a number: {value!r}") from None
    if not math.isfinite(result):
        raise StructuralError(f"{name} is not a number: {value!r}")
    return result


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def format_number(value: float) -> str:
    """Shortest text that round-trips: 1.0 → "1", 0.25 → "0.25"."""
    if value.is_integer():
        return str(int(value))
    return repr(value)
