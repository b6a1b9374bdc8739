"""
Numeric helpers shared by the analytics components.
"""
import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def round_half_up(value: float, places: int = 1) -> float:
    """
    Round half away from zero.

    The value goes through its shortest repr so that 0.15 rounds to 0.2,
    matching what a user reading the number would expect.
    """
    if not math.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_int(value: float) -> int:
    """Round half away from zero to an integer."""
    return int(round_half_up(value, 0))


def safe_mean(values: Iterable[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def safe_ratio(numerator: float, denominator: float) -> float:
    """Division that yields 0.0 instead of failing on a zero denominator."""
    if not denominator:
        return 0.0
    return numerator / denominator


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce a stored numeric value, falling back to ``default``."""
    if isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError, InvalidOperation):
        return default
    return result if math.isfinite(result) else default


def parse_leading_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a value ("20 reps" -> 20).

    Returns None when the value does not start with an integer.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))
