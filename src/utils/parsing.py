"""Helpers for reading optional fields out of loosely-shaped provider JSON."""

import math
from typing import Any, Optional, Union

Number = Union[int, float]


def get_path(data: Any, *path: Union[str, int]) -> Any:
    """
    Walk nested dicts and lists, returning None as soon as a step is missing.

    Args:
        data: Decoded JSON value
        *path: Sequence of dict keys (str) and list indexes (int)

    Returns:
        The value at the end of the path, or None
    """
    current = data
    for step in path:
        if isinstance(step, int) and isinstance(current, list):
            if not -len(current) <= step < len(current):
                return None
            current = current[step]
        elif isinstance(step, str) and isinstance(current, dict):
            current = current.get(step)
        else:
            return None
    return current


def finite_number_or_none(value: Any) -> Optional[Number]:
    """Return value if it is a finite int or float (bools excluded), else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        # JSON integers too large for a float are treated as infinite
        finite = math.isfinite(value)
    except OverflowError:
        return None
    if not finite:
        return None
    return value


def string_or_empty(value: Any) -> str:
    """Return value if it is a string, else an empty string."""
    return value if isinstance(value, str) else ""


def round_half_up(value: Optional[Number]) -> Optional[int]:
    # Halves round towards positive infinity: 2.5 -> 3, -2.5 -> -2
    if value is None:
        return None
    if isinstance(value, int):
        return value
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor
