"""Numeric helpers shared by the calculation core and the API boundary"""

import math
from typing import Any


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round with halves going up, e.g. 2.5 -> 3, 0.125 -> 0.13 at 2 digits.

    Python's round() uses banker's rounding; bonus figures must not.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round half up to a whole number"""
    return int(math.floor(value + 0.5))


def parse_number(raw: Any, default: float = 0.0) -> float:
    """
    Convert user input to a float.

    Blank, unparsable, NaN or infinite input yields ``default``.
    Thousands separators and surrounding whitespace are accepted.
    """
    if raw is None or isinstance(raw, bool):
        return default

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", "")
        if not text:
            return default
        try:
            value = float(text)
        except ValueError:
            return default

    if math.isnan(value) or math.isinf(value):
        return default
    return value
