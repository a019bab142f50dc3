"""Half-up rounding shared by the derived metrics.

The built-in round() rounds halves to even, which would store 7.2 for a
readiness of 7.25. Clinical reports expect 7.3.
"""
import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_half_up_int(value: float) -> int:
    return int(math.floor(value + 0.5))
