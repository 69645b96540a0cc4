import math
from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local wall-clock time (naive), used to close ongoing experience entries."""
    return datetime.now()


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up.

    Python's round() uses banker's rounding (round(62.5) == 62); match scores
    were tuned against half-up rounding, so all score rounding goes through here.
    """
    return int(math.floor(value + 0.5))
