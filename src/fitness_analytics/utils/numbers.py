"""Numeric helpers."""

import math
from typing import Union


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """
    Round with halves going towards +infinity.

    Python's built-in ``round`` uses banker's rounding (``round(122.5) == 122``),
    which would shift 1RM and calorie values by one unit compared with the
    figures users already see in the app. Every engine rounds through here.

    Args:
        value: Number to round
        ndigits: Decimal places to keep (0 returns an int)

    Returns:
        Rounded value
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
