"""Rounding helpers shared by projections and diagnosis"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def round_half_away(value: float) -> Union[int, float]:
    """
    Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3).

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round_money(value: float) -> float:
    """Round an amount to 2 decimal places by rounding value * 100 half away from zero"""
    if not math.isfinite(value):
        return value
    return round_half_away(value * 100) / 100
