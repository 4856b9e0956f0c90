"""Numeric rounding utilities"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 0) -> Decimal:
    """
    Round to a fixed number of decimal places, ties away from zero.

    Works on the exact binary value of the float, so 2.5 -> 3 but
    1.005 -> 1.00 (1.005 is stored as 1.00499...).
    """
    quantum = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def round_to_int(value: float) -> int:
    """Round half-up to the nearest integer"""
    return int(round_half_up(value))
