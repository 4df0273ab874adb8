from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 0) -> float:
    """Round ties away from zero (2.5 -> 3, 0.125 -> 0.13), unlike ``round``."""

    exp = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exp, rounding=ROUND_HALF_UP))
