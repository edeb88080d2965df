from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def rounded_percentage(part: float, whole: float) -> int:
    """part / whole * 100 rounded half-up; 0 when whole is not positive."""
    if whole <= 0:
        return 0
    return int(math.floor(part * 100 / whole + 0.5))


def round_one_decimal(value: float) -> float:
    """Round to one decimal place with ties going up, on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
