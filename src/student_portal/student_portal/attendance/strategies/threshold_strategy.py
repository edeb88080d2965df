from __future__ import annotations

from ...core.constants import HALF_DAY_PERIODS
from ...core.enums import DayStatus
from ...core.exceptions import ValidationError
from .base import DayStatusStrategy, StatusDecision


class PeriodThresholdStrategy(DayStatusStrategy):
    """Fewer than 4 periods is absent, exactly 4 a half day, 5 or more present."""

    def __init__(self, half_day_periods: int = HALF_DAY_PERIODS):
        self._half = int(half_day_periods)

    def decide(self, *, periods_present: int, total_periods: int) -> StatusDecision:
        if periods_present < 0 or periods_present > total_periods:
            raise ValidationError(f"Periods present must be between 0 and {total_periods}")

        if periods_present < self._half:
            status = DayStatus.ABSENT
        elif periods_present == self._half:
            status = DayStatus.HALF
        else:
            status = DayStatus.FULL
        return StatusDecision(status=status, periods_present=periods_present, total_periods=total_periods)
