from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import DayStatus


@dataclass(frozen=True)
class StatusDecision:
    status: DayStatus
    periods_present: int
    total_periods: int


class DayStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's periods collapse into a status."""

    @abstractmethod
    def decide(self, *, periods_present: int, total_periods: int) -> StatusDecision:
        raise NotImplementedError
