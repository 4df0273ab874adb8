from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def total_hours(self, *, work_date: date, clock_in: str, clock_out: str) -> float:
        raise NotImplementedError

    @abstractmethod
    def is_overtime(self, total_hours: float) -> bool:
        raise NotImplementedError
