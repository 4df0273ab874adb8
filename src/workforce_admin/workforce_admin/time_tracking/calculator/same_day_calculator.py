from __future__ import annotations

import logging
from datetime import date, datetime

from ...common.datetime_utils import parse_wall_time
from ...common.rounding import round_half_up
from ...core.constants import OVERTIME_THRESHOLD_HOURS
from .base import DurationCalculator

logger = logging.getLogger(__name__)


class SameDayDurationCalculator(DurationCalculator):
    """Standard rule: both clock times anchored on the entry's date.

    (out - in) in hours, rounded to 2 places, not below 0. A shift that
    crosses midnight cannot be represented.
    """

    def __init__(self, overtime_threshold: float = OVERTIME_THRESHOLD_HOURS):
        self._threshold = float(overtime_threshold)

    def total_hours(self, *, work_date: date, clock_in: str, clock_out: str) -> float:
        start = datetime.combine(work_date, parse_wall_time(clock_in))
        end = datetime.combine(work_date, parse_wall_time(clock_out))
        hours = (end - start).total_seconds() / 3600

        if hours < 0:
            logger.warning(
                "Clock-out %s before clock-in %s on %s; recording 0 hours", clock_out, clock_in, work_date
            )
            return 0.0
        return round_half_up(hours, 2)

    def is_overtime(self, total_hours: float) -> bool:
        return total_hours > self._threshold
