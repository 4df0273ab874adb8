from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import TimeEntryStatus
from ..notifications.model import Notification


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock-in/clock-out record for an employee and a day."""

    id: str
    employee_id: str
    employee_name: str
    date: date
    clock_in: str
    clock_out: Optional[str]
    break_time: int
    total_hours: float
    status: TimeEntryStatus
    overtime: bool


@dataclass(frozen=True)
class ClockOutcome:
    """Result of a clock-in/clock-out request.

    ``changed`` is False when the request was refused by a precondition
    (already clocked in / not clocked in); the notification says why.
    """

    changed: bool
    notification: Notification
    entry_id: Optional[str] = None
    total_hours: Optional[float] = None
    overtime: Optional[bool] = None
