from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_clock, format_short, now_local
from ..common.locks import KeyedLock
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..notifications.policy import ConsoleEvent
from ..notifications.service import NotificationService
from .calculator.base import DurationCalculator
from .calculator.same_day_calculator import SameDayDurationCalculator
from .model import ClockOutcome
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


class TimeTrackingService:
    """Use case: clock employees in and out.

    Per (employee, date): absent -> active (clock_in) -> completed (clock_out).
    Calls for the same employee are serialized so the active-entry check and
    the write cannot interleave.
    """

    def __init__(
        self,
        entries: TimeEntryRepository,
        employees: EmployeeRepository,
        notifications: NotificationService,
        *,
        calculator: Optional[DurationCalculator] = None,
        locks: Optional[KeyedLock] = None,
    ):
        self._entries = entries
        self._employees = employees
        self._notifications = notifications
        self._calculator = calculator or SameDayDurationCalculator()
        self._locks = locks or KeyedLock()

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def release(self, employee_id: str) -> None:
        """Drop the per-employee lock once the employee is gone."""
        self._locks.discard(employee_id)

    def clock_in(self, employee_id: str, *, now: datetime | None = None) -> ClockOutcome:
        now = now or now_local()
        today = now.date()
        employee = self._require_employee(employee_id)

        with self._locks.hold(employee.id):
            existing = self._entries.get_active(employee_id=employee.id, work_date=today)
            if existing:
                logger.warning("Clock-in refused: %s already active since %s", employee.name, existing.clock_in)
                notification = self._notifications.notify(ConsoleEvent.ALREADY_CLOCKED_IN, name=employee.name)
                return ClockOutcome(changed=False, notification=notification, entry_id=existing.id)

            entry_id = self._entries.create_clock_in(
                employee_id=employee.id,
                work_date=today,
                clock_in=format_clock(now),
            )

        logger.info("%s clocked in at %s (entry %s)", employee.name, format_clock(now), entry_id)
        notification = self._notifications.notify(ConsoleEvent.CLOCKED_IN, name=employee.name, time=format_short(now))
        return ClockOutcome(changed=True, notification=notification, entry_id=entry_id)

    def clock_out(self, employee_id: str, *, now: datetime | None = None) -> ClockOutcome:
        now = now or now_local()
        today = now.date()
        employee = self._require_employee(employee_id)

        with self._locks.hold(employee.id):
            active = self._entries.get_active(employee_id=employee.id, work_date=today)
            if not active:
                logger.warning("Clock-out refused: %s is not clocked in", employee.name)
                notification = self._notifications.notify(ConsoleEvent.NOT_CLOCKED_IN, name=employee.name)
                return ClockOutcome(changed=False, notification=notification)

            clock_out = format_clock(now)
            total_hours = self._calculator.total_hours(work_date=active.date, clock_in=active.clock_in, clock_out=clock_out)
            overtime = self._calculator.is_overtime(total_hours)

            self._entries.complete(entry_id=active.id, clock_out=clock_out, total_hours=total_hours, overtime=overtime)

        logger.info("%s clocked out at %s: %.2fh (overtime=%s)", employee.name, clock_out, total_hours, overtime)
        notification = self._notifications.notify(ConsoleEvent.CLOCKED_OUT, name=employee.name, time=format_short(now))
        return ClockOutcome(
            changed=True,
            notification=notification,
            entry_id=active.id,
            total_hours=total_hours,
            overtime=overtime,
        )
