from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import coerce_date, parse_wall_time
from ..common.validators import optional_text, require_enum, require_non_empty
from ..core.enums import ShiftStatus
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..notifications.policy import ConsoleEvent
from ..notifications.service import NotificationService
from .model import NewShift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def _hhmm(value: str, field_name: str) -> str:
    return parse_wall_time(require_non_empty(value, field_name)).strftime("%H:%M")


class ShiftService:
    """Use case: manual shift assignment.

    Start/end ordering and overlapping shifts are not checked.
    """

    def __init__(self, shifts: ShiftRepository, employees: EmployeeRepository, notifications: NotificationService):
        self._shifts = shifts
        self._employees = employees
        self._notifications = notifications

    def add_shift(
        self,
        *,
        employee_id: str,
        start_time: str,
        end_time: str,
        work_date: date | str,
        status: str = ShiftStatus.SCHEDULED.value,
        notes: Optional[str] = None,
    ) -> str:
        employee_id = require_non_empty(employee_id, "Employee")
        shift = NewShift(
            employee_id=employee_id,
            start_time=_hhmm(start_time, "Start time"),
            end_time=_hhmm(end_time, "End time"),
            date=coerce_date(work_date),
            status=require_enum(ShiftStatus, status, "Status"),
            notes=optional_text(notes),
        )
        shift_id = self._shifts.create(shift)

        employee = self._employees.get_by_id(employee_id)
        logger.info("Shift %s created for %s on %s", shift_id, employee_id, shift.date)
        self._notifications.notify(ConsoleEvent.SHIFT_CREATED, name=employee.name if employee else "employee")
        return shift_id

    def update_shift(
        self,
        shift_id: str,
        *,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        status: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> None:
        """Patch times/status/notes. Emits no notification; ``notes=''`` clears notes."""

        if not self._shifts.get_by_id(shift_id):
            raise NotFoundError("Shift not found")

        patch: dict = {}
        if start_time:
            patch["start_time"] = _hhmm(start_time, "Start time")
        if end_time:
            patch["end_time"] = _hhmm(end_time, "End time")
        if status:
            patch["status"] = require_enum(ShiftStatus, status, "Status").value
        if notes is not None:
            patch["notes"] = optional_text(notes)

        self._shifts.update(shift_id, patch)
        logger.info("Shift %s updated: %s", shift_id, sorted(patch))

    def delete_shift(self, shift_id: str) -> None:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise NotFoundError("Shift not found")

        self._shifts.delete(shift_id)
        logger.info("Shift %s deleted (%s on %s)", shift_id, shift.employee_name, shift.date)
        self._notifications.notify(ConsoleEvent.SHIFT_CANCELLED, name=shift.employee_name)
