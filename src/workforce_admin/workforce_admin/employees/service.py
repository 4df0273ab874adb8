from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..common.validators import optional_text, require_enum, require_non_empty, require_non_negative
from ..core.constants import DEFAULT_EMPLOYEE_PERMISSIONS
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..notifications.policy import ConsoleEvent
from ..notifications.service import NotificationService
from ..permissions.repository import PermissionRepository
from ..shifts.repository import ShiftRepository
from ..time_tracking.repository import TimeEntryRepository
from .model import Employee, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees and their permission grants."""

    def __init__(
        self,
        employees: EmployeeRepository,
        permissions: PermissionRepository,
        shifts: ShiftRepository,
        time_entries: TimeEntryRepository,
        notifications: NotificationService,
    ):
        self._employees = employees
        self._permissions = permissions
        self._shifts = shifts
        self._time_entries = time_entries
        self._notifications = notifications

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def _require(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def add_employee(
        self,
        *,
        name: str,
        email: str,
        role: str,
        start_date: date | str,
        hourly_rate,
        phone: str = "",
        department_id: Optional[str] = None,
        status: str = EmployeeStatus.ACTIVE.value,
    ) -> str:
        new = NewEmployee(
            name=require_non_empty(name, "Name"),
            email=require_non_empty(email, "Email"),
            phone=(phone or "").strip(),
            role=require_non_empty(role, "Role"),
            department_id=optional_text(department_id),
            status=require_enum(EmployeeStatus, status, "Status"),
            start_date=coerce_date(start_date),
            hourly_rate=require_non_negative(hourly_rate, "Hourly rate"),
        )
        employee_id = self._employees.create(new)

        defaults = [p.id for p in self._permissions.list_all() if p.name in DEFAULT_EMPLOYEE_PERMISSIONS]
        if defaults:
            self._permissions.grant(employee_id=employee_id, permission_ids=defaults)

        logger.info("Employee %s added (%s) with %d default permissions", new.name, employee_id, len(defaults))
        self._notifications.notify(ConsoleEvent.EMPLOYEE_ADDED, name=new.name)
        return employee_id

    def update_employee(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        role: Optional[str] = None,
        department_id: Optional[str] = None,
        status: Optional[str] = None,
        hourly_rate=None,
    ) -> None:
        """Apply a partial patch; ``None`` leaves a field unchanged."""

        self._require(employee_id)

        patch: dict = {}
        if name is not None:
            patch["name"] = require_non_empty(name, "Name")
        if email is not None:
            patch["email"] = require_non_empty(email, "Email")
        if phone is not None:
            patch["phone"] = phone.strip()
        if role is not None:
            patch["role"] = require_non_empty(role, "Role")
        if department_id is not None:
            patch["department_id"] = optional_text(department_id)
        if status is not None:
            patch["status"] = require_enum(EmployeeStatus, status, "Status").value
        if hourly_rate is not None:
            patch["hourly_rate"] = require_non_negative(hourly_rate, "Hourly rate")

        self._employees.update(employee_id, patch)
        logger.info("Employee %s updated: %s", employee_id, sorted(patch))
        self._notifications.notify(ConsoleEvent.EMPLOYEE_UPDATED)

    def delete_employee(self, employee_id: str) -> None:
        """Remove the employee together with their shifts, time entries and grants."""

        employee = self._require(employee_id)

        self._shifts.delete_for_employee(employee.id)
        self._time_entries.delete_for_employee(employee.id)
        self._permissions.revoke_all(employee_id=employee.id)
        self._employees.delete_by_id(employee.id)

        logger.info("Employee %s removed (%s)", employee.name, employee.id)
        self._notifications.notify(ConsoleEvent.EMPLOYEE_REMOVED, name=employee.name)

    def update_permissions(self, employee_id: str, permission_ids: Iterable[str]) -> None:
        """Replace the employee's grants. Emits no notification."""

        self._require(employee_id)

        wanted = list(dict.fromkeys(str(p) for p in permission_ids))
        known = {p.id for p in self._permissions.list_all()}
        unknown = [p for p in wanted if p not in known]
        if unknown:
            raise ValidationError(f"Unknown permission ids: {', '.join(unknown)}")

        self._permissions.revoke_all(employee_id=employee_id)
        if wanted:
            self._permissions.grant(employee_id=employee_id, permission_ids=wanted)
        logger.info("Employee %s permissions replaced (%d granted)", employee_id, len(wanted))
