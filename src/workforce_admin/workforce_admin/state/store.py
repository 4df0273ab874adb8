from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from threading import Lock
from typing import Any, Callable, Iterable, Optional

from ..core.exceptions import StoreError
from ..departments.service import DepartmentService
from ..employees.service import EmployeeService
from ..notifications.service import NotificationService
from ..settings.model import ConsoleSettings
from ..settings.service import SettingsService
from ..shifts.service import ShiftService
from ..time_tracking.service import TimeTrackingService
from ..users.model import User
from .loader import StateLoader
from .model import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    state: AppState
    value: Any = None


class AppStore:
    """Owns the current AppState snapshot and the commands that replace it.

    Each command runs its use case, then reloads the collections it touched
    (whole collections, last reload wins) and returns the new snapshot.
    """

    def __init__(
        self,
        loader: StateLoader,
        *,
        employees: EmployeeService,
        departments: DepartmentService,
        shifts: ShiftService,
        time_tracking: TimeTrackingService,
        notifications: NotificationService,
        settings: SettingsService,
        current_user: Optional[User] = None,
        initial_settings: Optional[ConsoleSettings] = None,
    ):
        self._loader = loader
        self._employees = employees
        self._departments = departments
        self._shifts = shifts
        self._time_tracking = time_tracking
        self._notifications = notifications
        self._settings = settings
        self._lock = Lock()
        self._state = AppState(
            current_user=current_user,
            settings=initial_settings or ConsoleSettings(),
            loading=True,
        )

    @property
    def state(self) -> AppState:
        return self._state

    def load(self) -> AppState:
        with self._lock:
            self._state = self._loader.load_all(self._state)
            return self._state

    def set_current_user(self, user: Optional[User]) -> AppState:
        with self._lock:
            self._state = replace(self._state, current_user=user)
            return self._state

    def _run(self, action: str, fn: Callable[[], Any], reload: Iterable[str]) -> CommandResult:
        try:
            value = fn()
        except StoreError:
            logger.exception("%s failed", action)
            raise

        with self._lock:
            self._state = self._loader.reload(self._state, *reload)
            return CommandResult(state=self._state, value=value)

    # Employees

    def add_employee(self, **fields) -> CommandResult:
        return self._run("add employee", lambda: self._employees.add_employee(**fields), ("employees", "notifications"))

    def update_employee(self, employee_id: str, **fields) -> CommandResult:
        # Shifts and time entries carry the employee name.
        return self._run(
            "update employee",
            lambda: self._employees.update_employee(employee_id, **fields),
            ("employees", "shifts", "time_entries", "notifications"),
        )

    def delete_employee(self, employee_id: str) -> CommandResult:
        def delete():
            self._employees.delete_employee(employee_id)
            self._time_tracking.release(employee_id)

        return self._run(
            "delete employee",
            delete,
            ("employees", "shifts", "time_entries", "notifications"),
        )

    def update_employee_permissions(self, employee_id: str, permission_ids: Iterable[str]) -> CommandResult:
        return self._run(
            "update permissions",
            lambda: self._employees.update_permissions(employee_id, permission_ids),
            ("employees",),
        )

    # Departments

    def add_department(self, **fields) -> CommandResult:
        return self._run("add department", lambda: self._departments.add_department(**fields), ("departments",))

    def update_department(self, department_id: str, **fields) -> CommandResult:
        # Employees and shifts carry the department name, so reload them too.
        return self._run(
            "update department",
            lambda: self._departments.update_department(department_id, **fields),
            ("departments", "employees", "shifts"),
        )

    # Shifts

    def add_shift(self, **fields) -> CommandResult:
        return self._run("add shift", lambda: self._shifts.add_shift(**fields), ("shifts", "notifications"))

    def update_shift(self, shift_id: str, **fields) -> CommandResult:
        return self._run("update shift", lambda: self._shifts.update_shift(shift_id, **fields), ("shifts",))

    def delete_shift(self, shift_id: str) -> CommandResult:
        return self._run("delete shift", lambda: self._shifts.delete_shift(shift_id), ("shifts", "notifications"))

    # Time tracking

    def clock_in(self, employee_id: str, *, now: Optional[datetime] = None) -> CommandResult:
        return self._run(
            "clock in",
            lambda: self._time_tracking.clock_in(employee_id, now=now),
            ("time_entries", "notifications"),
        )

    def clock_out(self, employee_id: str, *, now: Optional[datetime] = None) -> CommandResult:
        return self._run(
            "clock out",
            lambda: self._time_tracking.clock_out(employee_id, now=now),
            ("time_entries", "notifications"),
        )

    # Notifications / settings

    def mark_notification_read(self, notification_id: str) -> CommandResult:
        return self._run(
            "mark notification read",
            lambda: self._notifications.mark_read(notification_id),
            ("notifications",),
        )

    def save_settings(self, changes: dict) -> CommandResult:
        saved = self._run(
            "save settings",
            lambda: self._settings.save(self._state.settings, changes),
            ("notifications",),
        )
        with self._lock:
            self._state = replace(self._state, settings=saved.value)
            return CommandResult(state=self._state, value=saved.value)
