from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, Sequence

from ..core.exceptions import StoreError
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from ..notifications.service import NotificationService
from ..permissions.repository import PermissionRepository
from ..shifts.repository import ShiftRepository
from ..time_tracking.repository import TimeEntryRepository
from .model import AppState

logger = logging.getLogger(__name__)


class StateLoader:
    """Reads whole collections from storage into a state snapshot."""

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        permissions: PermissionRepository,
        shifts: ShiftRepository,
        time_entries: TimeEntryRepository,
        notifications: NotificationService,
    ):
        self._loaders: Dict[str, Callable[[], Sequence]] = {
            "permissions": permissions.list_all,
            "departments": departments.list_all,
            "employees": employees.list_all,
            "shifts": shifts.list_all,
            "time_entries": time_entries.list_all,
            "notifications": notifications.list_recent,
        }

    @property
    def collections(self) -> tuple[str, ...]:
        return tuple(self._loaders)

    def reload(self, state: AppState, *collections: str) -> AppState:
        changes = {name: tuple(self._loaders[name]()) for name in collections}
        return replace(state, **changes)

    def load_all(self, state: AppState) -> AppState:
        """Initial load. A store failure is kept on the snapshot, not raised."""

        try:
            loaded = self.reload(state, *self._loaders)
        except StoreError as e:
            logger.error("Failed to load data: %s", e)
            return replace(state, loading=False, error=str(e) or "Failed to load data")
        return replace(loaded, loading=False, error=None)
