from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..departments.model import Department
from ..employees.model import Employee
from ..notifications.model import Notification
from ..permissions.model import Permission
from ..settings.model import ConsoleSettings
from ..shifts.model import Shift
from ..time_tracking.model import TimeEntry
from ..users.model import User


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of everything the console shows.

    Replaced wholesale after every command; readers holding an older snapshot
    never see it change.
    """

    current_user: Optional[User] = None
    employees: Tuple[Employee, ...] = ()
    departments: Tuple[Department, ...] = ()
    permissions: Tuple[Permission, ...] = ()
    shifts: Tuple[Shift, ...] = ()
    time_entries: Tuple[TimeEntry, ...] = ()
    notifications: Tuple[Notification, ...] = ()
    settings: ConsoleSettings = field(default_factory=ConsoleSettings)
    loading: bool = False
    error: Optional[str] = None

    @property
    def unread_notifications(self) -> Tuple[Notification, ...]:
        return tuple(n for n in self.notifications if not n.read)
