"""Which notification each console operation emits.

Operations not listed here (permission changes, department changes,
shift updates, mark-read) emit nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.enums import NotificationType


class ConsoleEvent(str, Enum):
    EMPLOYEE_ADDED = "employee_added"
    EMPLOYEE_UPDATED = "employee_updated"
    EMPLOYEE_REMOVED = "employee_removed"
    SHIFT_CREATED = "shift_created"
    SHIFT_CANCELLED = "shift_cancelled"
    CLOCKED_IN = "clocked_in"
    ALREADY_CLOCKED_IN = "already_clocked_in"
    CLOCKED_OUT = "clocked_out"
    NOT_CLOCKED_IN = "not_clocked_in"
    SETTINGS_SAVED = "settings_saved"


@dataclass(frozen=True)
class NotificationTemplate:
    type: NotificationType
    title: str
    message: str

    def render(self, **fields) -> str:
        return self.message.format(**fields)


POLICY: dict[ConsoleEvent, NotificationTemplate] = {
    ConsoleEvent.EMPLOYEE_ADDED: NotificationTemplate(
        NotificationType.SUCCESS, "Employee Added", "{name} has been added to the system"
    ),
    ConsoleEvent.EMPLOYEE_UPDATED: NotificationTemplate(
        NotificationType.INFO, "Employee Updated", "Employee information has been updated"
    ),
    ConsoleEvent.EMPLOYEE_REMOVED: NotificationTemplate(
        NotificationType.WARNING, "Employee Removed", "{name} has been removed from the system"
    ),
    ConsoleEvent.SHIFT_CREATED: NotificationTemplate(
        NotificationType.SUCCESS, "Shift Created", "New shift assigned to {name}"
    ),
    ConsoleEvent.SHIFT_CANCELLED: NotificationTemplate(
        NotificationType.WARNING, "Shift Cancelled", "Shift for {name} has been cancelled"
    ),
    ConsoleEvent.CLOCKED_IN: NotificationTemplate(
        NotificationType.SUCCESS, "Clocked In", "{name} clocked in at {time}"
    ),
    ConsoleEvent.ALREADY_CLOCKED_IN: NotificationTemplate(
        NotificationType.WARNING, "Already Clocked In", "{name} is already clocked in"
    ),
    ConsoleEvent.CLOCKED_OUT: NotificationTemplate(
        NotificationType.SUCCESS, "Clocked Out", "{name} clocked out at {time}"
    ),
    ConsoleEvent.NOT_CLOCKED_IN: NotificationTemplate(
        NotificationType.WARNING, "Not Clocked In", "{name} is not currently clocked in"
    ),
    ConsoleEvent.SETTINGS_SAVED: NotificationTemplate(
        NotificationType.SUCCESS, "Settings Saved", "Your settings have been successfully updated"
    ),
}
