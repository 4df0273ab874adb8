from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Session actor role. Admin passes every permission check."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ShiftStatus(str, Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TimeEntryStatus(str, Enum):
    """Lifecycle of a time-clock entry: active -> completed, never back."""

    ACTIVE = "active"
    COMPLETED = "completed"
    MISSED = "missed"


class NotificationType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
