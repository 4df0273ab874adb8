from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConsoleSettings:
    """Console preferences. Kept in application state only, never persisted.

    ``overtime_threshold`` is the weekly figure shown on the settings screen;
    the per-entry overtime flag always uses the 8-hour daily constant.
    """

    company_name: str = "ABC Retail Store"
    timezone: str = "America/New_York"
    currency: str = "USD"
    date_format: str = "MM/DD/YYYY"
    work_week_start: str = "monday"
    default_shift_length: int = 8
    overtime_threshold: int = 40
    auto_approve_time_off: bool = False
    email_notifications: bool = True
    push_notifications: bool = True
    schedule_reminders: bool = True
    timeclock_notifications: bool = False
