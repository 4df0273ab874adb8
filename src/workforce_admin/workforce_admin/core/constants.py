"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

OVERTIME_THRESHOLD_HOURS = 8
NOTIFICATION_HISTORY_LIMIT = 50
UNKNOWN_LABEL = "Unknown"

# Granted to every newly added employee (when present in the permissions table).
DEFAULT_EMPLOYEE_PERMISSIONS = (
    "view_dashboard",
    "clock_in_out",
    "view_own_schedule",
    "request_time_off",
)

# Feature area -> permission required to see it.
NAVIGATION = (
    ("dashboard", "Dashboard", "view_dashboard"),
    ("schedule", "Schedule", "manage_schedules"),
    ("employees", "Employees", "manage_employees"),
    ("time-tracking", "Time Tracking", "clock_in_out"),
    ("reports", "Reports", "view_reports"),
    ("settings", "Settings", "manage_settings"),
)
