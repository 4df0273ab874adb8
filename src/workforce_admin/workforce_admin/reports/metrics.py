"""Derived metrics over the loaded collections.

Pure functions; recomputed from the current snapshot every time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import week_start
from ..common.rounding import round_half_up
from ..core.constants import OVERTIME_THRESHOLD_HOURS
from ..core.enums import EmployeeStatus, ShiftStatus, TimeEntryStatus
from ..departments.model import Department
from ..employees.model import Employee
from ..shifts.model import Shift
from ..time_tracking.model import TimeEntry

logger = logging.getLogger(__name__)


def total_hours(entries: Iterable[TimeEntry]) -> float:
    return sum(e.total_hours for e in entries)


def entries_on(entries: Iterable[TimeEntry], day: date) -> list[TimeEntry]:
    return [e for e in entries if e.date == day]


def hours_on(entries: Iterable[TimeEntry], day: date) -> float:
    return total_hours(entries_on(entries, day))


def attendance_rate(entries: Sequence[TimeEntry]) -> str:
    """Share of entries that are not missed, as a percentage with one decimal."""

    if not entries:
        return "0.0"
    attended = sum(1 for e in entries if e.status != TimeEntryStatus.MISSED)
    return f"{round_half_up(attended / len(entries) * 100, 1):.1f}"


def overtime_hours(entries: Iterable[TimeEntry]) -> float:
    """Sum of (total_hours - 8) over entries flagged overtime.

    Not clamped: an entry flagged overtime with 8 hours or less contributes a
    non-positive amount and is logged as malformed.
    """

    total = 0.0
    for e in entries:
        if not e.overtime:
            continue
        if e.total_hours <= OVERTIME_THRESHOLD_HOURS:
            logger.warning("Time entry %s flagged overtime with %.2f hours", e.id, e.total_hours)
        total += e.total_hours - OVERTIME_THRESHOLD_HOURS
    return total


def employee_hours(employee: Employee, entries: Iterable[TimeEntry]) -> float:
    return total_hours(e for e in entries if e.employee_id == employee.id)


def employee_payroll_cost(employee: Employee, entries: Iterable[TimeEntry]) -> float:
    return employee_hours(employee, entries) * employee.hourly_rate


def payroll_cost(employees: Iterable[Employee], entries: Sequence[TimeEntry]) -> float:
    return sum(employee_payroll_cost(emp, entries) for emp in employees)


def active_employee_count(employees: Iterable[Employee]) -> int:
    return sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE)


def average_hourly_rate(employees: Sequence[Employee]) -> str:
    if not employees:
        return "0.00"
    return f"{sum(e.hourly_rate for e in employees) / len(employees):.2f}"


def search_employees(employees: Iterable[Employee], term: str = "", department: str = "all") -> list[Employee]:
    """Case-insensitive match on name, email or role; optional department name filter."""

    needle = (term or "").lower()
    out = []
    for e in employees:
        matches = needle in e.name.lower() or needle in e.email.lower() or needle in e.role.lower()
        if matches and (department == "all" or e.department == department):
            out.append(e)
    return out


@dataclass(frozen=True)
class DepartmentStats:
    name: str
    employees: int
    hours: float
    avg_hours: float


def department_stats(
    departments: Iterable[Department],
    employees: Sequence[Employee],
    entries: Sequence[TimeEntry],
) -> list[DepartmentStats]:
    """Per department: head count, worked hours, average hours per employee."""

    out: list[DepartmentStats] = []
    for dept in departments:
        members = {e.id for e in employees if e.department == dept.name}
        hours = total_hours(e for e in entries if e.employee_id in members)
        avg = hours / len(members) if members else 0
        out.append(
            DepartmentStats(
                name=dept.name,
                employees=len(members),
                hours=round_half_up(hours),
                avg_hours=round_half_up(avg, 1),
            )
        )
    return out


@dataclass(frozen=True)
class DayAttendance:
    day: str
    date: date
    present: int
    absent: int

    @property
    def present_pct(self) -> float:
        total = self.present + self.absent
        return self.present / total * 100 if total else 0.0


def weekly_attendance(entries: Sequence[TimeEntry], today: date) -> list[DayAttendance]:
    """Present/absent counts for each day of the Monday-start week containing ``today``."""

    start = week_start(today)
    out: list[DayAttendance] = []
    for offset in range(7):
        day = start + timedelta(days=offset)
        day_entries = entries_on(entries, day)
        absent = sum(1 for e in day_entries if e.status == TimeEntryStatus.MISSED)
        out.append(
            DayAttendance(
                day=day.strftime("%a"),
                date=day,
                present=len(day_entries) - absent,
                absent=absent,
            )
        )
    return out


def shifts_on(shifts: Iterable[Shift], day: date) -> list[Shift]:
    return [s for s in shifts if s.date == day]


def week_schedule_counts(shifts: Iterable[Shift], today: date) -> dict:
    start = week_start(today)
    end = start + timedelta(days=6)
    week = [s for s in shifts if start <= s.date <= end]
    return {
        "week_start": start.strftime("%Y-%m-%d"),
        "total": len(week),
        "confirmed": sum(1 for s in week if s.status == ShiftStatus.CONFIRMED),
        "scheduled": sum(1 for s in week if s.status == ShiftStatus.SCHEDULED),
    }


def day_summary(entries: Sequence[TimeEntry], day: date) -> dict:
    todays = entries_on(entries, day)
    return {
        "date": day.strftime("%Y-%m-%d"),
        "total_hours": round_half_up(total_hours(todays), 1),
        "active": sum(1 for e in todays if e.status == TimeEntryStatus.ACTIVE),
        "completed": sum(1 for e in todays if e.status == TimeEntryStatus.COMPLETED),
        "overtime_hours": round_half_up(overtime_hours(todays), 1),
    }
