from __future__ import annotations

from datetime import date

import pytest

from src.workforce_admin.workforce_admin.core.enums import EmployeeStatus, ShiftStatus, TimeEntryStatus
from src.workforce_admin.workforce_admin.departments.model import Department
from src.workforce_admin.workforce_admin.employees.model import Employee
from src.workforce_admin.workforce_admin.reports import metrics
from src.workforce_admin.workforce_admin.shifts.model import Shift
from src.workforce_admin.workforce_admin.time_tracking.model import TimeEntry

MON = date(2025, 3, 10)


def employee(emp_id, name="A", department="Sales", rate=20.0, status=EmployeeStatus.ACTIVE, role="Cashier"):
    return Employee(
        id=emp_id,
        name=name,
        email=f"{name.lower()}@example.com",
        phone="",
        role=role,
        department=department,
        department_id=None,
        status=status,
        start_date=date(2024, 1, 1),
        hourly_rate=rate,
    )


def entry(entry_id, emp_id, hours, *, day=MON, status=TimeEntryStatus.COMPLETED, overtime=False):
    return TimeEntry(
        id=entry_id,
        employee_id=emp_id,
        employee_name=emp_id,
        date=day,
        clock_in="09:00:00",
        clock_out="17:00:00",
        break_time=0,
        total_hours=hours,
        status=status,
        overtime=overtime,
    )


def shift(shift_id, day, status=ShiftStatus.SCHEDULED):
    return Shift(
        id=shift_id,
        employee_id="e1",
        employee_name="A",
        role="Cashier",
        department="Sales",
        start_time="09:00",
        end_time="17:00",
        date=day,
        status=status,
    )


def test_attendance_rate_empty_is_zero_string():
    assert metrics.attendance_rate([]) == "0.0"


def test_attendance_rate_counts_non_missed():
    entries = [
        entry("1", "e1", 8),
        entry("2", "e1", 0, status=TimeEntryStatus.MISSED),
        entry("3", "e2", 0, status=TimeEntryStatus.ACTIVE),
    ]
    assert metrics.attendance_rate(entries) == "66.7"


def test_overtime_hours_sums_excess_over_eight():
    entries = [entry("1", "e1", 10, overtime=True), entry("2", "e1", 9.5, overtime=True), entry("3", "e1", 12)]
    assert metrics.overtime_hours(entries) == pytest.approx(3.5)


def test_overtime_hours_not_clamped_for_malformed_entries(caplog):
    entries = [entry("1", "e1", 10, overtime=True), entry("2", "e1", 7, overtime=True)]

    assert metrics.overtime_hours(entries) == pytest.approx(1.0)
    assert "flagged overtime" in caplog.text


def test_payroll_cost_uses_each_employee_rate():
    employees = [employee("e1", rate=20), employee("e2", name="B", rate=15.5)]
    entries = [entry("1", "e1", 8), entry("2", "e1", 4), entry("3", "e2", 2), entry("4", "ghost", 100)]

    assert metrics.employee_payroll_cost(employees[0], entries) == 240
    assert metrics.payroll_cost(employees, entries) == pytest.approx(271.0)


def test_active_count_and_average_rate():
    employees = [employee("e1", rate=20), employee("e2", rate=15, status=EmployeeStatus.INACTIVE)]

    assert metrics.active_employee_count(employees) == 1
    assert metrics.average_hourly_rate(employees) == "17.50"
    assert metrics.average_hourly_rate([]) == "0.00"


def test_round_half_up_differs_from_bankers_rounding():
    assert metrics.round_half_up(2.5) == 3.0
    assert metrics.round_half_up(3.75, 1) == 3.8
    assert round(2.5) == 2


def test_department_stats_match_by_department_name():
    departments = [Department(id="d1", name="Sales"), Department(id="d2", name="Operations")]
    employees = [employee("e1"), employee("e2", name="B"), employee("e3", name="C", department="Unknown")]
    entries = [entry("1", "e1", 5.5), entry("2", "e2", 2), entry("3", "e3", 9)]

    sales, ops = metrics.department_stats(departments, employees, entries)

    assert (sales.name, sales.employees, sales.hours, sales.avg_hours) == ("Sales", 2, 8.0, 3.8)
    assert (ops.employees, ops.hours, ops.avg_hours) == (0, 0.0, 0.0)


def test_weekly_attendance_covers_monday_to_sunday():
    entries = [
        entry("1", "e1", 8),
        entry("2", "e2", 8),
        entry("3", "e3", 0, status=TimeEntryStatus.MISSED),
        entry("4", "e1", 8, day=date(2025, 3, 3)),
    ]

    week = metrics.weekly_attendance(entries, date(2025, 3, 12))

    assert [d.day for d in week] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert week[0].date == MON
    assert (week[0].present, week[0].absent) == (2, 1)
    assert week[0].present_pct == pytest.approx(200 / 3)
    assert all(d.present == 0 and d.absent == 0 for d in week[1:])
    assert week[1].present_pct == 0.0


def test_week_schedule_counts():
    shifts = [
        shift("1", MON),
        shift("2", date(2025, 3, 16), ShiftStatus.CONFIRMED),
        shift("3", date(2025, 3, 12), ShiftStatus.CANCELLED),
        shift("4", date(2025, 3, 17)),
    ]

    counts = metrics.week_schedule_counts(shifts, date(2025, 3, 13))

    assert counts == {"week_start": "2025-03-10", "total": 3, "confirmed": 1, "scheduled": 1}


def test_search_employees_by_term_and_department():
    employees = [
        employee("e1", name="Alice", role="Manager"),
        employee("e2", name="Bob", department="Operations"),
        employee("e3", name="Carol"),
    ]

    assert [e.name for e in metrics.search_employees(employees, "MANAGER")] == ["Alice"]
    assert [e.name for e in metrics.search_employees(employees, "", "Operations")] == ["Bob"]
    assert [e.name for e in metrics.search_employees(employees, "c", "Sales")] == ["Alice", "Carol"]


def test_day_summary():
    entries = [
        entry("1", "e1", 9, overtime=True),
        entry("2", "e2", 0, status=TimeEntryStatus.ACTIVE),
        entry("3", "e3", 4, day=date(2025, 3, 11)),
    ]

    summary = metrics.day_summary(entries, MON)

    assert summary == {"date": "2025-03-10", "total_hours": 9, "active": 1, "completed": 1, "overtime_hours": 1}


def test_attendance_rate_rounds_ties_up():
    entries = [entry(str(i), "e1", 8) for i in range(5)]
    entries += [entry(f"m{i}", "e1", 0, status=TimeEntryStatus.MISSED) for i in range(11)]

    assert metrics.attendance_rate(entries) == "31.3"


def test_day_summary_rounds_to_one_decimal():
    entries = [entry("1", "e1", 0.1), entry("2", "e2", 0.2), entry("3", "e3", 8.3, overtime=True)]

    summary = metrics.day_summary(entries, MON)

    assert summary["total_hours"] == 8.6
    assert summary["overtime_hours"] == 0.3
