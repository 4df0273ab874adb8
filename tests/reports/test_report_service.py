from __future__ import annotations

from datetime import date, datetime

from src.workforce_admin.workforce_admin.reports.service import ReportService
from src.workforce_admin.workforce_admin.state.model import AppState


def test_overview_on_empty_state():
    overview = ReportService().overview(AppState(), today=date(2025, 3, 12))

    assert overview["total_hours"] == 0
    assert overview["attendance_rate"] == "0.0"
    assert overview["overtime_hours"] == 0
    assert overview["payroll_cost"] == 0
    assert len(overview["weekly_attendance"]) == 7
    assert overview["workforce"]["average_hourly_rate"] == "0.00"


def test_overview_and_timesheet_from_store(store, hire):
    jane = hire("Jane Doe", hourly_rate=20)
    mark = hire("Mark Roe", department_id="d-ops", hourly_rate=10)
    store.clock_in(jane, now=datetime(2025, 3, 10, 8, 0))
    store.clock_out(jane, now=datetime(2025, 3, 10, 18, 30))
    store.clock_in(mark, now=datetime(2025, 3, 11, 9, 0))
    store.clock_out(mark, now=datetime(2025, 3, 11, 13, 0))
    state = store.state

    service = ReportService()
    overview = service.overview(state, today=date(2025, 3, 12))
    assert overview["total_hours"] == 15
    assert overview["overtime_hours"] == 3
    assert overview["payroll_cost"] == 250
    assert overview["attendance_rate"] == "100.0"
    by_name = {d["name"]: d for d in overview["departments"]}
    assert by_name["Sales"]["hours"] == 11.0
    assert by_name["Operations"]["employees"] == 1

    report = service.build_timesheet_report(state, start=date(2025, 3, 10), end=date(2025, 3, 10))
    assert [r["employee_name"] for r in report.rows] == ["Jane Doe"]
    assert report.rows[0]["total_hours"] == "10.50"
    assert report.rows[0]["overtime"] == "yes"
    assert report.summary == [
        {"employee_id": jane, "employee_name": "Jane Doe", "total_hours": 10.5, "pay": 210.0}
    ]


def test_dashboard_counts_today(store, hire):
    emp = hire()
    store.add_shift(employee_id=emp, start_time="09:00", end_time="17:00", work_date="2025-03-10")
    store.clock_in(emp, now=datetime(2025, 3, 10, 9, 0))
    store.clock_out(emp, now=datetime(2025, 3, 10, 11, 30))

    dashboard = ReportService().dashboard(store.state, today=date(2025, 3, 10))

    assert dashboard["active_employees"] == 1
    assert dashboard["shifts_today"] == 1
    assert dashboard["hours_today"] == 3
    assert [a["title"] for a in dashboard["recent_alerts"]] == ["Clocked Out", "Clocked In", "Shift Created"]
