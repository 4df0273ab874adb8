from __future__ import annotations

from datetime import date

import pytest

from src.workforce_admin.workforce_admin.core.enums import ShiftStatus
from src.workforce_admin.workforce_admin.core.exceptions import NotFoundError, ValidationError
from src.workforce_admin.workforce_admin.shifts.gateway_shift_repository import project_shift


def test_add_shift_projects_employee_fields(store, hire):
    emp_id = hire("Jane Doe", department_id="d-ops", role="Stocker")

    result = store.add_shift(employee_id=emp_id, start_time="09:00", end_time="17:00", work_date="2025-03-10")

    [shift] = result.state.shifts
    assert shift.id == result.value
    assert (shift.employee_name, shift.role, shift.department) == ("Jane Doe", "Stocker", "Operations")
    assert shift.date == date(2025, 3, 10)
    assert shift.status == ShiftStatus.SCHEDULED
    assert result.state.notifications[0].message == "New shift assigned to Jane Doe"


def test_shift_for_unknown_employee_uses_placeholder_name(store):
    result = store.add_shift(employee_id="ghost", start_time="09:00", end_time="17:00", work_date="2025-03-10")

    [shift] = result.state.shifts
    assert shift.employee_name == "Unknown"
    assert shift.department == "Unknown"
    assert result.state.notifications[0].message == "New shift assigned to employee"


def test_update_shift_emits_no_notification(store, hire):
    emp_id = hire()
    shift_id = store.add_shift(
        employee_id=emp_id, start_time="09:00", end_time="17:00", work_date="2025-03-10", notes="Opening"
    ).value
    before = len(store.state.notifications)

    state = store.update_shift(shift_id, end_time="18:00", status="confirmed", notes="").state

    [shift] = state.shifts
    assert shift.end_time == "18:00"
    assert shift.status == ShiftStatus.CONFIRMED
    assert shift.notes is None
    assert len(state.notifications) == before


def test_delete_shift_notifies_cancellation(store, hire):
    emp_id = hire("Jane Doe")
    shift_id = store.add_shift(employee_id=emp_id, start_time="09:00", end_time="17:00", work_date="2025-03-10").value

    state = store.delete_shift(shift_id).state

    assert state.shifts == ()
    assert state.notifications[0].title == "Shift Cancelled"
    assert state.notifications[0].message == "Shift for Jane Doe has been cancelled"


@pytest.mark.parametrize(
    "fields",
    [
        {"start_time": "9am"},
        {"end_time": "25:00"},
        {"work_date": "2025-13-01"},
        {"status": "maybe"},
        {"employee_id": ""},
    ],
)
def test_add_shift_validation(store, hire, fields):
    emp_id = hire()
    payload = dict(employee_id=emp_id, start_time="09:00", end_time="17:00", work_date="2025-03-10")
    payload.update(fields)

    with pytest.raises(ValidationError):
        store.add_shift(**payload)


def test_missing_shift(store):
    with pytest.raises(NotFoundError):
        store.update_shift("missing", status="confirmed")
    with pytest.raises(NotFoundError):
        store.delete_shift("missing")


def test_project_shift_truncates_stored_seconds():
    row = {
        "id": "s1",
        "employee_id": "e1",
        "start_time": "09:00:00",
        "end_time": "17:00:00",
        "date": "2025-03-10",
        "status": "completed",
        "notes": None,
    }
    employees = {"e1": {"id": "e1", "name": "Jane", "role": "Cashier", "department_id": "d1"}}

    shift = project_shift(row, employees=employees, department_names={"d1": "Sales"})

    assert (shift.start_time, shift.end_time, shift.department) == ("09:00", "17:00", "Sales")
    assert shift.status == ShiftStatus.COMPLETED
