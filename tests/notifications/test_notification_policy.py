from __future__ import annotations

import pytest

from src.workforce_admin.workforce_admin.core.enums import NotificationType
from src.workforce_admin.workforce_admin.core.exceptions import NotFoundError
from src.workforce_admin.workforce_admin.notifications.policy import POLICY, ConsoleEvent


def titles(state):
    return [n.title for n in state.notifications]


def test_every_event_has_a_template():
    assert set(POLICY) == set(ConsoleEvent)


@pytest.mark.parametrize(
    "event, fields, expected",
    [
        (ConsoleEvent.EMPLOYEE_ADDED, {"name": "Ann"}, "Ann has been added to the system"),
        (ConsoleEvent.EMPLOYEE_REMOVED, {"name": "Ann"}, "Ann has been removed from the system"),
        (ConsoleEvent.SHIFT_CREATED, {"name": "Ann"}, "New shift assigned to Ann"),
        (ConsoleEvent.SHIFT_CANCELLED, {"name": "Ann"}, "Shift for Ann has been cancelled"),
        (ConsoleEvent.CLOCKED_IN, {"name": "Ann", "time": "09:00"}, "Ann clocked in at 09:00"),
    ],
)
def test_templates_render_fields(event, fields, expected):
    assert POLICY[event].render(**fields) == expected


def test_employee_lifecycle_notifications(store, hire):
    emp_id = hire("Ann Lee")
    state = store.update_employee(emp_id, phone="555-0100").state
    state = store.delete_employee(emp_id).state

    assert titles(state)[:3] == ["Employee Removed", "Employee Updated", "Employee Added"]
    assert state.notifications[0].type == NotificationType.WARNING
    assert state.notifications[1].message == "Employee information has been updated"
    assert state.notifications[2].type == NotificationType.SUCCESS


def test_silent_operations_emit_nothing(store, hire):
    emp_id = hire("Ann Lee")
    shift_id = store.add_shift(employee_id=emp_id, start_time="09:00", end_time="17:00", work_date="2025-03-10").value
    before = len(store.state.notifications)

    store.update_shift(shift_id, status="confirmed")
    store.update_employee_permissions(emp_id, ["p-dashboard"])
    store.add_department(name="Warehouse")
    store.update_department("d-sales", name="Retail Sales")
    store.mark_notification_read(store.state.notifications[0].id)

    assert len(store.state.notifications) == before


def test_notifications_newest_first(store, hire):
    hire("First Person")
    hire("Second Person")

    messages = [n.message for n in store.state.notifications]
    assert messages == [
        "Second Person has been added to the system",
        "First Person has been added to the system",
    ]


def test_mark_read_updates_unread_count(store, hire):
    hire()
    notification = store.state.notifications[0]
    assert len(store.state.unread_notifications) == 1

    state = store.mark_notification_read(notification.id).state

    assert state.unread_notifications == ()
    assert state.notifications[0].read is True


def test_mark_read_unknown_id(store):
    with pytest.raises(NotFoundError):
        store.mark_notification_read("nope")


def test_history_limited_to_fifty(container):
    service = container.notification_service
    for _ in range(55):
        service.notify(ConsoleEvent.SETTINGS_SAVED)

    assert len(service.list_recent()) == 50
