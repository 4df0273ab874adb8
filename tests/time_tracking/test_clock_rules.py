from __future__ import annotations

import threading
from datetime import date, datetime

import pytest

from src.workforce_admin.workforce_admin.core.enums import NotificationType, TimeEntryStatus
from src.workforce_admin.workforce_admin.core.exceptions import NotFoundError

MONDAY = date(2025, 3, 10)


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(2025, 3, 10, hour, minute, second)


def test_clock_in_then_out_records_hours_and_overtime(store, hire):
    emp_id = hire("Jane Doe")

    result = store.clock_in(emp_id, now=at(9))
    assert result.value.changed is True
    [entry] = result.state.time_entries
    assert entry.status == TimeEntryStatus.ACTIVE
    assert entry.clock_in == "09:00:00"
    assert entry.clock_out is None
    assert entry.employee_name == "Jane Doe"
    assert result.state.notifications[0].message == "Jane Doe clocked in at 09:00"

    result = store.clock_out(emp_id, now=at(17, 30))
    [entry] = result.state.time_entries
    assert entry.status == TimeEntryStatus.COMPLETED
    assert entry.clock_out == "17:30:00"
    assert entry.total_hours == 8.5
    assert entry.overtime is True
    assert result.value.total_hours == 8.5

    latest = result.state.notifications[0]
    assert latest.title == "Clocked Out"
    assert latest.type == NotificationType.SUCCESS
    assert latest.message == "Jane Doe clocked out at 17:30"


def test_exactly_eight_hours_is_not_overtime(store, hire):
    emp_id = hire()
    store.clock_in(emp_id, now=at(9))
    result = store.clock_out(emp_id, now=at(17))

    [entry] = result.state.time_entries
    assert entry.total_hours == 8.0
    assert entry.overtime is False


def test_second_clock_in_is_refused_with_warning(store, hire):
    emp_id = hire("Jane Doe")
    store.clock_in(emp_id, now=at(9))

    result = store.clock_in(emp_id, now=at(9, 5))

    assert result.value.changed is False
    assert len(result.state.time_entries) == 1
    warning = result.state.notifications[0]
    assert warning.title == "Already Clocked In"
    assert warning.type == NotificationType.WARNING
    assert warning.message == "Jane Doe is already clocked in"


def test_clock_out_without_active_entry_is_refused(store, hire):
    emp_id = hire("Jane Doe")

    result = store.clock_out(emp_id, now=at(17))

    assert result.value.changed is False
    assert result.state.time_entries == ()
    warning = result.state.notifications[0]
    assert warning.title == "Not Clocked In"
    assert warning.message == "Jane Doe is not currently clocked in"


def test_clock_in_allowed_again_after_completed_entry(store, hire):
    emp_id = hire()
    store.clock_in(emp_id, now=at(8))
    store.clock_out(emp_id, now=at(12))

    result = store.clock_in(emp_id, now=at(13))

    assert result.value.changed is True
    statuses = sorted(e.status.value for e in result.state.time_entries)
    assert statuses == ["active", "completed"]


def test_active_entry_from_yesterday_does_not_block_today(store, hire):
    emp_id = hire()
    store.clock_in(emp_id, now=datetime(2025, 3, 9, 22, 0))

    assert store.clock_in(emp_id, now=at(9)).value.changed is True
    assert store.clock_out(emp_id, now=at(10)).value.total_hours == 1.0


def test_unknown_employee_raises_without_notification(store):
    before = len(store.state.notifications)

    with pytest.raises(NotFoundError):
        store.clock_in("missing", now=at(9))
    with pytest.raises(NotFoundError):
        store.clock_out("missing", now=at(17))

    assert len(store.state.notifications) == before


def test_concurrent_clock_ins_create_one_active_entry(container, hire):
    emp_id = hire()
    service = container.time_tracking_service
    outcomes = []

    def worker():
        outcomes.append(service.clock_in(emp_id, now=at(9)))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(1 for o in outcomes if o.changed) == 1
    active = container.time_entries_repo.get_active(employee_id=emp_id, work_date=MONDAY)
    assert active is not None
    assert len(container.time_entries_repo.list_all()) == 1
