from __future__ import annotations

import itertools
import uuid
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Optional

import pytest

from src.workforce_admin.workforce_admin.container import Container, wire
from src.workforce_admin.workforce_admin.core.exceptions import StoreError
from src.workforce_admin.workforce_admin.database.gateway import DataGateway, Row, require_collection
from src.workforce_admin.workforce_admin.users.model import AdminRole, User

PERMISSIONS = [
    ("p-dashboard", "view_dashboard", "Dashboard"),
    ("p-schedules", "manage_schedules", "Scheduling"),
    ("p-own-schedule", "view_own_schedule", "Scheduling"),
    ("p-employees", "manage_employees", "Employees"),
    ("p-clock", "clock_in_out", "Time Tracking"),
    ("p-time-off", "request_time_off", "Time Tracking"),
    ("p-reports", "view_reports", "Reports"),
    ("p-settings", "manage_settings", "Settings"),
]

DEPARTMENTS = [
    ("d-sales", "Sales"),
    ("d-ops", "Operations"),
    ("d-mgmt", "Management"),
]


class InMemoryGateway(DataGateway):
    """Dict-backed gateway returning rows shaped like the MySQL gateway's.

    Notifications get a strictly increasing ``created_at``. Collections named
    in ``failing`` raise StoreError on every call.
    """

    def __init__(self):
        self.tables: dict[str, dict[str, Row]] = {}
        self.failing: set[str] = set()
        self._clock = itertools.count()

    def _table(self, collection: str) -> dict[str, Row]:
        require_collection(collection)
        if collection in self.failing:
            raise StoreError(f"{collection} unavailable")
        return self.tables.setdefault(collection, {})

    @staticmethod
    def _matches(row: Row, filters: Optional[Mapping[str, Any]]) -> bool:
        return all(row.get(k) == v for k, v in (filters or {}).items())

    def list(
        self,
        collection: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        rows = [dict(r) for r in self._table(collection).values() if self._matches(r, filters)]
        if order_by:
            rows.sort(key=lambda r: (r.get(order_by) is None, r.get(order_by)), reverse=descending)
        if limit is not None:
            rows = rows[:limit]
        return rows

    def insert(self, collection: str, record: Mapping[str, Any]) -> Row:
        table = self._table(collection)
        row = dict(record)
        row.setdefault("id", str(uuid.uuid4()))
        if collection == "notifications":
            row.setdefault("created_at", datetime(2025, 1, 1) + timedelta(seconds=next(self._clock)))
        table[row["id"]] = row
        return dict(row)

    def update(self, collection: str, record_id: str, patch: Mapping[str, Any]) -> None:
        row = self._table(collection).get(record_id)
        if row is not None:
            row.update(patch)

    def delete(self, collection: str, record_id: str) -> None:
        self._table(collection).pop(record_id, None)

    def delete_where(self, collection: str, filters: Mapping[str, Any]) -> None:
        table = self._table(collection)
        for record_id in [k for k, r in table.items() if self._matches(r, filters)]:
            del table[record_id]


def seeded_gateway() -> InMemoryGateway:
    gateway = InMemoryGateway()
    for pid, name, module in PERMISSIONS:
        gateway.insert("permissions", {"id": pid, "name": name, "description": name, "module": module})
    for did, name in DEPARTMENTS:
        gateway.insert("departments", {"id": did, "name": name, "description": None, "manager_id": None})
    return gateway


ADMIN = User(id="1", name="Sarah Johnson", email="sarah.johnson@company.com", role=AdminRole())


@pytest.fixture
def gateway() -> InMemoryGateway:
    return seeded_gateway()


@pytest.fixture
def container(gateway) -> Container:
    c = wire(gateway, current_user=ADMIN)
    c.store.load()
    return c


@pytest.fixture
def store(container):
    return container.store


@pytest.fixture
def hire(store):
    """Add an employee through the store and return its id."""

    def _hire(name="Jane Doe", department_id="d-sales", hourly_rate=20, **extra) -> str:
        fields = dict(
            name=name,
            email=f"{name.strip().split(' ')[0].lower()}@example.com",
            role="Cashier",
            start_date="2024-01-15",
            hourly_rate=hourly_rate,
            department_id=department_id,
        )
        fields.update(extra)
        return store.add_employee(**fields).value

    return _hire
