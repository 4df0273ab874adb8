from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..core.constants import UNKNOWN_LABEL
from ..core.enums import TimeEntryStatus
from ..database.gateway import DataGateway
from .model import TimeEntry
from .repository import TimeEntryRepository


def project_time_entry(row: Mapping[str, Any], *, employee_names: Mapping[str, str]) -> TimeEntry:
    clock_out = row.get("clock_out")
    return TimeEntry(
        id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        employee_name=employee_names.get(str(row["employee_id"]), UNKNOWN_LABEL),
        date=coerce_date(row["date"]),
        clock_in=str(row["clock_in"]),
        clock_out=str(clock_out) if clock_out else None,
        break_time=int(row.get("break_time") or 0),
        total_hours=float(row.get("total_hours") or 0),
        status=TimeEntryStatus(row.get("status") or TimeEntryStatus.ACTIVE.value),
        overtime=bool(row.get("overtime")),
    )


class GatewayTimeEntryRepository(TimeEntryRepository):
    def __init__(self, gateway: DataGateway):
        self._gateway = gateway

    def _employee_names(self) -> dict[str, str]:
        return {str(e["id"]): e["name"] for e in self._gateway.list("employees")}

    def list_all(self) -> Sequence[TimeEntry]:
        rows = self._gateway.list("time_entries", order_by="date", descending=True)
        names = self._employee_names()
        return [project_time_entry(r, employee_names=names) for r in rows]

    def get_active(self, *, employee_id: str, work_date: date) -> Optional[TimeEntry]:
        rows = self._gateway.list(
            "time_entries",
            {
                "employee_id": employee_id,
                "date": work_date.strftime("%Y-%m-%d"),
                "status": TimeEntryStatus.ACTIVE.value,
            },
        )
        if not rows:
            return None
        return project_time_entry(rows[0], employee_names=self._employee_names())

    def create_clock_in(self, *, employee_id: str, work_date: date, clock_in: str) -> str:
        row = self._gateway.insert(
            "time_entries",
            {
                "employee_id": employee_id,
                "date": work_date.strftime("%Y-%m-%d"),
                "clock_in": clock_in,
                "clock_out": None,
                "break_time": 0,
                "total_hours": 0,
                "status": TimeEntryStatus.ACTIVE.value,
                "overtime": False,
            },
        )
        return str(row["id"])

    def complete(self, *, entry_id: str, clock_out: str, total_hours: float, overtime: bool) -> None:
        self._gateway.update(
            "time_entries",
            entry_id,
            {
                "clock_out": clock_out,
                "total_hours": total_hours,
                "overtime": overtime,
                "status": TimeEntryStatus.COMPLETED.value,
            },
        )

    def delete_for_employee(self, employee_id: str) -> None:
        self._gateway.delete_where("time_entries", {"employee_id": employee_id})
