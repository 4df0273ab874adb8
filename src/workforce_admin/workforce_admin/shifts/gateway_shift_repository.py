from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..core.constants import UNKNOWN_LABEL
from ..core.enums import ShiftStatus
from ..database.gateway import DataGateway, Row
from .model import NewShift, Shift
from .repository import ShiftRepository


def project_shift(
    row: Mapping[str, Any],
    *,
    employees: Mapping[str, Row],
    department_names: Mapping[str, str],
) -> Shift:
    """Shift row + employee name/role + that employee's department name."""

    employee = employees.get(str(row["employee_id"]))
    department = UNKNOWN_LABEL
    if employee and employee.get("department_id"):
        department = department_names.get(str(employee["department_id"]), UNKNOWN_LABEL)

    return Shift(
        id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        employee_name=(employee or {}).get("name") or UNKNOWN_LABEL,
        role=(employee or {}).get("role") or UNKNOWN_LABEL,
        department=department,
        start_time=str(row["start_time"])[:5],
        end_time=str(row["end_time"])[:5],
        date=coerce_date(row["date"]),
        status=ShiftStatus(row.get("status") or ShiftStatus.SCHEDULED.value),
        notes=row.get("notes"),
    )


class GatewayShiftRepository(ShiftRepository):
    def __init__(self, gateway: DataGateway):
        self._gateway = gateway

    def _lookups(self) -> tuple[Dict[str, Row], Dict[str, str]]:
        employees = {str(e["id"]): e for e in self._gateway.list("employees")}
        names = {str(d["id"]): d["name"] for d in self._gateway.list("departments")}
        return employees, names

    def list_all(self) -> Sequence[Shift]:
        rows = self._gateway.list("shifts", order_by="date")
        employees, names = self._lookups()
        return [project_shift(r, employees=employees, department_names=names) for r in rows]

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        rows = self._gateway.list("shifts", {"id": shift_id})
        if not rows:
            return None
        employees, names = self._lookups()
        return project_shift(rows[0], employees=employees, department_names=names)

    def create(self, shift: NewShift) -> str:
        row = self._gateway.insert(
            "shifts",
            {
                "employee_id": shift.employee_id,
                "start_time": shift.start_time,
                "end_time": shift.end_time,
                "date": shift.date.strftime("%Y-%m-%d"),
                "status": shift.status.value,
                "notes": shift.notes,
            },
        )
        return str(row["id"])

    def update(self, shift_id: str, patch: Mapping[str, Any]) -> None:
        self._gateway.update("shifts", shift_id, patch)

    def delete(self, shift_id: str) -> None:
        self._gateway.delete("shifts", shift_id)

    def delete_for_employee(self, employee_id: str) -> None:
        self._gateway.delete_where("shifts", {"employee_id": employee_id})
