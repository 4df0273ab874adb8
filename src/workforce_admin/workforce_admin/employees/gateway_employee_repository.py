from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..core.constants import UNKNOWN_LABEL
from ..core.enums import EmployeeStatus
from ..database.gateway import DataGateway, Row
from ..permissions.gateway_permission_repository import to_permission
from ..permissions.model import Permission
from .model import Employee, NewEmployee
from .repository import EmployeeRepository


def project_employee(
    row: Mapping[str, Any],
    *,
    department_names: Mapping[str, str],
    permissions: Sequence[Permission] = (),
) -> Employee:
    """Build the read model: employee row + department name + granted permissions."""

    department_id = row.get("department_id")
    return Employee(
        id=str(row["id"]),
        name=row["name"],
        email=row.get("email") or "",
        phone=row.get("phone") or "",
        role=row.get("role") or "",
        department=department_names.get(department_id, UNKNOWN_LABEL) if department_id else UNKNOWN_LABEL,
        department_id=department_id,
        status=EmployeeStatus(row.get("status") or EmployeeStatus.ACTIVE.value),
        start_date=coerce_date(row["start_date"]),
        hourly_rate=float(row.get("hourly_rate") or 0),
        permissions=tuple(permissions),
    )


class GatewayEmployeeRepository(EmployeeRepository):
    def __init__(self, gateway: DataGateway):
        self._gateway = gateway

    def _department_names(self) -> Dict[str, str]:
        return {str(d["id"]): d["name"] for d in self._gateway.list("departments")}

    def _permissions_by_employee(self, grants: List[Row]) -> Dict[str, List[Permission]]:
        catalog = {str(p["id"]): to_permission(p) for p in self._gateway.list("permissions", order_by="module")}
        out: Dict[str, List[Permission]] = {}
        for g in grants:
            perm = catalog.get(str(g["permission_id"]))
            if perm:
                out.setdefault(str(g["employee_id"]), []).append(perm)
        return out

    def list_all(self) -> Sequence[Employee]:
        rows = self._gateway.list("employees", order_by="name")
        names = self._department_names()
        perms = self._permissions_by_employee(self._gateway.list("employee_permissions"))
        return [
            project_employee(r, department_names=names, permissions=perms.get(str(r["id"]), ()))
            for r in rows
        ]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        rows = self._gateway.list("employees", {"id": employee_id})
        if not rows:
            return None
        grants = self._gateway.list("employee_permissions", {"employee_id": employee_id})
        perms = self._permissions_by_employee(grants)
        return project_employee(
            rows[0],
            department_names=self._department_names(),
            permissions=perms.get(str(employee_id), ()),
        )

    def create(self, employee: NewEmployee) -> str:
        row = self._gateway.insert(
            "employees",
            {
                "name": employee.name,
                "email": employee.email,
                "phone": employee.phone,
                "role": employee.role,
                "department_id": employee.department_id,
                "status": employee.status.value,
                "start_date": employee.start_date.strftime("%Y-%m-%d"),
                "hourly_rate": employee.hourly_rate,
            },
        )
        return str(row["id"])

    def update(self, employee_id: str, patch: Mapping[str, Any]) -> None:
        self._gateway.update("employees", employee_id, patch)

    def delete_by_id(self, employee_id: str) -> None:
        self._gateway.delete("employees", employee_id)
