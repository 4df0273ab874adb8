from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.gateway import DataGateway
from .model import Department
from .repository import DepartmentRepository


def to_department(row: Mapping[str, Any]) -> Department:
    return Department(
        id=str(row["id"]),
        name=row["name"],
        description=row.get("description"),
        manager_id=row.get("manager_id"),
    )


class GatewayDepartmentRepository(DepartmentRepository):
    def __init__(self, gateway: DataGateway):
        self._gateway = gateway

    def list_all(self) -> Sequence[Department]:
        return [to_department(r) for r in self._gateway.list("departments", order_by="name")]

    def get_by_id(self, department_id: str) -> Optional[Department]:
        rows = self._gateway.list("departments", {"id": department_id})
        return to_department(rows[0]) if rows else None

    def create(self, *, name: str, description: Optional[str], manager_id: Optional[str]) -> str:
        row = self._gateway.insert(
            "departments",
            {"name": name, "description": description, "manager_id": manager_id},
        )
        return str(row["id"])

    def update(self, department_id: str, patch: Mapping[str, Any]) -> None:
        self._gateway.update("departments", department_id, patch)
