from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from ..database.gateway import DataGateway
from .model import Permission
from .repository import PermissionRepository


def to_permission(row: Mapping[str, Any]) -> Permission:
    return Permission(
        id=str(row["id"]),
        name=row["name"],
        description=row.get("description") or "",
        module=row.get("module") or "",
    )


class GatewayPermissionRepository(PermissionRepository):
    def __init__(self, gateway: DataGateway):
        self._gateway = gateway

    def list_all(self) -> Sequence[Permission]:
        rows = self._gateway.list("permissions", order_by="module")
        return [to_permission(r) for r in rows]

    def grant(self, *, employee_id: str, permission_ids: Iterable[str]) -> None:
        for permission_id in permission_ids:
            self._gateway.insert(
                "employee_permissions",
                {"employee_id": employee_id, "permission_id": permission_id},
            )

    def revoke_all(self, *, employee_id: str) -> None:
        self._gateway.delete_where("employee_permissions", {"employee_id": employee_id})
