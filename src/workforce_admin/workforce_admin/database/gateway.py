from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol

from ..core.exceptions import StoreError

Row = Dict[str, Any]

COLLECTIONS = (
    "employees",
    "departments",
    "permissions",
    "shifts",
    "time_entries",
    "employee_permissions",
    "notifications",
)


def require_collection(name: str) -> str:
    if name not in COLLECTIONS:
        raise StoreError(f"Unknown collection: {name!r}")
    return name


class DataGateway(Protocol):
    """Generic CRUD access to the console's collections.

    Note (DIP): repositories depend on this interface, not on a concrete store.
    Rows are plain dicts; every row carries a string ``id``.
    """

    def list(
        self,
        collection: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        raise NotImplementedError

    def insert(self, collection: str, record: Mapping[str, Any]) -> Row:
        """Insert and return the created row, including its generated id."""

        raise NotImplementedError

    def update(self, collection: str, record_id: str, patch: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, collection: str, record_id: str) -> None:
        raise NotImplementedError

    def delete_where(self, collection: str, filters: Mapping[str, Any]) -> None:
        raise NotImplementedError
