from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee, NewEmployee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Reads return employees with their department name and permissions resolved.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: NewEmployee) -> str:
        raise NotImplementedError

    def update(self, employee_id: str, patch: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> None:
        raise NotImplementedError
