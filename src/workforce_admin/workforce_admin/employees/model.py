from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..core.enums import EmployeeStatus
from ..permissions.model import Permission


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``department`` is the department name projected at read time; it is never
    stored on the employee row.
    """

    id: str
    name: str
    email: str
    phone: str
    role: str
    department: str
    department_id: Optional[str]
    status: EmployeeStatus
    start_date: date
    hourly_rate: float
    permissions: Tuple[Permission, ...] = ()

    def has_permission(self, name: str) -> bool:
        return any(p.name == name for p in self.permissions)


@dataclass(frozen=True)
class NewEmployee:
    """Validated input for the add-employee use case."""

    name: str
    email: str
    phone: str
    role: str
    department_id: Optional[str]
    status: EmployeeStatus
    start_date: date
    hourly_rate: float
