from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, department_id: str) -> Optional[Department]:
        raise NotImplementedError

    def create(self, *, name: str, description: Optional[str], manager_id: Optional[str]) -> str:
        raise NotImplementedError

    def update(self, department_id: str, patch: Mapping[str, Any]) -> None:
        raise NotImplementedError
