from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import NewShift, Shift


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        raise NotImplementedError

    def create(self, shift: NewShift) -> str:
        raise NotImplementedError

    def update(self, shift_id: str, patch: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, shift_id: str) -> None:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: str) -> None:
        raise NotImplementedError
