from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def list_all(self) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def get_active(self, *, employee_id: str, work_date: date) -> Optional[TimeEntry]:
        raise NotImplementedError

    def create_clock_in(self, *, employee_id: str, work_date: date, clock_in: str) -> str:
        raise NotImplementedError

    def complete(self, *, entry_id: str, clock_out: str, total_hours: float, overtime: bool) -> None:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: str) -> None:
        raise NotImplementedError
