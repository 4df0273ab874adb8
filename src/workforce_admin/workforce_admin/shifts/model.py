from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import ShiftStatus


@dataclass(frozen=True)
class Shift:
    """Domain entity: a scheduled shift.

    ``employee_name``, ``role`` and ``department`` come from the assigned
    employee at read time. Times are 'HH:MM' wall-clock strings.
    """

    id: str
    employee_id: str
    employee_name: str
    role: str
    department: str
    start_time: str
    end_time: str
    date: date
    status: ShiftStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class NewShift:
    employee_id: str
    start_time: str
    end_time: str
    date: date
    status: ShiftStatus = ShiftStatus.SCHEDULED
    notes: Optional[str] = None
