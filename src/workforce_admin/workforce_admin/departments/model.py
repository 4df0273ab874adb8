from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    description: Optional[str] = None
    manager_id: Optional[str] = None
