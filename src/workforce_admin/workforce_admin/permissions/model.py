from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Permission:
    """Domain entity: a named capability. ``name`` is the stable key used in access checks."""

    id: str
    name: str
    description: str
    module: str
