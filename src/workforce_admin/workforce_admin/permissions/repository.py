from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import Permission


class PermissionRepository(Protocol):
    def list_all(self) -> Sequence[Permission]:
        raise NotImplementedError

    def grant(self, *, employee_id: str, permission_ids: Iterable[str]) -> None:
        raise NotImplementedError

    def revoke_all(self, *, employee_id: str) -> None:
        raise NotImplementedError
