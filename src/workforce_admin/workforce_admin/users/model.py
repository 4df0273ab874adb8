from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Iterable, Union

from ..core.enums import UserRole


@dataclass(frozen=True)
class AdminRole:
    """Admins pass every permission check."""

    kind: ClassVar[UserRole] = UserRole.ADMIN

    def allows(self, permission: str) -> bool:
        return True


@dataclass(frozen=True)
class ManagerRole:
    permissions: FrozenSet[str] = field(default_factory=frozenset)
    kind: ClassVar[UserRole] = UserRole.MANAGER

    def allows(self, permission: str) -> bool:
        return permission in self.permissions


@dataclass(frozen=True)
class EmployeeRole:
    permissions: FrozenSet[str] = field(default_factory=frozenset)
    kind: ClassVar[UserRole] = UserRole.EMPLOYEE

    def allows(self, permission: str) -> bool:
        return permission in self.permissions


Role = Union[AdminRole, ManagerRole, EmployeeRole]


def make_role(kind: UserRole | str, permissions: Iterable[str] = ()) -> Role:
    kind = UserRole(kind)
    if kind == UserRole.ADMIN:
        return AdminRole()
    if kind == UserRole.MANAGER:
        return ManagerRole(frozenset(permissions))
    return EmployeeRole(frozenset(permissions))


@dataclass(frozen=True)
class User:
    """The console's current session actor."""

    id: str
    name: str
    email: str
    role: Role

    def has_permission(self, permission: str) -> bool:
        return self.role.allows(permission)
