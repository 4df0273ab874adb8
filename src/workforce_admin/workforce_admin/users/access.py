from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import require_enum, require_non_empty
from ..core.constants import NAVIGATION
from ..core.enums import UserRole
from ..core.exceptions import AuthorizationError
from .model import User, make_role


def require_permission(user: Optional[User], permission: str) -> User:
    if user is None or not user.has_permission(permission):
        raise AuthorizationError(f"Missing permission: {permission}")
    return user


def visible_sections(user: Optional[User]) -> list[dict]:
    """Feature areas the user may open, in navigation order."""

    if user is None:
        return []
    return [
        {"id": section_id, "name": name, "permission": permission}
        for section_id, name, permission in NAVIGATION
        if user.has_permission(permission)
    ]


def user_from_settings(data: Mapping[str, Any]) -> User:
    """Build the console actor from the ``CONSOLE_USER`` settings mapping."""

    kind = require_enum(UserRole, data.get("role", UserRole.ADMIN.value), "Role")
    return User(
        id=str(data.get("id") or "1"),
        name=require_non_empty(data.get("name", ""), "User name"),
        email=str(data.get("email") or ""),
        role=make_role(kind, data.get("permissions") or ()),
    )


def user_to_dict(user: User) -> dict:
    permissions = sorted(getattr(user.role, "permissions", ()))
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role.kind.value,
        "permissions": permissions,
    }
