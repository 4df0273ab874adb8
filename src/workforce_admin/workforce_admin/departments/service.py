from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments. These operations emit no notifications."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def add_department(self, *, name: str, description: Optional[str] = None, manager_id: Optional[str] = None) -> str:
        name = require_non_empty(name, "Department name")
        department_id = self._departments.create(
            name=name,
            description=optional_text(description),
            manager_id=optional_text(manager_id),
        )
        logger.info("Department %s created (%s)", name, department_id)
        return department_id

    def update_department(
        self,
        department_id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        manager_id: Optional[str] = None,
    ) -> None:
        if not self._departments.get_by_id(department_id):
            raise NotFoundError("Department not found")

        patch: dict = {}
        if name is not None:
            patch["name"] = require_non_empty(name, "Department name")
        if description is not None:
            patch["description"] = optional_text(description)
        if manager_id is not None:
            patch["manager_id"] = optional_text(manager_id)

        self._departments.update(department_id, patch)
        logger.info("Department %s updated: %s", department_id, sorted(patch))
