from __future__ import annotations

from core.exceptions import ValidationError
from core.interfaces import ProjectRepository
from core.services.common.validation import CatalogValidationMixin


class ProjectValidationMixin(CatalogValidationMixin):
    _project_repo: ProjectRepository

    def _validate_project_name(self, workspace_id: str, name: str, ignore_id: str | None = None) -> str:
        value = self._clean_name(name, label="Project", code_prefix="PROJECT")
        self._ensure_unique_name(
            value,
            self._project_repo.list_by_workspace(workspace_id),
            label="Project",
            code_prefix="PROJECT",
            ignore_id=ignore_id,
        )
        return value

    @staticmethod
    def _validate_non_negative(value: float | None, *, label: str) -> float | None:
        if value is None:
            return None
        if value < 0:
            raise ValidationError(f"{label} cannot be negative.", code="PROJECT_NEGATIVE_VALUE")
        return float(value)


__all__ = ["ProjectValidationMixin"]
