from __future__ import annotations

import re
from typing import Iterable, Protocol

from core.exceptions import ValidationError

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


class _Named(Protocol):
    id: str
    name: str


class CatalogValidationMixin:
    @staticmethod
    def _clean_name(name: str, *, label: str, code_prefix: str) -> str:
        value = (name or "").strip()
        if not value:
            raise ValidationError(f"{label} name is required.", code=f"{code_prefix}_NAME_EMPTY")
        return value

    @staticmethod
    def _validate_color(color: str, *, code_prefix: str) -> str:
        value = (color or "").strip()
        if not _HEX_COLOR_RE.match(value):
            raise ValidationError("Invalid color, expected #RRGGBB.", code=f"{code_prefix}_INVALID_COLOR")
        return value.upper()

    @staticmethod
    def _ensure_unique_name(
        name: str,
        existing: Iterable[_Named],
        *,
        label: str,
        code_prefix: str,
        ignore_id: str | None = None,
    ) -> None:
        target = name.strip().lower()
        for item in existing:
            if item.id != ignore_id and item.name.strip().lower() == target:
                raise ValidationError(
                    f"A {label.lower()} with this name already exists.",
                    code=f"{code_prefix}_NAME_DUPLICATE",
                )


__all__ = ["CatalogValidationMixin"]
