from __future__ import annotations

from typing import Any, Dict

from .errors import ValidationError


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Do not input an empty {field}")
    return value


class Reminder:
    """A single reminder: description, tag and completion flag."""

    def __init__(self, description: str, tag: str) -> None:
        self._description = _require_text(description, "description")
        self._tag = _require_text(tag, "tag")
        self._is_completed = False

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = _require_text(value, "description")

    @property
    def tag(self) -> str:
        return self._tag

    @tag.setter
    def tag(self, value: str) -> None:
        self._tag = _require_text(value, "tag")

    @property
    def is_completed(self) -> bool:
        return self._is_completed

    def toggle_completion(self) -> None:
        self._is_completed = not self._is_completed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self._description,
            "tag": self._tag,
            "is_completed": self._is_completed,
        }

    def __repr__(self) -> str:
        return (
            f"Reminder(description={self._description!r}, tag={self._tag!r}, "
            f"is_completed={self._is_completed!r})"
        )
