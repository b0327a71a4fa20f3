from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from .enums import Priority
from .errors import ValidationError


@dataclass(frozen=True)
class TaskEntity:
    id: str
    title: str
    description: str | None
    due_date: Optional[date]
    priority: Priority
    is_completed: bool = False


@dataclass(frozen=True)
class TaskDraft:
    title: str
    description: str | None
    due_date: Optional[date]
    priority: Priority

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> TaskDraft:
        title = fields.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Title is required", field="title")

        if fields.get("priority") is None:
            raise ValidationError("Priority is required", field="priority")
        priority = Priority.parse(fields["priority"])

        description = fields.get("description")
        if description is not None:
            description = str(description).strip() or None

        return cls(
            title=title.strip(),
            description=description,
            due_date=parse_due_date(fields.get("due_date")),
            priority=priority,
        )

    def to_entity(self, task_id: str) -> TaskEntity:
        return TaskEntity(
            id=task_id,
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            priority=self.priority,
        )


def parse_due_date(value: object) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"Due date must be YYYY-MM-DD, got {value!r}", field="due_date")
