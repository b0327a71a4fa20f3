from __future__ import annotations

from datetime import date

from tasklist.domain.entities import TaskEntity
from tasklist.domain.enums import Priority


def sample_tasks() -> list[TaskEntity]:
    """Initial tasks shown on first launch, newest first."""
    return [
        TaskEntity(
            id="1",
            title="Finish the project report",
            description="Tidy up the weekly project report and email it to the manager.",
            due_date=date(2024, 12, 18),
            priority=Priority.HIGH,
        ),
        TaskEntity(
            id="2",
            title="Prepare for the client meeting",
            description="Review the presentation slides.",
            due_date=date(2024, 12, 19),
            priority=Priority.NORMAL,
            is_completed=True,
        ),
        TaskEntity(
            id="3",
            title="Check email",
            description="Clean up the inbox.",
            due_date=None,
            priority=Priority.LOW,
        ),
        TaskEntity(
            id="4",
            title="Design the new feature",
            description="Go through the Figma mockups.",
            due_date=date(2024, 12, 25),
            priority=Priority.HIGH,
        ),
        TaskEntity(
            id="5",
            title="Pay the bills",
            description="Pay the outstanding invoices.",
            due_date=date(2024, 12, 30),
            priority=Priority.LOW,
        ),
    ]
