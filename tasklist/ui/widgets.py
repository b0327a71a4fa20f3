from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QTabBar,
    QVBoxLayout,
    QWidget,
)

from tasklist.domain.entities import TaskEntity
from tasklist.domain.enums import Priority, TaskFilter

PRIORITY_COLORS = {
    Priority.HIGH: "#EF4444",
    Priority.NORMAL: "#F59E0B",
    Priority.LOW: "#10B981",
}

FILTER_TABS = [TaskFilter.ALL, TaskFilter.ACTIVE, TaskFilter.COMPLETED]

EMPTY_MESSAGE = "No tasks yet. Add a new one!"


def priority_color(priority: Priority) -> str:
    return PRIORITY_COLORS[priority]


def format_meta(task: TaskEntity) -> str:
    if task.due_date:
        return f"Due: {task.due_date.isoformat()}"
    return ""


class TaskItemWidget(QWidget):
    def __init__(self, task: TaskEntity, on_toggle: Callable[[str], None]):
        super().__init__()
        self.task = task

        self.setObjectName("TaskCard")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setMinimumHeight(56)

        self.checkbox = QCheckBox()
        self.checkbox.setChecked(task.is_completed)
        self.checkbox.toggled.connect(lambda _checked: on_toggle(task.id))

        title = QLabel(task.title)
        font = title.font()
        font.setStrikeOut(task.is_completed)
        title.setFont(font)

        text_column = QVBoxLayout()
        text_column.setSpacing(2)
        text_column.addWidget(title)
        meta_text = format_meta(task)
        if meta_text:
            meta = QLabel(meta_text)
            meta_font = meta.font()
            meta_font.setStrikeOut(task.is_completed)
            meta.setFont(meta_font)
            text_column.addWidget(meta)

        tag = QLabel()
        tag.setFixedWidth(6)
        tag.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)
        tag.setToolTip(task.priority.label)
        tag.setStyleSheet(f"background-color: {priority_color(task.priority)}; border-radius: 3px;")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(12)
        layout.addWidget(self.checkbox, 0, Qt.AlignVCenter)
        layout.addLayout(text_column, 1)
        layout.addWidget(tag)


class FilterTabs(QTabBar):
    def __init__(self, current: TaskFilter, on_change: Callable[[TaskFilter], None], parent=None):
        super().__init__(parent)
        self.setObjectName("FilterTabs")
        self.setExpanding(True)
        for task_filter in FILTER_TABS:
            index = self.addTab(task_filter.label)
            self.setTabData(index, task_filter.value)
        self.setCurrentIndex(FILTER_TABS.index(current))
        self.currentChanged.connect(lambda index: on_change(TaskFilter(self.tabData(index))))

    def set_counts(self, counts: dict[TaskFilter, int]) -> None:
        for index, task_filter in enumerate(FILTER_TABS):
            self.setTabText(index, f"{task_filter.label} ({counts.get(task_filter, 0)})")
