from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tasklist.domain.enums import TaskFilter
from tasklist.domain.errors import NotFoundError
from tasklist.domain.filters import count_by_filter
from tasklist.infra.task_store import Snapshot
from tasklist.services.task_service import TaskService

from .dialogs import AddTaskDialog, TaskDetailDialog
from .widgets import EMPTY_MESSAGE, FilterTabs, TaskItemWidget

logger = logging.getLogger(__name__)


class MainWindow(QWidget):
    def __init__(self, service: TaskService):
        super().__init__()
        self.setWindowTitle("My Tasks")
        self.resize(520, 720)

        self.service = service

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        header = QHBoxLayout()
        header_title = QLabel("My Tasks")
        self.stats_label = QLabel("")
        header.addWidget(header_title)
        header.addStretch()
        header.addWidget(self.stats_label)
        layout.addLayout(header)

        self.filter_tabs = FilterTabs(service.current_filter, self.on_filter_change)
        layout.addWidget(self.filter_tabs)

        self.task_list = QListWidget()
        self.task_list.setObjectName("TaskList")
        self.task_list.setSpacing(4)
        self.task_list.itemDoubleClicked.connect(self.open_detail)
        layout.addWidget(self.task_list, 1)

        self.empty_label = QLabel(EMPTY_MESSAGE)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label, 1)

        action_bar = QFrame()
        actions = QHBoxLayout(action_bar)
        actions.setContentsMargins(0, 0, 0, 0)
        actions.addStretch()
        add_button = QPushButton("Add task")
        add_button.clicked.connect(self.new_task)
        actions.addWidget(add_button)
        layout.addWidget(action_bar)

        self._unsubscribe = service.subscribe(self.render)
        self.render(service.current_filter, service.visible_tasks())

        QShortcut(QKeySequence("Ctrl+N"), self, self.new_task)

    def render(self, task_filter: TaskFilter, tasks: Snapshot) -> None:
        self.task_list.clear()
        for task in tasks:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, task.id)
            widget = TaskItemWidget(task, self.on_toggle)
            self.task_list.addItem(item)
            self.task_list.setItemWidget(item, widget)
            item.setSizeHint(widget.sizeHint())

        self.task_list.setVisible(bool(tasks))
        self.empty_label.setVisible(not tasks)

        self.filter_tabs.set_counts(count_by_filter(self.service.list_tasks()))
        stats = self.service.get_stats()
        self.stats_label.setText(
            f"Total: {stats['total']} • Active: {stats['active']} • Completed: {stats['completed']}"
        )
        logger.debug("Rendered filter=%s visible=%s", task_filter.value, len(tasks))

    def on_filter_change(self, task_filter: TaskFilter) -> None:
        self.service.set_filter(task_filter)

    def on_toggle(self, task_id: str) -> None:
        try:
            self.service.toggle_completion(task_id)
        except NotFoundError as exc:
            QMessageBox.warning(self, "Task not found", exc.message)
            self.render(self.service.current_filter, self.service.visible_tasks())

    def open_detail(self, item: QListWidgetItem) -> None:
        dialog = TaskDetailDialog(self.service, item.data(Qt.UserRole), self)
        dialog.exec()

    def new_task(self) -> None:
        dialog = AddTaskDialog(self.service, self)
        dialog.exec()

    def closeEvent(self, event) -> None:
        self._unsubscribe()
        super().closeEvent(event)
