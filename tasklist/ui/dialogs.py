from __future__ import annotations

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDateEdit,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
)

from tasklist.domain.entities import TaskEntity
from tasklist.domain.enums import Priority
from tasklist.domain.errors import NotFoundError, ValidationError
from tasklist.services.task_service import TaskService

from .widgets import priority_color


class AddTaskDialog(QDialog):
    def __init__(self, service: TaskService, parent=None):
        super().__init__(parent)
        self.service = service
        self.created: TaskEntity | None = None
        self.setWindowTitle("New task")
        self.resize(420, 360)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Task title")

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Description (optional)")

        self.due_toggle = QCheckBox("Has due date")
        self.due_input = QDateEdit(QDate.currentDate())
        self.due_input.setCalendarPopup(True)
        self.due_input.setDisplayFormat("yyyy-MM-dd")
        self.due_input.setEnabled(False)
        self.due_toggle.toggled.connect(self.due_input.setEnabled)

        self.priority_combo = QComboBox()
        for priority in Priority:
            self.priority_combo.addItem(priority.label, priority.value)
        self.priority_combo.setCurrentIndex(self.priority_combo.findData(Priority.NORMAL.value))

        form = QFormLayout()
        form.addRow("Title", self.title_input)
        form.addRow("Description", self.description_input)
        form.addRow(self.due_toggle, self.due_input)
        form.addRow("Priority", self.priority_combo)

        save_button = QPushButton("Save")
        save_button.clicked.connect(self.save)
        cancel_button = QPushButton("Cancel")
        cancel_button.clicked.connect(self.reject)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(cancel_button)
        buttons.addWidget(save_button)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addLayout(buttons)

    def save(self) -> None:
        data = {
            "title": self.title_input.text(),
            "description": self.description_input.toPlainText(),
            "due_date": self.due_input.date().toPython() if self.due_toggle.isChecked() else None,
            "priority": self.priority_combo.currentData(),
        }
        try:
            self.created = self.service.create_task(data)
        except ValidationError as exc:
            QMessageBox.warning(self, "Invalid task", exc.message)
            return
        self.accept()


class TaskDetailDialog(QDialog):
    def __init__(self, service: TaskService, task_id: str, parent=None):
        super().__init__(parent)
        self.service = service
        self.task_id = task_id
        self.setWindowTitle("Task details")
        self.resize(420, 300)

        self.title_label = QLabel()
        self.title_label.setWordWrap(True)
        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        self.due_label = QLabel()
        self.priority_label = QLabel()
        self.status_label = QLabel()

        form = QFormLayout()
        form.addRow("Description", self.description_label)
        form.addRow("Due date", self.due_label)
        form.addRow("Priority", self.priority_label)
        form.addRow("Status", self.status_label)

        self.toggle_button = QPushButton()
        self.toggle_button.clicked.connect(self.toggle_completion)
        self.delete_button = QPushButton("Delete")
        self.delete_button.clicked.connect(self.delete_task)
        close_button = QPushButton("Close")
        close_button.clicked.connect(self.accept)

        buttons = QHBoxLayout()
        buttons.addWidget(self.toggle_button)
        buttons.addWidget(self.delete_button)
        buttons.addStretch()
        buttons.addWidget(close_button)

        layout = QVBoxLayout(self)
        layout.addWidget(self.title_label)
        layout.addLayout(form)
        layout.addStretch()
        layout.addLayout(buttons)

        self.refresh()

    def refresh(self) -> None:
        task = self.service.get_task(self.task_id)
        if task is None:
            self.title_label.setText("Task not found")
            for label in (self.description_label, self.due_label, self.priority_label, self.status_label):
                label.clear()
            self.toggle_button.setEnabled(False)
            self.delete_button.setEnabled(False)
            return

        self.title_label.setText(task.title)
        self.description_label.setText(task.description or "No description")
        self.due_label.setText(task.due_date.isoformat() if task.due_date else "No due date")
        self.priority_label.setText(task.priority.label)
        self.priority_label.setStyleSheet(f"color: {priority_color(task.priority)}; font-weight: 600;")
        self.status_label.setText("Completed" if task.is_completed else "Active")
        self.toggle_button.setText("Mark as active" if task.is_completed else "Mark as completed")

    def toggle_completion(self) -> None:
        try:
            self.service.toggle_completion(self.task_id)
        except NotFoundError as exc:
            QMessageBox.warning(self, "Task not found", exc.message)
        self.refresh()

    def delete_task(self) -> None:
        confirm = QMessageBox.question(self, "Confirm", "Delete this task?")
        if confirm != QMessageBox.Yes:
            return
        try:
            self.service.delete_task(self.task_id)
        except NotFoundError as exc:
            QMessageBox.warning(self, "Task not found", exc.message)
            self.refresh()
            return
        self.accept()
