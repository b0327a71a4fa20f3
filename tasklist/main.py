from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication, QStyleFactory

from tasklist.config import SETTINGS
from tasklist.infra.logging import setup_logging
from tasklist.services.task_service import build_task_service
from tasklist.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    service = build_task_service(SETTINGS)
    logger.info(
        "Starting with %s tasks, filter=%s",
        len(service.list_tasks()),
        service.current_filter.value,
    )

    app = QApplication(sys.argv)
    app.setStyle(QStyleFactory.create("Fusion"))

    window = MainWindow(service)
    window.show()
    try:
        exit_code = app.exec()
    finally:
        service.close()
        service.store.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
