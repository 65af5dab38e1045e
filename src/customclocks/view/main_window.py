"""
Main Application Window
=======================
Hosts a single `ClockWidget` and persists its elapsed-seconds counter.

Why is this file needed?
------------------------
1. Lifecycle: It owns the clock widget and stops its ticker on close.
2. Persistence: The counter survives a window teardown/recreation through
   QSettings; geometry is rebuilt from the next resize instead.
"""
import logging
from typing import Optional

from PySide6.QtCore import QSettings
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow

from customclocks.application import VISIBLE_APP_NAME
from customclocks.config import SETTINGS_ELAPSED_SECONDS_KEY
from customclocks.model.clock import ELAPSED_SECONDS_KEY
from customclocks.view.clock_widget import ClockWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, date: Optional[str] = None, restore: bool = True) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(400, 400)

        self.clock_widget = ClockWidget(date=date, parent=self)
        self.setCentralWidget(self.clock_widget)

        # An explicit start date wins over the saved counter
        if restore and date is None:
            self.restore_settings()

    def restore_settings(self) -> None:
        settings = QSettings()
        if not settings.contains(SETTINGS_ELAPSED_SECONDS_KEY):
            return
        value = settings.value(SETTINGS_ELAPSED_SECONDS_KEY)
        try:
            elapsed_seconds = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed saved value for '{SETTINGS_ELAPSED_SECONDS_KEY}': {value!r}")
            return
        self.clock_widget.restore_state({ELAPSED_SECONDS_KEY: elapsed_seconds})

    def save_settings(self) -> None:
        settings = QSettings()
        settings.setValue(SETTINGS_ELAPSED_SECONDS_KEY, self.clock_widget.save_state()[ELAPSED_SECONDS_KEY])
        settings.sync()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.clock_widget.stop()
        self.save_settings()
        logger.info("Clock state saved.")
        super().closeEvent(event)
