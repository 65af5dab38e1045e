"""
Tick Source
===========
Fires once per second on the GUI thread.

Why is this file needed?
------------------------
1. Thread affinity: QTimer delivers `timeout` on the thread that owns it, so
   the clock state is only ever mutated on the thread that also paints it.
2. Teardown: The ticker is parented to the widget it drives. Stopping it (or
   destroying the widget) guarantees no tick arrives afterwards.

Classes:
    Ticker: QObject wrapping a repeating QTimer.
"""
import logging

from PySide6.QtCore import QObject, QTimer, Signal

from customclocks.config import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class Ticker(QObject):
    # Emitted once per interval
    ticked = Signal()

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.ticked)

    def start(self) -> None:
        if self._timer.isActive():
            return
        self._timer.start()
        logger.info(f"Ticker started ({self._timer.interval()} ms).")

    def stop(self) -> None:
        if not self._timer.isActive():
            return
        self._timer.stop()
        logger.info("Ticker stopped.")

    def is_running(self) -> bool:
        return self._timer.isActive()
