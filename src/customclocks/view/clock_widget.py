"""
Clock Widget
============
The Qt face of the clock: forwards resize, tick and paint events to the
model `Clock` and paints its draw list with QPainter.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QCloseEvent, QColor, QPainter, QPaintEvent, QPolygonF, QResizeEvent
from PySide6.QtSvg import QSvgRenderer
from PySide6.QtWidgets import QWidget

from customclocks.config import CLOCK_FACE_PATH
from customclocks.controller.ticker import Ticker
from customclocks.model.clock import Clock
from customclocks.model.time_state import TimeState

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def load_face_renderer(path: str = CLOCK_FACE_PATH) -> Optional[QSvgRenderer]:
    """Load the face SVG. Returns None (and logs) when it cannot be read."""
    renderer = QSvgRenderer(path)
    if not renderer.isValid():
        logger.warning(f"Clock face could not be loaded from: {path}")
        return None
    return renderer


class QPainterCanvas:
    """Adapter that lets the model `Clock` paint through a QPainter."""
    def __init__(self, painter: QPainter, face: Optional[QSvgRenderer]) -> None:
        self.painter = painter
        self.face = face

    def draw_face(self, width: float, height: float) -> None:
        if self.face is None:
            return
        self.face.render(self.painter, QRectF(0.0, 0.0, width, height))

    def fill_polygon(self, points: npt.NDArray[np.float64], color: str) -> None:
        polygon = QPolygonF([QPointF(float(x), float(y)) for x, y in points])
        self.painter.setPen(Qt.NoPen)
        self.painter.setBrush(QBrush(QColor(color)))
        self.painter.drawPolygon(polygon)


class ClockWidget(QWidget):
    """
    Analog clock that advances by one second per tick.

    Args:
        date: Optional initial time, `yyyy/MM/dd HH:mm:ss`. Missing or
            malformed input starts from the current time.
        parent: Parent widget.
    """
    def __init__(self, date: Optional[str] = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(100, 100)

        self.clock = Clock(time_state=TimeState.from_date_string(date), on_changed=self.update)
        self._face = load_face_renderer()

        self.ticker = Ticker(parent=self)
        self.ticker.ticked.connect(self._on_tick)
        self.ticker.start()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def save_state(self) -> dict[str, int]:
        return self.clock.save_state()

    def restore_state(self, state: Mapping[str, Any]) -> None:
        self.clock.restore_state(state)

    def stop(self) -> None:
        self.ticker.stop()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def _on_tick(self) -> None:
        self.clock.on_tick()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        margins = self.contentsMargins()
        self.clock.on_resize(
            event.size().width(),
            event.size().height(),
            (margins.left(), margins.top(), margins.right(), margins.bottom()),
        )

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            # Model coordinates start at the padded area's top-left corner
            painter.translate(self.contentsRect().topLeft())
            self.clock.render(QPainterCanvas(painter, self._face))
        finally:
            painter.end()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.stop()
        super().closeEvent(event)
