"""Shared test fixtures for the customclocks test suite.

Qt runs on the offscreen platform so the widget tests work headless.
RecordingCanvas stands in for a QPainter-backed surface in model tests.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pytest


# ── Recording canvas ──

@dataclass
class RecordingCanvas:
    """Collects every draw call in order."""
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def draw_face(self, width: float, height: float) -> None:
        self.calls.append(("face", width, height))

    def fill_polygon(self, points: np.ndarray, color: str) -> None:
        self.calls.append(("polygon", np.array(points, copy=True), color))


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


# ── Qt ──

@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication, QSettings
    from PySide6.QtWidgets import QApplication

    QCoreApplication.setOrganizationName("customclocks-tests")
    QCoreApplication.setApplicationName("customclocks-tests")
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def isolated_settings(qapp, tmp_path):
    """Point INI-format QSettings at a per-test directory."""
    from PySide6.QtCore import QSettings

    QSettings.setPath(QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path))
    yield tmp_path
