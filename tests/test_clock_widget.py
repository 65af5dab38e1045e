"""Qt-level tests: Ticker, ClockWidget and MainWindow on the offscreen platform."""

from __future__ import annotations

import numpy as np
import pytest

from customclocks.model.clock import ELAPSED_SECONDS_KEY
from customclocks.model.hands import HandKind, Surface
from customclocks.model.time_state import parse_initial_time

START = "2024/01/01 03:00:30"


@pytest.fixture
def widget(qapp):
    from customclocks.view.clock_widget import ClockWidget

    w = ClockWidget(date=START)
    yield w
    w.stop()
    w.deleteLater()


# ── Ticker ───────────────────────────────────────────────────────────────────

def test_ticker_start_stop(qapp):
    from customclocks.controller.ticker import Ticker

    ticker = Ticker()
    assert not ticker.is_running()
    ticker.start()
    assert ticker.is_running()
    ticker.stop()
    assert not ticker.is_running()


def test_ticker_emits(qapp):
    from PySide6.QtTest import QTest
    from customclocks.controller.ticker import Ticker

    ticks: list[int] = []
    ticker = Ticker(interval_ms=10)
    ticker.ticked.connect(lambda: ticks.append(1))
    ticker.start()
    QTest.qWait(200)
    ticker.stop()
    assert len(ticks) >= 1

    count = len(ticks)
    QTest.qWait(50)
    assert len(ticks) == count


# ── ClockWidget ──────────────────────────────────────────────────────────────

def test_widget_starts_from_date_and_ticks(widget):
    assert widget.ticker.is_running()
    assert widget.clock.time_state.elapsed_seconds == parse_initial_time(START)
    widget._on_tick()
    assert widget.clock.time_state.elapsed_seconds == parse_initial_time(START) + 1


def test_widget_resize_uses_contents_margins(qapp, widget):
    widget.setContentsMargins(10, 20, 10, 20)
    widget.resize(320, 340)
    widget.show()
    qapp.processEvents()
    assert widget.clock.surface == Surface(300, 300)


def test_widget_paints(qapp, widget):
    widget.resize(200, 200)
    widget.show()
    qapp.processEvents()
    pixmap = widget.grab()
    assert not pixmap.isNull()
    assert widget.clock.surface == Surface(200, 200)


def test_widget_paints_degenerate_geometry(qapp, widget):
    widget.show()
    qapp.processEvents()
    widget.clock.on_resize(0, 0)
    pixmap = widget.grab()
    assert not pixmap.isNull()
    np.testing.assert_allclose(widget.clock.polygons[HandKind.HOUR], np.zeros((4, 2)), atol=1e-12)


def test_widget_save_restore(widget):
    saved = widget.save_state()
    widget._on_tick()
    widget.restore_state(saved)
    assert widget.save_state() == saved


def test_widget_close_stops_ticker(qapp, widget):
    widget.show()
    widget.close()
    assert not widget.ticker.is_running()


def test_face_loads():
    from customclocks.view.clock_widget import load_face_renderer

    assert load_face_renderer() is not None


def test_missing_face_is_logged(qapp, tmp_path, caplog):
    from customclocks.view.clock_widget import load_face_renderer

    assert load_face_renderer(str(tmp_path / "missing.svg")) is None
    assert "Clock face could not be loaded" in caplog.text


# ── MainWindow ───────────────────────────────────────────────────────────────

def test_main_window_persists_counter(qapp, isolated_settings):
    from customclocks.view.main_window import MainWindow

    first = MainWindow(date=START, restore=False)
    first.show()
    first.clock_widget._on_tick()
    expected = first.clock_widget.save_state()
    first.close()
    assert not first.clock_widget.ticker.is_running()

    second = MainWindow()
    try:
        assert second.clock_widget.save_state() == expected
    finally:
        second.clock_widget.stop()


def test_main_window_date_wins_over_saved_counter(qapp, isolated_settings):
    from PySide6.QtCore import QSettings
    from customclocks.config import SETTINGS_ELAPSED_SECONDS_KEY
    from customclocks.view.main_window import MainWindow

    QSettings().setValue(SETTINGS_ELAPSED_SECONDS_KEY, 5)
    window = MainWindow(date=START)
    try:
        assert window.clock_widget.save_state() == {ELAPSED_SECONDS_KEY: parse_initial_time(START)}
    finally:
        window.clock_widget.stop()


def test_main_window_ignores_malformed_setting(qapp, isolated_settings, caplog):
    from PySide6.QtCore import QSettings
    from customclocks.config import SETTINGS_ELAPSED_SECONDS_KEY
    from customclocks.view.main_window import MainWindow

    QSettings().setValue(SETTINGS_ELAPSED_SECONDS_KEY, "not a number")
    window = MainWindow()
    try:
        assert window.clock_widget.save_state()[ELAPSED_SECONDS_KEY] > 0
        assert "Ignoring malformed saved value" in caplog.text
    finally:
        window.clock_widget.stop()
