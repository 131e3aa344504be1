"""Unit tests for the arrangement controller, frame driver and CLI.

Tests the application-facing behaviour including:
- Loading items and the initial table arrangement
- Arrangement requests and supersession
- Capacity overflow
- Signals
- Qt timer driven animation
"""

import logging

import numpy as np
import pytest
from PyQt6.QtCore import QEventLoop, QTimer

from pytiles import run
from pytiles.__main__ import main
from pytiles.controller.controller import ArrangementController
from pytiles.controller.driver import FrameDriver
from pytiles.errors import UnknownArrangementError, ValidationError
from pytiles.layout.engine import Arrangement


def test_load_starts_table(controller):
    """Loading items recomputes layouts and starts the table arrangement."""
    assert controller.items.count == 250
    assert controller.engine.item_count == 250
    assert controller.current_arrangement is Arrangement.TABLE
    assert controller.transitions.active_count == 200


def test_load_scatters_reproducibly():
    """Random start positions are reproducible with a seed and bounded."""
    first = ArrangementController()
    second = ArrangementController()
    first.load_items(40, seed=7)
    second.load_items(40, seed=7)

    assert np.array_equal(first.items.positions, second.items.positions)
    assert np.all(np.abs(first.items.positions) <= 2000.0)


def test_items_beyond_capacity_keep_position(controller):
    """Items past the table and grid capacity never move."""
    start = controller.items.positions.copy()

    controller.advance(1000.0)
    controller.request_arrangement("grid")
    controller.advance(1000.0)

    assert np.array_equal(controller.items.positions[200:], start[200:])
    assert np.array_equal(controller.items.positions[:200], controller.engine.targets(Arrangement.GRID))


def test_capacity_overflow_is_logged(controller, caplog):
    """Requests on bounded arrangements report the items left in place."""
    with caplog.at_level(logging.INFO, logger="pytiles.controller.controller"):
        assert controller.request_arrangement("grid") == 200
        assert controller.request_arrangement("helix") == 250

    messages = [record.getMessage() for record in caplog.records]
    assert "Arranging 200 items as grid (50 beyond capacity 200 stay put)" in messages
    assert "Arranging 250 items as helix" in messages


def test_quick_successive_requests(controller):
    """Only the newest request is followed and all items settle on it."""
    controller.request_arrangement(Arrangement.SPHERE)
    controller.advance(10.0)
    controller.request_arrangement(Arrangement.HELIX)

    sphere = controller.engine.targets(Arrangement.SPHERE)
    helix = controller.engine.targets(Arrangement.HELIX)
    for i in range(controller.items.count):
        assert np.array_equal(controller.transitions.target_of(i), helix[i])

    while controller.advance(50.0):
        pass

    assert np.array_equal(controller.items.positions, helix)
    assert not np.allclose(controller.items.positions, sphere)


def test_unknown_arrangement_changes_nothing(controller):
    """A rejected request leaves the running arrangement alone."""
    controller.advance(100.0)
    before = controller.items.positions.copy()

    with pytest.raises(UnknownArrangementError):
        controller.request_arrangement("pyramid")
    with pytest.raises(ValidationError):
        controller.request_arrangement("sphere", duration=-1.0)

    assert controller.current_arrangement is Arrangement.TABLE
    assert controller.transitions.active_count == 200
    assert np.array_equal(controller.items.positions, before)


def test_invalid_load_changes_nothing(controller):
    """Bad counts or start positions are rejected before any change."""
    with pytest.raises(ValidationError):
        controller.load_items(-1)
    with pytest.raises(ValidationError):
        controller.load_items(3, initial=np.zeros((4, 3)))

    assert controller.items.count == 250
    assert controller.engine.item_count == 250


def test_reload_replaces_batch(controller):
    """A reload replaces the items and recomputes the layouts."""
    controller.request_arrangement("sphere")
    controller.load_items(10, initial=np.zeros((10, 3)))

    assert controller.items.count == 10
    assert controller.engine.item_count == 10
    assert len(controller.engine.targets("sphere")) == 10
    assert controller.current_arrangement is Arrangement.TABLE
    assert controller.transitions.active_count == 10


def test_signals():
    """Loading, arranging and settling emit their signals."""
    controller = ArrangementController(default_duration=100.0)
    loaded, changed, finished = [], [], []
    controller.scene_loaded.connect(loaded.append)
    controller.arrangement_changed.connect(changed.append)
    controller.transitions_finished.connect(lambda: finished.append(True))

    controller.load_items(5, seed=1)
    controller.request_arrangement("helix", duration=50.0)
    controller.advance(25.0)
    controller.advance(25.0)
    controller.advance(25.0)

    assert loaded == [5]
    assert changed == ["table", "helix"]
    assert finished == [True]


def test_empty_scene():
    """Zero items is a valid, motionless scene."""
    controller = ArrangementController()
    controller.load_items(0)

    assert controller.items.count == 0
    assert not controller.transitions.is_animating
    assert controller.advance(16.0) == 0


def test_frame_driver_runs_animation(qapp):
    """The Qt timer drives transitions to completion."""
    controller = ArrangementController(default_duration=60.0)
    controller.load_items(20, seed=3)
    driver = FrameDriver(controller, interval_ms=5)

    loop = QEventLoop()
    controller.transitions_finished.connect(loop.quit)
    QTimer.singleShot(3000, loop.quit)

    driver.start()
    assert driver.is_running
    loop.exec()
    driver.stop()

    assert not driver.is_running
    assert driver.frame_count > 0
    assert not controller.transitions.is_animating
    assert np.array_equal(controller.items.positions, controller.engine.targets("table"))


def test_cli_rejects_bad_arguments(capsys):
    """Invalid arrangements and frame rates exit with code 1."""
    assert main(["--sequence", "sphere,pyramid"]) == 1
    assert main(["--fps", "0"]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_runs_sequence(qapp):
    """The headless demo cycles through the sequence and exits cleanly."""
    assert main(["--count", "12", "--sequence", "sphere,grid", "--duration", "20", "--hold", "0", "--seed", "1"]) == 0


def test_console_entry_point(monkeypatch):
    """The console script forwards arguments and maps Ctrl+C to 130."""
    assert run.main(["--fps", "0"]) == 1

    def interrupted(argv):
        raise KeyboardInterrupt

    monkeypatch.setattr("pytiles.__main__.main", interrupted)
    assert run.main([]) == run.EXIT_INTERRUPTED
