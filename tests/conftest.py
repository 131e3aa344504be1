"""Shared fixtures for pytiles tests."""

import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
import pytest
from PyQt6.QtCore import QCoreApplication

from pytiles.controller.controller import ArrangementController
from pytiles.model.items import ItemStore


@pytest.fixture(scope="session")
def qapp():
    """Qt core application for tests that need an event loop."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(["pytiles-tests"])
    return app


@pytest.fixture
def items():
    """Store with three items at known, distinct positions."""
    store = ItemStore()
    store.load(3, np.array([[10.0, 20.0, 30.0], [-5.0, 0.0, 5.0], [100.0, -100.0, 0.0]]))
    return store


@pytest.fixture
def controller():
    """Controller with 250 items at deterministic start positions."""
    ctrl = ArrangementController(default_duration=1000.0)
    start = np.arange(250 * 3, dtype=np.float64).reshape(250, 3)
    ctrl.load_items(250, initial=start)
    return ctrl
