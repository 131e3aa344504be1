"""Controller layer for pytiles.

This module provides the application coordination:

- ArrangementController: Loads items and answers arrangement requests
- FrameDriver: Qt timer loop feeding frame ticks to the controller
"""

from pytiles.controller.controller import ArrangementController
from pytiles.controller.driver import FrameDriver

__all__ = [
    "ArrangementController",
    "FrameDriver",
]
