"""Qt timer loop that feeds frame ticks into the arrangement controller."""

from PyQt6.QtCore import QElapsedTimer, QObject, QTimer, pyqtSignal

from pytiles.controller.controller import ArrangementController
from pytiles.errors import validate_count


class FrameDriver(QObject):
    """Calls ``controller.advance`` on every timer tick.

    Each tick passes the wall-clock milliseconds since the previous tick,
    so animations keep their duration when frames are late or dropped.
    """

    frame = pyqtSignal(int)  # Emits running frame count

    def __init__(self, controller: ArrangementController, interval_ms: int = 16) -> None:
        """Initialize the frame driver.

        Args:
            controller: Controller receiving the ticks
            interval_ms: Requested time between ticks
        """
        super().__init__()
        self._controller = controller
        self._frames = 0

        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(validate_count(interval_ms, "interval_ms"))
        self._timer.timeout.connect(self._tick)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @property
    def frame_count(self) -> int:
        return self._frames

    def start(self) -> None:
        """Start ticking."""
        if self._timer.isActive():
            return
        self._clock.start()
        self._timer.start()

    def stop(self) -> None:
        """Stop ticking."""
        self._timer.stop()
        self._clock.invalidate()

    def _tick(self) -> None:
        # restart() returns ms since the previous start/restart
        elapsed = self._clock.restart()
        self._controller.advance(float(elapsed))
        self._frames += 1
        self.frame.emit(self._frames)
