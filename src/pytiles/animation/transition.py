"""Per-item position transitions between arrangements.

The controller never schedules itself: the host calls :meth:`advance`
once per frame with the elapsed time since the previous frame.
"""

import logging
from dataclasses import dataclass

import numpy as np

from pytiles.animation.easing import Easing, exponential_in_out
from pytiles.errors import validate_finite_array, validate_positive
from pytiles.model.items import ItemStore

logger = logging.getLogger(__name__)


@dataclass
class Transition:
    """Animation state for moving one item towards its target."""

    index: int
    start: np.ndarray
    target: np.ndarray
    duration: float
    easing: Easing
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        """Elapsed fraction of the duration, clamped to [0, 1]."""
        return min(self.elapsed / self.duration, 1.0)

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def step(self, dt: float) -> np.ndarray:
        """Advance by dt and return the item's new position."""
        self.elapsed += dt
        if self.finished:
            # Land exactly on the target, no residual drift
            return self.target
        return self.start + (self.target - self.start) * self.easing(self.progress)


class TransitionController:
    """Drives every item from its live position to a new set of targets.

    Starting a new set of transitions discards all running ones first, so
    an item is only ever moving towards the most recently requested target.
    """

    def __init__(
        self,
        items: ItemStore,
        default_duration: float = 2000.0,
        easing: Easing = exponential_in_out,
    ) -> None:
        """Initialize the transition controller.

        Args:
            items: Store whose positions are animated
            default_duration: Duration used when transition_to gets none
            easing: Easing curve shared by all transitions
        """
        self._items = items
        self._default_duration = validate_positive(default_duration, "default_duration")
        self._easing = easing
        self._active: dict[int, Transition] = {}

    @property
    def default_duration(self) -> float:
        return self._default_duration

    @property
    def is_animating(self) -> bool:
        """Whether any transition is still running."""
        return bool(self._active)

    @property
    def active_count(self) -> int:
        """Number of running transitions."""
        return len(self._active)

    def progress(self, index: int) -> float | None:
        """Get the elapsed fraction of an item's transition, or None if idle."""
        transition = self._active.get(index)
        return None if transition is None else transition.progress

    def target_of(self, index: int) -> np.ndarray | None:
        """Get the target an item is currently moving towards, or None if idle."""
        transition = self._active.get(index)
        return None if transition is None else transition.target

    def transition_to(self, targets: np.ndarray, duration: float | None = None) -> int:
        """Start moving items towards new targets.

        Every running transition is discarded first. Item i gets a
        transition only if ``targets`` has an entry for it; items past the
        end of ``targets`` keep their current position.

        Args:
            targets: Target positions of shape (k, 3)
            duration: Transition duration (default_duration if None)

        Returns:
            Number of transitions started

        Raises:
            ValidationError: If targets or duration are invalid; running
                transitions are left untouched in that case
        """
        duration = self._default_duration if duration is None else validate_positive(duration, "duration")
        targets = validate_finite_array(targets, "targets")

        live = self._items.positions
        count = min(len(targets), len(live))
        self._active = {
            i: Transition(
                index=i,
                start=live[i].copy(),
                target=targets[i],
                duration=duration,
                easing=self._easing,
            )
            for i in range(count)
        }
        return count

    def advance(self, dt: float) -> int:
        """Advance every running transition by dt time units.

        Args:
            dt: Time elapsed since the previous call

        Returns:
            Number of transitions still running
        """
        dt = validate_positive(dt, "dt", allow_zero=True)
        if not self._active:
            return 0

        finished = []
        for index, transition in self._active.items():
            self._items.set_position(index, transition.step(dt))
            if transition.finished:
                finished.append(index)

        for index in finished:
            del self._active[index]

        if finished and not self._active:
            logger.debug("All transitions finished")
        return len(self._active)

    def reset(self) -> None:
        """Drop every running transition without moving any item."""
        self._active = {}

