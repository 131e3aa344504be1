"""Main controller for the tile scene.

Coordinates between the Model, Layout and Animation layers: reloads the
item batch, answers arrangement requests and forwards frame ticks.
"""

import logging

import numpy as np
from PyQt6.QtCore import QObject, pyqtSignal

from pytiles.animation.easing import Easing, exponential_in_out
from pytiles.animation.transition import TransitionController
from pytiles.errors import validate_count
from pytiles.layout.engine import Arrangement, LayoutEngine
from pytiles.layout.generators import LayoutConfig
from pytiles.model.items import ItemStore

logger = logging.getLogger(__name__)


class ArrangementController(QObject):
    """Application-facing entry point for arranging tiles.

    Owns no global state: the item store, layout engine and transition
    controller are created here (or passed in) and shared explicitly.
    """

    # Signals for UI updates
    scene_loaded = pyqtSignal(int)  # Emits item count
    arrangement_changed = pyqtSignal(str)  # Emits arrangement name
    transitions_finished = pyqtSignal()  # Emits when every item has settled

    def __init__(
        self,
        items: ItemStore | None = None,
        layout_config: LayoutConfig | None = None,
        default_duration: float = 2000.0,
        easing: Easing = exponential_in_out,
        initial_arrangement: Arrangement | str = Arrangement.TABLE,
    ) -> None:
        """Initialize controller.

        Args:
            items: Item store to animate (a new empty one if None)
            layout_config: Generator configuration (uses defaults if None)
            default_duration: Transition duration when a request gives none
            easing: Easing curve shared by all transitions
            initial_arrangement: Arrangement started after every load
        """
        super().__init__()

        self._items = items if items is not None else ItemStore()
        self._engine = LayoutEngine(layout_config)
        self._transitions = TransitionController(self._items, default_duration, easing)
        self._initial_arrangement = Arrangement.parse(initial_arrangement)
        self._current: Arrangement | None = None

    @property
    def items(self) -> ItemStore:
        return self._items

    @property
    def engine(self) -> LayoutEngine:
        return self._engine

    @property
    def transitions(self) -> TransitionController:
        return self._transitions

    @property
    def current_arrangement(self) -> Arrangement | None:
        """Most recently requested arrangement, None before the first load."""
        return self._current

    def load_items(
        self,
        count: int,
        initial: np.ndarray | None = None,
        seed: int | None = None,
        scatter_extent: float = 2000.0,
    ) -> None:
        """Replace the item batch after a data (re)load.

        Items start at ``initial`` if given, otherwise scattered randomly
        inside a cube of half-width ``scatter_extent``. The layout is
        recomputed for the new count and the initial arrangement starts.

        Args:
            count: Number of items in the new batch
            initial: Optional starting positions of shape (count, 3)
            seed: Seed for the random scatter
            scatter_extent: Half-width of the scatter cube
        """
        count = validate_count(count)
        if initial is not None:
            self._items.load(count, initial)
        else:
            self._items.scatter(count, scatter_extent, seed)

        self._transitions.reset()
        self._engine.set_item_count(count)
        logger.info("Loaded %d items", count)
        self.scene_loaded.emit(count)

        self.request_arrangement(self._initial_arrangement)

    def request_arrangement(self, name: Arrangement | str, duration: float | None = None) -> int:
        """Move every item towards the targets of an arrangement.

        Any transition still running is superseded immediately; items
        continue from wherever they currently are.

        Args:
            name: Arrangement member or name
            duration: Transition duration (controller default if None)

        Returns:
            Number of items set in motion

        Raises:
            UnknownArrangementError: If the name is not recognised
            ValidationError: If duration is not a positive number
        """
        arrangement = Arrangement.parse(name)
        started = self._transitions.transition_to(self._engine.targets(arrangement), duration)
        self._current = arrangement

        capacity = self._engine.capacity(arrangement)
        if capacity is not None and self._items.count > capacity:
            logger.info(
                "Arranging %d items as %s (%d beyond capacity %d stay put)",
                started,
                arrangement.value,
                self._items.count - capacity,
                capacity,
            )
        else:
            logger.info("Arranging %d items as %s", started, arrangement.value)

        self.arrangement_changed.emit(arrangement.value)
        return started

    def advance(self, dt: float) -> int:
        """Advance all running transitions by one frame.

        Args:
            dt: Time elapsed since the previous frame

        Returns:
            Number of transitions still running
        """
        was_animating = self._transitions.is_animating
        remaining = self._transitions.advance(dt)
        if was_animating and remaining == 0:
            self.transitions_finished.emit()
        return remaining
