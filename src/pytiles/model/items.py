"""Live item positions shared by the animation and render layers."""

import numpy as np

from pytiles.errors import ValidationError, validate_count, validate_finite_array, validate_positive
from pytiles.layout.position import Position


class ItemStore:
    """Owns the live 3D position of every item.

    The whole batch is replaced on each data (re)load. While loaded, the
    transition controller is the only writer; renderers read through
    :attr:`positions` or :meth:`position`.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._positions = np.zeros((0, 3), dtype=np.float64)

    @property
    def count(self) -> int:
        """Number of items currently loaded."""
        return len(self._positions)

    def __len__(self) -> int:
        return self.count

    @property
    def positions(self) -> np.ndarray:
        """Read-only view of all live positions, shape (count, 3)."""
        view = self._positions.view()
        view.setflags(write=False)
        return view

    def load(self, count: int, initial: np.ndarray | None = None) -> None:
        """Replace the item batch.

        Args:
            count: Number of items
            initial: Optional starting positions of shape (count, 3);
                items start at the origin if omitted

        Raises:
            ValidationError: If count or initial positions are invalid
        """
        count = validate_count(count)
        if initial is None:
            self._positions = np.zeros((count, 3), dtype=np.float64)
            return

        positions = validate_finite_array(initial, "initial")
        if len(positions) != count:
            raise ValidationError("initial", positions.shape, f"shape ({count}, 3)")
        self._positions = positions

    def scatter(self, count: int, extent: float = 2000.0, seed: int | None = None) -> None:
        """Replace the item batch with uniformly random start positions.

        Args:
            count: Number of items
            extent: Half-width of the cube positions are drawn from
            seed: Optional seed for a reproducible scatter
        """
        count = validate_count(count)
        extent = validate_positive(extent, "extent")
        rng = np.random.default_rng(seed)
        self.load(count, rng.uniform(-extent, extent, size=(count, 3)))

    def position(self, index: int) -> Position:
        """Get a snapshot of one item's position."""
        return Position.from_array(self._positions[index])

    def set_position(self, index: int, vector: np.ndarray) -> None:
        """Overwrite one item's position."""
        self._positions[index] = vector
