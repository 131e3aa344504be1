"""Layout engine for 3D tile arrangements."""

import logging
from collections.abc import Callable
from enum import Enum

import numpy as np

from pytiles.errors import LayoutError, UnknownArrangementError, validate_count
from pytiles.layout.generators import (
    LayoutConfig,
    grid_positions,
    helix_positions,
    sphere_positions,
    table_positions,
)

logger = logging.getLogger(__name__)


class Arrangement(Enum):
    """Named arrangements items can be laid out in."""

    TABLE = "table"
    SPHERE = "sphere"
    HELIX = "helix"
    GRID = "grid"

    @classmethod
    def parse(cls, value: "Arrangement | str") -> "Arrangement":
        """Resolve an arrangement from an enum member or a name.

        Args:
            value: Arrangement member or case-insensitive name

        Returns:
            The matching Arrangement

        Raises:
            UnknownArrangementError: If the name is not recognised
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownArrangementError(value, [member.value for member in cls])


Generator = Callable[[int, LayoutConfig], np.ndarray]

_GENERATORS: dict[Arrangement, Generator] = {
    Arrangement.TABLE: table_positions,
    Arrangement.SPHERE: sphere_positions,
    Arrangement.HELIX: helix_positions,
    Arrangement.GRID: grid_positions,
}


class LayoutEngine:
    """Holds the target positions of every arrangement for the current item count.

    All four target sets are recomputed together whenever the item count
    changes, so a lookup never returns a set built for a stale count.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize the layout engine.

        Args:
            config: Layout configuration (uses defaults if None)
        """
        self.config = config or LayoutConfig()
        self._item_count = 0
        self._targets: dict[Arrangement, np.ndarray] = self._compute_all(0)

    @property
    def item_count(self) -> int:
        """Number of items the current target sets were built for."""
        return self._item_count

    def set_item_count(self, n: int) -> None:
        """Recompute every arrangement for a new item count.

        Args:
            n: Number of items

        Raises:
            ValidationError: If n is not a non-negative integer
        """
        n = validate_count(n, "n")
        # Build into a fresh dict so a failure leaves the previous sets intact
        targets = self._compute_all(n)
        self._targets = targets
        self._item_count = n
        logger.debug(
            "Recomputed layouts for %d items: %s",
            n,
            ", ".join(f"{a.value}={len(t)}" for a, t in targets.items()),
        )

    def targets(self, arrangement: Arrangement | str) -> np.ndarray:
        """Get the target positions for an arrangement.

        Args:
            arrangement: Arrangement member or name

        Returns:
            Read-only array of shape (k, 3) with k <= item_count
        """
        return self._targets[Arrangement.parse(arrangement)]

    def capacity(self, arrangement: Arrangement | str) -> int | None:
        """Get the fixed slot count of an arrangement, or None if unbounded."""
        arrangement = Arrangement.parse(arrangement)
        if arrangement is Arrangement.TABLE:
            return self.config.table_capacity
        if arrangement is Arrangement.GRID:
            return self.config.grid_capacity
        return None

    def _compute_all(self, n: int) -> dict[Arrangement, np.ndarray]:
        targets: dict[Arrangement, np.ndarray] = {}
        for arrangement, generator in _GENERATORS.items():
            positions = generator(n, self.config)
            if positions.ndim != 2 or positions.shape[1] != 3 or len(positions) > n:
                raise LayoutError(f"{arrangement.value} produced shape {positions.shape} for {n} items")
            positions.setflags(write=False)
            targets[arrangement] = positions
        return targets
