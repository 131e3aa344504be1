"""Layout engine for 3D tile arrangements.

This module contains the geometry generators for the Table, Sphere,
Helix and Grid arrangements and the engine that caches them.
"""

from pytiles.layout.engine import Arrangement, LayoutEngine
from pytiles.layout.generators import (
    LayoutConfig,
    grid_positions,
    helix_positions,
    sphere_positions,
    table_positions,
)
from pytiles.layout.position import Position

__all__ = [
    "Arrangement",
    "LayoutConfig",
    "LayoutEngine",
    "Position",
    "grid_positions",
    "helix_positions",
    "sphere_positions",
    "table_positions",
]
