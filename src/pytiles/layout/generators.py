"""Geometry generators for the four tile arrangements.

Each generator maps an item count to an ordered ``(k, 3)`` array of
target positions, where ``k <= n``. Generators are pure: the same count
and config always give bit-identical output. Table and Grid have a fixed
capacity and produce no slot for indices beyond it.
"""

import math
from dataclasses import dataclass

import numpy as np

from pytiles.errors import validate_count


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for the arrangement generators.

    Attributes:
        table_cols: Number of columns in the table
        table_rows: Number of rows in the table
        table_spacing_x: Horizontal distance between table columns
        table_spacing_y: Vertical distance between table rows
        sphere_radius: Radius of the sphere arrangement
        helix_radius: Base radius of the double helix
        helix_separation: Radial offset of each strand from the base radius
        helix_spacing_y: Vertical drop per item along the helix
        helix_angle_step: Angle increment per item in radians
        grid_x: Grid extent along X
        grid_y: Grid extent along Y
        grid_z: Grid extent along Z
        grid_spacing: Distance between neighbouring grid cells
    """

    table_cols: int = 20
    table_rows: int = 10
    table_spacing_x: float = 200.0
    table_spacing_y: float = 220.0
    sphere_radius: float = 1200.0
    helix_radius: float = 700.0
    helix_separation: float = 120.0
    helix_spacing_y: float = 14.0
    helix_angle_step: float = 0.35
    grid_x: int = 5
    grid_y: int = 4
    grid_z: int = 10
    grid_spacing: float = 350.0

    @property
    def table_capacity(self) -> int:
        """Number of slots in the table."""
        return self.table_cols * self.table_rows

    @property
    def grid_capacity(self) -> int:
        """Number of cells in the grid."""
        return self.grid_x * self.grid_y * self.grid_z


DEFAULT_CONFIG = LayoutConfig()


def _empty() -> np.ndarray:
    return np.zeros((0, 3), dtype=np.float64)


def table_positions(n: int, config: LayoutConfig = DEFAULT_CONFIG) -> np.ndarray:
    """Compute table slots, filled row by row from the top left.

    With the default 20 x 10 table, index 0 lands at (-1900, 990, 0) and
    index 199 at (1900, -990, 0).

    Args:
        n: Number of items
        config: Generator configuration

    Returns:
        Array of shape (min(n, capacity), 3)
    """
    n = validate_count(n, "n")
    k = min(n, config.table_capacity)
    if k == 0:
        return _empty()

    i = np.arange(k)
    col = i % config.table_cols
    row = i // config.table_cols

    # Centre the table on the origin
    half_cols = (config.table_cols - 1) / 2
    half_rows = (config.table_rows - 1) / 2

    positions = np.zeros((k, 3), dtype=np.float64)
    positions[:, 0] = (col - half_cols) * config.table_spacing_x
    positions[:, 1] = (half_rows - row) * config.table_spacing_y
    return positions


def sphere_positions(n: int, config: LayoutConfig = DEFAULT_CONFIG) -> np.ndarray:
    """Distribute items evenly over a sphere using a golden-section spiral.

    Args:
        n: Number of items
        config: Generator configuration

    Returns:
        Array of shape (n, 3), every row at distance ``sphere_radius``
        from the origin
    """
    n = validate_count(n, "n")
    if n == 0:
        return _empty()

    i = np.arange(n, dtype=np.float64)
    phi = np.arccos(-1.0 + (2.0 * i) / n)
    theta = math.sqrt(n * math.pi) * phi
    r = config.sphere_radius

    positions = np.empty((n, 3), dtype=np.float64)
    positions[:, 0] = r * np.cos(theta) * np.sin(phi)
    positions[:, 1] = r * np.sin(theta) * np.sin(phi)
    positions[:, 2] = r * np.cos(phi)
    return positions


def helix_positions(n: int, config: LayoutConfig = DEFAULT_CONFIG) -> np.ndarray:
    """Wind items around a double helix centred vertically on the origin.

    Even indices sit on the outer strand, odd indices on the inner one.

    Args:
        n: Number of items
        config: Generator configuration

    Returns:
        Array of shape (n, 3)
    """
    n = validate_count(n, "n")
    if n == 0:
        return _empty()

    i = np.arange(n)
    theta = i * config.helix_angle_step
    arm = np.where(i % 2 == 0, 1.0, -1.0)
    radius = config.helix_radius + arm * config.helix_separation

    positions = np.empty((n, 3), dtype=np.float64)
    positions[:, 0] = np.sin(theta) * radius
    positions[:, 1] = -i * config.helix_spacing_y + (n * config.helix_spacing_y) / 2
    positions[:, 2] = np.cos(theta) * radius
    return positions


def grid_positions(n: int, config: LayoutConfig = DEFAULT_CONFIG) -> np.ndarray:
    """Fill a 3D lattice, z varying fastest, then y, then x.

    Args:
        n: Number of items
        config: Generator configuration

    Returns:
        Array of shape (min(n, capacity), 3)
    """
    n = validate_count(n, "n")
    k = min(n, config.grid_capacity)
    if k == 0:
        return _empty()

    i = np.arange(k)
    plane = config.grid_y * config.grid_z
    x = i // plane
    y = (i // config.grid_z) % config.grid_y
    z = i % config.grid_z

    positions = np.empty((k, 3), dtype=np.float64)
    positions[:, 0] = (x - (config.grid_x - 1) / 2) * config.grid_spacing
    positions[:, 1] = (y - (config.grid_y - 1) / 2) * config.grid_spacing
    positions[:, 2] = (z - (config.grid_z - 1) / 2) * config.grid_spacing
    return positions
