"""Position and coordinate classes for 3D layout."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Position:
    """3D position of a single item.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate
    """

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, vector: np.ndarray) -> "Position":
        """Create a position from a length-3 array."""
        return cls(x=float(vector[0]), y=float(vector[1]), z=float(vector[2]))

    def __repr__(self) -> str:
        """String representation."""
        return f"Position(x={self.x:.2f}, y={self.y:.2f}, z={self.z:.2f})"
