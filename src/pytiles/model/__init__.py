"""Model layer for pytiles.

This module contains the item store holding the live position of every
tile in the scene.
"""

from pytiles.model.items import ItemStore

__all__ = ["ItemStore"]
