"""Hexagonal grid geometry: coordinates, layouts, meshes and searches."""

from .bounds import HexBounds
from .direction import ALL_DIAGONALS, ALL_DIRECTIONS, DiagonalDirection, Direction
from .hex import DoubledHexMode, Hex, OffsetHexMode, distance
from .layout import HexLayout, HexOrientation

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Hex",
    "OffsetHexMode",
    "DoubledHexMode",
    "distance",
    "Direction",
    "DiagonalDirection",
    "ALL_DIRECTIONS",
    "ALL_DIAGONALS",
    "HexBounds",
    "HexLayout",
    "HexOrientation",
]
