"""Edge and vertex directions of a hexagon.

Both enumerations share the same index order, growing counter clockwise::

               x Axis
               ___
              /   \\
          +--+  1  +--+
         / 2  \\___/  0 \\
         \\    /   \\    /
          +--+     +--+
         /    \\___/    \\
         \\ 3  /   \\  5 /
          +--+  4  +--+   y Axis
              \\___/

Diagonal ``i`` points at the corner shared by directions ``i - 1`` and ``i``.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from hex_geometry.layout import HexOrientation

# Angle between *flat* and *pointy* orientations, and between a direction and its diagonals
DIRECTION_ANGLE_OFFSET: Final[float] = math.pi / 6.0
DIRECTION_ANGLE_OFFSET_DEGREES: Final[float] = 30.0
# Angle between two adjacent directions
DIRECTION_ANGLE_RAD: Final[float] = math.pi / 3.0
DIRECTION_ANGLE_DEGREES: Final[float] = 60.0

DIRECTION_OFFSETS: Final[tuple[tuple[int, int], ...]] = (
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 0),
)

DIAGONAL_OFFSETS: Final[tuple[tuple[int, int], ...]] = (
    (2, -1),
    (1, -2),
    (-1, -1),
    (-2, 1),
    (-1, 2),
    (1, 1),
)

_FLAT_ANGLES_DEGREES: Final[tuple[float, ...]] = tuple(
    DIRECTION_ANGLE_OFFSET_DEGREES + DIRECTION_ANGLE_DEGREES * i for i in range(6)
)
_FLAT_ANGLES: Final[tuple[float, ...]] = tuple(
    DIRECTION_ANGLE_OFFSET + DIRECTION_ANGLE_RAD * i for i in range(6)
)


class Direction(Enum):
    """One of the 6 edge-adjacent neighbor directions."""

    TOP_RIGHT = 0
    TOP = 1
    TOP_LEFT = 2
    BOTTOM_LEFT = 3
    BOTTOM = 4
    BOTTOM_RIGHT = 5

    @property
    def index(self) -> int:
        return self.value

    @property
    def offset(self) -> tuple[int, int]:
        """Axial unit offset of the neighbor in this direction."""

        return DIRECTION_OFFSETS[self.value]

    @classmethod
    def from_index(cls, index: int) -> Direction:
        return _DIRECTIONS[index % 6]

    def clockwise(self) -> Direction:
        return _DIRECTIONS[(self.value - 1) % 6]

    def counter_clockwise(self) -> Direction:
        return _DIRECTIONS[(self.value + 1) % 6]

    def rotate_cw(self, offset: int) -> Direction:
        return _DIRECTIONS[(self.value - offset) % 6]

    def rotate_ccw(self, offset: int) -> Direction:
        return _DIRECTIONS[(self.value + offset) % 6]

    def opposite(self) -> Direction:
        return _DIRECTIONS[(self.value + 3) % 6]

    def diagonal_cw(self) -> DiagonalDirection:
        """The diagonal direction right after this one, clockwise."""

        return _DIAGONALS[self.value]

    def diagonal_ccw(self) -> DiagonalDirection:
        """The diagonal direction right after this one, counter clockwise."""

        return _DIAGONALS[(self.value + 1) % 6]

    def angle_flat(self) -> float:
        """Angle in radians of this direction for *flat* hexagons.

        Angles are the true world angles of the neighbour centers under the
        default layout axes: ``30 + 60 * i`` degrees flat and ``60 + 60 * i``
        pointy, so TOP_RIGHT sits at 30 and 60 degrees. Tables that put the
        pointy TOP_RIGHT at 0 degrees are 60 degrees behind these values.
        """

        return _FLAT_ANGLES[self.value]

    def angle_pointy(self) -> float:
        """Angle in radians of this direction for *pointy* hexagons."""

        return _FLAT_ANGLES[self.value] + DIRECTION_ANGLE_OFFSET

    def angle_flat_degrees(self) -> float:
        return _FLAT_ANGLES_DEGREES[self.value]

    def angle_pointy_degrees(self) -> float:
        return _FLAT_ANGLES_DEGREES[self.value] + DIRECTION_ANGLE_OFFSET_DEGREES

    def angle(self, orientation: HexOrientation) -> float:
        """Angle in radians of this direction in the given ``orientation``."""

        return self.angle_flat() + orientation.angle_offset


class DiagonalDirection(Enum):
    """One of the 6 vertex-adjacent neighbor directions."""

    RIGHT = 0
    TOP_RIGHT = 1
    TOP_LEFT = 2
    LEFT = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5

    @property
    def index(self) -> int:
        return self.value

    @property
    def offset(self) -> tuple[int, int]:
        return DIAGONAL_OFFSETS[self.value]

    @classmethod
    def from_index(cls, index: int) -> DiagonalDirection:
        return _DIAGONALS[index % 6]

    def clockwise(self) -> DiagonalDirection:
        return _DIAGONALS[(self.value - 1) % 6]

    def counter_clockwise(self) -> DiagonalDirection:
        return _DIAGONALS[(self.value + 1) % 6]

    def rotate_cw(self, offset: int) -> DiagonalDirection:
        return _DIAGONALS[(self.value - offset) % 6]

    def rotate_ccw(self, offset: int) -> DiagonalDirection:
        return _DIAGONALS[(self.value + offset) % 6]

    def opposite(self) -> DiagonalDirection:
        return _DIAGONALS[(self.value + 3) % 6]

    def direction_cw(self) -> Direction:
        """The edge direction right after this diagonal, clockwise."""

        return _DIRECTIONS[(self.value - 1) % 6]

    def direction_ccw(self) -> Direction:
        """The edge direction right after this diagonal, counter clockwise."""

        return _DIRECTIONS[self.value]

    def angle_flat(self) -> float:
        return _FLAT_ANGLES[self.value] - DIRECTION_ANGLE_OFFSET

    def angle_pointy(self) -> float:
        return _FLAT_ANGLES[self.value]

    def angle_flat_degrees(self) -> float:
        return _FLAT_ANGLES_DEGREES[self.value] - DIRECTION_ANGLE_OFFSET_DEGREES

    def angle_pointy_degrees(self) -> float:
        return _FLAT_ANGLES_DEGREES[self.value]

    def angle(self, orientation: HexOrientation) -> float:
        return self.angle_flat() + orientation.angle_offset


_DIRECTIONS: Final[tuple[Direction, ...]] = tuple(Direction)
_DIAGONALS: Final[tuple[DiagonalDirection, ...]] = tuple(DiagonalDirection)

ALL_DIRECTIONS: Final[tuple[Direction, ...]] = _DIRECTIONS
ALL_DIAGONALS: Final[tuple[DiagonalDirection, ...]] = _DIAGONALS

__all__ = [
    "DIRECTION_ANGLE_OFFSET",
    "DIRECTION_ANGLE_OFFSET_DEGREES",
    "DIRECTION_ANGLE_RAD",
    "DIRECTION_ANGLE_DEGREES",
    "DIRECTION_OFFSETS",
    "DIAGONAL_OFFSETS",
    "ALL_DIRECTIONS",
    "ALL_DIAGONALS",
    "Direction",
    "DiagonalDirection",
]
