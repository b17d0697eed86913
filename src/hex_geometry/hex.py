"""Axial hexagonal coordinates and their algebra.

A :class:`Hex` stores the axial ``x`` and ``y`` components; the cube ``z``
component is derived (``x + y + z == 0``) and only materialized for distance,
rounding, rotation and reflection math.

Coordinates are Python ints and never overflow. Hosts that store them in
fixed-width integers must keep maps within the range of that storage.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from hex_geometry.config import LINE_NUDGE
from hex_geometry.direction import (
    DIAGONAL_OFFSETS,
    DIRECTION_ANGLE_OFFSET,
    DIRECTION_ANGLE_RAD,
    DIRECTION_OFFSETS,
    DiagonalDirection,
    Direction,
)

_SQRT_3_HALF = math.sqrt(3.0) / 2.0
_NEIGHBOR_DIRECTIONS = {offset: Direction.from_index(i) for i, offset in enumerate(DIRECTION_OFFSETS)}


class OffsetHexMode(Enum):
    """Offset coordinate layouts, named after the shoved columns or rows."""

    EVEN_COLUMNS = "even_columns"
    ODD_COLUMNS = "odd_columns"
    EVEN_ROWS = "even_rows"
    ODD_ROWS = "odd_rows"


class DoubledHexMode(Enum):
    """Doubled coordinate layouts."""

    DOUBLED_WIDTH = "doubled_width"
    DOUBLED_HEIGHT = "doubled_height"


def _round_half_away(value: float) -> float:
    if value >= 0.0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _check_radius(radius: int) -> int:
    radius = int(radius)
    if radius < 0:
        raise ValueError(f"radius cannot be negative, got {radius}")
    return radius


@dataclass(frozen=True)
class Hex:
    """Immutable axial hexagonal coordinate."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Hex]
    ONE: ClassVar[Hex]

    # Constructors and conversions

    @classmethod
    def from_cube(cls, x: int, y: int, z: int) -> Hex:
        if x + y + z != 0:
            raise ValueError(f"cube coordinates must sum to zero, got ({x}, {y}, {z})")
        return cls(x, y)

    @classmethod
    def round(cls, coords: Sequence[float]) -> Hex:
        """Rounds fractional axial ``(x, y)`` or cube ``(x, y, z)`` coordinates to the nearest hex.

        Every axis is rounded on its own, then the axis with the largest
        rounding error is recomputed from the two others to restore
        ``x + y + z == 0``.
        """

        if len(coords) == 2:
            fx, fy = coords
            fz = -fx - fy
        elif len(coords) == 3:
            fx, fy, fz = coords
        else:
            raise ValueError(f"expected 2 or 3 coordinates, got {len(coords)}")

        rx = _round_half_away(fx)
        ry = _round_half_away(fy)
        rz = _round_half_away(fz)
        dx = abs(rx - fx)
        dy = abs(ry - fy)
        dz = abs(rz - fz)

        if dx > dy and dx > dz:
            rx = -ry - rz
        elif dy > dz:
            ry = -rx - rz
        return cls(int(rx), int(ry))

    @property
    def z(self) -> int:
        return -self.x - self.y

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_cube(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def to_fractional_cube(self) -> tuple[float, float, float]:
        return (float(self.x), float(self.y), float(self.z))

    def as_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> Hex:
        return cls(int(data["x"]), int(data["y"]))

    def to_offset_coordinates(self, mode: OffsetHexMode) -> tuple[int, int]:
        """Converts to ``(column, row)`` offset coordinates."""

        x, y = self.x, self.y
        if mode is OffsetHexMode.ODD_COLUMNS:
            return x, y + (x - (x & 1)) // 2
        if mode is OffsetHexMode.EVEN_COLUMNS:
            return x, y + (x + (x & 1)) // 2
        if mode is OffsetHexMode.ODD_ROWS:
            return x + (y - (y & 1)) // 2, y
        return x + (y + (y & 1)) // 2, y

    @classmethod
    def from_offset_coordinates(cls, coords: tuple[int, int], mode: OffsetHexMode) -> Hex:
        col, row = coords
        if mode is OffsetHexMode.ODD_COLUMNS:
            return cls(col, row - (col - (col & 1)) // 2)
        if mode is OffsetHexMode.EVEN_COLUMNS:
            return cls(col, row - (col + (col & 1)) // 2)
        if mode is OffsetHexMode.ODD_ROWS:
            return cls(col - (row - (row & 1)) // 2, row)
        return cls(col - (row + (row & 1)) // 2, row)

    def to_doubled_coordinates(self, mode: DoubledHexMode) -> tuple[int, int]:
        if mode is DoubledHexMode.DOUBLED_WIDTH:
            return 2 * self.x + self.y, self.y
        return self.x, 2 * self.y + self.x

    @classmethod
    def from_doubled_coordinates(cls, coords: tuple[int, int], mode: DoubledHexMode) -> Hex:
        col, row = coords
        if mode is DoubledHexMode.DOUBLED_WIDTH:
            return cls((col - row) // 2, row)
        return cls(col, (row - col) // 2)

    # Arithmetic

    def __add__(self, other: Hex) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Hex) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Hex:
        if not isinstance(factor, int):
            return NotImplemented
        return Hex(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Hex:
        return Hex(-self.x, -self.y)

    # Distances

    def length(self) -> int:
        """Distance to :attr:`Hex.ZERO`."""

        return max(abs(self.x), abs(self.y), abs(self.z))

    def distance_to(self, other: Hex) -> int:
        return (self - other).length()

    def lerp(self, other: Hex, s: float) -> tuple[float, float]:
        """Fractional axial coordinates between ``self`` and ``other``."""

        return (
            self.x + (other.x - self.x) * s,
            self.y + (other.y - self.y) * s,
        )

    # Neighbors

    def neighbor(self, direction: Direction) -> Hex:
        dx, dy = direction.offset
        return Hex(self.x + dx, self.y + dy)

    def diagonal_neighbor(self, direction: DiagonalDirection) -> Hex:
        dx, dy = direction.offset
        return Hex(self.x + dx, self.y + dy)

    def all_neighbors(self) -> list[Hex]:
        """The 6 edge neighbors, in :class:`Direction` order."""

        return [Hex(self.x + dx, self.y + dy) for dx, dy in DIRECTION_OFFSETS]

    def all_diagonals(self) -> list[Hex]:
        """The 6 vertex neighbors, in :class:`DiagonalDirection` order."""

        return [Hex(self.x + dx, self.y + dy) for dx, dy in DIAGONAL_OFFSETS]

    def is_neighbor(self, other: Hex) -> bool:
        return self.distance_to(other) == 1

    def neighbor_direction(self, other: Hex) -> Direction | None:
        """Direction leading to ``other`` if it is an edge neighbor, ``None`` otherwise."""

        return _NEIGHBOR_DIRECTIONS.get((other.x - self.x, other.y - self.y))

    def _flat_angle_to(self, other: Hex) -> float:
        # Flat orientation with the default layout axes (hex y pointing down)
        dx = other.x - self.x
        dy = other.y - self.y
        return math.atan2(-(_SQRT_3_HALF * dx + 2.0 * _SQRT_3_HALF * dy), 1.5 * dx)

    def main_direction_to(self, other: Hex) -> Direction:
        """Direction whose angle is the closest to the ``self -> other`` vector."""

        angle = self._flat_angle_to(other) - DIRECTION_ANGLE_OFFSET
        return Direction.from_index(int(math.floor(angle / DIRECTION_ANGLE_RAD + 0.5)))

    def main_diagonal_to(self, other: Hex) -> DiagonalDirection:
        angle = self._flat_angle_to(other)
        return DiagonalDirection.from_index(int(math.floor(angle / DIRECTION_ANGLE_RAD + 0.5)))

    # Rotations and reflections

    def rotate_cw(self, offset: int) -> Hex:
        """Rotates around :attr:`Hex.ZERO` by ``offset * 60`` degrees clockwise."""

        x, y, z = self.to_cube()
        step = offset % 6
        if step == 1:
            return Hex(-y, -z)
        if step == 2:
            return Hex(z, x)
        if step == 3:
            return Hex(-x, -y)
        if step == 4:
            return Hex(y, z)
        if step == 5:
            return Hex(-z, -x)
        return self

    def rotate_ccw(self, offset: int) -> Hex:
        """Rotates around :attr:`Hex.ZERO` by ``offset * 60`` degrees counter clockwise."""

        return self.rotate_cw(-offset)

    def rotate_cw_around(self, center: Hex, offset: int) -> Hex:
        return (self - center).rotate_cw(offset) + center

    def rotate_ccw_around(self, center: Hex, offset: int) -> Hex:
        return (self - center).rotate_ccw(offset) + center

    def reflect_x(self) -> Hex:
        """Reflects across the cube ``x`` axis (``y`` and ``z`` swap)."""

        return Hex(self.x, self.z)

    def reflect_y(self) -> Hex:
        return Hex(self.z, self.y)

    def reflect_z(self) -> Hex:
        return Hex(self.y, self.x)

    # Enumeration

    def custom_ring(self, radius: int, start: Direction, clockwise: bool) -> Iterator[Hex]:
        """Walks the ring at ``radius``, starting at ``self + start * radius``."""

        radius = _check_radius(radius)
        if radius == 0:
            yield self
            return

        step_delta = -1 if clockwise else 1
        first_side = start.value - 2 if clockwise else start.value + 2
        current = self + Hex(*start.offset) * radius
        for side in range(6):
            dx, dy = DIRECTION_OFFSETS[(first_side + step_delta * side) % 6]
            for _ in range(radius):
                yield current
                current = Hex(current.x + dx, current.y + dy)

    def ring(self, radius: int) -> Iterator[Hex]:
        """The ``6 * radius`` hexes at exactly ``radius`` (the center alone for 0).

        The walk starts at ``self + Direction.BOTTOM * radius`` and goes
        clockwise, along the TOP_LEFT, TOP, TOP_RIGHT, BOTTOM_RIGHT, BOTTOM
        and BOTTOM_LEFT sides in turn.
        """

        return self.custom_ring(radius, Direction.BOTTOM, clockwise=True)

    def rings(self, radii: Iterable[int]) -> Iterator[list[Hex]]:
        for radius in radii:
            yield list(self.ring(radius))

    def spiral_range(self, radii: Iterable[int]) -> Iterator[Hex]:
        """Every hex of the given radii, ring after ring.

        Typically called with ``range(0, radius + 1)``; each call returns a
        fresh generator.
        """

        for radius in radii:
            yield from self.ring(radius)

    def range(self, radius: int) -> Iterator[Hex]:
        """Every hex within ``radius``, row by row."""

        radius = _check_radius(radius)
        for dx in range(-radius, radius + 1):
            for dy in range(max(-radius, -dx - radius), min(radius, -dx + radius) + 1):
                yield Hex(self.x + dx, self.y + dy)

    @staticmethod
    def range_count(radius: int) -> int:
        radius = _check_radius(radius)
        return 3 * radius * (radius + 1) + 1

    def line_to(self, other: Hex) -> Iterator[Hex]:
        """The straight line of hexes from ``self`` to ``other``, both included."""

        steps = self.distance_to(other)
        nx, ny, nz = LINE_NUDGE
        ax, ay, az = self.x + nx, self.y + ny, self.z + nz
        bx, by, bz = other.x + nx, other.y + ny, other.z + nz
        divisor = float(max(steps, 1))
        for i in range(steps + 1):
            t = i / divisor
            yield Hex.round((ax + (bx - ax) * t, ay + (by - ay) * t, az + (bz - az) * t))

    # Wrapping

    def wrap_in_range(self, radius: int) -> Hex:
        """Maps ``self`` into the hexagon of ``radius`` around :attr:`Hex.ZERO`.

        The plane is tiled with copies of that hexagon; the result is the
        position of ``self`` relative to the center of its copy.
        """

        radius = _check_radius(radius)
        if self.length() <= radius:
            return self

        # Mirror centers: the lattice spanned by a and its 60 degrees rotation b
        a = Hex(2 * radius + 1, -radius)
        b = a.rotate_ccw(1)
        det = a.x * b.y - a.y * b.x
        i0 = (self.x * b.y - self.y * b.x) // det
        j0 = (a.x * self.y - a.y * self.x) // det
        for i in range(i0 - 1, i0 + 3):
            for j in range(j0 - 1, j0 + 3):
                candidate = self - a * i - b * j
                if candidate.length() <= radius:
                    return candidate
        raise ArithmeticError(f"no mirror center found for {self} in radius {radius}")


Hex.ZERO = Hex(0, 0)
Hex.ONE = Hex(1, 1)


def distance(a: Hex, b: Hex) -> int:
    """Hex distance: the length of the shortest edge-adjacent path."""

    return a.distance_to(b)


__all__ = [
    "Hex",
    "OffsetHexMode",
    "DoubledHexMode",
    "distance",
]
