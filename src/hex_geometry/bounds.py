"""Hexagonal map bounds."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from hex_geometry.hex import Hex


@dataclass(frozen=True)
class HexBounds:
    """A finite hexagonal region: every hex within ``radius`` of ``center``."""

    center: Hex
    radius: int

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"bounds radius cannot be negative, got {self.radius}")

    @classmethod
    def from_min_max(cls, min_hex: Hex, max_hex: Hex) -> HexBounds:
        """Smallest bounds centered between ``min_hex`` and ``max_hex`` covering both."""

        center = Hex.round(((min_hex.x + max_hex.x) / 2.0, (min_hex.y + max_hex.y) / 2.0))
        radius = max(center.distance_to(min_hex), center.distance_to(max_hex))
        return cls(center, radius)

    @classmethod
    def from_coords(cls, coords: Iterable[Hex]) -> HexBounds:
        """Bounds covering every coordinate of ``coords``."""

        coords = list(coords)
        if not coords:
            raise ValueError("cannot compute bounds of an empty coordinate set")

        min_x = min(h.x for h in coords)
        max_x = max(h.x for h in coords)
        min_y = min(h.y for h in coords)
        max_y = max(h.y for h in coords)
        center = Hex.round(((min_x + max_x) / 2.0, (min_y + max_y) / 2.0))
        radius = max(center.distance_to(h) for h in coords)
        return cls(center, radius)

    def is_in_bounds(self, coord: Hex) -> bool:
        return coord.distance_to(self.center) <= self.radius

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, Hex) and self.is_in_bounds(coord)

    def hex_count(self) -> int:
        return Hex.range_count(self.radius)

    def all_coords(self) -> Iterator[Hex]:
        """Every coordinate in bounds, in spiral order from the center."""

        return self.center.spiral_range(range(0, self.radius + 1))

    def intersects(self, other: HexBounds) -> bool:
        return self.center.distance_to(other.center) <= self.radius + other.radius

    def wrap(self, coord: Hex) -> Hex:
        """Wraps ``coord`` back into the bounds as if the map were toroidal.

        Coordinates already in bounds are returned unchanged.
        """

        return (coord - self.center).wrap_in_range(self.radius) + self.center


__all__ = ["HexBounds"]
