"""Region shapes: generators of the hexes filling common map outlines."""

from __future__ import annotations

from collections.abc import Iterator

from hex_geometry.hex import Hex


def hexagon(center: Hex, radius: int) -> Iterator[Hex]:
    """Hexagonal map of ``radius`` around ``center``, row by row."""

    return center.range(radius)


def parallelogram(min_hex: Hex, max_hex: Hex) -> Iterator[Hex]:
    """Every hex with ``min <= x <= max`` and ``min <= y <= max`` component-wise."""

    for x in range(min_hex.x, max_hex.x + 1):
        for y in range(min_hex.y, max_hex.y + 1):
            yield Hex(x, y)


def triangle(size: int) -> Iterator[Hex]:
    """Triangle with its right angle corner on :attr:`Hex.ZERO` and ``size + 1`` hexes per side."""

    if size < 0:
        raise ValueError(f"triangle size cannot be negative, got {size}")
    for x in range(0, size + 1):
        for y in range(0, size - x + 1):
            yield Hex(x, y)


def flat_rectangle(left: int, right: int, top: int, bottom: int) -> Iterator[Hex]:
    """Rectangle of flat topped hexes, bounds given in offset columns and rows."""

    for x in range(left, right + 1):
        x_offset = x >> 1
        for y in range(top - x_offset, bottom - x_offset + 1):
            yield Hex(x, y)


def pointy_rectangle(left: int, right: int, top: int, bottom: int) -> Iterator[Hex]:
    """Rectangle of pointy topped hexes, bounds given in offset columns and rows."""

    for y in range(top, bottom + 1):
        y_offset = y >> 1
        for x in range(left - y_offset, right - y_offset + 1):
            yield Hex(x, y)


__all__ = [
    "hexagon",
    "parallelogram",
    "triangle",
    "flat_rectangle",
    "pointy_rectangle",
]
