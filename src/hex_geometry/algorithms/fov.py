"""Field of view: line of sight from a hex up to a range."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from hex_geometry.direction import DiagonalDirection
from hex_geometry.hex import Hex

logger = logging.getLogger(__name__)


def _visible_along(coord: Hex, targets: Iterable[Hex], blocking: Callable[[Hex], bool]) -> set[Hex]:
    visible: set[Hex] = set()
    for target in targets:
        for h in coord.line_to(target):
            if blocking(h):
                break
            visible.add(h)
    return visible


def range_fov(coord: Hex, radius: int, blocking: Callable[[Hex], bool]) -> set[Hex]:
    """Every hex within ``radius`` visible from ``coord``.

    A line is traced to each hex of the outer ring and stops before the first
    blocking hex, so blocking hexes are never part of the result.
    """

    visible = _visible_along(coord, coord.ring(radius), blocking)
    logger.debug("Range FOV from %s (radius %d): %d visible hexes", coord, radius, len(visible))
    return visible


def directional_fov(
    coord: Hex,
    radius: int,
    direction: DiagonalDirection,
    blocking: Callable[[Hex], bool],
) -> set[Hex]:
    """Like :func:`range_fov`, restricted to the 120 degrees cone centered on ``direction``."""

    if radius == 0:
        return _visible_along(coord, (coord,), blocking)
    cone = (direction.direction_cw(), direction.direction_ccw())
    targets = [h for h in coord.ring(radius) if coord.main_direction_to(h) in cone]
    visible = _visible_along(coord, targets, blocking)
    logger.debug(
        "Directional FOV from %s towards %s (radius %d): %d visible hexes",
        coord,
        direction.name,
        radius,
        len(visible),
    )
    return visible


__all__ = ["range_fov", "directional_fov"]
