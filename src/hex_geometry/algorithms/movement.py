"""Field of movement: every hex reachable within a cost budget."""

from __future__ import annotations

import heapq
import itertools
import logging

from hex_geometry.algorithms.pathfinding import CostFn
from hex_geometry.hex import Hex

logger = logging.getLogger(__name__)


def field_of_movement(coord: Hex, budget: float, cost: CostFn) -> set[Hex]:
    """Hexes reachable from ``coord`` with a total step cost of at most ``budget``.

    ``cost`` follows the :func:`~hex_geometry.algorithms.a_star` contract:
    the cost of stepping onto a hex, or ``None`` when it cannot be entered.
    ``coord`` itself is always reachable.
    """

    counter = itertools.count()
    best: dict[Hex, float] = {coord: 0}
    open_heap: list[tuple[float, int, Hex]] = [(0, next(counter), coord)]

    while open_heap:
        spent, _, current = heapq.heappop(open_heap)
        if spent > best[current]:
            continue
        for neighbor in current.all_neighbors():
            step = cost(neighbor)
            if step is None:
                continue
            total = spent + step
            if total > budget:
                continue
            if neighbor not in best or best[neighbor] > total:
                best[neighbor] = total
                heapq.heappush(open_heap, (total, next(counter), neighbor))

    logger.debug("Field of movement from %s (budget %s): %d hexes", coord, budget, len(best))
    return set(best)


__all__ = ["field_of_movement"]
