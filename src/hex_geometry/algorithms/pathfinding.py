"""A* pathfinding over hex coordinates."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable

from hex_geometry.hex import Hex

logger = logging.getLogger(__name__)

CostFn = Callable[[Hex], "float | None"]


def reconstruct_path(came_from: dict[Hex, Hex], end: Hex) -> list[Hex]:
    path = [end]
    current = end
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def a_star(start: Hex, end: Hex, cost: CostFn) -> list[Hex] | None:
    """Searches a path from ``start`` to ``end``, both included.

    ``cost(hex)`` returns the cost of stepping onto ``hex``, or ``None`` when
    the hex cannot be entered. The priority of a neighbor is the priority of
    the hex it is reached from, plus its step cost, plus its distance to
    ``start``. Returns ``None`` when no path exists.

    The search explores until ``end`` is reached or nothing is left to
    explore, so ``cost`` must reject every hex beyond some finite region or
    an unreachable ``end`` never terminates.
    """

    if start == end:
        return [start]

    counter = itertools.count()
    costs: dict[Hex, float] = {start: 0}
    came_from: dict[Hex, Hex] = {}
    open_heap: list[tuple[float, int, Hex]] = [(0, next(counter), start)]
    explored = 0

    while open_heap:
        priority, _, current = heapq.heappop(open_heap)
        if priority > costs[current]:
            continue
        if current == end:
            path = reconstruct_path(came_from, end)
            logger.debug("A* found a path of %d hexes after exploring %d nodes", len(path), explored)
            return path
        explored += 1

        for neighbor in current.all_neighbors():
            step = cost(neighbor)
            if step is None:
                continue
            neighbor_cost = costs[current] + step + neighbor.distance_to(start)
            if neighbor not in costs or costs[neighbor] > neighbor_cost:
                came_from[neighbor] = current
                costs[neighbor] = neighbor_cost
                heapq.heappush(open_heap, (neighbor_cost, next(counter), neighbor))

    logger.debug("A* found no path from %s to %s after exploring %d nodes", start, end, explored)
    return None


__all__ = ["a_star", "reconstruct_path"]
