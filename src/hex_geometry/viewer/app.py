"""Arcade windows showing the coordinate algebra and searches on a live map."""

from __future__ import annotations

import logging

import arcade

from hex_geometry.algorithms import a_star, range_fov
from hex_geometry.bounds import HexBounds
from hex_geometry.config import BLOCKED_CELL_PERIOD, COLOR_CHARCOAL, FPS, RING_STEP_SECONDS, WINDOW_TITLE
from hex_geometry.hex import Hex
from hex_geometry.viewer.cells import (
    CELL_BLOCKED,
    CELL_DEFAULT,
    CELL_HIGHLIGHTED,
    CELL_PATH,
    periodic_blockers,
    viewer_layout,
)
from hex_geometry.viewer.renderer import draw_cells, draw_hover, draw_status_bar, make_status_text
from hex_geometry.viewer.specs import VIEWER_FOV, VIEWER_PATH, VIEWER_RINGS, VIEWER_WRAP, HexViewerSpec

logger = logging.getLogger(__name__)


class HexViewerWindow(arcade.Window):
    """Draws a hexagonal map and tracks the hovered hex."""

    demo_name = "map"

    def __init__(self, spec: HexViewerSpec):
        super().__init__(
            spec.screen_width_px,
            spec.screen_height_px,
            f"{WINDOW_TITLE} - {self.demo_name}",
            update_rate=1.0 / FPS,
        )
        self.spec = spec
        self.layout = viewer_layout(spec)
        self.bounds = HexBounds(Hex.ZERO, spec.map_radius)
        self.coords = list(self.bounds.all_coords())
        self.hovered: Hex | None = None
        self.status = make_status_text()
        logger.info("Opened %s viewer: %d hexes, hex size %.2f", self.demo_name, len(self.coords), self.layout.hex_size[0])

    def cell_state(self, coord: Hex) -> str:
        return CELL_DEFAULT

    def hover_target(self) -> Hex | None:
        if self.hovered is not None and self.hovered in self.bounds:
            return self.hovered
        return None

    def status_line(self) -> str:
        target = self.hover_target()
        if target is None:
            return f"radius {self.spec.map_radius}"
        return f"hex ({target.x}, {target.y})"

    def on_hover_changed(self, coord: Hex):
        pass

    def on_draw(self):
        self.clear(COLOR_CHARCOAL)
        draw_cells(self.layout, ((coord, self.cell_state(coord)) for coord in self.coords))
        target = self.hover_target()
        if target is not None:
            draw_hover(self.layout, target)
        draw_status_bar(self.status, self.status_line(), self.spec)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        coord = self.layout.world_pos_to_hex((x, y))
        if coord != self.hovered:
            self.hovered = coord
            self.on_hover_changed(coord)


class FieldOfViewWindow(HexViewerWindow):
    """Highlights what the hovered hex can see; left click toggles blockers."""

    demo_name = "field of view"

    def __init__(self, spec: HexViewerSpec = VIEWER_FOV):
        super().__init__(spec)
        self.blocked = periodic_blockers(self.bounds, BLOCKED_CELL_PERIOD)
        self.visible: set[Hex] = set()

    def _is_blocking(self, coord: Hex) -> bool:
        return coord in self.blocked or coord not in self.bounds

    def _refresh(self):
        target = self.hover_target()
        if target is None:
            self.visible = set()
            return
        self.visible = range_fov(target, 2 * self.spec.map_radius, self._is_blocking)

    def cell_state(self, coord: Hex) -> str:
        if coord in self.blocked:
            return CELL_BLOCKED
        if coord in self.visible:
            return CELL_HIGHLIGHTED
        return CELL_DEFAULT

    def status_line(self) -> str:
        return f"{super().status_line()}   /   visible {len(self.visible)}"

    def on_hover_changed(self, coord: Hex):
        self._refresh()

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button != arcade.MOUSE_BUTTON_LEFT:
            return
        coord = self.layout.world_pos_to_hex((x, y))
        if coord not in self.bounds:
            return
        if coord in self.blocked:
            self.blocked.discard(coord)
        else:
            self.blocked.add(coord)
        self._refresh()


class WrapMapWindow(HexViewerWindow):
    """Wraps the hovered position back into the map, as on a torus."""

    demo_name = "wrap map"

    def __init__(self, spec: HexViewerSpec = VIEWER_WRAP):
        super().__init__(spec)
        self.wrapped: Hex | None = None

    def hover_target(self) -> Hex | None:
        return self.wrapped

    def cell_state(self, coord: Hex) -> str:
        return CELL_HIGHLIGHTED if coord == self.wrapped else CELL_DEFAULT

    def status_line(self) -> str:
        if self.hovered is None or self.wrapped is None:
            return f"radius {self.spec.map_radius}"
        return f"hex ({self.hovered.x}, {self.hovered.y})   ->   ({self.wrapped.x}, {self.wrapped.y})"

    def on_hover_changed(self, coord: Hex):
        self.wrapped = self.bounds.wrap(coord)


class RingsWindow(HexViewerWindow):
    """Highlights the rings of the map outward, one per tick."""

    demo_name = "rings"

    def __init__(self, spec: HexViewerSpec = VIEWER_RINGS):
        super().__init__(spec)
        self.ring_radius = 0
        self.ring: set[Hex] = {Hex.ZERO}
        self.elapsed = 0.0

    def cell_state(self, coord: Hex) -> str:
        return CELL_HIGHLIGHTED if coord in self.ring else CELL_DEFAULT

    def status_line(self) -> str:
        return f"ring {self.ring_radius}   /   {len(self.ring)} hexes"

    def on_update(self, delta_time: float):
        self.elapsed += delta_time
        while self.elapsed >= RING_STEP_SECONDS:
            self.elapsed -= RING_STEP_SECONDS
            self.ring_radius = (self.ring_radius + 1) % (self.spec.map_radius + 1)
            self.ring = set(Hex.ZERO.ring(self.ring_radius))


class PathfindingWindow(HexViewerWindow):
    """Shows the A* path from the map center to the hovered hex."""

    demo_name = "pathfinding"

    def __init__(self, spec: HexViewerSpec = VIEWER_PATH):
        super().__init__(spec)
        self.blocked = periodic_blockers(self.bounds, BLOCKED_CELL_PERIOD)
        self.blocked.discard(Hex.ZERO)
        self.path: list[Hex] = []

    def _cost(self, coord: Hex) -> float | None:
        if coord in self.blocked or coord not in self.bounds:
            return None
        return 1

    def cell_state(self, coord: Hex) -> str:
        if coord in self.blocked:
            return CELL_BLOCKED
        if coord in self.path:
            return CELL_PATH
        return CELL_DEFAULT

    def status_line(self) -> str:
        target = self.hover_target()
        if target is None:
            return f"radius {self.spec.map_radius}"
        if not self.path:
            return f"hex ({target.x}, {target.y})   /   no path"
        return f"hex ({target.x}, {target.y})   /   {len(self.path) - 1} steps"

    def on_hover_changed(self, coord: Hex):
        target = self.hover_target()
        if target is None or target in self.blocked:
            self.path = []
            return
        self.path = a_star(Hex.ZERO, target, self._cost) or []


DEMOS: dict[str, type[HexViewerWindow]] = {
    "fov": FieldOfViewWindow,
    "wrap": WrapMapWindow,
    "rings": RingsWindow,
    "path": PathfindingWindow,
}


def run_viewer(demo: str = "fov"):
    try:
        window_class = DEMOS[demo]
    except KeyError as exc:
        raise ValueError(f"unknown demo {demo!r}, expected one of {sorted(DEMOS)}") from exc
    window_class()
    arcade.run()


__all__ = [
    "HexViewerWindow",
    "FieldOfViewWindow",
    "WrapMapWindow",
    "RingsWindow",
    "PathfindingWindow",
    "DEMOS",
    "run_viewer",
]
