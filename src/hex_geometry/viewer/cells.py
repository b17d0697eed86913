"""Display-independent cell geometry and colour selection for the viewer."""

from __future__ import annotations

from hex_geometry.bounds import HexBounds
from hex_geometry.config import COLOR_AQUA, COLOR_CORAL, COLOR_NEAR_BLACK, COLOR_SLATE_GRAY
from hex_geometry.hex import Hex
from hex_geometry.layout import HexLayout, Vec2, compute_best_fit_layout
from hex_geometry.viewer.specs import HEX_RENDER_STANDARD, HexRenderSpec, HexViewerSpec

Color = tuple[int, int, int]

CELL_DEFAULT = "default"
CELL_BLOCKED = "blocked"
CELL_HIGHLIGHTED = "highlighted"
CELL_PATH = "path"


def viewer_layout(spec: HexViewerSpec) -> HexLayout:
    """Best fitting layout for ``spec``, centered above the status bar."""

    layout = compute_best_fit_layout(
        spec.map_radius,
        spec.screen_width_px,
        spec.screen_height_px - spec.status_bar_height_px,
        orientation=spec.orientation,
        margin_px=spec.margin_px,
    )
    origin_x, origin_y = layout.origin
    return HexLayout(
        orientation=layout.orientation,
        origin=(origin_x, origin_y + spec.status_bar_height_px),
        hex_size=layout.hex_size,
    )


def cell_polygon(layout: HexLayout, coord: Hex) -> list[Vec2]:
    return layout.hex_corners(coord)


def scaled_polygon(points: list[Vec2], center: Vec2, scale: float) -> list[Vec2]:
    cx, cy = center
    return [(cx + (px - cx) * scale, cy + (py - cy) * scale) for px, py in points]


def cell_fill_color(state: str) -> Color:
    if state == CELL_BLOCKED:
        return COLOR_NEAR_BLACK
    if state == CELL_HIGHLIGHTED:
        return COLOR_AQUA
    if state == CELL_PATH:
        return COLOR_CORAL
    return COLOR_SLATE_GRAY


def grid_line_width(render_spec: HexRenderSpec = HEX_RENDER_STANDARD) -> int:
    return max(int(render_spec.min_line_width_px), int(render_spec.grid_line_width_px))


def periodic_blockers(bounds: HexBounds, period: int) -> set[Hex]:
    """Every ``period``-th hex of the bounds spiral, starting with the center."""

    if period < 1:
        raise ValueError(f"blocker period must be positive, got {period}")
    return {coord for i, coord in enumerate(bounds.all_coords()) if i % period == 0}


__all__ = [
    "CELL_DEFAULT",
    "CELL_BLOCKED",
    "CELL_HIGHLIGHTED",
    "CELL_PATH",
    "viewer_layout",
    "cell_polygon",
    "scaled_polygon",
    "cell_fill_color",
    "grid_line_width",
    "periodic_blockers",
]
