"""Arcade drawing for the viewer."""

from __future__ import annotations

from collections.abc import Iterable

import arcade

from hex_geometry.config import COLOR_AMBER, COLOR_CHARCOAL, COLOR_NEAR_BLACK, COLOR_SOFT_WHITE
from hex_geometry.hex import Hex
from hex_geometry.layout import HexLayout
from hex_geometry.viewer.cells import cell_fill_color, cell_polygon, grid_line_width, scaled_polygon
from hex_geometry.viewer.specs import HEX_RENDER_STANDARD, HexRenderSpec, HexViewerSpec


def draw_cells(
    layout: HexLayout,
    cells: Iterable[tuple[Hex, str]],
    render_spec: HexRenderSpec = HEX_RENDER_STANDARD,
):
    line_width = grid_line_width(render_spec)
    for coord, state in cells:
        points = cell_polygon(layout, coord)
        arcade.draw_polygon_filled(points, cell_fill_color(state))
        arcade.draw_polygon_outline(points, COLOR_CHARCOAL, line_width)


def draw_hover(layout: HexLayout, coord: Hex, render_spec: HexRenderSpec = HEX_RENDER_STANDARD):
    points = scaled_polygon(
        cell_polygon(layout, coord),
        layout.hex_to_world_pos(coord),
        render_spec.hover_highlight_scale,
    )
    line_width = grid_line_width(render_spec) + int(render_spec.hover_line_width_extra_px)
    arcade.draw_polygon_outline(points, COLOR_AMBER, line_width)


def make_status_text(render_spec: HexRenderSpec = HEX_RENDER_STANDARD) -> arcade.Text:
    return arcade.Text(
        "",
        0,
        0,
        COLOR_SOFT_WHITE,
        font_size=render_spec.status_font_size,
        anchor_x="center",
        anchor_y="center",
    )


def draw_status_bar(status: arcade.Text, text: str, spec: HexViewerSpec):
    arcade.draw_lbwh_rectangle_filled(0, 0, spec.screen_width_px, spec.status_bar_height_px, COLOR_NEAR_BLACK)
    status.text = text
    status.x = spec.screen_width_px / 2.0
    status.y = spec.status_bar_height_px / 2.0
    status.draw()


__all__ = ["draw_cells", "draw_hover", "make_status_text", "draw_status_bar"]
