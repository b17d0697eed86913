"""Viewer map presets and rendering tuning."""

from dataclasses import dataclass
from typing import Final

from hex_geometry.config import SCREEN_HEIGHT, SCREEN_WIDTH
from hex_geometry.layout import HexOrientation


@dataclass(frozen=True)
class HexViewerSpec:
    """Configuration for a demo map drawn in a viewer window."""

    screen_width_px: int
    screen_height_px: int
    status_bar_height_px: int
    map_radius: int
    orientation: HexOrientation
    margin_px: int


@dataclass(frozen=True)
class HexRenderSpec:
    """Line and highlight tuning for the viewer."""

    min_line_width_px: int
    grid_line_width_px: int
    hover_line_width_extra_px: int
    hover_highlight_scale: float
    status_font_size: int


VIEWER_FOV: Final[HexViewerSpec] = HexViewerSpec(
    screen_width_px=SCREEN_WIDTH,
    screen_height_px=SCREEN_HEIGHT,
    status_bar_height_px=36,
    map_radius=20,
    orientation=HexOrientation.POINTY,
    margin_px=12,
)

VIEWER_WRAP: Final[HexViewerSpec] = HexViewerSpec(
    screen_width_px=SCREEN_WIDTH,
    screen_height_px=SCREEN_HEIGHT,
    status_bar_height_px=36,
    map_radius=10,
    orientation=HexOrientation.FLAT,
    margin_px=180,
)

VIEWER_RINGS: Final[HexViewerSpec] = HexViewerSpec(
    screen_width_px=SCREEN_WIDTH,
    screen_height_px=SCREEN_HEIGHT,
    status_bar_height_px=36,
    map_radius=20,
    orientation=HexOrientation.FLAT,
    margin_px=12,
)

VIEWER_PATH: Final[HexViewerSpec] = HexViewerSpec(
    screen_width_px=SCREEN_WIDTH,
    screen_height_px=SCREEN_HEIGHT,
    status_bar_height_px=36,
    map_radius=15,
    orientation=HexOrientation.POINTY,
    margin_px=12,
)

HEX_RENDER_STANDARD: Final[HexRenderSpec] = HexRenderSpec(
    min_line_width_px=1,
    grid_line_width_px=2,
    hover_line_width_extra_px=1,
    hover_highlight_scale=0.85,
    status_font_size=16,
)

__all__ = [
    "HexViewerSpec",
    "HexRenderSpec",
    "VIEWER_FOV",
    "VIEWER_WRAP",
    "VIEWER_RINGS",
    "VIEWER_PATH",
    "HEX_RENDER_STANDARD",
]
