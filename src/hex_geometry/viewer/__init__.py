"""Interactive arcade viewer for hex-geometry.

The windows live in :mod:`hex_geometry.viewer.app`, imported on demand so
the presets and cell helpers stay usable without a display.
"""

from .cells import cell_fill_color, cell_polygon, periodic_blockers, scaled_polygon, viewer_layout
from .specs import HEX_RENDER_STANDARD, VIEWER_FOV, VIEWER_PATH, VIEWER_RINGS, VIEWER_WRAP, HexRenderSpec, HexViewerSpec

__all__ = [
    "HexViewerSpec",
    "HexRenderSpec",
    "VIEWER_FOV",
    "VIEWER_WRAP",
    "VIEWER_RINGS",
    "VIEWER_PATH",
    "HEX_RENDER_STANDARD",
    "viewer_layout",
    "cell_polygon",
    "scaled_polygon",
    "cell_fill_color",
    "periodic_blockers",
]
