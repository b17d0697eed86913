"""Shared constants for hex geometry, meshes and the viewer."""

from typing import Final

# Geometry
SQRT_3: Final[float] = 3.0 ** 0.5
LINE_NUDGE: Final[tuple[float, float, float]] = (1e-6, 2e-6, -3e-6)
NORMAL_EPSILON: Final[float] = 1e-6

# Meshes
MAX_VERTEX_INDEX: Final[int] = 0xFFFF
OUTLINE_SCALE: Final[float] = 1.1
DEFAULT_INSET_AMOUNT: Final[float] = 0.2

# Viewer
WINDOW_TITLE: Final[str] = "Hex Geometry"
SCREEN_WIDTH: Final[int] = 1000
SCREEN_HEIGHT: Final[int] = 1000
FPS: Final[int] = 60
RING_STEP_SECONDS: Final[float] = 0.1
BLOCKED_CELL_PERIOD: Final[int] = 10

COLOR_CHARCOAL: Final[tuple[int, int, int]] = (34, 38, 41)
COLOR_SOFT_WHITE: Final[tuple[int, int, int]] = (236, 239, 241)
COLOR_NEAR_BLACK: Final[tuple[int, int, int]] = (18, 18, 18)
COLOR_AQUA: Final[tuple[int, int, int]] = (0, 188, 212)
COLOR_CORAL: Final[tuple[int, int, int]] = (255, 112, 67)
COLOR_AMBER: Final[tuple[int, int, int]] = (255, 193, 7)
COLOR_SLATE_GRAY: Final[tuple[int, int, int]] = (96, 125, 139)

__all__ = [
    "SQRT_3",
    "LINE_NUDGE",
    "NORMAL_EPSILON",
    "MAX_VERTEX_INDEX",
    "OUTLINE_SCALE",
    "DEFAULT_INSET_AMOUNT",
    "WINDOW_TITLE",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "FPS",
    "RING_STEP_SECONDS",
    "BLOCKED_CELL_PERIOD",
    "COLOR_CHARCOAL",
    "COLOR_SOFT_WHITE",
    "COLOR_NEAR_BLACK",
    "COLOR_AQUA",
    "COLOR_CORAL",
    "COLOR_AMBER",
    "COLOR_SLATE_GRAY",
]
