import pytest

from hex_geometry import Hex, HexLayout
from hex_geometry.bounds import HexBounds
from hex_geometry.config import COLOR_AQUA, COLOR_CORAL, COLOR_NEAR_BLACK, COLOR_SLATE_GRAY
from hex_geometry.layout import compute_best_fit_layout
from hex_geometry.viewer import VIEWER_FOV, VIEWER_WRAP
from hex_geometry.viewer.cells import (
    CELL_BLOCKED,
    CELL_DEFAULT,
    CELL_HIGHLIGHTED,
    CELL_PATH,
    cell_fill_color,
    cell_polygon,
    periodic_blockers,
    scaled_polygon,
    viewer_layout,
)


def test_periodic_blockers():
    bounds = HexBounds(Hex.ZERO, 2)
    blockers = periodic_blockers(bounds, 10)
    assert len(blockers) == 2
    assert Hex.ZERO in blockers
    assert periodic_blockers(bounds, 1) == set(bounds.all_coords())
    with pytest.raises(ValueError):
        periodic_blockers(bounds, 0)


def test_cell_fill_color():
    assert cell_fill_color(CELL_BLOCKED) == COLOR_NEAR_BLACK
    assert cell_fill_color(CELL_HIGHLIGHTED) == COLOR_AQUA
    assert cell_fill_color(CELL_PATH) == COLOR_CORAL
    assert cell_fill_color(CELL_DEFAULT) == COLOR_SLATE_GRAY


def test_scaled_polygon():
    layout = HexLayout(origin=(10.0, 20.0), hex_size=(4.0, 4.0))
    points = scaled_polygon(cell_polygon(layout, Hex.ZERO), (10.0, 20.0), 0.5)
    for x, y in points:
        assert ((x - 10.0) ** 2 + (y - 20.0) ** 2) ** 0.5 == pytest.approx(2.0)


@pytest.mark.parametrize("spec", [VIEWER_FOV, VIEWER_WRAP])
def test_viewer_layout_sits_above_status_bar(spec):
    layout = viewer_layout(spec)
    plain = compute_best_fit_layout(
        spec.map_radius,
        spec.screen_width_px,
        spec.screen_height_px - spec.status_bar_height_px,
        orientation=spec.orientation,
        margin_px=spec.margin_px,
    )
    assert layout.orientation is spec.orientation
    assert layout.hex_size == plain.hex_size
    assert layout.origin[0] == pytest.approx(plain.origin[0])
    assert layout.origin[1] == pytest.approx(plain.origin[1] + spec.status_bar_height_px)
    assert layout.world_pos_to_hex(layout.origin) == Hex.ZERO
