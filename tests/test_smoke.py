from hex_geometry.layout import HexOrientation, compute_best_fit_layout, map_size


def test_import_package():
    import hex_geometry

    assert hex_geometry.__version__


def test_best_fit_layout_fits_screen():
    layout = compute_best_fit_layout(
        map_radius=20,
        screen_width_px=800,
        screen_height_px=800,
        margin_px=10,
    )
    width, height = map_size(20, layout.orientation, layout.hex_size[0])
    assert width <= 780 + 1e-6
    assert height <= 780 + 1e-6
    assert layout.origin == (400.0, 400.0)
    assert layout.orientation is HexOrientation.POINTY


def test_entrypoint_parser():
    from hex_geometry.__main__ import build_parser

    args = build_parser().parse_args(["wrap", "--log-level", "DEBUG"])
    assert args.demo == "wrap"
    assert args.log_level == "DEBUG"
    assert build_parser().parse_args([]).demo == "fov"


def test_configure_logging_levels():
    import logging

    import pytest

    from hex_geometry.runtime import configure_logging

    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.getEffectiveLevel() == logging.DEBUG
        with pytest.raises(ValueError):
            configure_logging("loud")
    finally:
        root.setLevel(previous)
