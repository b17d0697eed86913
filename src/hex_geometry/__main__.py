"""Module entrypoint for `python -m hex_geometry`."""

import argparse

from hex_geometry.runtime import configure_logging

DEMO_NAMES = ("fov", "wrap", "rings", "path")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hex_geometry", description="Interactive hex grid viewer")
    ap.add_argument("demo", nargs="?", default="fov", choices=DEMO_NAMES, help="Demo map to open")
    ap.add_argument("--log-level", default="INFO", help="Logging level, e.g. DEBUG")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    from hex_geometry.viewer.app import run_viewer

    run_viewer(args.demo)


if __name__ == "__main__":
    main()
