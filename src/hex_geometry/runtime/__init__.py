"""Runtime helpers for hex-geometry."""

from .helpers import configure_logging

__all__ = ["configure_logging"]
