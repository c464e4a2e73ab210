"""Snapshots, zoom and scroll logic, value label layout and update checks for live plotting."""

__version__ = "0.13.0"

__all__ = [
    "scrollbar",
    "snapshot",
    "updatechecker",
    "valuelayout",
    "versionnumber",
    "zoomstack",
]