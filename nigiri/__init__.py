"""Timetable building blocks: logging, intervals, time deltas, file directories, transport classes, routing results and footpaths."""

__version__ = "0.1.0"

__all__ = [
    "log",
    "text",
    "interval",
    "delta",
    "containers",
    "dir",
    "clasz",
    "routing",
    "get_index",
    "footpaths",
]