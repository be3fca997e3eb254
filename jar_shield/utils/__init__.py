"""Utility functions and helpers for JarShield."""

from .logging import setup_logging, get_logger
from .performance import PerformanceMonitor
from .path_utils import exploded_dir_for, remove_tree, stage_archive

__all__ = [
    "setup_logging",
    "get_logger",
    "PerformanceMonitor",
    "exploded_dir_for",
    "remove_tree",
    "stage_archive",
]
