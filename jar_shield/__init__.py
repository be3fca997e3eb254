"""JarShield - find a dependency bundled anywhere inside a nested archive."""

__version__ = "0.1.0"
__author__ = "JarShield Team"

from .core import ArchiveExplorer, ExplorationContext, ExplorerConfig, search_archive
from .output.formatters import ConsoleFormatter, JSONFormatter

__all__ = [
    "ArchiveExplorer",
    "ExplorationContext",
    "ExplorerConfig",
    "search_archive",
    "ConsoleFormatter",
    "JSONFormatter",
]
