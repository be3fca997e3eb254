"""Core archive exploration and matching logic for JarShield."""

from .config import ExplorerConfig
from .descriptor import DescriptorInfo, MavenDescriptorParser, extract_version, read_descriptor
from .errors import (
    JarShieldError,
    InvocationError,
    InvalidArchiveError,
    ArchiveIOError,
    DescriptorParseError,
    ExplorationDepthError,
)
from .explorer import ArchiveExplorer, search_archive
from .matcher import is_match, matches_path, normalize_identifier
from .results import DescriptorMatch, ExplorationContext, ExplorationError

__all__ = [
    "ExplorerConfig",
    "DescriptorInfo",
    "MavenDescriptorParser",
    "extract_version",
    "read_descriptor",
    "JarShieldError",
    "InvocationError",
    "InvalidArchiveError",
    "ArchiveIOError",
    "DescriptorParseError",
    "ExplorationDepthError",
    "ArchiveExplorer",
    "search_archive",
    "is_match",
    "matches_path",
    "normalize_identifier",
    "DescriptorMatch",
    "ExplorationContext",
    "ExplorationError",
]
