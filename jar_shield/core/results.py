"""Result accumulation for a single archive search."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from .config import ExplorerConfig
from .errors import JarShieldError


@dataclass(frozen=True)
class DescriptorMatch:
    """A descriptor file that references the dependency."""

    version: Optional[str]
    path: str

    def format(self) -> str:
        """Render as a right-aligned version column followed by the path."""
        return f"{self.version or 'unknown':>15}    {self.path}"


@dataclass(frozen=True)
class ExplorationError:
    """A local failure recorded while exploring."""

    location: str
    kind: str
    message: str


@dataclass
class ExplorationContext:
    """State shared by every archive explored during one search.

    Only ever appended to. Not safe for concurrent use.
    """

    dependency_id: str
    config: ExplorerConfig = field(default_factory=ExplorerConfig)
    root_archive: Optional[str] = None
    matches: List[str] = field(default_factory=list)
    matched_archives: Set[str] = field(default_factory=set)
    descriptor_matches: Set[DescriptorMatch] = field(default_factory=set)
    errors: List[ExplorationError] = field(default_factory=list)
    archives_explored: int = 0

    def add_match(self, path: str, archive_name: str) -> None:
        """Record a matching path and the archive that contained it.

        Args:
            path: Absolute path of the matching entry
            archive_name: Base name of the containing archive
        """
        self.matches.append(path)
        self.matched_archives.add(archive_name)

    def add_descriptor_match(self, version: Optional[str], path: str) -> None:
        """Record a descriptor file and the version it declares, if any."""
        self.descriptor_matches.add(DescriptorMatch(version=version, path=path))

    def add_error(self, error: JarShieldError, location: Optional[str] = None) -> ExplorationError:
        """Record a local failure.

        Args:
            error: The error that occurred
            location: Where it happened, defaults to the error's own location

        Returns:
            The recorded entry
        """
        record = ExplorationError(
            location=location or error.location or "",
            kind=error.kind,
            message=error.message,
        )
        self.errors.append(record)
        return record

    @property
    def has_matches(self) -> bool:
        """True if anything matched the dependency."""
        return bool(self.matches or self.descriptor_matches)

    def formatted_descriptor_matches(self) -> List[str]:
        """Formatted descriptor lines, sorted by path."""
        return [m.format() for m in sorted(self.descriptor_matches, key=lambda m: (m.path, m.version or ""))]

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view of the collected results."""
        return {
            "dependency": self.dependency_id,
            "archive": self.root_archive,
            "archives_explored": self.archives_explored,
            "matches": list(self.matches),
            "descriptors": [
                {"version": m.version, "path": m.path}
                for m in sorted(self.descriptor_matches, key=lambda m: (m.path, m.version or ""))
            ],
            "archives_with_matches": sorted(self.matched_archives),
            "errors": [
                {"location": e.location, "kind": e.kind, "message": e.message}
                for e in self.errors
            ],
        }
