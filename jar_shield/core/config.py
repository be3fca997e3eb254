"""Explorer configuration for JarShield."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ExplorerConfig:
    """Settings that drive archive exploration."""

    archive_extensions: Tuple[str, ...] = (".jar",)
    exploded_suffix: str = "_exploded"
    compiled_suffix: str = ".class"
    descriptor_name: str = "pom.xml"
    chunk_size: int = 4096
    max_depth: int = 32

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.archive_extensions:
            raise ValueError("At least one archive extension is required")

        # Accept "jar" as well as ".jar"
        self.archive_extensions = tuple(
            ext if ext.startswith(".") else f".{ext}"
            for ext in self.archive_extensions
        )
        if "." in self.archive_extensions:
            raise ValueError("Archive extensions cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        if self.max_depth < 0:
            raise ValueError("Maximum depth cannot be negative")

    def is_archive_name(self, name: str) -> bool:
        """Check if a file name carries one of the archive extensions.

        Args:
            name: File name or path string

        Returns:
            True if the name ends with an archive extension
        """
        return name.endswith(self.archive_extensions)
