"""Error types raised while searching archives."""

from pathlib import Path
from typing import Optional, Union


class JarShieldError(Exception):
    """Base class for JarShield errors."""

    kind = "error"

    def __init__(self, message: str, location: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = str(location) if location is not None else None


class InvocationError(JarShieldError):
    """Required inputs are missing or unusable. Fatal for the whole run."""

    kind = "invocation"


class InvalidArchiveError(JarShieldError):
    """Path is missing, not a file, has the wrong extension, or names an unsafe entry."""

    kind = "invalid-archive"


class ArchiveIOError(JarShieldError):
    """Archive could not be opened, or an entry could not be read or written."""

    kind = "io"


class DescriptorParseError(JarShieldError):
    """Package descriptor is not well-formed markup."""

    kind = "descriptor-parse"


class ExplorationDepthError(JarShieldError):
    """Archive nesting went deeper than the configured limit."""

    kind = "depth-limit"
