"""Read-only access to the entries of a zip-based archive."""

import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterator, Optional

from .errors import ArchiveIOError


@dataclass(frozen=True)
class ArchiveEntry:
    """One record stored inside an archive."""

    name: str
    is_dir: bool
    info: Optional[zipfile.ZipInfo] = field(default=None, compare=False, repr=False)


class ArchiveHandle:
    """Context manager over an archive's entry list."""

    def __init__(self, archive_path: Path) -> None:
        self.archive_path = archive_path
        self._zip: Optional[zipfile.ZipFile] = None

    def __enter__(self) -> "ArchiveHandle":
        try:
            self._zip = zipfile.ZipFile(self.archive_path, "r")
        except (zipfile.BadZipFile, OSError, ValueError) as e:
            # ValueError: undecodable entry names (UnicodeDecodeError)
            raise ArchiveIOError(f"Cannot open archive: {e}", self.archive_path) from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying file handle."""
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    def entries(self) -> Iterator[ArchiveEntry]:
        """Yield entries in the order the archive stores them."""
        for info in self._require_open().infolist():
            yield ArchiveEntry(name=info.filename, is_dir=info.is_dir(), info=info)

    def open(self, entry: ArchiveEntry) -> IO[bytes]:
        """Open a byte stream over a file entry.

        Entries carry their own ZipInfo so duplicate names each read their own bytes.
        """
        return self._require_open().open(entry.info or entry.name, "r")

    def _require_open(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise ArchiveIOError("Archive is not open", self.archive_path)
        return self._zip
