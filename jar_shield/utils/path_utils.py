"""Path utilities for exploded trees and staging copies."""

import os
import shutil
from pathlib import Path
from typing import Iterator, Optional


def exploded_dir_for(archive_path: Path, suffix: str = "_exploded") -> Path:
    """Get the output directory an archive is exploded into.

    Args:
        archive_path: Path to the archive file
        suffix: Suffix appended to the archive file name

    Returns:
        Sibling directory named ``<archive-filename><suffix>``
    """
    return archive_path.parent / f"{archive_path.name}{suffix}"


def ensure_dir(directory: Path) -> Path:
    """Create ``directory`` (and parents) if it does not already exist."""
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def is_within(path: Path, root: Path) -> bool:
    """Check that ``path`` lies inside ``root`` once both are normalized.

    Args:
        path: Candidate path
        root: Directory that must contain the candidate

    Returns:
        True if path equals root or is located below it
    """
    path_str = os.path.normpath(os.path.abspath(path))
    root_str = os.path.normpath(os.path.abspath(root))
    return os.path.commonpath([path_str, root_str]) == root_str


def walk_deepest_first(root: Path) -> Iterator[Path]:
    """Yield every path below ``root``, then ``root`` itself, children before parents.

    Args:
        root: Directory to walk

    Yields:
        Paths in reverse lexical order so nested entries come first
    """
    for path in sorted(root.rglob("*"), key=str, reverse=True):
        yield path
    yield root


def remove_tree(root: Path) -> bool:
    """Delete a directory tree, deepest paths first.

    Args:
        root: Directory to delete

    Returns:
        True if something was removed
    """
    if not root.exists():
        return False

    if not root.is_dir() or root.is_symlink():
        root.unlink()
        return True

    for path in walk_deepest_first(root):
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()
    return True


def stage_archive(archive_path: Path, staging_dir: Optional[Path]) -> Path:
    """Copy an archive into a staging directory, overwriting any previous copy.

    Args:
        archive_path: Original archive path
        staging_dir: Target directory, or None to work on the original

    Returns:
        Path of the file all further processing should use
    """
    if staging_dir is None:
        return archive_path

    ensure_dir(staging_dir)
    destination = staging_dir / archive_path.name
    if destination.resolve() == archive_path.resolve():
        return destination

    shutil.copy2(archive_path, destination)
    return destination
