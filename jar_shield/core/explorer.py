"""Recursive exploration of nested archives."""

import os
import shutil
import zipfile
import zlib
from pathlib import Path
from typing import Optional, Union

from ..utils.logging import get_logger
from ..utils.path_utils import exploded_dir_for, is_within, remove_tree, stage_archive
from ..utils.performance import PerformanceMonitor
from .archive import ArchiveEntry, ArchiveHandle
from .config import ExplorerConfig
from .descriptor import MavenDescriptorParser
from .errors import (
    ArchiveIOError,
    DescriptorParseError,
    ExplorationDepthError,
    InvalidArchiveError,
    InvocationError,
    JarShieldError,
)
from .matcher import is_compiled_class, matches_path, normalize_identifier
from .results import ExplorationContext

logger = get_logger("ArchiveExplorer")


class ArchiveExplorer:
    """Extracts archives to disk and records every path matching the dependency.

    Nested archives are explored depth-first as soon as they are written, so
    an archive's own entries are only resumed once everything below it has
    been walked. Local failures are recorded on the context and never stop
    sibling or ancestor archives.
    """

    def __init__(
        self,
        context: ExplorationContext,
        monitor: Optional[PerformanceMonitor] = None
    ) -> None:
        """Initialize the explorer.

        Args:
            context: Shared result state for this search
            monitor: Optional timing monitor, one measurement per archive
        """
        self.context = context
        self.config = context.config
        self.monitor = monitor or PerformanceMonitor(enabled=False)
        self.descriptor_parser = MavenDescriptorParser(self.config.descriptor_name)

    def explore(self, archive_path: Path, depth: int = 0) -> None:
        """Explode one archive into its sibling output directory.

        Args:
            archive_path: Archive to explore
            depth: Nesting level, 0 for the top-level archive
        """
        archive_path = Path(os.path.abspath(archive_path))

        if not archive_path.exists() or not archive_path.is_file() \
                or not self.config.is_archive_name(archive_path.name):
            self.record_error(InvalidArchiveError("Invalid archive file", archive_path))
            return

        if depth > self.config.max_depth:
            self.record_error(ExplorationDepthError(
                f"Nesting depth {depth} exceeds limit of {self.config.max_depth}",
                archive_path,
            ))
            return

        output_dir = exploded_dir_for(archive_path, self.config.exploded_suffix)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.record_error(ArchiveIOError(f"Failed to create directory: {e}", output_dir))
            return

        logger.info(f"Exploring {archive_path.name} (depth {depth})")

        with self.monitor.measure(archive_path.name):
            try:
                with ArchiveHandle(archive_path) as handle:
                    self.context.archives_explored += 1
                    for entry in handle.entries():
                        self.handle_entry(handle, entry, output_dir, archive_path, depth)
            except ArchiveIOError as e:
                self.record_error(e)

    def handle_entry(
        self,
        handle: ArchiveHandle,
        entry: ArchiveEntry,
        output_dir: Path,
        archive_path: Path,
        depth: int
    ) -> None:
        """Match, extract and, for nested archives, recurse into one entry.

        Args:
            handle: Open handle of the containing archive
            entry: Entry to process
            output_dir: Exploded tree of the containing archive
            archive_path: Containing archive
            depth: Nesting level of the containing archive
        """
        destination = Path(os.path.normpath(os.path.join(output_dir, entry.name)))
        if not is_within(destination, output_dir):
            self.record_error(InvalidArchiveError(
                f"Entry escapes output directory: {entry.name}", archive_path
            ))
            return

        matched = matches_path(destination, self.context.dependency_id, self.config.compiled_suffix)
        if matched:
            logger.debug(f"Match: {destination}")
            self.context.add_match(str(destination), archive_path.name)

        if entry.is_dir:
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.record_error(ArchiveIOError(f"Failed to create directory: {e}", destination))
                return
        elif not is_compiled_class(destination, self.config.compiled_suffix):
            if not self._extract(handle, entry, destination):
                return

            if matched and self.descriptor_parser.can_parse(destination):
                self.context.add_descriptor_match(self._read_version(destination), str(destination))

        if self.config.is_archive_name(destination.name):
            self.explore(destination, depth + 1)

    def _extract(self, handle: ArchiveHandle, entry: ArchiveEntry, destination: Path) -> bool:
        """Stream an entry's bytes to disk.

        Returns:
            True if the file was written completely
        """
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with handle.open(entry) as source, open(destination, "wb") as target:
                shutil.copyfileobj(source, target, self.config.chunk_size)
        except (OSError, zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError) as e:
            # RuntimeError: encrypted entry, NotImplementedError: unsupported compression
            self.record_error(ArchiveIOError(f"Failed to extract {entry.name}: {e}", destination))
            return False
        return True

    def _read_version(self, descriptor_path: Path) -> Optional[str]:
        """Extract the declared version, treating unreadable descriptors as unknown."""
        try:
            version = self.descriptor_parser.extract_version(descriptor_path, self.context.dependency_id)
        except DescriptorParseError as e:
            self.record_error(e)
            return None
        except OSError as e:
            self.record_error(ArchiveIOError(f"Failed to read descriptor: {e}", descriptor_path))
            return None

        logger.debug(f"Descriptor {descriptor_path} declares version {version}")
        return version

    def record_error(self, error: JarShieldError) -> None:
        """Store a local failure on the context and log it."""
        record = self.context.add_error(error)
        logger.error(f"{record.message} [{record.location}]")


def search_archive(
    archive_path: Union[str, Path],
    dependency: str,
    staging_dir: Optional[Union[str, Path]] = None,
    config: Optional[ExplorerConfig] = None,
    monitor: Optional[PerformanceMonitor] = None
) -> ExplorationContext:
    """Search a (possibly nested) archive for a dependency.

    The top-level exploded tree left by a previous run is deleted first, so
    repeated searches produce the same tree. Nested trees live inside it and
    go with it.

    Args:
        archive_path: Root archive
        dependency: Bare name or ``group:artifact`` pair, any case
        staging_dir: Optional directory the archive is copied into first
        config: Explorer settings
        monitor: Optional timing monitor

    Returns:
        Context holding matches, descriptor versions, archives and errors

    Raises:
        InvocationError: If a required input is missing or staging fails
    """
    # typer turns an empty argument into Path(".")
    if archive_path is None or str(archive_path).strip() in ("", "."):
        raise InvocationError("Archive path is required")
    dependency_id = normalize_identifier(dependency)
    config = config or ExplorerConfig()

    archive_path = Path(archive_path)
    if staging_dir:
        try:
            archive_path = stage_archive(archive_path, Path(staging_dir))
        except OSError as e:
            raise InvocationError(f"Cannot copy archive to staging directory: {e}", staging_dir) from e
    archive_path = Path(os.path.abspath(archive_path))

    context = ExplorationContext(
        dependency_id=dependency_id,
        config=config,
        root_archive=str(archive_path),
    )
    explorer = ArchiveExplorer(context, monitor)

    output_dir = exploded_dir_for(archive_path, config.exploded_suffix)
    try:
        if remove_tree(output_dir):
            logger.debug(f"Removed previous output {output_dir}")
    except OSError as e:
        explorer.record_error(ArchiveIOError(f"Failed to remove previous output: {e}", output_dir))

    logger.info(f"Starting introspection of {archive_path} for '{dependency_id}'")
    explorer.explore(archive_path)
    logger.info(
        f"Introspection completed: {context.archives_explored} archives, "
        f"{len(context.matches)} matches, {len(context.errors)} errors"
    )

    return context
