"""Maven package descriptor (pom.xml) parsing and version extraction."""

import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .errors import DescriptorParseError

DESCRIPTOR_NAME = "pom.xml"


@dataclass(frozen=True)
class DescriptorInfo:
    """Coordinates declared by one ``project`` element."""

    group_id: Optional[str]
    artifact_id: Optional[str]
    version: Optional[str]

    @property
    def is_complete(self) -> bool:
        """True when group, artifact and version are all known."""
        return bool(self.group_id and self.artifact_id and self.version)

    @property
    def coordinates(self) -> str:
        """``groupId:artifactId`` pair."""
        return f"{self.group_id}:{self.artifact_id}"

    def matches(self, dependency_id: str) -> bool:
        """Check if this descriptor declares the dependency.

        Args:
            dependency_id: Normalized identifier

        Returns:
            True if the artifactId contains the identifier or the identifier
            is exactly ``groupId:artifactId``
        """
        if not self.is_complete:
            return False
        if dependency_id in self.artifact_id.lower():
            return True
        return dependency_id == self.coordinates.lower()


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    """Text of the first direct child called ``name``, stripped."""
    for child in element:
        if _local_name(child.tag) == name:
            text = (child.text or "").strip()
            return text or None
    return None


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


class MavenDescriptorParser:
    """Parser for Maven ``pom.xml`` descriptors."""

    def __init__(self, descriptor_name: str = DESCRIPTOR_NAME) -> None:
        """Initialize the descriptor parser.

        Args:
            descriptor_name: File name suffix that identifies descriptors
        """
        self.descriptor_name = descriptor_name

    def can_parse(self, file_path: Union[str, Path]) -> bool:
        """Check if this parser can handle the file.

        Args:
            file_path: Path to the file

        Returns:
            True if the file name ends with the descriptor name
        """
        return Path(file_path).name.endswith(self.descriptor_name)

    def validate_file(self, file_path: Path) -> None:
        """Validate that the file exists and is readable.

        Raises:
            FileNotFoundError: If file doesn't exist
            PermissionError: If file is not readable
        """
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        if not os.access(file_path, os.R_OK):
            raise PermissionError(f"File is not readable: {file_path}")

    def parse(self, file_path: Union[str, Path]) -> List[DescriptorInfo]:
        """Parse a descriptor and collect every ``project`` element.

        ``groupId`` and ``version`` fall back to the ``parent`` block when the
        project does not declare them itself, as Maven inheritance does.

        Args:
            file_path: Path to the pom.xml file

        Returns:
            One DescriptorInfo per project element, in document order

        Raises:
            DescriptorParseError: If the file is not well-formed XML
        """
        file_path = Path(file_path)
        self.validate_file(file_path)

        try:
            tree = ET.parse(file_path)
        except ET.ParseError as e:
            raise DescriptorParseError(f"Malformed descriptor: {e}", file_path) from e

        projects = []
        for element in tree.getroot().iter():
            if _local_name(element.tag) != "project":
                continue

            parent = _child(element, "parent")
            group_id = _child_text(element, "groupId")
            version = _child_text(element, "version")
            if parent is not None:
                group_id = group_id or _child_text(parent, "groupId")
                version = version or _child_text(parent, "version")

            projects.append(DescriptorInfo(
                group_id=group_id,
                artifact_id=_child_text(element, "artifactId"),
                version=version,
            ))

        return projects

    def extract_version(self, file_path: Union[str, Path], dependency_id: str) -> Optional[str]:
        """Find the version a descriptor declares for the dependency.

        Args:
            file_path: Path to the pom.xml file
            dependency_id: Normalized identifier

        Returns:
            Version of the first matching project element, or None
        """
        for info in self.parse(file_path):
            if info.matches(dependency_id):
                return info.version
        return None


def is_descriptor(file_path: Union[str, Path], descriptor_name: str = DESCRIPTOR_NAME) -> bool:
    """Check whether a path names a package descriptor."""
    return MavenDescriptorParser(descriptor_name).can_parse(file_path)


def extract_version(file_path: Union[str, Path], dependency_id: str) -> Optional[str]:
    """Convenience function to extract a dependency version from a pom.xml.

    Args:
        file_path: Path to the descriptor
        dependency_id: Normalized identifier

    Returns:
        Declared version, or None when no project element matches
    """
    return MavenDescriptorParser().extract_version(file_path, dependency_id)


def read_descriptor(file_path: Union[str, Path]) -> List[DescriptorInfo]:
    """Convenience function to read every project's coordinates from a pom.xml.

    Args:
        file_path: Path to the descriptor

    Returns:
        One DescriptorInfo per project element, in document order

    Raises:
        DescriptorParseError: If the file is not well-formed XML
    """
    return MavenDescriptorParser().parse(file_path)
