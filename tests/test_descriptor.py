"""Tests for pom.xml version extraction."""

import pytest

from jar_shield.core.descriptor import (
    DescriptorInfo,
    MavenDescriptorParser,
    extract_version,
    is_descriptor,
    read_descriptor,
)
from jar_shield.core.errors import DescriptorParseError

from conftest import pom_xml


@pytest.fixture
def pom_file(tmp_path):
    """Namespaced pom declaring org.x:old-lib:1.2 with a dependency block."""
    pom = tmp_path / "pom.xml"
    pom.write_text(
        '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
        "  <groupId>org.x</groupId>\n"
        "  <artifactId>old-lib</artifactId>\n"
        "  <version>1.2</version>\n"
        "  <dependencies>\n"
        "    <dependency>\n"
        "      <groupId>org.y</groupId>\n"
        "      <artifactId>transitive-thing</artifactId>\n"
        "      <version>9.9</version>\n"
        "    </dependency>\n"
        "  </dependencies>\n"
        "</project>\n"
    )
    return pom


class TestExtractVersion:
    """Test version extraction."""

    def test_match_by_artifact_id(self, pom_file):
        """Test that the artifactId substring selects the version."""
        assert extract_version(pom_file, "old-lib") == "1.2"

    def test_match_by_artifact_id_substring(self, pom_file):
        """Test that part of the artifactId is enough."""
        assert extract_version(pom_file, "old") == "1.2"

    def test_match_by_coordinates(self, pom_file):
        """Test exact groupId:artifactId matching."""
        assert extract_version(pom_file, "org.x:old-lib") == "1.2"

    def test_partial_coordinates_do_not_match(self, pom_file):
        """Test that coordinates must match exactly."""
        assert extract_version(pom_file, "org.x:old") is None

    def test_unrelated_dependency(self, pom_file):
        """Test that unrelated identifiers give no version."""
        assert extract_version(pom_file, "unrelated") is None

    def test_declared_dependencies_are_ignored(self, pom_file):
        """Test that only the project's own coordinates are considered."""
        assert extract_version(pom_file, "transitive-thing") is None

    def test_mixed_case_coordinates(self, tmp_path):
        """Test that descriptor coordinates are compared case-insensitively."""
        pom = tmp_path / "pom.xml"
        pom.write_bytes(pom_xml("Org.X", "Old-Lib", "1.2"))
        assert extract_version(pom, "org.x:old-lib") == "1.2"
        assert extract_version(pom, "old-lib") == "1.2"

    def test_inherits_from_parent(self, tmp_path):
        """Test that groupId and version fall back to the parent block."""
        pom = tmp_path / "pom.xml"
        pom.write_text(
            "<project>\n"
            "  <parent>\n"
            "    <groupId>org.p</groupId>\n"
            "    <artifactId>parent-pom</artifactId>\n"
            "    <version>3.0</version>\n"
            "  </parent>\n"
            "  <artifactId>child-lib</artifactId>\n"
            "</project>\n"
        )
        assert extract_version(pom, "child-lib") == "3.0"
        assert extract_version(pom, "org.p:child-lib") == "3.0"
        assert extract_version(pom, "parent-pom") is None

    def test_missing_version_is_no_answer(self, tmp_path):
        """Test that an incomplete project element does not raise."""
        pom = tmp_path / "pom.xml"
        pom.write_text(
            "<project><groupId>org.x</groupId><artifactId>old-lib</artifactId></project>"
        )
        assert extract_version(pom, "old-lib") is None

    def test_malformed_descriptor(self, tmp_path):
        """Test that broken markup raises DescriptorParseError."""
        pom = tmp_path / "pom.xml"
        pom.write_text("<project><artifactId>old-lib</artifactId>")

        with pytest.raises(DescriptorParseError) as exc_info:
            extract_version(pom, "old-lib")
        assert exc_info.value.location == str(pom)


class TestMavenDescriptorParser:
    """Test the descriptor parser."""

    def test_parse_returns_coordinates(self, pom_file):
        """Test parsing the project's coordinates."""
        infos = MavenDescriptorParser().parse(pom_file)

        assert infos == [DescriptorInfo("org.x", "old-lib", "1.2")]
        assert infos[0].coordinates == "org.x:old-lib"
        assert infos[0].is_complete

    def test_can_parse(self, tmp_path):
        """Test descriptor detection by file name."""
        parser = MavenDescriptorParser()
        assert parser.can_parse(tmp_path / "META-INF" / "pom.xml")
        assert parser.can_parse(tmp_path / "old-lib-1.2.pom.xml")
        assert not parser.can_parse(tmp_path / "pom.properties")
        assert is_descriptor("a/b/pom.xml")

    def test_missing_file(self, tmp_path):
        """Test that a missing descriptor raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            MavenDescriptorParser().parse(tmp_path / "pom.xml")

    def test_read_descriptor(self, pom_file):
        """Test the module-level reader returns every project's coordinates."""
        assert read_descriptor(pom_file) == [DescriptorInfo("org.x", "old-lib", "1.2")]

    def test_read_descriptor_malformed(self, tmp_path):
        """Test the module-level reader raises on malformed XML."""
        pom = tmp_path / "pom.xml"
        pom.write_text("<project><artifactId>old-lib")

        with pytest.raises(DescriptorParseError):
            read_descriptor(pom)
