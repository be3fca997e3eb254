"""Tests for result accumulation."""

from jar_shield.core.errors import ArchiveIOError, DescriptorParseError
from jar_shield.core.results import DescriptorMatch, ExplorationContext


class TestDescriptorMatch:
    """Test the descriptor match record."""

    def test_format_right_aligns_version(self):
        """Test the fixed-width version column."""
        match = DescriptorMatch("1.2", "/work/pom.xml")
        assert match.format() == " " * 12 + "1.2    /work/pom.xml"

    def test_format_unknown_version(self):
        """Test that a missing version stays visible."""
        match = DescriptorMatch(None, "/work/pom.xml")
        assert match.format() == " " * 8 + "unknown    /work/pom.xml"

    def test_long_version_is_not_truncated(self):
        """Test that versions wider than the column are kept whole."""
        match = DescriptorMatch("2.17.1-SNAPSHOT-build", "/p")
        assert match.format() == "2.17.1-SNAPSHOT-build    /p"


class TestExplorationContext:
    """Test the shared exploration state."""

    def test_matches_keep_duplicates(self):
        """Test that match records are an ordered list."""
        context = ExplorationContext(dependency_id="zzdep")
        context.add_match("/a/zzdep", "a.jar")
        context.add_match("/b/zzdep", "b.jar")
        context.add_match("/a/zzdep", "a.jar")

        assert context.matches == ["/a/zzdep", "/b/zzdep", "/a/zzdep"]
        assert context.matched_archives == {"a.jar", "b.jar"}
        assert context.has_matches

    def test_descriptor_matches_deduplicated(self):
        """Test that identical descriptor lines are stored once."""
        context = ExplorationContext(dependency_id="zzdep")
        context.add_descriptor_match("1.0", "/a/pom.xml")
        context.add_descriptor_match("1.0", "/a/pom.xml")
        context.add_descriptor_match(None, "/b/pom.xml")

        assert len(context.descriptor_matches) == 2
        assert context.formatted_descriptor_matches() == [
            DescriptorMatch("1.0", "/a/pom.xml").format(),
            DescriptorMatch(None, "/b/pom.xml").format(),
        ]

    def test_add_error_uses_error_location(self):
        """Test that errors are recorded as location, kind and message."""
        context = ExplorationContext(dependency_id="zzdep")
        context.add_error(ArchiveIOError("Cannot open archive", "/a.jar"))
        context.add_error(DescriptorParseError("Malformed"), location="/pom.xml")

        assert [(e.location, e.kind, e.message) for e in context.errors] == [
            ("/a.jar", "io", "Cannot open archive"),
            ("/pom.xml", "descriptor-parse", "Malformed"),
        ]

    def test_empty_context(self):
        """Test a context with nothing recorded."""
        context = ExplorationContext(dependency_id="zzdep")

        assert not context.has_matches
        assert context.to_dict()["matches"] == []

    def test_to_dict(self):
        """Test the serializable view."""
        context = ExplorationContext(dependency_id="zzdep", root_archive="/app.jar")
        context.add_match("/x/zzdep.txt", "app.jar")
        context.add_descriptor_match("1.0", "/x/zzdep/pom.xml")
        context.add_error(ArchiveIOError("boom", "/x/bad.jar"))

        data = context.to_dict()

        assert data["dependency"] == "zzdep"
        assert data["archive"] == "/app.jar"
        assert data["matches"] == ["/x/zzdep.txt"]
        assert data["descriptors"] == [{"version": "1.0", "path": "/x/zzdep/pom.xml"}]
        assert data["archives_with_matches"] == ["app.jar"]
        assert data["errors"] == [{"location": "/x/bad.jar", "kind": "io", "message": "boom"}]
