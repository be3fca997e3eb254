"""Shared fixtures for building test archives."""

import io
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest


def jar_bytes(entries: Dict[str, Optional[bytes]]) -> bytes:
    """Build an in-memory jar. A ``None`` value makes a directory entry."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            if data is None:
                zf.writestr(zipfile.ZipInfo(name.rstrip("/") + "/"), b"")
            else:
                zf.writestr(name, data)
    return buffer.getvalue()


def pom_xml(group_id: str, artifact_id: str, version: str) -> bytes:
    """Minimal namespaced Maven descriptor."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
        "  <modelVersion>4.0.0</modelVersion>\n"
        f"  <groupId>{group_id}</groupId>\n"
        f"  <artifactId>{artifact_id}</artifactId>\n"
        f"  <version>{version}</version>\n"
        "</project>\n"
    ).encode("utf-8")


@pytest.fixture
def make_jar(tmp_path):
    """Write a jar with the given entries under tmp_path."""
    def _make(name: str, entries: Dict[str, Optional[bytes]]) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(jar_bytes(entries))
        return path
    return _make


@pytest.fixture
def app_jar(make_jar):
    """Fat jar bundling old-lib 1.2 with its pom."""
    old_lib = jar_bytes({
        "META-INF/": None,
        "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\n",
        "META-INF/maven/org.x/old-lib/pom.xml": pom_xml("org.x", "old-lib", "1.2"),
        "org/x/OldLib.class": b"\xca\xfe\xba\xbe",
    })
    return make_jar("app.jar", {
        "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\n",
        "lib/": None,
        "lib/old-lib-1.2.jar": old_lib,
        "lib/unrelated-0.1.jar": jar_bytes({"README.txt": b"nothing here"}),
        "com/app/Main.class": b"\xca\xfe\xba\xbe",
    })


def tree_snapshot(root: Path) -> Dict[str, bytes]:
    """Map of relative file path to content for every file below root."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
