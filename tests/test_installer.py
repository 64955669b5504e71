"""Tests for the server bundle installer."""

import logging
from pathlib import Path

from react_compiler_marker_extension.installer import install_server
from react_compiler_marker_extension.models import ServerArtifact


def test_install_writes_bytes(tmp_path: Path):
    artifact = ServerArtifact(content=b"console.log('hi');\n")
    installed = install_server(artifact, tmp_path)
    assert installed == tmp_path / "server" / "server.bundle.js"
    assert installed.read_bytes() == artifact.content


def test_install_binary_content_identical(tmp_path: Path):
    content = bytes(range(256)) * 4
    installed = install_server(ServerArtifact(content=content), tmp_path)
    assert installed is not None
    assert installed.read_bytes() == content


def test_install_empty_content(tmp_path: Path):
    installed = install_server(ServerArtifact(content=b""), tmp_path)
    assert installed is not None
    assert installed.read_bytes() == b""


def test_install_is_repeatable(tmp_path: Path):
    artifact = ServerArtifact(content=b"bundle")
    install_server(artifact, tmp_path)
    installed = install_server(artifact, tmp_path)
    assert installed is not None
    assert installed.read_bytes() == b"bundle"


def test_install_overwrites_existing_file(tmp_path: Path):
    (tmp_path / "server").mkdir()
    (tmp_path / "server" / "server.bundle.js").write_bytes(b"stale content that is longer")
    installed = install_server(ServerArtifact(content=b"fresh"), tmp_path)
    assert installed is not None
    assert installed.read_bytes() == b"fresh"


def test_install_failure_is_swallowed(tmp_path: Path, caplog):
    # A regular file where the server directory should be
    (tmp_path / "server").write_text("not a directory")
    with caplog.at_level(logging.WARNING, logger="react_compiler_marker_extension.installer"):
        result = install_server(ServerArtifact(content=b"bundle"), tmp_path)
    assert result is None
    assert "Failed to install" in caplog.text
    assert (tmp_path / "server").read_text() == "not a directory"
