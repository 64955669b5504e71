"""Tests for the language server command builder."""

from pathlib import Path

import pytest

from react_compiler_marker_extension.command import build_command, server_path
from react_compiler_marker_extension.errors import RuntimeNotFoundError
from react_compiler_marker_extension.host import InMemoryHost
from react_compiler_marker_extension.models import Worktree


def _worktree(tmp_path: Path) -> Worktree:
    return Worktree(id=1, root_path=tmp_path / "project")


def test_command_uses_host_node(tmp_path: Path):
    host = InMemoryHost(node_path="/opt/node/bin/node")
    spec = build_command(host, "react-compiler-marker", _worktree(tmp_path), work_dir=tmp_path)
    assert spec.command == "/opt/node/bin/node"


def test_command_args(tmp_path: Path):
    spec = build_command(InMemoryHost(), "react-compiler-marker", _worktree(tmp_path), work_dir=tmp_path)
    assert spec.args == [str(tmp_path / "server" / "server.bundle.js"), "--stdio"]
    assert spec.env == []


def test_command_server_path_from_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    spec = build_command(InMemoryHost(), "react-compiler-marker", _worktree(tmp_path))
    assert Path(spec.args[0]).is_absolute()
    assert spec.args[0].endswith("server/server.bundle.js")
    assert Path(spec.args[0]).parent.parent == Path.cwd()
    assert spec.args[1] == "--stdio"


def test_command_ignores_server_id_and_worktree(tmp_path: Path):
    host = InMemoryHost()
    a = build_command(host, "react-compiler-marker", Worktree(id=1, root_path=tmp_path), work_dir=tmp_path)
    b = build_command(host, "other-id", Worktree(id=2, root_path=tmp_path / "x"), work_dir=tmp_path)
    assert a == b


def test_command_runtime_not_found_propagates(tmp_path: Path):
    host = InMemoryHost(node_path=None)
    with pytest.raises(RuntimeNotFoundError, match="node"):
        build_command(host, "react-compiler-marker", _worktree(tmp_path), work_dir=tmp_path)


def test_server_path_relative_work_dir_made_absolute(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert server_path(Path("ext")) == str(Path.cwd() / "ext" / "server" / "server.bundle.js")
