"""Test configuration and fixtures for walkdirtree."""

import os

import pytest


def canonical_dir(path):
    """Canonical form of a directory path as the tree stores it."""
    return os.path.realpath(path).replace("\\", "/").rstrip("/") + "/"


@pytest.fixture
def canonical():
    return canonical_dir


@pytest.fixture
def sample_root(tmp_path):
    """Create root/{a/{x.txt,y.log}, b/z.txt}."""
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "x.txt").write_text("x")
    (tmp_path / "a" / "y.log").write_text("y")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "z.txt").write_text("z")
    return tmp_path


@pytest.fixture
def nested_root(tmp_path):
    """Create a deeper tree with hidden entries and a build directory."""
    for rel_dir in ["src/pkg/sub", "src/build/out", "docs", ".git/objects", "node_modules/lib"]:
        (tmp_path / rel_dir).mkdir(parents=True)
    (tmp_path / "setup.cfg").write_text("")
    (tmp_path / ".env").write_text("")
    (tmp_path / "src" / "main.py").write_text("")
    (tmp_path / "src" / "pkg" / "mod.py").write_text("")
    (tmp_path / "src" / "pkg" / "sub" / "deep.py").write_text("")
    (tmp_path / "src" / "build" / "out" / "gen.py").write_text("")
    (tmp_path / "docs" / "index.md").write_text("")
    (tmp_path / ".git" / "objects" / "pack").write_text("")
    (tmp_path / "node_modules" / "lib" / "index.js").write_text("")
    return tmp_path
