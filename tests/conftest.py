from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files under a fresh project directory and return its path."""
    project = tmp_path / "project"
    project.mkdir()

    def _make(files):
        for rel, content in files.items():
            path = project / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return project

    return _make


@pytest.fixture
def in_project(make_tree, monkeypatch):
    """Like `make_tree`, but also chdir into the project."""

    def _make(files):
        project = make_tree(files)
        monkeypatch.chdir(project)
        return project

    return _make


def read_lines(path: Path):
    return path.read_text(encoding="utf-8").splitlines()
