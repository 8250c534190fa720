"""Shared fixtures: wiki trees written to temporary directories."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Iterator

import pytest


def write_tree(root: Path, tree: dict) -> Path:
    """Write a nested dict of name -> text (file) or dict (directory)."""
    root.mkdir(parents=True, exist_ok=True)
    for name, content in tree.items():
        path = root / name
        if isinstance(content, dict):
            write_tree(path, content)
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


SAMPLES = {
    "Sample.wiki": {
        ".order": "S1\nS2\nAppendix-A%3A-Bibliography\n",
        "S1.md": "S1 introduction\n# S1 Detail\nSome text\n",
        "S1": {
            ".order": "SS1\n",
            "SS1.md": "# Overview\n![diagram](/.attachments/diagram.png)\n",
            "SS1": {
                ".order": "SSS1\n",
                "SSS1.md": "Deepest\n",
            },
        },
        "S2.md": "[Photo](../.attachments/sub%20folder/photo%201.png)\n",
        "S2": {
            ".order": "Non%2DFunctional-Requirements\n",
            "Non%2DFunctional-Requirements.md": "## Performance\n",
        },
        "Appendix-A%3A-Bibliography.md": "- A book\n",
        ".attachments": {
            "diagram.png": b"\x89PNG diagram",
            "sub folder": {"photo 1.png": b"\x89PNG photo"},
        },
    },
    "Sample2": {
        ".order": "Intro\n",
        "Intro.md": "Welcome\n",
    },
}


@pytest.fixture
def workspace() -> Iterator[Path]:
    """Empty temporary directory, removed afterwards."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def write_wiki(workspace: Path) -> Callable[[str, dict], Path]:
    """Write a tree under the workspace and return its directory."""

    def write(name: str, tree: dict) -> Path:
        return write_tree(workspace / name, tree)

    return write


@pytest.fixture
def samples(workspace: Path) -> Path:
    """The sample wikis, under ``<workspace>/Samples``."""
    return write_tree(workspace / "Samples", SAMPLES)
