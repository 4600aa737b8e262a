from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory FileSystem used to drive the traversal engine without disk I/O.
3. Shared fixtures for raw option dictionaries and synthetic trees.
"""

import os
import posixpath
import sys
from typing import Any, Callable, Dict, List, Set

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from directorytree.domain.errors import NodeAccessError  # noqa: E402
from directorytree.domain.tree_models import DirectoryEntry  # noqa: E402
from directorytree.infra.fs import FileSystem  # noqa: E402


# -----------------------------------------------------------------------------
# In-Memory Filesystem
# -----------------------------------------------------------------------------
class FakeFileSystem(FileSystem):
    """
    Minimal in-memory filesystem with POSIX-style absolute paths.

    Children keep their insertion order, so listings are deliberately
    returned unsorted. Links are keyed by their canonical location and
    point to an absolute target.
    """

    def __init__(self) -> None:
        self.children: Dict[str, List[str]] = {"/": []}
        self.file_attrs: Dict[str, Dict[str, bool]] = {}
        self.links: Dict[str, str] = {}
        self.unreadable: Set[str] = set()
        self.list_calls: List[str] = []

    # --- Builders ---
    def add_dir(self, path: str) -> "FakeFileSystem":
        self._register(path)
        self.children.setdefault(path, [])
        return self

    def add_file(self, path: str, executable: bool = False, hidden: bool = False) -> "FakeFileSystem":
        self._register(path)
        self.file_attrs[path] = {"executable": executable, "hidden": hidden}
        return self

    def add_link(self, path: str, target: str) -> "FakeFileSystem":
        self._register(path)
        self.links[path] = target
        return self

    def deny(self, path: str) -> "FakeFileSystem":
        self.unreadable.add(path)
        return self

    def _register(self, path: str) -> None:
        parent, name = posixpath.split(path)
        if parent not in self.children:
            self.add_dir(parent)
        if name not in self.children[parent]:
            self.children[parent].append(name)

    # --- FileSystem interface ---
    def is_directory(self, path: str) -> bool:
        return self.canonical_path(path) in self.children

    def canonical_path(self, path: str) -> str:
        current = ""
        for part in [p for p in path.split("/") if p]:
            current = f"{current}/{part}"
            hops = 0
            while current in self.links and hops < 40:
                current = self.links[current]
                hops += 1
        return current or "/"

    def list_entries(self, path: str) -> List[DirectoryEntry]:
        self.list_calls.append(path)
        real = self.canonical_path(path)
        if real in self.unreadable or real not in self.children:
            raise NodeAccessError(path)

        entries: List[DirectoryEntry] = []
        for name in self.children[real]:
            child_path = posixpath.join(path, name)
            child_real = self.canonical_path(child_path)
            attrs = self.file_attrs.get(child_real, {})
            entries.append(DirectoryEntry(
                name=name,
                path=child_path,
                is_dir=child_real in self.children,
                is_hidden=attrs.get("hidden", False),
                is_executable=attrs.get("executable", False),
                is_symlink=posixpath.join(real, name) in self.links,
            ))
        return entries


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Return an empty in-memory filesystem."""
    return FakeFileSystem()


@pytest.fixture
def sample_fs() -> FakeFileSystem:
    """
    Return the reference hierarchy used across the tree tests.

    Structure:
    /MyDirectory
      file1.txt
      /folder1
        subfile1.txt
        subfile2.txt
      /folder2
        subfile3.txt
    """
    fs = FakeFileSystem()
    fs.add_file("/MyDirectory/folder2/subfile3.txt")
    fs.add_file("/MyDirectory/file1.txt")
    fs.add_file("/MyDirectory/folder1/subfile2.txt")
    fs.add_file("/MyDirectory/folder1/subfile1.txt")
    return fs


@pytest.fixture
def mock_options_dict() -> Dict[str, Any]:
    """
    Return a complete raw option dictionary, as produced by the CLI mapper.

    Returns:
        Dict[str, Any]: A sample option dictionary.
    """
    return {
        "root_path": "/tmp/test_input",
        "max_depth": "3",
        "use_color": "false",
        "show_hidden": False,
        "excluded_names": ["venv", "coverage"],
        "dirs_first": True,
    }


@pytest.fixture
def entry_factory() -> Callable[..., DirectoryEntry]:
    """Return a builder for DirectoryEntry objects rooted at a dummy location."""
    def _make(name: str, is_dir: bool = False, **kwargs: bool) -> DirectoryEntry:
        return DirectoryEntry(name=name, path=f"/x/{name}", is_dir=is_dir, **kwargs)
    return _make
