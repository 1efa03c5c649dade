"""
Shared test fixtures and utilities for the foldertree test suite.
"""

from pathlib import Path

import pytest


class InMemoryFileSystem:
    """FileSystem double that records every call.

    Paths listed in ``fail_on`` raise ``PermissionError`` when created.
    """

    def __init__(self, fail_on=()):
        self.dirs: set[Path] = set()
        self.files: set[Path] = set()
        self.calls: list[tuple[str, Path]] = []
        self.fail_on = {Path(p) for p in fail_on}

    def exists(self, path):
        path = Path(path)
        self.calls.append(("exists", path))
        return path in self.dirs or path in self.files

    def mkdir(self, path, recursive):
        path = Path(path)
        self.calls.append(("mkdir", path))
        if path in self.fail_on:
            raise PermissionError(f"Permission denied: '{path}'")
        self.dirs.add(path)
        if recursive:
            self.dirs.update(path.parents)

    def write_empty_file(self, path):
        path = Path(path)
        self.calls.append(("write_empty_file", path))
        if path in self.fail_on:
            raise PermissionError(f"Permission denied: '{path}'")
        if path in self.files:
            raise FileExistsError(f"File exists: '{path}'")
        self.files.add(path)

    def created(self) -> list[Path]:
        return [path for op, path in self.calls if op in ("mkdir", "write_empty_file")]


@pytest.fixture
def memory_fs():
    """In-memory filesystem with no failures configured."""
    return InMemoryFileSystem()


@pytest.fixture
def failing_fs():
    """Factory for in-memory filesystems that fail on the given paths.

    Usage:
        def test_something(failing_fs, tmp_path):
            fs = failing_fs(tmp_path / "locked")
    """

    def factory(*paths):
        return InMemoryFileSystem(fail_on=paths)

    return factory


@pytest.fixture
def sample_tree():
    """Box-drawing tree covering nested folders, files and a top-level file."""
    return "\n".join(
        [
            "├── src/",
            "│   ├── components/",
            "│   │   ├── Header.jsx",
            "│   │   └── Footer.jsx",
            "│   ├── utils/",
            "│   │   └── helpers.js",
            "│   └── index.js",
            "├── public/",
            "│   └── index.html",
            "└── package.json",
        ]
    )
