"""
Filesystem capability used by the structure materializer.

The materializer only needs three primitives; everything else about the
storage medium stays behind this protocol so tests and hosts can inject their
own implementation.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Minimal synchronous storage capability.

    Implementations signal failures by raising ``OSError``.
    """

    def exists(self, path: Path) -> bool: ...

    def mkdir(self, path: Path, recursive: bool) -> None: ...

    def write_empty_file(self, path: Path) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the local disk via ``pathlib``."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def mkdir(self, path: Path, recursive: bool) -> None:
        Path(path).mkdir(parents=recursive, exist_ok=recursive)

    def write_empty_file(self, path: Path) -> None:
        # Exclusive creation: an existing file is never truncated.
        with open(path, "x", encoding="utf-8"):
            pass
