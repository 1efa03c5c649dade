"""
Core type definitions for the foldertree framework.

This module contains the entry model shared by the tree parser and the
structure materializer, plus the type aliases used across the package.
"""

import os
from dataclasses import dataclass
from enum import Enum

PathLike = str | os.PathLike[str]

PATH_JOINER = "/"


class EntryKind(Enum):
    """Kind of filesystem entry described by a parsed line."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class Entry:
    """
    One parsed line of a tree listing.

    Params:
        name: Display text of the line with prefix noise removed (may keep a
            trailing path separator, e.g. ``"src/"``)
        path: Relative path built from the open ancestor folders and the
            cleaned name, joined with ``/``
        kind: Whether the line describes a file or a folder
        level: Number of ancestor folders open when the line was parsed
    """

    name: str
    path: str
    kind: EntryKind
    level: int

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path} (level {self.level})"
