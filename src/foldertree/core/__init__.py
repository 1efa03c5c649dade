"""
Core foldertree components.

This package provides the entry model and type definitions shared by the
parser and the materializer.
"""

from foldertree.core.types import PATH_JOINER, Entry, EntryKind, PathLike

__all__ = [
    "Entry",
    "EntryKind",
    "PathLike",
    "PATH_JOINER",
]
