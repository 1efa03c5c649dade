"""
foldertree materialization components.

This package provides the filesystem capability and the materializer that
turns parsed entries into folders and empty files.
"""

from foldertree.materialization.filesystem import FileSystem, LocalFileSystem
from foldertree.materialization.materializer import (
    MaterializationOutcome,
    MaterializedEntry,
    OutcomeStatus,
    PathEscapeError,
    StructureMaterializer,
    materialize,
    materialize_async,
)

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "MaterializationOutcome",
    "MaterializedEntry",
    "OutcomeStatus",
    "PathEscapeError",
    "StructureMaterializer",
    "materialize",
    "materialize_async",
]
