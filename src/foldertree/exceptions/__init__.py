"""
foldertree exception classes.

This package provides all exception types used by foldertree for consistent
error handling and reporting.
"""

from foldertree.exceptions.core import (
    EmptyStructureError,
    FailureCategory,
    FilesystemError,
    FolderTreeError,
    NoDestinationError,
)

__all__ = [
    "FolderTreeError",
    "FailureCategory",
    "NoDestinationError",
    "EmptyStructureError",
    "FilesystemError",
]
