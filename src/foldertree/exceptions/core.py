"""
Exception classes for foldertree.

This module defines one exception type per failure category a structure
generation run can end with. Each exception carries its category so host
code can report failures without inspecting exception classes.
"""

from enum import Enum
from typing import TYPE_CHECKING

from foldertree.core.types import EntryKind

if TYPE_CHECKING:
    from foldertree.materialization.materializer import MaterializedEntry


class FailureCategory(Enum):
    """Terminal failure categories reported to the caller."""

    NO_DESTINATION = "NoDestination"
    EMPTY_STRUCTURE = "EmptyStructure"
    FILESYSTEM_ERROR = "FilesystemError"


class FolderTreeError(Exception):
    """Base exception for all foldertree errors."""

    category: FailureCategory


class NoDestinationError(FolderTreeError):
    """Raised when no destination root is available."""

    category = FailureCategory.NO_DESTINATION

    def __init__(
        self, message: str = "No destination folder is set. Please choose a folder first."
    ):
        super().__init__(message)


class EmptyStructureError(FolderTreeError):
    """Raised when the input yields no entries to create."""

    category = FailureCategory.EMPTY_STRUCTURE

    def __init__(self, message: str = "No valid folder structure found in the input."):
        super().__init__(message)


class FilesystemError(FolderTreeError):
    """Raised when creating or probing an entry on disk fails."""

    category = FailureCategory.FILESYSTEM_ERROR

    def __init__(
        self,
        path: str,
        kind: EntryKind,
        reason: str,
        outcomes: "list[MaterializedEntry] | None" = None,
    ):
        """
        Initialize the exception.

        Params:
            path: Relative path of the entry that failed
            kind: Whether the failed entry is a file or a folder
            reason: Underlying cause message
            outcomes: Outcomes recorded up to and including the failed entry
        """
        self.path = path
        self.kind = kind
        self.reason = reason
        self.outcomes = list(outcomes) if outcomes else []
        super().__init__(f"Failed to create {kind.value}: {path} - {reason}")
