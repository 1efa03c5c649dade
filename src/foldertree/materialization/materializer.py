"""
Structure materializer.

Turns parsed entries into create-or-skip filesystem operations rooted at a
caller-supplied directory. Entries are processed strictly in input order: a
step only starts once the previous one has finished, because later entries
rely on directories created by earlier ones.
"""

import asyncio
import logging
import os
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from attrs import frozen

from foldertree.core.types import Entry, PathLike
from foldertree.exceptions import FilesystemError
from foldertree.materialization.filesystem import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


class OutcomeStatus(Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


@frozen
class MaterializationOutcome:
    status: OutcomeStatus
    reason: str | None = None

    @classmethod
    def created(cls) -> "MaterializationOutcome":
        return cls(OutcomeStatus.CREATED)

    @classmethod
    def already_exists(cls) -> "MaterializationOutcome":
        return cls(OutcomeStatus.ALREADY_EXISTS)

    @classmethod
    def failed(cls, reason: str) -> "MaterializationOutcome":
        return cls(OutcomeStatus.FAILED, reason)

    @property
    def is_failure(self) -> bool:
        return self.status is OutcomeStatus.FAILED


@frozen
class MaterializedEntry:
    """An entry paired with what happened to it on disk."""

    entry: Entry
    outcome: MaterializationOutcome


class PathEscapeError(OSError):
    """Raised when an entry would land outside the destination root."""


class StructureMaterializer:
    """Idempotent create-or-skip writer for parsed entries.

    Responsibilities:
      - Create missing folders (with any missing ancestors) and empty files.
      - Leave existing folders and files untouched.
      - Stop at the first filesystem failure; already created entries stay.

    The sync and async front ends share ``materialize_entry`` so both honour
    the same ordering guarantees.
    """

    def __init__(self, filesystem: FileSystem | None = None):
        self.filesystem = filesystem or LocalFileSystem()

    def resolve_target(self, base_path: PathLike, entry: Entry) -> Path:
        """
        Resolve an entry's absolute target path under ``base_path``.

        Params:
            base_path: Destination root
            entry: Parsed entry whose relative path is appended

        Returns:
            Target path for the entry

        Raises:
            PathEscapeError: If the entry path is absolute or climbs out of the root
        """
        base = Path(base_path)
        target = base / entry.path
        root = os.path.normpath(os.path.abspath(base))
        resolved = os.path.normpath(os.path.abspath(target))
        if os.path.commonpath([root, resolved]) != root:
            raise PathEscapeError(
                f"path '{entry.path}' resolves outside destination '{base}'"
            )
        return target

    def materialize_entry(self, base_path: PathLike, entry: Entry) -> MaterializedEntry:
        """
        Create a single entry if it does not exist yet.

        Filesystem failures are not raised here; they are returned as a
        failed outcome so callers decide how to stop.

        Params:
            base_path: Destination root
            entry: Entry to create

        Returns:
            The entry paired with its outcome
        """
        try:
            target = self.resolve_target(base_path, entry)
            if entry.is_folder:
                outcome = self._create_folder(target)
            else:
                outcome = self._create_file(target)
        except OSError as e:
            outcome = MaterializationOutcome.failed(str(e))
            logger.error("Error creating %s: %s - %s", entry.kind.value, entry.path, e)
        else:
            if outcome.status is OutcomeStatus.CREATED:
                logger.info("Created %s: %s", entry.kind.value, entry.path)
            else:
                logger.debug("%s already exists: %s", entry.kind.value.capitalize(), entry.path)
        return MaterializedEntry(entry, outcome)

    def _create_folder(self, target: Path) -> MaterializationOutcome:
        fs = self.filesystem
        if fs.exists(target):
            return MaterializationOutcome.already_exists()
        fs.mkdir(target, recursive=True)
        return MaterializationOutcome.created()

    def _create_file(self, target: Path) -> MaterializationOutcome:
        fs = self.filesystem
        # Covers files listed before their folder, or whose folder was
        # dropped upstream.
        if not fs.exists(target.parent):
            fs.mkdir(target.parent, recursive=True)
        if fs.exists(target):
            return MaterializationOutcome.already_exists()
        fs.write_empty_file(target)
        return MaterializationOutcome.created()

    def materialize(
        self, base_path: PathLike, entries: Iterable[Entry]
    ) -> list[MaterializedEntry]:
        """
        Materialize entries in order under ``base_path``.

        Params:
            base_path: Destination root
            entries: Parsed entries, processed in the given order

        Returns:
            One MaterializedEntry per input entry

        Raises:
            FilesystemError: On the first failed entry; carries the outcomes
                recorded so far, including the failed one
        """
        results: list[MaterializedEntry] = []
        for entry in entries:
            result = self.materialize_entry(base_path, entry)
            results.append(result)
            self._raise_on_failure(result, results)
        return results

    async def materialize_async(
        self, base_path: PathLike, entries: Iterable[Entry]
    ) -> list[MaterializedEntry]:
        """
        Async variant of ``materialize``.

        Each entry's filesystem work runs in a worker thread and is awaited
        before the next entry starts. Cancellation lands between entries;
        whatever was created before it stays on disk.
        """
        results: list[MaterializedEntry] = []
        for entry in entries:
            result = await asyncio.to_thread(self.materialize_entry, base_path, entry)
            results.append(result)
            self._raise_on_failure(result, results)
        return results

    @staticmethod
    def _raise_on_failure(
        result: MaterializedEntry, results: list[MaterializedEntry]
    ) -> None:
        if result.outcome.is_failure:
            raise FilesystemError(
                path=result.entry.path,
                kind=result.entry.kind,
                reason=result.outcome.reason or "unknown error",
                outcomes=results,
            )


def materialize(
    base_path: PathLike,
    entries: Iterable[Entry],
    filesystem: FileSystem | None = None,
) -> list[MaterializedEntry]:
    """Convenience function wrapping ``StructureMaterializer.materialize``."""
    return StructureMaterializer(filesystem).materialize(base_path, entries)


async def materialize_async(
    base_path: PathLike,
    entries: Iterable[Entry],
    filesystem: FileSystem | None = None,
) -> list[MaterializedEntry]:
    """Convenience function wrapping ``StructureMaterializer.materialize_async``."""
    return await StructureMaterializer(filesystem).materialize_async(base_path, entries)
