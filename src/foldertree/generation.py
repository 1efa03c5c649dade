"""
Structure generation entry points.

Runs the full pipeline (destination check, parse, materialize) and reports
the result in the shape host surfaces expect: either success naming the
destination root, or a single structured failure.
"""

import logging

from attrs import frozen

from foldertree.core.types import Entry, EntryKind, PathLike
from foldertree.exceptions import (
    EmptyStructureError,
    FailureCategory,
    FilesystemError,
    FolderTreeError,
    NoDestinationError,
)
from foldertree.materialization import (
    FileSystem,
    MaterializedEntry,
    StructureMaterializer,
)
from foldertree.parsing import ParserConfig, parse_tree

logger = logging.getLogger(__name__)


@frozen
class GenerationFailure:
    category: FailureCategory
    message: str
    path: str | None = None
    kind: EntryKind | None = None

    @classmethod
    def from_error(cls, error: FolderTreeError) -> "GenerationFailure":
        if isinstance(error, FilesystemError):
            return cls(error.category, error.reason, error.path, error.kind)
        return cls(error.category, str(error))


@frozen
class GenerationResult:
    """Terminal result of one generation run.

    ``entries`` holds whatever was materialized before the run ended,
    including the failed entry when ``failure`` is a filesystem error.
    """

    destination: str | None
    entries: list[MaterializedEntry]
    failure: GenerationFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None


def _prepare(
    text: str, destination: PathLike | None, config: ParserConfig | None
) -> list[Entry]:
    if destination is None or not str(destination).strip():
        raise NoDestinationError()

    logger.info("Creating structure in: %s", destination)
    entries = parse_tree(text, config)
    if not entries:
        raise EmptyStructureError()
    return entries


def create_structure(
    text: str,
    destination: PathLike | None,
    *,
    config: ParserConfig | None = None,
    filesystem: FileSystem | None = None,
) -> list[MaterializedEntry]:
    """
    Parse ``text`` and create the described structure under ``destination``.

    Params:
        text: Raw tree listing
        destination: Root directory to create entries in
        config: Optional parser classification settings
        filesystem: Optional filesystem capability (defaults to local disk)

    Returns:
        Materialized entries in parse order

    Raises:
        NoDestinationError: If no destination is given; nothing is parsed
        EmptyStructureError: If the text yields no entries; disk is untouched
        FilesystemError: On the first entry that cannot be created
    """
    entries = _prepare(text, destination, config)
    return StructureMaterializer(filesystem).materialize(destination, entries)


def _finish(
    destination: PathLike | None,
    entries: list[MaterializedEntry] | None = None,
    error: FolderTreeError | None = None,
) -> GenerationResult:
    dest = str(destination) if destination is not None else None
    if error is None:
        logger.info("Folder structure created successfully in %s", dest)
        return GenerationResult(dest, entries or [])

    logger.warning("Structure generation failed (%s): %s", error.category.value, error)
    outcomes = error.outcomes if isinstance(error, FilesystemError) else []
    return GenerationResult(dest, outcomes, GenerationFailure.from_error(error))


def generate_structure(
    text: str,
    destination: PathLike | None,
    *,
    config: ParserConfig | None = None,
    filesystem: FileSystem | None = None,
) -> GenerationResult:
    """Run ``create_structure`` and report the outcome as a ``GenerationResult``."""
    try:
        entries = create_structure(
            text, destination, config=config, filesystem=filesystem
        )
    except FolderTreeError as e:
        return _finish(destination, error=e)
    return _finish(destination, entries)


async def generate_structure_async(
    text: str,
    destination: PathLike | None,
    *,
    config: ParserConfig | None = None,
    filesystem: FileSystem | None = None,
) -> GenerationResult:
    """Async variant of ``generate_structure``; entries stay strictly ordered."""
    try:
        entries = _prepare(text, destination, config)
        materialized = await StructureMaterializer(filesystem).materialize_async(
            destination, entries
        )
    except FolderTreeError as e:
        return _finish(destination, error=e)
    return _finish(destination, materialized)
