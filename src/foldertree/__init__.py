"""
foldertree - create folder structures from text tree listings

foldertree parses loosely formatted trees (box-drawing ``tree`` output,
bullet or numbered lists, plain indentation) into ordered entries and
creates the described folders and empty files on disk.
"""

from importlib.metadata import version

from foldertree.core.types import Entry, EntryKind
from foldertree.generation import (
    GenerationFailure,
    GenerationResult,
    create_structure,
    generate_structure,
    generate_structure_async,
)
from foldertree.materialization import (
    MaterializationOutcome,
    MaterializedEntry,
    OutcomeStatus,
    StructureMaterializer,
    materialize,
    materialize_async,
)
from foldertree.parsing import ParserConfig, TreeParser, parse_tree

__version__ = version("foldertree")

__all__ = [
    "__version__",
    "Entry",
    "EntryKind",
    "GenerationFailure",
    "GenerationResult",
    "MaterializationOutcome",
    "MaterializedEntry",
    "OutcomeStatus",
    "ParserConfig",
    "StructureMaterializer",
    "TreeParser",
    "create_structure",
    "generate_structure",
    "generate_structure_async",
    "materialize",
    "materialize_async",
    "parse_tree",
]
