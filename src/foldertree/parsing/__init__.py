"""
foldertree parsing components.

This package provides the tree listing parser and its classification
settings.
"""

from foldertree.parsing.config import (
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_PATH_SEPARATORS,
    ParserConfig,
    normalize_extension,
)
from foldertree.parsing.parser import (
    IndentationStack,
    LineParts,
    ScopeFrame,
    TreeParser,
    parse_tree,
)

__all__ = [
    "DEFAULT_FILE_EXTENSIONS",
    "DEFAULT_PATH_SEPARATORS",
    "IndentationStack",
    "LineParts",
    "ParserConfig",
    "ScopeFrame",
    "TreeParser",
    "normalize_extension",
    "parse_tree",
]
