"""
Parser for textual folder trees.

This module turns loosely formatted tree listings (``tree`` output with
box-drawing connectors, ASCII ``|--`` trees, bullet lists, numbered lists or
plain indentation, freely mixed) into an ordered list of ``Entry`` objects.

Nesting is recovered from the raw character length of each line's decorative
prefix. Only the ordering of those lengths matters, so tab/space mixes and
connectors of different widths do not need a fixed indent unit.
"""

import logging
import re
from dataclasses import dataclass, field

from foldertree.core.types import PATH_JOINER, Entry, EntryKind
from foldertree.parsing.config import ParserConfig

logger = logging.getLogger(__name__)

SENTINEL_INDENT = -1


@dataclass
class ScopeFrame:
    """An open folder on the indentation stack."""

    name: str
    indent: int


@dataclass
class IndentationStack:
    """
    Ancestor folders currently open during a single parse.

    The bottom frame is a sentinel whose indent is lower than any real
    prefix length, so a top-level line closes every open scope but never the
    sentinel itself.
    """

    frames: list[ScopeFrame] = field(
        default_factory=lambda: [ScopeFrame(name="", indent=SENTINEL_INDENT)]
    )

    @property
    def depth(self) -> int:
        """Number of real folders currently open."""
        return len(self.frames) - 1

    @property
    def ancestors(self) -> list[str]:
        """Names of the open folders, outermost first."""
        return [frame.name for frame in self.frames[1:]]

    @property
    def top_indent(self) -> int:
        return self.frames[-1].indent

    def close_scopes(self, indent: int) -> None:
        """Pop every folder opened at the same or a deeper indentation."""
        while len(self.frames) > 1 and indent <= self.top_indent:
            self.frames.pop()

    def open_scope(self, name: str, indent: int) -> None:
        self.frames.append(ScopeFrame(name=name, indent=indent))


@dataclass(frozen=True)
class LineParts:
    """A source line split into decorative prefix and content."""

    prefix: str
    content: str

    @property
    def indent(self) -> int:
        return len(self.prefix)


class TreeParser:
    """Parser for indentation-based folder tree listings."""

    # Leading decoration: whitespace, box-drawing glyphs, ASCII connectors,
    # bullet glyphs and numbered-list markers, in any order or repetition.
    PREFIX_PATTERN = re.compile(
        r"^(?:[\s\u2500-\u257f|+\-*\\`~•◦▪▫‣●○■□►]|\d+[.)](?=\s))*"
    )

    LINE_ENDING_PATTERN = re.compile(r"\r")

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self._comment_pattern = (
            re.compile(r"(?:^|\s+)" + re.escape(self.config.comment_marker) + r".*$")
            if self.config.comment_marker
            else None
        )

    def split_line(self, line: str) -> LineParts:
        """
        Split a line into its decorative prefix and trimmed content.

        Params:
            line: A single source line without line terminator

        Returns:
            LineParts with the matched prefix and the remaining content
        """
        prefix = self.PREFIX_PATTERN.match(line).group(0)
        content = line[len(prefix) :]
        if self._comment_pattern is not None:
            content = self._comment_pattern.sub("", content)
        content = content.strip()
        # Markdown inline code: the opening backtick went into the prefix.
        if prefix.rstrip().endswith("`") and content.endswith("`"):
            content = content[:-1].rstrip()
        return LineParts(prefix=prefix, content=content)

    def parse(self, text: str) -> list[Entry]:
        """
        Parse a tree listing into ordered entries.

        Blank lines and lines without content are skipped; the parse never
        fails as a whole.

        Params:
            text: Raw multi-line tree text

        Returns:
            Entries in source order, parents always before their children
        """
        entries: list[Entry] = []
        stack = IndentationStack()

        for line in self.LINE_ENDING_PATTERN.sub("", text).split("\n"):
            if not line.strip():
                continue

            entry = self._parse_line(line, stack)
            if entry is not None:
                entries.append(entry)

        logger.debug("Parsed %d entries from %d characters", len(entries), len(text))
        return entries

    def _parse_line(self, line: str, stack: IndentationStack) -> Entry | None:
        parts = self.split_line(line)
        if not parts.content:
            return None

        clean_name = self.config.strip_separators(parts.content).rstrip()
        if not clean_name:
            return None

        stack.close_scopes(parts.indent)

        kind = self.config.classify(parts.content)
        entry = Entry(
            name=parts.content,
            path=PATH_JOINER.join([*stack.ancestors, clean_name]),
            kind=kind,
            level=stack.depth,
        )
        logger.debug(
            "Parsed: %s (level: %d, type: %s, path: %s)",
            parts.content,
            entry.level,
            kind.value,
            entry.path,
        )

        if kind is EntryKind.FOLDER:
            stack.open_scope(clean_name, parts.indent)
        return entry


def parse_tree(text: str, config: ParserConfig | None = None) -> list[Entry]:
    """
    Convenience function to parse a tree listing.

    Params:
        text: Raw multi-line tree text
        config: Optional classification settings

    Returns:
        Entries in source order
    """
    return TreeParser(config).parse(text)
