"""
Parser configuration for foldertree.

The file-versus-folder decision is a suffix lookup against an extension
table. The table, explicit per-name overrides and the recognised trailing
separators are all carried by an immutable ``ParserConfig`` so callers can
inject their own heuristics without touching module state.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from foldertree.core.types import EntryKind

DEFAULT_FILE_EXTENSIONS = frozenset(
    {
        ".js",
        ".ts",
        ".jsx",
        ".tsx",
        ".vue",
        ".py",
        ".java",
        ".cpp",
        ".c",
        ".h",
        ".html",
        ".css",
        ".scss",
        ".sass",
        ".less",
        ".json",
        ".xml",
        ".yaml",
        ".yml",
        ".md",
        ".txt",
        ".csv",
        ".log",
        ".env",
        ".gitignore",
        ".dockerignore",
        ".php",
        ".rb",
        ".go",
        ".rs",
        ".swift",
        ".kt",
        ".dart",
        ".scala",
        ".sql",
        ".sh",
        ".bat",
        ".ps1",
        ".dockerfile",
        ".makefile",
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".svg",
        ".ico",
        ".pdf",
        ".zip",
        ".tar",
        ".gz",
        ".rar",
        ".7z",
    }
)

DEFAULT_PATH_SEPARATORS = "/\\"


def normalize_extension(suffix: str) -> str:
    """
    Normalize a suffix to lower case with a single leading dot.

    Params:
        suffix: Extension as written by the caller (``"PY"``, ``".md"``)

    Returns:
        Normalized extension (``".py"``, ``".md"``)

    Raises:
        ValueError: If the suffix is empty or only dots/whitespace
    """
    cleaned = suffix.strip().lstrip(".").lower()
    if not cleaned:
        raise ValueError(f"Invalid file extension: {suffix!r}")
    return f".{cleaned}"


class ParserConfig(BaseModel):
    """Classification settings for the tree parser.

    Precedence when deciding an entry's kind:
      1. a trailing path separator always means folder
      2. an explicit entry in ``overrides`` (keyed by cleaned name)
      3. a case-insensitive suffix match against ``file_extensions``
      4. anything else is a folder

    This is a best-effort heuristic: a folder literally named ``v1.0`` only
    stays a folder when written with a trailing separator or overridden.
    """

    model_config = ConfigDict(frozen=True)

    file_extensions: frozenset[str] = DEFAULT_FILE_EXTENSIONS
    overrides: dict[str, EntryKind] = Field(default_factory=dict)
    path_separators: str = DEFAULT_PATH_SEPARATORS
    comment_marker: str | None = None

    @field_validator("file_extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value):
        if isinstance(value, str):
            value = [value]
        return frozenset(normalize_extension(suffix) for suffix in value)

    @field_validator("path_separators")
    @classmethod
    def _require_separators(cls, value: str) -> str:
        if not value:
            raise ValueError("path_separators must contain at least one character")
        return value

    @field_validator("comment_marker")
    @classmethod
    def _reject_blank_marker(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("comment_marker must not be blank")
        return value

    def with_extensions(self, *suffixes: str) -> "ParserConfig":
        """Return a copy whose extension table also contains ``suffixes``."""
        return self.model_copy(
            update={
                "file_extensions": self.file_extensions
                | {normalize_extension(suffix) for suffix in suffixes}
            }
        )

    def with_overrides(self, **overrides: EntryKind) -> "ParserConfig":
        """Return a copy with extra name -> kind overrides."""
        return self.model_copy(update={"overrides": {**self.overrides, **overrides}})

    def has_trailing_separator(self, name: str) -> bool:
        return bool(name) and name[-1] in self.path_separators

    def strip_separators(self, name: str) -> str:
        return name.rstrip(self.path_separators)

    def has_file_extension(self, name: str) -> bool:
        """Case-insensitive suffix test against the extension table."""
        lowered = name.lower()
        return any(lowered.endswith(suffix) for suffix in self.file_extensions)

    def classify(self, name: str) -> EntryKind:
        """
        Decide whether a line's content names a file or a folder.

        Params:
            name: Content of the line, possibly with a trailing separator

        Returns:
            The entry kind according to the precedence documented on the class
        """
        if self.has_trailing_separator(name):
            return EntryKind.FOLDER

        override = self.overrides.get(self.strip_separators(name))
        if override is not None:
            return override

        if self.has_file_extension(name):
            return EntryKind.FILE
        return EntryKind.FOLDER
