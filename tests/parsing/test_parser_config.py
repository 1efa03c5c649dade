"""
Tests for ParserConfig and the extension table.
"""

import pytest
from pydantic import ValidationError

from foldertree.core.types import EntryKind
from foldertree.parsing import DEFAULT_FILE_EXTENSIONS, ParserConfig, normalize_extension


class TestNormalizeExtension:
    """Test suffix normalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("py", ".py"), (".MD", ".md"), ("..txt", ".txt"), ("  .Json ", ".json")],
    )
    def test_normalizes(self, raw, expected):
        """Suffixes become lower case with exactly one leading dot."""
        assert normalize_extension(raw) == expected

    @pytest.mark.parametrize("raw", ["", ".", "  ", "..."])
    def test_rejects_empty(self, raw):
        """Suffixes with no characters after the dots are invalid."""
        with pytest.raises(ValueError):
            normalize_extension(raw)


class TestParserConfigDefaults:
    """Test the default configuration."""

    def test_default_table(self):
        """The default table covers common source, data and archive formats."""
        config = ParserConfig()
        assert config.file_extensions == DEFAULT_FILE_EXTENSIONS
        for suffix in (".js", ".py", ".md", ".gitignore", ".7z"):
            assert suffix in config.file_extensions

    def test_defaults_have_no_overrides_or_comments(self):
        config = ParserConfig()
        assert config.overrides == {}
        assert config.comment_marker is None
        assert config.path_separators == "/\\"


class TestParserConfigValidation:
    """Test pydantic validation of configuration values."""

    def test_extensions_are_normalized(self):
        """Provided extensions go through normalize_extension."""
        config = ParserConfig(file_extensions=["TXT", ".Rst"])
        assert config.file_extensions == frozenset({".txt", ".rst"})

    def test_single_string_extension(self):
        config = ParserConfig(file_extensions="toml")
        assert config.file_extensions == frozenset({".toml"})

    def test_invalid_extension_rejected(self):
        with pytest.raises(ValidationError):
            ParserConfig(file_extensions=["."])

    def test_empty_separators_rejected(self):
        with pytest.raises(ValidationError):
            ParserConfig(path_separators="")

    def test_blank_comment_marker_rejected(self):
        with pytest.raises(ValidationError):
            ParserConfig(comment_marker="  ")

    def test_overrides_accept_kind_values(self):
        """Override kinds can be given as enum values."""
        config = ParserConfig(overrides={"Dockerfile": "file"})
        assert config.overrides == {"Dockerfile": EntryKind.FILE}

    def test_config_is_frozen(self):
        config = ParserConfig()
        with pytest.raises(ValidationError):
            config.comment_marker = "#"


class TestParserConfigCopies:
    """Test copy-on-modify helpers."""

    def test_with_extensions_adds(self):
        """Extra suffixes are added, the original is untouched."""
        base = ParserConfig()
        extended = base.with_extensions("proto", ".TOML")
        assert {".proto", ".toml"} <= extended.file_extensions
        assert ".proto" not in base.file_extensions
        assert DEFAULT_FILE_EXTENSIONS <= extended.file_extensions

    def test_with_overrides_merges(self):
        base = ParserConfig(overrides={"LICENSE": EntryKind.FILE})
        merged = base.with_overrides(**{"v1.0": EntryKind.FOLDER})
        assert merged.overrides == {"LICENSE": EntryKind.FILE, "v1.0": EntryKind.FOLDER}
        assert base.overrides == {"LICENSE": EntryKind.FILE}


class TestClassify:
    """Test the classification precedence."""

    def test_trailing_separator_first(self):
        config = ParserConfig(overrides={"notes.txt": EntryKind.FILE})
        assert config.classify("notes.txt/") is EntryKind.FOLDER

    def test_override_before_extension(self):
        config = ParserConfig(overrides={"v1.0.md": EntryKind.FOLDER})
        assert config.classify("v1.0.md") is EntryKind.FOLDER

    def test_extension_then_default(self):
        config = ParserConfig()
        assert config.classify("main.PY") is EntryKind.FILE
        assert config.classify("v1.0") is EntryKind.FOLDER

    def test_has_file_extension_matches_suffix_only(self):
        config = ParserConfig()
        assert config.has_file_extension(".gitignore")
        assert not config.has_file_extension("json-schemas")
