"""Tests for stopword tables: default, JSON loading and resolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Final

import pytest

from keyword_extraction.core.exceptions import StopwordsLoadError
from keyword_extraction.nlp.stopwords import (
    DEFAULT_STOPWORDS,
    load_stopwords,
    normalize_stopwords,
    resolve_stopwords,
)

CATEGORY_STOPWORDS: Final[dict[str, list[str]]] = {
    "document_structure": ["Chapter", "section"],
    "meta_words": ["isbn", "copyright"],
}


def _write_json(tmp_path: Path, data: Any) -> Path:
    path = tmp_path / "stopwords.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestDefaultStopwords:
    """The English table."""

    @pytest.mark.parametrize("word", ["the", "and", "of", "is", "a"])
    def test_common_words_are_stopwords(self, word: str) -> None:
        assert word in DEFAULT_STOPWORDS

    def test_content_words_are_not_stopwords(self) -> None:
        assert "rust" not in DEFAULT_STOPWORDS
        assert "developer" not in DEFAULT_STOPWORDS

    def test_table_is_immutable(self) -> None:
        assert isinstance(DEFAULT_STOPWORDS, frozenset)


class TestNormalizeStopwords:
    """normalize_stopwords() lower-cases, strips and drops blanks."""

    def test_normalizes(self) -> None:
        assert normalize_stopwords(["  The ", "AND", "", "   "]) == frozenset({"the", "and"})


class TestLoadStopwords:
    """load_stopwords() from JSON files."""

    def test_loads_flat_list(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, ["Foo", "bar"])
        assert load_stopwords(path) == frozenset({"foo", "bar"})

    def test_loads_category_mapping(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, CATEGORY_STOPWORDS)
        assert load_stopwords(str(path)) == frozenset(
            {"chapter", "section", "isbn", "copyright"}
        )

    def test_rejects_scalar_json(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, "the")
        with pytest.raises(StopwordsLoadError):
            load_stopwords(path)

    def test_rejects_category_without_list(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"meta_words": "isbn"})
        with pytest.raises(StopwordsLoadError):
            load_stopwords(path)

    def test_rejects_non_string_entries(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, ["the", 3])
        with pytest.raises(StopwordsLoadError):
            load_stopwords(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_stopwords(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "stopwords.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_stopwords(path)


class TestResolveStopwords:
    """resolve_stopwords() merges into or replaces the default table."""

    def test_no_custom_returns_default(self) -> None:
        assert resolve_stopwords() is DEFAULT_STOPWORDS

    def test_merge_adds_custom_words(self) -> None:
        table = resolve_stopwords(["Rust"])
        assert "rust" in table
        assert DEFAULT_STOPWORDS <= table

    def test_replace_uses_custom_words_only(self) -> None:
        assert resolve_stopwords(["Rust", "go"], merge=False) == frozenset({"rust", "go"})

    def test_empty_custom_replace_gives_empty_table(self) -> None:
        assert resolve_stopwords([], merge=False) == frozenset()
