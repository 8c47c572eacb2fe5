"""Stopword tables.

Stopwords are immutable configuration values injected at construction time,
never process-wide mutable state, so concurrent extractions with different
tables cannot interfere.

- DEFAULT_STOPWORDS: scikit-learn's English stopword list
- load_stopwords(): custom stopwords from a JSON file
- resolve_stopwords(): merge custom stopwords into (or replace) the default

Custom stopword files are either a flat JSON list or an object of
categories, e.g.::

    {
        "document_structure": ["chapter", "section"],
        "meta_words": ["isbn", "copyright"]
    }
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Final

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from keyword_extraction.core.exceptions import StopwordsLoadError

DEFAULT_STOPWORDS: Final[frozenset[str]] = frozenset(ENGLISH_STOP_WORDS)


def normalize_stopwords(words: Iterable[str]) -> frozenset[str]:
    """Lower-case and strip a collection of stopwords, dropping blanks."""
    return frozenset(word.strip().lower() for word in words if word and word.strip())


def _flatten(data: Any, path: Path) -> list[str]:
    if isinstance(data, list):
        entries = data
    elif isinstance(data, dict):
        entries = []
        for category_words in data.values():
            if not isinstance(category_words, list):
                msg = f"Stopword categories must map to lists in {path}"
                raise StopwordsLoadError(msg)
            entries.extend(category_words)
    else:
        msg = f"Unsupported stopwords structure in {path}: {type(data).__name__}"
        raise StopwordsLoadError(msg)

    if not all(isinstance(entry, str) for entry in entries):
        msg = f"Stopword entries must be strings in {path}"
        raise StopwordsLoadError(msg)
    return entries


def load_stopwords(path: str | Path) -> frozenset[str]:
    """Load custom stopwords from a JSON file.

    Args:
        path: JSON file holding a list of strings or a mapping of
            category name to list of strings.

    Returns:
        Frozenset of lower-cased stopwords.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        StopwordsLoadError: If the JSON has an unsupported structure.
    """
    stopwords_path = Path(path)
    with stopwords_path.open(encoding="utf-8") as f:
        data = json.load(f)
    return normalize_stopwords(_flatten(data, stopwords_path))


def resolve_stopwords(
    custom: Iterable[str] | None = None,
    merge: bool = True,
) -> frozenset[str]:
    """Build the effective stopword table.

    Args:
        custom: Additional stopwords, or None for the default table only.
        merge: If True, union custom stopwords with DEFAULT_STOPWORDS;
            if False, the custom stopwords replace the default table.

    Returns:
        Frozenset of effective stopwords.
    """
    if custom is None:
        return DEFAULT_STOPWORDS

    custom_words = normalize_stopwords(custom)
    if merge:
        return DEFAULT_STOPWORDS | custom_words
    return custom_words
