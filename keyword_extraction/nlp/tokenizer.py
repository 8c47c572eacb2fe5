"""Sentence and word segmentation for the YAKE pipeline.

Splits raw text into sentences, and sentences into words, keeping both the
literal word and its lower-cased normal form. No stopword or punctuation
filtering happens here: the context builder needs the unfiltered word stream
to measure true neighbor relationships, so filtering is left to consumers.

Segmentation:
- Sentences: segtok's rule-based splitter (``split_multi``). Terminal
  punctuation and paragraph breaks end a sentence; single line breaks do not.
- Words: Unicode default word boundaries (UAX #29) via the ``regex`` package.
- Graphemes: extended grapheme clusters (``\\X``) so that punctuation checks
  and edit distances are Unicode-correct.

Anti-Patterns Avoided:
- S1192: Patterns compiled once at module level
- Global mutable tables: DEFAULT_PUNCTUATION is a frozenset
"""

from __future__ import annotations

import string
from collections.abc import Collection
from dataclasses import dataclass
from typing import Final

import regex
from segtok.segmenter import split_multi

# =============================================================================
# Module Constants (S1192 compliance)
# =============================================================================

# ASCII punctuation plus typographic marks used by Latin and Germanic scripts
DEFAULT_PUNCTUATION: Final[frozenset[str]] = frozenset(string.punctuation) | frozenset(
    "«»„“”‘’‚‹›…–—¿¡§¶·•"
)

# Removed from every word: possessive 's, commas, periods, whitespace
SPECIAL_CHAR_PATTERN: Final[regex.Pattern[str]] = regex.compile(r"('s|,|\.|\s)")

# Control whitespace collapsed to a single space inside a sentence
CONTROL_WHITESPACE_PATTERN: Final[regex.Pattern[str]] = regex.compile(r"[\n\t\r]")

# WORD flag switches \b to Unicode default word boundaries; VERSION1 lets
# split() cut at zero-width matches
WORD_BOUNDARY_PATTERN: Final[regex.Pattern[str]] = regex.compile(
    r"\b", flags=regex.WORD | regex.VERSION1
)

GRAPHEME_PATTERN: Final[regex.Pattern[str]] = regex.compile(r"\X")


# =============================================================================
# Sentence
# =============================================================================


@dataclass(frozen=True)
class Sentence:
    """One sentence of the document.

    Attributes:
        words: Literal words, as written (after special-character cleanup).
        stems: Lower-cased normal form of each word, index-aligned with words.
    """

    words: tuple[str, ...]
    stems: tuple[str, ...]

    @property
    def length(self) -> int:
        """Number of words in the sentence."""
        return len(self.words)

    @classmethod
    def from_text(cls, sentence: str) -> Sentence:
        """Build a Sentence from the text of a single sentence."""
        words = tuple(split_words(sentence))
        return cls(words=words, stems=tuple(word.lower() for word in words))


# =============================================================================
# Grapheme helpers
# =============================================================================


def graphemes(word: str) -> list[str]:
    """Split a string into extended grapheme clusters."""
    return GRAPHEME_PATTERN.findall(word)


def grapheme_count(word: str) -> int:
    """Number of extended grapheme clusters in a string."""
    return len(graphemes(word))


# =============================================================================
# Word classification
# =============================================================================


def is_punctuation(word: str, punctuation: Collection[str]) -> bool:
    """Check whether a token is a punctuation symbol.

    A token is punctuation when it is empty, or when it is a single grapheme
    cluster contained in the punctuation table.

    Examples:
        >>> is_punctuation("-", DEFAULT_PUNCTUATION)
        True
        >>> is_punctuation("--", DEFAULT_PUNCTUATION)
        False
    """
    if not word:
        return True
    return grapheme_count(word) == 1 and word in punctuation


def is_number(word: str) -> bool:
    """Check whether a token parses as a floating-point number.

    Only ASCII tokens without digit-grouping underscores count, so "1_000"
    and non-Latin digits stay ordinary words.
    """
    if not word.isascii() or "_" in word:
        return False
    try:
        float(word)
    except ValueError:
        return False
    return True


# =============================================================================
# Segmentation
# =============================================================================


def split_words(sentence: str) -> list[str]:
    """Split one sentence into cleaned words.

    Pieces between word boundaries are trimmed and stripped of the special
    characters in SPECIAL_CHAR_PATTERN; pieces that end up empty are dropped.
    """
    words: list[str] = []
    for piece in WORD_BOUNDARY_PATTERN.split(sentence):
        trimmed = piece.strip()
        if not trimmed:
            continue
        cleaned = SPECIAL_CHAR_PATTERN.sub("", trimmed)
        if cleaned:
            words.append(cleaned)
    return words


def split_sentences(text: str) -> list[str]:
    """Split raw text into trimmed, non-blank sentence strings."""
    if not text or not text.strip():
        return []

    sentences: list[str] = []
    for raw in split_multi(text):
        sentence = CONTROL_WHITESPACE_PATTERN.sub(" ", raw).strip()
        if sentence:
            sentences.append(sentence)
    return sentences


def build_sentences(text: str) -> list[Sentence]:
    """Segment raw text into Sentence objects.

    Args:
        text: Raw document text.

    Returns:
        Ordered list of sentences. Empty text yields an empty list.
    """
    return [Sentence.from_text(sentence) for sentence in split_sentences(text)]
