"""Tests for the sentence/word tokenizer.

Covers:
- Word splitting at Unicode word boundaries with special-character cleanup
- Sentence splitting (terminal punctuation, paragraph breaks, blank input)
- Punctuation, number and grapheme helpers

Anti-Patterns Avoided:
- S1192: Constants extracted to module level
- S3776: Small, focused test methods
"""

from __future__ import annotations

from typing import Final

import pytest

from keyword_extraction.nlp.tokenizer import (
    DEFAULT_PUNCTUATION,
    Sentence,
    build_sentences,
    grapheme_count,
    graphemes,
    is_number,
    is_punctuation,
    split_sentences,
    split_words,
)

# =============================================================================
# Module Constants (S1192 compliance)
# =============================================================================

TWO_SENTENCES: Final[str] = "Rust is a systems language. Developers enjoy writing Rust."

# "e" followed by COMBINING ACUTE ACCENT: two code points, one grapheme
COMBINED_E_ACUTE: Final[str] = "e\u0301"


# =============================================================================
# Word splitting
# =============================================================================


class TestSplitWords:
    """split_words() keeps words, drops whitespace and cleaned-out punctuation."""

    def test_splits_on_spaces(self) -> None:
        assert split_words("alpha beta gamma") == ["alpha", "beta", "gamma"]

    def test_removes_commas_and_periods(self) -> None:
        assert split_words("Hello, world.") == ["Hello", "world"]

    def test_removes_possessive_suffix(self) -> None:
        assert split_words("Bachelor's degree") == ["Bachelor", "degree"]

    def test_keeps_hyphens_as_separate_tokens(self) -> None:
        assert split_words("up-to-date") == ["up", "-", "to", "-", "date"]

    def test_preserves_case(self) -> None:
        assert split_words("NASA Rust") == ["NASA", "Rust"]

    def test_empty_string_has_no_words(self) -> None:
        assert split_words("") == []

    def test_whitespace_only_has_no_words(self) -> None:
        assert split_words("   ") == []


# =============================================================================
# Sentence splitting
# =============================================================================


class TestSplitSentences:
    """split_sentences() and build_sentences()."""

    def test_splits_on_terminal_punctuation(self) -> None:
        sentences = split_sentences(TWO_SENTENCES)
        assert len(sentences) == 2
        assert sentences[0].startswith("Rust is")
        assert sentences[1].startswith("Developers")

    def test_splits_on_paragraph_break(self) -> None:
        sentences = split_sentences("Job Description\n\nWe hire Rust developers")
        assert len(sentences) == 2

    def test_collapses_control_whitespace(self) -> None:
        for sentence in split_sentences("Rust\tis\nfast and safe."):
            assert "\n" not in sentence
            assert "\t" not in sentence

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t"])
    def test_blank_text_has_no_sentences(self, text: str) -> None:
        assert split_sentences(text) == []
        assert build_sentences(text) == []

    def test_build_sentences_keeps_words_and_stems_aligned(self) -> None:
        sentences = build_sentences(TWO_SENTENCES)
        for sentence in sentences:
            assert sentence.length == len(sentence.words) == len(sentence.stems)
            assert sentence.stems == tuple(word.lower() for word in sentence.words)

    def test_build_sentences_does_not_filter_stopwords(self) -> None:
        sentences = build_sentences(TWO_SENTENCES)
        assert "is" in sentences[0].stems
        assert "a" in sentences[0].stems


class TestSentence:
    """Sentence dataclass."""

    def test_from_text_lowercases_stems(self) -> None:
        sentence = Sentence.from_text("Junior Rust Developer")
        assert sentence.words == ("Junior", "Rust", "Developer")
        assert sentence.stems == ("junior", "rust", "developer")
        assert sentence.length == 3

    def test_sentence_is_immutable(self) -> None:
        sentence = Sentence.from_text("Rust")
        with pytest.raises(AttributeError):
            sentence.words = ("Go",)  # type: ignore[misc]


# =============================================================================
# Helpers
# =============================================================================


class TestIsPunctuation:
    """is_punctuation(): empty or single grapheme in the table."""

    def test_empty_string_is_punctuation(self) -> None:
        assert is_punctuation("", DEFAULT_PUNCTUATION)

    @pytest.mark.parametrize("symbol", ["-", "!", "?", ":", "(", "«", "…"])
    def test_single_symbols_are_punctuation(self, symbol: str) -> None:
        assert is_punctuation(symbol, DEFAULT_PUNCTUATION)

    def test_multi_character_token_is_not_punctuation(self) -> None:
        assert not is_punctuation("--", DEFAULT_PUNCTUATION)

    def test_word_is_not_punctuation(self) -> None:
        assert not is_punctuation("a", DEFAULT_PUNCTUATION)

    def test_custom_table_is_honored(self) -> None:
        assert is_punctuation("#", {"#"})
        assert not is_punctuation("-", {"#"})


class TestIsNumber:
    """is_number(): ASCII tokens that float() accepts."""

    @pytest.mark.parametrize("word", ["3", "3.14", "-2", "1e5"])
    def test_numbers(self, word: str) -> None:
        assert is_number(word)

    @pytest.mark.parametrize("word", ["rust", "3d", "v2"])
    def test_non_numbers(self, word: str) -> None:
        assert not is_number(word)

    @pytest.mark.parametrize("word", ["1_000", "\u0661\u0662", "\uff13"])
    def test_grouped_and_non_ascii_digits_are_words(self, word: str) -> None:
        assert not is_number(word)


class TestGraphemes:
    """Grapheme helpers count user-perceived characters."""

    def test_combining_sequence_is_one_grapheme(self) -> None:
        assert grapheme_count(COMBINED_E_ACUTE) == 1

    def test_graphemes_of_word(self) -> None:
        assert graphemes("caf" + COMBINED_E_ACUTE) == ["c", "a", "f", COMBINED_E_ACUTE]

    def test_empty_string_has_no_graphemes(self) -> None:
        assert grapheme_count("") == 0
