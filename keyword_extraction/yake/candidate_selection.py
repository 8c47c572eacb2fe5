"""Candidate selection: every n-gram of 1..ngram words, grouped by lexical form.

For a sentence of length L and each start index i, the windows [i, i + k)
for k in 1..min(ngram, L - i) are considered. A window is rejected when any
of its normal forms is punctuation, a stopword, or parses as a number.
Accepted windows are grouped under their key (normal forms joined by a single
space); every literal realization is kept as a surface form.

Each sentence is processed independently into a partial map and the partial
maps are merged in sentence order. The merge is associative, so the same
result comes out whatever the grouping of sentences. The deduplication weight
map is derived from the merged candidates rather than tracked per sentence.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass

from keyword_extraction.nlp.tokenizer import Sentence, is_number, is_punctuation


@dataclass(frozen=True)
class Candidate:
    """A candidate keyword.

    Attributes:
        lexical_form: Normal forms of the n-gram; identifies the candidate.
        surface_forms: Every literal word sequence observed for the
            lexical form, one entry per occurrence, in discovery order.
    """

    lexical_form: tuple[str, ...]
    surface_forms: tuple[tuple[str, ...], ...] = ()

    @property
    def key(self) -> str:
        return " ".join(self.lexical_form)

    @property
    def size(self) -> int:
        """Number of words in the candidate."""
        return len(self.lexical_form)

    @property
    def tf(self) -> int:
        """Occurrence count of the exact n-gram."""
        return len(self.surface_forms)


CandidateMap = dict[str, Candidate]


def is_invalid_word(
    word: str,
    punctuation: Collection[str],
    stop_words: Collection[str],
) -> bool:
    """A normal form that may not appear inside a candidate."""
    return is_punctuation(word, punctuation) or word in stop_words or is_number(word)


def merge_candidate_maps(partials: Iterable[Mapping[str, Candidate]]) -> CandidateMap:
    """Merge partial candidate maps in order.

    Surface forms are concatenated; the first map that holds a key fixes its
    position in the result. Inputs are left untouched.
    """
    lexical_forms: dict[str, tuple[str, ...]] = {}
    surface_forms: dict[str, list[tuple[str, ...]]] = {}

    for partial in partials:
        for key, candidate in partial.items():
            if key not in lexical_forms:
                lexical_forms[key] = candidate.lexical_form
                surface_forms[key] = []
            surface_forms[key].extend(candidate.surface_forms)

    return {
        key: Candidate(lexical_form=lexical_form, surface_forms=tuple(surface_forms[key]))
        for key, lexical_form in lexical_forms.items()
    }


def build_dedup_map(candidates: Mapping[str, Candidate]) -> Counter[str]:
    """Count, per term, how many distinct multi-word candidates contain it.

    A term repeated inside one lexical form counts once per repetition.
    Single-word candidates do not contribute.
    """
    dedup_map: Counter[str] = Counter()
    for candidate in candidates.values():
        if candidate.size > 1:
            dedup_map.update(candidate.lexical_form)
    return dedup_map


class CandidateSelection:
    """Selects candidate n-grams from segmented sentences."""

    def __init__(
        self,
        ngram: int,
        stop_words: Collection[str],
        punctuation: Collection[str],
    ) -> None:
        self.ngram = ngram
        self.stop_words = stop_words
        self.punctuation = punctuation

    def select_sentence(self, sentence: Sentence) -> CandidateMap:
        """Candidates of one sentence. An empty sentence yields no candidates."""
        invalid = [
            is_invalid_word(stem, self.punctuation, self.stop_words)
            for stem in sentence.stems
        ]
        lexical_forms: dict[str, tuple[str, ...]] = {}
        surface_forms: dict[str, list[tuple[str, ...]]] = {}

        for i in range(sentence.length):
            for j in range(i + 1, min(i + self.ngram, sentence.length) + 1):
                # Any longer window from i contains the same invalid word
                if invalid[j - 1]:
                    break
                stems = sentence.stems[i:j]
                key = " ".join(stems)
                if key not in lexical_forms:
                    lexical_forms[key] = stems
                    surface_forms[key] = []
                surface_forms[key].append(sentence.words[i:j])

        return {
            key: Candidate(lexical_form=stems, surface_forms=tuple(surface_forms[key]))
            for key, stems in lexical_forms.items()
        }

    def select(self, sentences: Sequence[Sentence]) -> CandidateMap:
        """Candidates of the whole document, in order of first occurrence."""
        return merge_candidate_maps(self.select_sentence(s) for s in sentences)
