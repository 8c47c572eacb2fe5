"""Context building: term occurrences and left/right co-occurrence multisets.

A bounded buffer of the last ``window_size`` words slides over each sentence.
For each new word, every word still in the buffer is recorded as a left
neighbor of the new term, and the new word as a right neighbor of the buffered
term. Entries are keyed by the lower-cased term, while the neighbors
themselves are kept as literal words, so "Data" and "data" count as two
distinct neighbors. The buffer never holds the current word, so there are no
self-loops from the same position. The walk is not gated by stopword status: stopwords
and punctuation are real neighbors.

Occurrences are recorded for every word that is not punctuation, stopwords
included, so that position and dispersion reflect the true spread of a term.

Like candidate selection, each sentence produces a partial result and the
partial results are merged in sentence order (list concatenation per term).
"""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field

from keyword_extraction.nlp.tokenizer import Sentence, is_punctuation


@dataclass(frozen=True)
class Occurrence:
    """One occurrence of a term.

    Attributes:
        word: Literal word as written.
        sentence_index: Index of the sentence in the document.
        position: Index of the word inside its sentence.
        offset: Index of the word in the whole document.
    """

    word: str
    sentence_index: int
    position: int
    offset: int


@dataclass(frozen=True)
class NeighborContext:
    """Left and right neighbor multisets of a term."""

    left: tuple[str, ...] = ()
    right: tuple[str, ...] = ()


OccurrenceMap = dict[str, tuple[Occurrence, ...]]
LeftRightContext = dict[str, NeighborContext]


@dataclass(frozen=True)
class DocumentContext:
    """Occurrences and neighbor contexts of every term in a document."""

    occurrences: OccurrenceMap = field(default_factory=dict)
    contexts: LeftRightContext = field(default_factory=dict)
    sentence_count: int = 0


def merge_contexts(partials: Iterable[DocumentContext]) -> DocumentContext:
    """Merge partial contexts in order; sentence counts add up."""
    occurrences: dict[str, list[Occurrence]] = {}
    lefts: dict[str, list[str]] = {}
    rights: dict[str, list[str]] = {}
    sentence_count = 0

    for partial in partials:
        sentence_count += partial.sentence_count
        for term, term_occurrences in partial.occurrences.items():
            occurrences.setdefault(term, []).extend(term_occurrences)
        for term, context in partial.contexts.items():
            lefts.setdefault(term, []).extend(context.left)
            rights.setdefault(term, []).extend(context.right)

    return DocumentContext(
        occurrences={term: tuple(items) for term, items in occurrences.items()},
        contexts={
            term: NeighborContext(left=tuple(lefts[term]), right=tuple(rights[term]))
            for term in lefts
        },
        sentence_count=sentence_count,
    )


class ContextBuilder:
    """Builds occurrences and left/right contexts over a sliding window."""

    def __init__(self, window_size: int, punctuation: Collection[str]) -> None:
        self.window_size = window_size
        self.punctuation = punctuation

    def build_sentence(
        self,
        sentence: Sentence,
        sentence_index: int,
        offset: int = 0,
    ) -> DocumentContext:
        """Context of a single sentence.

        Args:
            sentence: The sentence to walk.
            sentence_index: Index of the sentence in the document.
            offset: Document offset of the first word of the sentence.
        """
        occurrences: dict[str, list[Occurrence]] = {}
        lefts: dict[str, list[str]] = {}
        rights: dict[str, list[str]] = {}
        # (literal word, position) of the last window_size words
        buffer: deque[tuple[str, int]] = deque(maxlen=self.window_size)

        for position, (word, term) in enumerate(zip(sentence.words, sentence.stems)):
            if not is_punctuation(term, self.punctuation):
                occurrences.setdefault(term, []).append(
                    Occurrence(
                        word=word,
                        sentence_index=sentence_index,
                        position=position,
                        offset=offset + position,
                    )
                )

            for previous_word, previous_position in buffer:
                previous_term = sentence.stems[previous_position]
                lefts.setdefault(term, []).append(previous_word)
                rights.setdefault(term, [])
                lefts.setdefault(previous_term, [])
                rights.setdefault(previous_term, []).append(word)

            # maxlen evicts the oldest entry once the window is full
            buffer.append((word, position))

        return DocumentContext(
            occurrences={term: tuple(items) for term, items in occurrences.items()},
            contexts={
                term: NeighborContext(left=tuple(lefts[term]), right=tuple(rights[term]))
                for term in lefts
            },
            sentence_count=1,
        )

    def build(self, sentences: Sequence[Sentence]) -> DocumentContext:
        """Context of the whole document."""
        partials = []
        offset = 0
        for sentence_index, sentence in enumerate(sentences):
            partials.append(self.build_sentence(sentence, sentence_index, offset))
            offset += sentence.length
        return merge_contexts(partials)
