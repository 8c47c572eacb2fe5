"""YAKE: unsupervised statistical keyword extraction from a single document."""

from keyword_extraction.yake.candidate_selection import Candidate, CandidateSelection
from keyword_extraction.yake.context_builder import ContextBuilder, Occurrence
from keyword_extraction.yake.extractor import Yake, YakeResult, build_yake
from keyword_extraction.yake.feature_extraction import FeatureExtraction, FeaturedTerm
from keyword_extraction.yake.levenshtein import Levenshtein
from keyword_extraction.yake.params import YakeParams

__all__ = [
    "Candidate",
    "CandidateSelection",
    "ContextBuilder",
    "FeatureExtraction",
    "FeaturedTerm",
    "Levenshtein",
    "Occurrence",
    "Yake",
    "YakeParams",
    "YakeResult",
    "build_yake",
]
