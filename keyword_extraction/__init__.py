"""keyword-extraction-service: unsupervised keyword extraction.

This package hosts a from-scratch implementation of the YAKE statistical
keyword extractor together with the pieces needed to serve it:
- Sentence/word segmentation and stopword tables
- Candidate selection, context building, feature scoring and deduplication
- A FastAPI service and a command line tool

Everything is computed from a single document. No training data, corpus
statistics or stemming are involved.
"""

from keyword_extraction.yake import Yake, YakeParams

__version__ = "0.1.0"
__all__ = ["Yake", "YakeParams", "__version__"]
