"""
keyword-extraction-service - Custom Exceptions

Anti-Patterns Avoided:
- #7, #13 (Exception Shadowing): Custom namespaced exceptions
  Use KeywordExtractionError instead of shadowing builtins
"""


class KeywordExtractionError(Exception):
    """Base exception for keyword-extraction-service.

    All custom exceptions inherit from this base class.
    """
    pass


class ConfigurationError(KeywordExtractionError, ValueError):
    """Raised when extraction parameters are invalid.

    Raised at construction time (window size 0, n-gram size 0, threshold
    outside (0, 1]) so that bad values never reach the pipeline loops.
    """
    pass


class StopwordsLoadError(KeywordExtractionError):
    """Raised when a stopwords file has an unsupported structure."""
    pass
