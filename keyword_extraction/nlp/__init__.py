"""Text processing collaborators for the YAKE pipeline.

- tokenizer: sentence and word segmentation, punctuation table
- stopwords: default and custom stopword tables
- ranking: descending-score ranking helpers
- yake_extractor: service-level wrapper around the YAKE pipeline
"""
