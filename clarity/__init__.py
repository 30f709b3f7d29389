"""Lexicon sentiment analysis, keyword extraction and word cloud layout for comments."""

__version__ = "1.0.0"
