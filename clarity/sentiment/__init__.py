"""Sentiment analysis package."""

from .aggregator import aggregate
from .analyzer import SentimentAnalyzer, classify, sentiment_analyzer
from .lexicon import DEFAULT_LEXICON, DEFAULT_STOPWORDS, Lexicon

__all__ = [
    "DEFAULT_LEXICON",
    "DEFAULT_STOPWORDS",
    "Lexicon",
    "SentimentAnalyzer",
    "aggregate",
    "classify",
    "sentiment_analyzer",
]
