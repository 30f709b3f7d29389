"""Data models package."""

from .analysis import AnalysisRequest, AnalysisSummary, ParseRequest, SentimentCounts
from .comment import ClassificationResult, ParsedBatch, SentimentLabel, SentimentScore
from .wordcloud import PlacedWord, WordCloud

__all__ = [
    "AnalysisRequest",
    "AnalysisSummary",
    "ClassificationResult",
    "ParseRequest",
    "ParsedBatch",
    "PlacedWord",
    "SentimentCounts",
    "SentimentLabel",
    "SentimentScore",
    "WordCloud",
]
