"""
Lexicon-based sentiment analysis.

Each comment is scored by counting words that appear in a positive and a
negative lexicon. The ratio of positive hits decides the label:

- more than 60% positive hits: positive
- less than 40% positive hits: negative
- anything in between, or no hits at all: neutral

Confidence grows with how one-sided the hits are. Neutral results get a
confidence of 0.6 plus a jitter in [0, 0.2). By default the jitter is derived
from a hash of the comment so identical input always scores identically; a
seeded random source can be supplied instead.
"""

import hashlib
import logging
import random
import re
from collections.abc import Set

from ..config import settings
from ..models import ClassificationResult, SentimentLabel, SentimentScore
from ..text import extract_keywords
from ..utils import InMemoryCache, sentiment_cache
from .lexicon import DEFAULT_LEXICON, DEFAULT_STOPWORDS, Lexicon

logger = logging.getLogger(__name__)

POSITIVE_THRESHOLD = 0.6
NEGATIVE_THRESHOLD = 0.4
POLAR_BASE_CONFIDENCE = 0.7
NEUTRAL_BASE_CONFIDENCE = 0.6
NEUTRAL_JITTER_RANGE = 0.2

_NON_WORD = re.compile(r"\W")


def neutral_jitter(comment: str, rng: random.Random | None = None) -> float:
    """Return a jitter value in [0, 0.2) for neutral confidence."""
    if rng is not None:
        return rng.random() * NEUTRAL_JITTER_RANGE

    digest = hashlib.md5(comment.strip().lower().encode("utf-8")).digest()
    fraction = int.from_bytes(digest[:4], "big") / 2**32
    return fraction * NEUTRAL_JITTER_RANGE


def classify(
    comment: str,
    positive_lexicon: Set[str],
    negative_lexicon: Set[str],
    rng: random.Random | None = None,
) -> SentimentScore:
    """
    Classify a comment against positive and negative word sets.

    Args:
        comment: The text to classify
        positive_lexicon: Lowercase positive words
        negative_lexicon: Lowercase negative words
        rng: Optional random source for the neutral jitter

    Returns:
        SentimentScore with label and confidence
    """
    positive_score = 0
    negative_score = 0

    for word in comment.lower().split():
        clean_word = _NON_WORD.sub("", word)
        if clean_word in positive_lexicon:
            positive_score += 1
        if clean_word in negative_lexicon:
            negative_score += 1

    total = positive_score + negative_score
    if total == 0:
        return SentimentScore(
            sentiment=SentimentLabel.NEUTRAL,
            confidence=NEUTRAL_BASE_CONFIDENCE + neutral_jitter(comment, rng),
        )

    positive_ratio = positive_score / total
    if positive_ratio > POSITIVE_THRESHOLD:
        sentiment = SentimentLabel.POSITIVE
        confidence = POLAR_BASE_CONFIDENCE + positive_ratio * 0.3
    elif positive_ratio < NEGATIVE_THRESHOLD:
        sentiment = SentimentLabel.NEGATIVE
        confidence = POLAR_BASE_CONFIDENCE + (1 - positive_ratio) * 0.3
    else:
        sentiment = SentimentLabel.NEUTRAL
        confidence = NEUTRAL_BASE_CONFIDENCE + neutral_jitter(comment, rng)

    return SentimentScore(sentiment=sentiment, confidence=min(1.0, max(0.0, confidence)))


class SentimentAnalyzer:
    """
    Sentiment analyzer backed by an injected lexicon.

    Results are cached by text when the neutral jitter is deterministic, so
    repeated comments across batches are only scored once. A seeded random
    source disables caching because the same text may then score differently.
    """

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        stopwords: Set[str] = DEFAULT_STOPWORDS,
        rng: random.Random | None = None,
        cache: InMemoryCache | None = None,
    ):
        """Initialize the sentiment analyzer."""
        self.lexicon = lexicon
        self.stopwords = stopwords
        self.rng = rng
        self.cache = cache if cache is not None else sentiment_cache

    def __cache_key(self, text: str) -> str:
        return f"{hash(self.lexicon)}:{self.cache.create_key(text)}"

    def analyze_text(self, text: str) -> SentimentScore:
        """
        Analyze sentiment of a single text.

        Args:
            text: The text to analyze

        Returns:
            SentimentScore with label and confidence
        """
        if self.rng is not None:
            return classify(text, self.lexicon.positive, self.lexicon.negative, self.rng)

        cache_key = self.__cache_key(text)
        cached_result = self.cache.get(cache_key)
        if cached_result is not None:
            logger.debug(f"Cache hit for text: {text[:50]}...")
            return cached_result

        result = classify(text, self.lexicon.positive, self.lexicon.negative)
        self.cache.set(cache_key, result, settings.cache_ttl_seconds)

        logger.debug(
            f"Analyzed sentiment for text: {text[:50]}... -> {result.sentiment.value} ({result.confidence:.3f})"
        )
        return result

    def analyze_comment(self, comment: str) -> ClassificationResult:
        """Classify a comment and extract its keywords."""
        score = self.analyze_text(comment)
        return ClassificationResult(
            comment=comment,
            sentiment=score.sentiment,
            confidence=score.confidence,
            keywords=extract_keywords(comment, self.stopwords),
        )

    def analyze_batch(self, texts: list[str]) -> list[SentimentScore]:
        """
        Analyze sentiment for a batch of texts.

        Args:
            texts: List of texts to analyze

        Returns:
            List of SentimentScore objects in input order
        """
        return [self.analyze_text(text) for text in texts]


# Global analyzer instance
sentiment_analyzer = SentimentAnalyzer()
