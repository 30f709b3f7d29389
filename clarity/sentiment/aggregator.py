"""Corpus-level reduction of per-comment sentiment results."""

import logging
import math
import time
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone

from ..models import AnalysisSummary, ClassificationResult, SentimentCounts, SentimentLabel

logger = logging.getLogger(__name__)


def round1(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def count_sentiments(results: Sequence[ClassificationResult]) -> SentimentCounts:
    """Count results per sentiment label."""
    counts = {label: 0 for label in SentimentLabel}
    for result in results:
        counts[result.sentiment] += 1
    return SentimentCounts(
        positive=counts[SentimentLabel.POSITIVE],
        negative=counts[SentimentLabel.NEGATIVE],
        neutral=counts[SentimentLabel.NEUTRAL],
    )


def satisfaction_score(counts: SentimentCounts, unique_count: int) -> float:
    """
    Weight positive comments fully and neutral ones at half, as a percentage.

    An empty corpus scores 0.0 instead of dividing by zero.
    """
    if unique_count <= 0:
        return 0.0
    score = round1((counts.positive + 0.5 * counts.neutral) / unique_count * 100)
    return min(100.0, max(0.0, score))


def sentiment_percentages(counts: SentimentCounts) -> dict[str, float]:
    """Share of each sentiment label in percent, one decimal place."""
    total = counts.total
    if total == 0:
        return {label.value: 0.0 for label in SentimentLabel}
    return {
        SentimentLabel.POSITIVE.value: round1(counts.positive / total * 100),
        SentimentLabel.NEGATIVE.value: round1(counts.negative / total * 100),
        SentimentLabel.NEUTRAL.value: round1(counts.neutral / total * 100),
    }


def aggregate(
    results: Sequence[ClassificationResult],
    total_raw: int,
    total_unique: int,
    model_id: str,
    job_id: str | None = None,
) -> AnalysisSummary:
    """
    Reduce per-comment results into an analysis summary.

    Args:
        results: Per-comment results in input order
        total_raw: Number of comments submitted, duplicates included
        total_unique: Number of distinct comments
        model_id: Identifier of the model that produced the results
        job_id: Identifier for the summary, generated when omitted

    Returns:
        AnalysisSummary with counts, satisfaction score and average confidence
    """
    counts = count_sentiments(results)

    if results:
        average_confidence = sum(r.confidence for r in results) / len(results)
    else:
        logger.warning("Aggregating an empty result set, scores default to 0")
        average_confidence = 0.0

    return AnalysisSummary(
        job_id=job_id or f"job_{time.time_ns() // 1_000_000}_{uuid.uuid4().hex[:8]}",
        results=list(results),
        total_comments=total_raw,
        unique_comments=total_unique,
        duplicates_ignored=max(0, total_raw - total_unique),
        sentiment_counts=counts,
        sentiment_percentages=sentiment_percentages(counts),
        satisfaction_score=satisfaction_score(counts, total_unique),
        average_confidence=min(1.0, average_confidence),
        model_id=model_id,
        timestamp=datetime.now(timezone.utc),
    )
