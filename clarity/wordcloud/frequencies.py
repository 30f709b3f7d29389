"""Build the word frequency map behind the word cloud."""

from collections import Counter
from collections.abc import Iterable

from ..models import AnalysisSummary, ClassificationResult
from ..text import tokenize

MIN_CLOUD_WORD_LENGTH = 4


def word_frequencies(source: AnalysisSummary | Iterable[ClassificationResult]) -> dict[str, int]:
    """
    Merge keywords and comment words into one frequency map.

    Every keyword of every result counts once, and every word of the comment
    itself that is longer than three characters counts once more. Keys are
    lowercase and keep first-seen order.
    """
    results = source.results if isinstance(source, AnalysisSummary) else source

    frequencies: Counter[str] = Counter()
    for result in results:
        frequencies.update(result.keywords)
        frequencies.update(
            word for word in tokenize(result.comment) if len(word) >= MIN_CLOUD_WORD_LENGTH
        )

    return dict(frequencies)
