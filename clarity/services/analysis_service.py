"""Service layer for comment analysis and word cloud operations."""

import logging
from collections.abc import Sequence, Set
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..config import settings
from ..models import AnalysisSummary, ClassificationResult, ParsedBatch, SentimentLabel, WordCloud
from ..sentiment import (
    DEFAULT_LEXICON,
    DEFAULT_STOPWORDS,
    Lexicon,
    SentimentAnalyzer,
    aggregate,
    sentiment_analyzer,
)
from ..text import normalize, normalize_lines
from ..utils import InMemoryCache, analysis_store
from ..wordcloud import LayoutOptions, WordCloudLayout, word_frequencies

logger = logging.getLogger(__name__)

SORT_FIELDS = ("confidence", "sentiment", "length")


class AnalysisService:
    """Service for running analyses and building word clouds."""

    def __init__(self, store: InMemoryCache | None = None):
        """Initialize the analysis service."""
        self.store = store if store is not None else analysis_store

    def parse_text(self, raw_text: str) -> ParsedBatch:
        """
        Parse pasted text into unique comments.

        Raises:
            EmptyInputError: If the text holds no non-empty line
        """
        return normalize(raw_text)

    def _classify_comments(
        self, comments: Sequence[str], analyzer: SentimentAnalyzer
    ) -> list[ClassificationResult]:
        """
        Classify comments, fanning out over a worker pool for large batches.

        Every comment owns a slot in a pre-sized list, so results come back
        in input order regardless of completion order.
        """
        if len(comments) < settings.parallel_threshold or settings.analysis_workers <= 1:
            return [analyzer.analyze_comment(comment) for comment in comments]

        slots: list[ClassificationResult | None] = [None] * len(comments)

        with ThreadPoolExecutor(max_workers=settings.analysis_workers) as executor:
            future_to_index = {
                executor.submit(analyzer.analyze_comment, comment): index
                for index, comment in enumerate(comments)
            }
            for future in as_completed(future_to_index):
                slots[future_to_index[future]] = future.result()

        missing = [index for index, result in enumerate(slots) if result is None]
        if missing:
            raise RuntimeError(f"Classification incomplete, {len(missing)} comments missing")

        return slots

    def run_analysis(
        self,
        comments: Sequence[str],
        lexicon: Lexicon = DEFAULT_LEXICON,
        stopwords: Set[str] = DEFAULT_STOPWORDS,
        model_id: str | None = None,
    ) -> AnalysisSummary:
        """
        Classify unique comments and aggregate corpus metrics.

        Duplicates are dropped keeping first occurrences; they still count
        towards ``total_comments``.

        Args:
            comments: Comments as delivered by the caller, duplicates included
            lexicon: Positive and negative word sets
            stopwords: Words ignored by keyword extraction
            model_id: Identifier to record, defaults to the configured model

        Returns:
            AnalysisSummary, also stored for retrieval by job id
        """
        model_id = model_id or settings.default_model_id
        unique_comments = list(dict.fromkeys(comments))

        logger.info(
            f"Analyzing {len(unique_comments)} unique of {len(comments)} comments with {model_id}"
        )

        if lexicon is DEFAULT_LEXICON and stopwords is DEFAULT_STOPWORDS:
            analyzer = sentiment_analyzer
        else:
            analyzer = SentimentAnalyzer(lexicon=lexicon, stopwords=stopwords)
        results = self._classify_comments(unique_comments, analyzer)

        summary = aggregate(
            results,
            total_raw=len(comments),
            total_unique=len(unique_comments),
            model_id=model_id,
        )
        self.store.set(summary.job_id, summary, settings.analysis_ttl_seconds)

        logger.info(
            f"Analysis {summary.job_id} complete: satisfaction {summary.satisfaction_score}, "
            f"counts {summary.sentiment_counts.model_dump()}"
        )
        return summary

    def analyze_text(self, raw_text: str, model_id: str | None = None) -> AnalysisSummary:
        """Normalize pasted text and analyze every non-empty line."""
        batch = normalize(raw_text)
        return self._analyze_batch(batch, model_id)

    def analyze_lines(self, lines: Sequence[str], model_id: str | None = None) -> AnalysisSummary:
        """Normalize an already split list of comments and analyze it."""
        batch = normalize_lines(lines)
        return self._analyze_batch(batch, model_id)

    def _analyze_batch(self, batch: ParsedBatch, model_id: str | None) -> AnalysisSummary:
        summary = self.run_analysis(batch.comments, model_id=model_id)
        # run_analysis only sees unique comments, restore the raw totals
        summary = summary.model_copy(
            update={
                "total_comments": batch.raw_count,
                "duplicates_ignored": batch.duplicate_count,
            }
        )
        self.store.set(summary.job_id, summary, settings.analysis_ttl_seconds)
        return summary

    def get_analysis(self, job_id: str) -> AnalysisSummary | None:
        """Return a stored analysis, or None when unknown or expired."""
        return self.store.get(job_id)

    def __validate_filters(self, sentiment: str | None, sort_by: str | None) -> SentimentLabel | None:
        """
        Validate result filter parameters.

        Raises:
            ValueError: If invalid parameters provided
        """
        if sort_by is not None and sort_by not in SORT_FIELDS:
            raise ValueError(f"sort_by must be one of {', '.join(SORT_FIELDS)}, or None")

        if sentiment is None or sentiment == "all":
            return None
        try:
            return SentimentLabel(sentiment)
        except ValueError:
            raise ValueError("sentiment must be 'positive', 'negative', 'neutral' or 'all'")

    def _sort_results(
        self, results: list[ClassificationResult], sort_by: str
    ) -> list[ClassificationResult]:
        """Sort results by confidence (desc), sentiment (alphabetical) or length (desc)."""
        if sort_by == "confidence":
            return sorted(results, key=lambda r: r.confidence, reverse=True)
        if sort_by == "sentiment":
            return sorted(results, key=lambda r: r.sentiment.value)
        return sorted(results, key=lambda r: len(r.comment), reverse=True)

    def filter_results(
        self,
        summary: AnalysisSummary,
        search: str | None = None,
        sentiment: str | None = None,
        sort_by: str | None = None,
    ) -> list[ClassificationResult]:
        """
        Filter and sort the per-comment results of an analysis.

        Args:
            summary: The analysis to read
            search: Case-insensitive text matched against comment and keywords
            sentiment: Label to keep, or 'all'/None for every label
            sort_by: 'confidence', 'sentiment', 'length' or None for input order

        Returns:
            Matching results

        Raises:
            ValueError: If invalid parameters provided
        """
        label = self.__validate_filters(sentiment, sort_by)
        needle = (search or "").lower()

        filtered = [
            result
            for result in summary.results
            if (label is None or result.sentiment == label)
            and (
                needle in result.comment.lower()
                or any(needle in keyword.lower() for keyword in result.keywords)
            )
        ]

        if sort_by is not None:
            return self._sort_results(filtered, sort_by)
        return filtered

    def build_word_cloud(
        self,
        summary: AnalysisSummary,
        canvas_width: int | None = None,
        canvas_height: int | None = None,
        max_words: int | None = None,
        options: LayoutOptions | None = None,
    ) -> WordCloud:
        """
        Lay out the word cloud for an analysis.

        Raises:
            InvalidCanvasError: If a canvas dimension is not positive
        """
        canvas_width = settings.wordcloud_width if canvas_width is None else canvas_width
        canvas_height = settings.wordcloud_height if canvas_height is None else canvas_height
        max_words = settings.wordcloud_max_words if max_words is None else max_words
        options = options or LayoutOptions(
            rotate_ratio=settings.wordcloud_rotate_ratio, seed=settings.wordcloud_seed
        )

        engine = WordCloudLayout(canvas_width, canvas_height, options)
        frequencies = word_frequencies(summary)
        logger.info(f"Building word cloud for {summary.job_id} from {len(frequencies)} words")

        words = engine.run(frequencies, max_words)
        return WordCloud(
            width=canvas_width,
            height=canvas_height,
            words=words,
            skipped=engine.skipped,
            palette=list(options.palette),
        )


# Global service instance
analysis_service = AnalysisService()
