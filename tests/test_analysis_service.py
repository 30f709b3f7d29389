"""Unit tests for AnalysisService."""

from unittest.mock import patch

import pytest

from clarity.config import settings
from clarity.models import AnalysisSummary, SentimentLabel, WordCloud
from clarity.sentiment import SentimentAnalyzer
from clarity.sentiment.lexicon import Lexicon
from clarity.services.analysis_service import AnalysisService
from clarity.text import EmptyInputError
from clarity.utils import InMemoryCache
from clarity.wordcloud import InvalidCanvasError, LayoutOptions, word_frequencies

COMMENTS = [
    "The nurses were friendly and helpful",
    "Waiting times were terrible and the parking is expensive",
    "I visited on a Tuesday",
    "Clean rooms, great food, friendly staff",
    "Billing was confusing but the doctor was excellent",
]


class TestAnalysisService:
    """Test suite for AnalysisService class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = AnalysisService(store=InMemoryCache())

    def test_end_to_end_example(self):
        """Test the good/bad/neutral example through parse and analysis."""
        batch = self.service.parse_text("good\nbad\nneutral comment here\ngood")
        summary = self.service.run_analysis(batch.comments)

        assert batch.raw_count == 4
        assert batch.unique_count == 3
        assert batch.duplicate_count == 1
        assert [r.sentiment for r in summary.results] == [
            SentimentLabel.POSITIVE,
            SentimentLabel.NEGATIVE,
            SentimentLabel.NEUTRAL,
        ]
        assert summary.sentiment_counts.positive == 1
        assert summary.sentiment_counts.negative == 1
        assert summary.sentiment_counts.neutral == 1
        assert summary.satisfaction_score == 50.0

    def test_run_analysis_ignores_duplicates(self):
        """Test that duplicates are analyzed once but counted in totals."""
        summary = self.service.run_analysis(["great place", "great place", "awful queue"])

        assert summary.total_comments == 3
        assert summary.unique_comments == 2
        assert summary.duplicates_ignored == 1
        assert [r.comment for r in summary.results] == ["great place", "awful queue"]

    def test_run_analysis_records_model(self):
        """Test that the model id defaults to the configured one."""
        default = self.service.run_analysis(["fine"])
        custom = self.service.run_analysis(["fine"], model_id="custom-lexicon")

        assert default.model_id == settings.default_model_id
        assert custom.model_id == "custom-lexicon"

    def test_run_analysis_with_custom_lexicon(self):
        """Test running an analysis with injected word lists."""
        lexicon = Lexicon.from_words(positive=["tuesday"], negative=[])
        summary = self.service.run_analysis(["I visited on a Tuesday"], lexicon=lexicon)

        assert summary.results[0].sentiment == SentimentLabel.POSITIVE

    def test_run_analysis_stores_summary(self):
        """Test that finished analyses can be retrieved by job id."""
        summary = self.service.run_analysis(COMMENTS)

        assert self.service.get_analysis(summary.job_id) == summary
        assert self.service.get_analysis("job_unknown") is None

    def test_parallel_matches_sequential(self):
        """Test that the worker pool classifies every comment and keeps input order."""
        comments = [f"comment number {i} is {'great' if i % 3 else 'awful'}" for i in range(40)]
        pool_cache = InMemoryCache()

        with patch(
            "clarity.services.analysis_service.sentiment_analyzer",
            SentimentAnalyzer(cache=pool_cache),
        ), patch.object(settings, "parallel_threshold", 1), patch.object(
            settings, "analysis_workers", 4
        ):
            parallel = self.service.run_analysis(comments)

        with patch(
            "clarity.services.analysis_service.sentiment_analyzer",
            SentimentAnalyzer(cache=InMemoryCache()),
        ):
            sequential = self.service.run_analysis(comments)

        assert len(pool_cache) == len(comments)
        assert [r.comment for r in parallel.results] == comments
        assert parallel.results == sequential.results
        assert parallel.satisfaction_score == sequential.satisfaction_score

    def test_build_word_cloud_zero_max_words(self):
        """Test that an explicit zero word limit lays out nothing."""
        summary = self.service.run_analysis(COMMENTS)

        cloud = self.service.build_word_cloud(summary, 800, 400, max_words=0)

        assert cloud.words == []
        assert cloud.skipped == []

    def test_analyze_text(self):
        """Test analyzing pasted text keeps raw totals."""
        summary = self.service.analyze_text("good\nbad\n\ngood\n")

        assert summary.total_comments == 3
        assert summary.unique_comments == 2
        assert summary.duplicates_ignored == 1
        assert self.service.get_analysis(summary.job_id).total_comments == 3

    def test_analyze_lines(self):
        """Test analyzing a list of comments trims and deduplicates them."""
        summary = self.service.analyze_lines([" good ", "good", "", "bad"])

        assert summary.total_comments == 3
        assert summary.unique_comments == 2

    def test_analyze_text_empty(self):
        """Test that empty text raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            self.service.analyze_text("\n \n")


class TestFilterResults:
    """Test suite for filtering and sorting analysis results."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = AnalysisService(store=InMemoryCache())
        self.summary = self.service.run_analysis(COMMENTS)

    def test_no_filters_keeps_input_order(self):
        results = self.service.filter_results(self.summary)

        assert [r.comment for r in results] == COMMENTS

    def test_filter_by_sentiment(self):
        """Test keeping one sentiment label."""
        results = self.service.filter_results(self.summary, sentiment="negative")

        assert results
        assert all(r.sentiment == SentimentLabel.NEGATIVE for r in results)

    def test_filter_all_sentiments(self):
        results = self.service.filter_results(self.summary, sentiment="all")

        assert len(results) == len(COMMENTS)

    def test_search_matches_comment_and_keywords(self):
        """Test case-insensitive search over comments and keywords."""
        results = self.service.filter_results(self.summary, search="FRIENDLY")

        assert [r.comment for r in results] == [COMMENTS[0], COMMENTS[3]]

    def test_sort_by_confidence(self):
        results = self.service.filter_results(self.summary, sort_by="confidence")

        confidences = [r.confidence for r in results]
        assert confidences == sorted(confidences, reverse=True)

    def test_sort_by_length(self):
        results = self.service.filter_results(self.summary, sort_by="length")

        assert results[0].comment == COMMENTS[1]

    def test_sort_by_sentiment(self):
        results = self.service.filter_results(self.summary, sort_by="sentiment")

        labels = [r.sentiment.value for r in results]
        assert labels == sorted(labels)

    def test_invalid_sort(self):
        """Test that unknown sort fields are rejected."""
        with pytest.raises(ValueError, match="sort_by must be one of"):
            self.service.filter_results(self.summary, sort_by="invalid")

    def test_invalid_sentiment(self):
        """Test that unknown sentiment labels are rejected."""
        with pytest.raises(ValueError, match="sentiment must be"):
            self.service.filter_results(self.summary, sentiment="happy")


class TestBuildWordCloud:
    """Test suite for word cloud building."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = AnalysisService(store=InMemoryCache())
        self.summary = self.service.run_analysis(COMMENTS)

    def test_build_word_cloud(self):
        """Test building a word cloud from an analysis."""
        cloud = self.service.build_word_cloud(self.summary, 800, 400)

        assert isinstance(cloud, WordCloud)
        assert cloud.width == 800
        assert cloud.height == 400
        assert cloud.words
        assert cloud.words[0].text == "friendly"
        assert len(cloud.words) + len(cloud.skipped) == len(word_frequencies(self.summary))

    def test_default_canvas_from_settings(self):
        cloud = self.service.build_word_cloud(self.summary)

        assert cloud.width == settings.wordcloud_width
        assert cloud.height == settings.wordcloud_height

    def test_word_cloud_is_reproducible(self):
        """Test that the configured seed makes layouts repeatable."""
        first = self.service.build_word_cloud(self.summary, 640, 320)
        second = self.service.build_word_cloud(self.summary, 640, 320)

        assert first == second

    def test_max_words(self):
        cloud = self.service.build_word_cloud(self.summary, 800, 400, max_words=5)

        assert len(cloud.words) + len(cloud.skipped) == 5

    def test_custom_options(self):
        options = LayoutOptions(rotate_ratio=0.0, palette=("#000000",))
        cloud = self.service.build_word_cloud(self.summary, 800, 400, options=options)

        assert cloud.palette == ["#000000"]
        assert all(word.rotation_deg == 0 for word in cloud.words)

    def test_invalid_canvas(self):
        """Test that a zero-sized canvas is a configuration error."""
        with pytest.raises(InvalidCanvasError):
            self.service.build_word_cloud(self.summary, 0, 400)


class TestWordFrequencies:
    """Test suite for word_frequencies."""

    def test_merges_keywords_and_long_words(self):
        """Test that keywords and words longer than three characters both count."""
        summary = AnalysisService(store=InMemoryCache()).run_analysis(
            ["Friendly staff, friendly nurses", "The staff were slow"]
        )

        frequencies = word_frequencies(summary)

        # keyword once per comment plus each occurrence in the comment text
        assert frequencies["friendly"] == 3
        assert frequencies["staff"] == 4
        assert frequencies["slow"] == 2
        assert "the" not in frequencies

    def test_accepts_result_list(self):
        summary = AnalysisService(store=InMemoryCache()).run_analysis(["lovely garden views"])

        assert word_frequencies(summary.results) == word_frequencies(summary)

    def test_empty_summary_type(self):
        assert isinstance(word_frequencies([]), dict)
        assert word_frequencies([]) == {}


def test_summary_type():
    """Test that run_analysis returns an AnalysisSummary."""
    summary = AnalysisService(store=InMemoryCache()).run_analysis(["fine"])

    assert isinstance(summary, AnalysisSummary)
