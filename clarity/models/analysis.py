"""Data models for corpus-level analysis requests and summaries."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .comment import ClassificationResult


class SentimentCounts(BaseModel):
    """Number of comments per sentiment label."""

    model_config = ConfigDict(frozen=True)

    positive: int = Field(0, ge=0)
    negative: int = Field(0, ge=0)
    neutral: int = Field(0, ge=0)

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral


class AnalysisSummary(BaseModel):
    """Aggregated sentiment analysis of a batch of comments."""

    model_config = ConfigDict(frozen=True)

    job_id: str = Field(..., description="Identifier used to retrieve the analysis")
    results: list[ClassificationResult] = Field(
        ..., description="Per-comment results in input order"
    )
    total_comments: int = Field(..., ge=0, description="Comments submitted, duplicates included")
    unique_comments: int = Field(..., ge=0, description="Distinct comments analyzed")
    duplicates_ignored: int = Field(..., ge=0, description="Duplicate comments skipped")
    sentiment_counts: SentimentCounts = Field(..., description="Comments per sentiment")
    sentiment_percentages: dict[str, float] = Field(
        default_factory=dict, description="Share of each sentiment in percent"
    )
    satisfaction_score: float = Field(
        ..., ge=0.0, le=100.0, description="Positive plus half of neutral, as a percentage"
    )
    average_confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Mean classifier confidence"
    )
    model_id: str = Field(..., description="Identifier of the classification model used")
    timestamp: datetime = Field(..., description="When the analysis completed (UTC)")

    @model_validator(mode="after")
    def check_counts(self) -> "AnalysisSummary":
        if self.sentiment_counts.total != len(self.results):
            raise ValueError("sentiment counts must add up to the number of results")
        return self


class ParseRequest(BaseModel):
    """Request body for parsing pasted text."""

    text: str = Field(..., description="Comments, one per line")


class AnalysisRequest(BaseModel):
    """Request body for running an analysis."""

    comments: list[str] | None = Field(
        None, description="Comments as a flat list, e.g. a selected CSV column"
    )
    text: str | None = Field(None, description="Comments pasted as text, one per line")
    use_demo: bool = Field(False, description="Analyze the built-in demo comments instead")
    model_id: str | None = Field(None, description="Model identifier to record")

    @model_validator(mode="after")
    def check_source(self) -> "AnalysisRequest":
        if not self.use_demo and self.comments is None and self.text is None:
            raise ValueError("Either 'comments', 'text' or 'use_demo' must be provided")
        return self
