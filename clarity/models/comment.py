"""Data models for comments and per-comment sentiment results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SentimentLabel(str, Enum):
    """Sentiment classification labels."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class ParsedBatch(BaseModel):
    """Normalized, deduplicated comments parsed from one raw input."""

    model_config = ConfigDict(frozen=True)

    comments: list[str] = Field(
        ..., description="Unique trimmed comments in first-seen order"
    )
    raw_count: int = Field(..., ge=0, description="Number of non-empty input lines")
    unique_count: int = Field(..., ge=0, description="Number of distinct comments")
    duplicate_count: int = Field(..., ge=0, description="Lines dropped as duplicates")
    single_token_warning: bool = Field(
        ..., description="True when too many lines look like single keywords"
    )
    single_token_percentage: float = Field(
        ..., ge=0.0, le=100.0, description="Share of single-token lines in percent"
    )

    @model_validator(mode="after")
    def check_counts(self) -> "ParsedBatch":
        if self.unique_count != len(self.comments):
            raise ValueError("unique_count must equal the number of comments")
        if self.unique_count > self.raw_count:
            raise ValueError("unique_count cannot exceed raw_count")
        if self.duplicate_count != self.raw_count - self.unique_count:
            raise ValueError("duplicate_count must equal raw_count - unique_count")
        return self


class SentimentScore(BaseModel):
    """Sentiment label and confidence for a single text."""

    model_config = ConfigDict(frozen=True)

    sentiment: SentimentLabel = Field(..., description="Sentiment classification")
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Classifier confidence between 0 and 1"
    )


class ClassificationResult(BaseModel):
    """Sentiment analysis result and keywords for one unique comment."""

    model_config = ConfigDict(frozen=True)

    comment: str = Field(..., description="Content of the comment")
    sentiment: SentimentLabel = Field(..., description="Sentiment classification")
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Classifier confidence between 0 and 1"
    )
    keywords: list[str] = Field(
        default_factory=list, max_length=5, description="Up to five ranked keywords"
    )
