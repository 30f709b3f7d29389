"""Splitting, trimming and deduplication of raw comment input."""

import logging
from collections.abc import Iterable

from ..models import ParsedBatch

logger = logging.getLogger(__name__)

SINGLE_TOKEN_MAX_LENGTH = 3
SINGLE_TOKEN_WARNING_PERCENT = 40.0


class EmptyInputError(ValueError):
    """Raised when raw input contains no usable comments."""

    pass


def is_single_token(line: str) -> bool:
    """Return True for a trimmed line that is too short or a single word."""
    return len(line) <= SINGLE_TOKEN_MAX_LENGTH or len(line.split()) == 1


def normalize(raw_text: str) -> ParsedBatch:
    """
    Parse raw text into a batch of unique comments.

    Lines are split on newlines and trimmed; empty lines are dropped before
    anything is counted. Deduplication keeps the first occurrence of each
    trimmed line and is case-sensitive.

    Args:
        raw_text: Comments, one per line

    Returns:
        ParsedBatch with unique comments and input statistics

    Raises:
        EmptyInputError: If no non-empty line remains
    """
    lines = [line.strip() for line in raw_text.split("\n")]
    lines = [line for line in lines if line]

    if not lines:
        raise EmptyInputError("No valid comments found in input")

    single_token_count = sum(1 for line in lines if is_single_token(line))
    single_token_percentage = single_token_count * 100 / len(lines)

    # dict keys keep insertion order, so this is a first-seen dedup
    unique_comments = list(dict.fromkeys(lines))

    batch = ParsedBatch(
        comments=unique_comments,
        raw_count=len(lines),
        unique_count=len(unique_comments),
        duplicate_count=len(lines) - len(unique_comments),
        single_token_warning=single_token_percentage > SINGLE_TOKEN_WARNING_PERCENT,
        single_token_percentage=single_token_percentage,
    )

    logger.debug(
        f"Parsed {batch.raw_count} lines into {batch.unique_count} unique comments "
        f"({batch.single_token_percentage:.1f}% single-token)"
    )
    if batch.single_token_warning:
        logger.info(
            f"Detected {batch.single_token_percentage:.1f}% single-word lines, input may be keywords"
        )

    return batch


def normalize_lines(lines: Iterable[str]) -> ParsedBatch:
    """Normalize comments that were already split, e.g. a column of a table."""
    return normalize("\n".join(line for line in lines if line))


def acknowledge_single_tokens(batch: ParsedBatch) -> ParsedBatch:
    """Return a copy of the batch with the single-token warning cleared."""
    return batch.model_copy(update={"single_token_warning": False})
