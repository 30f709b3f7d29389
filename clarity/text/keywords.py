"""Frequency-ranked keyword extraction for single comments."""

import re
from collections import Counter
from collections.abc import Set

MAX_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Lowercase text, replace punctuation with spaces and split on whitespace."""
    return _NON_WORD.sub(" ", text.lower()).split()


def extract_keywords(
    comment: str, stopwords: Set[str], limit: int = MAX_KEYWORDS
) -> list[str]:
    """
    Extract the most frequent non-stopword tokens from a comment.

    Tokens shorter than three characters are ignored. Ties in frequency keep
    the order in which the tokens first appear.

    Args:
        comment: The comment text
        stopwords: Lowercase words to ignore
        limit: Maximum number of keywords to return

    Returns:
        Up to ``limit`` distinct keywords, most frequent first
    """
    tokens = [
        token
        for token in tokenize(comment)
        if len(token) >= MIN_KEYWORD_LENGTH and token not in stopwords
    ]
    # most_common sorts stably, so equal counts stay in first-seen order
    return [word for word, _ in Counter(tokens).most_common(limit)]
