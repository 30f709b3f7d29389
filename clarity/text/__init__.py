"""Text normalization and keyword extraction package."""

from .keywords import extract_keywords, tokenize
from .normalizer import EmptyInputError, acknowledge_single_tokens, normalize, normalize_lines
from .samples import DEMO_COMMENTS, demo_text

__all__ = [
    "DEMO_COMMENTS",
    "EmptyInputError",
    "acknowledge_single_tokens",
    "demo_text",
    "extract_keywords",
    "normalize",
    "normalize_lines",
    "tokenize",
]
