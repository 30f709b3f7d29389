"""Word cloud frequency and layout package."""

from .frequencies import word_frequencies
from .layout import (
    DEFAULT_PALETTE,
    InvalidCanvasError,
    LayoutOptions,
    PlacementState,
    WordCloudLayout,
    layout,
)

__all__ = [
    "DEFAULT_PALETTE",
    "InvalidCanvasError",
    "LayoutOptions",
    "PlacementState",
    "WordCloudLayout",
    "layout",
    "word_frequencies",
]
