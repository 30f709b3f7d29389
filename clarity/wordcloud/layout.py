"""
Collision-avoiding word cloud layout.

Words are placed largest first. Each word gets a font size on a logarithmic
scale of its frequency, an optional 90 degree rotation, and a bounding box
estimated from its length. The box is then moved along an outward elliptical
spiral from the canvas centre until it neither leaves the canvas nor overlaps
a box placed earlier. When the spiral runs off the canvas the word is shrunk
and retried, or skipped.

Glyph boxes are estimated with a fixed character-width model rather than real
font metrics, so renderers should use a font no wider than
``char_width_ratio`` of its size per character.
"""

import logging
import math
import random
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from ..models import PlacedWord

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORDS = 100

# primary, blue, green, purple, orange, positive, neutral
DEFAULT_PALETTE = (
    "#2563eb",
    "#3b82f6",
    "#10b981",
    "#8b5cf6",
    "#f97316",
    "#22c55e",
    "#64748b",
)


class InvalidCanvasError(ValueError):
    """Raised when the canvas has a non-positive width or height."""

    pass


class PlacementState(str, Enum):
    """Progress of a single word through the placement search."""

    SEARCHING = "searching"
    PLACED = "placed"
    SKIPPED = "skipped"


class LayoutOptions(BaseModel):
    """Tunable parameters of the layout engine."""

    model_config = ConfigDict(frozen=True)

    rotate_ratio: float = Field(0.25, ge=0.0, le=1.0, description="Share of rotated words")
    rotation_steps: int = Field(2, ge=1, le=2, description="1 for horizontal only, 2 for 0/90")
    shrink_to_fit: bool = Field(True, description="Shrink words that do not fit before skipping")
    shrink_factor: float = Field(0.8, gt=0.0, lt=1.0, description="Font scale per shrink retry")
    draw_out_of_bound: bool = Field(False, description="Allow glyphs past the canvas edges")
    ellipticity: float = Field(0.8, gt=0.0, description="Vertical squash of the spiral")
    padding: int = Field(1, ge=0, description="Minimum gap between glyph boxes in pixels")
    char_width_ratio: float = Field(0.6, gt=0.0, description="Glyph width per character / font size")
    line_height_ratio: float = Field(1.2, gt=0.0, description="Glyph height / font size")
    palette: tuple[str, ...] = Field(DEFAULT_PALETTE, min_length=1)
    seed: int | None = Field(None, description="Seed for rotation choices")


class Box(NamedTuple):
    """Axis-aligned rectangle in canvas pixels, right and bottom exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    def overlaps(self, other: "Box", padding: int = 0) -> bool:
        return (
            self.left < other.right + padding
            and other.left < self.right + padding
            and self.top < other.bottom + padding
            and other.top < self.bottom + padding
        )

    def inside(self, width: int, height: int) -> bool:
        return self.left >= 0 and self.top >= 0 and self.right <= width and self.bottom <= height


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def font_range(canvas_width: int) -> tuple[int, int]:
    """Return (min_font_px, max_font_px) for a canvas width."""
    min_font_px = max(10, round_half_up(canvas_width * 0.018))
    max_font_px = max(min_font_px + 10, round_half_up(canvas_width * 0.085))
    return min_font_px, max_font_px


def grid_size_for(canvas_width: int) -> int:
    """Spacing between spiral rings in pixels."""
    return max(8, round_half_up(12 * canvas_width / 1024))


def select_words(frequencies: Mapping[str, int], max_words: int) -> list[tuple[str, int]]:
    """Top ``max_words`` entries by frequency; ties keep mapping order."""
    if max_words <= 0:
        return []
    entries = [(word, count) for word, count in frequencies.items() if count > 0]
    entries.sort(key=lambda entry: entry[1], reverse=True)
    return entries[:max_words]


def scale_font_size(
    frequency: int, min_freq: int, max_freq: int, min_font_px: int, max_font_px: int
) -> int:
    """Map a frequency onto the font range with log compression."""
    if max_freq == min_freq:
        t = 0.5
    else:
        log_min = math.log(min_freq + 1)
        log_max = math.log(max_freq + 1)
        t = (math.log(frequency + 1) - log_min) / (log_max - log_min)
    return round_half_up(min_font_px + t * (max_font_px - min_font_px))


@lru_cache(maxsize=32)
def spiral_offsets(
    canvas_width: int, canvas_height: int, grid_size: int, ellipticity: float
) -> tuple[tuple[float, float], ...]:
    """
    Offsets from the canvas centre along an outward elliptical spiral.

    Ring ``r`` lies ``r * grid_size`` pixels from the centre and is sampled at
    ``8 * r`` evenly spaced angles, so neighbouring samples stay roughly one
    grid step apart. The spiral stops once it has covered half the canvas
    diagonal in both directions.
    """
    half_diagonal = math.hypot(canvas_width, canvas_height) / 2
    max_ring = math.ceil(half_diagonal / (grid_size * min(1.0, ellipticity)))

    offsets = [(0.0, 0.0)]
    for ring in range(1, max_ring + 1):
        radius = ring * grid_size
        steps = 8 * ring
        for step in range(steps):
            theta = 2 * math.pi * step / steps
            offsets.append((radius * math.cos(theta), radius * math.sin(theta) * ellipticity))
    return tuple(offsets)


class WordCloudLayout:
    """Places words on one canvas. Not reusable across canvases."""

    def __init__(
        self,
        canvas_width: int,
        canvas_height: int,
        options: LayoutOptions | None = None,
    ):
        if canvas_width <= 0 or canvas_height <= 0:
            raise InvalidCanvasError(
                f"Canvas dimensions must be positive, got {canvas_width}x{canvas_height}"
            )

        self.width = canvas_width
        self.height = canvas_height
        self.options = options or LayoutOptions()
        self.min_font_px, self.max_font_px = font_range(canvas_width)
        self.grid_size = grid_size_for(canvas_width)

        self._rng = random.Random(self.options.seed)
        self._boxes: list[Box] = []
        self.placed: list[PlacedWord] = []
        self.skipped: list[str] = []

    def _measure(self, text: str, font_size: int, rotation: int) -> tuple[int, int]:
        width = max(1, math.ceil(len(text) * font_size * self.options.char_width_ratio))
        height = max(1, math.ceil(font_size * self.options.line_height_ratio))
        if rotation == 90:
            return height, width
        return width, height

    def _choose_rotation(self) -> int:
        if self.options.rotation_steps < 2:
            return 0
        return 90 if self._rng.random() < self.options.rotate_ratio else 0

    def _collides(self, box: Box) -> bool:
        padding = self.options.padding
        return any(box.overlaps(other, padding) for other in self._boxes)

    def _search(self, box_width: int, box_height: int) -> Box | None:
        """Walk the spiral and return the first free box, or None."""
        if not self.options.draw_out_of_bound and (
            box_width > self.width or box_height > self.height
        ):
            return None

        center_x = self.width / 2
        center_y = self.height / 2
        offsets = spiral_offsets(self.width, self.height, self.grid_size, self.options.ellipticity)

        for dx, dy in offsets:
            left = round_half_up(center_x + dx - box_width / 2)
            top = round_half_up(center_y + dy - box_height / 2)
            box = Box(left, top, left + box_width, top + box_height)

            if not self.options.draw_out_of_bound and not box.inside(self.width, self.height):
                continue
            if not self._collides(box):
                return box

        return None

    def _shrink(self, font_size: int) -> int:
        smaller = round_half_up(font_size * self.options.shrink_factor)
        return max(self.min_font_px, min(font_size - 1, smaller))

    def place(self, text: str, frequency: int, font_size: int) -> PlacementState:
        """Run the placement state machine for one word."""
        rotation = self._choose_rotation()
        state = PlacementState.SEARCHING
        box = None

        while state is PlacementState.SEARCHING:
            box_width, box_height = self._measure(text, font_size, rotation)
            box = self._search(box_width, box_height)

            if box is not None:
                state = PlacementState.PLACED
            elif self.options.shrink_to_fit and font_size > self.min_font_px:
                font_size = self._shrink(font_size)
                logger.debug(f"No room for '{text}', shrinking to {font_size}px")
            else:
                state = PlacementState.SKIPPED

        if state is PlacementState.SKIPPED:
            logger.debug(f"Skipping '{text}': no free position on the canvas")
            self.skipped.append(text)
            return state

        palette = self.options.palette
        color_index = len(self.placed) % len(palette)
        self._boxes.append(box)
        self.placed.append(
            PlacedWord(
                text=text,
                frequency=frequency,
                font_size_px=font_size,
                x=box.left + (box.right - box.left) / 2,
                y=box.top + (box.bottom - box.top) / 2,
                width=box.right - box.left,
                height=box.bottom - box.top,
                rotation_deg=rotation,
                color_index=color_index,
                color=palette[color_index],
            )
        )
        return state

    def run(self, frequencies: Mapping[str, int], max_words: int = DEFAULT_MAX_WORDS) -> list[PlacedWord]:
        """
        Lay out the most frequent words.

        Args:
            frequencies: Word to occurrence count
            max_words: Maximum number of words to consider

        Returns:
            Placed words in placement order (descending frequency)
        """
        words = select_words(frequencies, max_words)
        if not words:
            return []

        counts = [count for _, count in words]
        min_freq, max_freq = min(counts), max(counts)

        # A word never outgrows one ranked above it, even after that one shrank
        size_ceiling = self.max_font_px
        for text, frequency in words:
            font_size = scale_font_size(
                frequency, min_freq, max_freq, self.min_font_px, self.max_font_px
            )
            font_size = min(font_size, size_ceiling)
            if self.place(text, frequency, font_size) is PlacementState.PLACED:
                size_ceiling = self.placed[-1].font_size_px

        logger.info(
            f"Placed {len(self.placed)} of {len(words)} words on a {self.width}x{self.height} canvas"
        )
        if self.skipped:
            logger.warning(f"Skipped {len(self.skipped)} words that did not fit the canvas")

        return list(self.placed)


def layout(
    frequencies: Mapping[str, int],
    canvas_width: int,
    canvas_height: int,
    max_words: int = DEFAULT_MAX_WORDS,
    options: LayoutOptions | None = None,
) -> list[PlacedWord]:
    """Place words from a frequency map on a canvas without overlaps."""
    return WordCloudLayout(canvas_width, canvas_height, options).run(frequencies, max_words)
