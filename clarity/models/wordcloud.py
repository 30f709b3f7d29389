"""Data models for word cloud layouts."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PlacedWord(BaseModel):
    """A word glyph positioned on the word cloud canvas."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="The word")
    frequency: int = Field(..., ge=1, description="Occurrences in the frequency map")
    font_size_px: int = Field(..., ge=1, description="Font size in pixels")
    x: float = Field(..., description="Horizontal centre of the glyph box")
    y: float = Field(..., description="Vertical centre of the glyph box")
    width: int = Field(..., ge=1, description="Bounding box width after rotation")
    height: int = Field(..., ge=1, description="Bounding box height after rotation")
    rotation_deg: Literal[0, 90] = Field(0, description="Rotation in degrees")
    color_index: int = Field(..., ge=0, description="Index into the palette")
    color: str = Field(..., description="Palette colour")

    def bounds(self) -> tuple[float, float, float, float]:
        """Return the glyph bounding box as (left, top, right, bottom)."""
        left = self.x - self.width / 2
        top = self.y - self.height / 2
        return left, top, left + self.width, top + self.height


class WordCloud(BaseModel):
    """Placed words for one canvas."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=1, description="Canvas width in pixels")
    height: int = Field(..., ge=1, description="Canvas height in pixels")
    words: list[PlacedWord] = Field(
        default_factory=list, description="Placed words, largest first"
    )
    skipped: list[str] = Field(
        default_factory=list, description="Words that could not be placed"
    )
    palette: list[str] = Field(default_factory=list, description="Colour palette")
