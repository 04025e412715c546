"""
Module: core.models.placement

Purpose:
    Fractional rectangles used by slide layouts. Coordinates are
    fractions of the container (0.0 = left/top edge, 1.0 = right/bottom).

Key Classes:
    - PlacementRect: Where an image is drawn
    - TextRegion: Where a text block is drawn

Used By:
    - exporter.layout.slides: Computes placements
    - exporter.output.pptx_renderer: Converts fractions to EMU
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlacementRect:
    """
    Fractional rectangle inside a container (immutable).

    Attributes:
        x: Left edge as a fraction of container width
        y: Top edge as a fraction of container height
        w: Width as a fraction of container width
        h: Height as a fraction of container height

    Example:
        >>> rect = PlacementRect(x=0.05, y=0.2, w=0.9, h=0.5)
        >>> rect.right
        0.9500000000000001
    """

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        """Right edge (x + w)."""
        return self.x + self.w

    @property
    def bottom(self) -> float:
        """Bottom edge (y + h)."""
        return self.y + self.h

    def contains(self, other: "PlacementRect", tolerance: float = 1e-9) -> bool:
        """Check whether other lies fully inside this rect."""
        return (
            other.x >= self.x - tolerance
            and other.y >= self.y - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )

    def as_percentages(self) -> tuple[float, float, float, float]:
        """(x, y, w, h) scaled to 0-100."""
        return self.x * 100, self.y * 100, self.w * 100, self.h * 100


@dataclass(frozen=True)
class TextRegion:
    """
    Text block positioned inside a container (immutable).

    Attributes:
        rect: Fractional placement of the block
        text: Text to draw (may contain newlines, one paragraph per line)
        role: Styling hint for the encoder ("title", "subtitle", "caption", "body")
    """

    rect: PlacementRect
    text: str
    role: str = "body"

    @property
    def paragraphs(self) -> list[str]:
        """Text split into paragraphs."""
        return self.text.split("\n") if self.text else []
