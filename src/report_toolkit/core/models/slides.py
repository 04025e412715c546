"""
Module: core.models.slides

Purpose:
    Data models for the presentation deck.

Key Classes:
    - SlideKind: TITLE / SECTION / SUMMARY
    - Slide: One slide (title, optional image placement, optional bullets)
    - Deck: Ordered slides plus presentation properties

Used By:
    - exporter.assembly.deck: Creates the Deck
    - exporter.output.pptx_renderer: Encodes the Deck
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .placement import PlacementRect, TextRegion
from .raster import RasterImage


class SlideKind(Enum):
    """Role of a slide within the deck."""

    TITLE = "title"
    SECTION = "section"
    SUMMARY = "summary"


@dataclass(frozen=True)
class Slide:
    """
    Layout of a single slide (immutable).

    Attributes:
        kind: Slide role
        title: Slide title (section label verbatim for SECTION slides)
        placement: Image rectangle (SECTION only)
        bullets: Bullet points (SUMMARY only)
        image: Snapshot drawn at placement (SECTION only)
        text_blocks: Text regions in drawing order, including the title
    """

    kind: SlideKind
    title: Optional[str] = None
    placement: Optional[PlacementRect] = None
    bullets: Optional[tuple[str, ...]] = None
    image: Optional[RasterImage] = None
    text_blocks: tuple[TextRegion, ...] = ()


@dataclass(frozen=True)
class Deck:
    """
    Assembled presentation, ready for a DeckEncoder.

    Attributes:
        title: Presentation title property
        subject: Presentation subject property
        company: Company property
        slides: Ordered slides
        aspect: Slide width / height
    """

    title: str
    subject: str
    company: str
    slides: tuple[Slide, ...]
    aspect: float

    @property
    def slide_count(self) -> int:
        """Number of slides."""
        return len(self.slides)

    @property
    def section_slides(self) -> tuple[Slide, ...]:
        """Slides showing captured sections."""
        return tuple(s for s in self.slides if s.kind is SlideKind.SECTION)
