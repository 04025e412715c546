"""
Module: exporter.assembly.deck

Purpose:
    Build the slide deck: a title slide, one slide per captured
    section in input order, and a summary slide when bullet points
    are supplied.

Key Functions:
    - assemble_deck(): Main entry point
    - build_section_slide(): One section slide

Dependencies:
    - exporter.layout.slides: Placement and text regions
    - exporter.config: ExportConfig

Used By:
    - exporter.controller: Export orchestration
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from report_toolkit.core.models import Deck, RasterImage, Slide, SlideKind

from ..config import ExportConfig
from ..layout import (
    SUMMARY_TITLE,
    SlideLayout,
    place_section_image,
    section_title_region,
    summary_slide_regions,
    title_slide_regions,
)
from .metadata import generated_on

logger = logging.getLogger(__name__)


def build_title_slide(config: ExportConfig, moment: datetime) -> Slide:
    """Opening slide with title, subtitle and generation date."""
    blocks = title_slide_regions(
        config.title,
        config.subtitle,
        generated_on(moment, with_time=False),
        config.layout.slide,
    )
    return Slide(kind=SlideKind.TITLE, title=config.title, text_blocks=blocks)


def build_section_slide(label: str, image: RasterImage, layout: SlideLayout) -> Slide:
    """
    Slide showing one captured section.

    The label becomes the slide title verbatim; escaping is left to
    the encoder.

    Raises:
        InvalidDimension: If the snapshot has a zero dimension
    """
    placement = place_section_image(image.width, image.height, layout)
    return Slide(
        kind=SlideKind.SECTION,
        title=label,
        placement=placement,
        image=image,
        text_blocks=(section_title_region(label, layout),),
    )


def build_summary_slide(bullets: Sequence[str], layout: SlideLayout) -> Slide:
    """Closing slide with one paragraph per bullet."""
    return Slide(
        kind=SlideKind.SUMMARY,
        title=SUMMARY_TITLE,
        bullets=tuple(bullets),
        text_blocks=summary_slide_regions(bullets, layout),
    )


def assemble_deck(
    sections: Sequence[Tuple[str, RasterImage]],
    config: ExportConfig,
    *,
    bullets: Optional[Sequence[str]] = None,
    generated_at: Optional[datetime] = None,
) -> Deck:
    """
    Assemble [title] + [section per pair] + [summary if bullets].

    Sections keep the caller's order; nothing is sorted, so assembling
    the same input twice yields equal decks.

    Args:
        sections: (label, snapshot) pairs in presentation order
        config: Export configuration
        bullets: Summary points (default: config.summary_points)
        generated_at: Timestamp for the title slide (default: config/now)

    Returns:
        Deck ready for a DeckEncoder

    Raises:
        InvalidDimension: If a snapshot has a zero dimension

    Example:
        >>> deck = assemble_deck([("Overview", snapshot)], ExportConfig())
        >>> [s.kind.value for s in deck.slides]
        ['title', 'section']
    """
    moment = generated_at or config.resolve_timestamp()
    points = tuple(config.summary_points if bullets is None else bullets)
    layout = config.layout.slide

    slides: List[Slide] = [build_title_slide(config, moment)]
    for label, image in sections:
        slides.append(build_section_slide(label, image, layout))
    if points:
        slides.append(build_summary_slide(points, layout))

    logger.info(
        f"Assembled deck with {len(slides)} slides "
        f"({len(sections)} sections, summary={'yes' if points else 'no'})"
    )

    return Deck(
        title=config.title,
        subject=config.subject,
        company=config.company,
        slides=tuple(slides),
        aspect=layout.aspect,
    )
