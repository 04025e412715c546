"""
Module: exporter.layout.slides

Purpose:
    Place snapshots and text blocks on fixed-aspect slides.
    All results are fractional container coordinates.

Key Functions:
    - place_section_image(): Fit a snapshot into the content region
    - section_title_region(): Title band for a section slide
    - title_slide_regions(): Three centered blocks on the title slide
    - summary_slide_regions(): Title + bullet block on the summary slide

Algorithm (section image):
    The snapshot is fitted into the content region with
    fit_preserving_aspect. A width-constrained fit (relatively wide
    image, or an exact aspect tie) is centered vertically in the
    content region; a height-constrained fit sits flush under the
    title band. Both are centered horizontally.

Dependencies:
    - common.geometry: fit_preserving_aspect, center
    - exporter.layout.config: SlideLayout

Used By:
    - exporter.assembly.deck: Deck assembly
"""

from __future__ import annotations

import logging
from typing import Sequence

from report_toolkit.common.geometry import center, fit_preserving_aspect
from report_toolkit.core.models import PlacementRect, TextRegion

from .config import SlideLayout

logger = logging.getLogger(__name__)

SUMMARY_TITLE = "Key Takeaways"


def place_section_image(width: float, height: float, layout: SlideLayout) -> PlacementRect:
    """
    Compute where a section snapshot is drawn on its slide.

    Args:
        width: Snapshot width in pixels
        height: Snapshot height in pixels
        layout: Slide regions

    Returns:
        PlacementRect inside layout.content_region

    Raises:
        InvalidDimension: If width or height is <= 0

    Example:
        >>> place_section_image(500, 2000, SlideLayout())
        PlacementRect(x=0.4125, y=0.2, w=0.175, h=0.7)
    """
    placed_w, placed_h = fit_preserving_aspect(
        width, height, layout.content_width, layout.content_height
    )
    x, y_in_content = center(1.0, layout.content_height, placed_w, placed_h)

    if placed_w >= layout.content_width:
        # Width-constrained: center within the content region
        y = layout.content_top + y_in_content
    else:
        # Height-constrained: flush under the title band
        y = layout.content_top

    logger.debug(
        f"Placed {width}x{height} snapshot at x={x:.4f} y={y:.4f} "
        f"w={placed_w:.4f} h={placed_h:.4f}"
    )
    return PlacementRect(x=x, y=y, w=placed_w, h=placed_h)


def section_title_region(label: str, layout: SlideLayout) -> TextRegion:
    """Title band for a section slide. The label is used verbatim."""
    return TextRegion(rect=layout.title_region, text=label, role="title")


def title_slide_regions(
    title: str,
    subtitle: str,
    generated_on: str,
    layout: SlideLayout,
) -> tuple[TextRegion, ...]:
    """
    Three centered text blocks for the opening slide.

    Blocks sit at layout.title_block_tops (40%, 60%, 80% by default)
    and carry the title, the subtitle and the generation date.
    """
    texts = (title, subtitle, generated_on)
    roles = ("title", "subtitle", "caption")
    return tuple(
        TextRegion(
            rect=PlacementRect(
                x=layout.title_block_x,
                y=top,
                w=layout.title_block_width,
                h=block_height,
            ),
            text=text,
            role=role,
        )
        for text, role, top, block_height in zip(
            texts, roles, layout.title_block_tops, layout.title_block_heights
        )
    )


def format_bullets(bullets: Sequence[str], glyph: str) -> str:
    """One paragraph per bullet, each prefixed with the glyph."""
    return "\n".join(f"{glyph} {point}" for point in bullets)


def summary_slide_regions(
    bullets: Sequence[str],
    layout: SlideLayout,
    *,
    title: str = SUMMARY_TITLE,
) -> tuple[TextRegion, TextRegion]:
    """
    Title band and bullet block for the closing slide.

    An empty bullet list yields an empty body block; the deck assembler
    omits the summary slide in that case.
    """
    return (
        TextRegion(rect=layout.title_region, text=title, role="title"),
        TextRegion(
            rect=layout.summary_region,
            text=format_bullets(bullets, layout.bullet_glyph),
            role="body",
        ),
    )
