"""
Module: exporter.output.pptx_renderer

Purpose:
    Render an assembled Deck to PPTX using python-pptx.
    Fractional regions are converted to EMU against the slide size;
    section snapshots are drawn inside their placement rect without
    distortion.

Key Classes:
    - PptxDeckEncoder: DeckEncoder producing PPTX bytes

Dependencies:
    - python-pptx: Presentation generation
    - PIL: Snapshot serialization
    - common.geometry: fit_preserving_aspect, center

Used By:
    - exporter.controller: Export orchestration
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from PIL import Image
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.util import Emu, Inches, Pt

from report_toolkit.common.geometry import center, fit_preserving_aspect
from report_toolkit.core.models import Deck, PlacementRect, Slide, SlideKind, TextRegion

from .encoders import DeckEncoder, EncodingError

logger = logging.getLogger(__name__)

DEFAULT_SLIDE_WIDTH_IN = 10.0
BLANK_LAYOUT_INDEX = 6
TITLE_BACKGROUND = RGBColor(0xF8, 0xF9, 0xFA)


@dataclass(frozen=True)
class TextStyle:
    """Font settings for one text role."""

    size: int
    color: RGBColor
    bold: bool = False
    centered: bool = False


# (slide kind, role) -> style
TEXT_STYLES: Dict[Tuple[SlideKind, str], TextStyle] = {
    (SlideKind.TITLE, "title"): TextStyle(36, RGBColor(0x33, 0x33, 0x33), bold=True, centered=True),
    (SlideKind.TITLE, "subtitle"): TextStyle(24, RGBColor(0x66, 0x66, 0x66), centered=True),
    (SlideKind.TITLE, "caption"): TextStyle(14, RGBColor(0x99, 0x99, 0x99), centered=True),
    (SlideKind.SECTION, "title"): TextStyle(18, RGBColor(0x33, 0x33, 0x33), bold=True),
    (SlideKind.SUMMARY, "title"): TextStyle(24, RGBColor(0x33, 0x33, 0x33), bold=True),
    (SlideKind.SUMMARY, "body"): TextStyle(18, RGBColor(0x33, 0x33, 0x33)),
}
FALLBACK_STYLE = TextStyle(18, RGBColor(0x33, 0x33, 0x33))
BODY_LINE_SPACING = Pt(28)


class PptxDeckEncoder(DeckEncoder):
    """
    DeckEncoder backed by python-pptx.

    Attributes:
        slide_width_inches: Slide width; height follows the deck aspect

    Example:
        >>> pptx_bytes = PptxDeckEncoder().encode(deck)
        >>> pptx_bytes[:2]
        b'PK'
    """

    extension = ".pptx"

    def __init__(self, slide_width_inches: float = DEFAULT_SLIDE_WIDTH_IN) -> None:
        if slide_width_inches <= 0:
            raise ValueError(f"slide_width_inches must be positive: {slide_width_inches}")
        self.slide_width_inches = slide_width_inches

    def encode(self, deck: Deck) -> bytes:
        """Render all slides and return the PPTX bytes."""
        try:
            prs = Presentation()
            prs.slide_width = Inches(self.slide_width_inches)
            prs.slide_height = Inches(self.slide_width_inches / deck.aspect)

            props = prs.core_properties
            props.title = deck.title
            props.subject = deck.subject
            props.author = deck.company

            layout = prs.slide_layouts[BLANK_LAYOUT_INDEX]
            for slide_info in deck.slides:
                slide = prs.slides.add_slide(layout)
                self._render_slide(prs, slide, slide_info)

            buf = io.BytesIO()
            prs.save(buf)
        except EncodingError:
            raise
        except Exception as e:
            raise EncodingError(f"PPTX rendering failed: {e}") from e

        logger.info(f"Rendered {deck.slide_count} slides to PPTX ({buf.tell()} bytes)")
        return buf.getvalue()

    def _render_slide(self, prs, slide, slide_info: Slide) -> None:
        if slide_info.kind is SlideKind.TITLE:
            fill = slide.background.fill
            fill.solid()
            fill.fore_color.rgb = TITLE_BACKGROUND

        for region in slide_info.text_blocks:
            self._render_text(prs, slide, slide_info.kind, region)

        if slide_info.kind is SlideKind.SECTION:
            if slide_info.image is None or slide_info.placement is None:
                raise EncodingError(f"Section slide {slide_info.title!r} has no image")
            self._render_image(prs, slide, slide_info)

    def _rect_to_emu(self, prs, rect: PlacementRect) -> Tuple[int, int, int, int]:
        """Fractional rect to (left, top, width, height) in EMU."""
        width = prs.slide_width
        height = prs.slide_height
        return (
            int(round(rect.x * width)),
            int(round(rect.y * height)),
            int(round(rect.w * width)),
            int(round(rect.h * height)),
        )

    def _render_text(self, prs, slide, kind: SlideKind, region: TextRegion) -> None:
        left, top, width, height = self._rect_to_emu(prs, region.rect)
        style = TEXT_STYLES.get((kind, region.role), FALLBACK_STYLE)

        textbox = slide.shapes.add_textbox(Emu(left), Emu(top), Emu(width), Emu(height))
        text_frame = textbox.text_frame
        text_frame.word_wrap = True
        text_frame.vertical_anchor = MSO_ANCHOR.TOP if region.role == "body" else MSO_ANCHOR.MIDDLE

        for i, line in enumerate(region.paragraphs or [""]):
            paragraph = text_frame.paragraphs[0] if i == 0 else text_frame.add_paragraph()
            paragraph.text = line
            if style.centered:
                paragraph.alignment = PP_ALIGN.CENTER
            if region.role == "body":
                paragraph.line_spacing = BODY_LINE_SPACING
            for run in paragraph.runs:
                run.font.size = Pt(style.size)
                run.font.bold = style.bold
                run.font.color.rgb = style.color

    def _render_image(self, prs, slide, slide_info: Slide) -> None:
        image = slide_info.image
        pixels = image.pixels
        if not isinstance(pixels, Image.Image):
            raise EncodingError(f"Section {slide_info.title!r} has no PIL pixel buffer")

        left, top, width, height = self._rect_to_emu(prs, slide_info.placement)

        # Draw inside the placement rect at the snapshot's true aspect
        fit_w, fit_h = fit_preserving_aspect(image.width, image.height, width, height)
        dx, dy = center(width, height, fit_w, fit_h)

        buf = io.BytesIO()
        pixels.save(buf, format="PNG")
        buf.seek(0)
        slide.shapes.add_picture(
            buf,
            Emu(int(round(left + dx))),
            Emu(int(round(top + dy))),
            width=Emu(int(round(fit_w))),
            height=Emu(int(round(fit_h))),
        )
        logger.debug(
            f"Slide {slide_info.title!r}: picture {fit_w / 914400:.2f}x{fit_h / 914400:.2f} in"
        )
