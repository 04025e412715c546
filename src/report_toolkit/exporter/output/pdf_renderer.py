"""
Module: exporter.output.pdf_renderer

Purpose:
    Render an assembled Document to PDF using ReportLab.
    Each Page becomes one PDF page: grey header band with title (and
    metadata on page 1), the page's band of the snapshot, a page label
    and the footer line.

Key Classes:
    - PdfDocumentEncoder: DocumentEncoder producing PDF bytes

Dependencies:
    - reportlab: PDF generation
    - PIL: Band cropping
    - exporter.images: band_to_pixel_rows, crop_band

Used By:
    - exporter.controller: Export orchestration
"""

from __future__ import annotations

import io
import logging

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from report_toolkit.core.models import Document, Page

from ..images import band_to_pixel_rows, crop_band
from .encoders import DocumentEncoder, EncodingError

logger = logging.getLogger(__name__)

# Encoder precision for coordinates, in points
COORD_DECIMALS = 3

HEADER_FILL_RGB = (240, 240, 240)
TITLE_RGB = (40, 40, 40)
META_RGB = (100, 100, 100)
FOOTER_RGB = (150, 150, 150)

FIRST_TITLE_FONT_SIZE = 18
TITLE_FONT_SIZE = 14
META_FONT_SIZE = 10
FOOTER_FONT_SIZE = 8

# Text baselines and right-anchored columns, in mm from the top-left corner
TITLE_BASELINE_MM = 15
META_BASELINE_MM = 25
PERIOD_RIGHT_OFFSET_MM = 50
COMPANY_RIGHT_OFFSET_MM = 60
PAGE_LABEL_RIGHT_OFFSET_MM = 30
# Footer baseline; must leave room for glyphs inside the trailing margin
FOOTER_BOTTOM_OFFSET_MM = 5


def _fill(c: canvas.Canvas, rgb: tuple[int, int, int]) -> None:
    c.setFillColorRGB(*(v / 255 for v in rgb))


def _pt(value_mm: float) -> float:
    """Millimetres to points, rounded to encoder precision."""
    return round(value_mm * mm, COORD_DECIMALS)


class PdfDocumentEncoder(DocumentEncoder):
    """
    DocumentEncoder backed by ReportLab.

    Page units of the Document are millimetres; all top-down positions
    are flipped to PDF's bottom-up coordinates here.

    Example:
        >>> pdf_bytes = PdfDocumentEncoder().encode(document)
        >>> pdf_bytes[:5]
        b'%PDF-'
    """

    extension = ".pdf"

    def encode(self, document: Document) -> bytes:
        """Render all pages and return the PDF bytes."""
        pixels = document.source.pixels
        if not isinstance(pixels, Image.Image):
            raise EncodingError("Document source has no PIL pixel buffer to draw")

        buf = io.BytesIO()
        page_size = (_pt(document.page_width), _pt(document.page_height))
        try:
            c = canvas.Canvas(buf, pagesize=page_size)
            c.setTitle(document.metadata.get("title", document.title))
            c.setSubject(document.metadata.get("subject", ""))
            c.setAuthor(document.metadata.get("author", ""))

            for page in document.pages:
                self._render_page(c, document, page, pixels)
                c.showPage()

            c.save()
        except EncodingError:
            raise
        except Exception as e:
            raise EncodingError(f"PDF rendering failed: {e}") from e

        logger.info(f"Rendered {document.page_count} pages to PDF ({buf.tell()} bytes)")
        return buf.getvalue()

    def _render_page(
        self,
        c: canvas.Canvas,
        document: Document,
        page: Page,
        pixels: Image.Image,
    ) -> None:
        self._draw_header(c, document, page)
        self._draw_band(c, document, page, pixels)
        self._draw_footer(c, document, page)

    def _draw_header(self, c: canvas.Canvas, document: Document, page: Page) -> None:
        width = document.page_width
        height = document.page_height

        c.saveState()
        _fill(c, HEADER_FILL_RGB)
        c.rect(
            0,
            _pt(height - page.header_height),
            _pt(width),
            _pt(page.header_height),
            stroke=0,
            fill=1,
        )

        font_size = FIRST_TITLE_FONT_SIZE if page.is_first else TITLE_FONT_SIZE
        c.setFont("Helvetica-Bold", font_size)
        _fill(c, TITLE_RGB)
        c.drawString(_pt(document.margin), _pt(height - TITLE_BASELINE_MM), page.header_text)

        header = page.header
        if header is not None and header.is_full:
            c.setFont("Helvetica", META_FONT_SIZE)
            _fill(c, META_RGB)
            generated, period, company = (list(header.details) + ["", "", ""])[:3]
            c.drawString(_pt(document.margin), _pt(height - META_BASELINE_MM), generated)
            c.drawString(
                _pt(width - PERIOD_RIGHT_OFFSET_MM), _pt(height - META_BASELINE_MM), period
            )
            c.drawString(
                _pt(width - COMPANY_RIGHT_OFFSET_MM), _pt(height - TITLE_BASELINE_MM), company
            )
        c.restoreState()

    def _draw_band(
        self,
        c: canvas.Canvas,
        document: Document,
        page: Page,
        pixels: Image.Image,
    ) -> None:
        top_row, bottom_row = band_to_pixel_rows(
            page.image_crop_top,
            page.image_crop_height,
            document.scale,
            document.source.height,
        )
        band = crop_band(pixels, top_row, bottom_row)

        # Top-down sheet position to bottom-up PDF position
        y_mm = document.page_height - page.image_top - page.image_crop_height
        c.drawImage(
            _pil_to_reader(band),
            _pt(document.margin),
            _pt(y_mm),
            width=_pt(document.scaled_width),
            height=_pt(page.image_crop_height),
        )
        logger.debug(
            f"Page {page.index}: rows {top_row}-{bottom_row} drawn at "
            f"{page.image_top:.2f}mm, {page.image_crop_height:.2f}mm tall"
        )

    def _draw_footer(self, c: canvas.Canvas, document: Document, page: Page) -> None:
        width = document.page_width
        baseline = _pt(FOOTER_BOTTOM_OFFSET_MM)

        c.saveState()
        c.setFont("Helvetica", META_FONT_SIZE)
        _fill(c, META_RGB)
        c.drawString(_pt(width - PAGE_LABEL_RIGHT_OFFSET_MM), baseline, page.page_label)

        c.setFont("Helvetica-Oblique", FOOTER_FONT_SIZE)
        _fill(c, FOOTER_RGB)
        c.drawString(_pt(document.margin), baseline, page.footer_text)
        c.restoreState()


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)
