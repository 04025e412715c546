"""
Module: core.models.pages

Purpose:
    Data models for the paginated report document.
    Immutable dataclasses describing each sheet's chrome and the slice
    of the scaled snapshot it shows.

Key Classes:
    - PageHeader: Title and metadata lines in a page's header band
    - Page: One sheet of the document
    - Document: Ordered pages plus the source snapshot

Dependencies:
    - dataclasses (std)
    - core.models.raster: RasterImage

Used By:
    - exporter.layout.paginator: Creates Pages
    - exporter.assembly.document: Creates the Document
    - exporter.output.pdf_renderer: Encodes the Document
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .raster import RasterImage


@dataclass(frozen=True)
class PageHeader:
    """
    Header band content.

    Attributes:
        title: Report title (full on page 1, repeated on later pages)
        details: Metadata lines, only populated on page 1
            (generated date, period, company)
    """

    title: str
    details: tuple[str, ...] = ()

    @property
    def is_full(self) -> bool:
        """True for the first-page header carrying metadata."""
        return bool(self.details)


@dataclass(frozen=True)
class Page:
    """
    Layout of a single document page (immutable).

    All lengths are in page units (millimetres for A4). The crop
    describes a band of the snapshot after it was scaled to the page
    content width.

    Attributes:
        index: Page number (1-based)
        header_text: Text of the header title line
        drawable_height: Height available for the image on this page
        image_crop_top: Offset of this page's band in the scaled image
        image_crop_height: Height of this page's band
        footer_text: Constant footer line
        header: Full header content (title + metadata)
        header_height: Height of the filled header band
        image_top: Y position where the band is drawn on the sheet
        page_label: Page number label, e.g. "Page 2"

    Example:
        >>> page = Page(index=1, header_text="Report", drawable_height=257,
        ...             image_crop_top=0, image_crop_height=200, footer_text="")
        >>> page.image_crop_bottom
        200
    """

    index: int
    header_text: str
    drawable_height: float
    image_crop_top: float
    image_crop_height: float
    footer_text: str
    header: Optional[PageHeader] = None
    header_height: float = 0.0
    image_top: float = 0.0
    page_label: str = ""

    @property
    def image_crop_bottom(self) -> float:
        """End of this page's band in the scaled image."""
        return self.image_crop_top + self.image_crop_height

    @property
    def is_first(self) -> bool:
        """Whether this is the first page."""
        return self.index == 1


@dataclass(frozen=True)
class Document:
    """
    Assembled paginated document, ready for a DocumentEncoder.

    Attributes:
        title: Report title
        pages: Ordered pages (page 1 first)
        source: Snapshot the pages crop from
        scaled_width: Snapshot width after scaling to content width
        scaled_height: Snapshot height after scaling
        page_width: Sheet width
        page_height: Sheet height
        margin: Left/right margin where the image is drawn
        metadata: Free-form document properties (author, subject, ...)
    """

    title: str
    pages: tuple[Page, ...]
    source: RasterImage
    scaled_width: float
    scaled_height: float
    page_width: float
    page_height: float
    margin: float
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        """Number of pages."""
        return len(self.pages)

    @property
    def scale(self) -> float:
        """Page units per source pixel."""
        return self.scaled_width / self.source.width
