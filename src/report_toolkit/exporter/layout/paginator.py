"""
Module: exporter.layout.paginator

Purpose:
    Slice one tall snapshot into page-sized bands for the report document.

Key Functions:
    - paginate(): Main pagination function
    - drawable_heights(): Image height available on page 1 and later pages

Algorithm:
    1. Scale the snapshot to the page content width (aspect preserved)
    2. Page 1 takes min(first drawable height, scaled height)
    3. Each later page takes min(other drawable height, remainder)
    4. Stop when the cursor reaches the scaled height

    The loop is a fold over a cursor (offset, page_index); each Page is
    appended only once its crop is final, so the output is a complete
    prefix at every step.

Dependencies:
    - common.geometry: scale_to_width
    - exporter.layout.config: LayoutConfig

Used By:
    - exporter.assembly.document: Document assembly
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

from report_toolkit.common.geometry import InvalidDimension, scale_to_width
from report_toolkit.core.errors import ExportError
from report_toolkit.core.models import Page, RasterImage

from .config import LayoutConfig

logger = logging.getLogger(__name__)


class EmptySnapshot(ExportError):
    """Snapshot scales to zero height; there is nothing to paginate."""
    pass


class _Cursor(NamedTuple):
    offset: float
    page_index: int


@dataclass(frozen=True)
class PaginationResult:
    """
    Pages plus the scaled snapshot size they were cut from.

    Attributes:
        pages: Ordered pages (index 1..N)
        scaled_width: Snapshot width on the page
        scaled_height: Snapshot height on the page
    """

    pages: tuple[Page, ...]
    scaled_width: float
    scaled_height: float

    @property
    def page_count(self) -> int:
        """Number of pages."""
        return len(self.pages)


def drawable_heights(config: LayoutConfig) -> Tuple[float, float]:
    """Image height available on page 1 and on pages 2..N."""
    return config.first_page_drawable_height, config.subsequent_drawable_height


def paginate(image: RasterImage, config: LayoutConfig) -> PaginationResult:
    """
    Cut a snapshot into contiguous page bands.

    Header and footer text are left empty; the document assembler
    fills them in.

    Args:
        image: Captured snapshot
        config: Layout configuration

    Returns:
        PaginationResult with at least one page

    Raises:
        InvalidDimension: If the snapshot width is zero
        EmptySnapshot: If the scaled height is zero

    Example:
        >>> result = paginate(RasterImage(1000, 4000), config)
        >>> [p.image_crop_height for p in result.pages]
        [257, 267, 236]
    """
    if image.width <= 0:
        raise InvalidDimension(
            f"Cannot paginate snapshot of width {image.width}",
            {"width": image.width, "height": image.height},
        )

    scaled_width, scaled_height = scale_to_width(
        image.width, image.height, config.page.content_width
    )
    if scaled_height <= 0:
        raise EmptySnapshot(
            f"Snapshot {image.width}x{image.height} scales to zero height"
        )

    first_drawable, other_drawable = drawable_heights(config)

    pages: List[Page] = []
    cursor = _Cursor(offset=0.0, page_index=1)

    while cursor.offset < scaled_height:
        is_first = cursor.page_index == 1
        drawable = first_drawable if is_first else other_drawable
        header_height = (
            config.first_page_header_height if is_first else config.subsequent_header_height
        )

        remaining = scaled_height - cursor.offset
        if remaining <= drawable:
            # Final band takes exactly the remainder
            crop_height = remaining
            next_offset = scaled_height
        else:
            crop_height = drawable
            next_offset = cursor.offset + drawable

        pages.append(Page(
            index=cursor.page_index,
            header_text="",
            drawable_height=drawable,
            image_crop_top=cursor.offset,
            image_crop_height=crop_height,
            footer_text="",
            header_height=header_height,
            image_top=header_height,
        ))
        logger.debug(
            f"Page {cursor.page_index}: crop {cursor.offset:.2f}+{crop_height:.2f} "
            f"of {scaled_height:.2f}"
        )
        cursor = _Cursor(offset=next_offset, page_index=cursor.page_index + 1)

    logger.info(
        f"Paginated {image.width}x{image.height} snapshot "
        f"({scaled_height:.1f} units tall) onto {len(pages)} pages"
    )

    return PaginationResult(
        pages=tuple(pages),
        scaled_width=scaled_width,
        scaled_height=scaled_height,
    )
