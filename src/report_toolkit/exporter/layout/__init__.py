"""
Module: exporter.layout

Purpose:
    Page and slide geometry for report export.
    Converts captured snapshots into page bands and slide placements.

Key Functions:
    - paginate(): Cut a tall snapshot into page bands
    - place_section_image(): Fit a snapshot onto a slide

Key Classes:
    - LayoutConfig: Page size, header bands, slide regions
    - PaginationResult: Pages plus scaled snapshot size

Dependencies:
    - common.geometry: Aspect-preserving fit
    - core.models: Page, PlacementRect, TextRegion

Used By:
    - exporter.assembly: Document and deck assembly
"""

from .config import LayoutConfig, PageSize, SlideLayout
from .paginator import EmptySnapshot, PaginationResult, drawable_heights, paginate
from .slides import (
    SUMMARY_TITLE,
    format_bullets,
    place_section_image,
    section_title_region,
    summary_slide_regions,
    title_slide_regions,
)

__all__ = [
    # Config
    "LayoutConfig",
    "PageSize",
    "SlideLayout",
    # Pagination
    "EmptySnapshot",
    "PaginationResult",
    "drawable_heights",
    "paginate",
    # Slides
    "SUMMARY_TITLE",
    "format_bullets",
    "place_section_image",
    "section_title_region",
    "summary_slide_regions",
    "title_slide_regions",
]
