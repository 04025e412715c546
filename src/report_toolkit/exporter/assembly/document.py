"""
Module: exporter.assembly.document

Purpose:
    Turn pagination output into a complete Document: page 1 gets the
    full header (title, generation time, period, company), later pages
    a short title header, and every page the footer and page label.

Key Functions:
    - assemble_document(): Main entry point
    - first_page_header(): Page-1 header content

Dependencies:
    - exporter.layout: paginate, LayoutConfig
    - exporter.config: ExportConfig

Used By:
    - exporter.controller: Export orchestration
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from report_toolkit.core.models import Document, PageHeader, RasterImage

from ..config import ExportConfig
from ..layout import paginate
from .metadata import generated_on

logger = logging.getLogger(__name__)


def first_page_header(config: ExportConfig, moment: datetime) -> PageHeader:
    """Title plus generated/period/company lines."""
    return PageHeader(
        title=config.title,
        details=(
            generated_on(moment),
            f"Period: {config.report_period}",
            f"Company: {config.company}",
        ),
    )


def assemble_document(
    image: RasterImage,
    config: ExportConfig,
    *,
    generated_at: Optional[datetime] = None,
) -> Document:
    """
    Paginate a snapshot and attach header/footer chrome.

    Does not encode anything; the returned Document is handed to a
    DocumentEncoder by the caller.

    Args:
        image: Snapshot to paginate
        config: Export configuration (metadata + layout)
        generated_at: Timestamp for the page-1 header (default: config/now)

    Returns:
        Document with pages 1..N

    Raises:
        InvalidDimension: If the snapshot has zero width
        EmptySnapshot: If the snapshot has zero height

    Example:
        >>> document = assemble_document(snapshot, ExportConfig())
        >>> document.pages[0].header.details[1]
        'Period: Q1 2023'
    """
    moment = generated_at or config.resolve_timestamp()
    pagination = paginate(image, config.layout)

    full_header = first_page_header(config, moment)
    short_header = PageHeader(title=config.title)

    pages = tuple(
        replace(
            page,
            header_text=config.title,
            header=full_header if page.is_first else short_header,
            footer_text=config.footer_text,
            page_label=f"Page {page.index}",
        )
        for page in pagination.pages
    )

    logger.info(f"Assembled document {config.title!r} with {len(pages)} pages")

    page_size = config.layout.page
    return Document(
        title=config.title,
        pages=pages,
        source=image,
        scaled_width=pagination.scaled_width,
        scaled_height=pagination.scaled_height,
        page_width=page_size.width,
        page_height=page_size.height,
        margin=page_size.margin,
        metadata={
            "title": config.title,
            "subject": config.subject,
            "author": config.company,
        },
    )
