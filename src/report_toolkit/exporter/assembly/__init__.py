"""
Module: exporter.assembly

Purpose:
    Orchestrate layout output into encoder-ready descriptors.

Key Functions:
    - assemble_document(): Snapshot -> Document
    - assemble_deck(): Sections + bullets -> Deck

Used By:
    - exporter.controller: Export orchestration
"""

from .document import assemble_document, first_page_header
from .deck import (
    assemble_deck,
    build_section_slide,
    build_summary_slide,
    build_title_slide,
)
from .metadata import format_report_date, format_report_time, generated_on

__all__ = [
    "assemble_document",
    "first_page_header",
    "assemble_deck",
    "build_section_slide",
    "build_summary_slide",
    "build_title_slide",
    "format_report_date",
    "format_report_time",
    "generated_on",
]
