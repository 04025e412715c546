"""
Module: exporter

Purpose:
    Report export pipeline: captures dashboard sections and produces a
    paginated PDF document and a PPTX slide deck from them.

Key Functions:
    - export_report(): Async export entry point
    - run_export(): Synchronous export entry point
    - assemble_document() / assemble_deck(): Layout descriptors only

Key Classes:
    - ExportConfig: Export configuration
    - LayoutConfig: Page and slide geometry
    - ExportResult: Export outcome
    - Section: (label, surface) to capture

Dependencies:
    - PIL: Image manipulation
    - reportlab: PDF encoding
    - python-pptx: PPTX encoding
    - fitz (PyMuPDF): PDF page capture

Used By:
    - report_toolkit.cli: Command-line interface
"""

from .config import DocumentSource, ExportConfig
from .layout import EmptySnapshot, LayoutConfig, PageSize, SlideLayout
from .capture import CaptureError, CaptureReason, Section, SnapshotCapturer
from .assembly import assemble_deck, assemble_document
from .output import DeckEncoder, DocumentEncoder, EncodingError
from .controller import ExportResult, ExportStatus, export_report, run_export

__all__ = [
    # Config
    "DocumentSource",
    "ExportConfig",
    "LayoutConfig",
    "PageSize",
    "SlideLayout",
    # Capture
    "CaptureError",
    "CaptureReason",
    "Section",
    "SnapshotCapturer",
    # Assembly
    "assemble_deck",
    "assemble_document",
    # Output
    "DeckEncoder",
    "DocumentEncoder",
    "EncodingError",
    # Controller
    "EmptySnapshot",
    "ExportResult",
    "ExportStatus",
    "export_report",
    "run_export",
]
