"""
Module: exporter.output

Purpose:
    Encoder contracts and the bundled PDF/PPTX encoders.
    Converts assembled Documents and Decks into file bytes.

Key Classes:
    - DocumentEncoder / DeckEncoder: Encoder contracts
    - PdfDocumentEncoder: ReportLab PDF encoder
    - PptxDeckEncoder: python-pptx PPTX encoder
    - EncodingError: Encoder failure

Dependencies:
    - reportlab: PDF generation
    - python-pptx: PPTX generation
    - PIL: Image handling

Used By:
    - exporter.controller: Pipeline orchestration
"""

from .encoders import DeckEncoder, DocumentEncoder, EncodingError
from .pdf_renderer import PdfDocumentEncoder
from .pptx_renderer import PptxDeckEncoder

__all__ = [
    "DeckEncoder",
    "DocumentEncoder",
    "EncodingError",
    "PdfDocumentEncoder",
    "PptxDeckEncoder",
]
