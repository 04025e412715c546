"""
Module: exporter.capture

Purpose:
    Capture abstractions for the export pipeline. Turns caller-supplied
    sections into snapshots, in order, one section at a time (or all at
    once with ordered consumption).

Key Classes:
    - SnapshotCapturer: Abstract async capturer
    - PilImageCapturer / ImageFileCapturer / PdfPageCapturer
    - Section: (label, surface) pair
    - CaptureError / CaptureReason: Capture failures

Key Functions:
    - capture_in_order(): Ordered async capture

Dependencies:
    - PIL: Image handling
    - fitz (PyMuPDF): PDF rasterization

Used By:
    - exporter.controller: Export orchestration
"""

from .provider import (
    CaptureError,
    CaptureReason,
    ImageFileCapturer,
    PdfPageCapturer,
    PilImageCapturer,
    Section,
    SnapshotCapturer,
    parse_pdf_surface,
)
from .ordering import capture_in_order

__all__ = [
    "CaptureError",
    "CaptureReason",
    "ImageFileCapturer",
    "PdfPageCapturer",
    "PilImageCapturer",
    "Section",
    "SnapshotCapturer",
    "capture_in_order",
    "parse_pdf_surface",
]
