"""
Module: exporter.capture.provider

Purpose:
    Abstract interface for turning dashboard surfaces into snapshots.
    The exporter only ever sees RasterImages; how a surface is
    rasterized is up to the capturer implementation.

Key Classes:
    - SnapshotCapturer: Abstract async capturer
    - PilImageCapturer: Surfaces are in-memory PIL images
    - ImageFileCapturer: Surfaces are PNG/JPEG paths
    - PdfPageCapturer: Surfaces are pages of a pre-rendered PDF
    - CaptureError: Capture failure with a reason
    - Section: Label + surface pair requested by the caller

Dependencies:
    - PIL: Image loading and resizing
    - fitz (PyMuPDF): PDF page rasterization
    - asyncio (std): Blocking loads run in the default executor

Used By:
    - exporter.capture.ordering: In-order capture
    - exporter.controller: Export orchestration
    - cli: Surface resolution
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import fitz
from PIL import Image, UnidentifiedImageError

from report_toolkit.core.errors import ExportError
from report_toolkit.core.models import RasterImage

logger = logging.getLogger(__name__)


class CaptureReason(Enum):
    """Why a surface could not be captured."""

    TAINTED = "tainted"  # Surface content may not be read (e.g. protected source)
    UNSUPPORTED_STYLE = "unsupported_style"  # Surface type/format not understood
    TIMEOUT = "timeout"
    UNREADABLE = "unreadable"  # Source missing or corrupt


class CaptureError(ExportError):
    """
    A surface could not be rasterized.

    Attributes:
        reason: Failure category
        section: Label of the section being captured, once known
    """

    def __init__(
        self,
        reason: CaptureReason,
        message: str = "",
        *,
        section: Optional[str] = None,
    ) -> None:
        super().__init__(message or reason.value)
        self.reason = reason
        self.section = section

    def __str__(self) -> str:
        base = super().__str__()
        if self.section is not None:
            return f"[{self.section}] {base}"
        return base


@dataclass(frozen=True)
class Section:
    """
    A named dashboard view to capture.

    Attributes:
        label: Slide title for the section (used verbatim)
        surface: Capturer-specific reference to the view
    """

    label: str
    surface: Any


class SnapshotCapturer(ABC):
    """
    Abstract interface for capturing surfaces.

    Implementations must return a RasterImage the caller owns, i.e.
    releasing it must not affect the capturer or the surface.
    """

    @abstractmethod
    async def capture(self, surface: Any) -> RasterImage:
        """
        Rasterize a surface.

        Args:
            surface: Capturer-specific surface reference

        Returns:
            New RasterImage

        Raises:
            CaptureError: If the surface cannot be captured
        """


def _rescale(image: Image.Image, scale: float) -> Image.Image:
    if scale == 1:
        return image
    size = (max(1, round(image.width * scale)), max(1, round(image.height * scale)))
    return image.resize(size, Image.Resampling.LANCZOS)


class PilImageCapturer(SnapshotCapturer):
    """
    Capturer for surfaces that are already PIL images.

    Each capture returns a copy, so releasing the snapshot leaves the
    caller's image open.
    """

    def __init__(self, scale: float = 1.0) -> None:
        self._scale = scale

    async def capture(self, surface: Any) -> RasterImage:
        """Copy (and optionally rescale) a PIL image."""
        if not isinstance(surface, Image.Image):
            raise CaptureError(
                CaptureReason.UNSUPPORTED_STYLE,
                f"Expected a PIL image, got {type(surface).__name__}",
            )
        return RasterImage.from_pil(_rescale(surface.copy(), self._scale))


class ImageFileCapturer(SnapshotCapturer):
    """
    Capturer for snapshots saved as image files.

    Files are decoded in the default executor so a slow disk never
    blocks the event loop.

    Example:
        >>> capturer = ImageFileCapturer()
        >>> image = await capturer.capture(Path("overview.png"))
    """

    def __init__(self, scale: float = 1.0) -> None:
        self._scale = scale

    async def capture(self, surface: Any) -> RasterImage:
        """Load an image file into a snapshot."""
        if not isinstance(surface, (str, Path)):
            raise CaptureError(
                CaptureReason.UNSUPPORTED_STYLE,
                f"Expected an image path, got {type(surface).__name__}",
            )
        loop = asyncio.get_running_loop()
        image = await loop.run_in_executor(None, self._load, Path(surface))
        return RasterImage.from_pil(image)

    def _load(self, path: Path) -> Image.Image:
        if not path.exists():
            raise CaptureError(CaptureReason.UNREADABLE, f"Image not found: {path}")
        try:
            with Image.open(path) as opened:
                opened.load()
                image = opened.copy()
        except UnidentifiedImageError as e:
            raise CaptureError(
                CaptureReason.UNSUPPORTED_STYLE, f"Not a supported image: {path}"
            ) from e
        except OSError as e:
            raise CaptureError(CaptureReason.UNREADABLE, f"Cannot read {path}: {e}") from e
        logger.debug(f"Loaded {path.name} ({image.width}x{image.height})")
        return _rescale(image, self._scale)


PdfSurface = Union[Tuple[Union[str, Path], int], str, Path]


def parse_pdf_surface(surface: PdfSurface) -> Tuple[Path, int]:
    """
    Normalize a PDF surface reference to (path, 0-based page index).

    Accepts ``(path, page_index)`` tuples or ``"report.pdf#3"`` strings
    where the fragment is a 1-based page number (default page 1).

    Raises:
        CaptureError: If the reference is malformed
    """
    if isinstance(surface, tuple):
        path, index = surface
        return Path(path), int(index)

    text = str(surface)
    path_text, _, fragment = text.partition("#")
    if not fragment:
        return Path(path_text), 0
    if not fragment.isdigit() or int(fragment) < 1:
        raise CaptureError(
            CaptureReason.UNSUPPORTED_STYLE,
            f"Invalid page fragment in {text!r}; expected a 1-based page number",
        )
    return Path(path_text), int(fragment) - 1


class PdfPageCapturer(SnapshotCapturer):
    """
    Capturer rasterizing pages of a pre-rendered PDF with PyMuPDF.

    The scale factor multiplies the native 72 DPI resolution, like the
    quality factor of a browser capture.

    Attributes:
        scale: Resolution multiplier (2.0 = 144 DPI)
    """

    def __init__(self, scale: float = 2.0) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive: {scale}")
        self.scale = scale

    async def capture(self, surface: Any) -> RasterImage:
        """Render one PDF page into a snapshot."""
        path, page_index = parse_pdf_surface(surface)
        loop = asyncio.get_running_loop()
        image = await loop.run_in_executor(None, self._render, path, page_index)
        return RasterImage.from_pil(image)

    def _render(self, path: Path, page_index: int) -> Image.Image:
        if not path.exists():
            raise CaptureError(CaptureReason.UNREADABLE, f"PDF not found: {path}")
        try:
            doc = fitz.open(path)
        except RuntimeError as e:
            raise CaptureError(CaptureReason.UNREADABLE, f"Cannot open {path}: {e}") from e

        with doc:
            if doc.needs_pass:
                raise CaptureError(CaptureReason.TAINTED, f"{path} is password protected")
            if not 0 <= page_index < doc.page_count:
                raise CaptureError(
                    CaptureReason.UNREADABLE,
                    f"{path} has {doc.page_count} pages, requested page {page_index + 1}",
                )
            page = doc[page_index]
            matrix = fitz.Matrix(self.scale, self.scale)
            pix = page.get_pixmap(matrix=matrix, alpha=False)
            image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)

        logger.debug(f"Rendered {path.name} page {page_index + 1} at {image.width}x{image.height}")
        return image
