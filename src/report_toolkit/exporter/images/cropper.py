"""
Module: exporter.images.cropper

Purpose:
    Pixel-level helpers for snapshots. Converts page-unit bands back to
    source pixel rows and crops them, and stacks several snapshots into
    one tall image for single-document exports.

Key Functions:
    - band_to_pixel_rows(): Map a scaled band to source pixel rows
    - crop_band(): Crop a horizontal band from a snapshot
    - stack_vertically(): Concatenate snapshots top to bottom

Dependencies:
    - PIL: Image manipulation
    - core.models.raster: RasterImage

Used By:
    - exporter.output.pdf_renderer: Draws each page's band
    - exporter.controller: Stacked document source
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from PIL import Image

from report_toolkit.core.models import RasterImage

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "white"


def band_to_pixel_rows(
    crop_top: float,
    crop_height: float,
    scale: float,
    source_height: int,
) -> Tuple[int, int]:
    """
    Convert a band in page units to source pixel rows.

    This is the only place page-unit crop coordinates are rounded.
    Rows are clamped to the image and never empty.

    Args:
        crop_top: Band offset in page units
        crop_height: Band height in page units
        scale: Page units per source pixel
        source_height: Snapshot height in pixels

    Returns:
        (top_row, bottom_row) with bottom exclusive

    Raises:
        ValueError: If scale is not positive

    Example:
        >>> band_to_pixel_rows(247, 257, 0.19, 4000)
        (1300, 2653)
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive: {scale}")

    top = max(0, min(source_height - 1, int(round(crop_top / scale))))
    bottom = int(round((crop_top + crop_height) / scale))
    bottom = max(top + 1, min(source_height, bottom))
    return top, bottom


def crop_band(image: Image.Image, top: int, bottom: int) -> Image.Image:
    """
    Crop a full-width horizontal band.

    Args:
        image: Source image
        top: First row (inclusive)
        bottom: Last row (exclusive)

    Returns:
        Cropped image (new copy, not a view)

    Raises:
        ValueError: If the band is outside the image
    """
    if top < 0:
        raise ValueError(f"Band top {top} is negative")
    if bottom > image.height:
        raise ValueError(f"Band bottom {bottom} exceeds image height {image.height}")
    if bottom <= top:
        raise ValueError(f"Band bottom {bottom} must be > top {top}")
    return image.crop((0, top, image.width, bottom))


def stack_vertically(
    snapshots: Sequence[RasterImage],
    *,
    background: str = DEFAULT_BACKGROUND,
) -> RasterImage:
    """
    Concatenate snapshots into one tall snapshot.

    Narrower snapshots are left-aligned on a background canvas as wide
    as the widest one, so no snapshot is rescaled.

    Args:
        snapshots: Snapshots with PIL pixel buffers, in order
        background: Fill colour for the canvas

    Returns:
        New RasterImage owning a new PIL image

    Raises:
        ValueError: If snapshots is empty or a snapshot has no pixels
    """
    if not snapshots:
        raise ValueError("Cannot stack an empty list of snapshots")

    width = max(s.width for s in snapshots)
    height = sum(s.height for s in snapshots)
    canvas = Image.new("RGB", (width, height), color=background)

    y = 0
    for snapshot in snapshots:
        if not isinstance(snapshot.pixels, Image.Image):
            raise ValueError("Stacking requires snapshots backed by PIL images")
        canvas.paste(snapshot.pixels, (0, y))
        y += snapshot.height

    logger.debug(f"Stacked {len(snapshots)} snapshots into {width}x{height}")
    return RasterImage.from_pil(canvas)
