"""
Module: core.models.raster

Purpose:
    Provides the RasterImage dataclass - an immutable captured snapshot
    with known pixel dimensions. The pixel buffer itself is an opaque
    handle (a PIL image for the bundled capturers) that the layout
    engines never touch; only the encoders read pixels.

Key Functions:
    - RasterImage.from_pil(image): Wrap a PIL image
    - RasterImage.aspect_ratio: width / height
    - RasterImage.release(): Free the pixel buffer after encoding

Dependencies:
    - dataclasses (std)
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - exporter.capture: Produces RasterImages
    - exporter.layout: Reads width/height
    - exporter.output: Reads pixels
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from report_toolkit.common.geometry import InvalidDimension

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True)
class RasterImage:
    """
    Captured snapshot of a dashboard surface (immutable).

    Zero-sized images are representable (a collapsed element captures
    as 0 px tall); the pagination and slide engines reject them with
    EmptySnapshot or InvalidDimension respectively.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: Opaque pixel handle (PIL image for bundled capturers)

    Invariants:
        - width >= 0
        - height >= 0

    Example:
        >>> image = RasterImage(width=1920, height=1080)
        >>> round(image.aspect_ratio, 3)
        1.778
    """

    width: int
    height: int
    pixels: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.width < 0 or self.height < 0:
            raise InvalidDimension(
                f"Raster dimensions must be non-negative: {self.width}x{self.height}",
                {"width": self.width, "height": self.height},
            )

    @classmethod
    def from_pil(cls, image: "Image.Image") -> "RasterImage":
        """Wrap a PIL image, taking ownership of it."""
        return cls(width=image.width, height=image.height, pixels=image)

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        if self.height <= 0:
            raise InvalidDimension(
                f"Aspect ratio undefined for height {self.height}",
                {"width": self.width, "height": self.height},
            )
        return self.width / self.height

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return self.width, self.height

    def release(self) -> None:
        """Close the pixel buffer if it supports closing."""
        close = getattr(self.pixels, "close", None)
        if callable(close):
            close()
