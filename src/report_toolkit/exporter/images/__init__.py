"""
Module: exporter.images

Purpose:
    Pixel helpers for captured snapshots: band cropping for page
    rendering and vertical stacking for single-document exports.

Key Functions:
    - band_to_pixel_rows(): Page-unit band to source rows
    - crop_band(): Crop rows from a PIL image
    - stack_vertically(): Concatenate snapshots

Dependencies:
    - PIL: Image manipulation

Used By:
    - exporter.output: PDF rendering
    - exporter.controller: Stacked document source
"""

from .cropper import band_to_pixel_rows, crop_band, stack_vertically

__all__ = [
    "band_to_pixel_rows",
    "crop_band",
    "stack_vertically",
]
