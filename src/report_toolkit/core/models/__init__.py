"""
Core Models Package

Immutable data models shared by the layout engines, assemblers and
encoders.

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while a page or slide list is being built
2. Descriptors can be handed to encoders without defensive copies
3. Assembling the same input twice yields equal output
"""

from .raster import RasterImage
from .placement import PlacementRect, TextRegion
from .pages import PageHeader, Page, Document
from .slides import SlideKind, Slide, Deck

__all__ = [
    "RasterImage",
    "PlacementRect",
    "TextRegion",
    "PageHeader",
    "Page",
    "Document",
    "SlideKind",
    "Slide",
    "Deck",
]
