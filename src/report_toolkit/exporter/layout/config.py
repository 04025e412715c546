"""
Module: exporter.layout.config

Purpose:
    Configuration for the pagination and slide layout engines.
    Defines page dimensions, header bands, and slide regions so both
    engines can run against alternate paper sizes or slide aspects
    without touching the algorithms.

Key Classes:
    - PageSize: Physical sheet size and margin
    - SlideLayout: Fractional slide regions
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - exporter.layout.paginator: Page arrangement
    - exporter.layout.slides: Slide placement
    - exporter.assembly: Document and deck assembly
"""

from __future__ import annotations

from dataclasses import dataclass, field

from report_toolkit.core.models import PlacementRect


# A4 portrait in millimetres
DEFAULT_PAGE_WIDTH_MM = 210
DEFAULT_PAGE_HEIGHT_MM = 297
DEFAULT_MARGIN_MM = 10

# Standard widescreen slide
DEFAULT_SLIDE_ASPECT = 16 / 9


@dataclass(frozen=True)
class PageSize:
    """
    Physical sheet size (immutable).

    Attributes:
        width: Sheet width
        height: Sheet height
        margin: Left/right margin around the image

    Example:
        >>> PageSize().content_width
        190
    """

    width: float = DEFAULT_PAGE_WIDTH_MM
    height: float = DEFAULT_PAGE_HEIGHT_MM
    margin: float = DEFAULT_MARGIN_MM

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.content_width <= 0:
            raise ValueError("Margins exceed page width")

    @property
    def content_width(self) -> float:
        """Width available for the image (excluding margins)."""
        return self.width - 2 * self.margin


@dataclass(frozen=True)
class SlideLayout:
    """
    Fractional regions of a slide (immutable).

    The content region is where section snapshots are fitted; it starts
    under the title band and spans content_width x content_height.

    Attributes:
        aspect: Slide width / height
        content_top: Top of the content region
        content_width: Width of the content region
        content_height: Height of the content region
        title_region: Section/summary title band
        title_block_tops: Y positions of the three title-slide text blocks
        title_block_heights: Heights of the three title-slide text blocks
        title_block_x: Left edge of the title-slide text blocks
        title_block_width: Width of the title-slide text blocks
        summary_region: Bullet block on the summary slide
        bullet_glyph: Prefix for each bullet paragraph
    """

    aspect: float = DEFAULT_SLIDE_ASPECT
    content_top: float = 0.2
    content_width: float = 0.9
    content_height: float = 0.7
    title_region: PlacementRect = PlacementRect(x=0.05, y=0.05, w=0.9, h=0.1)
    title_block_tops: tuple[float, float, float] = (0.4, 0.6, 0.8)
    title_block_heights: tuple[float, float, float] = (0.2, 0.1, 0.05)
    title_block_x: float = 0.1
    title_block_width: float = 0.8
    summary_region: PlacementRect = PlacementRect(x=0.1, y=0.25, w=0.8, h=0.6)
    bullet_glyph: str = "•"

    def __post_init__(self) -> None:
        """Validate regions on construction."""
        if self.aspect <= 0:
            raise ValueError(f"aspect must be positive: {self.aspect}")
        if not 0 < self.content_width <= 1:
            raise ValueError(f"content_width must be in (0, 1]: {self.content_width}")
        if not 0 < self.content_height <= 1:
            raise ValueError(f"content_height must be in (0, 1]: {self.content_height}")
        if self.content_top < 0 or self.content_top + self.content_height > 1:
            raise ValueError("Content region exceeds slide height")

    @property
    def content_region(self) -> PlacementRect:
        """Content region, horizontally centered."""
        return PlacementRect(
            x=(1 - self.content_width) / 2,
            y=self.content_top,
            w=self.content_width,
            h=self.content_height,
        )


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page and slide layout (immutable).

    Attributes:
        page: Sheet size and margin
        first_page_header_height: Header band height on page 1
        subsequent_header_height: Header band height on pages 2..N
        trailing_margin: Space kept below the image on every page; the
            page label and footer are drawn inside it
        slide: Slide regions

    Example:
        >>> config = LayoutConfig()
        >>> config.first_page_drawable_height
        257
        >>> config.subsequent_drawable_height
        267
    """

    page: PageSize = field(default_factory=PageSize)
    first_page_header_height: float = 30
    subsequent_header_height: float = 20
    trailing_margin: float = 10
    slide: SlideLayout = field(default_factory=SlideLayout)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.first_page_header_height < 0 or self.subsequent_header_height < 0:
            raise ValueError("Header heights must be non-negative")
        if self.trailing_margin < 0:
            raise ValueError(f"trailing_margin must be non-negative: {self.trailing_margin}")
        if self.first_page_drawable_height <= 0:
            raise ValueError("First page header and margin exceed page height")
        if self.subsequent_drawable_height <= 0:
            raise ValueError("Header and margin exceed page height")

    @property
    def first_page_drawable_height(self) -> float:
        """Height available for the image on page 1."""
        return self.page.height - self.first_page_header_height - self.trailing_margin

    @property
    def subsequent_drawable_height(self) -> float:
        """Height available for the image on pages 2..N."""
        return self.page.height - self.subsequent_header_height - self.trailing_margin
