"""
Unit tests for layout configuration.
"""

import pytest

from report_toolkit.core.models import PlacementRect
from report_toolkit.exporter.layout import LayoutConfig, PageSize, SlideLayout


class TestPageSize:
    """Tests for PageSize."""

    def test_a4_defaults(self):
        page = PageSize()

        assert (page.width, page.height, page.margin) == (210, 297, 10)
        assert page.content_width == 190

    @pytest.mark.parametrize("kwargs", [
        {"width": 0},
        {"height": -1},
        {"margin": -5},
        {"width": 20, "margin": 10},
    ])
    def test_invalid_size_raises(self, kwargs):
        with pytest.raises(ValueError):
            PageSize(**kwargs)


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    def test_default_drawable_heights(self):
        config = LayoutConfig()

        assert config.first_page_drawable_height == 257
        assert config.subsequent_drawable_height == 267

    def test_custom_headers_change_drawable_heights(self):
        config = LayoutConfig(first_page_header_height=40, subsequent_header_height=30)

        assert config.first_page_drawable_height == 247
        assert config.subsequent_drawable_height == 257

    def test_alternate_page_size(self):
        # US Letter in millimetres
        config = LayoutConfig(page=PageSize(width=215.9, height=279.4, margin=12.7))

        assert config.page.content_width == pytest.approx(190.5)
        assert config.first_page_drawable_height == pytest.approx(239.4)

    def test_headers_exceeding_page_raise(self):
        with pytest.raises(ValueError, match="exceed"):
            LayoutConfig(first_page_header_height=290)

    def test_negative_header_raises(self):
        with pytest.raises(ValueError):
            LayoutConfig(subsequent_header_height=-1)

    def test_is_frozen(self):
        config = LayoutConfig()

        with pytest.raises(AttributeError):
            config.trailing_margin = 0


class TestSlideLayout:
    """Tests for SlideLayout."""

    def test_default_content_region(self):
        region = SlideLayout().content_region

        assert region.x == pytest.approx(0.05)
        assert region.y == 0.2
        assert region.w == 0.9
        assert region.h == 0.7

    def test_default_regions(self):
        layout = SlideLayout()

        assert layout.aspect == pytest.approx(16 / 9)
        assert layout.title_region == PlacementRect(x=0.05, y=0.05, w=0.9, h=0.1)
        assert layout.summary_region.right == pytest.approx(0.9)
        assert layout.summary_region.bottom == pytest.approx(0.85)

    @pytest.mark.parametrize("kwargs", [
        {"aspect": 0},
        {"content_width": 1.5},
        {"content_height": 0},
        {"content_top": 0.5, "content_height": 0.7},
    ])
    def test_invalid_layout_raises(self, kwargs):
        with pytest.raises(ValueError):
            SlideLayout(**kwargs)
