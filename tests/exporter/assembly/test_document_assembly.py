"""
Unit tests for document assembly.
"""

from datetime import datetime

import pytest

from report_toolkit.core.models import RasterImage
from report_toolkit.exporter.assembly import (
    assemble_document,
    first_page_header,
    format_report_date,
    format_report_time,
    generated_on,
)
from report_toolkit.exporter.config import DEFAULT_FOOTER, ExportConfig
from report_toolkit.exporter.layout import EmptySnapshot


@pytest.fixture
def config():
    return ExportConfig(title="Campaign Review", report_period="Q2 2024", company="Acme")


class TestReportDates:
    """Tests for header date strings."""

    def test_date_has_no_zero_padding(self):
        assert format_report_date(datetime(2024, 3, 5)) == "March 5, 2024"

    def test_time_is_twelve_hour(self):
        assert format_report_time(datetime(2024, 3, 5, 9, 7)) == "09:07 AM"
        assert format_report_time(datetime(2024, 3, 5, 21, 30)) == "09:30 PM"

    def test_generated_on(self, fixed_moment):
        assert generated_on(fixed_moment) == "Generated on: March 5, 2024 at 09:07 AM"
        assert generated_on(fixed_moment, with_time=False) == "Generated on: March 5, 2024"


class TestAssembleDocument:
    """Tests for assemble_document()."""

    def test_first_page_has_full_header(self, config, fixed_moment):
        document = assemble_document(
            RasterImage(width=1000, height=4000), config, generated_at=fixed_moment
        )

        header = document.pages[0].header
        assert header.title == "Campaign Review"
        assert header.details == (
            "Generated on: March 5, 2024 at 09:07 AM",
            "Period: Q2 2024",
            "Company: Acme",
        )

    def test_later_pages_have_short_header(self, config, fixed_moment):
        document = assemble_document(
            RasterImage(width=1000, height=4000), config, generated_at=fixed_moment
        )

        assert document.page_count == 3
        for page in document.pages[1:]:
            assert page.header.title == "Campaign Review"
            assert not page.header.is_full
        assert all(p.header_text == "Campaign Review" for p in document.pages)

    def test_every_page_has_footer_and_label(self, config, fixed_moment):
        document = assemble_document(
            RasterImage(width=1000, height=4000), config, generated_at=fixed_moment
        )

        assert [p.page_label for p in document.pages] == ["Page 1", "Page 2", "Page 3"]
        assert all(p.footer_text == DEFAULT_FOOTER for p in document.pages)

    def test_geometry_comes_from_pagination(self, config, fixed_moment):
        image = RasterImage(width=1000, height=4000)

        document = assemble_document(image, config, generated_at=fixed_moment)

        assert [p.image_crop_height for p in document.pages] == [257, 267, 236]
        assert document.source is image
        assert document.scaled_height == 760
        assert document.scale == pytest.approx(0.19)
        assert (document.page_width, document.page_height, document.margin) == (210, 297, 10)

    def test_metadata(self, config, fixed_moment):
        document = assemble_document(
            RasterImage(width=100, height=100), config, generated_at=fixed_moment
        )

        assert document.metadata == {
            "title": "Campaign Review",
            "subject": "Performance Analysis",
            "author": "Acme",
        }

    def test_uses_configured_timestamp(self, fixed_moment):
        config = ExportConfig(generated_at=fixed_moment)

        header = first_page_header(config, config.resolve_timestamp())

        assert header.details[0].endswith("at 09:07 AM")

    def test_empty_snapshot_propagates(self, config):
        with pytest.raises(EmptySnapshot):
            assemble_document(RasterImage(width=100, height=0), config)
