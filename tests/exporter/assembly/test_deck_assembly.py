"""
Unit tests for deck assembly.
"""

import pytest

from report_toolkit.common.geometry import InvalidDimension
from report_toolkit.core.models import RasterImage, SlideKind
from report_toolkit.exporter.assembly import assemble_deck, build_section_slide
from report_toolkit.exporter.config import ExportConfig
from report_toolkit.exporter.layout import SUMMARY_TITLE, SlideLayout


@pytest.fixture
def sections():
    return [
        ("Overview", RasterImage(width=1920, height=1080)),
        ("Funnel", RasterImage(width=500, height=2000)),
        ("Channels", RasterImage(width=1200, height=800)),
    ]


class TestAssembleDeck:
    """Tests for assemble_deck()."""

    def test_title_sections_summary(self, sections, fixed_moment):
        config = ExportConfig(summary_points=("Reach up 12%", "CPC down"))

        deck = assemble_deck(sections, config, generated_at=fixed_moment)

        kinds = [s.kind for s in deck.slides]
        assert kinds == [
            SlideKind.TITLE,
            SlideKind.SECTION,
            SlideKind.SECTION,
            SlideKind.SECTION,
            SlideKind.SUMMARY,
        ]
        summary = deck.slides[-1]
        assert summary.title == SUMMARY_TITLE
        assert summary.bullets == ("Reach up 12%", "CPC down")

    def test_no_bullets_omits_summary(self, sections, fixed_moment):
        deck = assemble_deck(sections, ExportConfig(), generated_at=fixed_moment)

        assert deck.slide_count == 1 + len(sections)
        assert deck.slides[-1].kind is SlideKind.SECTION

    def test_explicit_bullets_override_config(self, sections, fixed_moment):
        config = ExportConfig(summary_points=("from config",))

        deck = assemble_deck(sections, config, bullets=[], generated_at=fixed_moment)

        assert all(s.kind is not SlideKind.SUMMARY for s in deck.slides)

    def test_sections_keep_input_order_and_labels(self, sections, fixed_moment):
        deck = assemble_deck(sections, ExportConfig(), generated_at=fixed_moment)

        assert [s.title for s in deck.section_slides] == ["Overview", "Funnel", "Channels"]
        assert [s.image for s in deck.section_slides] == [image for _, image in sections]

    def test_assembling_twice_gives_same_deck(self, sections, fixed_moment):
        config = ExportConfig(summary_points=("a", "b"))

        first = assemble_deck(sections, config, generated_at=fixed_moment)
        second = assemble_deck(sections, config, generated_at=fixed_moment)

        assert first == second

    def test_title_slide_text(self, sections, fixed_moment):
        config = ExportConfig(title="Campaign Review", report_period="Q2 2024")

        deck = assemble_deck(sections, config, generated_at=fixed_moment)

        title_slide = deck.slides[0]
        assert title_slide.placement is None
        assert [b.text for b in title_slide.text_blocks] == [
            "Campaign Review",
            "Q2 2024 Performance Analysis",
            "Generated on: March 5, 2024",
        ]

    def test_deck_properties(self, sections, fixed_moment):
        config = ExportConfig(title="Campaign Review", company="Acme")

        deck = assemble_deck(sections, config, generated_at=fixed_moment)

        assert (deck.title, deck.subject, deck.company) == (
            "Campaign Review", "Performance Analysis", "Acme"
        )
        assert deck.aspect == pytest.approx(16 / 9)

    def test_no_sections_gives_title_only(self, fixed_moment):
        deck = assemble_deck([], ExportConfig(), generated_at=fixed_moment)

        assert [s.kind for s in deck.slides] == [SlideKind.TITLE]

    def test_zero_sized_snapshot_raises(self, fixed_moment):
        with pytest.raises(InvalidDimension):
            assemble_deck(
                [("Blank", RasterImage(width=0, height=0))],
                ExportConfig(),
                generated_at=fixed_moment,
            )


class TestBuildSectionSlide:
    """Tests for build_section_slide()."""

    def test_label_is_not_escaped_or_truncated(self):
        label = "Spend & Reach <by channel> " + "x" * 200

        slide = build_section_slide(label, RasterImage(width=500, height=2000), SlideLayout())

        assert slide.title == label
        assert slide.text_blocks[0].text == label

    def test_placement(self):
        slide = build_section_slide("Funnel", RasterImage(width=500, height=2000), SlideLayout())

        assert slide.placement.x == pytest.approx(0.4125)
        assert slide.placement.y == pytest.approx(0.2)
        assert slide.placement.w == pytest.approx(0.175)
        assert slide.placement.h == pytest.approx(0.7)
