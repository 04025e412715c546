"""
Unit tests for the layout geometry helpers.
"""

import pytest

from report_toolkit.common.geometry import (
    ASPECT_EPSILON,
    InvalidDimension,
    center,
    fit_preserving_aspect,
    scale_to_width,
)


class TestFitPreservingAspect:
    """Tests for fit_preserving_aspect()."""

    def test_when_source_is_wider_then_width_constrained(self):
        w, h = fit_preserving_aspect(1920, 1080, 0.9, 0.7)

        assert w == 0.9
        assert h == pytest.approx(0.50625)

    def test_when_source_is_taller_then_height_constrained(self):
        w, h = fit_preserving_aspect(500, 2000, 0.9, 0.7)

        assert w == pytest.approx(0.175)
        assert h == 0.7

    def test_when_aspects_match_then_width_candidate_wins(self):
        """Both candidates fit exactly; the width-constrained one is returned."""
        w, h = fit_preserving_aspect(16, 9, 160, 90)

        assert w == 160
        assert h == pytest.approx(90)

    def test_upscales_small_sources(self):
        w, h = fit_preserving_aspect(10, 10, 100, 50)

        assert (w, h) == (50, 50)

    @pytest.mark.parametrize("source_w,source_h,max_w,max_h", [
        (1920, 1080, 0.9, 0.7),
        (500, 2000, 0.9, 0.7),
        (1, 1000, 190, 257),
        (1000, 1, 190, 257),
        (333, 777, 1.0, 1.0),
        (4096, 2160, 10, 5.625),
    ])
    def test_aspect_preserved_and_bounded(self, source_w, source_h, max_w, max_h):
        w, h = fit_preserving_aspect(source_w, source_h, max_w, max_h)

        assert abs(w / h - source_w / source_h) < ASPECT_EPSILON
        assert w <= max_w
        assert h <= max_h
        # At least one side touches the box
        assert w == pytest.approx(max_w) or h == pytest.approx(max_h)

    @pytest.mark.parametrize("args,bad_name", [
        ((0, 10, 1, 1), "source_w"),
        ((10, 0, 1, 1), "source_h"),
        ((10, 10, -1, 1), "max_w"),
        ((10, 10, 1, 0), "max_h"),
    ])
    def test_non_positive_dimension_raises(self, args, bad_name):
        with pytest.raises(InvalidDimension) as exc_info:
            fit_preserving_aspect(*args)

        assert bad_name in str(exc_info.value)
        assert bad_name in exc_info.value.dimensions

    def test_invalid_dimension_is_value_error(self):
        with pytest.raises(ValueError):
            fit_preserving_aspect(-1, 10, 1, 1)


class TestCenter:
    """Tests for center()."""

    def test_centers_inner_rect(self):
        assert center(1.0, 0.7, 0.9, 0.5) == pytest.approx((0.05, 0.1))

    def test_equal_sizes_give_zero_offsets(self):
        assert center(190, 257, 190, 257) == (0, 0)

    def test_larger_inner_gives_negative_offsets(self):
        assert center(10, 10, 20, 30) == (-5, -10)


class TestScaleToWidth:
    """Tests for scale_to_width()."""

    def test_exact_for_integer_ratios(self):
        assert scale_to_width(1000, 4000, 190) == (190, 760.0)

    def test_zero_height_allowed(self):
        assert scale_to_width(1000, 0, 190) == (190, 0.0)

    def test_zero_width_raises(self):
        with pytest.raises(InvalidDimension):
            scale_to_width(0, 100, 190)

    def test_negative_height_raises(self):
        with pytest.raises(InvalidDimension):
            scale_to_width(100, -1, 190)
