"""Rectangle fitting and centering helpers shared by the layout engines.

All functions are pure and work in whatever unit the caller uses
(millimetres for pages, container fractions for slides). Nothing is
rounded here; rounding belongs to the encoders.
"""

from __future__ import annotations

from typing import Dict, Tuple

from report_toolkit.core.errors import ExportError

ASPECT_EPSILON = 1e-6
# Relative slack absorbing float noise when source and box share an aspect
_TIE_SLACK = 1e-12


class InvalidDimension(ExportError, ValueError):
    """A source or container dimension is zero or negative.

    Attributes:
        dimensions: Mapping of argument name to the value that was passed,
            so callers can log the offending input and retry.
    """

    def __init__(self, message: str, dimensions: Dict[str, float]) -> None:
        super().__init__(message)
        self.dimensions = dict(dimensions)


def _require_positive(**dimensions: float) -> None:
    bad = {name: value for name, value in dimensions.items() if not value > 0}
    if bad:
        details = ", ".join(f"{name}={value}" for name, value in bad.items())
        raise InvalidDimension(f"Dimensions must be positive: {details}", dimensions)


def fit_preserving_aspect(
    source_w: float,
    source_h: float,
    max_w: float,
    max_h: float,
) -> Tuple[float, float]:
    """
    Largest (w, h) inside max_w x max_h with the source aspect ratio.

    The width-constrained candidate is tried first, so when both
    candidates fit (source and box share an aspect ratio) the result
    is always the width-constrained one.

    Args:
        source_w: Source width
        source_h: Source height
        max_w: Maximum width
        max_h: Maximum height

    Returns:
        Tuple of (width, height)

    Raises:
        InvalidDimension: If any argument is <= 0

    Example:
        >>> fit_preserving_aspect(1920, 1080, 0.9, 0.7)
        (0.9, 0.50625)  # approximately
    """
    _require_positive(source_w=source_w, source_h=source_h, max_w=max_w, max_h=max_h)

    aspect = source_w / source_h

    # Width-constrained candidate
    height = max_w / aspect
    if height <= max_h * (1 + _TIE_SLACK):
        return max_w, min(height, max_h)

    # Height-constrained candidate
    return max_h * aspect, max_h


def center(
    outer_w: float,
    outer_h: float,
    inner_w: float,
    inner_h: float,
) -> Tuple[float, float]:
    """Offsets that center an inner rect inside an outer rect."""
    return (outer_w - inner_w) / 2, (outer_h - inner_h) / 2


def scale_to_width(
    source_w: float,
    source_h: float,
    target_w: float,
) -> Tuple[float, float]:
    """
    Rescale a source size to a target width, keeping its aspect ratio.

    Height is computed as ``source_h * target_w / source_w`` so integer
    pixel sizes and millimetre widths produce exact results whenever
    the ratio is representable (e.g. 4000 * 190 / 1000 == 760.0).

    Raises:
        InvalidDimension: If source_w or target_w is <= 0, or source_h < 0
    """
    _require_positive(source_w=source_w, target_w=target_w)
    if source_h < 0:
        raise InvalidDimension(
            f"Dimensions must be non-negative: source_h={source_h}",
            {"source_h": source_h},
        )
    return target_w, source_h * target_w / source_w
