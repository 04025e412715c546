"""
Tests for ordered capture.

Surfaces in these tests are dicts read by ScriptedCapturer:
size, delay before completing, and an optional failure reason.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from report_toolkit.core.models import RasterImage
from report_toolkit.exporter.capture import (
    CaptureError,
    CaptureReason,
    Section,
    SnapshotCapturer,
    capture_in_order,
)


class ScriptedCapturer(SnapshotCapturer):
    """Capturer whose behavior is described by each surface."""

    def __init__(self):
        self.completed = []
        self.cancelled = []

    async def capture(self, surface):
        try:
            await asyncio.sleep(surface.get("delay", 0))
        except asyncio.CancelledError:
            self.cancelled.append(surface["name"])
            raise
        if "fail" in surface:
            raise CaptureError(surface["fail"], f"{surface['name']} failed")
        self.completed.append(surface["name"])
        width, height = surface.get("size", (100, 50))
        return RasterImage(width=width, height=height, pixels=surface.get("pixels"))


def make_section(name, **surface):
    return Section(label=name, surface={"name": name, **surface})


async def collect(stream):
    return [item async for item in stream]


class TestSequentialCapture:
    """Tests for capture_in_order() without concurrency."""

    @pytest.mark.asyncio
    async def test_yields_in_input_order(self):
        capturer = ScriptedCapturer()
        sections = [
            make_section("a", size=(10, 10)),
            make_section("b", size=(20, 10)),
            make_section("c", size=(30, 10)),
        ]

        results = await collect(capture_in_order(capturer, sections))

        assert [s.label for s, _ in results] == ["a", "b", "c"]
        assert [image.width for _, image in results] == [10, 20, 30]

    @pytest.mark.asyncio
    async def test_stops_at_first_failure(self):
        capturer = ScriptedCapturer()
        sections = [
            make_section("a"),
            make_section("b", fail=CaptureReason.TAINTED),
            make_section("c"),
        ]
        received = []

        with pytest.raises(CaptureError) as exc_info:
            async for section, _ in capture_in_order(capturer, sections):
                received.append(section.label)

        assert received == ["a"]
        assert exc_info.value.reason is CaptureReason.TAINTED
        assert exc_info.value.section == "b"
        assert str(exc_info.value).startswith("[b]")
        assert capturer.completed == ["a"]

    @pytest.mark.asyncio
    async def test_timeout_becomes_capture_error(self):
        capturer = ScriptedCapturer()
        sections = [make_section("slow", delay=5)]

        with pytest.raises(CaptureError) as exc_info:
            await collect(capture_in_order(capturer, sections, timeout=0.01))

        assert exc_info.value.reason is CaptureReason.TIMEOUT
        assert exc_info.value.section == "slow"


class TestConcurrentCapture:
    """Tests for capture_in_order(concurrent=True)."""

    @pytest.mark.asyncio
    async def test_out_of_order_completions_are_buffered(self):
        capturer = ScriptedCapturer()
        sections = [
            make_section("a", delay=0.06),
            make_section("b", delay=0.03),
            make_section("c", delay=0.0),
        ]

        results = await collect(capture_in_order(capturer, sections, concurrent=True))

        assert capturer.completed == ["c", "b", "a"]
        assert [s.label for s, _ in results] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_failure_cancels_pending_and_releases_buffered(self):
        capturer = ScriptedCapturer()
        ahead_pixels = MagicMock()
        sections = [
            make_section("a"),
            make_section("b", delay=0.02, fail=CaptureReason.UNSUPPORTED_STYLE),
            make_section("c", pixels=ahead_pixels),
            make_section("d", delay=5),
        ]
        received = []

        with pytest.raises(CaptureError) as exc_info:
            async for section, _ in capture_in_order(capturer, sections, concurrent=True):
                received.append(section.label)

        assert received == ["a"]
        assert exc_info.value.section == "b"
        assert capturer.cancelled == ["d"]
        ahead_pixels.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_same_input_same_order(self):
        sections = [make_section(name, delay=0.01 * (3 - i)) for i, name in enumerate("xyz")]

        first = await collect(capture_in_order(ScriptedCapturer(), sections, concurrent=True))
        second = await collect(capture_in_order(ScriptedCapturer(), sections, concurrent=True))

        assert [s.label for s, _ in first] == [s.label for s, _ in second] == ["x", "y", "z"]
