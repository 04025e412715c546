"""
Module: exporter.capture.ordering

Purpose:
    Consume captures strictly in section order.

    Sequential mode awaits one capture at a time. Concurrent mode
    schedules every capture up front and buffers completions until it
    is their turn, so output order never depends on which capture
    finishes first.

Key Functions:
    - capture_in_order(): Async generator of (section, snapshot)

Dependencies:
    - asyncio (std)
    - exporter.capture.provider: SnapshotCapturer, CaptureError

Used By:
    - exporter.controller: Export orchestration
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, List, Optional, Sequence, Tuple

from report_toolkit.core.models import RasterImage

from .provider import CaptureError, CaptureReason, Section, SnapshotCapturer

logger = logging.getLogger(__name__)


async def _capture_one(
    capturer: SnapshotCapturer,
    section: Section,
    timeout: Optional[float],
) -> RasterImage:
    """Capture one section, tagging failures with its label."""
    try:
        if timeout is None:
            return await capturer.capture(section.surface)
        return await asyncio.wait_for(capturer.capture(section.surface), timeout)
    except asyncio.TimeoutError as e:
        raise CaptureError(
            CaptureReason.TIMEOUT,
            f"Capture exceeded {timeout}s",
            section=section.label,
        ) from e
    except CaptureError as e:
        if e.section is None:
            e.section = section.label
        raise


async def capture_in_order(
    capturer: SnapshotCapturer,
    sections: Sequence[Section],
    *,
    concurrent: bool = False,
    timeout: Optional[float] = None,
) -> AsyncIterator[Tuple[Section, RasterImage]]:
    """
    Yield (section, snapshot) pairs in input order.

    The generator stops at the first CaptureError, which propagates
    to the caller with the failing section's label attached. Snapshots
    already yielded belong to the caller; snapshots captured ahead of
    a failure (concurrent mode) are released here.

    Args:
        capturer: Capturer for every section
        sections: Sections in output order
        concurrent: Schedule all captures immediately
        timeout: Per-capture timeout in seconds

    Yields:
        (section, RasterImage) in the order of sections

    Raises:
        CaptureError: On the first failed capture
    """
    if not concurrent:
        for section in sections:
            image = await _capture_one(capturer, section, timeout)
            logger.debug(f"Captured {section.label!r} ({image.width}x{image.height})")
            yield section, image
        return

    tasks: List[asyncio.Task] = [
        asyncio.ensure_future(_capture_one(capturer, section, timeout))
        for section in sections
    ]
    consumed = 0
    try:
        for section, task in zip(sections, tasks):
            image = await task
            consumed += 1
            logger.debug(f"Captured {section.label!r} ({image.width}x{image.height})")
            yield section, image
    finally:
        await _discard(tasks[consumed:])


async def _discard(tasks: Sequence[asyncio.Task]) -> None:
    """Cancel unfinished captures and release finished but unconsumed ones."""
    for task in tasks:
        if not task.done():
            task.cancel()
    if not tasks:
        return
    results = await asyncio.gather(*tasks, return_exceptions=True)
    for result in results:
        if isinstance(result, RasterImage):
            result.release()
