"""
Module: exporter.controller

Purpose:
    Orchestrate the complete export pipeline.
    Capture (in order) → Assemble document/deck → Encode → Write

    Assembly always finishes before any encoder runs, and every encoder
    produces its bytes in memory before any file is written, so a
    failure never leaves a half-written artifact on disk.

Key Functions:
    - export_report(): Async entry point
    - run_export(): Synchronous wrapper
    - report_filename(): Output filename for an artifact

Key Classes:
    - ExportResult: Outcome, descriptors, bytes and written paths
    - ExportStatus: COMPLETE / PARTIAL

Dependencies:
    - exporter.capture: Ordered capture
    - exporter.assembly: Document and deck assembly
    - exporter.output: Encoders

Used By:
    - cli: Command-line export
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import re
import tempfile
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from report_toolkit.core.models import Deck, Document, RasterImage

from .assembly import assemble_deck, assemble_document
from .capture import CaptureError, Section, SnapshotCapturer, capture_in_order
from .config import DocumentSource, ExportConfig
from .images import stack_vertically
from .output import DeckEncoder, DocumentEncoder, PdfDocumentEncoder, PptxDeckEncoder

logger = logging.getLogger(__name__)


class ExportStatus(Enum):
    """Overall outcome of an export."""

    COMPLETE = "complete"
    PARTIAL = "partial"  # A capture failed; later sections were not produced


@dataclass(frozen=True)
class ExportResult:
    """
    Export outcome (immutable).

    Attributes:
        status: COMPLETE or PARTIAL
        produced: Labels of sections that were captured and assembled
        not_produced: Labels of sections skipped after a capture failure
        document: Assembled document (None if nothing was captured or PDF disabled)
        deck: Assembled deck (None if PPTX disabled)
        artifacts: Encoded bytes keyed by extension (".pdf", ".pptx")
        written: Paths written to disk
        error: Capture failure that made the export partial
        generated_at: Timestamp used in headers and filenames

    Example:
        >>> result = run_export(sections, capturer, config)
        >>> result.status is ExportStatus.COMPLETE
        True
    """

    status: ExportStatus
    produced: tuple[str, ...]
    not_produced: tuple[str, ...]
    document: Optional[Document]
    deck: Optional[Deck]
    generated_at: datetime
    artifacts: Dict[str, bytes] = field(default_factory=dict)
    written: tuple[Path, ...] = ()
    error: Optional[CaptureError] = None

    @property
    def ok(self) -> bool:
        """True when every section was produced."""
        return self.status is ExportStatus.COMPLETE


def report_filename(title: str, moment: datetime, extension: str) -> str:
    """
    Filename for an artifact: whitespace runs become underscores.

    Example:
        >>> report_filename("Q1 Review", datetime(2024, 4, 2), ".pdf")
        'Q1_Review_2024-04-02.pdf'
    """
    stem = re.sub(r"\s+", "_", title.strip())
    return f"{stem}_{moment.date().isoformat()}{extension}"


def write_artifacts(
    artifacts: Dict[str, bytes],
    output_dir: Path,
    title: str,
    moment: datetime,
) -> Tuple[Path, ...]:
    """
    Write every artifact, or none of them.

    Each artifact goes to a temp file in output_dir first; the temp
    files are moved to their final names only after all writes have
    succeeded.

    Returns:
        Final paths, in artifact order

    Raises:
        OSError: If a temp file cannot be written (temp files are removed)
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    staged: List[Tuple[Path, Path]] = []
    try:
        for extension, data in artifacts.items():
            with tempfile.NamedTemporaryFile(
                mode="wb",
                suffix=f"{extension}.part",
                dir=output_dir,
                delete=False,
            ) as f:
                final_path = output_dir / report_filename(title, moment, extension)
                staged.append((Path(f.name), final_path))
                f.write(data)
    except OSError:
        for temp_path, _ in staged:
            temp_path.unlink(missing_ok=True)
        raise

    for temp_path, path in staged:
        # Use replace() instead of rename() for Windows compatibility
        temp_path.replace(path)
        logger.info(f"Wrote {path}")
    return tuple(path for _, path in staged)


async def _collect(
    capturer: SnapshotCapturer,
    sections: Sequence[Section],
    config: ExportConfig,
) -> Tuple[List[Tuple[str, RasterImage]], Optional[CaptureError]]:
    """Capture sections in order, stopping at the first failure."""
    captured: List[Tuple[str, RasterImage]] = []
    stream = capture_in_order(
        capturer,
        sections,
        concurrent=config.concurrent_capture,
        timeout=config.capture_timeout,
    )
    try:
        async with contextlib.aclosing(stream) as ordered:
            async for section, image in ordered:
                captured.append((section.label, image))
    except CaptureError as e:
        logger.warning(f"Capture failed for section {e.section!r} ({e.reason.value}): {e}")
        return captured, e
    except BaseException:
        # Cancelled mid-pipeline: nothing downstream will use these
        for _, image in captured:
            image.release()
        raise
    return captured, None


def _document_source(
    captured: Sequence[Tuple[str, RasterImage]],
    config: ExportConfig,
) -> Tuple[RasterImage, bool]:
    """Snapshot to paginate, and whether it was created here."""
    if config.document_source is DocumentSource.STACKED and len(captured) > 1:
        return stack_vertically([image for _, image in captured]), True
    return captured[0][1], False


async def export_report(
    sections: Sequence[Section],
    capturer: SnapshotCapturer,
    config: ExportConfig,
    *,
    document_encoder: Optional[DocumentEncoder] = None,
    deck_encoder: Optional[DeckEncoder] = None,
) -> ExportResult:
    """
    Export sections to a paginated document and a slide deck.

    Pipeline:
    1. Capture each section in order (stop at the first CaptureError)
    2. Assemble the Document (first or stacked snapshot)
    3. Assemble the Deck (title + sections + summary)
    4. Encode both (skipped for partial results unless deliver_partial)
    5. Write artifacts to config.output_dir, if set

    Geometry and encoding errors propagate unchanged; capture failures
    are reported through ExportResult.status/error. Nothing is retried.

    Args:
        sections: Sections in output order
        capturer: Capturer for every section
        config: Export configuration
        document_encoder: PDF encoder (default PdfDocumentEncoder)
        deck_encoder: Deck encoder (default PptxDeckEncoder)

    Returns:
        ExportResult

    Raises:
        ValueError: If sections is empty
        InvalidDimension / EmptySnapshot: If a snapshot cannot be laid out
        EncodingError: If an encoder fails
    """
    if not sections:
        raise ValueError("At least one section is required")

    start_time = time.perf_counter()
    moment = config.resolve_timestamp()
    logger.info(f"Starting export {config.title!r} with {len(sections)} sections")

    # 1. Capture
    captured, capture_error = await _collect(capturer, sections, config)
    produced = tuple(label for label, _ in captured)
    not_produced = tuple(s.label for s in sections[len(captured):])
    status = ExportStatus.PARTIAL if capture_error is not None else ExportStatus.COMPLETE

    owned: List[RasterImage] = [image for _, image in captured]
    handed_off = False
    try:
        # 2-3. Assemble (pure geometry, no suspension)
        document = None
        if config.export_pdf and captured:
            source, created = _document_source(captured, config)
            if created:
                owned.append(source)
            document = assemble_document(source, config, generated_at=moment)

        deck = None
        if config.export_pptx:
            deck = assemble_deck(captured, config, generated_at=moment)

        # 4. Encode
        artifacts: Dict[str, bytes] = {}
        if capture_error is None or config.deliver_partial:
            if document is not None:
                pdf_encoder = document_encoder or PdfDocumentEncoder()
                artifacts[pdf_encoder.extension] = pdf_encoder.encode(document)
            if deck is not None:
                slide_encoder = deck_encoder or PptxDeckEncoder()
                artifacts[slide_encoder.extension] = slide_encoder.encode(deck)
        else:
            # Snapshots stay open so the caller can encode the partial result
            handed_off = True
            logger.warning(
                f"Export partial: {len(not_produced)} sections not produced, skipping encoding"
            )
    finally:
        if not handed_off:
            for image in owned:
                image.release()

    # 5. Write
    written: Tuple[Path, ...] = ()
    if config.output_dir is not None and artifacts:
        written = write_artifacts(artifacts, config.output_dir, config.title, moment)

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Export {status.value} in {elapsed:.2f}s: "
        f"{len(produced)}/{len(sections)} sections, {len(artifacts)} artifacts"
    )

    return ExportResult(
        status=status,
        produced=produced,
        not_produced=not_produced,
        document=document,
        deck=deck,
        generated_at=moment,
        artifacts=artifacts,
        written=written,
        error=capture_error,
    )


def run_export(
    sections: Sequence[Section],
    capturer: SnapshotCapturer,
    config: ExportConfig,
    *,
    document_encoder: Optional[DocumentEncoder] = None,
    deck_encoder: Optional[DeckEncoder] = None,
) -> ExportResult:
    """Synchronous wrapper around export_report()."""
    return asyncio.run(export_report(
        sections,
        capturer,
        config,
        document_encoder=document_encoder,
        deck_encoder=deck_encoder,
    ))
