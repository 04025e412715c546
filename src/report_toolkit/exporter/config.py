"""
Module: exporter.config

Purpose:
    Configuration dataclass for a report export. Immutable
    configuration with validation on construction.

Key Classes:
    - ExportConfig: Report metadata, output options, capture behavior
    - DocumentSource: Which snapshot the paginated document is built from

Dependencies:
    - dataclasses (std)
    - pathlib (std)
    - exporter.layout.config: LayoutConfig

Used By:
    - exporter.controller: Export orchestration
    - exporter.assembly: Header/title metadata
    - cli: Command-line options and JSON config files
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .layout.config import LayoutConfig


DEFAULT_TITLE = "Marketing Activity Effectiveness Report"
DEFAULT_SUBJECT = "Performance Analysis"
DEFAULT_PERIOD = "Q1 2023"
DEFAULT_COMPANY = "Change Influence"
DEFAULT_FOOTER = "Confidential - For internal use only"
DEFAULT_QUALITY = 2.0


class DocumentSource(Enum):
    """Snapshot used for the paginated document."""

    FIRST = "first"  # First captured section only
    STACKED = "stacked"  # All captured sections stacked vertically


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting a report (immutable).

    Attributes:
        title: Report title (document header, deck title)
        subject: Deck subject property
        report_period: Reporting period shown in headers
        company: Company shown in headers and deck properties
        footer_text: Footer line on every page
        summary_points: Bullets for the closing slide (empty = no slide)
        quality: Capture scale factor passed to capturers that render
        document_source: Which snapshot the document paginates
        output_dir: Directory for written artifacts (None = don't write)
        export_pdf: Encode the paginated document
        export_pptx: Encode the slide deck
        concurrent_capture: Schedule all captures up front
        capture_timeout: Seconds allowed per capture (None = no limit)
        deliver_partial: Encode produced sections after a capture failure
        generated_at: Timestamp for headers and filenames (None = now)
        layout: Page and slide geometry

    Example:
        >>> config = ExportConfig(title="Q3 Review", report_period="Q3 2024")
        >>> config.subtitle
        'Q3 2024 Performance Analysis'
    """

    # Metadata
    title: str = DEFAULT_TITLE
    subject: str = DEFAULT_SUBJECT
    report_period: str = DEFAULT_PERIOD
    company: str = DEFAULT_COMPANY
    footer_text: str = DEFAULT_FOOTER
    summary_points: tuple[str, ...] = ()

    # Capture
    quality: float = DEFAULT_QUALITY
    concurrent_capture: bool = False
    capture_timeout: Optional[float] = None

    # Assembly
    document_source: DocumentSource = DocumentSource.FIRST
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    # Output
    output_dir: Optional[Path] = None
    export_pdf: bool = True
    export_pptx: bool = True
    deliver_partial: bool = False
    generated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.title.strip():
            raise ValueError("title must not be empty")
        if self.quality <= 0:
            raise ValueError(f"quality must be positive: {self.quality}")
        if self.capture_timeout is not None and self.capture_timeout <= 0:
            raise ValueError(f"capture_timeout must be positive: {self.capture_timeout}")
        if not (self.export_pdf or self.export_pptx):
            raise ValueError("At least one of export_pdf/export_pptx must be enabled")
        if isinstance(self.summary_points, list):
            # Normalize lists to tuples
            object.__setattr__(self, "summary_points", tuple(self.summary_points))

    @property
    def subtitle(self) -> str:
        """Title-slide subtitle line."""
        return f"{self.report_period} {self.subject}"

    def resolve_timestamp(self) -> datetime:
        """Configured timestamp, or now."""
        return self.generated_at or datetime.now()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """
        Build a config from JSON-compatible data.

        Layout geometry is not configurable from JSON; unknown keys are
        rejected so typos surface instead of being ignored.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        allowed = {f.name for f in fields(cls)} - {"layout"}
        unknown = set(data) - allowed
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        values = dict(data)
        if "summary_points" in values:
            values["summary_points"] = tuple(values["summary_points"])
        if values.get("output_dir") is not None:
            values["output_dir"] = Path(values["output_dir"])
        if "document_source" in values:
            values["document_source"] = DocumentSource(values["document_source"])
        if isinstance(values.get("generated_at"), str):
            values["generated_at"] = datetime.fromisoformat(values["generated_at"])
        return cls(**values)
