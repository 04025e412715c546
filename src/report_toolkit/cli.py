"""Command-line entry point: export image or PDF snapshots to a report.

Example:
    report-export --section "Overview=overview.png" \\
        --section "Funnel=dashboard.pdf#2" \\
        --bullet "Engagement up 12%" --output-dir out/
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional, Sequence

from report_toolkit import __version__
from report_toolkit.core.errors import ExportError
from report_toolkit.exporter import (
    DocumentSource,
    ExportConfig,
    ExportStatus,
    Section,
    SnapshotCapturer,
    run_export,
)
from report_toolkit.exporter.capture import ImageFileCapturer, PdfPageCapturer

logger = logging.getLogger("report_toolkit.cli")


class FileSurfaceCapturer(SnapshotCapturer):
    """Routes ``.pdf`` surfaces to PdfPageCapturer and the rest to ImageFileCapturer."""

    def __init__(self, scale: float) -> None:
        self._pdf = PdfPageCapturer(scale=scale)
        self._image = ImageFileCapturer()

    async def capture(self, surface: Any):
        path_text = str(surface).partition("#")[0]
        if path_text.lower().endswith(".pdf"):
            return await self._pdf.capture(surface)
        return await self._image.capture(Path(surface))


def parse_section(value: str) -> Section:
    """Parse ``LABEL=PATH``; without a label the file stem is used."""
    label, sep, path = value.partition("=")
    if not sep:
        path = value
        label = Path(value.partition("#")[0]).stem
    if not path:
        raise argparse.ArgumentTypeError(f"Missing path in section {value!r}")
    return Section(label=label, surface=path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-export",
        description="Export dashboard snapshots to a paginated PDF and a PPTX deck",
    )
    parser.add_argument(
        "--section", dest="sections", action="append", type=parse_section, required=True,
        help="Section as LABEL=PATH (PNG/JPEG, or file.pdf#PAGE); repeatable, order kept",
    )
    parser.add_argument("--config", type=Path, help="JSON file with ExportConfig fields")
    parser.add_argument("--title", help="Report title")
    parser.add_argument("--period", help="Reporting period, e.g. 'Q3 2024'")
    parser.add_argument("--company", help="Company name")
    parser.add_argument(
        "--bullet", dest="bullets", action="append", default=None,
        help="Summary bullet point; repeatable",
    )
    parser.add_argument(
        "--output-dir", type=Path, default=None,
        help="Output directory (default: config file value, else the current directory)",
    )
    parser.add_argument("--quality", type=float, help="PDF capture scale factor")
    parser.add_argument("--no-pdf", action="store_true", help="Skip the PDF document")
    parser.add_argument("--no-pptx", action="store_true", help="Skip the PPTX deck")
    parser.add_argument(
        "--stacked", action="store_true",
        help="Paginate all sections stacked into one document",
    )
    parser.add_argument("--concurrent", action="store_true", help="Capture sections concurrently")
    parser.add_argument("--timeout", type=float, help="Per-section capture timeout (seconds)")
    parser.add_argument(
        "--partial", action="store_true",
        help="Write artifacts for captured sections even if a later capture fails",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> ExportConfig:
    """Merge the JSON config file (if any) with command-line overrides."""
    config = ExportConfig()
    if args.config is not None:
        data = json.loads(args.config.read_text(encoding="utf-8"))
        config = ExportConfig.from_dict(data)

    overrides: dict[str, Any] = {}
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    elif config.output_dir is None:
        overrides["output_dir"] = Path(".")
    if args.title:
        overrides["title"] = args.title
    if args.period:
        overrides["report_period"] = args.period
    if args.company:
        overrides["company"] = args.company
    if args.bullets is not None:
        overrides["summary_points"] = tuple(args.bullets)
    if args.quality is not None:
        overrides["quality"] = args.quality
    if args.no_pdf:
        overrides["export_pdf"] = False
    if args.no_pptx:
        overrides["export_pptx"] = False
    if args.stacked:
        overrides["document_source"] = DocumentSource.STACKED
    if args.concurrent:
        overrides["concurrent_capture"] = True
    if args.timeout is not None:
        overrides["capture_timeout"] = args.timeout
    if args.partial:
        overrides["deliver_partial"] = True
    return replace(config, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    sections: List[Section] = args.sections
    try:
        result = run_export(sections, FileSurfaceCapturer(scale=config.quality), config)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        return 1

    for path in result.written:
        print(path)

    if result.status is ExportStatus.PARTIAL:
        logger.error(
            f"Export incomplete: {result.error}; not produced: {', '.join(result.not_produced)}"
        )
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
