"""
Tests for the report-export command line.
"""

import argparse
import json
from datetime import datetime
from pathlib import Path

import fitz
import pytest
from PIL import Image

from report_toolkit.cli import FileSurfaceCapturer, build_parser, load_config, main, parse_section
from report_toolkit.exporter import DocumentSource


@pytest.fixture
def dashboard_png(tmp_path: Path) -> Path:
    path = tmp_path / "overview.png"
    Image.new("RGB", (1000, 4000), color="white").save(path)
    return path


class TestParseSection:
    """Tests for parse_section()."""

    def test_label_and_path(self):
        section = parse_section("Channel Mix=charts/mix.png")

        assert section.label == "Channel Mix"
        assert section.surface == "charts/mix.png"

    def test_label_defaults_to_stem(self):
        assert parse_section("dashboard.pdf#2").label == "dashboard"

    def test_missing_path(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_section("Overview=")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_flags_override_config_file(self, tmp_path):
        config_path = tmp_path / "export.json"
        config_path.write_text(json.dumps({
            "title": "From File",
            "company": "Acme",
            "generated_at": "2024-03-05T09:07:00",
        }))
        args = build_parser().parse_args([
            "--section", "a.png",
            "--config", str(config_path),
            "--title", "From Flag",
            "--bullet", "one",
            "--bullet", "two",
            "--stacked",
            "--no-pptx",
        ])

        config = load_config(args)

        assert config.title == "From Flag"
        assert config.company == "Acme"
        assert config.generated_at == datetime(2024, 3, 5, 9, 7)
        assert config.summary_points == ("one", "two")
        assert config.document_source is DocumentSource.STACKED
        assert config.export_pptx is False
        assert config.output_dir == Path(".")

    def test_output_dir_from_config_file(self, tmp_path):
        config_path = tmp_path / "export.json"
        config_path.write_text(json.dumps({"output_dir": "reports"}))
        args = build_parser().parse_args(["--section", "a.png", "--config", str(config_path)])

        config = load_config(args)

        assert config.output_dir == Path("reports")

    def test_output_dir_flag_beats_config_file(self, tmp_path):
        config_path = tmp_path / "export.json"
        config_path.write_text(json.dumps({"output_dir": "reports"}))
        args = build_parser().parse_args([
            "--section", "a.png",
            "--config", str(config_path),
            "--output-dir", "elsewhere",
        ])

        config = load_config(args)

        assert config.output_dir == Path("elsewhere")

    def test_output_dir_defaults_to_current_directory(self):
        args = build_parser().parse_args(["--section", "a.png"])

        assert load_config(args).output_dir == Path(".")


class TestFileSurfaceCapturer:
    """Tests for FileSurfaceCapturer routing."""

    @pytest.mark.asyncio
    async def test_routes_images_and_pdfs(self, tmp_path, sample_image):
        pdf_path = tmp_path / "dash.pdf"
        doc = fitz.open()
        doc.new_page(width=100, height=50)
        doc.save(pdf_path)
        doc.close()
        capturer = FileSurfaceCapturer(scale=2.0)

        from_png = await capturer.capture(str(sample_image))
        from_pdf = await capturer.capture(f"{pdf_path}#1")

        assert from_png.size == (200, 100)
        assert from_pdf.size == (200, 100)


class TestMain:
    """Tests for main()."""

    def test_exports_both_artifacts(self, tmp_path, dashboard_png, capsys):
        out_dir = tmp_path / "out"

        code = main([
            "--section", f"Overview={dashboard_png}",
            "--title", "Q2 Review",
            "--bullet", "Reach up",
            "--output-dir", str(out_dir),
        ])

        assert code == 0
        written = sorted(p.suffix for p in out_dir.iterdir())
        assert written == [".pdf", ".pptx"]
        assert "Q2_Review_" in capsys.readouterr().out

    def test_failed_capture_exits_nonzero(self, tmp_path, dashboard_png):
        out_dir = tmp_path / "out"

        code = main([
            "--section", f"Overview={dashboard_png}",
            "--section", f"Missing={tmp_path / 'missing.png'}",
            "--output-dir", str(out_dir),
        ])

        assert code == 1
        assert not out_dir.exists()

    def test_partial_flag_writes_captured_sections(self, tmp_path, dashboard_png):
        out_dir = tmp_path / "out"

        code = main([
            "--section", f"Overview={dashboard_png}",
            "--section", f"Missing={tmp_path / 'missing.png'}",
            "--output-dir", str(out_dir),
            "--partial",
            "--no-pdf",
        ])

        assert code == 1
        assert [p.suffix for p in out_dir.iterdir()] == [".pptx"]

    def test_invalid_config_exits_with_usage_error(self, tmp_path, dashboard_png):
        config_path = tmp_path / "bad.json"
        config_path.write_text(json.dumps({"unknown": 1}))

        with pytest.raises(SystemExit) as exc_info:
            main(["--section", str(dashboard_png), "--config", str(config_path)])

        assert exc_info.value.code == 2
