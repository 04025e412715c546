import pytest
import sys
from datetime import datetime
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import report_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from report_toolkit.core.models import RasterImage  # noqa: E402


# Common test fixtures
@pytest.fixture
def fixed_moment():
    """Deterministic export timestamp."""
    return datetime(2024, 3, 5, 9, 7)


@pytest.fixture
def make_snapshot():
    """Factory for PIL-backed snapshots of a given size."""
    def _create(width: int, height: int, color: str = "white") -> RasterImage:
        return RasterImage.from_pil(Image.new("RGB", (width, height), color=color))
    return _create


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image file."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
