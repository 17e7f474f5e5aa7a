import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import meet_grid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from meet_grid.core.models import Dimensions  # noqa: E402


# Common test fixtures
@pytest.fixture
def landscape():
    """A 1280x720 desktop container."""
    return Dimensions(1280, 720)


@pytest.fixture
def portrait_phone():
    """A 390x844 phone container (small mobile)."""
    return Dimensions(390, 844)


@pytest.fixture
def portrait_tablet():
    """A 768x1024 portrait container wider than the mobile breakpoint."""
    return Dimensions(768, 1024)
