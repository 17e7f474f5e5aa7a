"""Top-level package for the meet layout grid engine.

Provides subpackages:
- meet_grid.core – value types and aspect ratio helpers
- meet_grid.layout – layout planners and compute_layout()
- meet_grid.diagnostics – preview images of computed layouts
- meet_grid.cli – command line report
"""

from .core.models import (
    ContentDimensions,
    Dimensions,
    ItemPlacement,
    LayoutMode,
    LayoutResult,
    OthersPosition,
    PaginationState,
    PipBreakpoint,
    Position,
)
from .core.utils import InvalidRatioError, parse_aspect_ratio, parse_ratio
from .layout import Corner, LayoutOptions, compute_layout, create_grid, snap_to_corner


def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("meet-layout-grid")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "compute_layout",
    "create_grid",
    "snap_to_corner",
    "LayoutOptions",
    "LayoutResult",
    "LayoutMode",
    "OthersPosition",
    "Corner",
    "Dimensions",
    "Position",
    "ContentDimensions",
    "ItemPlacement",
    "PaginationState",
    "PipBreakpoint",
    "InvalidRatioError",
    "parse_aspect_ratio",
    "parse_ratio",
]
