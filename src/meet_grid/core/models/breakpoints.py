"""
Module: core.models.breakpoints

Purpose:
    Responsive size table rows for the floating picture-in-picture tile.

Key Classes:
    - PipBreakpoint: Float size used from a given container width upward

Used By:
    - layout.floating: resolve_float_size()
    - layout.config.LayoutOptions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class PipBreakpoint:
    """
    One row of the PiP size table.

    Attributes:
        min_width: Smallest container width this row applies to
        width: Float width in pixels
        height: Float height in pixels

    Example:
        >>> PipBreakpoint(min_width=768, width=160, height=213)
    """

    min_width: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate breakpoint on construction."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"breakpoint size must be positive: {self.width}x{self.height}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PipBreakpoint:
        """Build from a mapping using either minWidth or min_width."""
        min_width = data.get("min_width", data.get("minWidth", 0))
        return cls(
            min_width=float(min_width),
            width=float(data["width"]),
            height=float(data["height"]),
        )

    def to_dict(self) -> dict:
        return {"min_width": self.min_width, "width": self.width, "height": self.height}
