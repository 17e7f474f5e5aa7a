"""
Module: layout.config

Purpose:
    Options for a layout computation. Immutable, normalised on
    construction so the planners never see raw strings or negative caps.

Key Classes:
    - LayoutOptions: Every input of compute_layout()

Dependencies:
    - dataclasses (std)
    - core.models: Dimensions, PipBreakpoint, LayoutMode, OthersPosition
    - core.utils.aspect_ratio: Ratio validation

Used By:
    - layout.controller: compute_layout()
    - cli: Options loaded from JSON
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from meet_grid.core.models import Dimensions, LayoutMode, OthersPosition, PipBreakpoint
from meet_grid.core.utils.aspect_ratio import is_fill_ratio, parse_aspect_ratio

logger = logging.getLogger(__name__)

DEFAULT_ASPECT_RATIO = "16:9"
DEFAULT_GAP = 8.0

# camelCase spellings accepted by from_dict()
_CAMEL_CASE_KEYS = {
    "aspectRatio": "aspect_ratio",
    "layoutMode": "layout_mode",
    "pinnedIndex": "pinned_index",
    "focusIndex": "focus_index",
    "speakerIndex": "speaker_index",
    "othersPosition": "others_position",
    "maxItemsPerPage": "max_items_per_page",
    "currentPage": "current_page",
    "maxVisible": "max_visible",
    "currentVisiblePage": "current_visible_page",
    "itemAspectRatios": "item_aspect_ratios",
    "floatWidth": "float_width",
    "floatHeight": "float_height",
    "floatBreakpoints": "float_breakpoints",
}


def _coerce_enum(enum_cls, value, default):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        logger.warning(
            f"Unknown {enum_cls.__name__} {value!r}, falling back to {default.value!r}"
        )
        return default


def snake_case_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of an options mapping with camelCase keys renamed to snake_case."""
    return {_CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items()}


@dataclass(frozen=True)
class LayoutOptions:
    """
    Inputs for a layout computation (immutable).

    Attributes:
        dimensions: Container size in pixels
        count: Number of items (clamped to >= 0)
        aspect_ratio: Default tile ratio as "W:H"
        gap: Spacing between tiles and around the grid, in pixels
        layout_mode: gallery, spotlight, speaker or sidebar
        pinned_index: Pinned item; in gallery mode triggers the pinned layout
        focus_index: Default for pinned/speaker index in the focused modes
        speaker_index: Active speaker for speaker mode
        others_position: Side holding the others strip (forced to bottom
            in portrait containers)
        max_items_per_page: Page size for gallery paging (0 = off)
        current_page: Requested gallery page (0-based)
        max_visible: Visible cap with "+N" indicator semantics (0 = off)
        current_visible_page: Requested page for capped tiles (0-based)
        item_aspect_ratios: Per-item ratio overrides, index aligned; entries
            may be "W:H", "fill"/"auto" or None
        float_width: Explicit PiP width override
        float_height: Explicit PiP height override
        float_breakpoints: Responsive PiP size table

    Invariants:
        - aspect_ratio parses as two positive integers

    Example:
        >>> options = LayoutOptions(dimensions=Dimensions(800, 600), count=6)
        >>> options.layout_mode
        <LayoutMode.GALLERY: 'gallery'>
    """

    # Required
    dimensions: Dimensions
    count: int

    # Geometry
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    gap: float = DEFAULT_GAP

    # Mode selection
    layout_mode: LayoutMode = LayoutMode.GALLERY
    pinned_index: Optional[int] = None
    focus_index: int = 0
    speaker_index: Optional[int] = None
    others_position: OthersPosition = OthersPosition.RIGHT

    # Paging
    max_items_per_page: int = 0
    current_page: int = 0
    max_visible: int = 0
    current_visible_page: int = 0

    # Per-item ratios
    item_aspect_ratios: tuple[Optional[str], ...] = ()

    # Floating tile
    float_width: Optional[float] = None
    float_height: Optional[float] = None
    float_breakpoints: tuple[PipBreakpoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalise values and validate the default ratio."""
        parse_aspect_ratio(self.aspect_ratio)

        if not isinstance(self.dimensions, Dimensions):
            object.__setattr__(self, "dimensions", Dimensions.from_dict(self.dimensions))

        object.__setattr__(self, "count", max(0, int(self.count)))
        object.__setattr__(self, "gap", max(0.0, float(self.gap)))
        object.__setattr__(
            self, "layout_mode",
            _coerce_enum(LayoutMode, self.layout_mode, LayoutMode.GALLERY),
        )
        object.__setattr__(
            self, "others_position",
            _coerce_enum(OthersPosition, self.others_position, OthersPosition.RIGHT),
        )
        for name in ("max_items_per_page", "current_page", "max_visible", "current_visible_page"):
            object.__setattr__(self, name, max(0, int(getattr(self, name))))

        object.__setattr__(self, "item_aspect_ratios", tuple(self.item_aspect_ratios or ()))
        object.__setattr__(
            self, "float_breakpoints",
            tuple(
                bp if isinstance(bp, PipBreakpoint) else PipBreakpoint.from_dict(bp)
                for bp in (self.float_breakpoints or ())
            ),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def has_pinned_index(self) -> bool:
        """True when pinned_index points at an existing item."""
        return self.pinned_index is not None and 0 <= self.pinned_index < self.count

    def item_ratio(self, index: int) -> Optional[str]:
        """Per-item ratio override for an index (None when absent)."""
        if 0 <= index < len(self.item_aspect_ratios):
            return self.item_aspect_ratios[index]
        return None

    def effective_ratio(self, index: int) -> str:
        """
        Ratio used to lay out an item: its own ratio unless absent or a
        fill sentinel, otherwise the container default.
        """
        ratio = self.item_ratio(index)
        if ratio is None or is_fill_ratio(ratio):
            return self.aspect_ratio
        return ratio

    def replace(self, **changes: Any) -> LayoutOptions:
        """Copy with some fields changed (re-normalised)."""
        return dataclasses.replace(self, **changes)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutOptions:
        """
        Build options from a mapping with snake_case or camelCase keys.

        Raises:
            TypeError: On unknown keys
            KeyError: If dimensions or count is missing
            InvalidRatioError: If aspect_ratio is malformed
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise TypeError(f"Unknown layout option: {key!r}")
            values[name] = value

        for required in ("dimensions", "count"):
            if required not in values:
                raise KeyError(f"Missing required layout option: {required!r}")

        values["dimensions"] = Dimensions.from_dict(values["dimensions"])
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "dimensions": self.dimensions.to_dict(),
            "count": self.count,
            "aspect_ratio": self.aspect_ratio,
            "gap": self.gap,
            "layout_mode": self.layout_mode.value,
            "pinned_index": self.pinned_index,
            "focus_index": self.focus_index,
            "speaker_index": self.speaker_index,
            "others_position": self.others_position.value,
            "max_items_per_page": self.max_items_per_page,
            "current_page": self.current_page,
            "max_visible": self.max_visible,
            "current_visible_page": self.current_visible_page,
            "item_aspect_ratios": list(self.item_aspect_ratios),
            "float_width": self.float_width,
            "float_height": self.float_height,
            "float_breakpoints": [bp.to_dict() for bp in self.float_breakpoints],
        }
