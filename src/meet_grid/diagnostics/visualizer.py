"""
Module: diagnostics.visualizer

Purpose:
    Debug visualization for computed layouts. Draws every visible tile as
    a labelled box on an image the size of the container, to check grid
    shapes, strips and paging by eye.

Key Functions:
    - visualize_layout(): Create preview image with all tile boxes
    - save_layout_preview(): Save preview to disk

Dependencies:
    - PIL: Image drawing
    - core.models: LayoutResult, Dimensions

Used By:
    - cli: --preview option
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from meet_grid.core.models import Dimensions, ItemPlacement, LayoutResult

logger = logging.getLogger(__name__)

# Visualization constants
COLORS = {
    "main": (220, 50, 47, 200),       # Red - Pinned / spotlight / speaker
    "tile": (38, 139, 210, 200),      # Blue - Regular tiles
    "float": (133, 153, 0, 220),      # Green - Floating PiP
    "overflow": (203, 75, 22, 220),   # Orange - "+N" indicator tile
}

BACKGROUND_COLOR = (32, 32, 32, 255)
LABEL_BG_COLOR = (0, 0, 0, 200)       # Black background for labels
LABEL_TEXT_COLOR = (255, 255, 255)    # White text
BOX_LINE_WIDTH = 3
FONT_SIZE = 16


def _load_font() -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        return ImageFont.load_default()


def _tile_bbox(placement: ItemPlacement) -> Tuple[int, int, int, int]:
    x0 = int(round(placement.position.left))
    y0 = int(round(placement.position.top))
    x1 = max(x0, int(round(placement.position.left + placement.dimensions.width)) - 1)
    y1 = max(y0, int(round(placement.position.top + placement.dimensions.height)) - 1)
    return x0, y0, x1, y1


def visualize_layout(result: LayoutResult, container: Dimensions) -> Image.Image:
    """
    Create a preview image with a box around every visible tile.

    Colours:
    - Red: Main item (pinned, spotlight or speaker)
    - Blue: Regular tiles
    - Green: Floating PiP
    - Orange: Tile carrying the "+N" indicator

    Hidden tiles are not drawn.

    Args:
        result: Computed layout
        container: Container the layout was computed for

    Returns:
        RGB image of the container size

    Example:
        >>> image = visualize_layout(result, Dimensions(800, 600))
        >>> image.save("layout.png")
    """
    size = (max(1, math.ceil(container.width)), max(1, math.ceil(container.height)))
    image = Image.new("RGBA", size, BACKGROUND_COLOR)
    overlay = Image.new("RGBA", size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(overlay)
    font = _load_font()

    # Float goes last so it is drawn on top of the full-bleed item
    order = [i for i in result.visible_indices if not result.is_float_item(i)]
    order += [i for i in result.visible_indices if result.is_float_item(i)]

    for index in order:
        placement = result.placement(index)
        label = str(index)
        if result.is_float_item(index):
            color = COLORS["float"]
        elif placement.is_main:
            color = COLORS["main"]
        elif result.hidden_count and index == result.last_visible_others_index:
            color = COLORS["overflow"]
            label = f"+{result.hidden_count}"
        else:
            color = COLORS["tile"]
        _draw_tile_box(draw, _tile_bbox(placement), label, color, font)

    image = Image.alpha_composite(image, overlay)
    return image.convert("RGB")


def _draw_tile_box(
    draw: ImageDraw.ImageDraw,
    bbox: Tuple[int, int, int, int],
    label_text: str,
    color: Tuple[int, int, int, int],
    font: ImageFont.ImageFont,
) -> None:
    """
    Draw a single tile box with its label in the top-left corner.

    Args:
        draw: ImageDraw object
        bbox: (left, top, right, bottom) in pixels
        label_text: Text to display inside the box
        color: RGBA color tuple for box
        font: Font for label text
    """
    x0, y0, _, _ = bbox
    draw.rectangle(bbox, outline=color, width=BOX_LINE_WIDTH)

    text_bbox = draw.textbbox((0, 0), label_text, font=font)
    text_width = text_bbox[2] - text_bbox[0]
    text_height = text_bbox[3] - text_bbox[1]

    label_x = x0 + BOX_LINE_WIDTH
    label_y = y0 + BOX_LINE_WIDTH
    draw.rectangle(
        (label_x, label_y, label_x + text_width + 4, label_y + text_height + 4),
        fill=LABEL_BG_COLOR,
    )
    draw.text((label_x + 2, label_y + 2), label_text, fill=LABEL_TEXT_COLOR, font=font)


def save_layout_preview(result: LayoutResult, container: Dimensions, path: Path) -> Path:
    """
    Create and save a layout preview as PNG.

    Args:
        result: Computed layout
        container: Container the layout was computed for
        path: Output file (parent directories are created)

    Returns:
        Path to saved preview
    """
    path = Path(path)
    image = visualize_layout(result, container)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, "PNG")

    logger.info(
        f"Saved layout preview to {path}: {len(result.visible_indices)}/{result.count} "
        f"tiles visible, {result.cols}x{result.rows} grid"
    )
    return path
