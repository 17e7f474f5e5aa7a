"""
Module: cli

Purpose:
    Command line front end. Loads layout options from JSON and/or flags,
    computes the layout and prints a JSON report; optionally writes a
    PNG preview of the tiles.

Usage:
    # Options from flags only
    meet-grid --width 800 --height 600 --count 6

    # Options file, with overrides
    meet-grid options.json --mode spotlight --pinned-index 2

    # Options on stdin, preview image
    echo '{"dimensions": {"width": 400, "height": 800}, "count": 5}' | meet-grid - --preview out.png

Key Functions:
    - main(): Console script entry point, returns the exit status

Dependencies:
    - layout.controller: compute_layout
    - diagnostics.visualizer: save_layout_preview

Used By:
    - meet-grid console script
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from .core.utils import InvalidRatioError
from .diagnostics import save_layout_preview
from .layout import LayoutOptions, compute_layout
from .layout.config import snake_case_keys

logger = logging.getLogger(__name__)

# Flag destination -> LayoutOptions field
_OVERRIDES = {
    "count": "count",
    "aspect_ratio": "aspect_ratio",
    "gap": "gap",
    "mode": "layout_mode",
    "pinned_index": "pinned_index",
    "speaker_index": "speaker_index",
    "others_position": "others_position",
    "max_items_per_page": "max_items_per_page",
    "page": "current_page",
    "max_visible": "max_visible",
    "visible_page": "current_visible_page",
    "float_width": "float_width",
    "float_height": "float_height",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meet-grid",
        description="Compute a video-conference tile layout and print it as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  gallery    - Uniform grid (pinned, justified and floating variants chosen automatically)
  spotlight  - One item, everyone else hidden
  speaker    - Active speaker above a band of thumbnails
  sidebar    - Pinned item with an others strip

Examples:
  %(prog)s --width 800 --height 600 --count 6
  %(prog)s options.json --mode sidebar --others-position bottom
        """
    )
    parser.add_argument(
        "options",
        nargs="?",
        help="JSON options file, or '-' to read from stdin",
    )
    parser.add_argument("--width", type=float, help="Container width in pixels")
    parser.add_argument("--height", type=float, help="Container height in pixels")
    parser.add_argument("--count", type=int, help="Number of items")
    parser.add_argument("--aspect-ratio", help="Default tile ratio, e.g. 16:9")
    parser.add_argument("--gap", type=float, help="Gap between tiles in pixels")
    parser.add_argument(
        "--mode",
        choices=["gallery", "spotlight", "speaker", "sidebar"],
        help="Layout mode",
    )
    parser.add_argument("--pinned-index", type=int, help="Pinned item index")
    parser.add_argument("--speaker-index", type=int, help="Active speaker index")
    parser.add_argument(
        "--others-position",
        choices=["left", "right", "top", "bottom"],
        help="Side of the others strip",
    )
    parser.add_argument("--max-items-per-page", type=int, help="Gallery page size (0 = off)")
    parser.add_argument("--page", type=int, help="Current gallery page")
    parser.add_argument("--max-visible", type=int, help="Visible cap with +N indicator (0 = off)")
    parser.add_argument("--visible-page", type=int, help="Current page through capped items")
    parser.add_argument("--float-width", type=float, help="Floating tile width override")
    parser.add_argument("--float-height", type=float, help="Floating tile height override")
    parser.add_argument("--preview", type=Path, help="Write a PNG preview to this path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def _read_options_file(source: str) -> dict[str, Any]:
    if source == "-":
        data = json.load(sys.stdin)
    else:
        with open(source, encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Options must be a JSON object, got {type(data).__name__}")
    return data


def load_options(args: argparse.Namespace) -> LayoutOptions:
    """
    Merge the options file (if any) with command line overrides.

    Raises:
        KeyError: If dimensions or count is missing after merging
        TypeError: On unknown keys in the options file
        InvalidRatioError: If a ratio is malformed
    """
    data = snake_case_keys(_read_options_file(args.options)) if args.options else {}

    if args.width is not None or args.height is not None:
        dims = dict(data.get("dimensions") or {})
        if args.width is not None:
            dims["width"] = args.width
        if args.height is not None:
            dims["height"] = args.height
        data["dimensions"] = dims

    for dest, name in _OVERRIDES.items():
        value = getattr(args, dest)
        if value is not None:
            data[name] = value

    return LayoutOptions.from_dict(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    if not args.options and (args.width is None or args.height is None or args.count is None):
        parser.error("--width, --height and --count are required without an options file")

    try:
        options = load_options(args)
        result = compute_layout(options)
    except InvalidRatioError as e:
        logger.error(f"Invalid aspect ratio: {e}")
        return 1
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Invalid options: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read options: {e}")
        return 1

    report = {"options": options.to_dict(), "layout": result.to_dict()}
    print(json.dumps(report, indent=2))

    if args.preview:
        try:
            save_layout_preview(result, options.dimensions, args.preview)
        except OSError as e:
            logger.error(f"Could not write preview: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
