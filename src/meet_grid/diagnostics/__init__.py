"""
Module: diagnostics

Purpose:
    Debug previews of computed layouts.

Key Functions:
    - visualize_layout(): Draw a LayoutResult onto a Pillow image
    - save_layout_preview(): Draw and save as PNG

Dependencies:
    - PIL: Image drawing
"""

from .visualizer import save_layout_preview, visualize_layout

__all__ = [
    "visualize_layout",
    "save_layout_preview",
]
