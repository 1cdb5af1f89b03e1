"""Reusable Streamlit UI components."""

from .header import render_header
from .uploader import render_uploader
from .image import render_image
from .loader import render_loader
from .editor import render_editor
from .result_panel import render_result_panel

__all__ = [
    "render_header",
    "render_uploader",
    "render_image",
    "render_loader",
    "render_editor",
    "render_result_panel",
]
