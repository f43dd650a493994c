"""Canvas layout, assembly and output path allocation."""

from .builder import assemble_canvas, build_canvas, canvas_path, layout_canvas, serialize_canvas
from .layout import LayoutContext, layout_incoming, layout_outgoing
from .paths import allocate_path

__all__ = [
    "assemble_canvas",
    "build_canvas",
    "canvas_path",
    "layout_canvas",
    "serialize_canvas",
    "LayoutContext",
    "layout_incoming",
    "layout_outgoing",
    "allocate_path",
]
