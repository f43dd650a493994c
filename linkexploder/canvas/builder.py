"""Assemble, serialize and save the canvas for a focus note."""

import json
import logging
from collections.abc import Callable
from typing import TypeVar

from ..models import CanvasDocument, FocusFile, LinkIndex
from ..vault.graph import build_incoming_index
from .layout import LayoutContext, layout_incoming, layout_outgoing
from .paths import allocate_path

logger = logging.getLogger(__name__)

CANVAS_EXTENSION = "canvas"

FileRef = TypeVar("FileRef")


def assemble_canvas(ctx: LayoutContext) -> CanvasDocument:
    """Flatten the layout arenas into a canvas document."""
    return CanvasDocument(nodes=list(ctx.nodes.values()), edges=list(ctx.edges.values()))


def layout_canvas(focus: str, links: LinkIndex) -> CanvasDocument:
    """Compute the canvas for `focus`. Pure; no I/O."""
    incoming = build_incoming_index(links)
    ctx = layout_outgoing(focus, links)
    layout_incoming(ctx, incoming)
    canvas = assemble_canvas(ctx)
    logger.debug("canvas for %s: %d nodes, %d edges", focus, len(canvas.nodes), len(canvas.edges))
    return canvas


def serialize_canvas(canvas: CanvasDocument) -> str:
    return json.dumps(canvas.to_dict(), indent=2, ensure_ascii=False)


def canvas_path(focus: FocusFile, target_location: str = "") -> str:
    """Desired output path: `<target_location>/<basename>.canvas`."""
    filename = f"{focus.basename}.{CANVAS_EXTENSION}"
    folder = target_location.strip("/")
    if folder:
        return f"{folder}/{filename}"
    return filename


def build_canvas(
    focus: FocusFile,
    links: LinkIndex,
    exists: Callable[[str], bool],
    create: Callable[[str, str], FileRef],
    open_file: Callable[[FileRef], object],
    target_location: str = "",
) -> FileRef:
    """Lay out, save and open the canvas for `focus`.

    The document is fully built before anything is written. Errors from the
    collaborators and NoAvailablePathError propagate to the caller.
    """
    canvas = layout_canvas(focus.path, links)
    content = serialize_canvas(canvas)

    path = allocate_path(canvas_path(focus, target_location), exists)
    result = create(path, content)
    logger.info("created %s", path)
    open_file(result)
    return result
