"""Column/row layout of a note's link neighborhood.

Columns are traversal depth from the focus note: the focus sits in column 0,
its outgoing links in column 1, their links in column 2, and direct backlinks
in column -1. Rows are slots within a column, consumed as nodes are placed.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from ..errors import LayoutError
from ..models import CanvasEdge, CanvasNode, EdgeKey, LinkIndex, ReverseLinkIndex

logger = logging.getLogger(__name__)

NODE_WIDTH = 500
NODE_HEIGHT = 500
BUFFER = 100
COLUMN_WIDTH = NODE_WIDTH + 500
ROW_HEIGHT = NODE_HEIGHT + BUFFER
MAX_DEPTH = 2


def column_x(column: int) -> int:
    return COLUMN_WIDTH * column


def centered_y(count: int, start_row: int = 0) -> float:
    """Top y of a node centered against `count` rows beginning at `start_row`."""
    span = NODE_HEIGHT * count + BUFFER * (count - 1)
    return start_row * ROW_HEIGHT + span / 2 - NODE_HEIGHT / 2


@dataclass
class LayoutContext:
    """Node and edge arenas plus per-column row counters for one layout run."""

    focus: str
    nodes: dict[str, CanvasNode] = field(default_factory=dict)
    edges: dict[EdgeKey, CanvasEdge] = field(default_factory=dict)
    rows: dict[int, int] = field(default_factory=lambda: defaultdict(int))

    def add_edge(self, source: str, target: str) -> None:
        edge = CanvasEdge(source=source, target=target)
        self.edges[edge.key] = edge

    def place(self, path: str, column: int) -> bool:
        """Put `path` in the next free row of `column`.

        A node already sitting in a column at least as shallow keeps its
        position. Returns True when the node was created or moved.
        """
        x = column_x(column)
        existing = self.nodes.get(path)
        if existing is not None and existing.x <= x:
            return False

        row = self.rows[column]
        y = row * ROW_HEIGHT
        if existing is None:
            self.nodes[path] = CanvasNode(id=path, x=x, y=y, width=NODE_WIDTH, height=NODE_HEIGHT)
            logger.debug("placed %s at column %d row %d", path, column, row)
        else:
            logger.debug("moved %s from x=%s to column %d row %d", path, existing.x, column, row)
            existing.x = x
            existing.y = y
        self.rows[column] = row + 1
        return True


@dataclass(frozen=True)
class _Visit:
    parent: str
    path: str
    column: int


@dataclass(frozen=True)
class _Center:
    path: str
    column: int
    start_row: int  # first row of the child column owned by this node's children


def _visits(parent: str, column: int, links: LinkIndex) -> list[_Visit]:
    # Reversed so the stack pops links in the order the index lists them.
    return [_Visit(parent, link, column) for link in reversed(list(links.get(parent, {})))]


def layout_outgoing(focus: str, links: LinkIndex, max_depth: int = MAX_DEPTH) -> LayoutContext:
    """Lay out the focus note and its outgoing links up to `max_depth` columns.

    Depth-first preorder in link-index order. A node reached again at a
    shallower column is moved there, so every node ends up in the column of
    its shortest path from the focus. Every traversed link becomes an edge.
    After a node's children are placed it is centered against them; a node
    without children reserves one row of the child column instead.
    """
    ctx = LayoutContext(focus=focus)
    ctx.nodes[focus] = CanvasNode(id=focus, x=0, y=0, width=NODE_WIDTH, height=NODE_HEIGHT, focus=True)
    ctx.rows[0] = 1

    stack: list[_Visit | _Center] = list(_visits(focus, 1, links))
    while stack:
        item = stack.pop()
        if isinstance(item, _Center):
            _center(ctx, item)
            continue

        logger.debug("%s%s (column %d)", "--" * item.column, item.path, item.column)
        placed = ctx.place(item.path, item.column)
        ctx.add_edge(item.parent, item.path)

        if item.column < max_depth:
            if placed:
                stack.append(_Center(item.path, item.column, ctx.rows[item.column + 1]))
            stack.extend(_visits(item.path, item.column + 1, links))

    _center_focus(ctx)
    return ctx


def _center(ctx: LayoutContext, item: _Center) -> None:
    child_column = item.column + 1
    added = ctx.rows[child_column] - item.start_row
    if added == 0:
        # Keep the next sibling's subtree clear of this node.
        ctx.rows[child_column] += 1
        added = 1

    node = ctx.nodes[item.path]
    node.y = centered_y(added, item.start_row)
    logger.debug("centered %s on %d row(s) from row %d", item.path, added, item.start_row)


def _center_focus(ctx: LayoutContext) -> None:
    for column in range(max(ctx.rows), 0, -1):
        count = ctx.rows[column]
        if count:
            ctx.nodes[ctx.focus].y = centered_y(count)
            logger.debug("centered focus %s on column %d (%d rows)", ctx.focus, column, count)
            return


def layout_incoming(ctx: LayoutContext, incoming: ReverseLinkIndex) -> LayoutContext:
    """Add direct backlinks of the focus note in column -1.

    Nodes already placed by the outgoing layout stay where they are. New
    nodes are stacked as one block centered on the focus node. One edge is
    added for every backlink.
    """
    focus_node = ctx.nodes.get(ctx.focus)
    if focus_node is None:
        raise LayoutError(f"focus node {ctx.focus!r} must be laid out before its backlinks")

    linkers = list(incoming.get(ctx.focus, {}))
    added = [path for path in linkers if path not in ctx.nodes]

    count = len(added)
    start = focus_node.y + NODE_HEIGHT / 2 - (count / 2 * NODE_HEIGHT + (count - 1) / 2 * BUFFER)
    for i, path in enumerate(added):
        ctx.nodes[path] = CanvasNode(
            id=path,
            x=column_x(-1),
            y=start + i * ROW_HEIGHT,
            width=NODE_WIDTH,
            height=NODE_HEIGHT,
        )
        ctx.rows[-1] += 1
        logger.debug("placed backlink %s at row %d", path, i)

    for path in linkers:
        ctx.add_edge(path, ctx.focus)

    return ctx
