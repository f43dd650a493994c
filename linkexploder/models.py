"""Data models for vault notes and canvas documents."""

import hashlib
from dataclasses import dataclass, field
from typing import Any

# path -> {linked path -> link count}
LinkIndex = dict[str, dict[str, int]]
# path -> {path linking to it -> 1}
ReverseLinkIndex = dict[str, dict[str, int]]

EdgeKey = tuple[str, str]

FOCUS_COLOR = "1"


@dataclass(frozen=True)
class FocusFile:
    """The note a canvas is generated for."""

    path: str  # vault-relative, e.g. "folder/note.md"
    basename: str  # display name, e.g. "note"


@dataclass
class Note:
    """A markdown note in the vault."""

    path: str  # vault-relative POSIX path, e.g. "folder/note.md"
    name: str  # filename without extension
    content: str  # raw markdown after frontmatter
    frontmatter: dict  # parsed YAML
    links: list[str] = field(default_factory=list)  # raw link targets, one per occurrence

    @property
    def focus(self) -> FocusFile:
        return FocusFile(path=self.path, basename=self.name)


@dataclass
class CanvasNode:
    """A file node on the canvas. The id is the document path."""

    id: str
    x: float
    y: float
    width: int
    height: int
    focus: bool = False

    @property
    def file(self) -> str:
        return self.id

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": "file",
            "file": self.file,
            "x": _number(self.x),
            "y": _number(self.y),
            "width": self.width,
            "height": self.height,
        }
        if self.focus:
            data["color"] = FOCUS_COLOR
        return data


@dataclass(frozen=True)
class CanvasEdge:
    """A directed edge, leaving the source on the right and entering the target on the left."""

    source: str
    target: str
    from_side: str = "right"
    to_side: str = "left"

    @property
    def key(self) -> EdgeKey:
        return (self.source, self.target)

    @property
    def id(self) -> str:
        digest = hashlib.sha256(f"{self.source}\0{self.target}".encode("utf-8"))
        return digest.hexdigest()[:16]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "fromNode": self.source,
            "fromSide": self.from_side,
            "toNode": self.target,
            "toSide": self.to_side,
        }


@dataclass
class CanvasDocument:
    """Serialized artifact: flat node and edge collections."""

    nodes: list[CanvasNode] = field(default_factory=list)
    edges: list[CanvasEdge] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


def _number(value: float) -> float | int:
    """Write whole coordinates as integers."""
    if float(value).is_integer():
        return int(value)
    return value
