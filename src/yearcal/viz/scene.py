"""
Immutable scene graph of typed draw nodes.

A Scene is rebuilt from scratch on every render; nodes are frozen dataclasses so a mounted
scene can be shared with the host without defensive copies. The only behavior a node carries
is the optional click handler on Text, invoked by the host through Text.activate().

Node kinds
- Group: container with an optional transform and inherited text anchor.
- Text: label; clickable when `on_click` is set.
- Rect: day cell with a tooltip.
- Path: stroked path (month separators).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from yearcal.core.hashing import hash_payload
from yearcal.core.typing import JsonDict

__all__ = [
    "Text",
    "Rect",
    "Path",
    "Group",
    "Node",
    "Scene",
    "iter_nodes",
    "node_to_dict",
    "fingerprint",
]


@dataclass(frozen=True)
class Text:
    text: str
    x: float | None = None
    y: float | None = None
    dy: str | None = None
    transform: str | None = None
    font_size: int | None = None
    font_weight: str | None = None
    text_anchor: str | None = None
    css_class: str | None = None
    on_click: Callable[[], None] | None = field(default=None, compare=False, repr=False)

    @property
    def clickable(self) -> bool:
        return self.on_click is not None

    def activate(self) -> None:
        """Deliver a click to this node; a no-op for non-clickable text."""
        if self.on_click is not None:
            self.on_click()


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    title: str | None = None
    css_class: str | None = None


@dataclass(frozen=True)
class Path:
    d: str
    stroke: str
    stroke_width: float
    fill: str = "none"
    css_class: str | None = None


@dataclass(frozen=True)
class Group:
    children: tuple[Node, ...] = ()
    transform: str | None = None
    text_anchor: str | None = None
    css_class: str | None = None


Node = Text | Rect | Path | Group


@dataclass(frozen=True)
class Scene:
    """Root drawable: fixed width, height proportional to the number of year strips."""

    width: int
    height: int
    view_box: tuple[float, float, float, float]
    style: str
    children: tuple[Node, ...] = ()

    def iter_nodes(self) -> Iterator[Node]:
        for child in self.children:
            yield from iter_nodes(child)

    def find(self, css_class: str) -> list[Node]:
        """All nodes carrying `css_class`, in draw order."""
        return [n for n in self.iter_nodes() if getattr(n, "css_class", None) == css_class]

    def to_dict(self) -> JsonDict:
        return {
            "width": self.width,
            "height": self.height,
            "view_box": list(self.view_box),
            "style": self.style,
            "children": [node_to_dict(c) for c in self.children],
        }


def iter_nodes(node: Node) -> Iterator[Node]:
    """Depth-first, pre-order walk (the draw order)."""
    yield node
    if isinstance(node, Group):
        for child in node.children:
            yield from iter_nodes(child)


def node_to_dict(node: Node) -> JsonDict:
    """JSON-ready mapping of a node; click handlers are reduced to a `clickable` flag."""
    out: dict[str, Any] = {"kind": type(node).__name__.lower()}
    if isinstance(node, Group):
        out.update(
            transform=node.transform,
            text_anchor=node.text_anchor,
            css_class=node.css_class,
            children=[node_to_dict(c) for c in node.children],
        )
    elif isinstance(node, Text):
        out.update(
            text=node.text,
            x=node.x,
            y=node.y,
            dy=node.dy,
            transform=node.transform,
            font_size=node.font_size,
            font_weight=node.font_weight,
            text_anchor=node.text_anchor,
            css_class=node.css_class,
            clickable=node.clickable,
        )
    elif isinstance(node, Rect):
        out.update(
            x=node.x,
            y=node.y,
            width=node.width,
            height=node.height,
            fill=node.fill,
            title=node.title,
            css_class=node.css_class,
        )
    else:
        out.update(
            d=node.d,
            stroke=node.stroke,
            stroke_width=node.stroke_width,
            fill=node.fill,
            css_class=node.css_class,
        )
    return out


def fingerprint(scene: Scene) -> str:
    """Structural SHA-256 of a scene; equal for scenes that draw the same thing."""
    return hash_payload(scene.to_dict())
