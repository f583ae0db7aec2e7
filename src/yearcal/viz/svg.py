"""
SVG serialization of a Scene.

to_svg() produces standalone SVG markup: tooltips become <title> children of the day cells
and clickable text gets `cursor: pointer`. Click handlers themselves stay in Python; hosts that
show the markup dispatch clicks back through Text.activate() (see yearcal.viz.render).
"""

from __future__ import annotations

import os
from pathlib import Path as FsPath
from xml.sax.saxutils import escape, quoteattr

from .scene import Group, Node, Path, Rect, Scene, Text

__all__ = ["to_svg", "save_svg"]

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(v: object) -> str:
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def _attrs(pairs: list[tuple[str, object]]) -> str:
    return "".join(f" {k}={quoteattr(_fmt(v))}" for k, v in pairs if v is not None)


def _node(node: Node, out: list[str]) -> None:
    if isinstance(node, Group):
        attrs = _attrs(
            [
                ("class", node.css_class),
                ("transform", node.transform),
                ("text-anchor", node.text_anchor),
            ]
        )
        out.append(f"<g{attrs}>")
        for child in node.children:
            _node(child, out)
        out.append("</g>")
    elif isinstance(node, Text):
        attrs = _attrs(
            [
                ("class", node.css_class),
                ("x", node.x),
                ("y", node.y),
                ("dy", node.dy),
                ("transform", node.transform),
                ("font-size", node.font_size),
                ("font-weight", node.font_weight),
                ("text-anchor", node.text_anchor),
                ("style", "cursor: pointer;" if node.clickable else None),
            ]
        )
        out.append(f"<text{attrs}>{escape(node.text)}</text>")
    elif isinstance(node, Rect):
        attrs = _attrs(
            [
                ("class", node.css_class),
                ("width", node.width),
                ("height", node.height),
                ("x", node.x),
                ("y", node.y),
                ("fill", node.fill),
            ]
        )
        if node.title is None:
            out.append(f"<rect{attrs}/>")
        else:
            out.append(f"<rect{attrs}><title>{escape(node.title)}</title></rect>")
    elif isinstance(node, Path):
        attrs = _attrs(
            [
                ("class", node.css_class),
                ("fill", node.fill),
                ("stroke", node.stroke),
                ("stroke-width", node.stroke_width),
                ("d", node.d),
            ]
        )
        out.append(f"<path{attrs}/>")
    else:
        raise TypeError(f"unsupported scene node: {type(node).__name__}")


def to_svg(scene: Scene) -> str:
    """Serialize `scene` to an SVG document string."""
    view_box = " ".join(_fmt(v) for v in scene.view_box)
    out = [
        f"<svg xmlns={quoteattr(SVG_NS)}"
        + _attrs(
            [
                ("width", scene.width),
                ("height", scene.height),
                ("viewBox", view_box),
                ("style", scene.style),
            ]
        )
        + ">"
    ]
    for child in scene.children:
        _node(child, out)
    out.append("</svg>")
    return "".join(out)


def save_svg(scene: Scene, path: str | os.PathLike[str]) -> FsPath:
    """Write `scene` as SVG to `path` (parent directories are created)."""
    p = FsPath(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(to_svg(scene), encoding="utf-8")
    return p
