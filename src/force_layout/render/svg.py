"""
SVG rendering of a graph.

Generates an SVG picture of the current node positions. Layout coordinates
live around the unit circle, so they are multiplied by ``scale`` before
drawing.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from ..graph import Graph
    from ..types import Edge, Node


def to_svg(
    graph: Graph,
    *,
    scale: float = 100.0,
    node_radius: float = 8.0,
    node_color: str = "#4a90d9",
    node_stroke: str = "#2c5aa0",
    node_stroke_width: float = 1.5,
    edge_color: str = "#666666",
    edge_width: float = 1.0,
    show_labels: bool = True,
    label_color: str = "#ffffff",
    font_size: float = 9.0,
    font_family: str = "sans-serif",
    padding: float = 20.0,
    background: Optional[str] = None,
) -> str:
    """
    Render a graph to SVG.

    Nodes whose position is not finite are left out, as are edges touching
    them.

    Args:
        graph: Graph to draw
        scale: Pixels per layout unit (default 100)
        node_radius: Radius for nodes in pixels (default 8)
        node_color: Fill color for nodes (default blue)
        node_stroke: Stroke color for nodes (default darker blue)
        node_stroke_width: Stroke width for nodes
        edge_color: Color for edges (default gray)
        edge_width: Width for edges
        show_labels: Whether to draw node indices (default True)
        label_color: Color for labels
        font_size: Font size for labels
        font_family: Font family for labels
        padding: Padding around the graph in pixels (default 20)
        background: Background color (default None for transparent)

    Returns:
        SVG string representation of the graph
    """
    nodes = [n for n in graph.nodes if math.isfinite(n.x) and math.isfinite(n.y)]

    if not nodes:
        size = 2 * (padding + node_radius)
        return _empty_svg(size, size, background)

    min_x = min(n.x for n in nodes) * scale - node_radius
    max_x = max(n.x for n in nodes) * scale + node_radius
    min_y = min(n.y for n in nodes) * scale - node_radius
    max_y = max(n.y for n in nodes) * scale + node_radius

    width = max_x - min_x + 2 * padding
    height = max_y - min_y + 2 * padding
    offset_x = padding - min_x
    offset_y = padding - min_y

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    svg_parts.append('  <g class="edges">')
    for edge in graph.edges:
        edge_svg = _render_edge(
            edge, graph.nodes, scale, offset_x, offset_y, edge_color, edge_width
        )
        if edge_svg:
            svg_parts.append(edge_svg)
    svg_parts.append("  </g>")

    svg_parts.append('  <g class="nodes">')
    for node in nodes:
        svg_parts.append(
            _render_node(
                node, scale, offset_x, offset_y, node_radius, node_color, node_stroke,
                node_stroke_width,
            )
        )
    svg_parts.append("  </g>")

    if show_labels:
        svg_parts.append('  <g class="labels">')
        for node in nodes:
            svg_parts.append(
                _render_label(node, scale, offset_x, offset_y, label_color, font_size, font_family)
            )
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


class SvgRenderer:
    """
    Renderer keeping the current frame as SVG.

    The SVG text is produced on demand from the graph last passed to draw(),
    so drawing every step stays cheap unless ``write_every_frame`` is set.

    Example:
        renderer = SvgRenderer("out.svg")
        ... run a simulation with this renderer ...
        renderer.close()  # writes the final frame
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        write_every_frame: bool = False,
        **svg_options: Any,
    ) -> None:
        """
        Args:
            path: File the frame is written to (on close(), or every draw)
            write_every_frame: Rewrite ``path`` after every draw
            **svg_options: Keyword arguments forwarded to to_svg()
        """
        self._path = Path(path) if path is not None else None
        self._write_every_frame = bool(write_every_frame)
        self._svg_options = svg_options
        self._graph: Optional[Graph] = None
        self._extent: Optional[tuple[float, float, float, float]] = None
        self._frames = 0

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def frames(self) -> int:
        """Number of draw() calls since init()."""
        return self._frames

    @property
    def extent(self) -> Optional[tuple[float, float, float, float]]:
        """Node extent recorded by init()."""
        return self._extent

    @property
    def svg(self) -> str:
        """SVG text of the current frame."""
        if self._graph is None:
            return _empty_svg(0.0, 0.0, self._svg_options.get("background"))
        return to_svg(self._graph, **self._svg_options)

    def init(self, graph: Graph) -> None:
        self._graph = graph
        self._extent = graph.bounds()
        self._frames = 0

    def draw(self, graph: Graph) -> None:
        self._graph = graph
        self._frames += 1
        if self._write_every_frame and self._path is not None:
            self.write()

    def write(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the current frame to ``path`` (or the configured path)."""
        target = Path(path) if path is not None else self._path
        if target is None:
            raise ValueError("SvgRenderer has no output path")
        target.write_text(self.svg, encoding="utf-8")
        return target

    def close(self) -> None:
        """Write the final frame if an output path is configured."""
        if self._path is not None and self._graph is not None:
            self.write()


def _empty_svg(width: float, height: float, background: Optional[str]) -> str:
    """Create an empty SVG."""
    bg = ""
    if background:
        bg = f'\n  <rect width="100%" height="100%" fill="{escape(background)}"/>'
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">{bg}\n</svg>'
    )


def _render_edge(
    edge: Edge,
    nodes: list[Node],
    scale: float,
    offset_x: float,
    offset_y: float,
    color: str,
    width: float,
) -> Optional[str]:
    """Render a straight edge."""
    src = nodes[edge.start]
    tgt = nodes[edge.end]
    if not all(math.isfinite(v) for v in (src.x, src.y, tgt.x, tgt.y)):
        return None

    x1 = src.x * scale + offset_x
    y1 = src.y * scale + offset_y
    x2 = tgt.x * scale + offset_x
    y2 = tgt.y * scale + offset_y

    return (
        f'    <line x1="{x1:.1f}" y1="{y1:.1f}" '
        f'x2="{x2:.1f}" y2="{y2:.1f}" '
        f'stroke="{escape(color)}" stroke-width="{width}"/>'
    )


def _render_node(
    node: Node,
    scale: float,
    offset_x: float,
    offset_y: float,
    radius: float,
    fill: str,
    stroke: str,
    stroke_width: float,
) -> str:
    x = node.x * scale + offset_x
    y = node.y * scale + offset_y
    return (
        f'    <circle cx="{x:.1f}" cy="{y:.1f}" r="{radius:.1f}" '
        f'fill="{escape(fill)}" stroke="{escape(stroke)}" '
        f'stroke-width="{stroke_width}"/>'
    )


def _render_label(
    node: Node,
    scale: float,
    offset_x: float,
    offset_y: float,
    color: str,
    font_size: float,
    font_family: str,
) -> str:
    x = node.x * scale + offset_x
    y = node.y * scale + offset_y
    label = str(node.index) if node.index is not None else ""
    return (
        f'    <text x="{x:.1f}" y="{y:.1f}" '
        f'fill="{escape(color)}" font-size="{font_size}" '
        f'font-family="{escape(font_family)}" '
        f'text-anchor="middle" dominant-baseline="central">'
        f"{escape(label)}</text>"
    )


__all__ = ["to_svg", "SvgRenderer"]
