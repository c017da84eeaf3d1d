"""
Interactive matplotlib rendering.

Requires matplotlib (``pip install force-layout[viz]``). The import happens
when the surface is initialized, so importing this module is always safe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..graph import Graph


class MatplotlibRenderer:
    """
    Renderer drawing into a pyplot figure.

    Args:
        every: Redraw on every ``every``-th draw() call (default 1)
        pause: Seconds passed to ``plt.pause`` after a redraw so the window
            event loop can run. 0 disables pausing.
        title: Figure title
        margin: Fraction of the node extent added around the initial view
    """

    def __init__(
        self,
        *,
        every: int = 1,
        pause: float = 0.001,
        title: str = "Force-directed layout",
        margin: float = 0.25,
    ) -> None:
        self._every = max(1, int(every))
        self._pause = max(0.0, float(pause))
        self._title = title
        self._margin = float(margin)
        self._plt: Any = None
        self._fig: Any = None
        self._ax: Any = None
        self._calls = 0
        self._frames = 0

    @property
    def figure(self) -> Any:
        return self._fig

    @property
    def frames(self) -> int:
        """Number of redraws actually performed."""
        return self._frames

    def init(self, graph: Graph) -> None:
        import matplotlib.pyplot as plt

        self._plt = plt
        plt.ion()
        self._fig, self._ax = plt.subplots(figsize=(8, 8))
        self._calls = 0
        self._frames = 0
        self._render(graph, self._initial_limits(graph))

    def draw(self, graph: Graph) -> None:
        if self._ax is None:
            self.init(graph)
            return
        self._calls += 1
        if self._calls % self._every == 0:
            self._render(graph, None)

    def close(self, block: bool = False) -> None:
        """Leave interactive mode; with ``block`` keep the window open."""
        if self._plt is None:
            return
        self._plt.ioff()
        if block:
            self._plt.show()
        else:
            self._plt.close(self._fig)

    def _initial_limits(self, graph: Graph) -> Optional[tuple[float, float, float, float]]:
        bounds = graph.bounds()
        if bounds is None:
            return None
        min_x, min_y, max_x, max_y = bounds
        pad = max(max_x - min_x, max_y - min_y, 1.0) * self._margin
        return min_x - pad, max_x + pad, min_y - pad, max_y + pad

    def _render(
        self, graph: Graph, limits: Optional[tuple[float, float, float, float]]
    ) -> None:
        ax = self._ax
        ax.clear()
        nodes = graph.nodes

        for edge in graph.edges:
            src, tgt = nodes[edge.start], nodes[edge.end]
            ax.plot([src.x, tgt.x], [src.y, tgt.y], "gray", alpha=0.5, linewidth=1)

        if nodes:
            ax.scatter(
                [n.x for n in nodes],
                [n.y for n in nodes],
                s=100,
                c="steelblue",
                zorder=5,
                edgecolors="white",
                linewidth=1,
            )
            for n in nodes:
                ax.annotate(
                    str(n.index), (n.x, n.y), ha="center", va="center", fontsize=8, color="white"
                )

        if limits is not None:
            ax.set_xlim(limits[0], limits[1])
            ax.set_ylim(limits[2], limits[3])
        ax.set_title(self._title, fontsize=12, fontweight="bold")
        ax.set_aspect("equal")
        ax.axis("off")

        self._fig.canvas.draw_idle()
        self._frames += 1
        if self._pause > 0:
            self._plt.pause(self._pause)


__all__ = ["MatplotlibRenderer"]
