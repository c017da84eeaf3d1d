"""
Rendering surfaces for the force simulation.

- Renderer: Protocol every surface implements (init + draw)
- NullRenderer: Draws nothing (default)
- CompositeRenderer: Fans calls out to several renderers
- SvgRenderer / to_svg: SVG output of the current frame
- MatplotlibRenderer: Interactive pyplot window (needs the ``viz`` extra)

Example usage:
    from force_layout import Graph, SimulationScheduler, Integrator
    from force_layout.render import SvgRenderer

    renderer = SvgRenderer("graph.svg")
    graph = Graph.from_node_count(4, [(0, 1), (1, 2), (2, 3)])
    SimulationScheduler(Integrator(graph, renderer=renderer), duration=1.0).run()
    renderer.close()
"""

from .base import CompositeRenderer, NullRenderer, Renderer
from .pyplot import MatplotlibRenderer
from .svg import SvgRenderer, to_svg

__all__ = [
    "Renderer",
    "NullRenderer",
    "CompositeRenderer",
    "SvgRenderer",
    "MatplotlibRenderer",
    "to_svg",
]
