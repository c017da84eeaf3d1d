"""
Renderer protocol and the no-op surface.

The simulation talks to a renderer through two calls: ``init(graph)`` once
before the run, sized to the current node extent, and ``draw(graph)`` after
every step. Return values are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..graph import Graph


@runtime_checkable
class Renderer(Protocol):
    """Surface the simulation reports to."""

    def init(self, graph: Graph) -> None: ...

    def draw(self, graph: Graph) -> None: ...


class NullRenderer:
    """Renderer that ignores every call."""

    def init(self, graph: Graph) -> None:
        pass

    def draw(self, graph: Graph) -> None:
        pass


class CompositeRenderer:
    """Renderer forwarding every call to several renderers in order."""

    def __init__(self, *renderers: Renderer) -> None:
        self._renderers = list(renderers)

    @property
    def renderers(self) -> list[Renderer]:
        return self._renderers

    def init(self, graph: Graph) -> None:
        for renderer in self._renderers:
            renderer.init(graph)

    def draw(self, graph: Graph) -> None:
        for renderer in self._renderers:
            renderer.draw(graph)


__all__ = ["Renderer", "NullRenderer", "CompositeRenderer"]
