"""
Reading graph descriptions.

The text format is line based:

    3
    0 1
    1 2
    2 0

The first non-blank line holds the node count; every further non-blank line
holds one edge as two whitespace separated node indices. There is no edge
count header. Nodes are seeded on the unit circle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from .graph import Graph
from .types import Edge
from .validation import GraphFormatError, validate_node_count


def parse_description(source: Union[str, Iterable[str]]) -> tuple[int, list[Edge]]:
    """
    Parse a graph description without building the graph.

    Args:
        source: Whole document as a string, or an iterable of lines

    Returns:
        (node_count, edges)

    Raises:
        GraphFormatError: If the document is empty or a line is malformed
    """
    lines = source.splitlines() if isinstance(source, str) else source

    node_count = None
    edges: list[Edge] = []

    for lineno, raw in enumerate(lines, start=1):
        tokens = raw.split()
        if not tokens:
            continue

        if node_count is None:
            if len(tokens) != 1:
                raise GraphFormatError(
                    f"line {lineno}: expected a single node count, got {raw.strip()!r}"
                )
            node_count = _parse_int(tokens[0], lineno)
            if node_count < 0:
                raise GraphFormatError(f"line {lineno}: node count must be >= 0, got {node_count}")
            continue

        if len(tokens) != 2:
            raise GraphFormatError(
                f"line {lineno}: expected two node indices 'start end', got {raw.strip()!r}"
            )
        edges.append(Edge(_parse_int(tokens[0], lineno), _parse_int(tokens[1], lineno)))

    if node_count is None:
        raise GraphFormatError("graph description is empty")

    return validate_node_count(node_count), edges


def parse_graph(source: Union[str, Iterable[str]]) -> Graph:
    """
    Parse a graph description into a circularly seeded Graph.

    Raises:
        GraphFormatError: If the document is malformed or not UTF-8 text
        InvalidTopologyError: If an edge references a missing node
    """
    node_count, edges = parse_description(source)
    return Graph.from_node_count(node_count, edges)


def read_graph(path: Union[str, Path]) -> Graph:
    """
    Read a graph description file.

    Raises:
        OSError: If the file cannot be read
        GraphFormatError: If the document is malformed or not UTF-8 text
        InvalidTopologyError: If an edge references a missing node
    """
    try:
        with open(path, encoding="utf-8") as f:
            return parse_graph(f)
    except UnicodeDecodeError:
        raise GraphFormatError(f"{path}: not a UTF-8 text file") from None


def _parse_int(token: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"line {lineno}: {token!r} is not an integer") from None


__all__ = ["parse_description", "parse_graph", "read_graph"]
