#!/usr/bin/env python3
"""
Generate sample graph description files.

Writes files in the line format read by force_layout.io (node count, then one
"start end" pair per line) into ./graphs/.

Usage:
    python scripts/generate_graphs.py
    python scripts/generate_graphs.py --random 50 --p 0.08 --seed 1
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path

GRAPHS_DIR = Path(__file__).parent.parent / "graphs"


def grid(k: int) -> tuple[int, list[tuple[int, int]]]:
    """k x k grid graph."""
    edges = []
    for r in range(k):
        for c in range(k):
            i = r * k + c
            if c + 1 < k:
                edges.append((i, i + 1))
            if r + 1 < k:
                edges.append((i, i + k))
    return k * k, edges


def ring(n: int) -> tuple[int, list[tuple[int, int]]]:
    return n, [(i, (i + 1) % n) for i in range(n)]


def star(n: int) -> tuple[int, list[tuple[int, int]]]:
    return n, [(0, i) for i in range(1, n)]


def complete(n: int) -> tuple[int, list[tuple[int, int]]]:
    return n, [(i, j) for i in range(n) for j in range(i + 1, n)]


def erdos_renyi(n: int, p: float, seed: int | None = None) -> tuple[int, list[tuple[int, int]]]:
    """
    Erdős-Rényi random graph G(n, p).

    Each possible edge exists independently with probability p.
    """
    rng = random.Random(seed)
    return n, [(i, j) for i in range(n) for j in range(i + 1, n) if rng.random() < p]


def write_graph(path: Path, node_count: int, edges: list[tuple[int, int]]) -> None:
    lines = [str(node_count)] + [f"{s} {e}" for s, e in edges]
    path.write_text("\n".join(lines) + "\n")
    print(f"  Saved: {path} ({node_count} nodes, {len(edges)} edges)")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate sample graph files")
    parser.add_argument("--random", type=int, default=0, help="Also write a G(n, p) graph with n nodes")
    parser.add_argument("--p", type=float, default=0.1, help="Edge probability for --random")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for --random")
    args = parser.parse_args()

    GRAPHS_DIR.mkdir(exist_ok=True)
    write_graph(GRAPHS_DIR / "triangle.txt", *ring(3))
    write_graph(GRAPHS_DIR / "3grid.txt", *grid(3))
    write_graph(GRAPHS_DIR / "5grid.txt", *grid(5))
    write_graph(GRAPHS_DIR / "10cycle.txt", *ring(10))
    write_graph(GRAPHS_DIR / "star8.txt", *star(8))
    write_graph(GRAPHS_DIR / "k6.txt", *complete(6))
    if args.random > 0:
        write_graph(
            GRAPHS_DIR / f"random{args.random}.txt",
            *erdos_renyi(args.random, args.p, args.seed),
        )


if __name__ == "__main__":
    main()
