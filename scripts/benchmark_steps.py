#!/usr/bin/env python3
"""
Benchmark simulation step throughput.

Runs a fixed number of Integrator steps on ring graphs of increasing size and
reports the time per step.

Usage:
    python scripts/benchmark_steps.py
    python scripts/benchmark_steps.py --sizes 10,100,500 --steps 50 --output results.json
"""

from __future__ import annotations

import argparse
import json
import time
from typing import Any

from force_layout import ForceConfig, Graph, Integrator


def benchmark(node_count: int, steps: int, config: ForceConfig) -> dict[str, Any]:
    """Time ``steps`` steps on an n-node ring."""
    graph = Graph.from_node_count(node_count, [(i, (i + 1) % node_count) for i in range(node_count)])
    integrator = Integrator(graph, config)

    start = time.perf_counter()
    integrator.run_steps(steps)
    elapsed = time.perf_counter() - start

    return {
        "num_nodes": node_count,
        "num_edges": graph.edge_count,
        "steps": steps,
        "time_seconds": elapsed,
        "ms_per_step": 1000 * elapsed / steps if steps else 0.0,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark force simulation steps")
    parser.add_argument("--sizes", default="10,50,100,250,500", help="Comma-separated node counts")
    parser.add_argument("--steps", type=int, default=20, help="Steps per graph")
    parser.add_argument("--output", help="Output JSON file for results")
    args = parser.parse_args()

    sizes = [int(s) for s in args.sizes.split(",") if s.strip()]
    config = ForceConfig()

    print(f"{'Nodes':>8s}{'Edges':>8s}{'ms/step':>12s}")
    print("-" * 28)
    results = []
    for n in sizes:
        result = benchmark(n, args.steps, config)
        results.append(result)
        print(f"{result['num_nodes']:>8d}{result['num_edges']:>8d}{result['ms_per_step']:>12.3f}")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
