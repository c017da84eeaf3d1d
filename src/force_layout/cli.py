"""
Command-line front end.

Usage:
    force-layout graphs/triangle.txt --duration 5 --svg triangle.svg
    force-layout                      # interactive: asks for file and duration

Without a file argument the program runs the interactive loop: banner,
file prompt, duration prompt, simulation, then asks whether to try another
file.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from . import __version__
from .config import DEFAULT_K_ATTRACT, DEFAULT_K_REPEL, DEFAULT_MIN_DISTANCE, ForceConfig
from .force import Integrator
from .graph import Graph
from .io import read_graph
from .prompt import prompt_for_duration, prompt_for_file, prompt_yes_no, welcome
from .render import CompositeRenderer, MatplotlibRenderer, Renderer, SvgRenderer
from .scheduler import SimulationScheduler
from .types import CoincidentPolicy
from .validation import ValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="force-layout",
        description="Lay out a graph with a force-directed simulation.",
    )
    parser.add_argument("file", nargs="?", help="Graph description file (omit for interactive mode)")
    parser.add_argument(
        "--duration", type=float, default=None, help="Seconds to simulate (default: 5, or prompt)"
    )
    parser.add_argument("--k-repel", type=float, default=DEFAULT_K_REPEL, help="Repulsion strength")
    parser.add_argument(
        "--k-attract", type=float, default=DEFAULT_K_ATTRACT, help="Attraction strength"
    )
    parser.add_argument(
        "--min-distance",
        type=float,
        default=DEFAULT_MIN_DISTANCE,
        help="Distance used for coincident nodes under the clamp policy",
    )
    parser.add_argument(
        "--coincident",
        choices=[p.value for p in CoincidentPolicy],
        default=CoincidentPolicy.clamp.value,
        help="How repulsion treats nodes at the same position",
    )
    parser.add_argument("--svg", type=Path, help="Write the final frame to this SVG file")
    parser.add_argument("--show", action="store_true", help="Animate in a matplotlib window")
    parser.add_argument(
        "--positions", action="store_true", help="Print the final node positions"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def simulate(
    graph: Graph,
    duration: float,
    config: ForceConfig,
    renderer: Optional[Renderer] = None,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Run one time-bounded simulation on ``graph``.

    Returns:
        Number of steps performed
    """
    scheduler = SimulationScheduler(Integrator(graph, config, renderer), duration, clock=clock)
    return scheduler.run()


def format_positions(graph: Graph) -> str:
    return "\n".join(f"Node {n.index}: ({n.x:.6f}, {n.y:.6f})" for n in graph.nodes)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Entry point; returns the process exit code."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    try:
        config = ForceConfig(
            k_repel=args.k_repel,
            k_attract=args.k_attract,
            min_distance=args.min_distance,
            coincident_policy=args.coincident,
        )
    except ValidationError as exc:
        stderr.write(f"error: {exc}\n")
        return 1

    if args.file is None:
        return _interactive(args, config, stdin, stdout, stderr)
    duration = args.duration if args.duration is not None else 5.0
    return _run_file(Path(args.file), duration, args, config, stdout, stderr)


def _run_file(
    path: Path,
    duration: float,
    args: argparse.Namespace,
    config: ForceConfig,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    try:
        graph = read_graph(path)
    except (OSError, ValidationError) as exc:
        logger.error("Failed to load %s: %s", path, exc)
        stderr.write(f"error: {path}: {exc}\n")
        return 1

    svg = SvgRenderer(args.svg) if args.svg is not None else None
    plot = MatplotlibRenderer() if args.show else None
    renderer = CompositeRenderer(*(r for r in (svg, plot) if r is not None))

    try:
        steps = simulate(graph, duration, config, renderer)
    except ImportError as exc:
        stderr.write(f"error: --show needs matplotlib ({exc}); install force-layout[viz]\n")
        return 1
    except (OSError, ValidationError) as exc:
        stderr.write(f"error: {exc}\n")
        return 1
    finally:
        if plot is not None:
            plot.close(block=True)

    if svg is not None:
        try:
            svg.close()
        except OSError as exc:
            logger.error("Failed to write %s: %s", svg.path, exc)
            stderr.write(f"error: {svg.path}: {exc}\n")
            return 1

    logger.info("%s: %d steps", path, steps)
    if args.positions:
        stdout.write(format_positions(graph) + "\n")
    return 0


def _interactive(
    args: argparse.Namespace,
    config: ForceConfig,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    streams = {"stdin": stdin, "stdout": stdout, "stderr": stderr}
    while True:
        welcome(stdout)
        file_result = prompt_for_file(**streams)
        if not file_result.ok:
            break

        if args.duration is not None:
            duration = args.duration
        else:
            duration_result = prompt_for_duration(**streams)
            if not duration_result.ok:
                break
            duration = duration_result.value

        code = _run_file(file_result.value, duration, args, config, stdout, stderr)
        if code == 0:
            stdout.write(f"Finished {file_result.value}.\n")

        again = prompt_yes_no(**streams)
        if not again.ok or not again.value:
            break

    stdout.write("Thanks for playing. End of program.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
