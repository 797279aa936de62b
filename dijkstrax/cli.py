"""Command-line interface for running the shortest-path engine."""

from __future__ import annotations

import argparse
import json
import math
import sys
import traceback
from typing import Any, Dict, List, Optional

from .demo import CITIES, DEFAULT_SOURCE, DEFAULT_TARGET, build_demo_engine, demo_csv
from .engine import EngineConfig, ShortestPathEngine
from .exceptions import ConfigError, DijkstraXError, InputError
from .io import load_engine
from .logger import StdLogger

EXIT_OK = 0
EXIT_INPUT = 64
EXIT_INTERNAL = 70


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  dijkstrax --demo\n"
        "  dijkstrax --edges graph.csv --source 0 --target 3\n"
        "  dijkstrax --example > graph.csv\n"
    )
    p = argparse.ArgumentParser(
        prog="dijkstrax",
        description="Single-source, single-target Dijkstra shortest paths",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to a CSV edges file (u,v,w)")
    src.add_argument("--demo", action="store_true", help="Use the built-in city network")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print the city network as edges CSV to stdout and exit",
    )
    p.add_argument("--n", type=int, default=None, help="Node count (defaults to max id + 1)")
    p.add_argument("--source", type=int, default=None, help="Source node id")
    p.add_argument("--target", type=int, default=None, help="Target node id")
    p.add_argument("--eps", type=float, default=EngineConfig.eps, help="Ordering tolerance")
    p.add_argument("--plot", type=str, default=None, help="Write a PNG of the path here")
    return p


def _format_distance(d: float) -> Optional[float]:
    return None if d == math.inf else d


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``dijkstrax`` command-line tool."""
    p = _build_parser()
    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(demo_csv())
        return EXIT_OK

    try:
        cfg = EngineConfig(eps=args.eps)
        logger = StdLogger(level=args.log_level, json_fmt=args.log_json)

        labels: Optional[List[str]] = None
        engine: ShortestPathEngine
        if args.demo:
            engine = build_demo_engine(config=cfg, logger=logger)
            labels = CITIES
            source = DEFAULT_SOURCE if args.source is None else args.source
            target = DEFAULT_TARGET if args.target is None else args.target
        else:
            if args.source is None or args.target is None:
                raise InputError("--source and --target are required with --edges")
            engine = load_engine(args.edges, n=args.n, config=cfg, logger=logger)
            source, target = args.source, args.target

        if args.verbose:
            sys.stderr.write(
                f"config: n={engine.n} m={engine.graph.num_edges} eps={cfg.eps} "
                f"source={source} target={target}\n"
            )

        result = engine.shortest_path(source, target)

        out: Dict[str, Any] = {
            "source": source,
            "target": target,
            "distance": _format_distance(result.distance),
            "path": result.nodes,
        }
        if labels is not None:
            out["labels"] = [labels[u] for u in result.nodes]

        if not result.reachable:
            logger.warning("unreachable", source=source, target=target)

        if args.plot:
            import matplotlib

            matplotlib.use("Agg")
            from .visualize import save_path_plot

            save_path_plot(engine.graph, result.nodes, args.plot, labels=labels)

        print(json.dumps(out, ensure_ascii=False))
        return EXIT_OK

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_INPUT
    except DijkstraXError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
