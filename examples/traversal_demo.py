#!/usr/bin/env python3
"""Demonstration of graph traversal and the increasing-path puzzle.

Builds the two example graphs (the undirected lesson graph and a directed
graph with a one-way edge from 7 to 5), prints BFS and DFS orders for the
directed one, then prints the puzzle answer for five edge lists.
"""

import argparse
import sys
import uuid
from pathlib import Path

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphwalk.config import GraphwalkConfig
from graphwalk.graph import Graph, GraphError, breadth_first_search, depth_first_search
from graphwalk.log_config import (
    bind_context,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from graphwalk.puzzle import has_increasing_path

LESSON_EDGES = [(0, 1), (1, 4), (4, 6), (6, 0), (1, 5), (5, 3), (3, 0), (5, 2), (2, 7)]

DIRECTED_EDGES = [
    (1, 2), (1, 3), (1, 4),
    (2, 1), (2, 5),
    (3, 1), (3, 6),
    (4, 1), (4, 7),
    (5, 2),
    (6, 3), (6, 7),
    (7, 2), (7, 4), (7, 5),
]

PUZZLE_CASES = [
    (4, [1, 2, 4, 4, 3], [2, 3, 1, 3, 1]),
    (4, [1, 2, 1, 3], [2, 4, 3, 4]),
    (6, [2, 4, 5, 3], [3, 5, 6, 4]),
    (3, [1, 3], [2, 2]),
    (3, [2, 3], [3, 4]),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="graphwalk traversal demo")
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file (optional)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the configured logging level",
    )
    return parser.parse_args()


def main() -> int:
    """Run the demo.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args()
    exit_code = 0

    # Configure from the CLI first so config errors are logged too
    configure_logging(level=args.log_level or "INFO", json_logs=False)
    logger = get_logger(__name__)
    bind_correlation_id(f"demo-{uuid.uuid4().hex[:8]}")

    try:
        config = GraphwalkConfig.from_yaml(args.config) if args.config else GraphwalkConfig()
        configure_logging(
            level=args.log_level or config.logging_level,
            json_logs=config.json_logs,
        )

        lesson = Graph.from_edges(8, LESSON_EDGES)
        directed = Graph.from_edges(9, DIRECTED_EDGES)
        logger.info("demo_graphs_built", lesson=repr(lesson), directed=repr(directed))

        start = config.demo_start_vertex
        bind_context(graph="directed", start=start)
        print(f"Breadth First Search: {breadth_first_search(directed, start)}")
        print("")
        print(f"Depth First Search: {depth_first_search(directed, start)}")
        print("")
        unbind_context("graph", "start")

        for n, a, b in PUZZLE_CASES:
            print(has_increasing_path(n, a, b))

    except FileNotFoundError as e:
        logger.exception("configuration_file_not_found", error=str(e))
        exit_code = 1

    except GraphError as e:
        logger.exception("demo_traversal_rejected", error=e.message)
        exit_code = 1

    except ValueError as e:
        logger.exception("configuration_validation_error", error=str(e))
        exit_code = 1

    finally:
        clear_context()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
