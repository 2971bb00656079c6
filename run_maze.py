#!/usr/bin/env python3
"""Entry point for generating and solving a Kruskal maze.

Chains both stages into a single command:
grid + spanning tree generation -> search + path reconstruction.

Usage:
    python run_maze.py --rows 20 --cols 30 --seed 7
    python run_maze.py --config maze.json --mode d
    python run_maze.py --rows 2 --cols 3 --seed 5 --weights legacy --json
"""

import argparse
import json
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Any, Generator

import dacite

from mazes.config import (
    DEFAULT_CONFIG,
    MazeConfig,
    config_from_json,
    maze_id,
)
from mazes.errors import MazeError
from mazes.grid import Edge
from mazes.pipeline import Maze, generate_maze_from_config, solve_maze_from_config
from mazes.reproducibility import set_seed
from mazes.search import Solution, validate_path

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    log.info("Completed: %s in %.3fs", name, elapsed)


def build_config(args: argparse.Namespace) -> MazeConfig:
    """Merge a config file (or the defaults) with command-line overrides."""
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())
    else:
        config = DEFAULT_CONFIG

    grid_overrides = {
        k: v
        for k, v in (
            ("rows", args.rows),
            ("cols", args.cols),
            ("weight_source", args.weights),
        )
        if v is not None
    }
    grid = replace(config.grid, **grid_overrides)
    solve = config.solve
    if args.mode is not None:
        solve = replace(solve, mode=args.mode)
    seed = args.seed if args.seed is not None else config.seed
    return replace(config, grid=grid, solve=solve, seed=seed)


def result_to_dict(config: MazeConfig, maze: Maze, solution: Solution) -> dict[str, Any]:
    """Machine-readable summary of a generated and solved maze."""

    def edge(e: Edge) -> dict[str, Any]:
        return {
            "a": [e.first.row, e.first.col],
            "b": [e.second.row, e.second.col],
            "weight": e.weight,
        }

    return {
        "maze_id": maze_id(config),
        "rows": maze.grid.rows,
        "cols": maze.grid.cols,
        "seed": config.seed,
        "mode": str(solution.mode),
        "corridors": [edge(e) for e in maze.corridors],
        "walls": [edge(e) for e in maze.walls],
        "visited_order": [[c.row, c.col] for c in solution.visited_order],
        "path": [[c.row, c.col] for c in solution.route],
    }


def run(config: MazeConfig, as_json: bool = False) -> int:
    """Generate and solve one maze, printing a summary. Returns an exit code."""
    set_seed(config.seed)

    with stage_timer("Maze Generation"):
        maze = generate_maze_from_config(config)

    with stage_timer("Solve"):
        solution = solve_maze_from_config(maze, config)

    errors = validate_path(
        solution.path, maze.corridors, solution.start, solution.goal, grid=maze.grid
    )
    if errors:
        log.error("Refusing to report inconsistent maze: %s", "; ".join(errors))
        return 1

    if as_json:
        print(json.dumps(result_to_dict(config, maze, solution), indent=2))
        return 0

    print(f"Maze ID:   {maze_id(config)}")
    print(f"Grid:      {maze.grid.rows}x{maze.grid.cols}, "
          f"edges={len(maze.grid.edges)}, corridors={len(maze.corridors)}, "
          f"walls={len(maze.walls)}")
    print(f"Search:    {solution.mode}, visited={len(solution.visited_order)}")
    print(f"Path:      {len(solution.path)} cells")
    print("  " + " -> ".join(f"({c.row},{c.col})" for c in solution.route))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a Kruskal maze and solve it with BFS or DFS"
    )
    parser.add_argument("--config", type=str, help="Path to maze config JSON file")
    parser.add_argument("--rows", type=int, help="Number of rows")
    parser.add_argument("--cols", type=int, help="Number of columns")
    parser.add_argument("--seed", type=int, help="Seed for edge weights")
    parser.add_argument(
        "--mode",
        choices=["b", "d", "breadth-first", "depth-first"],
        help="Search mode (b = breadth-first, d = depth-first)",
    )
    parser.add_argument(
        "--weights",
        choices=["numpy", "legacy"],
        help="Edge weight source",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        sys.exit(run(config, as_json=args.json))
    except (ValueError, dacite.DaciteError) as exc:
        # Bad dimensions, settings or config file: report, no traceback
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except MazeError:
        log.exception("Maze run failed")
        sys.exit(1)
    except Exception:
        log.exception("Maze run crashed")
        sys.exit(1)


if __name__ == "__main__":
    main()
