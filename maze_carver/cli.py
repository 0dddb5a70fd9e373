# -*- coding: utf-8 -*-
"""
Command line entry point.

    maze-carver --algorithm iterative-dfs --size 31 --seed 7 --text

Without --text a pygame window animates the build; press S to solve.
"""

import argparse
import logging
import sys

from maze_carver.builders import Algorithm, generate
from maze_carver.errors import MazeError
from maze_carver.solver import path_length, solve

# -----------------------------
# Configuration
# -----------------------------
DEFAULT_SIZE = 49
DEFAULT_STEPS_PER_FRAME = 4
PATH_CHAR = "o"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="maze-carver",
        description="Generate a maze with a randomized spanning-tree algorithm and solve it.",
    )
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.PRIM_WEIGHTED.value,
    )
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Odd grid size, at least 5")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--text", action="store_true", help="Print the maze instead of opening a window")
    parser.add_argument("--steps-per-frame", type=int, default=DEFAULT_STEPS_PER_FRAME)
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def render_text(grid, path=()):
    """
    Text form of the grid with the path cells (start/end excluded) drawn
    """
    rows = [list(line) for line in grid.to_strings()]
    for r, c in path:
        if rows[r][c] == ".":
            rows[r][c] = PATH_CHAR
    return "\n".join("".join(row) for row in rows)


def run_text(args):
    grid = generate(args.algorithm, args.size, seed=args.seed).grid
    path = solve(grid)
    print(render_text(grid, path))
    print(f"Path length: {path_length(path)}")


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.text:
            run_text(args)
        else:
            # pygame / OpenGL are only needed for the window
            from maze_carver.viewer import Viewer

            Viewer(
                algorithm=args.algorithm,
                size=args.size,
                seed=args.seed,
                steps_per_frame=args.steps_per_frame,
            ).run()
    except MazeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
