# -*- coding: utf-8 -*-
"""
Maze Carver: randomized maze construction on a cell grid plus a
breadth-first solver. Presentation lives behind the Renderer hooks.
"""

from maze_carver.builders import (
    Algorithm,
    GenerationResult,
    IterativeDFSBuilder,
    MazeBuilder,
    Phase,
    PrimSimpleBuilder,
    PrimSingleOpenBuilder,
    PrimWeightedBuilder,
    StepOutcome,
    create_builder,
    generate,
)
from maze_carver.errors import (
    EmptyGridError,
    GenerationError,
    InvalidSizeError,
    MazeError,
    MissingEntranceError,
    MissingExitError,
    NoDeadEndError,
    NoPathFoundError,
    OutOfBoundsError,
    SolveError,
    UngeneratableGridError,
)
from maze_carver.frontier import (
    AdjacencyPolicy,
    Frontier,
    FrontierEntry,
    FrontierPolicy,
    RecencyWeightedPolicy,
    UniformPolicy,
)
from maze_carver.grid import CellState, Direction, Grid
from maze_carver.renderer import CanvasRenderer, Renderer, TraceRenderer
from maze_carver.solver import BreadthFirstSolver, path_length, solve

__version__ = "0.1.0"
