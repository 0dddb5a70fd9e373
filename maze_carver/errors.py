# -*- coding: utf-8 -*-
"""
Error types raised by the grid, the builders and the solver.

Everything derives from MazeError so a front end can report any failure
with a single except clause.
"""


class MazeError(Exception):
    """Base class for every maze error."""


# -----------------------------
# Grid errors
# -----------------------------
class InvalidSizeError(MazeError, ValueError):
    """Grid size is not an odd integer >= 5."""


class OutOfBoundsError(MazeError, IndexError):
    """
    Coordinate outside the grid
    - builders only touch coordinates they checked first, so seeing this
      means a programming error, not bad input
    """


# -----------------------------
# Generation errors
# -----------------------------
class GenerationError(MazeError):
    """A builder could not produce a maze."""


class UngeneratableGridError(GenerationError):
    """
    The grid cannot host a run of the chosen builder
    - too small for a seed edge, or already carved by an earlier run
    """


class NoDeadEndError(GenerationError):
    """Depth-first construction finished without any exit candidate."""


# -----------------------------
# Solver errors
# -----------------------------
class SolveError(MazeError):
    """The solver could not produce a path."""


class EmptyGridError(SolveError):
    """The grid was never generated (every cell is a wall)."""


class MissingEntranceError(SolveError):
    """The grid has no start cell, or more than one."""


class MissingExitError(SolveError):
    """The grid has no end cell, or more than one."""


class NoPathFoundError(SolveError):
    """The end cell cannot be reached from the start cell."""
