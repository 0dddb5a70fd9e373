# -*- coding: utf-8 -*-
"""
Maze builders: two Prim's algorithm variants, a single-opening Prim
variant and an iterative depth-first construction.

Brief Description:
    - every builder walks SEEDING -> EXPANDING -> FINALIZING -> DONE,
      one frontier operation per step()
    - the grid is valid at every step boundary, so a driver can stop
      calling step() at any time
    - cells are walls; a passage is carved by opening a wall cell and,
      for the double-opening builders, the cell behind it
"""

import logging
import random
from collections import namedtuple
from enum import Enum

from maze_carver.errors import NoDeadEndError, UngeneratableGridError
from maze_carver.frontier import (
    AdjacencyPolicy,
    Frontier,
    FrontierEntry,
    RecencyWeightedPolicy,
    UniformPolicy,
)
from maze_carver.grid import MIN_SIZE, CellState, Grid

logger = logging.getLogger(__name__)

# Seed line + wall + cell behind + two look-ahead rows, all interior
DOUBLE_OPENING_MIN_SIZE = 7


class Phase(Enum):
    SEEDING = "seeding"
    EXPANDING = "expanding"
    FINALIZING = "finalizing"
    DONE = "done"


class StepOutcome(namedtuple("StepOutcome", ["phase", "changes"])):
    """
    Result of one step()
    - phase: phase the builder is in after the step
    - changes: tuple of (coord, CellState) written during the step
    """
    __slots__ = ()

    @property
    def done(self):
        return self.phase is Phase.DONE


# -----------------------------
# Openability rules
# -----------------------------
def is_openable(grid, wall, direction):
    """
    Double-opening rule
    - `wall` must be an interior wall
    - the cells 1 and 2 steps ahead of it along `direction`, and their
      orthogonal neighbors (six cells), must all be interior walls
    """
    if not grid.is_wall(wall):
        return False
    for distance in (1, 2):
        ahead = direction.step(wall, distance)
        if not grid.is_wall(ahead):
            return False
        for side in direction.sides:
            if not grid.is_wall(side.step(ahead)):
                return False
    return True


def openable_walls(grid, cell):
    """
    Walls next to `cell` that pass the double-opening rule, N/S/W/E order
    """
    return [
        FrontierEntry(wall, direction)
        for direction, wall in grid.neighbors(cell)
        if is_openable(grid, wall, direction)
    ]


def is_single_openable(grid, wall):
    """
    Single-opening rule (weaker, allows loops)
    - exactly one direct passage neighbor, and if the cell across from it is
      a wall, neither diagonal beyond that wall is a passage
    - or no direct passage neighbor and exactly one passage diagonal
    """
    if not grid.is_wall(wall):
        return False

    touching = [d for d, n in grid.neighbors(wall) if grid.is_passage(n)]
    if len(touching) == 1:
        across = touching[0].opposite.step(wall)
        if grid.is_wall(across):
            for side in touching[0].sides:
                if grid.is_passage(side.step(across)):
                    return False
        return True

    if not touching:
        r, c = wall
        diagonals = [(r - 1, c - 1), (r - 1, c + 1), (r + 1, c - 1), (r + 1, c + 1)]
        return sum(1 for cell in diagonals if grid.is_passage(cell)) == 1

    return False


def choose_seed(grid, rng):
    """
    Random cell on one of the four lines one step inside the border
    - never within 2 cells of a corner
    """
    size = grid.size
    on_row_line = rng.randrange(2) == 0
    near_side = rng.randrange(2) == 0
    line = 1 if near_side else size - 2
    offset = rng.randrange(2, size - 2)

    if on_row_line:
        return line, offset
    return offset, line


# -----------------------------
# Builders
# -----------------------------
class MazeBuilder:
    """
    Shared state machine; subclasses provide _seed, _expand, _exhausted and
    _choose_end
    - grid: a fresh all-wall Grid owned by this builder
    - rng: random.Random (or anything with randrange / random)
    - policy: frontier.FrontierPolicy, defaults to the builder's own
    """
    name = "base"
    min_size = MIN_SIZE
    default_policy = UniformPolicy

    def __init__(self, grid, rng=None, policy=None):
        if grid.size < self.min_size:
            raise UngeneratableGridError(
                f"{self.name} needs a grid of at least {self.min_size}, got {grid.size}"
            )
        if not grid.is_empty():
            raise UngeneratableGridError(
                f"{self.name} needs a fresh all-wall grid; build a new Grid for every run"
            )
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.policy = policy if policy is not None else self.default_policy()
        self.phase = Phase.SEEDING
        self.start = None
        self.end = None
        self.last_opened = None
        self.steps = 0
        self._changes = []

    @property
    def done(self):
        return self.phase is Phase.DONE

    def _mark(self, coord, state=CellState.PASSAGE):
        self.grid.set(coord, state)
        self._changes.append((coord, state))

    def step(self):
        """
        Run one unit of work and report what changed
        """
        if self.phase is Phase.DONE:
            return StepOutcome(Phase.DONE, ())

        self._changes = []
        if self.phase is Phase.SEEDING:
            self.start = choose_seed(self.grid, self.rng)
            logger.debug("%s seeded at %s", self.name, self.start)
            self._mark(self.start)
            self._seed(self.start)
            self.phase = Phase.FINALIZING if self._exhausted() else Phase.EXPANDING
        elif self.phase is Phase.EXPANDING:
            self._expand()
            if self._exhausted():
                self.phase = Phase.FINALIZING
        else:
            self._finalize()
            self.phase = Phase.DONE

        self.steps += 1
        return StepOutcome(self.phase, tuple(self._changes))

    def run(self):
        """
        Loop step() until DONE and return the finished grid
        """
        while self.phase is not Phase.DONE:
            self.step()
        return self.grid

    def _finalize(self):
        end = self._choose_end()
        self._mark(self.start, CellState.START)
        self._mark(end, CellState.END)
        self.end = end
        logger.debug(
            "%s finished after %d steps: start %s, end %s",
            self.name, self.steps, self.start, end,
        )
        if self.grid.renderer is not None:
            self.grid.renderer.completed(self.grid)

    def _choose_end(self):
        if self.last_opened is None:
            raise UngeneratableGridError(f"{self.name} could not open any cell")
        return self.last_opened

    def _seed(self, cell):
        raise NotImplementedError

    def _expand(self):
        raise NotImplementedError

    def _exhausted(self):
        raise NotImplementedError


class PrimSimpleBuilder(MazeBuilder):
    """
    Prim's algorithm over wall cells with double opening
    - frontier: every openable wall next to a carved cell
    - each step tests one entry; if it still passes, the wall and the cell
      behind it are opened and the new cell's walls join the frontier
    - the last opened cell becomes the exit
    """
    name = "prim-simple"
    min_size = DOUBLE_OPENING_MIN_SIZE

    def _seed(self, cell):
        self.frontier = Frontier()
        self._push_openable(cell)

    def _push_openable(self, cell):
        for wall, direction in openable_walls(self.grid, cell):
            self.frontier.push(wall, direction)

    def _expand(self):
        index = self.policy.choose(self.frontier.entries, self.rng)
        wall, direction = self.frontier[index]

        if is_openable(self.grid, wall, direction):
            behind = direction.step(wall)
            self._mark(wall)
            self._mark(behind)
            self.last_opened = behind
            self._push_openable(behind)

        # New entries were appended, so index still points at the tested one
        self.frontier.take(index)

    def _exhausted(self):
        return not self.frontier


class PrimWeightedBuilder(PrimSimpleBuilder):
    """Prim's algorithm with the recency-weighted frontier pick."""
    name = "prim-weighted"
    default_policy = RecencyWeightedPolicy


class PrimSingleOpenBuilder(MazeBuilder):
    """
    Prim's algorithm opening only the chosen wall
    - uses the single-opening rule, so the result is more open and may
      contain loops
    """
    name = "prim-single-open"
    min_size = MIN_SIZE

    def _seed(self, cell):
        self.frontier = Frontier()
        self._push_walls(cell)

    def _push_walls(self, cell):
        for _, neighbor in self.grid.neighbors(cell):
            if self.grid.is_wall(neighbor):
                self.frontier.push(neighbor)

    def _expand(self):
        index = self.policy.choose(self.frontier.entries, self.rng)
        wall = self.frontier[index].wall

        if is_single_openable(self.grid, wall):
            self._mark(wall)
            self.last_opened = wall
            self._push_walls(wall)

        self.frontier.take(index)

    def _exhausted(self):
        return not self.frontier


class IterativeDFSBuilder(MazeBuilder):
    """
    Depth-first construction with an explicit stack
    - pop a cell; if it has openable walls, push it back, open one at
      random (double opening) and push the cell behind it
    - otherwise the cell is finished; finished cells with a single passage
      neighbor (other than the entrance) are dead ends
    - the exit is a random dead end
    """
    name = "iterative-dfs"
    min_size = DOUBLE_OPENING_MIN_SIZE
    default_policy = AdjacencyPolicy

    def _seed(self, cell):
        self.stack = [cell]
        self.dead_ends = []

    def _expand(self):
        cell = self.stack.pop()
        candidates = openable_walls(self.grid, cell)

        if candidates:
            self.stack.append(cell)
            wall, direction = candidates[self.policy.choose(candidates, self.rng)]
            behind = direction.step(wall)
            self._mark(wall)
            self._mark(behind)
            self.last_opened = behind
            self.stack.append(behind)
        else:
            # Backtracking: the cell will not be visited again
            self._mark(cell)
            if cell != self.start and len(self.grid.passage_neighbors(cell)) == 1:
                self.dead_ends.append(cell)

    def _exhausted(self):
        return not self.stack

    def _choose_end(self):
        if not self.dead_ends:
            raise NoDeadEndError(f"{self.name} found no dead end on a {self.grid.size} grid")
        return self.dead_ends[self.rng.randrange(len(self.dead_ends))]


# -----------------------------
# Selection surface
# -----------------------------
class Algorithm(Enum):
    PRIM_SIMPLE = "prim-simple"
    PRIM_WEIGHTED = "prim-weighted"
    PRIM_SINGLE_OPEN = "prim-single-open"
    ITERATIVE_DFS = "iterative-dfs"


BUILDERS = {
    Algorithm.PRIM_SIMPLE: PrimSimpleBuilder,
    Algorithm.PRIM_WEIGHTED: PrimWeightedBuilder,
    Algorithm.PRIM_SINGLE_OPEN: PrimSingleOpenBuilder,
    Algorithm.ITERATIVE_DFS: IterativeDFSBuilder,
}

GenerationResult = namedtuple("GenerationResult", ["grid", "trace"])


def create_builder(algorithm, size, seed=None, rng=None, renderer=None, policy=None):
    """
    Fresh grid plus the builder for `algorithm` (an Algorithm or its value)
    - rng wins over seed; with neither, runs are not reproducible
    """
    algorithm = Algorithm(algorithm)
    if rng is None:
        rng = random.Random(seed)
    grid = Grid(size, renderer=renderer)
    return BUILDERS[algorithm](grid, rng=rng, policy=policy)


def generate(algorithm, size, seed=None, rng=None, renderer=None, policy=None, trace=False):
    """
    Build a maze in one call
    - policy overrides the builder's default frontier policy
    - returns GenerationResult(grid, trace); trace is the list of
      StepOutcome when requested, else None
    """
    builder = create_builder(
        algorithm, size, seed=seed, rng=rng, renderer=renderer, policy=policy
    )
    outcomes = [] if trace else None

    while not builder.done:
        outcome = builder.step()
        if outcomes is not None:
            outcomes.append(outcome)

    return GenerationResult(builder.grid, outcomes)

