# -*- coding: utf-8 -*-
"""
Grid model shared by the builders and the solver.

Brief Description:
    - square size x size matrix of CellState values, all walls at first
    - coordinates are (row, col) tuples, 0-indexed
    - the outer ring never becomes a passage: is_wall / is_passage answer
      False for it, so builders cannot select it
"""

from enum import Enum

from maze_carver.errors import InvalidSizeError, OutOfBoundsError

MIN_SIZE = 5


class CellState(Enum):
    WALL = "wall"
    PASSAGE = "passage"
    START = "start"
    END = "end"


class Direction(Enum):
    """
    Unit (d_row, d_col) offsets
    - definition order is the fixed iteration order: N, S, W, E
    """
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    WEST = (0, -1)
    EAST = (0, 1)

    def step(self, coord, distance=1):
        """
        Coordinate `distance` cells away from coord in this direction
        """
        dr, dc = self.value
        return coord[0] + dr * distance, coord[1] + dc * distance

    @property
    def sides(self):
        """
        The two directions orthogonal to this one
        """
        if self in (Direction.NORTH, Direction.SOUTH):
            return Direction.WEST, Direction.EAST
        return Direction.NORTH, Direction.SOUTH

    @property
    def opposite(self):
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}

# Text form used by fixtures and the command line
_CHARS = {
    CellState.WALL: "#",
    CellState.PASSAGE: ".",
    CellState.START: "S",
    CellState.END: "E",
}
_STATES = {char: state for state, char in _CHARS.items()}


class Grid:
    """
    Grid holds the cell states of one generation run
    - size: number of rows (and columns)
    - cells: list of rows, each a list of CellState
    - renderer: optional object notified by set() (see renderer.Renderer)
    """

    def __init__(self, size, renderer=None):
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidSizeError(f"Grid size must be an integer, got {size!r}")
        if size < MIN_SIZE:
            raise InvalidSizeError(f"Grid size must be at least {MIN_SIZE}, got {size}")
        if size % 2 == 0:
            raise InvalidSizeError(f"Grid size must be odd, got {size}")

        self.size = size
        self.renderer = renderer
        self.cells = [[CellState.WALL for _ in range(size)] for _ in range(size)]

    # ---------- Text form ----------

    @classmethod
    def from_strings(cls, rows, renderer=None):
        """
        Build a grid from rows of '#', '.', 'S', 'E' characters
        """
        rows = list(rows)
        grid = cls(len(rows), renderer=renderer)
        for r, line in enumerate(rows):
            if len(line) != grid.size:
                raise InvalidSizeError(
                    f"Row {r} has {len(line)} cells, expected {grid.size}"
                )
            for c, char in enumerate(line):
                try:
                    grid.cells[r][c] = _STATES[char]
                except KeyError:
                    raise ValueError(f"Unknown cell character {char!r} at ({r}, {c})") from None
        return grid

    def to_strings(self):
        return ["".join(_CHARS[state] for state in row) for row in self.cells]

    def __str__(self):
        return "\n".join(self.to_strings())

    def __repr__(self):
        return f"Grid(size={self.size})"

    # ---------- Predicates ----------

    def in_bounds(self, coord):
        row, col = coord
        return 0 <= row < self.size and 0 <= col < self.size

    def is_interior(self, coord):
        """
        Strictly inside the border frame: row and col in [1, size - 2]
        """
        row, col = coord
        return 0 < row < self.size - 1 and 0 < col < self.size - 1

    def is_wall(self, coord):
        return self.is_interior(coord) and self.cells[coord[0]][coord[1]] is CellState.WALL

    def is_passage(self, coord):
        """
        Passage, start and end cells all count; the border never does
        """
        return self.is_interior(coord) and self.cells[coord[0]][coord[1]] is not CellState.WALL

    # ---------- Access ----------

    def get(self, coord):
        if not self.in_bounds(coord):
            raise OutOfBoundsError(f"{coord} is outside a {self.size}x{self.size} grid")
        return self.cells[coord[0]][coord[1]]

    def set(self, coord, state):
        """
        Overwrite the state of one cell and tell the renderer about it
        """
        if not self.in_bounds(coord):
            raise OutOfBoundsError(f"{coord} is outside a {self.size}x{self.size} grid")
        self.cells[coord[0]][coord[1]] = state
        if self.renderer is not None:
            self.renderer.cell_changed(coord, state)

    def find(self, state):
        """
        First cell in row-major order holding `state`, or None
        """
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell is state:
                    return r, c
        return None

    def count(self, state):
        return sum(row.count(state) for row in self.cells)

    def is_empty(self):
        return all(cell is CellState.WALL for row in self.cells for cell in row)

    # ---------- Neighbors ----------

    def neighbors(self, coord):
        """
        Yield (direction, neighbor) for in-bounds orthogonal neighbors, N/S/W/E
        """
        for direction in Direction:
            neighbor = direction.step(coord)
            if self.in_bounds(neighbor):
                yield direction, neighbor

    def passage_neighbors(self, coord):
        return [n for _, n in self.neighbors(coord) if self.is_passage(n)]
