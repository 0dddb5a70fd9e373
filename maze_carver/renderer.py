# -*- coding: utf-8 -*-
"""
Renderer collaborator notified by the grid, the builders and the solver.

The core only calls these hooks; drawing, timing and input live in front
ends such as maze_carver.viewer.
"""

from maze_carver.grid import CellState


class Renderer:
    """
    No-op base; subclasses override the hooks they care about
    """

    def cell_changed(self, coord, state):
        """A builder wrote `state` into `coord`."""

    def completed(self, grid):
        """A builder finished; `grid` now holds its final states."""

    def cell_explored(self, coord):
        """The solver dequeued `coord` (start and end excluded)."""

    def path_found(self, path):
        """The solver reconstructed `path` (end -> start order)."""


class TraceRenderer(Renderer):
    """
    Records every notification as a tuple, in order
    - ("cell", coord, state), ("explored", coord), ("path", path),
      ("completed", grid)
    """

    def __init__(self):
        self.events = []

    def cell_changed(self, coord, state):
        self.events.append(("cell", coord, state))

    def completed(self, grid):
        self.events.append(("completed", grid))

    def cell_explored(self, coord):
        self.events.append(("explored", coord))

    def path_found(self, path):
        self.events.append(("path", list(path)))

    def cell_changes(self):
        return [(event[1], event[2]) for event in self.events if event[0] == "cell"]


class CanvasRenderer(Renderer):
    """
    Keeps one paint name per cell for drawing front ends
    - paints: "wall", "passage", "start", "end", plus the transient
      "current" (cell just opened), "explored" and "path"
    - only one cell is "current" at a time, like a cursor
    """

    def __init__(self, size):
        self.size = size
        self.paint = [["wall" for _ in range(size)] for _ in range(size)]
        self.current = None
        self.finished = False

    def reset(self):
        for row in self.paint:
            for c in range(self.size):
                row[c] = "wall"
        self.current = None
        self.finished = False

    def _release_current(self):
        if self.current is not None:
            r, c = self.current
            if self.paint[r][c] == "current":
                self.paint[r][c] = "passage"
            self.current = None

    def cell_changed(self, coord, state):
        r, c = coord
        self._release_current()
        if state is CellState.PASSAGE and not self.finished:
            self.paint[r][c] = "current"
            self.current = coord
        else:
            self.paint[r][c] = state.value

    def completed(self, grid):
        self._release_current()
        for r, row in enumerate(grid.cells):
            for c, state in enumerate(row):
                self.paint[r][c] = state.value
        self.finished = True

    def cell_explored(self, coord):
        self.paint[coord[0]][coord[1]] = "explored"

    def path_found(self, path):
        for r, c in path:
            if self.paint[r][c] not in ("start", "end"):
                self.paint[r][c] = "path"

    def counts(self):
        """
        Number of cells per paint name
        """
        totals = {}
        for row in self.paint:
            for name in row:
                totals[name] = totals.get(name, 0) + 1
        return totals
