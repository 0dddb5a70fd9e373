# -*- coding: utf-8 -*-
"""
Breadth-first path solver for finished grids.

The queue is FIFO (collections.deque); popping from the other end would turn
the search into a depth-first one. Neighbors are expanded North, South,
West, East, which fixes which path is returned when several shortest paths
exist.
"""

import logging
from collections import deque

from maze_carver.errors import (
    EmptyGridError,
    MissingEntranceError,
    MissingExitError,
    NoPathFoundError,
)
from maze_carver.grid import CellState

logger = logging.getLogger(__name__)


class BreadthFirstSolver:
    """
    Stepwise BFS from the start cell to the end cell
    - the grid must hold exactly one start and one end cell
    - visited: coord -> predecessor coord (start maps to None)
    - step() dequeues one cell; the search stops as soon as the end cell
      is dequeued
    - path: end -> start order, both ends included, once solved
    """

    def __init__(self, grid, renderer=None):
        if grid.is_empty():
            raise EmptyGridError("Maze not generated")
        starts = grid.count(CellState.START)
        if starts != 1:
            raise MissingEntranceError(f"Expected exactly one starting cell, found {starts}")
        ends = grid.count(CellState.END)
        if ends != 1:
            raise MissingExitError(f"Expected exactly one exit cell, found {ends}")

        start = grid.find(CellState.START)
        end = grid.find(CellState.END)

        self.grid = grid
        self.renderer = renderer if renderer is not None else grid.renderer
        self.start = start
        self.end = end
        self.queue = deque([start])
        self.visited = {start: None}
        self.path = None
        self.done = False

    def step(self):
        """
        Dequeue and expand one cell
        - returns the dequeued coordinate, or None once finished
        - raises NoPathFoundError when the queue runs dry before the end
        """
        if self.done:
            return None
        if not self.queue:
            raise NoPathFoundError(f"No path from {self.start} to {self.end}")

        current = self.queue.popleft()
        if current != self.start and current != self.end and self.renderer is not None:
            self.renderer.cell_explored(current)

        if current == self.end:
            # Early exit: remaining queue entries are dropped
            self.queue.clear()
            self.path = self._reconstruct()
            self.done = True
            logger.debug(
                "Solved in %d visits, path length %d",
                len(self.visited), path_length(self.path),
            )
            if self.renderer is not None:
                self.renderer.path_found(self.path)
            return current

        for _, neighbor in self.grid.neighbors(current):
            if self.grid.is_passage(neighbor) and neighbor not in self.visited:
                self.visited[neighbor] = current
                self.queue.append(neighbor)

        return current

    def run(self):
        while not self.done:
            self.step()
        return self.path

    def _reconstruct(self):
        path = []
        current = self.end
        while current is not None:
            path.append(current)
            current = self.visited[current]
        return path


def solve(grid, renderer=None):
    """
    Shortest start-to-end path of a finished grid, in end -> start order
    """
    return BreadthFirstSolver(grid, renderer=renderer).run()


def path_length(path):
    """
    Number of edges along a path of cells
    """
    return max(len(path) - 1, 0)
