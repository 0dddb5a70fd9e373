# -*- coding: utf-8 -*-
"""
Frontier storage and the policies that pick the next entry from it.

A policy only returns an index; the builder removes the entry itself.
Every policy draws from the rng handed to it (random.Random or anything
with randrange / random).
"""

from collections import namedtuple

# wall: (row, col) candidate; direction: grid.Direction it was reached
# through, or None for single-opening entries
FrontierEntry = namedtuple("FrontierEntry", ["wall", "direction"])


class Frontier:
    """
    Unordered growable list of FrontierEntry
    - push appends, so the tail holds the most recent entries
    - take removes by index and shifts the tail left, keeping insertion
      order for RecencyWeightedPolicy
    """

    def __init__(self):
        self.entries = []

    def __len__(self):
        return len(self.entries)

    def __bool__(self):
        return bool(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def push(self, wall, direction=None):
        self.entries.append(FrontierEntry(wall, direction))

    def take(self, index):
        return self.entries.pop(index)


# -----------------------------
# Policies
# -----------------------------
class FrontierPolicy:
    """
    Chooses the index of the next entry to test
    """
    name = "base"

    def choose(self, entries, rng):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class UniformPolicy(FrontierPolicy):
    """Every entry equally likely."""
    name = "uniform"

    def choose(self, entries, rng):
        if not entries:
            raise IndexError("cannot choose from an empty frontier")
        return rng.randrange(len(entries))


class RecencyWeightedPolicy(FrontierPolicy):
    """
    Bias toward the newest entries to grow longer corridors
    - more than `window` entries: with probability `bias` pick uniformly
      among the last `window`, otherwise among all the others
    - `window` entries or fewer: uniform over all of them
    """
    name = "recency-weighted"

    def __init__(self, window=4, bias=0.8):
        if window < 1:
            raise ValueError("window must be positive")
        if not 0.0 <= bias <= 1.0:
            raise ValueError("bias must be a probability")
        self.window = window
        self.bias = bias

    def choose(self, entries, rng):
        length = len(entries)
        if length == 0:
            raise IndexError("cannot choose from an empty frontier")
        if length <= self.window:
            return rng.randrange(length)

        if rng.random() < self.bias:
            return length - 1 - rng.randrange(self.window)
        return rng.randrange(length - self.window)

    def __repr__(self):
        return f"RecencyWeightedPolicy(window={self.window}, bias={self.bias})"


class AdjacencyPolicy(UniformPolicy):
    """
    Unweighted pick among the openable neighbors of the current cell
    - used by depth-first construction, where the candidates are recomputed
      around the cell on top of the stack instead of kept in a global list
    """
    name = "adjacency"
