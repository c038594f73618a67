"""
Backtracking directions and DP cells.

A cell stores the set of moves that reached its best score together with
that score. The set matters beyond tie enumeration: whether a neighbour
contains VERTICAL (or HORIZONTAL) decides if a gap from it is priced as an
extension or as a new opening.
"""

import math
from enum import IntFlag
from typing import List, NamedTuple, Tuple


class Direction(IntFlag):
    """Moves into a cell. DIAGONAL is match/mismatch, the others are gaps."""
    DIAGONAL = 1
    VERTICAL = 2    # gap in the top sequence
    HORIZONTAL = 4  # gap in the left sequence

    @property
    def offset(self) -> Tuple[int, int]:
        """(row, col) step from a cell to its predecessor."""
        return _OFFSETS[self]

    def predecessor(self, row: int, col: int) -> Tuple[int, int]:
        d_row, d_col = _OFFSETS[self]
        return row + d_row, col + d_col


# Branching order of the backtracker
MOVES = (Direction.DIAGONAL, Direction.VERTICAL, Direction.HORIZONTAL)

NO_DIRECTION = Direction(0)

_OFFSETS = {
    Direction.DIAGONAL: (-1, -1),
    Direction.VERTICAL: (-1, 0),
    Direction.HORIZONTAL: (0, -1),
}


def split(directions: Direction) -> List[Direction]:
    """Single directions contained in a mask, in MOVES order."""
    return [move for move in MOVES if directions & move]


def step_direction(previous: Tuple[int, int], current: Tuple[int, int]) -> Direction:
    """
    Direction of the move from ``previous`` back to ``current``.

    Returns NO_DIRECTION when the two coordinates are not a unit step.
    """
    offset = (current[0] - previous[0], current[1] - previous[1])
    for move in MOVES:
        if _OFFSETS[move] == offset:
            return move
    return NO_DIRECTION


class Cell(NamedTuple):
    """Directions that achieved ``score``; empty directions mean unset."""
    directions: Direction
    score: float

    @property
    def is_empty(self) -> bool:
        return not self.directions

    @classmethod
    def from_scores(cls, diagonal: float, vertical: float, horizontal: float) -> "Cell":
        """
        Keep the best of the three candidate scores and every move reaching it.

        Example:
            >>> cell = Cell.from_scores(3.0, 3.0, -1.0)
            >>> split(cell.directions), cell.score
            ([<Direction.DIAGONAL: 1>, <Direction.VERTICAL: 2>], 3.0)
        """
        best = max(diagonal, vertical, horizontal)
        directions = NO_DIRECTION
        if diagonal == best:
            directions |= Direction.DIAGONAL
        if vertical == best:
            directions |= Direction.VERTICAL
        if horizontal == best:
            directions |= Direction.HORIZONTAL
        return cls(directions, best)


EMPTY = Cell(NO_DIRECTION, math.nan)
