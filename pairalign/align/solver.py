"""
Dynamic programming solvers for global and local alignment.

Both solvers fill a TracebackMatrix with the same recurrence:

    diagonal   = S(i-1, j-1) + score(left[i-1], top[j-1])
    vertical   = S(i-1, j)   - (extend if VERTICAL in D(i-1, j) else gap(1))
    horizontal = S(i, j-1)   - (extend if HORIZONTAL in D(i, j-1) else gap(1))

and keep every move that reaches the maximum. The local solver clamps each
candidate at zero and records the cells holding the global maximum.

Two fill orders are available and give identical matrices:
- "rows": row by row, left to right, one cell at a time
- "antidiagonal": one anti-diagonal (constant i + j) at a time; the cells of
  an anti-diagonal only depend on the two previous ones, so each is computed
  with vectorised numpy operations
"""

import logging
import math
import numpy as np
from typing import Callable, List, Optional, Sequence, Tuple

from pairalign.align.direction import Cell, Direction
from pairalign.align.matrix import TracebackMatrix
from pairalign.config import AlignmentMode, DEFAULT_STRATEGY, FILL_STRATEGIES
from pairalign.errors import AlignmentCancelled, ConfigurationError, InvariantError
from pairalign.scoring.schema import ScoringSchema
from pairalign.sequence.alphabet import AminoAcid

logger = logging.getLogger(__name__)

_DIAGONAL = np.uint8(Direction.DIAGONAL)
_VERTICAL = np.uint8(Direction.VERTICAL)
_HORIZONTAL = np.uint8(Direction.HORIZONTAL)


class Solver:
    """
    Base class of the DP solvers.

    Args:
        left: Sequence laid along the rows
        top: Sequence laid along the columns
        schema: Scoring schema
        strategy: Fill order, "rows" or "antidiagonal"
        cancel: Polled once per row (or anti-diagonal); returning True
            aborts the fill with AlignmentCancelled
    """

    #: Backtracking stops at cells whose score is <= cutoff
    cutoff = -math.inf

    def __init__(
        self,
        left: Sequence[AminoAcid],
        top: Sequence[AminoAcid],
        schema: ScoringSchema,
        strategy: str = DEFAULT_STRATEGY,
        cancel: Optional[Callable[[], bool]] = None
    ):
        if strategy not in FILL_STRATEGIES:
            raise ConfigurationError("strategy", strategy, " or ".join(FILL_STRATEGIES))
        self.left = left
        self.top = top
        self.schema = schema
        self.strategy = strategy
        self.cancel = cancel
        self.matrix = TracebackMatrix(len(left) + 1, len(top) + 1)
        self._solved = False

    def solve(self) -> TracebackMatrix:
        """Initialize the borders and fill the interior. Returns the matrix."""
        rows, cols = self.matrix.dim
        logger.debug("%s: filling %dx%d matrix (%s)",
                     type(self).__name__, rows, cols, self.strategy)
        self.initialize()
        if self.strategy == "antidiagonal":
            self._fill_antidiagonals()
        else:
            self._fill_rows()
        self._solved = True
        return self.matrix

    def initialize(self) -> None:
        raise NotImplementedError

    def start_cells(self) -> List[Tuple[int, int]]:
        """Cells the backtracker starts from."""
        raise NotImplementedError

    @property
    def score(self) -> float:
        """Optimal alignment score."""
        row, col = self.start_cells()[0]
        return self.matrix.cell(row, col).score

    def _check_cancel(self) -> None:
        if self.cancel is not None and self.cancel():
            raise AlignmentCancelled("matrix fill")

    def _require_solved(self) -> None:
        if not self._solved:
            raise InvariantError("The matrix must be solved before it is traced back")

    # Row-major fill

    def _fill_rows(self) -> None:
        rows, cols = self.matrix.dim
        for i in range(1, rows):
            self._check_cancel()
            for j in range(1, cols):
                cell = self.best_cell(i, j)
                self.matrix.put(i, j, cell)
                self._update(cell.score, i, j)

    def candidates(self, i: int, j: int) -> Tuple[float, float, float]:
        """Diagonal, vertical and horizontal scores of interior cell (i, j)."""
        diagonal = (self.matrix.cell(i - 1, j - 1).score
                    + self.schema.score(self.left[i - 1], self.top[j - 1]))
        vertical = self._gap_score(self.matrix.cell(i - 1, j), Direction.VERTICAL)
        horizontal = self._gap_score(self.matrix.cell(i, j - 1), Direction.HORIZONTAL)
        return diagonal, vertical, horizontal

    def _gap_score(self, previous: Cell, direction: Direction) -> float:
        # A predecessor already holding a gap of this kind is extended,
        # anything else opens a new gap
        if previous.directions & direction:
            penalty = self.schema.gap_extend()
        else:
            penalty = self.schema.gap_function(1)
        return previous.score - penalty

    def best_cell(self, i: int, j: int) -> Cell:
        return Cell.from_scores(*self.candidates(i, j))

    def _update(self, score: float, i: int, j: int) -> None:
        pass

    # Anti-diagonal fill

    def _fill_antidiagonals(self) -> None:
        rows, cols = self.matrix.dim
        n, m = rows - 1, cols - 1
        if n == 0 or m == 0:
            return

        substitution = self.schema.substitution_grid(self.left, self.top)
        scores = self.matrix.scores.data
        directions = self.matrix.directions.data
        extend = self.schema.gap_extend()
        opening = self.schema.gap_function(1)

        for d in range(2, n + m + 1):
            self._check_cancel()
            i = np.arange(max(1, d - m), min(n, d - 1) + 1)
            j = d - i

            if (not np.all(directions[i - 1, j - 1])
                    or not np.all(directions[i - 1, j])
                    or not np.all(directions[i, j - 1])):
                raise InvariantError(f"Anti-diagonal {d} read a cell before it was filled")

            diagonal = scores[i - 1, j - 1] + substitution[i - 1, j - 1]
            vertical = scores[i - 1, j] - np.where(
                directions[i - 1, j] & _VERTICAL, extend, opening)
            horizontal = scores[i, j - 1] - np.where(
                directions[i, j - 1] & _HORIZONTAL, extend, opening)
            diagonal, vertical, horizontal = self._clamp(diagonal, vertical, horizontal)

            best = np.maximum(np.maximum(diagonal, vertical), horizontal)
            mask = np.where(diagonal == best, _DIAGONAL, 0).astype(np.uint8)
            mask |= np.where(vertical == best, _VERTICAL, 0).astype(np.uint8)
            mask |= np.where(horizontal == best, _HORIZONTAL, 0).astype(np.uint8)

            scores[i, j] = best
            directions[i, j] = mask

        self._update_from_array(scores)

    def _clamp(self, diagonal, vertical, horizontal):
        return diagonal, vertical, horizontal

    def _update_from_array(self, scores: np.ndarray) -> None:
        pass


class GlobalSolver(Solver):
    """
    Needleman-Wunsch style global alignment.

    Borders hold the cost of a gap running from the matrix origin; the only
    start cell is the bottom-right corner.
    """

    def initialize(self) -> None:
        rows, cols = self.matrix.dim
        self.matrix.put(0, 0, Cell(Direction.DIAGONAL, 0.0))
        for i in range(1, rows):
            self.matrix.put(i, 0, Cell(Direction.VERTICAL, -self.schema.gap_function(i)))
        for j in range(1, cols):
            self.matrix.put(0, j, Cell(Direction.HORIZONTAL, -self.schema.gap_function(j)))

    def start_cells(self) -> List[Tuple[int, int]]:
        self._require_solved()
        rows, cols = self.matrix.dim
        return [(rows - 1, cols - 1)]


class LocalSolver(Solver):
    """
    Smith-Waterman style local alignment.

    Scores are floored at zero and the solver keeps every cell holding the
    global maximum. When no cell is positive the origin is the only start
    cell, which traces back to the empty alignment.
    """

    cutoff = 0.0

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.maximum = -math.inf
        self.maximum_indices: List[Tuple[int, int]] = []

    def initialize(self) -> None:
        rows, cols = self.matrix.dim
        self.matrix.put(0, 0, Cell(Direction.DIAGONAL, 0.0))
        for i in range(1, rows):
            self.matrix.put(i, 0, Cell(Direction.VERTICAL, 0.0))
        for j in range(1, cols):
            self.matrix.put(0, j, Cell(Direction.HORIZONTAL, 0.0))

    def best_cell(self, i: int, j: int) -> Cell:
        diagonal, vertical, horizontal = self.candidates(i, j)
        return Cell.from_scores(max(diagonal, 0.0), max(vertical, 0.0),
                                max(horizontal, 0.0))

    def _clamp(self, diagonal, vertical, horizontal):
        return (np.maximum(diagonal, 0.0), np.maximum(vertical, 0.0),
                np.maximum(horizontal, 0.0))

    def _update(self, score: float, i: int, j: int) -> None:
        if score > self.maximum:
            self.maximum = score
            self.maximum_indices = [(i, j)]
        elif score == self.maximum:
            self.maximum_indices.append((i, j))

    def _update_from_array(self, scores: np.ndarray) -> None:
        interior = scores[1:, 1:]
        self.maximum = float(interior.max())
        self.maximum_indices = [(int(i) + 1, int(j) + 1)
                                for i, j in np.argwhere(interior == self.maximum)]

    def start_cells(self) -> List[Tuple[int, int]]:
        self._require_solved()
        if self.maximum <= 0.0:
            return [(0, 0)]
        return list(self.maximum_indices)


def make_solver(mode, *args, **kwargs) -> Solver:
    """Instantiate the solver for an AlignmentMode (or its name)."""
    mode = AlignmentMode.parse(mode)
    if mode is AlignmentMode.LOCAL:
        return LocalSolver(*args, **kwargs)
    return GlobalSolver(*args, **kwargs)
