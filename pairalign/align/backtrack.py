"""
Traceback of optimal paths through a filled DP matrix.

The walk is an iterative depth-first search: ``path`` is the branch being
extended and ``pending`` holds independent copies of the alternatives seen
at tied cells. Stack usage is bounded regardless of sequence length or of
the number of ties.

Paths are lists of (row, col) coordinates ordered from the start cell (the
end of the alignment) to the stopping cell.
"""

import logging
import math
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from pairalign.align.direction import Cell, Direction, split, step_direction
from pairalign.align.matrix import TracebackMatrix
from pairalign.errors import AlignmentCancelled

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]
Path = List[Coordinate]


def _is_stop(position: Coordinate, cell: Cell, cutoff: float) -> bool:
    return position == (0, 0) or cell.score <= cutoff


def _moves(path: Path, cell: Cell, follow_gap_runs: bool) -> List[Direction]:
    moves = split(cell.directions)
    if follow_gap_runs and len(path) > 1:
        # The step into this cell was priced as an extension exactly when the
        # cell holds the same kind of gap, so the run has to go on
        arrived = step_direction(path[-2], path[-1])
        if arrived is not Direction.DIAGONAL and cell.directions & arrived:
            return [arrived]
    return moves


def iter_paths(
    matrix: TracebackMatrix,
    starts: Iterable[Coordinate],
    cutoff: float = -math.inf,
    follow_gap_runs: bool = True,
    cancel: Optional[Callable[[], bool]] = None
) -> Iterator[Path]:
    """
    Enumerate every optimal path from each start cell.

    A path ends at (0, 0) or at the first cell whose score is <= cutoff
    (-inf for global alignment, 0 for local alignment). At a tied cell the
    first direction (DIAGONAL, VERTICAL, HORIZONTAL order) extends the
    current path and each other one is pushed as a copy on the pending stack.

    Args:
        matrix: Filled TracebackMatrix
        starts: Start coordinates, traced one after the other
        cutoff: Score at or below which a path stops
        follow_gap_runs: Once a path steps into a cell that holds the same
            kind of gap, keep going in that direction only. With False every
            direction of every cell is followed.
        cancel: Polled once per step; returning True raises AlignmentCancelled

    Yields:
        Coordinate paths, start cell first

    Raises:
        InvariantError: If the walk reaches an EMPTY cell or leaves the matrix
    """
    for start in starts:
        pending: List[Path] = [[tuple(start)]]
        while pending:
            path = pending.pop()
            while True:
                if cancel is not None and cancel():
                    raise AlignmentCancelled("backtracking")
                row, col = path[-1]
                cell = matrix.cell(row, col)
                if _is_stop((row, col), cell, cutoff):
                    yield path
                    break

                first, *others = _moves(path, cell, follow_gap_runs)
                for move in others:
                    branch = list(path)
                    branch.append(move.predecessor(row, col))
                    pending.append(branch)
                path.append(first.predecessor(row, col))


def traceback(
    matrix: TracebackMatrix,
    starts: Iterable[Coordinate],
    cutoff: float = -math.inf,
    follow_gap_runs: bool = True,
    cancel: Optional[Callable[[], bool]] = None,
    limit: Optional[int] = None
) -> List[Path]:
    """
    Collect the paths of :func:`iter_paths` into a list.

    Args:
        limit: Stop after this many paths (None for all of them)

    Returns:
        List of coordinate paths
    """
    paths = []
    for path in iter_paths(matrix, starts, cutoff, follow_gap_runs, cancel):
        if limit is not None and len(paths) >= limit:
            logger.warning("Traceback stopped after %d paths; more optimal paths exist",
                           limit)
            break
        paths.append(path)
    logger.debug("Traceback found %d path(s)", len(paths))
    return paths
