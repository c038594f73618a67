"""Conversion of coordinate paths into aligned symbol pairs."""

from typing import List, Optional, Sequence, Tuple

from pairalign.align.direction import Direction, step_direction
from pairalign.errors import InvariantError
from pairalign.sequence.alphabet import AminoAcid

Pair = Tuple[Optional[AminoAcid], Optional[AminoAcid]]


def path_to_pairs(
    path: Sequence[Tuple[int, int]],
    left: Sequence[AminoAcid],
    top: Sequence[AminoAcid]
) -> List[Pair]:
    """
    Turn a traceback path into (left, top) pairs, ``None`` marking a gap.

    Args:
        path: Coordinates from the start cell back to the stopping cell
        left: Sequence along the rows
        top: Sequence along the columns

    Returns:
        Pairs in alignment order (stopping cell first)

    Raises:
        InvariantError: If two consecutive coordinates are not a unit
            diagonal, vertical or horizontal step
    """
    pairs: List[Pair] = []
    for k in range(len(path) - 1, 0, -1):
        row, col = path[k - 1]
        move = step_direction(path[k - 1], path[k])
        if move is Direction.DIAGONAL:
            pairs.append((left[row - 1], top[col - 1]))
        elif move is Direction.VERTICAL:
            pairs.append((left[row - 1], None))
        elif move is Direction.HORIZONTAL:
            pairs.append((None, top[col - 1]))
        else:
            raise InvariantError(
                f"Invalid path step from {tuple(path[k])} to {tuple(path[k - 1])}",
                context="Paths may only move by one diagonal, vertical or horizontal step",
            )
    return pairs
