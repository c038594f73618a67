"""
Scoring schemas.

A ScoringSchema pairs a substitution matrix with a gap penalty model. It is
the only scoring interface the solver and the backtracker use, and it is
read-only, so one schema can be shared by any number of runs.
"""

import numpy as np
from typing import Sequence, Union

from pairalign.scoring.gap import GapPenalty
from pairalign.scoring.matrices import SubstitutionMatrix, get_substitution_matrix
from pairalign.sequence.alphabet import AminoAcid


class ScoringSchema:
    """
    Substitution scores plus gap costs.

    Args:
        substitution: A SubstitutionMatrix or the name of a built-in one
        gap: Gap penalty model (AffineGap or LinearGap)

    Example:
        >>> schema = ScoringSchema("BLOSUM62", AffineGap(10, 1))
        >>> schema.gap_function(2)
        12.0
    """

    def __init__(
        self,
        substitution: Union[str, SubstitutionMatrix],
        gap: GapPenalty
    ):
        if not isinstance(gap, GapPenalty):
            raise TypeError(f"Expected a GapPenalty, got {type(gap).__name__}")
        self.substitution = get_substitution_matrix(substitution)
        self.gap = gap

    def score(self, first: AminoAcid, second: AminoAcid) -> int:
        """Substitution score, symmetric in its arguments."""
        return self.substitution.score(first, second)

    def gap_function(self, length: int) -> float:
        """Cost of a gap run of the given length (length >= 1)."""
        return self.gap.function(length)

    def gap_open(self) -> float:
        return self.gap.open()

    def gap_extend(self) -> float:
        return self.gap.extend()

    def substitution_grid(
        self,
        left: Sequence[AminoAcid],
        top: Sequence[AminoAcid]
    ) -> np.ndarray:
        """Scores of every (left[i], top[j]) pair, shape (len(left), len(top))."""
        return self.substitution.grid(_codes(left), _codes(top)).astype(np.float64)

    def __repr__(self) -> str:
        return f"ScoringSchema({self.substitution.name!r}, {self.gap!r})"


def _codes(sequence: Sequence[AminoAcid]) -> np.ndarray:
    codes = getattr(sequence, "codes", None)
    if codes is not None:
        return codes
    return np.array([int(s) for s in sequence], dtype=np.int64)
