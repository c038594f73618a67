"""
Alignment records.

An Alignment is the immutable result of one traced path: the aligned pairs,
the optimal score and the aligned ranges of both sequences.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from pairalign.config import ALIGNED_GAP_CHAR
from pairalign.sequence.alphabet import AminoAcid

Pair = Tuple[Optional[AminoAcid], Optional[AminoAcid]]


@dataclass(frozen=True)
class Alignment:
    """
    Result of a pairwise alignment.

    Attributes:
        pairs: (left, top) symbol pairs; None marks a gap
        score: Optimal score of the alignment
        mode: "global" or "local"
        start1, end1: Aligned range of the left sequence (0-based, half-open)
        start2, end2: Aligned range of the top sequence (0-based, half-open)
    """
    pairs: Tuple[Pair, ...]
    score: float
    mode: str
    start1: int
    end1: int
    start2: int
    end2: int

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def __str__(self) -> str:
        from pairalign.align.formatter import format_alignment

        return format_alignment(self)

    @property
    def aligned1(self) -> str:
        """Left sequence with '-' at gap positions."""
        return "".join(ALIGNED_GAP_CHAR if a is None else a.name for a, _ in self.pairs)

    @property
    def aligned2(self) -> str:
        """Top sequence with '-' at gap positions."""
        return "".join(ALIGNED_GAP_CHAR if b is None else b.name for _, b in self.pairs)

    @property
    def matches(self) -> int:
        """Number of identical aligned residues."""
        return sum(1 for a, b in self.pairs if a is not None and a == b)

    @property
    def mismatches(self) -> int:
        return sum(1 for a, b in self.pairs
                   if a is not None and b is not None and a != b)

    @property
    def gaps(self) -> int:
        """Number of gap positions on either side."""
        return sum(1 for a, b in self.pairs if a is None or b is None)

    @property
    def gap_runs(self) -> List[int]:
        """Lengths of the maximal gap runs, each side counted separately."""
        return [length for _, length in _gap_runs(self.pairs)]

    @property
    def identity(self) -> float:
        """Fraction of alignment columns holding identical residues."""
        if not self.pairs:
            return 0.0
        return self.matches / len(self.pairs)

    def mirrored(self) -> "Alignment":
        """Same alignment with the two sequences swapped."""
        return Alignment(
            pairs=tuple((b, a) for a, b in self.pairs),
            score=self.score,
            mode=self.mode,
            start1=self.start2,
            end1=self.end2,
            start2=self.start1,
            end2=self.end1,
        )

    def rescore(self, schema) -> float:
        """
        Score the pairs from scratch with a ScoringSchema.

        Substitution scores are summed over residue pairs and every maximal
        gap run of length n costs ``schema.gap_function(n)``. For an
        alignment returned by the aligner this equals ``self.score``.
        """
        total = 0.0
        for a, b in self.pairs:
            if a is not None and b is not None:
                total += schema.score(a, b)
        for _, length in _gap_runs(self.pairs):
            total -= schema.gap_function(length)
        return total


def _gap_runs(pairs: Sequence[Pair]) -> List[Tuple[str, int]]:
    """(side, length) of each maximal run; side is "left" or "top" (the gapped one)."""
    runs = []
    side, length = None, 0
    for a, b in pairs:
        current = "left" if a is None else "top" if b is None else None
        if current == side and current is not None:
            length += 1
            continue
        if side is not None:
            runs.append((side, length))
        side, length = current, (1 if current is not None else 0)
    if side is not None:
        runs.append((side, length))
    return runs


def longest(alignments: Sequence[Alignment]) -> Alignment:
    """
    The longest alignment of a non-empty collection.

    Ties keep the first one found.
    """
    if not alignments:
        raise ValueError("No alignments provided")
    best = alignments[0]
    for alignment in alignments[1:]:
        if len(alignment) > len(best):
            best = alignment
    return best
