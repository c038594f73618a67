"""
Pairwise alignment entry points.

``align`` runs one alignment: the solver fills the DP matrix, the
backtracker enumerates every optimal path and each path becomes an
Alignment. ``PairwiseAligner`` keeps a validated configuration and schema
around for repeated runs, and ``align_proteins`` works on plain strings.
"""

import logging
from typing import Callable, List, Optional, Sequence, Union

from pairalign.align.alignment import Alignment
from pairalign.align.backtrack import iter_paths
from pairalign.align.reconstruct import path_to_pairs
from pairalign.align.solver import make_solver
from pairalign.config import (
    AlignerConfig,
    AlignmentMode,
    DEFAULT_EXTEND_COST,
    DEFAULT_GAP_MODEL,
    DEFAULT_MATRIX,
    DEFAULT_MODE,
    DEFAULT_OPEN_COST,
    DEFAULT_STRATEGY,
)
from pairalign.errors import ConfigurationError
from pairalign.scoring.schema import ScoringSchema
from pairalign.sequence.alphabet import AminoAcid
from pairalign.sequence.protein import Protein

logger = logging.getLogger(__name__)


def align(
    left: Sequence[AminoAcid],
    top: Sequence[AminoAcid],
    schema: ScoringSchema,
    mode: Union[str, AlignmentMode] = DEFAULT_MODE,
    *,
    strategy: str = DEFAULT_STRATEGY,
    follow_gap_runs: bool = True,
    max_alignments: Optional[int] = None,
    cancel: Optional[Callable[[], bool]] = None
) -> List[Alignment]:
    """
    All optimal alignments of two sequences.

    Args:
        left: First sequence (matrix rows)
        top: Second sequence (matrix columns)
        schema: Scoring schema
        mode: "global" or "local"
        strategy: Matrix fill order, "rows" or "antidiagonal"
        follow_gap_runs: Keep traced gap runs consistent with their pricing
            (see :func:`pairalign.align.backtrack.iter_paths`)
        max_alignments: Stop after this many alignments (None for all)
        cancel: Callable polled during the run; returning True raises
            AlignmentCancelled

    Returns:
        Non-empty list of alignments, in discovery order

    Example:
        >>> schema = ScoringSchema("BLOSUM62", AffineGap(10, 1))
        >>> result = align(Protein.from_string("MVLSPADKT"),
        ...                Protein.from_string("MVLSGEDKS"), schema)
        >>> result[0].score
        26.0
    """
    mode = AlignmentMode.parse(mode)
    if max_alignments is not None and max_alignments < 1:
        raise ConfigurationError("max_alignments", max_alignments,
                                 "a positive integer or None")

    solver = make_solver(mode, left, top, schema, strategy=strategy, cancel=cancel)
    matrix = solver.solve()

    alignments = []
    paths = iter_paths(matrix, solver.start_cells(), solver.cutoff,
                       follow_gap_runs=follow_gap_runs, cancel=cancel)
    for path in paths:
        if max_alignments is not None and len(alignments) >= max_alignments:
            logger.warning("Stopped after %d alignments; more optimal alignments exist",
                           max_alignments)
            break
        end1, end2 = path[0]
        start1, start2 = path[-1]
        alignments.append(Alignment(
            pairs=tuple(path_to_pairs(path, left, top)),
            score=matrix.cell(end1, end2).score,
            mode=mode.value,
            start1=start1,
            end1=end1,
            start2=start2,
            end2=end2,
        ))

    logger.debug("%s alignment of %d x %d residues: %d optimal alignment(s), score %g",
                 mode.value, len(left), len(top), len(alignments), alignments[0].score)
    return alignments


class PairwiseAligner:
    """
    Aligner bound to one configuration.

    Args:
        config: AlignerConfig; keyword arguments override its fields

    Example:
        >>> aligner = PairwiseAligner(mode="local", open_cost=11)
        >>> best = aligner.align("PAWHEAE", "HEAGAWGHEE")[0]
    """

    def __init__(self, config: Optional[AlignerConfig] = None, **overrides):
        params = config.to_dict() if config is not None else {}
        params.update(overrides)
        self.config = AlignerConfig.from_dict(params)
        self.schema = self.config.build_schema()

    def align(
        self,
        left: Union[str, Sequence[AminoAcid]],
        top: Union[str, Sequence[AminoAcid]],
        cancel: Optional[Callable[[], bool]] = None
    ) -> List[Alignment]:
        """Align two sequences (Protein, AminoAcid sequences or strings)."""
        return align(
            _as_sequence(left),
            _as_sequence(top),
            self.schema,
            mode=self.config.mode,
            strategy=self.config.strategy,
            follow_gap_runs=self.config.follow_gap_runs,
            max_alignments=self.config.max_alignments,
            cancel=cancel,
        )

    def score(
        self,
        left: Union[str, Sequence[AminoAcid]],
        top: Union[str, Sequence[AminoAcid]]
    ) -> float:
        """Optimal score only, without tracing any path."""
        solver = make_solver(self.config.mode, _as_sequence(left), _as_sequence(top),
                             self.schema, strategy=self.config.strategy)
        solver.solve()
        return solver.score

    def __repr__(self) -> str:
        return f"PairwiseAligner({self.config!r})"


def align_proteins(
    seq1: str,
    seq2: str,
    open_cost: float = DEFAULT_OPEN_COST,
    extend_cost: float = DEFAULT_EXTEND_COST,
    matrix: str = DEFAULT_MATRIX,
    mode: str = DEFAULT_MODE,
    gap_model: str = DEFAULT_GAP_MODEL
) -> List[Alignment]:
    """
    Align two protein strings.

    Args:
        seq1: First protein (IUPAC one-letter codes, case-insensitive)
        seq2: Second protein
        open_cost: Gap opening cost
        extend_cost: Gap extension cost
        matrix: Substitution matrix name ("BLOSUM62", "BLOSUM45" or "PAM160")
        mode: "global" or "local"
        gap_model: "affine" or "linear"

    Returns:
        All optimal alignments

    Raises:
        SequenceError: If a string is not a valid protein
        ConfigurationError: If a parameter is invalid
    """
    aligner = PairwiseAligner(
        open_cost=open_cost,
        extend_cost=extend_cost,
        matrix=matrix,
        mode=mode,
        gap_model=gap_model,
    )
    return aligner.align(Protein.from_string(seq1), Protein.from_string(seq2))


def _as_sequence(value) -> Sequence[AminoAcid]:
    if isinstance(value, str):
        return Protein.from_string(value, allow_empty=True)
    return value
