"""
Pairwise alignment engine.

This module provides:
- Dense DP matrices with direction-set cells
- Global and local solvers with affine or linear gap costs
- Iterative enumeration of every optimal traceback path
- Alignment records, plain-text formatting and the run entry points
"""

from pairalign.align.direction import (
    Direction,
    Cell,
    EMPTY,
)

from pairalign.align.matrix import (
    Matrix,
    TracebackMatrix,
)

from pairalign.align.solver import (
    Solver,
    GlobalSolver,
    LocalSolver,
    make_solver,
)

from pairalign.align.backtrack import (
    iter_paths,
    traceback,
)

from pairalign.align.reconstruct import path_to_pairs

from pairalign.align.alignment import (
    Alignment,
    longest,
)

from pairalign.align.formatter import (
    format_alignment,
    format_alignments,
)

from pairalign.align.aligner import (
    AlignmentMode,
    PairwiseAligner,
    align,
    align_proteins,
)

__all__ = [
    "Direction",
    "Cell",
    "EMPTY",
    "Matrix",
    "TracebackMatrix",
    "Solver",
    "GlobalSolver",
    "LocalSolver",
    "make_solver",
    "iter_paths",
    "traceback",
    "path_to_pairs",
    "Alignment",
    "longest",
    "format_alignment",
    "format_alignments",
    "AlignmentMode",
    "PairwiseAligner",
    "align",
    "align_proteins",
]
