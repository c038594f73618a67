"""
pairalign: Optimal Pairwise Protein Alignment

This package provides tools for:
- Global (Needleman-Wunsch) and local (Smith-Waterman) alignment
- Affine and linear gap penalties with BLOSUM and PAM substitution scores
- Enumeration of every alignment that reaches the optimal score
- Protein sequence validation and plain-text alignment rendering

Built on top of NumPy for matrix storage and vectorised matrix fills.
"""

__version__ = "0.1.0"
__author__ = "pairalign Contributors"

from pairalign.errors import (
    PairAlignError,
    SequenceError,
    ConfigurationError,
    OutOfDimensionError,
    InvariantError,
    AlignmentCancelled,
)

from pairalign.sequence import (
    AminoAcid,
    Protein,
    pair_key,
)

from pairalign.scoring import (
    AffineGap,
    LinearGap,
    GapModel,
    ScoringSchema,
    BLOSUM45,
    BLOSUM62,
    PAM160,
    get_substitution_matrix,
    load_substitution_matrix,
)

from pairalign.config import AlignerConfig

from pairalign.align import (
    Alignment,
    AlignmentMode,
    PairwiseAligner,
    align,
    align_proteins,
    format_alignment,
    longest,
)

__all__ = [
    # Errors
    "PairAlignError",
    "SequenceError",
    "ConfigurationError",
    "OutOfDimensionError",
    "InvariantError",
    "AlignmentCancelled",
    # Sequences
    "AminoAcid",
    "Protein",
    "pair_key",
    # Scoring
    "AffineGap",
    "LinearGap",
    "GapModel",
    "ScoringSchema",
    "BLOSUM45",
    "BLOSUM62",
    "PAM160",
    "get_substitution_matrix",
    "load_substitution_matrix",
    # Alignment
    "AlignerConfig",
    "Alignment",
    "AlignmentMode",
    "PairwiseAligner",
    "align",
    "align_proteins",
    "format_alignment",
    "longest",
]
