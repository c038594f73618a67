"""
Scoring models for pairwise alignment.

This module provides:
- Gap penalty models (affine and linear)
- Built-in BLOSUM45, BLOSUM62 and PAM160 substitution matrices
- Loading of NCBI-format substitution matrices
- The ScoringSchema consumed by the aligner
"""

from pairalign.scoring.gap import (
    GapModel,
    GapPenalty,
    AffineGap,
    LinearGap,
    make_gap_penalty,
)

from pairalign.scoring.matrices import (
    SubstitutionMatrix,
    BLOSUM45,
    BLOSUM62,
    PAM160,
    get_substitution_matrix,
    available_matrices,
    parse_substitution_matrix,
    load_substitution_matrix,
)

from pairalign.scoring.schema import ScoringSchema

__all__ = [
    "GapModel",
    "GapPenalty",
    "AffineGap",
    "LinearGap",
    "make_gap_penalty",
    "SubstitutionMatrix",
    "BLOSUM45",
    "BLOSUM62",
    "PAM160",
    "get_substitution_matrix",
    "available_matrices",
    "parse_substitution_matrix",
    "load_substitution_matrix",
    "ScoringSchema",
]
