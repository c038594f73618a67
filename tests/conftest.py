"""Pytest configuration and shared fixtures for pairalign tests."""

import pytest

from pairalign import AffineGap, LinearGap, Protein, ScoringSchema


@pytest.fixture
def affine_schema():
    """BLOSUM62 with affine gaps, open=10 and extend=1."""
    return ScoringSchema("BLOSUM62", AffineGap(10, 1))


@pytest.fixture
def linear_schema():
    """BLOSUM62 with linear gaps, 4 per position."""
    return ScoringSchema("BLOSUM62", LinearGap(4))


@pytest.fixture
def protein():
    """Factory building a Protein from text (empty strings allowed)."""
    def _make(text):
        return Protein.from_string(text, allow_empty=True)
    return _make


# Pairs used by the property tests: short enough for exhaustive tie
# enumeration, varied enough to produce gaps and ties
SEQUENCE_PAIRS = [
    ("MVLSPADKT", "MVLSGEDKS"),
    ("HEAGAWGHEE", "PAWHEAE"),
    ("WAAW", "WW"),
    ("AA", "A"),
    ("ACDEFGHIK", "ACDGHIK"),
    ("GGGGG", "GG"),
    ("KRKRKR", "RKRK"),
    ("MNGTEGPNFYVP", "MNGPNFYV"),
    ("W", "C"),
    ("PPPP", "WWWW"),
]


@pytest.fixture(params=SEQUENCE_PAIRS, ids=["-".join(p) for p in SEQUENCE_PAIRS])
def sequence_pair(request, protein):
    """(left, top) Protein pairs for property tests."""
    first, second = request.param
    return protein(first), protein(second)
