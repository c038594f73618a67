"""
Sequence symbols and containers.

This module provides:
- The 20 letter amino acid alphabet
- The Cantor pairing used for symmetric score lookups
- Protein sequences built from IUPAC text
"""

from pairalign.sequence.alphabet import (
    AminoAcid,
    ALPHABET,
    pair_key,
    symmetric_key,
)

from pairalign.sequence.protein import Protein

__all__ = [
    "AminoAcid",
    "ALPHABET",
    "pair_key",
    "symmetric_key",
    "Protein",
]
