"""
Amino acid alphabet.

Symbols are the 20 standard IUPAC amino acid codes, ordered alphabetically
by one-letter code. The ordering is what the pairing function and the
substitution tables rely on, so it must never change.
"""

from enum import IntEnum
from typing import Dict

from pairalign.errors import SequenceError


class AminoAcid(IntEnum):
    """IUPAC amino acid code. Immutable and totally ordered."""
    A = 0
    C = 1
    D = 2
    E = 3
    F = 4
    G = 5
    H = 6
    I = 7  # noqa: E741
    K = 8
    L = 9
    M = 10
    N = 11
    P = 12
    Q = 13
    R = 14
    S = 15
    T = 16
    V = 17
    W = 18
    Y = 19

    @classmethod
    def from_char(cls, char: str) -> "AminoAcid":
        """
        Create an amino acid from its one-letter code.

        The lookup is case-insensitive.

        Args:
            char: Single character IUPAC code

        Returns:
            The matching AminoAcid

        Raises:
            SequenceError: If the character is not ASCII or not a valid code

        Example:
            >>> AminoAcid.from_char("l")
            <AminoAcid.L: 9>
        """
        if not char.isascii():
            raise SequenceError(SequenceError.NON_ASCII, char=char)
        code = CHAR_TO_AMINO_ACID.get(char.upper())
        if code is None:
            raise SequenceError(SequenceError.INVALID_CODE, char=char)
        return code

    @property
    def char(self) -> str:
        """One-letter code."""
        return self.name

    def __str__(self) -> str:
        return self.name


CHAR_TO_AMINO_ACID: Dict[str, AminoAcid] = {aa.name: aa for aa in AminoAcid}

ALPHABET = "".join(aa.name for aa in AminoAcid)


def pair_key(first: int, second: int) -> int:
    """
    Cantor pairing of an ordered pair of symbols.

    Maps (first, second) to a unique non-negative integer. The map is a
    bijection on pairs of non-negative integers and strictly increasing in
    each argument.

    Args:
        first: First symbol (or its integer value)
        second: Second symbol (or its integer value)

    Returns:
        (first + second) * (first + second + 1) / 2 + second

    Example:
        >>> pair_key(AminoAcid.A, AminoAcid.D)
        5
    """
    total = int(first) + int(second)
    return total * (total + 1) // 2 + int(second)


def symmetric_key(first: int, second: int) -> int:
    """Pairing key of the sorted pair, so that (a, b) and (b, a) collide."""
    if first > second:
        first, second = second, first
    return pair_key(first, second)
