"""
Protein sequences.

A Protein is an immutable, ordered list of AminoAcid symbols. It is the
sequence provider consumed by the aligner: anything with ``__len__`` and
``__getitem__`` returning AminoAcid works, Protein is just the shipped one.
"""

import numpy as np
from typing import Iterable, Iterator, Tuple

from pairalign.errors import SequenceError
from pairalign.sequence.alphabet import AminoAcid, CHAR_TO_AMINO_ACID


class Protein:
    """
    Representation of a protein primary structure.

    Args:
        residues: Iterable of AminoAcid symbols. May be empty.

    Example:
        >>> protein = Protein.from_string("pVaGH")
        >>> str(protein)
        'PVAGH'
    """

    __slots__ = ("_residues",)

    def __init__(self, residues: Iterable[AminoAcid] = ()):
        residues = tuple(residues)
        for residue in residues:
            if not isinstance(residue, AminoAcid):
                raise TypeError(f"Expected AminoAcid, got {type(residue).__name__}")
        self._residues: Tuple[AminoAcid, ...] = residues

    @classmethod
    def from_string(cls, string: str, allow_empty: bool = False) -> "Protein":
        """
        Create a Protein from IUPAC one-letter codes.

        The function is case-insensitive and only accepts ASCII characters.

        Args:
            string: Text containing valid amino acid codes
            allow_empty: Accept the empty string (an empty Protein)

        Returns:
            Protein

        Raises:
            SequenceError: With kind ``empty_string``, ``non_ascii`` or
                ``invalid_code``
        """
        if not string and not allow_empty:
            raise SequenceError(SequenceError.EMPTY_STRING)

        residues = []
        for i, char in enumerate(string):
            if not char.isascii():
                raise SequenceError(SequenceError.NON_ASCII, position=i, char=char)
            residue = CHAR_TO_AMINO_ACID.get(char.upper())
            if residue is None:
                raise SequenceError(SequenceError.INVALID_CODE, position=i, char=char)
            residues.append(residue)

        return cls(residues)

    @property
    def residues(self) -> Tuple[AminoAcid, ...]:
        return self._residues

    @property
    def codes(self) -> np.ndarray:
        """Integer values of the residues, shape (len(self),)."""
        return np.fromiter((int(r) for r in self._residues), dtype=np.int64,
                           count=len(self._residues))

    def __len__(self) -> int:
        return len(self._residues)

    def __getitem__(self, index):
        return self._residues[index]

    def __iter__(self) -> Iterator[AminoAcid]:
        return iter(self._residues)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Protein):
            return NotImplemented
        return self._residues == other._residues

    def __hash__(self) -> int:
        return hash(self._residues)

    def __str__(self) -> str:
        return "".join(r.name for r in self._residues)

    def __repr__(self) -> str:
        return f"Protein({str(self)!r})"
