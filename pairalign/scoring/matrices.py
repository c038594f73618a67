"""
Amino acid substitution matrices.

Symmetric tables only need the diagonal plus one triangle: a score is
stored once under the Cantor pairing of the sorted symbol pair, in a dense
numpy vector indexed by that key. Tables are parsed from NCBI text once at
import time and validated for completeness and symmetry.
"""

import gzip
import logging
import numpy as np
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from pairalign.errors import ConfigurationError
from pairalign.sequence.alphabet import AminoAcid, CHAR_TO_AMINO_ACID, symmetric_key

logger = logging.getLogger(__name__)

# Keys of the upper triangle of a 20x20 symmetric table fit in [0, TABLE_SIZE)
TABLE_SIZE = symmetric_key(AminoAcid.Y, AminoAcid.Y) + 1


class SubstitutionMatrix:
    """
    Symmetric substitution scores over the amino acid alphabet.

    Args:
        name: Matrix name (e.g. "BLOSUM62")
        table: int array of length TABLE_SIZE indexed by symmetric_key

    Example:
        >>> BLOSUM62.score(AminoAcid.W, AminoAcid.W)
        11
    """

    def __init__(self, name: str, table: np.ndarray):
        self.name = name
        self._table = np.asarray(table, dtype=np.int64)
        self._table.setflags(write=False)
        # Full square form, used for vectorised lookups
        codes = np.arange(len(AminoAcid))
        total = codes[:, None] + codes[None, :]
        upper = np.maximum(codes[:, None], codes[None, :])
        self._square = self._table[total * (total + 1) // 2 + upper]
        self._square.setflags(write=False)

    def score(self, first: AminoAcid, second: AminoAcid) -> int:
        """Score of aligning two residues; symmetric in its arguments."""
        return int(self._table[symmetric_key(first, second)])

    def grid(self, left: np.ndarray, top: np.ndarray) -> np.ndarray:
        """
        Scores of every (left[i], top[j]) pair.

        Args:
            left: Integer residue codes, shape (n,)
            top: Integer residue codes, shape (m,)

        Returns:
            Array of shape (n, m)
        """
        return self._square[np.ix_(left, top)]

    def as_square(self) -> np.ndarray:
        """20x20 view of the table, rows and columns in AminoAcid order."""
        return self._square

    def __repr__(self) -> str:
        return f"SubstitutionMatrix({self.name!r})"


def parse_substitution_matrix(text: str, name: str = "custom") -> SubstitutionMatrix:
    """
    Parse a substitution matrix in NCBI text format.

    Comment lines start with '#'. The first remaining line lists the column
    symbols; every following line starts with its row symbol. Symbols outside
    the 20 standard amino acids (B, Z, X, *) are ignored.

    Args:
        text: Matrix file content
        name: Name given to the resulting matrix

    Returns:
        SubstitutionMatrix

    Raises:
        ConfigurationError: If the table is malformed, incomplete or asymmetric
    """
    lines = [line.split() for line in text.splitlines()
             if line.strip() and not line.lstrip().startswith("#")]
    if not lines:
        raise ConfigurationError("matrix", name, "a non-empty NCBI matrix")

    header = lines[0]
    scores: Dict[tuple, int] = {}
    for row in lines[1:]:
        row_symbol = CHAR_TO_AMINO_ACID.get(row[0].upper())
        if row_symbol is None:
            continue
        values = row[1:]
        if len(values) != len(header):
            raise ConfigurationError(
                "matrix", name,
                f"{len(header)} scores in row {row[0]}, found {len(values)}"
            )
        for col_char, value in zip(header, values):
            col_symbol = CHAR_TO_AMINO_ACID.get(col_char.upper())
            if col_symbol is None:
                continue
            try:
                scores[(row_symbol, col_symbol)] = int(value)
            except ValueError:
                raise ConfigurationError("matrix", name,
                                         f"integer scores, found {value!r}") from None

    table = np.zeros(TABLE_SIZE, dtype=np.int64)
    for first in AminoAcid:
        for second in AminoAcid:
            if (first, second) not in scores:
                raise ConfigurationError("matrix", name,
                                         f"a score for the pair {first.name}/{second.name}")
            if scores[(first, second)] != scores[(second, first)]:
                raise ConfigurationError("matrix", name,
                                         f"symmetric scores for {first.name}/{second.name}")
            table[symmetric_key(first, second)] = scores[(first, second)]

    return SubstitutionMatrix(name, table)


def load_substitution_matrix(
    filepath: Union[str, Path],
    name: Optional[str] = None
) -> SubstitutionMatrix:
    """
    Read a substitution matrix from an NCBI-format file (plain or .gz).

    Args:
        filepath: Path to the matrix file
        name: Matrix name; defaults to the file stem in upper case

    Returns:
        SubstitutionMatrix
    """
    filepath = Path(filepath)
    opener = gzip.open if filepath.suffix == ".gz" else open
    with opener(filepath, "rt") as f:
        content = f.read()
    if name is None:
        name = Path(filepath.stem).stem.upper()
    logger.debug("Loading substitution matrix %s from %s", name, filepath)
    return parse_substitution_matrix(content, name)


_BLOSUM45_TEXT = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  5 -2 -1 -2 -1 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -2 -2  0
R -2  7  0 -1 -3  1  0 -2  0 -3 -2  3 -1 -2 -2 -1 -1 -2 -1 -2
N -1  0  6  2 -2  0  0  0  1 -2 -3  0 -2 -2 -2  1  0 -4 -2 -3
D -2 -1  2  7 -3  0  2 -1  0 -4 -3  0 -3 -4 -1  0 -1 -4 -2 -3
C -1 -3 -2 -3 12 -3 -3 -3 -3 -3 -2 -3 -2 -2 -4 -1 -1 -5 -3 -1
Q -1  1  0  0 -3  6  2 -2  1 -2 -2  1  0 -4 -1  0 -1 -2 -1 -3
E -1  0  0  2 -3  2  6 -2  0 -3 -2  1 -2 -3  0  0 -1 -3 -2 -3
G  0 -2  0 -1 -3 -2 -2  7 -2 -4 -3 -2 -2 -3 -2  0 -2 -2 -3 -3
H -2  0  1  0 -3  1  0 -2 10 -3 -2 -1  0 -2 -2 -1 -2 -3  2 -3
I -1 -3 -2 -4 -3 -2 -3 -4 -3  5  2 -3  2  0 -2 -2 -1 -2  0  3
L -1 -2 -3 -3 -2 -2 -2 -3 -2  2  5 -3  2  1 -3 -3 -1 -2  0  1
K -1  3  0  0 -3  1  1 -2 -1 -3 -3  5 -1 -3 -1 -1 -1 -2 -1 -2
M -1 -1 -2 -3 -2  0 -2 -2  0  2  2 -1  6  0 -2 -2 -1 -2  0  1
F -2 -2 -2 -4 -2 -4 -3 -3 -2  0  1 -3  0  8 -3 -2 -1  1  3  0
P -1 -2 -2 -1 -4 -1  0 -2 -2 -2 -3 -1 -2 -3  9 -1 -1 -3 -3 -3
S  1 -1  1  0 -1  0  0  0 -1 -2 -3 -1 -2 -2 -1  4  2 -4 -2 -1
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -1 -1  2  5 -3 -1  0
W -2 -2 -4 -4 -5 -2 -3 -2 -3 -2 -2 -2 -2  1 -3 -4 -3 15  3 -3
Y -2 -1 -2 -2 -3 -1 -2 -3  2  0  0 -1  0  3 -3 -2 -1  3  8 -1
V  0 -2 -3 -3 -1 -3 -3 -3 -3  3  1 -2  1  0 -3 -1  0 -3 -1  5
"""

_BLOSUM62_TEXT = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  4 -1 -2 -2  0 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -3 -2  0
R -1  5  0 -2 -3  1  0 -2  0 -3 -2  2 -1 -3 -2 -1 -1 -3 -2 -3
N -2  0  6  1 -3  0  0  0  1 -3 -3  0 -2 -3 -2  1  0 -4 -2 -3
D -2 -2  1  6 -3  0  2 -1 -1 -3 -4 -1 -3 -3 -1  0 -1 -4 -3 -3
C  0 -3 -3 -3  9 -3 -4 -3 -3 -1 -1 -3 -1 -2 -3 -1 -1 -2 -2 -1
Q -1  1  0  0 -3  5  2 -2  0 -3 -2  1  0 -3 -1  0 -1 -2 -1 -2
E -1  0  0  2 -4  2  5 -2  0 -3 -3  1 -2 -3 -1  0 -1 -3 -2 -2
G  0 -2  0 -1 -3 -2 -2  6 -2 -4 -4 -2 -3 -3 -2  0 -2 -2 -3 -3
H -2  0  1 -1 -3  0  0 -2  8 -3 -3 -1 -2 -1 -2 -1 -2 -2  2 -3
I -1 -3 -3 -3 -1 -3 -3 -4 -3  4  2 -3  1  0 -3 -2 -1 -3 -1  3
L -1 -2 -3 -4 -1 -2 -3 -4 -3  2  4 -2  2  0 -3 -2 -1 -2 -1  1
K -1  2  0 -1 -3  1  1 -2 -1 -3 -2  5 -1 -3 -1  0 -1 -3 -2 -2
M -1 -1 -2 -3 -1  0 -2 -3 -2  1  2 -1  5  0 -2 -1 -1 -1 -1  1
F -2 -3 -3 -3 -2 -3 -3 -3 -1  0  0 -3  0  6 -4 -2 -2  1  3 -1
P -1 -2 -2 -1 -3 -1 -1 -2 -2 -3 -3 -1 -2 -4  7 -1 -1 -4 -3 -2
S  1 -1  1  0 -1  0  0  0 -1 -2 -2  0 -1 -2 -1  4  1 -3 -2 -2
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -2 -1  1  5 -2 -2  0
W -3 -3 -4 -4 -2 -2 -3 -2 -2 -3 -2 -3 -1  1 -4 -3 -2 11  2 -3
Y -2 -2 -2 -3 -2 -1 -2 -3  2 -1 -1 -2 -1  3 -3 -2 -2  2  7 -1
V  0 -3 -3 -3 -1 -2 -2 -3 -3  3  1 -2  1 -1 -2 -2  0 -3 -1  4
"""

_PAM160_TEXT = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  2 -2  0  0 -2 -1  0  1 -2 -1 -2 -2 -1 -3  1  1  1 -5 -3  0
R -2  6 -1 -2 -3  1 -2 -3  1 -2 -3  3 -1 -4 -1 -1 -1  1 -4 -3
N  0 -1  3  2 -4  0  1  0  2 -2 -3  1 -2 -3 -1  1  0 -4 -2 -2
D  0 -2  2  4 -5  1  3  0  0 -3 -4  0 -3 -6 -2  0 -1 -6 -4 -3
C -2 -3 -4 -5  9 -5 -5 -3 -3 -2 -6 -5 -5 -5 -3  0 -2 -7  0 -2
Q -1  1  0  1 -5  5  2 -2  2 -2 -2  0 -1 -5  0 -1 -1 -5 -4 -2
E  0 -2  1  3 -5  2  4  0  0 -2 -3 -1 -2 -5 -1  0 -1 -7 -4 -2
G  1 -3  0  0 -3 -2  0  4 -3 -3 -4 -2 -3 -4 -1  1 -1 -7 -5 -2
H -2  1  2  0 -3  2  0 -3  6 -3 -2 -1 -3 -2 -1 -1 -2 -3  0 -2
I -1 -2 -2 -3 -2 -2 -2 -3 -3  5  2 -2  2  0 -2 -2  0 -5 -1  4
L -2 -3 -3 -4 -6 -2 -3 -4 -2  2  5 -3  3  1 -3 -3 -2 -2 -2  1
K -2  3  1  0 -5  0 -1 -2 -1 -2 -3  4  0 -5 -2 -1  0 -4 -4 -3
M -1 -1 -2 -3 -5 -1 -2 -3 -3  2  3  0  7  0 -2 -2 -1 -4 -3  1
F -3 -4 -3 -6 -5 -5 -5 -4 -2  0  1 -5  0  7 -4 -3 -3 -1  5 -2
P  1 -1 -1 -2 -3  0 -1 -1 -1 -2 -3 -2 -2 -4  5  1  0 -5 -5 -2
S  1 -1  1  0  0 -1  0  1 -1 -2 -3 -1 -2 -3  1  2  1 -2 -3 -1
T  1 -1  0 -1 -2 -1 -1 -1 -2  0 -2  0 -1 -3  0  1  3 -5 -3  0
W -5  1 -4 -6 -7 -5 -7 -7 -3 -5 -2 -4 -4 -1 -5 -2 -5 12 -1 -6
Y -3 -4 -2 -4  0 -4 -4 -5  0 -1 -2 -4 -3  5 -5 -3 -3 -1  8 -3
V  0 -3 -2 -3 -2 -2 -2 -2 -2  4  1 -3  1 -2 -2 -1  0 -6 -3  4
"""

BLOSUM45 = parse_substitution_matrix(_BLOSUM45_TEXT, "BLOSUM45")
BLOSUM62 = parse_substitution_matrix(_BLOSUM62_TEXT, "BLOSUM62")
PAM160 = parse_substitution_matrix(_PAM160_TEXT, "PAM160")

SUBSTITUTION_MATRICES: Dict[str, SubstitutionMatrix] = {
    "BLOSUM45": BLOSUM45,
    "BLOSUM62": BLOSUM62,
    "PAM160": PAM160,
}


def get_substitution_matrix(
    name: Union[str, SubstitutionMatrix]
) -> SubstitutionMatrix:
    """
    Look up a built-in substitution matrix by name (case-insensitive).

    A SubstitutionMatrix instance is returned unchanged.

    Raises:
        ConfigurationError: If no built-in matrix has that name
    """
    if isinstance(name, SubstitutionMatrix):
        return name
    matrix = SUBSTITUTION_MATRICES.get(str(name).upper())
    if matrix is None:
        raise ConfigurationError("matrix", name,
                                 f"one of {', '.join(available_matrices())}")
    return matrix


def available_matrices() -> Sequence[str]:
    return sorted(SUBSTITUTION_MATRICES)
