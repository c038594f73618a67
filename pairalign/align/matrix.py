"""
Dense matrices for dynamic programming.

Matrix is a fixed-size, row-major numpy grid with bounds-checked ``get`` and
``set``. TracebackMatrix stores one DP cell per entry as two aligned
matrices: the direction mask and the score.
"""

import math
import numpy as np
from typing import Iterable, Optional, Sequence, Tuple

from pairalign.align.direction import Cell, Direction, EMPTY, split
from pairalign.errors import InvariantError, OutOfDimensionError


class Matrix:
    """
    Matrix (a_ij), 0 <= i < rows, 0 <= j < cols.

    Args:
        rows: Number of rows
        cols: Number of columns
        fill: Initial value of every entry
        dtype: numpy dtype of the entries

    Example:
        >>> m = Matrix(2, 3, fill=-60, dtype=np.int64)
        >>> m.set(1, 2, 42)
        >>> m.get(1, 2)
        42
    """

    def __init__(self, rows: int, cols: int, fill=0, dtype=np.float64):
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimension must be non-negative, got {rows}x{cols}")
        self._data = np.full((rows, cols), fill, dtype=dtype)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def dim(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def data(self) -> np.ndarray:
        """Underlying array. Writes through it skip the bounds check."""
        return self._data

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfDimensionError((row, col), self.dim)

    def get(self, row: int, col: int):
        """Entry (row, col). Raises OutOfDimensionError outside the bounds."""
        self._check(row, col)
        return self._data[row, col].item()

    def set(self, row: int, col: int, value) -> None:
        """Overwrite entry (row, col). Raises OutOfDimensionError outside the bounds."""
        self._check(row, col)
        self._data[row, col] = value

    def __getitem__(self, index: Tuple[int, int]):
        return self._data[index]

    def __setitem__(self, index: Tuple[int, int], value) -> None:
        self._data[index] = value

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, dtype={self._data.dtype})"


class TracebackMatrix:
    """
    DP matrix of Cells, dimension (len(left) + 1) x (len(top) + 1).

    Every entry starts EMPTY. After a solver has run, every entry is set.

    Args:
        rows: Number of rows
        cols: Number of columns
    """

    def __init__(self, rows: int, cols: int):
        self.directions = Matrix(rows, cols, fill=0, dtype=np.uint8)
        self.scores = Matrix(rows, cols, fill=math.nan, dtype=np.float64)

    @classmethod
    def from_cells(
        cls,
        grid: Sequence[Sequence[Optional[Tuple[Direction, float]]]]
    ) -> "TracebackMatrix":
        """
        Build a matrix from nested rows of (directions, score) pairs.

        ``None`` leaves the entry EMPTY.

        Example:
            >>> D, V = Direction.DIAGONAL, Direction.VERTICAL
            >>> m = TracebackMatrix.from_cells([[(D, 0)], [(V, -11)]])
            >>> m.cell(1, 0).score
            -11.0
        """
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        matrix = cls(rows, cols)
        for i, row in enumerate(grid):
            if len(row) != cols:
                raise ValueError("All rows must have the same length")
            for j, entry in enumerate(row):
                if entry is not None:
                    directions, score = entry
                    matrix.put(i, j, Cell(Direction(directions), float(score)))
        return matrix

    @property
    def rows(self) -> int:
        return self.scores.rows

    @property
    def cols(self) -> int:
        return self.scores.cols

    @property
    def dim(self) -> Tuple[int, int]:
        return self.scores.dim

    def get(self, row: int, col: int) -> Cell:
        """Cell (row, col), possibly EMPTY. Raises OutOfDimensionError outside the bounds."""
        directions = self.directions.get(row, col)
        if not directions:
            return EMPTY
        return Cell(Direction(directions), self.scores[row, col].item())

    def cell(self, row: int, col: int) -> Cell:
        """
        Cell (row, col) of a matrix being filled or already filled.

        Raises:
            InvariantError: If the entry is outside the matrix or still EMPTY
        """
        try:
            cell = self.get(row, col)
        except OutOfDimensionError as e:
            raise InvariantError(
                f"Cell ({row}, {col}) is outside the matrix", context=str(e.context)
            ) from e
        if cell.is_empty:
            raise InvariantError(f"Cell ({row}, {col}) was read before being filled")
        return cell

    def put(self, row: int, col: int, cell: Cell) -> None:
        """Store a cell. Raises OutOfDimensionError outside the bounds."""
        self.directions.set(row, col, int(cell.directions))
        self.scores.set(row, col, cell.score)

    def is_filled(self) -> bool:
        return bool(np.all(self.directions.data != 0))

    def cells(self) -> Iterable[Tuple[Tuple[int, int], Cell]]:
        """All (position, cell) pairs in row-major order."""
        for i in range(self.rows):
            for j in range(self.cols):
                yield (i, j), self.get(i, j)

    def to_string(self) -> str:
        """Debug dump: one line per row, cells as ``score/DVH``."""
        letters = {Direction.DIAGONAL: "D", Direction.VERTICAL: "V",
                   Direction.HORIZONTAL: "H"}
        lines = []
        for i in range(self.rows):
            entries = []
            for j in range(self.cols):
                cell = self.get(i, j)
                if cell.is_empty:
                    entries.append("  .")
                else:
                    tags = "".join(letters[d] for d in split(cell.directions))
                    entries.append(f"{cell.score:g}/{tags}")
            lines.append(" ".join(entries))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"TracebackMatrix({self.rows}x{self.cols})"
