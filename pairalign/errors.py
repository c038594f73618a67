"""Custom exceptions for the pairalign API.

Every error raised on purpose by the library derives from
:class:`PairAlignError`, so callers can catch the whole family at once.
Recoverable errors (bad input, bad configuration, out-of-range access) also
subclass the matching builtin so ``except ValueError`` keeps working.
:class:`InvariantError` marks a bug in the solver or backtracker and should
never be caught and retried.
"""

from __future__ import annotations
from typing import Optional, Tuple


class PairAlignError(Exception):
    """Root of the pairalign error family.

    The rendered message puts the failure first, then the offending input
    and, when one is known, how to correct it.

    Args:
        message: The alignment step or input that failed
        suggestion: How to correct the sequence or parameter
        context: The offending value, position or matrix shape

    Examples:
        >>> raise PairAlignError(
        ...     "Gap cost out of range",
        ...     suggestion="Use an open cost between 0 and 1000",
        ...     context="open_cost=-5"
        ... )
    """

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[str] = None,
    ):
        self.message = message
        self.suggestion = suggestion
        self.context = context
        super().__init__(self.formatted())

    def formatted(self) -> str:
        """Render the ``[ERROR]`` line plus optional context and suggestion lines."""
        msg = f"[ERROR] {self.message}"

        if self.context:
            msg += f"\n  Context: {self.context}"

        if self.suggestion:
            msg += f"\n  Suggestion: {self.suggestion}"

        return msg

    def __str__(self) -> str:
        return self.formatted()


class SequenceError(PairAlignError, ValueError):
    """Invalid sequence text.

    Args:
        kind: One of ``"empty_string"``, ``"invalid_code"`` or ``"non_ascii"``
        position: Offending position in the input, if any
        char: Offending character, if any
    """

    EMPTY_STRING = "empty_string"
    INVALID_CODE = "invalid_code"
    NON_ASCII = "non_ascii"

    _MESSAGES = {
        EMPTY_STRING: "The string must contain at least one IUPAC code",
        INVALID_CODE: "The string contains a non valid IUPAC code",
        NON_ASCII: "All the IUPAC codes must be ASCII characters",
    }

    def __init__(
        self,
        kind: str,
        position: Optional[int] = None,
        char: Optional[str] = None,
    ):
        context = None
        if position is not None:
            context = f"Character {char!r} at position {position}"
        super().__init__(
            self._MESSAGES[kind],
            suggestion="Use the one-letter codes of the 20 standard amino acids",
            context=context,
        )
        self.kind = kind
        self.position = position
        self.char = char


class ConfigurationError(PairAlignError, ValueError):
    """Invalid scoring or aligner parameter.

    Args:
        param_name: Name of the parameter
        value: Actual value provided
        expected: Expected value or range
    """

    def __init__(self, param_name: str, value, expected: str):
        super().__init__(
            f"Invalid value for {param_name}: {value!r}",
            suggestion=f"Expected: {expected}",
        )
        self.param_name = param_name
        self.value = value
        self.expected = expected


class OutOfDimensionError(PairAlignError, IndexError):
    """Checked matrix access outside the matrix bounds.

    Args:
        index: The (row, col) that was requested
        shape: The (rows, cols) of the matrix
    """

    def __init__(self, index: Tuple[int, int], shape: Tuple[int, int]):
        super().__init__(
            f"The index {tuple(index)} is out of the matrix bounds",
            context=f"The matrix dimension is {tuple(shape)}",
        )
        self.index = tuple(index)
        self.shape = tuple(shape)


class InvariantError(PairAlignError, RuntimeError):
    """Internal invariant violated by the solver or the backtracker.

    Not a data problem: the run is aborted instead of returning a wrong answer.
    """

    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__(message, context=context)


class AlignmentCancelled(PairAlignError):
    """Raised when the cancellation callback of a run returns true."""

    def __init__(self, stage: str):
        super().__init__(f"Alignment cancelled during {stage}")
        self.stage = stage
