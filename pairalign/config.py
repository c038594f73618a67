"""
Default parameters and aligner configuration.

Module-level constants are the library defaults; AlignerConfig bundles the
parameters of one aligner and validates them before any matrix is built.
"""

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pairalign.errors import ConfigurationError

# Scoring defaults (costs are positive and subtracted from the score)
DEFAULT_OPEN_COST = 10.0
DEFAULT_EXTEND_COST = 1.0
DEFAULT_GAP_MODEL = "affine"
DEFAULT_MATRIX = "BLOSUM62"

# Gap costs outside these bounds are rejected at construction time
MIN_GAP_COST = 0.0
MAX_GAP_COST = 1000.0

# Run defaults
DEFAULT_MODE = "global"
DEFAULT_STRATEGY = "rows"
FILL_STRATEGIES = ("rows", "antidiagonal")

# Formatter
GAP_CHAR = "_"
MATCH_CHAR = "|"
MISMATCH_CHAR = ":"
SPACE_CHAR = " "
LINE_WIDTH = 50

# Aligned strings (Alignment.aligned1 / aligned2)
ALIGNED_GAP_CHAR = "-"


def check_gap_cost(name: str, value: float) -> float:
    """
    Validate a gap cost against the configured bounds.

    Args:
        name: Parameter name used in the error message
        value: Cost to check

    Returns:
        The cost as a float

    Raises:
        ConfigurationError: If the cost is not a finite number in bounds
    """
    try:
        cost = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(name, value, "a number") from None
    if not math.isfinite(cost) or not MIN_GAP_COST <= cost <= MAX_GAP_COST:
        raise ConfigurationError(
            name, value, f"a finite number in [{MIN_GAP_COST}, {MAX_GAP_COST}]"
        )
    return cost


class AlignmentMode(Enum):
    """Global (whole sequences) or local (best-scoring segments) alignment."""

    GLOBAL = "global"
    LOCAL = "local"

    @classmethod
    def parse(cls, value: Union[str, "AlignmentMode"]) -> "AlignmentMode":
        """Accept an AlignmentMode or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError("mode", value, "'global' or 'local'") from None


@dataclass
class AlignerConfig:
    """
    Parameters of a PairwiseAligner.

    Attributes:
        open_cost: Gap opening cost (ignored by the linear model)
        extend_cost: Gap extension cost, charged per gap position
        gap_model: "affine" or "linear"
        matrix: Name of a built-in substitution matrix
        mode: "global" or "local"
        strategy: Matrix fill order, "rows" or "antidiagonal"
        follow_gap_runs: Keep traced gap runs consistent with their pricing
        max_alignments: Stop enumerating tied alignments after this many
    """
    open_cost: float = DEFAULT_OPEN_COST
    extend_cost: float = DEFAULT_EXTEND_COST
    gap_model: str = DEFAULT_GAP_MODEL
    matrix: str = DEFAULT_MATRIX
    mode: str = DEFAULT_MODE
    strategy: str = DEFAULT_STRATEGY
    follow_gap_runs: bool = True
    max_alignments: Optional[int] = None

    def validate(self) -> "AlignerConfig":
        """Check every field. Returns self so it can be chained."""
        # Imported here: scoring imports this module for defaults
        from pairalign.scoring.gap import GapModel
        from pairalign.scoring.matrices import get_substitution_matrix

        self.open_cost = check_gap_cost("open_cost", self.open_cost)
        self.extend_cost = check_gap_cost("extend_cost", self.extend_cost)
        GapModel.parse(self.gap_model)
        get_substitution_matrix(self.matrix)
        AlignmentMode.parse(self.mode)
        if self.strategy not in FILL_STRATEGIES:
            raise ConfigurationError("strategy", self.strategy,
                                     " or ".join(FILL_STRATEGIES))
        if self.max_alignments is not None and (
            isinstance(self.max_alignments, bool)
            or not isinstance(self.max_alignments, int)
            or self.max_alignments < 1
        ):
            raise ConfigurationError("max_alignments", self.max_alignments,
                                     "a positive integer or None")
        return self

    def build_schema(self):
        """Create the ScoringSchema described by this configuration."""
        from pairalign.scoring.gap import make_gap_penalty
        from pairalign.scoring.matrices import get_substitution_matrix
        from pairalign.scoring.schema import ScoringSchema

        gap = make_gap_penalty(self.gap_model, self.open_cost, self.extend_cost)
        return ScoringSchema(get_substitution_matrix(self.matrix), gap)

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "AlignerConfig":
        """
        Build a validated configuration from a plain mapping.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = set(cls.__dataclass_fields__)
        for key in params:
            if key not in known:
                raise ConfigurationError(key, params[key],
                                         f"one of {sorted(known)}")
        return cls(**params).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
