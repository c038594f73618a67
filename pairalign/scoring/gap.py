"""
Gap penalty models.

A gap is a run of consecutive gap positions; its length is the number of
positions, so the smallest gap has length 1. Costs are positive numbers
that the aligner subtracts from the score.

Two models are supported:
- Affine: f(length) = open + extend * length
- Linear: f(length) = extend * length (open is the constant 0)
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Union

from pairalign.config import check_gap_cost
from pairalign.errors import ConfigurationError


class GapModel(Enum):
    LINEAR = "linear"
    AFFINE = "affine"

    @classmethod
    def parse(cls, value: Union[str, "GapModel"]) -> "GapModel":
        """Accept a GapModel or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError("gap_model", value, "'affine' or 'linear'") from None


class GapPenalty:
    """Common interface of the gap models."""

    model: GapModel

    def function(self, length: int) -> float:
        """Total cost of a gap of the given length (length >= 1)."""
        raise NotImplementedError

    def open(self) -> float:
        raise NotImplementedError

    def extend(self) -> float:
        raise NotImplementedError


def _check_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, numbers.Integral) or length < 1:
        raise ConfigurationError("length", length, "a positive integer")


@dataclass(frozen=True)
class AffineGap(GapPenalty):
    """
    Affine gap model.

    Args:
        open_cost: Cost charged once per gap
        extend_cost: Cost charged per gap position

    Example:
        >>> AffineGap(10, 1).function(3)
        13.0
    """
    open_cost: float
    extend_cost: float

    model = GapModel.AFFINE

    def __post_init__(self):
        object.__setattr__(self, "open_cost", check_gap_cost("open_cost", self.open_cost))
        object.__setattr__(self, "extend_cost",
                           check_gap_cost("extend_cost", self.extend_cost))

    def function(self, length: int) -> float:
        _check_length(length)
        return self.open_cost + self.extend_cost * int(length)

    def open(self) -> float:
        return self.open_cost

    def extend(self) -> float:
        return self.extend_cost


@dataclass(frozen=True)
class LinearGap(GapPenalty):
    """
    Linear gap model.

    Args:
        extend_cost: Cost charged per gap position
    """
    extend_cost: float

    model = GapModel.LINEAR

    def __post_init__(self):
        object.__setattr__(self, "extend_cost",
                           check_gap_cost("extend_cost", self.extend_cost))

    def function(self, length: int) -> float:
        _check_length(length)
        return self.extend_cost * int(length)

    def open(self) -> float:
        return 0.0

    def extend(self) -> float:
        return self.extend_cost


def make_gap_penalty(
    model: Union[str, GapModel],
    open_cost: float,
    extend_cost: float
) -> GapPenalty:
    """
    Build a gap penalty from its model name.

    Args:
        model: "affine" or "linear"
        open_cost: Opening cost (ignored by the linear model)
        extend_cost: Extension cost

    Returns:
        AffineGap or LinearGap
    """
    model = GapModel.parse(model)
    if model is GapModel.AFFINE:
        return AffineGap(open_cost, extend_cost)
    return LinearGap(extend_cost)
