"""
Weighted random selection.

A draw picks index i with probability weight_i / sum(weights). Each call
builds a cumulative prefix array, makes one uniform draw over [0, total) and
binary-searches the prefix array for the owning slot.
"""

import bisect
import itertools
import math
from typing import Protocol, Sequence, TypeVar

from src.data_models import DiceRoller


class InvalidDistribution(Exception):
    """Raised when a weight set cannot be sampled from."""

    def __init__(self, message: str, weights: Sequence[float] = ()):
        self.weights = list(weights)
        self.message = message
        super().__init__(message)


class Weighted(Protocol):
    weight: float


W = TypeVar("W", bound=Weighted)


def validate_weights(weights: Sequence[float]) -> float:
    """
    Check that a weight set is a usable distribution.

    Returns:
        The total weight.

    Raises:
        InvalidDistribution: if the set is empty, holds a negative or
            non-finite weight, or sums to zero.
    """
    if not weights:
        raise InvalidDistribution("no candidates to select from", weights)
    for index, weight in enumerate(weights):
        if not math.isfinite(weight) or weight < 0:
            raise InvalidDistribution(
                f"invalid weight {weight!r} at index {index}", weights
            )
    total = math.fsum(weights)
    if total <= 0:
        raise InvalidDistribution("all weights are zero", weights)
    return total


def select_index(weights: Sequence[float], reason: str = "weighted selection") -> int:
    """
    Draw one index with probability proportional to its weight.

    Args:
        weights: Non-empty sequence of non-negative weights.
        reason: Why the draw is being made (for logging)

    Returns:
        The chosen index.
    """
    validate_weights(weights)
    cumulative = list(itertools.accumulate(weights))
    point = DiceRoller.random_float(0.0, cumulative[-1], reason)
    index = bisect.bisect_right(cumulative, point)
    # Float rounding can leave point == cumulative[-1]; step back onto the
    # last slot with a positive weight.
    if index >= len(weights):
        index = len(weights) - 1
    while weights[index] == 0:
        index -= 1
    return index


def select_weighted(items: Sequence[W], reason: str = "weighted selection") -> W:
    """Draw one item using each item's own ``weight``."""
    return items[select_index([item.weight for item in items], reason)]
