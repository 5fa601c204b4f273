"""
Duplicate-free attribute selection under exclusion-pool quotas.

Each draw is weighted over the records that are still eligible: not yet
chosen and not blocked by a full exclusion pool. This gives the same
distribution as drawing from the full table and rejecting ineligible
results, but stops with InfeasibleSelection instead of looping forever
when the requested count cannot be reached.
"""

import logging
from typing import Sequence

from src.data_models import AttributeRecord
from src.tables.exclusion_pools import ExclusionPoolSet, lookup
from src.tables.weighted_selector import select_index, validate_weights

logger = logging.getLogger(__name__)


class InfeasibleSelection(Exception):
    """Raised when no eligible record is left before the count is reached."""

    def __init__(self, requested: int, chosen: int, available: int):
        self.requested = requested
        self.chosen = chosen
        self.available = available
        super().__init__(
            f"Cannot choose {requested} items: only {chosen} of {available} "
            f"candidates satisfy the exclusion constraints"
        )


def _is_eligible(
    item: AttributeRecord,
    chosen: list[AttributeRecord],
    pools: ExclusionPoolSet,
) -> bool:
    if item.weight <= 0 or item in chosen:
        return False
    pool = lookup(item, pools)
    return pool is None or not pool.is_full()


def choose_items(
    items: Sequence[AttributeRecord],
    pools: ExclusionPoolSet,
    count: int,
) -> list[AttributeRecord]:
    """
    Choose ``count`` distinct records by weight.

    Args:
        items: Candidate records (the full table).
        pools: Pool state for this session; incremented as members are chosen.
        count: Number of records wanted.

    Returns:
        Exactly ``count`` records, no two equal.

    Raises:
        ValueError: if count is negative.
        InvalidDistribution: if the table's weights are malformed.
        InfeasibleSelection: if the constraints leave too few candidates.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []

    validate_weights([item.weight for item in items])

    chosen: list[AttributeRecord] = []
    while len(chosen) < count:
        eligible = [item for item in items if _is_eligible(item, chosen, pools)]
        if not eligible:
            raise InfeasibleSelection(count, len(chosen), len(items))

        choice = eligible[select_index([item.weight for item in eligible], "item choice")]
        chosen.append(choice)
        pool = lookup(choice, pools)
        if pool is not None:
            pool.increment()

    logger.debug(f"Chose {count} items: {[item.name for item in chosen]}")
    return chosen
