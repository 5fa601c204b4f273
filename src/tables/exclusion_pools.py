"""
Exclusion pools for attribute selection.

An exclusion pool caps how many records sharing an ``exclusion_group`` may
be chosen for one generated entity. Pools are discovered from the table
itself, live for a single selection session and are then discarded.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from src.data_models import AttributeRecord

logger = logging.getLogger(__name__)

DEFAULT_POOL_CAPACITY = 1


@dataclass
class ExclusionPool:
    """A named quota shared by every record in the same exclusion group."""

    group_name: str
    capacity: int = DEFAULT_POOL_CAPACITY
    current_count: int = 0

    def is_full(self) -> bool:
        return self.current_count == self.capacity

    def increment(self) -> None:
        """Count one more chosen member, saturating at capacity."""
        if not self.is_full():
            self.current_count += 1


@dataclass
class ExclusionPoolSet:
    """
    Mutable pool state for one selection session.

    Passed explicitly to the item chooser so pool lifetime is scoped to a
    single generate() call.
    """

    pools: dict[str, ExclusionPool] = field(default_factory=dict)

    def get(self, group_name: Optional[str]) -> Optional[ExclusionPool]:
        if not group_name:
            return None
        return self.pools.get(group_name)

    def names(self) -> list[str]:
        return list(self.pools)

    def __iter__(self) -> Iterator[ExclusionPool]:
        return iter(self.pools.values())

    def __len__(self) -> int:
        return len(self.pools)


def build_pools(items: Iterable[AttributeRecord]) -> ExclusionPoolSet:
    """
    Create one empty pool per distinct exclusion group, in first-seen order.

    Records without a group (None or blank) are ignored.
    """
    pool_set = ExclusionPoolSet()
    for item in items:
        group = item.exclusion_group
        if group and group not in pool_set.pools:
            pool_set.pools[group] = ExclusionPool(group_name=group)
            logger.debug(f"Created exclusion pool: {group}")
    return pool_set


def lookup(item: AttributeRecord, pools: ExclusionPoolSet) -> Optional[ExclusionPool]:
    """Return the pool governing ``item``, or None if it is unconstrained."""
    return pools.get(item.exclusion_group)
