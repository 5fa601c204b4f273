"""
Selection engine for the gem and wine generator.

This module provides:
- Weighted random selection over table rows
- Exclusion pools limiting mutually exclusive attributes
- Duplicate-free multi-item choice under those pools
- Gem value brackets and value sampling
"""

from src.tables.weighted_selector import (
    InvalidDistribution,
    select_index,
    select_weighted,
    validate_weights,
)
from src.tables.exclusion_pools import (
    DEFAULT_POOL_CAPACITY,
    ExclusionPool,
    ExclusionPoolSet,
    build_pools,
    lookup,
)
from src.tables.item_chooser import InfeasibleSelection, choose_items
from src.tables.gem_value import (
    MAX_VALUE_CATEGORY,
    VALUE_CATEGORIES,
    WORTHLESS_BELOW,
    WORTHLESS_RANGE,
    compute_value,
    value_category,
)

__all__ = [
    # Weighted selection
    "InvalidDistribution",
    "select_index",
    "select_weighted",
    "validate_weights",
    # Exclusion pools
    "DEFAULT_POOL_CAPACITY",
    "ExclusionPool",
    "ExclusionPoolSet",
    "build_pools",
    "lookup",
    # Item choice
    "InfeasibleSelection",
    "choose_items",
    # Gem value
    "MAX_VALUE_CATEGORY",
    "VALUE_CATEGORIES",
    "WORTHLESS_BELOW",
    "WORTHLESS_RANGE",
    "compute_value",
    "value_category",
]
