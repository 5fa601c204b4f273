"""
Gem value brackets.

A gem's value category is its mineral's base category plus the deltas from
its cut, size and clarity. Categories below WORTHLESS_BELOW give a few coins
at most; anything else indexes VALUE_CATEGORIES, clamped to the top bracket.
"""

from src.data_models import DiceRoller, GemAttribute, GemType

WORTHLESS_BELOW = 6
WORTHLESS_RANGE = (0.1, 5.0)
MAX_VALUE_CATEGORY = 17

# Half-open [low, high) ranges in GP, indexed by value category.
# Entries 0-4 are empty placeholders that keep the indices aligned.
VALUE_CATEGORIES: list[tuple[int, int]] = [
    (1, 1),
    (1, 1),
    (1, 1),
    (1, 1),
    (1, 1),
    (1, 25),
    (25, 75),
    (75, 250),
    (250, 750),
    (750, 2500),
    (2500, 10000),
    (10000, 20000),
    (20000, 40000),
    (40000, 80000),
    (80000, 200000),
    (200000, 400000),
    (400000, 800000),
    (800000, 1000000),
]


def value_category(
    mineral_type: GemType,
    cut: GemAttribute,
    size: GemAttribute,
    quality: GemAttribute,
) -> int:
    """Sum the mineral's category and the attribute deltas (unclamped)."""
    return (
        mineral_type.value_category
        + cut.value_category_delta
        + size.value_category_delta
        + quality.value_category_delta
    )


def compute_value(
    mineral_type: GemType,
    cut: GemAttribute,
    size: GemAttribute,
    quality: GemAttribute,
) -> float:
    """
    Sample a gem's worth in GP.

    Every call makes a fresh draw, so the same gem evaluated twice gives two
    different values from the same bracket.
    """
    category = value_category(mineral_type, cut, size, quality)
    if category < WORTHLESS_BELOW:
        low, high = WORTHLESS_RANGE
        return DiceRoller.random_float(low, high, "worthless gem value")

    category = min(category, MAX_VALUE_CATEGORY)
    low, high = VALUE_CATEGORIES[category]
    return float(DiceRoller.randrange(low, high, f"gem value category {category}"))
