"""
Gem generation.

A gem is one weighted draw from each of four tables: mineral type, cut, size
and clarity. Its worth is not stored; Gem.value() samples the value bracket
afresh on every call.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from src.content_loader import load_gem_tables
from src.data_models import DiceRoller, GemAttribute, GemType
from src.tables import compute_value, select_weighted, value_category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gem:
    """
    A generated gem.

    base_value is drawn from the mineral's [value_min, value_max) range when
    the gem is made. Nothing reads it; value() comes from the value brackets.
    """
    mineral_type: GemType
    base_value: float
    cut: GemAttribute
    size: GemAttribute
    quality: GemAttribute

    def value_category(self) -> int:
        return value_category(self.mineral_type, self.cut, self.size, self.quality)

    def value(self) -> float:
        """Sample this gem's worth in GP. Not cached."""
        return compute_value(self.mineral_type, self.cut, self.size, self.quality)

    def describe(self) -> str:
        """One-line description, with a freshly sampled value."""
        return (
            f"This is a {self.cut.name}cut {self.mineral_type.name.lower()}. "
            f"It is {self.size.name.lower()} sized and of "
            f"{self.quality.name.lower()} clarity. "
            f"It is worth {self.value():,.2f} GP."
        )


class GemGenerator:
    """
    Assembles random gems from its reference tables.

    The tables are fixed at construction and owned by the generator.
    """

    def __init__(
        self,
        gem_types: list[GemType],
        gem_cuts: list[GemAttribute],
        gem_qualities: list[GemAttribute],
        gem_sizes: list[GemAttribute],
    ):
        self.gem_types = list(gem_types)
        self.gem_cuts = list(gem_cuts)
        self.gem_qualities = list(gem_qualities)
        self.gem_sizes = list(gem_sizes)

    @classmethod
    def from_data_dir(cls, data_dir: Union[str, Path]) -> "GemGenerator":
        """Build a generator from the default CSV tables in data_dir."""
        tables = load_gem_tables(data_dir)
        return cls(
            gem_types=tables.gem_types,
            gem_cuts=tables.gem_cuts,
            gem_qualities=tables.gem_qualities,
            gem_sizes=tables.gem_sizes,
        )

    def generate(self) -> Gem:
        """Create one random gem."""
        gem_type = select_weighted(self.gem_types, "gem type")
        if gem_type.value_max > gem_type.value_min:
            base_value = float(
                DiceRoller.randrange(gem_type.value_min, gem_type.value_max, "gem base value")
            )
        else:
            base_value = float(gem_type.value_min)

        gem = Gem(
            mineral_type=gem_type,
            base_value=base_value,
            cut=select_weighted(self.gem_cuts, "gem cut"),
            size=select_weighted(self.gem_sizes, "gem size"),
            quality=select_weighted(self.gem_qualities, "gem quality"),
        )
        logger.debug(
            f"Generated gem: {gem.mineral_type.name} / {gem.cut.name} / "
            f"{gem.size.name} / {gem.quality.name} (category {gem.value_category()})"
        )
        return gem
