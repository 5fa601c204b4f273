"""Item generators: gems and wines."""

from src.generators.gem_generator import Gem, GemGenerator
from src.generators.wine_generator import (
    ATTRIBUTE_COUNT_DIE,
    WINE_BASE_VALUE,
    WINE_COLORS,
    Wine,
    WineGenerator,
)

__all__ = [
    "Gem",
    "GemGenerator",
    "Wine",
    "WineGenerator",
    "ATTRIBUTE_COUNT_DIE",
    "WINE_BASE_VALUE",
    "WINE_COLORS",
]
