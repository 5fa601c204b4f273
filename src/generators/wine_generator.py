"""
Wine generation.

A wine gets one container, one to three tasting notes, one to three feels
and a colour. Notes and feels are chosen under their own exclusion pools,
built fresh for every wine.
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from src.content_loader import load_wine_tables
from src.data_models import AttributeRecord, DiceRoller, LiquidContainer, WineColor
from src.tables import build_pools, choose_items, select_weighted

logger = logging.getLogger(__name__)

# Notes and feels per wine are rolled on this die (1 to 3 each)
ATTRIBUTE_COUNT_DIE = "1d3"
WINE_COLORS = (WineColor.WHITE, WineColor.RED)
WINE_BASE_VALUE = 1


@dataclass(frozen=True)
class Wine:
    """A generated wine. Its total value is derived, never stored."""
    notes: tuple[AttributeRecord, ...]
    feels: tuple[AttributeRecord, ...]
    container: LiquidContainer
    base_value: int
    color: WineColor

    def total_value(self) -> float:
        """
        Product of every note and feel modifier, the container modifier,
        the container volume and the base value.
        """
        return (
            math.prod(note.value_modifier for note in self.notes)
            * math.prod(feel.value_modifier for feel in self.feels)
            * self.container.value_modifier
            * self.container.volume
            * self.base_value
        )

    def describe(self) -> str:
        notes = ", ".join(note.name.lower() for note in self.notes)
        feels = ", ".join(feel.name.lower() for feel in self.feels)
        return (
            f"A {self.color.value} wine in a {self.container.name.lower()} "
            f"({self.container.volume} oz) with notes of {notes}. "
            f"It feels {feels}. It is worth {self.total_value():,.2f} GP."
        )


class WineGenerator:
    """Assembles random wines from note, feel and container tables."""

    def __init__(
        self,
        notes: list[AttributeRecord],
        feels: list[AttributeRecord],
        containers: list[LiquidContainer],
    ):
        self.notes = list(notes)
        self.feels = list(feels)
        self.containers = list(containers)

    @classmethod
    def from_data_dir(cls, data_dir: Union[str, Path]) -> "WineGenerator":
        """Build a generator from the default CSV tables in data_dir."""
        tables = load_wine_tables(data_dir)
        return cls(notes=tables.notes, feels=tables.feels, containers=tables.containers)

    def generate(self) -> Wine:
        """Create one random wine."""
        container = select_weighted(self.containers, "wine container")

        notes_pools = build_pools(self.notes)
        feels_pools = build_pools(self.feels)
        note_count = DiceRoller.roll(ATTRIBUTE_COUNT_DIE, "wine note count").total
        feel_count = DiceRoller.roll(ATTRIBUTE_COUNT_DIE, "wine feel count").total
        notes = choose_items(self.notes, notes_pools, note_count)
        feels = choose_items(self.feels, feels_pools, feel_count)

        color_roll = DiceRoller.roll(f"1d{len(WINE_COLORS)}", "wine color").total
        color = WINE_COLORS[color_roll - 1]

        wine = Wine(
            notes=tuple(notes),
            feels=tuple(feels),
            container=container,
            base_value=WINE_BASE_VALUE,
            color=color,
        )
        logger.debug(f"Generated {color.value} wine worth {wine.total_value():.2f}")
        return wine
