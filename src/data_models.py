"""
Shared data structures for the gem and wine generator.

Reference-table rows are loaded once and never mutated, so every record type
here is a frozen dataclass. Generated entities (Gem, Wine) live with their
generators in src/generators.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
import logging
import random

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class WineColor(str, Enum):
    """Colours a generated wine can take."""
    WHITE = "white"
    RED = "red"


# =============================================================================
# DICE AND RANDOMIZATION
# =============================================================================


class DiceRoller:
    """
    Centralized randomization interface.
    All random draws must go through this class for reproducibility and logging.
    """

    _instance = None
    _seed: Optional[int] = None
    _roll_log: list = []

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_seed(cls, seed: int) -> None:
        """Set random seed for reproducibility."""
        cls._seed = seed
        random.seed(seed)

    @classmethod
    def roll(cls, dice: str, reason: str = "") -> "DiceResult":
        """
        Roll dice using standard notation (e.g., '1d3', '2d6+1', '3d6-2').

        Args:
            dice: Dice notation string
            reason: Why this roll is being made (for logging)

        Returns:
            DiceResult with individual rolls and total
        """
        modifier = 0
        if '+' in dice:
            dice_part, mod_part = dice.split('+')
            modifier = int(mod_part)
        elif '-' in dice:
            dice_part, mod_part = dice.split('-')
            modifier = -int(mod_part)
        else:
            dice_part = dice

        num_dice, die_size = dice_part.lower().split('d')
        num_dice = int(num_dice) if num_dice else 1
        die_size = int(die_size)

        rolls = [random.randint(1, die_size) for _ in range(num_dice)]
        total = sum(rolls) + modifier

        result = DiceResult(
            notation=dice,
            rolls=rolls,
            modifier=modifier,
            total=total,
            reason=reason
        )

        cls._roll_log.append(result)
        return result

    @classmethod
    def random_float(cls, low: float, high: float, reason: str = "") -> float:
        """
        Draw a float uniformly from the half-open range [low, high).

        The upper bound is never returned, unlike random.uniform.
        """
        value = low + (high - low) * random.random()
        logger.debug(f"random_float [{low}, {high}) -> {value} ({reason})")
        return value

    @classmethod
    def randrange(cls, start: int, stop: int, reason: str = "") -> int:
        """Draw a whole number uniformly from [start, stop)."""
        value = random.randrange(start, stop)
        logger.debug(f"randrange [{start}, {stop}) -> {value} ({reason})")
        return value

    @classmethod
    def get_roll_log(cls) -> list:
        """Get the complete roll log for the session."""
        return cls._roll_log.copy()

    @classmethod
    def clear_roll_log(cls) -> None:
        """Clear the roll log."""
        cls._roll_log = []


@dataclass
class DiceResult:
    """Result of a dice roll with full information."""
    notation: str
    rolls: list[int]
    modifier: int
    total: int
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        if self.modifier > 0:
            return f"{self.notation}: {self.rolls} + {self.modifier} = {self.total}"
        elif self.modifier < 0:
            return f"{self.notation}: {self.rolls} - {abs(self.modifier)} = {self.total}"
        return f"{self.notation}: {self.rolls} = {self.total}"


# =============================================================================
# REFERENCE TABLE RECORDS
# =============================================================================


@dataclass(frozen=True)
class AttributeRecord:
    """
    One candidate trait, such as a wine note or a wine feel.

    Records that share an exclusion_group are mutually exclusive: at most one
    of them may appear in a single generated entity.
    """
    name: str
    value_modifier: float
    weight: float
    exclusion_group: Optional[str] = None


@dataclass(frozen=True)
class LiquidContainer:
    """A vessel a liquid is sold in."""
    name: str
    value_modifier: float
    weight: float
    volume: int  # fluid ounces


@dataclass(frozen=True)
class GemAttribute:
    """A gem cut, size or clarity, shifting the gem's value category."""
    name: str
    value_category_delta: int
    weight: float


@dataclass(frozen=True)
class GemType:
    """A mineral a gem can be made of."""
    name: str
    value_min: int
    value_max: int
    value_category: int
    weight: float
