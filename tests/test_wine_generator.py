"""
Tests for wine generation and wine value.
"""

import pytest

from src.data_models import (
    AttributeRecord,
    DiceResult,
    DiceRoller,
    LiquidContainer,
    WineColor,
)
from src.generators.wine_generator import WINE_BASE_VALUE, Wine, WineGenerator


@pytest.fixture
def wine_generator(sample_notes, sample_feels, sample_containers):
    return WineGenerator(notes=sample_notes, feels=sample_feels, containers=sample_containers)


class TestWineTotalValue:
    """Wine value is a plain product of its parts."""

    def test_literal_product(self):
        wine = Wine(
            notes=(
                AttributeRecord("Cherry", 1.1, 1.0),
                AttributeRecord("Oak", 0.9, 1.0),
            ),
            feels=(AttributeRecord("Dry", 1.0, 1.0),),
            container=LiquidContainer("Glass bottle", 1.2, 1.0, 12),
            base_value=1,
            color=WineColor.RED,
        )
        assert wine.total_value() == pytest.approx(14.256)

    def test_scales_with_base_value(self):
        container = LiquidContainer("Jug", 1.0, 1.0, 10)
        feel = (AttributeRecord("Dry", 1.0, 1.0),)
        note = (AttributeRecord("Plum", 2.0, 1.0),)
        cheap = Wine(note, feel, container, 1, WineColor.WHITE)
        dear = Wine(note, feel, container, 3, WineColor.WHITE)
        assert cheap.total_value() == pytest.approx(20.0)
        assert dear.total_value() == pytest.approx(60.0)

    def test_describe_mentions_parts(self):
        wine = Wine(
            notes=(AttributeRecord("Cherry", 1.0, 1.0),),
            feels=(AttributeRecord("Crisp", 1.0, 1.0),),
            container=LiquidContainer("Glass bottle", 1.0, 1.0, 25),
            base_value=1,
            color=WineColor.WHITE,
        )
        text = wine.describe()
        assert "white wine" in text
        assert "glass bottle (25 oz)" in text
        assert "cherry" in text
        assert "crisp" in text
        assert "25.00 GP" in text


class TestWineGenerator:
    """Tests for assembling wines."""

    def test_counts_between_one_and_three(self, seeded_dice, wine_generator):
        note_counts = set()
        feel_counts = set()
        for _ in range(300):
            wine = wine_generator.generate()
            note_counts.add(len(wine.notes))
            feel_counts.add(len(wine.feels))
        assert note_counts == {1, 2, 3}
        assert feel_counts == {1, 2, 3}

    def test_both_colours_occur(self, seeded_dice, wine_generator):
        colours = {wine_generator.generate().color for _ in range(100)}
        assert colours == {WineColor.WHITE, WineColor.RED}

    def test_base_value_is_one(self, seeded_dice, wine_generator):
        assert wine_generator.generate().base_value == WINE_BASE_VALUE == 1

    def test_exclusion_groups_respected(self, seeded_dice, wine_generator):
        for _ in range(300):
            wine = wine_generator.generate()
            for attributes in (wine.notes, wine.feels):
                groups = [a.exclusion_group for a in attributes if a.exclusion_group]
                assert len(groups) == len(set(groups))
                assert len(set(attributes)) == len(attributes)

    def test_pools_rebuilt_for_every_wine(self, monkeypatch):
        """A group used by one wine is still available to the next."""
        monkeypatch.setattr(
            DiceRoller,
            "roll",
            classmethod(lambda cls, dice, reason="": DiceResult(dice, [1], 0, 1, reason)),
        )
        notes = [AttributeRecord("Vinegar", 0.4, 1.0, "sourness")]
        feels = [AttributeRecord("Thin", 0.8, 1.0, "body")]
        generator = WineGenerator(notes, feels, [LiquidContainer("Jug", 1.0, 1.0, 8)])

        wines = [generator.generate() for _ in range(3)]
        assert all(wine.notes == (notes[0],) for wine in wines)
        assert all(wine.feels == (feels[0],) for wine in wines)
        assert all(wine.color == WineColor.WHITE for wine in wines)

    def test_parts_come_from_tables(self, seeded_dice, wine_generator):
        wine = wine_generator.generate()
        assert wine.container in wine_generator.containers
        assert all(note in wine_generator.notes for note in wine.notes)
        assert all(feel in wine_generator.feels for feel in wine.feels)

    def test_from_data_dir(self, seeded_dice, csv_data_dir):
        generator = WineGenerator.from_data_dir(csv_data_dir)
        assert len(generator.notes) == 5
        assert len(generator.containers) == 2
        assert generator.generate().total_value() > 0
