"""
Pytest fixtures for the gem and wine generator test suite.

Provides seeded dice, small literal reference tables and a temporary
directory of CSV tables.
"""

import pytest
from pathlib import Path

from src.data_models import (
    AttributeRecord,
    DiceRoller,
    GemAttribute,
    GemType,
    LiquidContainer,
)


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a seeded DiceRoller for reproducible tests."""
    DiceRoller.clear_roll_log()
    DiceRoller.set_seed(42)
    yield DiceRoller()
    DiceRoller.clear_roll_log()


@pytest.fixture
def clean_dice():
    """Provide a clean DiceRoller without seed."""
    DiceRoller.clear_roll_log()
    yield DiceRoller()
    DiceRoller.clear_roll_log()


# =============================================================================
# TABLE FIXTURES
# =============================================================================


@pytest.fixture
def sample_notes():
    """Wine notes with one two-member exclusion group."""
    return [
        AttributeRecord("Cherry", 1.1, 10.0),
        AttributeRecord("Plum", 1.0, 10.0),
        AttributeRecord("Oak", 0.9, 5.0),
        AttributeRecord("Vinegar", 0.4, 5.0, "sourness"),
        AttributeRecord("Sour milk", 0.3, 5.0, "sourness"),
    ]


@pytest.fixture
def sample_feels():
    """Wine feels split across two exclusion groups plus a free one."""
    return [
        AttributeRecord("Dry", 1.0, 10.0, "sweetness"),
        AttributeRecord("Sweet", 1.05, 10.0, "sweetness"),
        AttributeRecord("Light-bodied", 1.0, 10.0, "body"),
        AttributeRecord("Full-bodied", 1.1, 10.0, "body"),
        AttributeRecord("Crisp", 1.05, 10.0),
    ]


@pytest.fixture
def sample_containers():
    return [
        LiquidContainer("Glass bottle", 1.2, 10.0, 12),
        LiquidContainer("Clay jug", 0.8, 5.0, 64),
    ]


@pytest.fixture
def sample_gem_types():
    return [
        GemType("Quartz", 1, 10, 4, 10.0),
        GemType("Ruby", 5000, 20000, 12, 1.0),
    ]


@pytest.fixture
def sample_gem_cuts():
    return [
        GemAttribute("un", -2, 5.0),
        GemAttribute("brilliant-", 2, 1.0),
    ]


@pytest.fixture
def sample_gem_sizes():
    return [
        GemAttribute("Small", -1, 5.0),
        GemAttribute("Large", 1, 2.0),
    ]


@pytest.fixture
def sample_gem_qualities():
    return [
        GemAttribute("Cloudy", -1, 5.0),
        GemAttribute("Flawless", 2, 1.0),
    ]


# =============================================================================
# CSV DATA DIRECTORY
# =============================================================================


SAMPLE_CSV_TABLES = {
    "gem_types.csv": (
        "name,value_min,value_max,value_category,weight\n"
        "Quartz,1,10,4,10\n"
        "Ruby,5000,20000,12,1\n"
    ),
    "gem_cuts.csv": (
        "name,value_category_delta,weight\n"
        "un,-2,5\n"
        "brilliant-,2,1\n"
    ),
    "gem_qualities.csv": (
        "name,value_category_delta,weight\n"
        "Cloudy,-1,5\n"
        "Flawless,2,1\n"
    ),
    "gem_sizes.csv": (
        "name,value_category_delta,weight\n"
        "Small,-1,5\n"
        "Large,1,2\n"
    ),
    "wine_notes.csv": (
        "name,value_mod,weight,ex_pool\n"
        "Cherry,1.1,10,\n"
        "Plum,1.0,10,\n"
        "Oak,0.9,5,\n"
        "Vinegar,0.4,5,sourness\n"
        "Sour milk,0.3,5,sourness\n"
    ),
    "wine_feels.csv": (
        "name,value_mod,weight,ex_pool\n"
        "Dry,1.0,10,sweetness\n"
        "Sweet,1.05,10,sweetness\n"
        "Crisp,1.05,10,\n"
        "Velvety,1.2,10,\n"
    ),
    "liquid_containers.csv": (
        "name,value_mod,weight,oz\n"
        "Glass bottle,1.2,10,12\n"
        "Clay jug,0.8,5,64\n"
    ),
}


@pytest.fixture
def csv_data_dir(tmp_path) -> Path:
    """A temporary data directory holding every default CSV table."""
    for file_name, content in SAMPLE_CSV_TABLES.items():
        (tmp_path / file_name).write_text(content, encoding="utf-8")
    return tmp_path
