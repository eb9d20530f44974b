"""
Pytest fixtures for the Treasure Hunter test suite.

Provides reusable fixtures for dice, hunters, the shop and towns.
"""

import pytest

from treasure_hunter.data_models import DiceRoller
from treasure_hunter.hunter import Hunter
from treasure_hunter.shop import Shop


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
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def shop():
    """A shop with the default price list."""
    return Shop()


@pytest.fixture
def hunter():
    """A hunter with some gold and an empty kit."""
    return Hunter(name="Aldric", gold=50)


@pytest.fixture
def outfitted_hunter():
    """A hunter carrying one of every crossing item plus a shovel."""
    return Hunter(
        name="Aldric",
        gold=50,
        kit=["rope", "boat", "horse", "water", "machete", "boots", "shovel"],
    )
