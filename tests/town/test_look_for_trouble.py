"""
Tests for looking for trouble.

Tests cover:
- No-trouble thresholds per town difficulty
- Brawl stake range
- Winning by out-fighting, by sword and by a full kit
- Losing and paying up
"""

import pytest

from treasure_hunter.hunter import Hunter
from treasure_hunter.town import NO_TROUBLE_CHANCE, TownDifficulty
from tests.helpers import make_hunter_double, make_town


TROUBLE_OPENING = "You want trouble, stranger!  You got it!\nOof! Umph! Ow!\n"
MOCK_FULL_KIT = ["water", "rope", "machete", "horse", "boat", "boots", "shovel", "lantern"]


class TestThresholds:
    """The first draw decides whether there is any trouble at all."""

    def test_threshold_values(self):
        assert NO_TROUBLE_CHANCE[TownDifficulty.TOUGH] == 0.60
        assert NO_TROUBLE_CHANCE[TownDifficulty.EASY] == 0.10
        assert NO_TROUBLE_CHANCE[TownDifficulty.NORMAL] == 0.30

    @pytest.mark.parametrize(
        "tough,easy,threshold",
        [
            (True, False, 0.60),
            (False, True, 0.10),
            (False, False, 0.30),
            (True, True, 0.60),
        ],
    )
    def test_draw_at_threshold_finds_no_trouble(self, tough, easy, threshold):
        town, rng = make_town(tough=tough, easy=easy)
        hunter = Hunter(name="Mira", gold=10)
        town.hunter_arrives(hunter)
        rng.queue(threshold)

        result = town.look_for_trouble()

        assert result.message == "You couldn't find any trouble"
        assert result.details["brawl"] is False
        assert result.gold_change == 0
        assert hunter.gold == 10
        assert rng.remaining() == 0

    def test_draw_above_threshold_starts_brawl(self):
        town, rng = make_town()
        town.hunter_arrives(Hunter(name="Mira", gold=10))
        rng.queue(0.31, 4, 0.9)

        result = town.look_for_trouble()

        assert result.details["brawl"] is True
        assert result.message.startswith(TROUBLE_OPENING)
        assert rng.calls[-3:] == ["random()", "randint(1, 10)", "random()"]


class TestBrawlOutcome:
    """Resolving a brawl once trouble is found."""

    def test_outfought_win(self):
        town, rng = make_town()
        hunter = Hunter(name="Mira", gold=10)
        town.hunter_arrives(hunter)
        rng.queue(0.5, 7, 0.31)

        result = town.look_for_trouble()

        assert result.message == (
            TROUBLE_OPENING
            + "Okay, stranger! You proved yer mettle. Here, take my gold."
            + "\nYou won the brawl and receive 7 gold."
        )
        assert result.gold_change == 7
        assert hunter.gold == 17

    def test_loss_pays_stake(self):
        town, rng = make_town()
        hunter = Hunter(name="Mira", gold=10)
        town.hunter_arrives(hunter)
        rng.queue(0.5, 3, 0.30)

        result = town.look_for_trouble()

        assert result.message == (
            TROUBLE_OPENING
            + "That'll teach you to go lookin' fer trouble in MY town! Now pay up!"
            + "\nYou lost the brawl and pay 3 gold."
        )
        assert result.gold_change == -3
        assert hunter.gold == 7

    def test_sword_always_wins(self):
        town, rng = make_town(tough=True)
        hunter = Hunter(name="Mira", gold=0, kit=["sword"])
        town.hunter_arrives(hunter)
        rng.queue(0.99, 10, 0.0)

        result = town.look_for_trouble()

        assert "seeing your sword" in result.message
        assert result.message.index("seeing your sword") < result.message.index("proved yer mettle")
        assert result.gold_change == 10
        assert hunter.gold == 10

    def test_full_kit_always_wins(self):
        town, rng = make_town(tough=True)
        hunter = make_hunter_double(kit=MOCK_FULL_KIT)
        town.hunter_arrives(hunter)
        rng.queue(0.99, 6, 0.0)

        result = town.look_for_trouble()

        assert "You won the brawl and receive 6 gold." in result.message
        assert "seeing your sword" not in result.message
        hunter.change_gold.assert_called_once_with(6)

    def test_seven_items_is_not_a_full_kit(self):
        town, rng = make_town(tough=True)
        hunter = make_hunter_double(kit=MOCK_FULL_KIT[:7])
        town.hunter_arrives(hunter)
        rng.queue(0.99, 6, 0.0)

        result = town.look_for_trouble()

        assert result.gold_change == -6
        hunter.change_gold.assert_called_once_with(-6)

    @pytest.mark.parametrize("stake", [1, 10])
    def test_stake_bounds(self, stake):
        town, rng = make_town()
        hunter = Hunter(name="Mira", gold=20)
        town.hunter_arrives(hunter)
        rng.queue(0.9, stake, 0.9)

        result = town.look_for_trouble()

        assert result.details["stake"] == stake
        assert hunter.gold == 20 + stake

    def test_loss_reports_only_the_gold_the_hunter_had(self):
        town, rng = make_town()
        hunter = Hunter(name="Mira", gold=3)
        town.hunter_arrives(hunter)
        rng.queue(0.9, 7, 0.1)

        result = town.look_for_trouble()

        assert "You lost the brawl and pay 7 gold." in result.message
        assert result.gold_change == -3
        assert result.details["stake"] == 7
        assert result.details["won"] is False
        assert hunter.gold == 0


class TestStakeRangeWithRealDice:
    """Stakes drawn by the real dice stay within 1-10."""

    def test_stakes_in_range(self, seeded_dice):
        from unittest.mock import MagicMock
        from treasure_hunter.town import Town

        stakes = set()
        for _ in range(300):
            town = Town(MagicMock(), 0.4)
            town.hunter_arrives(Hunter(name="Mira", gold=100))
            result = town.look_for_trouble()
            if result.details["brawl"]:
                stakes.add(result.details["stake"])
        assert stakes
        assert min(stakes) >= 1
        assert max(stakes) <= 10
