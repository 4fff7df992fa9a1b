"""
Unit tests for dice rolling.

Tests DiceExpression, DiceRoller and DiceResult from campaign_assistant/data_models.py.
"""

import pytest

from campaign_assistant.data_models import DiceExpression, DiceResult, DiceRoller
from campaign_assistant.observability.run_log import RunLog


class TestDiceExpression:
    """Tests for dice notation parsing."""

    def test_parse_count_and_sides(self):
        expression = DiceExpression.parse("3d6")
        assert expression == DiceExpression(count=3, sides=6)

    def test_parse_modifiers(self):
        assert DiceExpression.parse("1d20+5").modifier == 5
        assert DiceExpression.parse("1d8-2").modifier == -2

    def test_parse_multiplier(self):
        expression = DiceExpression.parse("4d6x10")
        assert expression.multiplier == 10
        assert expression.min_total == 40
        assert expression.max_total == 240

    def test_parse_percentile_shorthand(self):
        expression = DiceExpression.parse("d%")
        assert expression.count == 1
        assert expression.sides == 100

    def test_parse_constant(self):
        expression = DiceExpression.parse("7")
        assert expression.count == 0
        assert expression.min_total == expression.max_total == 7

    def test_parse_rejects_malformed(self):
        assert DiceExpression.parse("roll some dice") is None
        assert DiceExpression.parse("0d6") is None
        assert DiceExpression.parse("2d6+") is None

    def test_permissive_finds_embedded_dice(self):
        expression = DiceExpression.parse_permissive("roll 2d8 + 1 for damage")
        assert expression == DiceExpression(count=2, sides=8, modifier=1)

    def test_str_round_trips_notation(self):
        assert str(DiceExpression.parse("2d6x5+3")) == "2d6x5+3"
        assert str(DiceExpression.parse("1d4-1")) == "1d4-1"


class TestDiceRoller:
    """Tests for the DiceRoller class."""

    def test_rollers_are_independent_instances(self):
        assert DiceRoller() is not DiceRoller()

    def test_roll_basic_d6(self, seeded_dice):
        result = seeded_dice.roll("1d6", "test roll")
        assert isinstance(result, DiceResult)
        assert 1 <= result.total <= 6
        assert len(result.rolls) == 1

    def test_roll_multiple_dice(self, seeded_dice):
        result = seeded_dice.roll("3d6", "attribute roll")
        assert len(result.rolls) == 3
        assert all(1 <= r <= 6 for r in result.rolls)
        assert result.total == sum(result.rolls)

    def test_roll_with_modifier(self, seeded_dice):
        result = seeded_dice.roll("1d20+5", "attack roll")
        assert result.modifier == 5
        assert result.total == result.rolls[0] + 5

    def test_roll_with_multiplier(self, seeded_dice):
        for _ in range(50):
            result = seeded_dice.roll("4d6x10")
            assert result.total == sum(result.rolls) * 10
            assert 40 <= result.total <= 240

    def test_roll_constant(self, seeded_dice):
        result = seeded_dice.roll("7")
        assert result.total == 7
        assert result.rolls == []

    def test_malformed_notation_uses_permissive_parser(self, seeded_dice):
        result = seeded_dice.roll("about 2d6 or so")
        assert result.malformed
        assert len(result.rolls) == 2
        assert 2 <= result.total <= 12

    def test_unparseable_notation_totals_one(self, seeded_dice):
        result = seeded_dice.roll("banana")
        assert result.malformed
        assert result.total == 1

    def test_seeded_reproducibility(self):
        first = DiceRoller(seed=12345)
        second = DiceRoller(seed=12345)
        assert [first.roll("1d20").total for _ in range(10)] == [second.roll("1d20").total for _ in range(10)]

    def test_set_seed_restarts_sequence(self):
        dice = DiceRoller(seed=7)
        before = [dice.roll_d6().total for _ in range(5)]
        dice.set_seed(7)
        assert [dice.roll_d6().total for _ in range(5)] == before

    def test_roll_log(self, seeded_dice):
        seeded_dice.roll("1d6", "first roll")
        seeded_dice.roll("1d20", "second roll")
        log = seeded_dice.get_roll_log()
        assert [r.reason for r in log] == ["first roll", "second roll"]

        seeded_dice.clear_roll_log()
        assert seeded_dice.get_roll_log() == []

    def test_roll_log_keeps_most_recent(self):
        dice = DiceRoller(seed=1, roll_log_limit=3)
        for index in range(5):
            dice.roll("1d6", f"roll {index}")
        assert [r.reason for r in dice.get_roll_log()] == ["roll 2", "roll 3", "roll 4"]

    def test_rolls_recorded_in_run_log(self):
        run_log = RunLog()
        dice = DiceRoller(seed=1, run_log=run_log)
        dice.roll("2d6", "reaction")
        rolls = run_log.get_rolls()
        assert len(rolls) == 1
        assert rolls[0].notation == "2d6"
        assert rolls[0].reason == "reaction"


class TestUniformDraws:
    """Tests for the uniform helpers used by weighted tables and catalogs."""

    def test_random_in_unit_interval(self, seeded_dice):
        assert all(0 <= seeded_dice.random() < 1 for _ in range(200))

    def test_uniform_scales(self, seeded_dice):
        assert all(0 <= seeded_dice.uniform(5) < 5 for _ in range(200))

    def test_chance_extremes(self, seeded_dice):
        assert not any(seeded_dice.chance(0) for _ in range(100))
        assert all(seeded_dice.chance(1) for _ in range(100))

    def test_choice_from_empty_raises(self, seeded_dice):
        with pytest.raises(IndexError):
            seeded_dice.choice([])

    def test_sample_without_replacement(self, seeded_dice):
        items = list(range(10))
        sample = seeded_dice.sample(items, 4)
        assert len(sample) == 4
        assert len(set(sample)) == 4
        assert set(sample) <= set(items)

    def test_sample_larger_than_population(self, seeded_dice):
        assert sorted(seeded_dice.sample(["a", "b"], 5)) == ["a", "b"]


class TestDiceResult:
    """Tests for DiceResult formatting."""

    def test_str_without_modifier(self):
        result = DiceResult(notation="2d6", rolls=[3, 5], modifier=0, total=8)
        assert str(result) == "2d6: [3, 5] = 8"

    def test_str_with_negative_modifier(self):
        result = DiceResult(notation="1d8-2", rolls=[6], modifier=-2, total=4)
        assert str(result) == "1d8-2: [6] - 2 = 4"

    def test_to_dict(self):
        result = DiceResult(notation="3d6x10", rolls=[1, 2, 3], modifier=0, total=60, multiplier=10)
        data = result.to_dict()
        assert data["total"] == 60
        assert data["multiplier"] == 10
        assert data["malformed"] is False
