"""
Tests for TableResolver: every resolution method, fallbacks, nesting and
run log recording.
"""

from collections import Counter

import pytest

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.observability.run_log import RunLog
from campaign_assistant.tables.table_registry import TableNotFoundError, create_default_registry
from campaign_assistant.tables.table_resolver import TableResolver
from campaign_assistant.tables.table_types import (
    MISSED_ROLL_TEXT,
    NO_VALID_ENTRIES_TEXT,
    AdditionalRoll,
    ResolutionMethod,
)

from tests.helpers import make_table, make_weighted_table


class TestRangedResolution:
    """Standard and percentile tables match the roll against entry ranges."""

    def test_explicit_roll_selects_entry(self, resolver):
        result = resolver.resolve("characterNames", roll=3)
        assert result.text == "Aerdrie"
        assert result.result.get("race") == "human"
        assert result.result.get("gender") == "female"
        assert result.result.roll == 3

    def test_range_boundaries(self, resolver):
        assert resolver.resolve("characterNames", roll=5).text == "Aerdrie"
        assert resolver.resolve("characterNames", roll=6).text == "Ahvain"
        assert resolver.resolve("characterNames", roll=100).text == "Garret"

    def test_rolled_result_within_table(self, resolver):
        texts = {entry.text for entry in resolver.registry.get("surnames").entries}
        for _ in range(50):
            result = resolver.resolve("surnames")
            assert result.text in texts
            assert not result.fallback

    def test_uses_table_dice(self, scripted_resolver, scripted_dice):
        scripted_dice.queue(29)
        assert scripted_resolver.resolve("surnames").text == "Xiloscient"
        assert scripted_dice.notations == ["1d50"]

    def test_missed_roll_falls_back(self, resolver):
        result = resolver.resolve("characterNames", roll=101)
        assert result.fallback
        assert result.text == MISSED_ROLL_TEXT
        assert result.result.fallback_reason == "missed_roll"

    def test_metadata(self, resolver):
        result = resolver.resolve("weather", roll=1)
        assert result.metadata == {"table_size": 7, "method": "percentile", "depth": 0}
        assert result.table_name == "Weather"

    def test_unknown_table_raises(self, resolver):
        with pytest.raises(TableNotFoundError):
            resolver.resolve("no-such-table")

    def test_empty_table_falls_back(self, empty_registry, seeded_dice):
        empty_registry.register(make_table("empty", []))
        result = TableResolver(empty_registry, seeded_dice).resolve("empty")
        assert result.fallback
        assert result.text == NO_VALID_ENTRIES_TEXT
        assert result.result.fallback_reason == "empty_table"


class TestWeightedResolution:
    """Weighted tables draw against cumulative weights."""

    def test_draw_selects_cumulative_bucket(self, scripted_resolver, scripted_dice):
        # Weights 1, 2, 4, 2, 1 out of 10
        scripted_dice.queue_draws(0.0, 0.15, 0.5, 0.75, 0.95)
        texts = [scripted_resolver.resolve("npcAttitudes").text for _ in range(5)]
        assert texts == ["Hostile", "Unfriendly", "Indifferent", "Friendly", "Helpful"]

    def test_weighted_result_has_no_roll(self, resolver):
        result = resolver.resolve("npcAttitudes")
        assert result.result.roll is None
        assert "diplomacy_dc" in result.result.attributes

    def test_frequencies_converge(self):
        resolver = TableResolver(create_default_registry(), DiceRoller(seed=2024))
        trials = 10_000
        counts = Counter(resolver.resolve("npcAttitudes").text for _ in range(trials))
        expected = {"Hostile": 0.1, "Unfriendly": 0.2, "Indifferent": 0.4, "Friendly": 0.2, "Helpful": 0.1}
        for text, probability in expected.items():
            assert abs(counts[text] / trials - probability) < 0.02

    def test_zero_weight_entry_never_chosen(self, empty_registry, scripted_dice):
        empty_registry.register(make_weighted_table("moods", {"Never": 0, "Always": 1}))
        scripted_dice.queue_draws(0.0, 0.5, 0.999)
        resolver = TableResolver(empty_registry, scripted_dice)
        assert {resolver.resolve("moods").text for _ in range(3)} == {"Always"}


class TestConditionalResolution:
    """Conditional tables filter on parameters, then pick among survivors."""

    def test_results_satisfy_conditions(self, resolver):
        for race in ("human", "elf", "dwarf", "halfling"):
            for _ in range(20):
                result = resolver.resolve("characterNamesByRace", {"race": race})
                assert not result.fallback
                assert result.result.get("race") == race

    def test_candidate_count_sets_dice(self, scripted_resolver, scripted_dice):
        scripted_resolver.resolve("characterNamesByRace", {"race": "halfling"})
        assert scripted_dice.notations == ["1d3"]

    def test_explicit_roll_indexes_candidates(self, resolver):
        result = resolver.resolve("characterNamesByRace", {"race": "dwarf"}, roll=4)
        assert result.text == "Gunnloda"

    def test_index_outside_candidates(self, resolver):
        result = resolver.resolve("characterNamesByRace", {"race": "dwarf"}, roll=5)
        assert result.fallback
        assert result.result.fallback_reason == "missed_roll"

    def test_no_matching_entries(self, resolver):
        result = resolver.resolve("characterNamesByRace", {"race": "orc"})
        assert result.fallback
        assert result.text == NO_VALID_ENTRIES_TEXT
        assert result.result.fallback_reason == "no_valid_entries"

    def test_missing_parameter_matches_nothing(self, resolver):
        assert resolver.resolve("encounterScale", {}).fallback

    @pytest.mark.parametrize(
        "level, allowed",
        [
            (1, {"A lone creature", "A pair"}),
            (3, {"A lone creature", "A pair"}),
            (4, {"A small group of", "A band of"}),
            (8, {"A small group of", "A band of"}),
            (9, {"A warband of", "A horde of"}),
            (20, {"A warband of", "A horde of"}),
        ],
    )
    def test_range_conditions(self, resolver, level, allowed):
        for _ in range(10):
            text = resolver.resolve("encounterScale", {"party_level": level}).text
            assert any(text.startswith(prefix) for prefix in allowed)

    def test_environment_routes_to_encounter_table(self, resolver):
        forest = {e.text for e in resolver.registry.get("forest-encounters").entries}
        result = resolver.resolve("environmentEncounters", {"environment": "forest"})
        assert result.text in forest

    def test_city_uses_urban_table(self, resolver):
        urban = {e.text for e in resolver.registry.get("urban-encounters").entries}
        result = resolver.resolve("environmentEncounters", {"environment": "city"})
        assert result.text in urban


class TestNestedResolution:
    """Nested tables follow the chosen entry's sub-table."""

    def test_gem_row_resolves_sub_table(self, resolver):
        result = resolver.resolve("treasures", roll=61)
        assert result.text == "Semi-precious stones"
        sub = result.result.subtable_result
        assert sub is not None
        assert sub.table_id == "gems"
        assert sub.metadata["depth"] == 1

    def test_magic_row_resolves_sub_table(self, resolver):
        result = resolver.resolve("treasures", roll=99)
        assert result.result.subtable_result.table_id == "magicItems"
        assert "->" in result.get_full_description()

    def test_coin_row_rolls_inline_dice(self, resolver):
        result = resolver.resolve("treasures", roll=1)
        dice_result = result.result.dice_result
        assert dice_result is not None
        assert dice_result.total % 10 == 0
        assert 40 <= dice_result.total <= 240
        assert result.result.subtable_result is None

    def test_self_reference_stops_at_depth_limit(self, empty_registry, seeded_dice):
        empty_registry.register(
            make_table("cycle", [(1, 6, "Again")], method=ResolutionMethod.NESTED, sub_table="cycle")
        )
        resolver = TableResolver(empty_registry, seeded_dice, max_depth=3)
        result = resolver.resolve("cycle")

        depth = 0
        current = result
        while current.result.subtable_result is not None:
            current = current.result.subtable_result
            depth += 1
        assert depth == 4
        assert current.fallback
        assert current.result.fallback_reason == "depth_exceeded"
        assert current.text == "Unknown"


class TestAdditionalRolls:
    def test_additional_roll_resolved_with_merged_parameters(self, registry, seeded_dice):
        registry.register(
            make_table(
                "camp",
                [(1, 6, "Night falls")],
                additional_rolls=(AdditionalRoll("characterNamesByRace", {"race": "elf"}),),
            )
        )
        resolver = TableResolver(registry, seeded_dice)
        result = resolver.resolve("camp", {"season": "winter"})

        extra = result.result.additional_results
        assert len(extra) == 1
        assert extra[0].result.get("race") == "elf"
        assert extra[0].parameters == {"season": "winter", "race": "elf"}


class TestRunLogRecording:
    def test_lookups_logged(self, registry):
        run_log = RunLog()
        resolver = TableResolver(registry, DiceRoller(seed=5, run_log=run_log), run_log=run_log)
        resolver.resolve("weather")
        resolver.resolve("characterNames", roll=200)

        lookups = run_log.get_table_lookups()
        assert [e.table_id for e in lookups] == ["weather", "characterNames"]
        assert not lookups[0].fallback
        assert lookups[1].fallback
        assert len(run_log.get_rolls()) == 1

    def test_nested_lookups_record_depth(self, registry, seeded_dice):
        run_log = RunLog()
        resolver = TableResolver(registry, seeded_dice, run_log=run_log)
        resolver.resolve("treasures", roll=86)
        depths = {e.table_id: e.depth for e in run_log.get_table_lookups()}
        assert depths == {"magicItems": 1, "treasures": 0}


class TestBatchAndInfo:
    def test_generate_multiple(self, resolver):
        results = resolver.generate_multiple("weather", 5)
        assert len(results) == 5

    def test_generate_multiple_skips_failures(self, resolver):
        assert resolver.generate_multiple("no-such-table", 3) == []

    def test_roll_table_returns_text(self, resolver):
        weather = {e.text for e in resolver.registry.get("weather").entries}
        assert resolver.roll_table("weather") in weather

    def test_table_info(self, resolver):
        info = resolver.get_table_info("surnames")
        assert info["dice"] == "1d50"
        assert info["entry_count"] == 18
        assert info["category"] == "names"
