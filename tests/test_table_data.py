"""
Tests for the built-in table data.

Checks the shape of the D&D tables and the categorised library rather than
individual rows.
"""

import pytest

from campaign_assistant.data_models import DiceExpression
from campaign_assistant.tables.dnd_tables import create_dnd_tables
from campaign_assistant.tables.module_tables import create_module_tables
from campaign_assistant.tables.table_types import ResolutionMethod, TableCategory


class TestBuiltinTables:
    """Every built-in table is well formed."""

    def test_table_counts(self):
        assert len(create_dnd_tables()) == 23
        assert len(create_module_tables()) == 32

    def test_ids_are_unique(self, registry):
        all_tables = create_dnd_tables() + create_module_tables()
        assert len({t.table_id for t in all_tables}) == len(all_tables)
        assert len(registry) == len(all_tables)

    def test_every_table_has_entries(self, registry):
        for table_id in registry.list_ids():
            assert registry.get(table_id).entry_count > 0, table_id

    def test_dice_expressions_parse(self, registry):
        for table_id in registry.list_ids():
            assert DiceExpression.parse(registry.get(table_id).dice_expression) is not None, table_id

    def test_every_category_populated(self, registry):
        populated = set(registry.get_categories())
        assert populated == set(TableCategory) - {TableCategory.GENERAL}

    def test_module_tables_carry_descriptions(self):
        npc_names = next(t for t in create_module_tables() if t.table_id == "npc-names")
        assert npc_names.entries[0].text == "Aldric Stonehammer"
        assert npc_names.entries[0].description == "Human male blacksmith"

    def test_module_tables_use_percentile_for_d100(self):
        for table in create_module_tables():
            expected = ResolutionMethod.PERCENTILE if table.dice_expression == "1d100" else ResolutionMethod.STANDARD
            assert table.method == expected, table.table_id


class TestNameTables:
    def test_character_names_is_percentile(self, registry):
        table = registry.get("characterNames")
        assert table.method == ResolutionMethod.PERCENTILE
        assert (table.min_roll, table.max_roll) == (1, 100)

    def test_roll_three_is_aerdrie(self, registry):
        entry = registry.get("characterNames").find_entry(3)
        assert entry.text == "Aerdrie"
        assert entry.race == "human"
        assert entry.gender == "female"

    def test_by_race_table_mirrors_names(self, registry):
        names = registry.get("characterNames")
        by_race = registry.get("characterNamesByRace")
        assert by_race.method == ResolutionMethod.CONDITIONAL
        assert [e.text for e in by_race.entries] == [e.text for e in names.entries]
        for entry in by_race.entries:
            assert entry.conditions_met({"race": entry.race})

    def test_surname_at_29(self, registry):
        assert registry.get("surnames").find_entry(29).text == "Xiloscient"


class TestContextTables:
    def test_npc_attitude_weights(self, registry):
        table = registry.get("npcAttitudes")
        assert table.method == ResolutionMethod.WEIGHTED
        assert {e.text: e.weight for e in table.entries} == {
            "Hostile": 1,
            "Unfriendly": 2,
            "Indifferent": 4,
            "Friendly": 2,
            "Helpful": 1,
        }

    @pytest.mark.parametrize(
        "environment, token",
        [
            ("forest", "[TABLE:forest-encounters]"),
            ("urban", "[TABLE:urban-encounters]"),
            ("city", "[TABLE:urban-encounters]"),
            ("mountain", "[TABLE:mountain-encounters]"),
            ("swamp", "[TABLE:swamp-encounters]"),
            ("dungeon", "[TABLE:dungeonRooms]"),
        ],
    )
    def test_environment_routing(self, registry, environment, token):
        table = registry.get("environmentEncounters")
        matching = [e.text for e in table.entries if e.conditions_met({"environment": environment})]
        assert matching == [token]

    def test_treasure_sub_tables(self, registry):
        sub_tables = {e.sub_table for e in registry.get("treasures").entries if e.sub_table}
        assert sub_tables == {"gems", "magicItems"}

    def test_coin_rows_roll_quantities(self, registry):
        coins = [e for e in registry.get("treasures").entries if e.get("type") == "coins"]
        assert [e.dice for e in coins] == ["4d6x10", "3d6x10", "2d6x10", "1d4x5"]
