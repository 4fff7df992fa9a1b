"""
Tests for the table registry: registration, lookup, validation, loading
and export.
"""

import json

import pytest

from campaign_assistant.tables.table_registry import (
    DuplicateTableError,
    InvalidTableError,
    TableNotFoundError,
    TableRegistry,
)
from campaign_assistant.tables.table_types import (
    ResolutionMethod,
    TableCategory,
    TableEntry,
)

from tests.helpers import make_table, make_weighted_table


class TestRegistration:
    """Registering and looking up tables."""

    def test_register_and_get(self, empty_registry):
        table = make_table("test", [(1, 6, "Anything")])
        empty_registry.register(table)
        assert empty_registry.get("test") is table
        assert "test" in empty_registry
        assert len(empty_registry) == 1

    def test_duplicate_rejected(self, empty_registry):
        empty_registry.register(make_table("test", [(1, 6, "First")]))
        with pytest.raises(DuplicateTableError):
            empty_registry.register(make_table("test", [(1, 6, "Second")]))

    def test_replace_allowed_when_requested(self, empty_registry):
        empty_registry.register(make_table("test", [(1, 6, "First")]))
        empty_registry.register(
            make_table("test", [(1, 6, "Second")], category=TableCategory.NPCS), replace=True
        )
        assert empty_registry.get("test").entries[0].text == "Second"
        assert empty_registry.get_tables_by_category("general") == []
        assert len(empty_registry.get_tables_by_category("npcs")) == 1

    def test_unknown_table_raises(self, empty_registry):
        with pytest.raises(TableNotFoundError) as exc_info:
            empty_registry.get("nope")
        assert exc_info.value.table_id == "nope"
        assert "Table not found: nope" in str(exc_info.value)

    def test_list_ids_keeps_registration_order(self, empty_registry):
        for table_id in ("c", "a", "b"):
            empty_registry.register(make_table(table_id, [(1, 6, "x")]))
        assert empty_registry.list_ids() == ["c", "a", "b"]


class TestCategoriesAndSearch:
    def test_tables_by_category(self, registry):
        names = registry.get_tables_by_category(TableCategory.NAMES)
        ids = {table.table_id for table in names}
        assert {"characterNames", "surnames", "characterNamesByRace"} <= ids

    def test_category_by_string(self, registry):
        encounters = registry.get_tables_by_category("encounters")
        assert any(t.table_id == "forest-encounters" for t in encounters)

    def test_unknown_category_is_empty(self, registry):
        assert registry.get_tables_by_category("spaceships") == []

    def test_search_is_case_insensitive(self, registry):
        ids = {t.table_id for t in registry.search_tables("TAVERN")}
        assert "tavern-names" in ids

    def test_search_matches_description(self, registry):
        ids = {t.table_id for t in registry.search_tables("woodland")}
        assert "forest-encounters" in ids

    def test_get_categories_only_populated(self, empty_registry):
        empty_registry.register(make_table("test", [(1, 6, "x")], category=TableCategory.TREASURE))
        assert empty_registry.get_categories() == [TableCategory.TREASURE]


class TestValidation:
    """Structural checks over ranges, weights and sub-table references."""

    def test_builtin_tables_are_valid(self, registry):
        assert registry.validate_all_tables() == {}

    def test_gap_reported(self, empty_registry):
        table = make_table("gappy", [(1, 2, "Low"), (4, 6, "High")])
        issues = empty_registry.validate_table(table)
        assert any("gap at roll 3" in issue for issue in issues)

    def test_overlap_reported(self, empty_registry):
        table = make_table("overlapping", [(1, 4, "Low"), (3, 6, "High")])
        issues = empty_registry.validate_table(table)
        assert any("overlap at roll 3" in issue for issue in issues)
        assert any("overlap at roll 4" in issue for issue in issues)

    def test_range_outside_dice(self, empty_registry):
        table = make_table("wide", [(1, 6, "Low"), (7, 8, "Impossible")])
        issues = empty_registry.validate_table(table)
        assert any("outside 1-6" in issue for issue in issues)

    def test_missing_sub_table(self, empty_registry):
        table = make_table(
            "nested",
            [(1, 6, "Go deeper")],
            method=ResolutionMethod.NESTED,
            sub_table="missing",
        )
        issues = empty_registry.validate_table(table)
        assert any("sub-table 'missing'" in issue for issue in issues)

    def test_empty_table(self, empty_registry):
        table = make_table("empty", [])
        assert empty_registry.validate_table(table) == ["empty: table has no entries"]

    def test_weighted_table_skips_range_checks(self, empty_registry):
        table = make_weighted_table("moods", {"Happy": 3, "Sad": 1})
        assert empty_registry.validate_table(table) == []

    def test_weighted_table_needs_positive_weight(self, empty_registry):
        table = make_weighted_table("zero", {"Nothing": 0})
        issues = empty_registry.validate_table(table)
        assert any("total weight" in issue for issue in issues)

    def test_multiplied_dice_only_check_reachable_totals(self, empty_registry):
        table = make_table("coins", [(10, 30, "Few"), (40, 60, "Many")], dice="1d6x10")
        assert empty_registry.validate_table(table) == []

    def test_validate_all_only_lists_problems(self, empty_registry):
        empty_registry.register(make_table("good", [(1, 6, "Fine")]))
        empty_registry.register(make_table("bad", [(1, 5, "Short")]))
        report = empty_registry.validate_all_tables()
        assert list(report) == ["bad"]


class TestLoading:
    """Tables can be loaded from parsed JSON in several shapes."""

    TABLE_DATA = {
        "id": "omens",
        "name": "Omens",
        "dice": "1d4",
        "category": "plot-development",
        "entries": [
            {"min": 1, "max": 2, "text": "A black cat", "severity": "minor"},
            {"range": [3, 4], "result": "A falling star"},
        ],
    }

    def test_single_table(self, empty_registry):
        assert empty_registry.load_tables_from_dict(self.TABLE_DATA) == 1
        table = empty_registry.get("omens")
        assert table.category == TableCategory.PLOT_DEVELOPMENT
        assert table.entries[0].get("severity") == "minor"
        assert table.entries[1].text == "A falling star"
        assert table.entries[1].roll_min == 3

    def test_tables_mapping(self, empty_registry):
        data = {"tables": {"omens": {k: v for k, v in self.TABLE_DATA.items() if k != "id"}}}
        assert empty_registry.load_tables_from_dict(data) == 1
        assert empty_registry.get("omens").name == "Omens"

    def test_unknown_category_becomes_general(self, empty_registry):
        empty_registry.load_tables_from_dict({**self.TABLE_DATA, "category": "mystery"})
        assert empty_registry.get("omens").category == TableCategory.GENERAL

    def test_missing_description_defaults(self, empty_registry):
        empty_registry.load_tables_from_dict(self.TABLE_DATA)
        assert empty_registry.get("omens").description == "No description available"

    def test_invalid_table_raises(self, empty_registry):
        with pytest.raises(InvalidTableError):
            empty_registry.load_tables_from_dict({"name": "No id"})

    def test_load_from_json_file(self, empty_registry, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps([self.TABLE_DATA]))
        assert empty_registry.load_tables_from_json(path) == 1
        assert "omens" in empty_registry

    @pytest.mark.parametrize(
        "data",
        [
            ["not-a-table"],
            {"tables": {"omens": "A black cat"}},
            {"tables": "omens"},
            {"id": "omens", "entries": ["A black cat"]},
            {"id": "omens", "entries": [{"min": 1, "max": 2, "text": "x", "conditions": ["race"]}]},
        ],
    )
    def test_non_object_rows_rejected(self, empty_registry, data):
        with pytest.raises(InvalidTableError):
            empty_registry.load_tables_from_dict(data)
        assert len(empty_registry) == 0

    def test_numeric_strings_coerced(self, empty_registry):
        empty_registry.load_tables_from_dict([
            {"id": "w", "method": "weighted", "entries": [{"text": "a", "weight": "2"}, {"text": "b"}]},
            {"id": "r", "dice": "1d2", "entries": [{"min": "1", "max": "1", "text": "x"}, {"range": ["2", "2"], "text": "y"}]},
        ])
        assert empty_registry.get("w").total_weight == 3
        ranged = empty_registry.get("r")
        assert ranged.find_entry(2).text == "y"
        assert empty_registry.validate_all_tables() == {}

    @pytest.mark.parametrize("row", [{"text": "a", "weight": "heavy"}, {"text": "a", "min": "one", "max": 2}])
    def test_non_numeric_values_rejected(self, empty_registry, row):
        with pytest.raises(InvalidTableError, match="Cannot parse table bad"):
            empty_registry.load_tables_from_dict({"id": "bad", "method": "weighted", "entries": [row]})


class TestExport:
    def test_json_export_round_trips(self, registry):
        exported = registry.export_tables("json")
        assert exported["version"] == "1.0"
        assert "exportedAt" in exported

        reloaded = TableRegistry()
        reloaded.load_tables_from_dict(json.loads(json.dumps(exported)))
        assert reloaded.list_ids() == registry.list_ids()
        assert reloaded.get("treasures").entries[0].dice == "4d6x10"
        assert reloaded.validate_all_tables() == {}

    def test_csv_export(self, empty_registry):
        empty_registry.register(make_table("test", [(1, 3, "Low"), (4, 6, "High")]))
        lines = empty_registry.export_tables("csv").strip().splitlines()
        assert lines[0].startswith("table_id,table_name")
        assert len(lines) == 3
        assert lines[1].endswith("Low")

    def test_unsupported_format(self, registry):
        with pytest.raises(ValueError):
            registry.export_tables("xml")


class TestStatistics:
    def test_counts(self, empty_registry):
        empty_registry.register(make_table("a", [(1, 3, "x"), (4, 6, "y")]))
        empty_registry.register(make_weighted_table("b", {"p": 1, "q": 1, "r": 1}))
        stats = empty_registry.get_statistics()
        assert stats["total_tables"] == 2
        assert stats["total_entries"] == 5
        assert stats["by_method"] == {"standard": 1, "weighted": 1}
        assert stats["by_category"] == {"general": 2}


class TestEntryConditionsSerialization:
    def test_conditions_survive_round_trip(self, registry):
        table = registry.get("encounterScale")
        data = table.entries[0].to_dict()
        rebuilt = TableEntry.from_dict(data)
        assert rebuilt.conditions_met({"party_level": 2})
        assert not rebuilt.conditions_met({"party_level": 5})
