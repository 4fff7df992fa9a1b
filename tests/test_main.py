"""
Tests for the command line entry point.
"""

import json
import re

import pytest

from campaign_assistant.main import main, parse_parameters
from campaign_assistant.observability.run_log import RunLog
from campaign_assistant.tables.table_registry import create_default_registry


class TestParseParameters:
    def test_ints_and_strings(self):
        assert parse_parameters(["level=3", "race=elf", "environment = forest"]) == {
            "level": 3,
            "race": "elf",
            "environment": "forest",
        }

    def test_none(self):
        assert parse_parameters(None) == {}

    @pytest.mark.parametrize("pair", ["level", "=3"])
    def test_malformed(self, pair):
        with pytest.raises(ValueError, match="Expected key=value"):
            parse_parameters([pair])


class TestCommands:
    def test_validate(self, capsys):
        assert main(["validate"]) == 0
        assert "All 55 tables valid" in capsys.readouterr().out

    def test_roll_with_fixed_roll(self, capsys):
        assert main(["--seed", "1", "roll", "characterNames", "--roll", "3"]) == 0
        assert capsys.readouterr().out.strip() == "Aerdrie"

    def test_roll_count(self, capsys):
        assert main(["--seed", "1", "roll", "weather", "--count", "3"]) == 0
        assert len(capsys.readouterr().out.strip().splitlines()) == 3

    def test_seeded_output_repeats(self, capsys):
        main(["--seed", "5", "npc"])
        first = capsys.readouterr().out
        main(["--seed", "5", "npc"])
        assert capsys.readouterr().out == first

    def test_unknown_table(self, capsys):
        assert main(["roll", "dragons-of-mars"]) == 1
        assert "Error: Table not found: dragons-of-mars" in capsys.readouterr().err

    def test_bad_parameter(self, capsys):
        assert main(["roll", "treasures", "--param", "level"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_tables_by_category(self, capsys):
        assert main(["tables", "--category", "names"]) == 0
        out = capsys.readouterr().out
        assert "characterNames" in out
        assert "3 tables" in out

    def test_tables_search(self, capsys):
        assert main(["tables", "--search", "tavern"]) == 0
        assert "tavern-names" in capsys.readouterr().out

    def test_name(self, capsys):
        assert main(["name", "--race", "dwarf", "--count", "2"]) == 0
        assert len(capsys.readouterr().out.strip().splitlines()) == 2

    def test_adventure(self, capsys):
        assert main(["--seed", "3", "adventure"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("The ")
        assert "Weather:" in out

    def test_backstory(self, capsys):
        assert main(["backstory", "--class", "wizard", "--race", "elf"]) == 0
        assert "Your personality is marked by being" in capsys.readouterr().out

    def test_outline(self, capsys):
        assert main(["--seed", "8", "outline", "--length", "8", "--party", "2"]) == 0
        out = capsys.readouterr().out
        assert "Pattern:" in out
        assert "Act 1:" in out


class TestOutputFiles:
    def test_export(self, capsys, tmp_path):
        path = tmp_path / "outline.json"
        assert main(["--seed", "2", "--export", str(path), "outline", "--length", "6"]) == 0
        assert f"Exported to {path}" in capsys.readouterr().out
        data = json.loads(path.read_text())
        assert data["campaign_length"] == 6

    def test_export_roll(self, tmp_path):
        path = tmp_path / "roll.json"
        main(["--export", str(path), "roll", "characterNames", "--roll", "3"])
        data = json.loads(path.read_text())
        assert data[0]["table"] == "characterNames"
        assert data[0]["result"]["text"] == "Aerdrie"

    def test_run_log(self, tmp_path):
        path = tmp_path / "run.json"
        assert main(["--seed", "4", "--run-log", str(path), "npc"]) == 0
        log = RunLog.load(str(path))
        assert log.get_seed() == 4
        assert len(log.get_rolls()) > 0
        assert len(log.get_table_lookups()) > 0

    def test_extra_tables(self, capsys, tmp_path):
        path = tmp_path / "omens.json"
        path.write_text(json.dumps({
            "id": "omens",
            "name": "Omens",
            "dice": "1d2",
            "entries": [{"min": 1, "max": 1, "text": "A black cat"}, {"min": 2, "max": 2, "text": "A comet"}],
        }))
        assert main(["--tables-json", str(path), "roll", "omens", "--roll", "2"]) == 0
        assert capsys.readouterr().out.strip() == "A comet"

    def test_missing_tables_file(self, capsys, tmp_path):
        assert main(["--tables-json", str(tmp_path / "missing.json"), "validate"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_tables_file(self, capsys, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps(["not-a-table"]))
        assert main(["--tables-json", str(path), "validate"]) == 1
        assert "Error: Expected a table object" in capsys.readouterr().err


class TestHelp:
    def test_epilog_examples_name_real_tables(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])
        help_text = capsys.readouterr().out
        rolled = re.findall(r"campaign-assistant roll (\S+)", help_text)
        assert rolled
        registry = create_default_registry()
        assert [table_id for table_id in rolled if table_id not in registry] == []
