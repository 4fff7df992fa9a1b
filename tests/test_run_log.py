"""
Tests for the RunLog observability module.
"""

from campaign_assistant.observability.run_log import (
    EventType,
    GenerationEvent,
    RollEvent,
    RunLog,
    TableLookupEvent,
)


class TestRunLogRecording:
    """Events are sequenced and filterable."""

    def test_sequence_numbers_increase(self, run_log):
        first = run_log.log_roll("1d6", [4], 0, 4, "test")
        second = run_log.log_table_lookup("weather", "Weather", "standard", 4, "Rain")
        assert first.sequence_number == 1
        assert second.sequence_number == 2
        assert run_log.get_event_count() == 2

    def test_event_types_set_by_subclass(self, run_log):
        assert run_log.log_roll("1d6", [2], 0, 2).event_type == EventType.ROLL
        assert run_log.log_generation("npc", "A baker").event_type == EventType.GENERATION
        lookup = run_log.log_table_lookup("weather", "Weather", "standard", 1, "Clear")
        assert lookup.event_type == EventType.TABLE_LOOKUP

    def test_typed_getters(self, run_log):
        run_log.log_roll("1d6", [2], 0, 2)
        run_log.log_table_lookup("weather", "Weather", "standard", 2, "Clear")
        run_log.log_generation("npc", "A baker")
        run_log.log_custom("note", {"text": "hello"})

        assert len(run_log.get_rolls()) == 1
        assert len(run_log.get_table_lookups()) == 1
        assert len(run_log.get_generations()) == 1
        assert len(run_log.get_events(EventType.CUSTOM)) == 1

    def test_since_sequence(self, run_log):
        for total in range(1, 5):
            run_log.log_roll("1d6", [total], 0, total)
        later = run_log.get_events(since_sequence=2)
        assert [e.sequence_number for e in later] == [3, 4]

    def test_pause_drops_events(self, run_log):
        run_log.pause()
        run_log.log_roll("1d6", [1], 0, 1)
        assert run_log.is_paused()
        assert run_log.get_event_count() == 0

        run_log.resume()
        run_log.log_roll("1d6", [1], 0, 1)
        assert run_log.get_event_count() == 1

    def test_reset_clears_events(self, run_log):
        run_log.log_roll("1d6", [1], 0, 1)
        run_log.reset()
        assert run_log.get_event_count() == 0
        assert run_log.log_roll("1d6", [1], 0, 1).sequence_number == 1


class TestSubscribers:
    """Subscribers see events as they are logged."""

    def test_subscriber_receives_events(self, run_log):
        seen = []
        run_log.subscribe(seen.append)
        run_log.log_generation("npc", "A smith")
        assert len(seen) == 1
        assert isinstance(seen[0], GenerationEvent)

    def test_unsubscribe(self, run_log):
        seen = []
        run_log.subscribe(seen.append)
        run_log.unsubscribe(seen.append)
        run_log.log_generation("npc", "A smith")
        assert seen == []

    def test_failing_subscriber_does_not_break_logging(self, run_log):
        def broken(event):
            raise RuntimeError("boom")

        run_log.subscribe(broken)
        run_log.log_roll("1d6", [3], 0, 3)
        assert run_log.get_event_count() == 1


class TestSummaryAndFormatting:
    def test_summary_counts_fallbacks(self, run_log):
        run_log.log_table_lookup("a", "A", "standard", 9, "Unknown", fallback=True)
        run_log.log_table_lookup("b", "B", "standard", 2, "Fine")
        summary = run_log.get_summary()
        assert summary["seed"] == 42
        assert summary["table_lookups"] == 2
        assert summary["fallbacks"] == 1

    def test_format_log(self, run_log):
        run_log.log_table_lookup("weather", "Weather", "standard", 12, "Unknown", fallback=True)
        text = run_log.format_log()
        assert text.startswith("=== Run Log ===")
        assert "Seed: 42" in text
        assert "TABLE Weather rolled 12: Unknown [FALLBACK]" in text

    def test_format_log_filters_types(self, run_log):
        run_log.log_roll("1d6", [5], 0, 5, "check")
        run_log.log_generation("npc", "A guard")
        text = run_log.format_log(event_types=[EventType.GENERATION])
        assert "GENERATE npc: A guard" in text
        assert "ROLL" not in text


class TestPersistence:
    """Saving and loading restores typed events."""

    def test_save_and_load(self, run_log, tmp_path):
        run_log.log_roll("2d6", [3, 4], 1, 8, "reaction")
        run_log.log_table_lookup("npcAttitudes", "NPC Attitudes", "weighted", None, "Friendly", depth=1)
        run_log.log_generation("adventure", "The Dragon of Oakvale")

        path = tmp_path / "run.json"
        run_log.save(str(path))
        loaded = RunLog.load(str(path))

        assert loaded.get_seed() == 42
        assert loaded.get_event_count() == 3

        roll = loaded.get_rolls()[0]
        assert isinstance(roll, RollEvent)
        assert roll.rolls == [3, 4]
        assert roll.total == 8

        lookup = loaded.get_table_lookups()[0]
        assert isinstance(lookup, TableLookupEvent)
        assert lookup.roll_total is None
        assert lookup.depth == 1

        assert loaded.get_generations()[0].summary == "The Dragon of Oakvale"

    def test_loaded_log_continues_sequence(self, run_log, tmp_path):
        run_log.log_roll("1d6", [1], 0, 1)
        run_log.log_roll("1d6", [2], 0, 2)
        path = tmp_path / "run.json"
        run_log.save(str(path))

        loaded = RunLog.load(str(path))
        assert loaded.log_roll("1d6", [3], 0, 3).sequence_number == 3
