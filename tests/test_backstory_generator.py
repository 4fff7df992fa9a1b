"""
Tests for backstory generation.
"""

import pytest

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.story.backstory_data import CLASS_BACKGROUNDS
from campaign_assistant.story.backstory_generator import (
    BackstoryGenerator,
    BackstoryGeneratorError,
    CatalogItemNotFoundError,
)


class TestCatalogs:
    def test_catalog_sizes(self, backstory_generator):
        assert len(backstory_generator.get_all_backgrounds()) == 8
        assert len(backstory_generator.get_all_origins()) == 8
        assert len(backstory_generator.get_all_motivations()) == 10
        assert len(backstory_generator.get_all_flaws()) == 10
        assert len(backstory_generator.get_all_ideals()) == 10
        assert len(backstory_generator.get_all_bonds()) == 10
        assert len(backstory_generator.get_all_personality_traits()) == 20

    def test_get_background(self, backstory_generator):
        background = backstory_generator.get_background("scholar")
        assert background.name == "Scholar"
        assert "Decipher Script" in background.skill_proficiencies

    def test_unknown_background_raises(self, backstory_generator):
        with pytest.raises(CatalogItemNotFoundError, match="Unknown background: pirate"):
            backstory_generator.get_background("pirate")

    def test_not_found_is_generator_error(self):
        assert issubclass(CatalogItemNotFoundError, BackstoryGeneratorError)


class TestRandomBackstory:
    """Generated backstories draw the right number of distinct items."""

    def test_counts(self, backstory_generator):
        for _ in range(25):
            backstory = backstory_generator.generate_random_backstory()
            assert len(backstory.motivations) == 2
            assert len(backstory.flaws) == 1
            assert len(backstory.ideals) == 1
            assert len(backstory.bonds) == 1
            assert len(backstory.personality_traits) == 2

    def test_no_duplicates_within_lists(self, backstory_generator):
        for _ in range(25):
            backstory = backstory_generator.generate_random_backstory()
            assert len({m.item_id for m in backstory.motivations}) == 2
            assert len({t.item_id for t in backstory.personality_traits}) == 2

    def test_wizard_backgrounds(self, backstory_generator):
        for _ in range(50):
            backstory = backstory_generator.generate_random_backstory(character_class="wizard")
            assert backstory.background.item_id in {"scholar", "noble", "merchant"}

    def test_class_is_case_insensitive(self, backstory_generator):
        for _ in range(20):
            background = backstory_generator.select_random_background("Fighter")
            assert background.item_id in CLASS_BACKGROUNDS["fighter"]

    def test_unknown_class_uses_all_backgrounds(self, backstory_generator):
        seen = {backstory_generator.select_random_background("artificer").item_id for _ in range(200)}
        assert len(seen) == 8

    def test_race_and_alignment_recorded(self, backstory_generator):
        backstory = backstory_generator.generate_random_backstory("cleric", "dwarf", "lawful good")
        assert backstory.character_class == "cleric"
        assert backstory.race == "dwarf"
        assert backstory.alignment == "lawful good"

    def test_seeded_generation_reproducible(self):
        first = BackstoryGenerator(DiceRoller(seed=11)).generate_random_backstory()
        second = BackstoryGenerator(DiceRoller(seed=11)).generate_random_backstory()
        assert first.narrative == second.narrative


class TestNarrative:
    def test_narrative_mentions_parts(self, backstory_generator):
        backstory = backstory_generator.generate_random_backstory()
        narrative = backstory.narrative
        assert narrative.startswith(backstory.origin.description)
        assert backstory.background.description in narrative
        assert backstory.motivations[0].name in narrative
        assert backstory.flaws[0].name.lower() in narrative
        assert "Your personality is marked by being" in narrative

    def test_to_dict(self, backstory_generator):
        data = backstory_generator.generate_random_backstory("rogue").to_dict()
        assert data["character_class"] == "rogue"
        assert data["background"]["id"] in CLASS_BACKGROUNDS["rogue"]
        assert len(data["motivations"]) == 2
        assert data["narrative"]


class TestCustomization:
    def test_replace_parts_by_id(self, backstory_generator):
        base = backstory_generator.generate_random_backstory()
        custom = backstory_generator.customize_backstory(
            base,
            {"background": "soldier", "flaws": ["greedy", "reckless"], "motivations": ["revenge"]},
        )
        assert custom.background.item_id == "soldier"
        assert [f.name for f in custom.flaws] == ["Greed", "Recklessness"]
        assert [m.name for m in custom.motivations] == ["Path of Revenge"]
        assert "Path of Revenge" in custom.narrative
        assert custom.origin == base.origin

    def test_base_not_modified(self, backstory_generator):
        base = backstory_generator.generate_random_backstory()
        original_background = base.background
        backstory_generator.customize_backstory(base, {"background": "artisan"})
        assert base.background == original_background

    def test_unknown_ids_ignored(self, backstory_generator):
        base = backstory_generator.generate_random_backstory()
        custom = backstory_generator.customize_backstory(
            base, {"origin": "moon_born", "ideals": ["charity", "nonsense"]}
        )
        assert custom.origin == base.origin
        assert [i.item_id for i in custom.ideals] == ["charity"]


class TestExport:
    def test_export_keys(self, backstory_generator):
        data = backstory_generator.export_backstory_data()
        assert data["version"] == "1.0"
        assert "exportedAt" in data
        assert set(data["flaws"]) >= {"greedy", "arrogant", "cowardly", "reckless"}
        assert data["personalityTraits"]["brave"]["name"] == "Brave"
        assert data["backgrounds"]["noble"]["id"] == "noble"
