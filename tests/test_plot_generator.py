"""
Tests for plot hooks, arcs, encounters, twists, resolutions and campaign
outlines.
"""

import pytest

from campaign_assistant.story.plot_generator import (
    PlotGenerator,
    PlotGeneratorError,
    difficulties_for_level,
)

from tests.helpers import ScriptedDice


class TestPlotHooks:
    """Hooks are filtered by level band, then setting, then hook type."""

    @pytest.mark.parametrize(
        "level, allowed",
        [(1, ("low",)), (3, ("low",)), (4, ("low", "medium")), (7, ("low", "medium")), (8, ("medium", "high"))],
    )
    def test_difficulty_bands(self, level, allowed):
        assert difficulties_for_level(level) == allowed

    def test_low_level_hooks(self, plot_generator):
        for _ in range(30):
            generated = plot_generator.generate_plot_hook(character_level=1)
            assert generated.hook.difficulty == "low"

    def test_high_level_hooks(self, plot_generator):
        for _ in range(30):
            generated = plot_generator.generate_plot_hook(character_level=12)
            assert generated.hook.difficulty in ("medium", "high")

    def test_setting_filter(self, plot_generator):
        for _ in range(10):
            assert plot_generator.generate_plot_hook(1, setting="road").hook.item_id == "bandit_problem"

    def test_theme_filters_hook_type(self, plot_generator):
        for _ in range(10):
            assert plot_generator.generate_plot_hook(1, theme="personal").hook.item_id == "mysterious_letter"

    def test_unmatched_setting_ignored(self, plot_generator):
        hook = plot_generator.generate_plot_hook(1, setting="moon").hook
        assert hook.item_id in {"mysterious_letter", "bandit_problem"}

    def test_hook_extras(self, plot_generator):
        generated = plot_generator.generate_plot_hook(character_level=4)
        assert len(generated.complications) == 2
        assert len(set(generated.complications)) == 2
        assert len(generated.npcs) == 1
        data = generated.to_dict()
        assert data["id"] == generated.hook.item_id
        assert data["rewards"]["experience"] == 1200


class TestRewards:
    def test_scripted_rewards(self):
        dice = ScriptedDice(draws=[0.5, 0.1, 0.9, 0.5])
        rewards = PlotGenerator(dice).generate_rewards(3)
        assert rewards.gold == 300
        assert rewards.experience == 900
        assert rewards.magic_items == 1
        assert rewards.allies == 0
        assert rewards.information == 1

    def test_gold_range(self, plot_generator):
        for _ in range(50):
            rewards = plot_generator.generate_rewards(4)
            assert 200 <= rewards.gold < 600


class TestPlotArcs:
    def test_arc_matches_backstory_motivation(self, plot_generator, backstory_generator):
        base = backstory_generator.generate_random_backstory()
        backstory = backstory_generator.customize_backstory(
            base, {"motivations": ["power"], "flaws": ["greedy"]}
        )
        for _ in range(10):
            assert plot_generator.generate_plot_arc(backstory).arc.item_id == "power_corruption"

    def test_revenge_motivation(self, plot_generator, backstory_generator):
        base = backstory_generator.generate_random_backstory()
        backstory = backstory_generator.customize_backstory(
            base, {"motivations": ["revenge"], "flaws": ["paranoid"]}
        )
        assert plot_generator.generate_plot_arc(backstory).arc.item_id == "revenge_tragedy"

    def test_arc_starts_at_first_stage(self, plot_generator):
        active = plot_generator.generate_plot_arc()
        assert active.current_stage == 0
        assert active.stage_name == active.arc.stages[0]
        assert active.to_dict()["current_stage"] == 0


class TestEncountersAndTwists:
    def test_encounter_filters(self, plot_generator):
        for _ in range(10):
            generated = plot_generator.generate_encounter("high", "combat")
            assert generated.encounter.item_id == "ancient_guardian"
            assert generated.outcome in generated.encounter.outcomes

    def test_unmatched_encounter_filters_use_all(self, plot_generator):
        generated = plot_generator.generate_encounter("deadly", "dance")
        assert generated.encounter.item_id in {e.item_id for e in plot_generator.get_all_encounters()}

    def test_twist_timing(self, plot_generator):
        for _ in range(30):
            twist = plot_generator.generate_plot_twist("climax").twist
            assert twist.timing in ("climax", "any")

    def test_twist_reveal_moment(self, plot_generator):
        assert plot_generator.generate_plot_twist().reveal_moment


class TestResolutions:
    def test_resolution_shares_arc_theme(self, plot_generator):
        for _ in range(20):
            assert plot_generator.generate_resolution("revenge_tragedy").item_id == "tragic"

    def test_growth_arc_resolutions(self, plot_generator):
        results = {plot_generator.generate_resolution("hero_journey").item_id for _ in range(40)}
        assert results <= {"bittersweet", "transformation"}

    def test_arc_without_matching_resolution(self, plot_generator):
        all_ids = {r.item_id for r in plot_generator.get_all_resolutions()}
        assert plot_generator.generate_resolution("power_corruption").item_id in all_ids

    def test_unknown_arc(self, plot_generator):
        all_ids = {r.item_id for r in plot_generator.get_all_resolutions()}
        assert plot_generator.generate_resolution("space_opera").item_id in all_ids


class TestCampaignOutline:
    def test_outline_shape(self, plot_generator):
        outline = plot_generator.create_campaign_outline(character_count=5, campaign_length=10)
        assert outline.title.startswith("The ")
        assert len(outline.plot_hooks) == 10
        assert len(outline.encounters) == 15
        assert 1 <= len(outline.twists) <= 2
        assert outline.resolution is not None
        assert outline.character_count == 5

    def test_chapters(self, plot_generator):
        outline = plot_generator.create_campaign_outline(campaign_length=10)
        assert [c.number for c in outline.chapters] == list(range(1, 11))
        assert sum(len(c.encounters) for c in outline.chapters) == 15
        twist_chapters = [c.number for c in outline.chapters if c.twist is not None]
        assert twist_chapters == [6]
        assert outline.chapters[5].twist is outline.twists[0]

    def test_levels_rise_every_two_chapters(self, plot_generator):
        outline = plot_generator.create_campaign_outline(campaign_length=10)
        experience = [c.plot_hook.rewards.experience for c in outline.chapters]
        assert experience == [300, 300, 600, 600, 900, 900, 1200, 1200, 1500, 1500]
        assert outline.chapters[0].plot_hook.hook.difficulty == "low"

    def test_to_dict(self, plot_generator):
        data = plot_generator.create_campaign_outline(campaign_length=4).to_dict()
        assert len(data["chapters"]) == 4
        assert data["resolution"]["id"]


class TestCatalogAccess:
    def test_unknown_hook(self, plot_generator):
        with pytest.raises(PlotGeneratorError, match="Unknown plot hook: dragon_tax"):
            plot_generator.get_plot_hook("dragon_tax")

    def test_get_plot_arc(self, plot_generator):
        assert plot_generator.get_plot_arc("coming_age").name == "Coming of Age"

    def test_catalog_sizes(self, plot_generator):
        assert len(plot_generator.get_all_plot_hooks()) == 12
        assert len(plot_generator.get_all_plot_arcs()) == 8
        assert len(plot_generator.get_all_encounters()) == 10
        assert len(plot_generator.get_all_twists()) == 10
        assert len(plot_generator.get_all_resolutions()) == 8

    def test_export(self, plot_generator):
        data = plot_generator.export_plot_data()
        assert data["version"] == "1.0"
        assert set(data) >= {"plotHooks", "plotArcs", "encounters", "twists", "resolutions", "exportedAt"}
