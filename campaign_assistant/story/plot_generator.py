"""
Plot hooks, arcs, encounters, twists and campaign outlines.

Hooks are filtered by the party's level band and setting, arcs are matched
against a backstory's motivations and flaws, and resolutions against the
arc's themes. Any filter that leaves nothing falls back to the full catalog.
"""

from dataclasses import dataclass, field
from datetime import datetime
from math import floor
from typing import Any, Optional
import logging

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.story.backstory_generator import Backstory
from campaign_assistant.story.catalog import Catalog
from campaign_assistant.story.plot_data import (
    CAMPAIGN_TITLE_ADJECTIVES,
    CAMPAIGN_TITLE_NOUNS,
    COMPLICATIONS,
    ENCOUNTERS,
    NPC_TYPES,
    PLOT_ARCS,
    PLOT_HOOKS,
    RESOLUTIONS,
    REVEAL_MOMENTS,
    TWISTS,
    EncounterTemplate,
    PlotArc,
    PlotHook,
    PlotTwist,
    Resolution,
)

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"


class PlotGeneratorError(Exception):
    """Raised for unknown plot catalog ids."""
    pass


@dataclass
class Rewards:
    gold: int
    experience: int
    magic_items: int = 0
    allies: int = 0
    information: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "gold": self.gold,
            "experience": self.experience,
            "magic_items": self.magic_items,
            "allies": self.allies,
            "information": self.information,
        }


@dataclass
class GeneratedPlotHook:
    hook: PlotHook
    complications: list[str]
    rewards: Rewards
    npcs: list[str]

    def to_dict(self) -> dict[str, Any]:
        data = self.hook.to_dict()
        data.update(
            {
                "complications": list(self.complications),
                "rewards": self.rewards.to_dict(),
                "npcs": list(self.npcs),
            }
        )
        return data


@dataclass
class ActivePlotArc:
    """A plot arc being played through, starting at its first stage."""
    arc: PlotArc
    current_stage: int = 0
    progress: list[str] = field(default_factory=list)

    @property
    def stage_name(self) -> str:
        return self.arc.stages[self.current_stage] if self.arc.stages else ""

    def to_dict(self) -> dict[str, Any]:
        data = self.arc.to_dict()
        data.update({"current_stage": self.current_stage, "progress": list(self.progress)})
        return data


@dataclass
class GeneratedEncounter:
    encounter: EncounterTemplate
    outcome: str

    def to_dict(self) -> dict[str, Any]:
        data = self.encounter.to_dict()
        data["outcome"] = self.outcome
        return data


@dataclass
class GeneratedTwist:
    twist: PlotTwist
    reveal_moment: str

    def to_dict(self) -> dict[str, Any]:
        data = self.twist.to_dict()
        data["reveal_moment"] = self.reveal_moment
        return data


@dataclass
class CampaignChapter:
    number: int
    plot_hook: GeneratedPlotHook
    encounters: list[GeneratedEncounter] = field(default_factory=list)
    twist: Optional[GeneratedTwist] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "plot_hook": self.plot_hook.to_dict(),
            "encounters": [e.to_dict() for e in self.encounters],
            "twist": self.twist.to_dict() if self.twist else None,
        }


@dataclass
class CampaignOutline:
    title: str
    plot_arc: ActivePlotArc
    plot_hooks: list[GeneratedPlotHook] = field(default_factory=list)
    encounters: list[GeneratedEncounter] = field(default_factory=list)
    twists: list[GeneratedTwist] = field(default_factory=list)
    resolution: Optional[Resolution] = None
    chapters: list[CampaignChapter] = field(default_factory=list)
    character_count: int = 4

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "plot_arc": self.plot_arc.to_dict(),
            "plot_hooks": [h.to_dict() for h in self.plot_hooks],
            "encounters": [e.to_dict() for e in self.encounters],
            "twists": [t.to_dict() for t in self.twists],
            "resolution": self.resolution.to_dict() if self.resolution else None,
            "chapters": [c.to_dict() for c in self.chapters],
            "character_count": self.character_count,
        }


def difficulties_for_level(level: int) -> tuple[str, ...]:
    """Hook difficulties suited to a character level."""
    if level <= 3:
        return ("low",)
    if level <= 7:
        return ("low", "medium")
    return ("medium", "high")


class PlotGenerator:
    """Random plot elements drawn from the static plot catalogs."""

    def __init__(self, dice: Optional[DiceRoller] = None):
        self.dice = dice or DiceRoller()
        self.plot_hooks: Catalog[PlotHook] = Catalog("plot hook", PLOT_HOOKS, PlotGeneratorError)
        self.plot_arcs: Catalog[PlotArc] = Catalog("plot arc", PLOT_ARCS, PlotGeneratorError)
        self.encounters: Catalog[EncounterTemplate] = Catalog("encounter", ENCOUNTERS, PlotGeneratorError)
        self.twists: Catalog[PlotTwist] = Catalog("plot twist", TWISTS, PlotGeneratorError)
        self.resolutions: Catalog[Resolution] = Catalog("resolution", RESOLUTIONS, PlotGeneratorError)
        logger.info(
            f"Plot generator loaded {len(self.plot_hooks)} hooks, {len(self.plot_arcs)} arcs, "
            f"{len(self.encounters)} encounters"
        )

    def generate_plot_hook(
        self,
        character_level: int = 1,
        setting: Optional[str] = None,
        theme: Optional[str] = None,
    ) -> GeneratedPlotHook:
        """
        Draw a hook for the party's level, optionally narrowed by setting and
        by hook type (theme).

        Each optional filter is skipped when it would leave no hooks; if the
        level band itself leaves none, every hook is eligible.
        """
        hooks = self.plot_hooks.all()
        allowed = difficulties_for_level(character_level)
        candidates = [h for h in hooks if h.difficulty in allowed]
        if setting:
            by_setting = [h for h in candidates if setting in h.common_settings]
            candidates = by_setting or candidates
        if theme:
            by_theme = [h for h in candidates if h.hook_type == theme]
            candidates = by_theme or candidates
        if not candidates:
            candidates = hooks

        return GeneratedPlotHook(
            hook=self.dice.choice(candidates),
            complications=self.generate_complications(2),
            rewards=self.generate_rewards(character_level),
            npcs=self.generate_npcs(1),
        )

    def generate_plot_arc(self, backstory: Optional[Backstory] = None) -> ActivePlotArc:
        """Arc whose themes share a word with the backstory's motivations or flaws."""
        arcs = self.plot_arcs.all()
        candidates = arcs
        if backstory is not None:
            words = set()
            for item in [*backstory.motivations, *backstory.flaws]:
                words.update(item.name.lower().split(" "))
            matching = [arc for arc in arcs if any(theme in words for theme in arc.themes)]
            candidates = matching or arcs
        return ActivePlotArc(arc=self.dice.choice(candidates))

    def generate_encounter(
        self,
        difficulty: Optional[str] = "medium",
        encounter_type: Optional[str] = None,
    ) -> GeneratedEncounter:
        encounters = self.encounters.all()
        candidates = encounters
        if difficulty:
            candidates = [e for e in candidates if e.difficulty == difficulty]
        if encounter_type:
            candidates = [e for e in candidates if e.encounter_type == encounter_type]
        if not candidates:
            candidates = encounters

        encounter = self.dice.choice(candidates)
        return GeneratedEncounter(encounter=encounter, outcome=self.dice.choice(encounter.outcomes))

    def generate_plot_twist(self, timing: str = "any") -> GeneratedTwist:
        twists = self.twists.all()
        if timing != "any":
            twists = [t for t in twists if t.timing in (timing, "any")]
        return GeneratedTwist(twist=self.dice.choice(twists), reveal_moment=self.generate_reveal_moment())

    def generate_resolution(self, arc_type: Optional[str] = None) -> Resolution:
        """Resolution sharing a theme with the arc; unknown arcs pick at random."""
        resolutions = self.resolutions.all()
        arc = self.plot_arcs.get(arc_type) if arc_type else None
        if arc is not None:
            matching = [r for r in resolutions if any(theme in arc.themes for theme in r.themes)]
            resolutions = matching or resolutions
        return self.dice.choice(resolutions)

    def generate_complications(self, count: int) -> list[str]:
        return self.dice.sample(COMPLICATIONS, count)

    def generate_npcs(self, count: int) -> list[str]:
        return self.dice.sample(NPC_TYPES, count)

    def generate_reveal_moment(self) -> str:
        return self.dice.choice(REVEAL_MOMENTS)

    def generate_rewards(self, character_level: int) -> Rewards:
        base_gold = character_level * 100
        return Rewards(
            gold=floor(base_gold * (0.5 + self.dice.random())),
            experience=character_level * 300,
            magic_items=1 if self.dice.chance(0.3) else 0,
            allies=1 if self.dice.chance(0.2) else 0,
            information=1 if self.dice.chance(0.8) else 0,
        )

    def generate_campaign_title(self) -> str:
        adjective = self.dice.choice(CAMPAIGN_TITLE_ADJECTIVES)
        noun = self.dice.choice(CAMPAIGN_TITLE_NOUNS)
        return f"The {adjective} {noun}"

    def create_campaign_outline(self, character_count: int = 4, campaign_length: int = 10) -> CampaignOutline:
        """
        Outline a campaign: one hook per chapter with levels rising every two
        chapters, one and a half encounters per chapter, one or two twists
        with the first placed in the middle chapter, and a resolution fitted
        to the arc.
        """
        outline = CampaignOutline(
            title=self.generate_campaign_title(),
            plot_arc=self.generate_plot_arc(),
            character_count=character_count,
        )

        for index in range(campaign_length):
            outline.plot_hooks.append(self.generate_plot_hook(index // 2 + 1))

        for _ in range(floor(campaign_length * 1.5)):
            outline.encounters.append(self.generate_encounter())

        for _ in range(self.dice.randint(1, 2)):
            outline.twists.append(self.generate_plot_twist())

        outline.resolution = self.generate_resolution(outline.plot_arc.arc.item_id)

        twist_chapter = campaign_length // 2
        for index in range(campaign_length):
            start, end = int(index * 1.5), int((index + 1) * 1.5)
            outline.chapters.append(
                CampaignChapter(
                    number=index + 1,
                    plot_hook=outline.plot_hooks[index],
                    encounters=outline.encounters[start:end],
                    twist=outline.twists[0] if index == twist_chapter else None,
                )
            )

        logger.debug(f"Created campaign outline '{outline.title}' with {campaign_length} chapters")
        return outline

    # Catalog access

    def get_plot_hook(self, hook_id: str) -> PlotHook:
        """
        Raises:
            PlotGeneratorError: if the hook id is unknown
        """
        return self.plot_hooks.require(hook_id)

    def get_plot_arc(self, arc_id: str) -> PlotArc:
        return self.plot_arcs.require(arc_id)

    def get_all_plot_hooks(self) -> list[PlotHook]:
        return self.plot_hooks.all()

    def get_all_plot_arcs(self) -> list[PlotArc]:
        return self.plot_arcs.all()

    def get_all_encounters(self) -> list[EncounterTemplate]:
        return self.encounters.all()

    def get_all_twists(self) -> list[PlotTwist]:
        return self.twists.all()

    def get_all_resolutions(self) -> list[Resolution]:
        return self.resolutions.all()

    def export_plot_data(self) -> dict[str, Any]:
        return {
            "plotHooks": self.plot_hooks.to_dict(),
            "plotArcs": self.plot_arcs.to_dict(),
            "encounters": self.encounters.to_dict(),
            "twists": self.twists.to_dict(),
            "resolutions": self.resolutions.to_dict(),
            "exportedAt": datetime.now().isoformat(),
            "version": EXPORT_VERSION,
        }
