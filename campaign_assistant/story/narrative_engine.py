"""
Campaign plot outlines.

Picks a story pattern from the party's motivations and backgrounds, splits
the campaign's chapters across the pattern's acts, assigns each character an
arc from their flaws, and tags one key event per chapter with a trope and an
impact bucket taken from the chapter's position.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime
from math import ceil
from typing import Any, Optional
import logging

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.story.backstory_generator import Backstory
from campaign_assistant.story.catalog import Catalog
from campaign_assistant.story.narrative_data import (
    CHARACTER_ARCS,
    CHARACTER_CHALLENGES,
    CHARACTER_INSIGHTS,
    CONFLICT_DESCRIPTIONS,
    CONFLICT_TYPES,
    DEFAULT_ELEMENT_DESCRIPTION,
    ELEMENT_DESCRIPTIONS,
    EVENT_DESCRIPTIONS,
    GROWTH_STAGES,
    NARRATIVE_TECHNIQUES,
    RELATIONSHIP_CHANGES,
    RESOLUTION_TYPES,
    STORY_PATTERNS,
    THEMES,
    TITLE_ADJECTIVES,
    TITLE_NOUNS,
    TITLE_PATTERNS,
    TITLE_VERBS,
    TROPES,
    CharacterArc,
    NarrativeTechnique,
    StoryPattern,
    Theme,
    Trope,
)

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"
DEFAULT_PATTERN = "hero_journey"
THEME_COUNT = 3
ELEMENTS_PER_ACT = 2


class NarrativeError(Exception):
    """Raised for unknown narrative catalog ids."""
    pass


@dataclass
class CharacterProfile:
    """The parts of a character the narrative engine keys on."""
    character_id: str
    name: str = ""
    background: str = ""
    motivations: list[str] = field(default_factory=list)
    flaws: list[str] = field(default_factory=list)

    @classmethod
    def from_backstory(cls, character_id: str, backstory: Backstory, name: str = "") -> "CharacterProfile":
        return cls(
            character_id=character_id,
            name=name,
            background=backstory.background.item_id,
            motivations=[m.name for m in backstory.motivations],
            flaws=[f.name for f in backstory.flaws],
        )


@dataclass
class ActOutline:
    number: int
    name: str
    chapters: int
    key_elements: list[dict[str, str]] = field(default_factory=list)
    conflicts: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "name": self.name,
            "chapters": self.chapters,
            "key_elements": self.key_elements,
            "conflicts": self.conflicts,
        }


@dataclass
class KeyEvent:
    chapter: int
    trope: str
    description: str
    impact: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "chapter": self.chapter,
            "trope": self.trope,
            "description": self.description,
            "impact": self.impact,
        }


@dataclass
class PlotOutline:
    """A campaign outline: pattern, arcs, themes, acts, events and resolution."""
    title: str
    pattern: str
    character_arcs: dict[str, str]
    themes: list[str]
    acts: list[ActOutline] = field(default_factory=list)
    key_events: list[KeyEvent] = field(default_factory=list)
    resolution: str = ""
    campaign_length: int = 0

    @property
    def total_chapters(self) -> int:
        return sum(act.chapters for act in self.acts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "pattern": self.pattern,
            "character_arcs": dict(self.character_arcs),
            "themes": list(self.themes),
            "acts": [act.to_dict() for act in self.acts],
            "key_events": [event.to_dict() for event in self.key_events],
            "resolution": self.resolution,
            "campaign_length": self.campaign_length,
        }


def event_impact(chapter_index: int, total_chapters: int) -> str:
    """Impact bucket for a 0-based chapter index: first 30% setup, up to 70% development, then climax."""
    if chapter_index < total_chapters * 0.3:
        return "setup"
    if chapter_index < total_chapters * 0.7:
        return "development"
    return "climax"


def _mentions(texts: list[str], *keywords: str) -> bool:
    lowered = [text.lower() for text in texts]
    return any(keyword in text for text in lowered for keyword in keywords)


class NarrativeEngine:
    """
    Builds plot outlines and character development beats.

    Usage:
        engine = NarrativeEngine(dice=DiceRoller(seed=3))
        outline = engine.generate_plot_outline([profile], campaign_length=12)
    """

    def __init__(self, dice: Optional[DiceRoller] = None):
        self.dice = dice or DiceRoller()
        self.story_patterns: Catalog[StoryPattern] = Catalog("story pattern", STORY_PATTERNS, NarrativeError)
        self.character_arcs: Catalog[CharacterArc] = Catalog("character arc", CHARACTER_ARCS, NarrativeError)
        self.themes: Catalog[Theme] = Catalog("theme", THEMES, NarrativeError)
        self.tropes: Catalog[Trope] = Catalog("trope", TROPES, NarrativeError)
        self.narrative_techniques: Catalog[NarrativeTechnique] = Catalog(
            "narrative technique", NARRATIVE_TECHNIQUES, NarrativeError
        )
        logger.info(
            f"Narrative engine loaded {len(self.story_patterns)} patterns, "
            f"{len(self.character_arcs)} arcs, {len(self.themes)} themes"
        )

    # =========================================================================
    # PLOT OUTLINE
    # =========================================================================

    def generate_plot_outline(
        self,
        characters: list[CharacterProfile],
        campaign_length: int = 10,
    ) -> PlotOutline:
        """
        Outline a campaign for a party.

        Chapters are split ceil(length / acts) per act, so the last acts may
        be shorter (or empty for very short campaigns).
        """
        pattern = self.story_patterns.require(self.select_story_pattern(characters))
        outline = PlotOutline(
            title=self.generate_title(characters),
            pattern=pattern.item_id,
            character_arcs=self.assign_character_arcs(characters),
            themes=self.select_themes(characters),
            campaign_length=campaign_length,
        )

        per_act = ceil(campaign_length / len(pattern.acts)) if campaign_length > 0 else 0
        remaining = max(0, campaign_length)
        for index, act_name in enumerate(pattern.acts):
            chapters = min(per_act, remaining)
            remaining -= chapters
            outline.acts.append(
                ActOutline(
                    number=index + 1,
                    name=act_name,
                    chapters=chapters,
                    key_elements=self._act_elements(pattern, index),
                    conflicts=self._act_conflicts(index, len(pattern.acts)),
                )
            )

        tropes = self.tropes.ids()
        for index in range(max(0, campaign_length)):
            outline.key_events.append(
                KeyEvent(
                    chapter=index + 1,
                    trope=self.dice.choice(tropes),
                    description=self.dice.choice(EVENT_DESCRIPTIONS),
                    impact=event_impact(index, campaign_length),
                )
            )

        outline.resolution = self.select_resolution(outline.themes, outline.character_arcs)
        logger.debug(f"Outlined '{outline.title}' ({outline.pattern}, {campaign_length} chapters)")
        return outline

    def generate_title(self, characters: list[CharacterProfile]) -> str:
        character = characters[0].name if characters and characters[0].name else "Hero"
        return self.dice.choice(TITLE_PATTERNS).format(
            character=character,
            adjective=self.dice.choice(TITLE_ADJECTIVES),
            noun=self.dice.choice(TITLE_NOUNS),
            verb=self.dice.choice(TITLE_VERBS),
        )

    def select_story_pattern(self, characters: list[CharacterProfile]) -> str:
        """First matching rule wins: redemption, revenge, quest backgrounds, else hero's journey."""
        motivations = [m for c in characters for m in c.motivations]
        if _mentions(motivations, "redemption"):
            return "redemption"
        if _mentions(motivations, "revenge"):
            return "revenge"
        if any(c.background in ("adventurer", "criminal") for c in characters):
            return "quest"
        return DEFAULT_PATTERN

    def assign_character_arcs(self, characters: list[CharacterProfile]) -> dict[str, str]:
        arcs = self.character_arcs.ids()
        assigned = {}
        for character in characters:
            if _mentions(character.flaws, "greed", "arrogance"):
                assigned[character.character_id] = "corruption_arc"
            elif _mentions(character.flaws, "coward", "reckless"):
                assigned[character.character_id] = "redemption_arc"
            else:
                assigned[character.character_id] = self.dice.choice(arcs)
        return assigned

    def select_themes(self, characters: list[CharacterProfile]) -> list[str]:
        """Themes implied by motivations, topped up with distinct random themes."""
        motivations = [m for c in characters for m in c.motivations]
        selected = []
        if _mentions(motivations, "power"):
            selected.append("power_corruption")
        if _mentions(motivations, "justice", "revenge"):
            selected.append("justice_vengeance")
        if _mentions(motivations, "knowledge"):
            selected.append("knowledge_danger")

        while len(selected) < THEME_COUNT:
            remaining = [t for t in self.themes.ids() if t not in selected]
            selected.append(self.dice.choice(remaining))
        return selected[:THEME_COUNT]

    def select_resolution(self, themes: list[str], character_arcs: dict[str, str]) -> str:
        if any("tragic" in arc or "corruption" in arc for arc in character_arcs.values()):
            return "tragic"
        if "justice_vengeance" in themes or "loss_grief" in themes:
            return "bittersweet" if self.dice.random() < 0.7 else "triumphant"
        return self.dice.choice(RESOLUTION_TYPES)

    def _act_elements(self, pattern: StoryPattern, act_index: int) -> list[dict[str, str]]:
        start = act_index * ELEMENTS_PER_ACT
        elements = pattern.key_elements[start:start + ELEMENTS_PER_ACT]
        return [
            {"type": element, "description": ELEMENT_DESCRIPTIONS.get(element, DEFAULT_ELEMENT_DESCRIPTION)}
            for element in elements
        ]

    def _act_conflicts(self, act_index: int, total_acts: int) -> list[dict[str, str]]:
        severity = "high" if act_index == total_acts - 1 else "medium"
        return [
            {
                "type": self.dice.choice(CONFLICT_TYPES),
                "severity": severity,
                "description": self.dice.choice(CONFLICT_DESCRIPTIONS),
            }
            for _ in range(self.dice.randint(1, 3))
        ]

    # =========================================================================
    # CHARACTER DEVELOPMENT
    # =========================================================================

    def calculate_character_growth(self, current_chapter: int, total_chapters: int) -> str:
        """Growth stage for a chapter; a non-positive total counts as the start."""
        progress = current_chapter / total_chapters if total_chapters > 0 else 0.0
        index = max(0, int(progress * len(GROWTH_STAGES)))
        return GROWTH_STAGES[min(index, len(GROWTH_STAGES) - 1)]

    def generate_character_development(
        self,
        character_id: str,
        current_chapter: int,
        total_chapters: int,
    ) -> dict[str, Any]:
        return {
            "character_id": character_id,
            "chapter": current_chapter,
            "growth": self.calculate_character_growth(current_chapter, total_chapters),
            "challenges": CHARACTER_CHALLENGES[:self.dice.randint(1, 3)],
            "insight": self.dice.choice(CHARACTER_INSIGHTS),
            "relationship_change": self.dice.choice(RELATIONSHIP_CHANGES),
        }

    def adapt_story_to_player_choices(
        self,
        choices: list[dict[str, Any]],
        outline: PlotOutline,
    ) -> dict[str, Any]:
        """
        Apply one random adaptation per player choice to a copy of the outline.

        Returns {"outline": adapted PlotOutline, "changes": [adaptation dicts]}.
        The original outline is left untouched.
        """
        adapted = deepcopy(outline)
        changes = []
        for choice in choices:
            adaptation = self._adaptation_for(choice)
            changes.append(adaptation)
            if adaptation["type"] == "theme_shift":
                adapted.themes = [
                    adaptation["new_theme"] if theme == adaptation["old_theme"] else theme
                    for theme in adapted.themes
                ]
            elif adaptation["type"] == "character_arc_change" and adaptation["character_id"]:
                adapted.character_arcs[adaptation["character_id"]] = adaptation["new_arc"]
        return {"outline": adapted, "changes": changes}

    def _adaptation_for(self, choice: dict[str, Any]) -> dict[str, Any]:
        options = [
            {
                "type": "theme_shift",
                "old_theme": "power_corruption",
                "new_theme": "justice_vengeance",
                "reason": "Player chose path of righteous vengeance",
            },
            {
                "type": "character_arc_change",
                "character_id": choice.get("character_id"),
                "new_arc": "redemption_arc",
                "reason": "Character showed remorse for past actions",
            },
            {
                "type": "plot_complication",
                "complication": "additional_antagonist",
                "reason": "Player actions attracted unwanted attention",
            },
        ]
        return self.dice.choice(options)

    # =========================================================================
    # CATALOG ACCESS
    # =========================================================================

    def get_story_pattern(self, pattern_id: str) -> StoryPattern:
        """
        Raises:
            NarrativeError: if the pattern id is unknown
        """
        return self.story_patterns.require(pattern_id)

    def get_all_story_patterns(self) -> list[StoryPattern]:
        return self.story_patterns.all()

    def get_all_character_arcs(self) -> list[CharacterArc]:
        return self.character_arcs.all()

    def get_all_themes(self) -> list[Theme]:
        return self.themes.all()

    def get_all_tropes(self) -> list[Trope]:
        return self.tropes.all()

    def get_all_narrative_techniques(self) -> list[NarrativeTechnique]:
        return self.narrative_techniques.all()

    def export_narrative_data(self) -> dict[str, Any]:
        return {
            "storyPatterns": self.story_patterns.to_dict(),
            "characterArcs": self.character_arcs.to_dict(),
            "themes": self.themes.to_dict(),
            "tropes": self.tropes.to_dict(),
            "narrativeTechniques": self.narrative_techniques.to_dict(),
            "exportedAt": datetime.now().isoformat(),
            "version": EXPORT_VERSION,
        }
