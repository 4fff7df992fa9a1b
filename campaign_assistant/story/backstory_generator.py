"""
Character backstory generation.

A backstory is one background (filtered by class when the class is known),
one origin, and a few motivations, flaws, ideals, bonds and personality
traits drawn without replacement, rendered into a short narrative paragraph.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional
import logging

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.story.backstory_data import (
    BACKGROUNDS,
    BONDS,
    CLASS_BACKGROUNDS,
    FLAWS,
    IDEALS,
    MOTIVATIONS,
    ORIGINS,
    PERSONALITY_TRAITS,
    Background,
    Bond,
    Flaw,
    Ideal,
    Motivation,
    Origin,
    PersonalityTrait,
)
from campaign_assistant.story.catalog import Catalog

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"

MOTIVATION_COUNT = 2
FLAW_COUNT = 1
IDEAL_COUNT = 1
BOND_COUNT = 1
TRAIT_COUNT = 2


class BackstoryGeneratorError(Exception):
    """Base class for backstory generation errors."""
    pass


class CatalogItemNotFoundError(BackstoryGeneratorError):
    """Raised when a backstory catalog id is unknown."""
    pass


@dataclass
class Backstory:
    """A generated character backstory."""
    background: Background
    origin: Origin
    motivations: list[Motivation] = field(default_factory=list)
    flaws: list[Flaw] = field(default_factory=list)
    ideals: list[Ideal] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    personality_traits: list[PersonalityTrait] = field(default_factory=list)
    narrative: str = ""
    character_class: Optional[str] = None
    race: Optional[str] = None
    alignment: Optional[str] = None
    generated: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "background": self.background.to_dict(),
            "origin": self.origin.to_dict(),
            "motivations": [m.to_dict() for m in self.motivations],
            "flaws": [f.to_dict() for f in self.flaws],
            "ideals": [i.to_dict() for i in self.ideals],
            "bonds": [b.to_dict() for b in self.bonds],
            "personality_traits": [t.to_dict() for t in self.personality_traits],
            "narrative": self.narrative,
            "character_class": self.character_class,
            "race": self.race,
            "alignment": self.alignment,
            "generated": self.generated.isoformat(),
        }


def _joined(names: list[str]) -> str:
    return " and ".join(names)


class BackstoryGenerator:
    """
    Draws backstories from the static catalogs.

    All randomness goes through the injected DiceRoller.
    """

    def __init__(self, dice: Optional[DiceRoller] = None):
        self.dice = dice or DiceRoller()
        self.backgrounds: Catalog[Background] = Catalog("background", BACKGROUNDS, CatalogItemNotFoundError)
        self.origins: Catalog[Origin] = Catalog("origin", ORIGINS, CatalogItemNotFoundError)
        self.motivations: Catalog[Motivation] = Catalog("motivation", MOTIVATIONS, CatalogItemNotFoundError)
        self.flaws: Catalog[Flaw] = Catalog("flaw", FLAWS, CatalogItemNotFoundError)
        self.ideals: Catalog[Ideal] = Catalog("ideal", IDEALS, CatalogItemNotFoundError)
        self.bonds: Catalog[Bond] = Catalog("bond", BONDS, CatalogItemNotFoundError)
        self.personality_traits: Catalog[PersonalityTrait] = Catalog(
            "personality trait", PERSONALITY_TRAITS, CatalogItemNotFoundError
        )
        logger.info(
            f"Backstory generator loaded {len(self.backgrounds)} backgrounds, "
            f"{len(self.origins)} origins, {len(self.motivations)} motivations"
        )

    def generate_random_backstory(
        self,
        character_class: Optional[str] = None,
        race: Optional[str] = None,
        alignment: Optional[str] = None,
    ) -> Backstory:
        """
        Generate a complete backstory.

        Race and alignment are recorded on the result but do not filter any
        draw; only the class narrows the background pool.
        """
        backstory = Backstory(
            background=self.select_random_background(character_class),
            origin=self.dice.choice(self.origins.all()),
            motivations=self.dice.sample(self.motivations.all(), MOTIVATION_COUNT),
            flaws=self.dice.sample(self.flaws.all(), FLAW_COUNT),
            ideals=self.dice.sample(self.ideals.all(), IDEAL_COUNT),
            bonds=self.dice.sample(self.bonds.all(), BOND_COUNT),
            personality_traits=self.dice.sample(self.personality_traits.all(), TRAIT_COUNT),
            character_class=character_class,
            race=race,
            alignment=alignment,
        )
        backstory.narrative = self.generate_narrative_description(backstory)
        logger.debug(f"Generated backstory: {backstory.background.name} / {backstory.origin.name}")
        return backstory

    def select_random_background(self, character_class: Optional[str] = None) -> Background:
        """
        Pick a background compatible with the class.

        An unknown or missing class draws from every background.
        """
        candidates = self.backgrounds.all()
        if character_class:
            compatible = CLASS_BACKGROUNDS.get(character_class.lower(), ())
            filtered = [bg for bg in candidates if bg.item_id in compatible]
            if filtered:
                candidates = filtered
            else:
                logger.debug(f"No background mapping for class '{character_class}', using all backgrounds")
        return self.dice.choice(candidates)

    def generate_narrative_description(self, backstory: Backstory) -> str:
        motivations = _joined([m.name for m in backstory.motivations])
        flaws = _joined([f.name.lower() for f in backstory.flaws])
        ideals = _joined([i.name.lower() for i in backstory.ideals])
        bonds = _joined([b.description.lower() for b in backstory.bonds])
        traits = _joined([t.name.lower() for t in backstory.personality_traits])
        return (
            f"{backstory.origin.description}. {backstory.background.description}. "
            f"Driven by {motivations}, though plagued by {flaws}. "
            f"You believe in {ideals}, and {bonds}. "
            f"Your personality is marked by being {traits}."
        )

    def customize_backstory(self, base: Backstory, customizations: dict[str, Any]) -> Backstory:
        """
        Replace parts of a backstory by catalog id and regenerate its narrative.

        Unknown single ids (background, origin) keep the existing choice;
        unknown ids in lists are dropped.
        """
        changes: dict[str, Any] = {}
        if customizations.get("background"):
            changes["background"] = self.backgrounds.get(customizations["background"]) or base.background
        if customizations.get("origin"):
            changes["origin"] = self.origins.get(customizations["origin"]) or base.origin

        list_fields = {
            "motivations": self.motivations,
            "flaws": self.flaws,
            "ideals": self.ideals,
            "bonds": self.bonds,
            "personality_traits": self.personality_traits,
        }
        for key, catalog in list_fields.items():
            if customizations.get(key):
                changes[key] = catalog.pick(customizations[key])

        customized = replace(base, **changes)
        customized.narrative = self.generate_narrative_description(customized)
        return customized

    # Catalog access

    def get_background(self, background_id: str) -> Background:
        """
        Raises:
            CatalogItemNotFoundError: if the id is unknown
        """
        return self.backgrounds.require(background_id)

    def get_all_backgrounds(self) -> list[Background]:
        return self.backgrounds.all()

    def get_all_origins(self) -> list[Origin]:
        return self.origins.all()

    def get_all_motivations(self) -> list[Motivation]:
        return self.motivations.all()

    def get_all_flaws(self) -> list[Flaw]:
        return self.flaws.all()

    def get_all_ideals(self) -> list[Ideal]:
        return self.ideals.all()

    def get_all_bonds(self) -> list[Bond]:
        return self.bonds.all()

    def get_all_personality_traits(self) -> list[PersonalityTrait]:
        return self.personality_traits.all()

    def export_backstory_data(self) -> dict[str, Any]:
        return {
            "backgrounds": self.backgrounds.to_dict(),
            "origins": self.origins.to_dict(),
            "motivations": self.motivations.to_dict(),
            "flaws": self.flaws.to_dict(),
            "ideals": self.ideals.to_dict(),
            "bonds": self.bonds.to_dict(),
            "personalityTraits": self.personality_traits.to_dict(),
            "exportedAt": datetime.now().isoformat(),
            "version": EXPORT_VERSION,
        }
