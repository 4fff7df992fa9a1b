"""
Random tables engine for the campaign assistant.

Facade over the registry and resolver, plus the table-backed composite
generators: names, NPCs, encounters, treasure, settlements and adventures.
Each composite draws its parts independently with one shared parameter
context.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union
import logging

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.observability.run_log import RunLog
from campaign_assistant.tables.table_registry import (
    TableRegistry,
    create_default_registry,
)
from campaign_assistant.tables.table_resolver import TableResolver
from campaign_assistant.tables.table_types import (
    RandomTable,
    ResolvedEntry,
    ResolvedResult,
    TableCategory,
)
from campaign_assistant.tables.text_substitution import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

ENGINE_VERSION = "1.0.0"


# =============================================================================
# COMPOSITE RECORDS
# =============================================================================


@dataclass
class GeneratedName:
    """A given name plus surname."""
    first_name: str
    surname: str
    race: Optional[str] = None
    gender: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.surname}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "full_name": self.full_name,
            "first_name": self.first_name,
            "surname": self.surname,
            "race": self.race,
            "gender": self.gender,
        }


@dataclass
class GeneratedNPC:
    """Name, personality, motivation and quirk, each drawn independently."""
    name: GeneratedName
    personality: ResolvedEntry
    motivation: ResolvedEntry
    quirk: ResolvedEntry
    attitude: Optional[ResolvedEntry] = None
    generated: datetime = field(default_factory=datetime.now)

    def describe(self) -> str:
        parts = [
            f"{self.name.full_name}: {self.personality.text.lower()}",
            f"motivated by {self.motivation.text.lower()}",
            f"quirk: {self.quirk.text.lower()}",
        ]
        if self.attitude is not None:
            parts.append(f"attitude: {self.attitude.text.lower()}")
        return ", ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name.to_dict(),
            "personality": self.personality.to_dict(),
            "motivation": self.motivation.to_dict(),
            "quirk": self.quirk.to_dict(),
            "attitude": self.attitude.to_dict() if self.attitude else None,
            "generated": self.generated.isoformat(),
        }


@dataclass
class GeneratedEncounter:
    """Encounter for an environment, with group size scaled to the party."""
    encounter: ResolvedResult
    scale: Optional[ResolvedResult]
    environment: Optional[str]
    party_level: int

    @property
    def text(self) -> str:
        if self.scale is None or self.scale.fallback:
            return self.encounter.text
        return f"{self.scale.text}: {self.encounter.text}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "environment": self.environment,
            "party_level": self.party_level,
            "encounter": self.encounter.to_dict(),
            "scale": self.scale.to_dict() if self.scale else None,
        }


@dataclass
class GeneratedSettlement:
    settlement: ResolvedResult
    feature: ResolvedResult
    buildings: list[ResolvedResult] = field(default_factory=list)
    tavern: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "settlement": self.settlement.to_dict(),
            "feature": self.feature.to_dict(),
            "buildings": [b.to_dict() for b in self.buildings],
            "tavern": self.tavern,
        }


@dataclass
class GeneratedAdventure:
    """Hook, location and weather, titled from the hook and location."""
    hook: ResolvedEntry
    location: ResolvedEntry
    weather: ResolvedEntry
    generated: datetime = field(default_factory=datetime.now)

    @property
    def title(self) -> str:
        first_word = self.hook.text.split(" ")[0] if self.hook.text else "Adventure"
        return f"The {first_word} of {self.location.text}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "hook": self.hook.to_dict(),
            "location": self.location.to_dict(),
            "weather": self.weather.to_dict(),
            "generated": self.generated.isoformat(),
        }


# =============================================================================
# ENGINE
# =============================================================================


class RandomTablesEngine:
    """
    Entry point for table-driven generation.

    Usage:
        engine = RandomTablesEngine(dice=DiceRoller(seed=7))
        engine.generate_from_table("characterNames", roll=3).text  # "Aerdrie"
        npc = engine.generate_npc()
    """

    def __init__(
        self,
        registry: Optional[TableRegistry] = None,
        dice: Optional[DiceRoller] = None,
        run_log: Optional[RunLog] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.registry = registry if registry is not None else create_default_registry()
        self.dice = dice or DiceRoller(run_log=run_log)
        self.run_log = run_log
        self.resolver = TableResolver(self.registry, self.dice, run_log=run_log, max_depth=max_depth)

        self._created = datetime.now()
        self._last_generated: Optional[datetime] = None
        self._total_generations = 0

        logger.info(f"Random tables engine ready with {len(self.registry)} tables")

    # =========================================================================
    # CORE
    # =========================================================================

    def generate_from_table(
        self,
        table_id: str,
        parameters: Optional[dict[str, Any]] = None,
        roll: Optional[int] = None,
    ) -> ResolvedResult:
        """
        Resolve one table.

        Raises:
            TableNotFoundError: if table_id is not registered
        """
        result = self.resolver.resolve(table_id, parameters, roll=roll)
        self._last_generated = result.timestamp
        self._total_generations += 1
        return result

    def generate_multiple(
        self,
        table_id: str,
        count: int = 1,
        parameters: Optional[dict[str, Any]] = None,
    ) -> list[ResolvedResult]:
        results = self.resolver.generate_multiple(table_id, count, parameters)
        self._total_generations += len(results)
        return results

    def substitute_text(self, text: str, parameters: Optional[dict[str, Any]] = None) -> str:
        return self.resolver.substitute_text(text, parameters)

    def get_available_tables(self) -> list[str]:
        return self.registry.list_ids()

    def get_table(self, table_id: str) -> RandomTable:
        return self.registry.get(table_id)

    def get_table_info(self, table_id: str) -> dict[str, Any]:
        return self.resolver.get_table_info(table_id)

    def get_tables_by_category(self, category: Union[TableCategory, str]) -> list[RandomTable]:
        return self.registry.get_tables_by_category(category)

    def search_tables(self, query: str) -> list[RandomTable]:
        return self.registry.search_tables(query)

    def validate_tables(self) -> dict[str, list[str]]:
        return self.registry.validate_all_tables()

    def export_tables(self, format: str = "json") -> Union[dict[str, Any], str]:
        return self.registry.export_tables(format)

    def get_statistics(self) -> dict[str, Any]:
        stats = self.registry.get_statistics()
        stats.update(
            {
                "version": ENGINE_VERSION,
                "created": self._created.isoformat(),
                "last_generated": self._last_generated.isoformat() if self._last_generated else None,
                "total_generations": self._total_generations,
                "tables": [
                    {"id": t.table_id, "entries": t.entry_count, "method": t.method.value}
                    for t in (self.registry.get(tid) for tid in self.registry.list_ids())
                ],
            }
        )
        return stats

    def _record_generation(self, generator: str, summary: str) -> None:
        logger.debug(f"Generated {generator}: {summary}")
        if self.run_log is not None:
            self.run_log.log_generation(generator, summary)

    # =========================================================================
    # COMPOSITE GENERATORS
    # =========================================================================

    def generate_name(self, race: Optional[str] = None, gender: Optional[str] = None) -> GeneratedName:
        """
        Given name and surname.

        With a race, the name is picked among that race's names; a race with
        no names falls back to the full name table.
        """
        parameters: dict[str, Any] = {}
        if race:
            parameters["race"] = race
        if gender:
            parameters["gender"] = gender

        name = None
        if race:
            name = self.generate_from_table("characterNamesByRace", parameters)
            if name.fallback:
                name = None
        if name is None:
            name = self.generate_from_table("characterNames", parameters)
        surname = self.generate_from_table("surnames", parameters)

        return GeneratedName(
            first_name=name.text,
            surname=surname.text,
            race=name.result.get("race", race),
            gender=name.result.get("gender", gender),
        )

    def generate_npc(self, parameters: Optional[dict[str, Any]] = None) -> GeneratedNPC:
        """Name, personality, motivation and quirk, with no constraint between them."""
        parameters = parameters or {}
        npc = GeneratedNPC(
            name=self.generate_name(parameters.get("race"), parameters.get("gender")),
            personality=self.generate_from_table("npcPersonalities", parameters).result,
            motivation=self.generate_from_table("motivations", parameters).result,
            quirk=self.generate_from_table("quirks", parameters).result,
            attitude=self.generate_from_table("npcAttitudes", parameters).result,
        )
        self._record_generation("npc", npc.name.full_name)
        return npc

    def generate_encounter(self, environment: Optional[str] = None, party_level: int = 1) -> GeneratedEncounter:
        """
        Encounter for an environment.

        Unknown or missing environments use the general encounter table.
        """
        parameters = {"environment": environment, "party_level": party_level}
        encounter = None
        if environment:
            encounter = self.generate_from_table("environmentEncounters", parameters)
            if encounter.fallback:
                encounter = None
        if encounter is None:
            encounter = self.generate_from_table("encounters", parameters)

        scale = self.generate_from_table("encounterScale", parameters)
        record = GeneratedEncounter(
            encounter=encounter,
            scale=scale,
            environment=environment,
            party_level=party_level,
        )
        self._record_generation("encounter", record.text)
        return record

    def generate_treasure(self, level: int = 1) -> ResolvedResult:
        """Treasure hoard; gem and magic rows carry a sub-table result."""
        result = self.generate_from_table("treasures", {"level": level})
        self._record_generation("treasure", result.get_full_description())
        return result

    def generate_settlement(self, size: Optional[str] = None) -> GeneratedSettlement:
        """
        Settlement with a notable feature, a tavern and a few buildings.

        A size matching a settlement row ("village", "small city") selects
        that row; any other size is ignored.
        """
        parameters = {"size": size} if size else {}
        roll = None
        if size:
            table = self.registry.get("settlements")
            match = next(
                (e for e in table.entries if str(e.get("size", "")).lower() == size.lower()),
                None,
            )
            if match is not None:
                roll = match.roll_min

        settlement = self.generate_from_table("settlements", parameters, roll=roll)
        building_count = self.dice.roll("1d4+1", "settlement buildings").total
        record = GeneratedSettlement(
            settlement=settlement,
            feature=self.generate_from_table("settlement-features", parameters),
            buildings=[self.generate_from_table("buildings", parameters) for _ in range(building_count)],
            tavern=self.generate_from_table("tavern-names", parameters).text,
        )
        self._record_generation("settlement", settlement.text)
        return record

    def generate_adventure(self) -> GeneratedAdventure:
        adventure = GeneratedAdventure(
            hook=self.generate_from_table("adventureHooks").result,
            location=self.generate_from_table("settlements").result,
            weather=self.generate_from_table("weather").result,
        )
        self._record_generation("adventure", adventure.title)
        return adventure

    # Quick generators over the categorised library

    def generate_npc_profile(self) -> dict[str, str]:
        name = self.generate_from_table("npc-names")
        return {
            "name": name.text,
            "description": name.result.get("description", ""),
            "motivation": self.generate_from_table("npc-motivations").text,
            "occupation": self.generate_from_table("npc-occupations").text,
            "secret": self.generate_from_table("npc-secrets").text,
        }

    def generate_location(self) -> dict[str, str]:
        return {
            "tavern": self.generate_from_table("tavern-names").text,
            "shop": self.generate_from_table("shop-names").text,
            "notable_feature": self.generate_from_table("settlement-features").text,
        }

    def generate_adventure_setup(self) -> dict[str, str]:
        return {
            "hook": self.generate_from_table("adventure-hooks").text,
            "complication": self.generate_from_table("complications").text,
            "objective": self.generate_from_table("quest-objectives").text,
            "twist": self.generate_from_table("story-twists").text,
        }
