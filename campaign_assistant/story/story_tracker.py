"""
Per-character story tracking.

Keeps each character's backstory record, story events and chapters, and a
development sheet (arc progression and growth traits) that typed events
move. Events can trigger plot hooks; a hook is only ever activated once per
character.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union
import logging
import uuid

from campaign_assistant.story.backstory_generator import Backstory
from campaign_assistant.story.catalog import Catalog, CatalogItem

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"

ARC_TRACKS = ("hero_journey", "personal_growth", "relationship_development", "power_progression")
GROWTH_TRAITS = ("confidence", "wisdom", "compassion", "ruthlessness", "leadership")
STARTING_GROWTH = 50
DEFAULT_AFFECTION = 50

# event type -> (arc progression deltas, growth trait deltas)
EVENT_EFFECTS: dict[str, tuple[dict[str, int], dict[str, int]]] = {
    "victory": ({"hero_journey": 5, "personal_growth": 3}, {"confidence": 2}),
    "achievement": ({"hero_journey": 5, "personal_growth": 3}, {"confidence": 2}),
    "defeat": ({"hero_journey": 3, "personal_growth": 5}, {"wisdom": 3}),
    "failure": ({"hero_journey": 3, "personal_growth": 5}, {"wisdom": 3}),
    "betrayal": ({"relationship_development": 5}, {"compassion": 2, "ruthlessness": 1}),
    "loss": ({"relationship_development": 5}, {"compassion": 2, "ruthlessness": 1}),
    "leadership": ({"relationship_development": 3}, {"leadership": 4}),
    "power_gain": ({"power_progression": 10}, {"confidence": 3}),
}
ACHIEVEMENT_EVENTS = ("victory", "achievement")
FAILURE_EVENTS = ("defeat", "failure")

AFFECTION_CHANGES = {"improved": 10, "strained": -15, "broken": -30}


class StoryTrackerError(Exception):
    """Base class for story tracking errors."""
    pass


class CharacterNotFoundError(StoryTrackerError):
    def __init__(self, character_id: str):
        self.character_id = character_id
        super().__init__(f"Character backstory not found: {character_id}")


class PlotHookNotFoundError(StoryTrackerError):
    pass


class PlotHookAlreadyActiveError(StoryTrackerError):
    def __init__(self, hook_id: str, character_id: str):
        self.hook_id = hook_id
        super().__init__(f"Plot hook {hook_id} already active for {character_id}")


@dataclass(frozen=True)
class StoryHook(CatalogItem):
    hook_type: str = "personal"
    triggers: tuple[str, ...] = ()
    rarity: str = "common"


STORY_HOOKS = [
    StoryHook("ancient_prophecy", "Ancient Prophecy", "An ancient prophecy foretells the character's destiny",
              hook_type="prophecy", triggers=("level_up", "major_quest_completion"), rarity="rare"),
    StoryHook("family_secret", "Family Secret", "A dark family secret comes to light",
              hook_type="personal", triggers=("backstory_reveal", "family_encounter"), rarity="common"),
    StoryHook("lost_artifact", "Lost Artifact",
              "The character discovers they are connected to a legendary artifact",
              hook_type="quest", triggers=("artifact_discovery", "ancient_ruins"), rarity="uncommon"),
    StoryHook("rival_organization", "Rival Organization",
              "A powerful organization has taken interest in the character",
              hook_type="conflict", triggers=("political_intrigue", "assassination_attempt"), rarity="common"),
    StoryHook("mysterious_mentor", "Mysterious Mentor", "A mysterious figure offers guidance and training",
              hook_type="guidance", triggers=("dream_sequence", "chance_encounter"), rarity="uncommon"),
    StoryHook("cosmic_destiny", "Cosmic Destiny",
              "The character's actions affect the balance of cosmic forces",
              hook_type="epic", triggers=("epic_level_achievement", "divine_intervention"), rarity="rare"),
]


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


# =============================================================================
# RECORDS
# =============================================================================


@dataclass
class ActivePlotHook:
    hook_id: str
    triggered_by: str
    status: str = "active"
    progress: int = 0
    activated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.hook_id,
            "triggered_by": self.triggered_by,
            "status": self.status,
            "progress": self.progress,
            "activated_at": self.activated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActivePlotHook":
        return cls(
            hook_id=data["id"],
            triggered_by=data.get("triggered_by", ""),
            status=data.get("status", "active"),
            progress=data.get("progress", 0),
            activated_at=datetime.fromisoformat(data["activated_at"]),
        )


@dataclass
class TrackedRelationship:
    """A relationship from one character's point of view, with affection 0..100."""
    relationship_id: str
    name: str
    relationship_type: str = ""
    status: str = "active"
    affection: int = DEFAULT_AFFECTION
    history: list[dict[str, Any]] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.relationship_id,
            "name": self.name,
            "type": self.relationship_type,
            "status": self.status,
            "affection": self.affection,
            "history": list(self.history),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackedRelationship":
        return cls(
            relationship_id=data["id"],
            name=data.get("name", ""),
            relationship_type=data.get("type", ""),
            status=data.get("status", "active"),
            affection=_clamp(int(data.get("affection", DEFAULT_AFFECTION))),
            history=list(data.get("history", [])),
            created_at=datetime.fromisoformat(data["created_at"]),
        )


@dataclass
class CharacterRecord:
    """A character's backstory as tracked over the campaign."""
    character_id: str
    character_name: str
    backstory: dict[str, Any] = field(default_factory=dict)
    plot_hooks: list[ActivePlotHook] = field(default_factory=list)
    relationships: list[TrackedRelationship] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    last_updated: datetime = field(default_factory=datetime.now)

    def has_hook(self, hook_id: str) -> bool:
        return any(h.hook_id == hook_id for h in self.plot_hooks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "character_id": self.character_id,
            "character_name": self.character_name,
            "backstory": self.backstory,
            "plot_hooks": [h.to_dict() for h in self.plot_hooks],
            "relationships": [r.to_dict() for r in self.relationships],
            "created_at": self.created_at.isoformat(),
            "last_updated": self.last_updated.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CharacterRecord":
        return cls(
            character_id=data["character_id"],
            character_name=data.get("character_name", data["character_id"]),
            backstory=data.get("backstory", {}),
            plot_hooks=[ActivePlotHook.from_dict(h) for h in data.get("plot_hooks", [])],
            relationships=[TrackedRelationship.from_dict(r) for r in data.get("relationships", [])],
            created_at=datetime.fromisoformat(data["created_at"]),
            last_updated=datetime.fromisoformat(data["last_updated"]),
        )


@dataclass
class CharacterDevelopment:
    character_id: str
    arc_progression: dict[str, int] = field(default_factory=lambda: {track: 0 for track in ARC_TRACKS})
    character_growth: dict[str, int] = field(
        default_factory=lambda: {trait: STARTING_GROWTH for trait in GROWTH_TRAITS}
    )
    key_moments: list[dict[str, Any]] = field(default_factory=list)
    achievements: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    lessons_learned: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "character_id": self.character_id,
            "arc_progression": dict(self.arc_progression),
            "character_growth": dict(self.character_growth),
            "key_moments": list(self.key_moments),
            "achievements": list(self.achievements),
            "failures": list(self.failures),
            "lessons_learned": list(self.lessons_learned),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CharacterDevelopment":
        development = cls(character_id=data["character_id"])
        development.arc_progression.update(data.get("arc_progression", {}))
        development.character_growth.update(data.get("character_growth", {}))
        development.key_moments = list(data.get("key_moments", []))
        development.achievements = list(data.get("achievements", []))
        development.failures = list(data.get("failures", []))
        development.lessons_learned = list(data.get("lessons_learned", []))
        return development


@dataclass
class StoryEvent:
    event_id: str
    character_id: str
    event_type: str
    title: str = ""
    description: str = ""
    impact: str = "minor"
    lesson: Optional[str] = None
    consequences: list[str] = field(default_factory=list)
    related_characters: list[str] = field(default_factory=list)
    location: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.event_id,
            "character_id": self.character_id,
            "type": self.event_type,
            "title": self.title,
            "description": self.description,
            "impact": self.impact,
            "lesson": self.lesson,
            "consequences": list(self.consequences),
            "related_characters": list(self.related_characters),
            "location": self.location,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StoryEvent":
        return cls(
            event_id=data["id"],
            character_id=data["character_id"],
            event_type=data["type"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            impact=data.get("impact", "minor"),
            lesson=data.get("lesson"),
            consequences=list(data.get("consequences", [])),
            related_characters=list(data.get("related_characters", [])),
            location=data.get("location"),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )


@dataclass
class StoryChapter:
    chapter_id: str
    character_id: str
    title: str
    description: str = ""
    status: str = "active"
    themes: list[str] = field(default_factory=list)
    key_characters: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.chapter_id,
            "character_id": self.character_id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "themes": list(self.themes),
            "key_characters": list(self.key_characters),
            "locations": list(self.locations),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StoryChapter":
        return cls(
            chapter_id=data["id"],
            character_id=data["character_id"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            status=data.get("status", "active"),
            themes=list(data.get("themes", [])),
            key_characters=list(data.get("key_characters", [])),
            locations=list(data.get("locations", [])),
            created_at=datetime.fromisoformat(data["created_at"]),
        )


@dataclass
class CharacterStory:
    character_id: str
    events: list[StoryEvent] = field(default_factory=list)
    chapters: list[StoryChapter] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "character_id": self.character_id,
            "events": [e.to_dict() for e in self.events],
            "chapters": [c.to_dict() for c in self.chapters],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CharacterStory":
        return cls(
            character_id=data["character_id"],
            events=[StoryEvent.from_dict(e) for e in data.get("events", [])],
            chapters=[StoryChapter.from_dict(c) for c in data.get("chapters", [])],
        )


# =============================================================================
# TRACKER
# =============================================================================


class StoryTracker:
    """Session-scoped store of character stories, development and plot hooks."""

    def __init__(self):
        self.plot_hooks: Catalog[StoryHook] = Catalog("plot hook", STORY_HOOKS, PlotHookNotFoundError)
        self.characters: dict[str, CharacterRecord] = {}
        self.stories: dict[str, CharacterStory] = {}
        self.development: dict[str, CharacterDevelopment] = {}
        logger.info(f"Story tracker loaded {len(self.plot_hooks)} plot hooks")

    def _require_character(self, character_id: str) -> CharacterRecord:
        record = self.characters.get(character_id)
        if record is None:
            raise CharacterNotFoundError(character_id)
        return record

    def _story_for(self, character_id: str) -> CharacterStory:
        if character_id not in self.stories:
            self.stories[character_id] = CharacterStory(character_id=character_id)
        return self.stories[character_id]

    def create_character_backstory(
        self,
        character_id: str,
        character_name: Optional[str] = None,
        backstory: Union[Backstory, dict[str, Any], None] = None,
    ) -> CharacterRecord:
        """Start tracking a character; resets development for that id."""
        if isinstance(backstory, Backstory):
            backstory_data = backstory.to_dict()
        else:
            backstory_data = dict(backstory or {})

        record = CharacterRecord(
            character_id=character_id,
            character_name=character_name or character_id,
            backstory=backstory_data,
        )
        self.characters[character_id] = record
        self.development[character_id] = CharacterDevelopment(character_id=character_id)
        logger.info(f"Created backstory record for {record.character_name}")
        return record

    # =========================================================================
    # EVENTS AND DEVELOPMENT
    # =========================================================================

    def add_story_event(
        self,
        character_id: str,
        event_type: str,
        title: str = "",
        description: str = "",
        impact: str = "minor",
        lesson: Optional[str] = None,
        consequences: Optional[list[str]] = None,
        related_characters: Optional[list[str]] = None,
        location: Optional[str] = None,
    ) -> StoryEvent:
        """
        Record an event in a character's story.

        Known event types move the development sheet; any plot hook whose
        triggers include the event type is activated unless already active.
        Characters without a backstory record still get the event stored.
        """
        event = StoryEvent(
            event_id=_new_id("event"),
            character_id=character_id,
            event_type=event_type,
            title=title,
            description=description,
            impact=impact,
            lesson=lesson,
            consequences=list(consequences or []),
            related_characters=list(related_characters or []),
            location=location,
        )
        self._story_for(character_id).events.append(event)
        self._update_development(character_id, event)
        self._check_plot_hook_triggers(character_id, event)
        logger.debug(f"Story event '{event.title or event.event_type}' for {character_id}")
        return event

    def _update_development(self, character_id: str, event: StoryEvent) -> None:
        development = self.development.get(character_id)
        if development is None:
            return

        arc_deltas, growth_deltas = EVENT_EFFECTS.get(event.event_type, ({}, {}))
        for track, delta in arc_deltas.items():
            development.arc_progression[track] = min(100, development.arc_progression[track] + delta)
        for trait, delta in growth_deltas.items():
            development.character_growth[trait] = _clamp(development.character_growth[trait] + delta)

        if event.event_type in ACHIEVEMENT_EVENTS:
            development.achievements.append(event.event_id)
        elif event.event_type in FAILURE_EVENTS:
            development.failures.append(event.event_id)
        if event.lesson:
            development.lessons_learned.append(event.lesson)

        development.key_moments.append(
            {
                "event_id": event.event_id,
                "timestamp": event.timestamp.isoformat(),
                "impact": event.impact,
                "lesson": event.lesson,
            }
        )

    def _check_plot_hook_triggers(self, character_id: str, event: StoryEvent) -> list[ActivePlotHook]:
        record = self.characters.get(character_id)
        if record is None:
            return []

        activated = []
        for hook in self.plot_hooks:
            if event.event_type in hook.triggers and not record.has_hook(hook.item_id):
                active = ActivePlotHook(hook_id=hook.item_id, triggered_by=event.event_id)
                record.plot_hooks.append(active)
                activated.append(active)
                logger.info(f"Activated plot hook {hook.name} for {character_id}")
        if activated:
            record.last_updated = datetime.now()
        return activated

    def activate_plot_hook(self, character_id: str, hook_id: str) -> ActivePlotHook:
        """
        Activate a plot hook by hand.

        Raises:
            CharacterNotFoundError: if the character has no backstory record
            PlotHookNotFoundError: if the hook id is unknown
            PlotHookAlreadyActiveError: if the hook is already active
        """
        record = self._require_character(character_id)
        hook = self.plot_hooks.require(hook_id)
        if record.has_hook(hook_id):
            raise PlotHookAlreadyActiveError(hook_id, character_id)

        active = ActivePlotHook(hook_id=hook.item_id, triggered_by="manual_activation")
        record.plot_hooks.append(active)
        record.last_updated = datetime.now()
        logger.info(f"Manually activated plot hook {hook.name} for {character_id}")
        return active

    def get_all_plot_hooks(self) -> list[StoryHook]:
        return self.plot_hooks.all()

    def get_available_plot_hooks(self, character_id: str) -> list[StoryHook]:
        """Hooks not yet active for the character (all of them for unknown characters)."""
        record = self.characters.get(character_id)
        if record is None:
            return self.plot_hooks.all()
        return [hook for hook in self.plot_hooks if not record.has_hook(hook.item_id)]

    # =========================================================================
    # RELATIONSHIPS AND CHAPTERS
    # =========================================================================

    def add_relationship(
        self,
        character_id: str,
        name: str,
        relationship_type: str = "",
        status: str = "active",
        affection: int = DEFAULT_AFFECTION,
    ) -> TrackedRelationship:
        record = self._require_character(character_id)
        relationship = TrackedRelationship(
            relationship_id=_new_id("rel"),
            name=name,
            relationship_type=relationship_type,
            status=status,
            affection=_clamp(affection),
        )
        record.relationships.append(relationship)
        record.last_updated = datetime.now()
        logger.debug(f"Added relationship {name} for {character_id}")
        return relationship

    def update_relationship_status(
        self,
        character_id: str,
        relationship_id: str,
        new_status: str,
        reason: str = "",
    ) -> TrackedRelationship:
        """
        Change a relationship's status.

        "improved" raises affection by 10, "strained" lowers it by 15 and
        "broken" by 30; affection stays within 0..100.
        """
        record = self._require_character(character_id)
        relationship = next((r for r in record.relationships if r.relationship_id == relationship_id), None)
        if relationship is None:
            raise StoryTrackerError(f"Relationship {relationship_id} not found for {character_id}")

        relationship.history.append(
            {
                "timestamp": datetime.now().isoformat(),
                "old_status": relationship.status,
                "new_status": new_status,
                "reason": reason,
            }
        )
        relationship.status = new_status
        relationship.affection = _clamp(relationship.affection + AFFECTION_CHANGES.get(new_status, 0))
        record.last_updated = datetime.now()
        return relationship

    def create_story_chapter(
        self,
        character_id: str,
        title: str,
        description: str = "",
        themes: Optional[list[str]] = None,
        key_characters: Optional[list[str]] = None,
        locations: Optional[list[str]] = None,
    ) -> StoryChapter:
        chapter = StoryChapter(
            chapter_id=_new_id("chapter"),
            character_id=character_id,
            title=title,
            description=description,
            themes=list(themes or []),
            key_characters=list(key_characters or []),
            locations=list(locations or []),
        )
        self._story_for(character_id).chapters.append(chapter)
        return chapter

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_character_story(self, character_id: str) -> dict[str, Any]:
        """
        Raises:
            StoryTrackerError: if the character has neither a story nor a backstory record
        """
        story = self.stories.get(character_id)
        record = self.characters.get(character_id)
        if story is None and record is None:
            raise StoryTrackerError(f"Character story not found: {character_id}")

        development = self.development.get(character_id)
        return {
            "character_id": character_id,
            "story": (story or CharacterStory(character_id)).to_dict(),
            "backstory": record.to_dict() if record else None,
            "development": development.to_dict() if development else None,
            "summary": self.generate_story_summary(character_id),
        }

    def generate_story_summary(self, character_id: str) -> Optional[dict[str, Any]]:
        story = self.stories.get(character_id)
        record = self.characters.get(character_id)
        if story is None and record is None:
            return None

        development = self.development.get(character_id)
        return {
            "total_events": len(story.events) if story else 0,
            "total_chapters": len(story.chapters) if story else 0,
            "active_relationships": sum(1 for r in record.relationships if r.status == "active") if record else 0,
            "active_plot_hooks": sum(1 for h in record.plot_hooks if h.status == "active") if record else 0,
            "hero_journey_progress": development.arc_progression["hero_journey"] if development else 0,
            "character_growth": dict(development.character_growth) if development else {},
            "major_achievements": len(development.achievements) if development else 0,
            "significant_failures": len(development.failures) if development else 0,
            "lessons_learned": len(development.lessons_learned) if development else 0,
        }

    def get_story_recommendations(self, character_id: str) -> list[dict[str, str]]:
        """DM prompts for a character whose story is stalling. Empty for untracked characters."""
        development = self.development.get(character_id)
        record = self.characters.get(character_id)
        if development is None or record is None:
            return []

        recommendations = []
        if development.arc_progression["hero_journey"] < 30:
            recommendations.append(
                {
                    "type": "plot_development",
                    "priority": "high",
                    "message": "Consider introducing a mentor figure or call to adventure "
                               "to advance the hero's journey",
                }
            )
        if sum(1 for r in record.relationships if r.status == "active") < 3:
            recommendations.append(
                {
                    "type": "character_development",
                    "priority": "medium",
                    "message": "Develop more character relationships to add depth to the story",
                }
            )
        if not any(h.status == "active" for h in record.plot_hooks):
            recommendations.append(
                {
                    "type": "plot_hooks",
                    "priority": "medium",
                    "message": "Consider activating a plot hook to drive the story forward",
                }
            )
        low_traits = [trait for trait, value in development.character_growth.items() if value < 40]
        if low_traits:
            recommendations.append(
                {
                    "type": "character_growth",
                    "priority": "low",
                    "message": f"Focus on developing: {', '.join(low_traits)}",
                }
            )
        return recommendations

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def export_story_data(self) -> dict[str, Any]:
        return {
            "stories": {cid: s.to_dict() for cid, s in self.stories.items()},
            "backstories": {cid: r.to_dict() for cid, r in self.characters.items()},
            "plotHooks": self.plot_hooks.to_dict(),
            "characterDevelopment": {cid: d.to_dict() for cid, d in self.development.items()},
            "exportedAt": datetime.now().isoformat(),
            "version": EXPORT_VERSION,
        }

    def import_story_data(self, data: dict[str, Any]) -> int:
        """
        Replace tracked state with an export. Returns the number of characters.

        Raises:
            StoryTrackerError: if a record is malformed
        """
        try:
            stories = {cid: CharacterStory.from_dict(s) for cid, s in data.get("stories", {}).items()}
            characters = {cid: CharacterRecord.from_dict(r) for cid, r in data.get("backstories", {}).items()}
            development = {
                cid: CharacterDevelopment.from_dict(d)
                for cid, d in data.get("characterDevelopment", {}).items()
            }
        except (KeyError, TypeError, ValueError) as e:
            raise StoryTrackerError(f"Invalid story data: {e}") from e

        self.stories = stories
        self.characters = characters
        self.development = development
        logger.info(f"Imported story data for {len(characters)} characters")
        return len(characters)
