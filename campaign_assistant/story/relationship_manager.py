"""
Relationship tracking between characters.

Each relationship carries a trust level in [-100, 100]. Events, conflicts
and alliances move trust by fixed amounts and the result is always clamped.
Status is free text chosen by the caller.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
import logging
import uuid

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.story.catalog import Catalog
from campaign_assistant.story.relationship_data import (
    ALLIANCE_TYPES,
    CONFLICT_TYPES,
    LOWEST_TRUST_DESCRIPTION,
    POSITIVE_DYNAMICS,
    RELATIONSHIP_TYPES,
    SOCIAL_DYNAMICS,
    SOCIAL_ENCOUNTER_DESCRIPTIONS,
    SOCIAL_ENCOUNTER_OUTCOMES,
    SOCIAL_ENCOUNTER_TYPES,
    TRUST_LADDER,
    AllianceType,
    ConflictType,
    RelationshipType,
    SocialDynamic,
)

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"

MIN_TRUST = -100
MAX_TRUST = 100

CONFLICT_SEVERITY_IMPACT = {"minor": -10, "major": -25}
SEVERE_CONFLICT_IMPACT = -50
FORGIVENESS_IMPACT = 20
RESOLUTION_IMPACT = 10
ESCALATION_IMPACT = -30
ALLIANCE_FORMED_IMPACT = 15
ALLIANCE_DISSOLVED_IMPACT = -20
POSITIVE_PROGRESSION_IMPACT = 5

DAYS_PER_PROGRESSION_STEP = 30


class RelationshipManagerError(Exception):
    """Base class for relationship errors."""
    pass


class RelationshipNotFoundError(RelationshipManagerError):
    def __init__(self, relationship_id: str):
        self.relationship_id = relationship_id
        super().__init__(f"Relationship {relationship_id} not found")


class ConflictNotFoundError(RelationshipManagerError):
    def __init__(self, conflict_id: str, relationship_id: str):
        self.conflict_id = conflict_id
        super().__init__(f"Conflict {conflict_id} not found in relationship {relationship_id}")


class AllianceNotFoundError(RelationshipManagerError):
    def __init__(self, alliance_id: str, relationship_id: str):
        self.alliance_id = alliance_id
        super().__init__(f"Alliance {alliance_id} not found in relationship {relationship_id}")


class DuplicateRelationshipError(RelationshipManagerError):
    def __init__(self, relationship_id: str):
        self.relationship_id = relationship_id
        super().__init__(f"Relationship {relationship_id} already exists")


def clamp_trust(value: int) -> int:
    return max(MIN_TRUST, min(MAX_TRUST, value))


def trust_description(trust_level: int) -> str:
    for lower_bound, description in TRUST_LADDER:
        if trust_level >= lower_bound:
            return description
    return LOWEST_TRUST_DESCRIPTION


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


# =============================================================================
# RECORDS
# =============================================================================


@dataclass
class RelationshipEvent:
    event_id: str
    event_type: str
    description: str
    impact: int = 0
    details: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.event_id,
            "type": self.event_type,
            "description": self.description,
            "impact": self.impact,
            "details": dict(self.details),
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RelationshipEvent":
        return cls(
            event_id=data["id"],
            event_type=data["type"],
            description=data.get("description", ""),
            impact=data.get("impact", 0),
            details=data.get("details", {}),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )


@dataclass
class Conflict:
    conflict_id: str
    conflict_type: str
    description: str
    severity: str = "minor"
    status: str = "active"
    resolution_methods: list[str] = field(default_factory=list)
    escalation_risk: str = "medium"
    resolution_method: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    resolved_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.conflict_id,
            "type": self.conflict_type,
            "description": self.description,
            "severity": self.severity,
            "status": self.status,
            "resolution_methods": list(self.resolution_methods),
            "escalation_risk": self.escalation_risk,
            "resolution_method": self.resolution_method,
            "created_at": self.created_at.isoformat(),
            "resolved_at": self.resolved_at.isoformat() if self.resolved_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Conflict":
        return cls(
            conflict_id=data["id"],
            conflict_type=data["type"],
            description=data.get("description", ""),
            severity=data.get("severity", "minor"),
            status=data.get("status", "active"),
            resolution_methods=list(data.get("resolution_methods", [])),
            escalation_risk=data.get("escalation_risk", "medium"),
            resolution_method=data.get("resolution_method"),
            created_at=datetime.fromisoformat(data["created_at"]),
            resolved_at=_parse_time(data.get("resolved_at")),
        )


@dataclass
class Alliance:
    alliance_id: str
    alliance_type: str
    terms: dict[str, Any] = field(default_factory=dict)
    benefits: list[str] = field(default_factory=list)
    risks: list[str] = field(default_factory=list)
    status: str = "active"
    formed_at: datetime = field(default_factory=datetime.now)
    dissolved_at: Optional[datetime] = None
    dissolution_reason: str = ""

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.alliance_id,
            "type": self.alliance_type,
            "terms": dict(self.terms),
            "benefits": list(self.benefits),
            "risks": list(self.risks),
            "status": self.status,
            "formed_at": self.formed_at.isoformat(),
            "dissolved_at": self.dissolved_at.isoformat() if self.dissolved_at else None,
            "dissolution_reason": self.dissolution_reason,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Alliance":
        return cls(
            alliance_id=data["id"],
            alliance_type=data["type"],
            terms=data.get("terms", {}),
            benefits=list(data.get("benefits", [])),
            risks=list(data.get("risks", [])),
            status=data.get("status", "active"),
            formed_at=datetime.fromisoformat(data["formed_at"]),
            dissolved_at=_parse_time(data.get("dissolved_at")),
            dissolution_reason=data.get("dissolution_reason", ""),
        )


@dataclass
class Relationship:
    """Relationship between two characters, keyed "<first>_<second>"."""
    relationship_id: str
    characters: tuple[str, str]
    relationship_type: str
    status: str = "neutral"
    trust_level: int = 0
    history: list[RelationshipEvent] = field(default_factory=list)
    conflicts: list[Conflict] = field(default_factory=list)
    alliances: list[Alliance] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    last_interaction: datetime = field(default_factory=datetime.now)

    def adjust_trust(self, delta: int) -> int:
        self.trust_level = clamp_trust(self.trust_level + delta)
        self.last_interaction = datetime.now()
        return self.trust_level

    def other_character(self, character_id: str) -> Optional[str]:
        return next((c for c in self.characters if c != character_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.relationship_id,
            "characters": list(self.characters),
            "type": self.relationship_type,
            "status": self.status,
            "trust_level": self.trust_level,
            "history": [e.to_dict() for e in self.history],
            "conflicts": [c.to_dict() for c in self.conflicts],
            "alliances": [a.to_dict() for a in self.alliances],
            "created_at": self.created_at.isoformat(),
            "last_interaction": self.last_interaction.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Relationship":
        first, second = data["characters"]
        return cls(
            relationship_id=data["id"],
            characters=(first, second),
            relationship_type=data["type"],
            status=data.get("status", "neutral"),
            trust_level=clamp_trust(int(data.get("trust_level", 0))),
            history=[RelationshipEvent.from_dict(e) for e in data.get("history", [])],
            conflicts=[Conflict.from_dict(c) for c in data.get("conflicts", [])],
            alliances=[Alliance.from_dict(a) for a in data.get("alliances", [])],
            created_at=datetime.fromisoformat(data["created_at"]),
            last_interaction=datetime.fromisoformat(data["last_interaction"]),
        )


@dataclass
class SocialEncounter:
    relationship_id: str
    encounter_type: str
    description: str
    possible_outcomes: list[str]
    context: str = "neutral"

    def to_dict(self) -> dict[str, Any]:
        return {
            "relationship_id": self.relationship_id,
            "type": self.encounter_type,
            "description": self.description,
            "possible_outcomes": list(self.possible_outcomes),
            "context": self.context,
        }


# =============================================================================
# MANAGER
# =============================================================================


class RelationshipManager:
    """
    Owns every relationship of a session.

    Usage:
        manager = RelationshipManager(dice=DiceRoller(seed=1))
        rel = manager.create_relationship("aria", "brom", "loyal_companion")
        conflict = manager.create_conflict(rel.relationship_id, "personal_betrayal", "Lied", "major")
        manager.resolve_conflict(rel.relationship_id, conflict.conflict_id, "forgiveness")
    """

    def __init__(self, dice: Optional[DiceRoller] = None):
        self.dice = dice or DiceRoller()
        self.relationships: dict[str, Relationship] = {}
        self.relationship_types: Catalog[RelationshipType] = Catalog(
            "relationship type", RELATIONSHIP_TYPES, RelationshipManagerError
        )
        self.social_dynamics: Catalog[SocialDynamic] = Catalog(
            "social dynamic", SOCIAL_DYNAMICS, RelationshipManagerError
        )
        self.conflict_types: Catalog[ConflictType] = Catalog("conflict type", CONFLICT_TYPES, RelationshipManagerError)
        self.alliance_types: Catalog[AllianceType] = Catalog("alliance type", ALLIANCE_TYPES, RelationshipManagerError)
        logger.info(
            f"Relationship manager loaded {len(self.relationship_types)} relationship types, "
            f"{len(self.conflict_types)} conflict types, {len(self.alliance_types)} alliance types"
        )

    def get_relationship(self, relationship_id: str) -> Relationship:
        """
        Raises:
            RelationshipNotFoundError: if no relationship has that id
        """
        relationship = self.relationships.get(relationship_id)
        if relationship is None:
            raise RelationshipNotFoundError(relationship_id)
        return relationship

    def create_relationship(
        self,
        character1_id: str,
        character2_id: str,
        relationship_type: str,
        initial_status: str = "neutral",
    ) -> Relationship:
        """
        Start tracking a relationship at trust 0.

        Raises:
            DuplicateRelationshipError: if the ordered pair is already tracked
        """
        relationship_id = f"{character1_id}_{character2_id}"
        if relationship_id in self.relationships:
            raise DuplicateRelationshipError(relationship_id)
        if relationship_type not in self.relationship_types:
            logger.debug(f"Relationship type '{relationship_type}' is not in the catalog")

        relationship = Relationship(
            relationship_id=relationship_id,
            characters=(character1_id, character2_id),
            relationship_type=relationship_type,
            status=initial_status,
        )
        self.relationships[relationship_id] = relationship
        logger.debug(f"Created relationship {relationship_id} ({relationship_type})")
        return relationship

    def update_relationship_status(self, relationship_id: str, new_status: str, reason: str = "") -> Relationship:
        relationship = self.get_relationship(relationship_id)
        old_status = relationship.status
        relationship.status = new_status
        relationship.last_interaction = datetime.now()
        relationship.history.append(
            RelationshipEvent(
                event_id=_new_id("event"),
                event_type="status_change",
                description=reason,
                details={"old_status": old_status, "new_status": new_status},
            )
        )
        return relationship

    def add_relationship_event(
        self,
        relationship_id: str,
        event_type: str,
        description: str,
        impact: int = 0,
    ) -> RelationshipEvent:
        """Record an event and move trust by its impact."""
        relationship = self.get_relationship(relationship_id)
        event = RelationshipEvent(
            event_id=_new_id("event"),
            event_type=event_type,
            description=description,
            impact=impact,
        )
        relationship.history.append(event)
        relationship.adjust_trust(impact)
        return event

    def create_conflict(
        self,
        relationship_id: str,
        conflict_type: str,
        description: str,
        severity: str = "minor",
    ) -> Conflict:
        """
        Open a conflict. Trust drops by 10 (minor), 25 (major) or 50 (anything else).

        Raises:
            RelationshipNotFoundError: if the relationship is unknown
            RelationshipManagerError: if the conflict type is unknown
        """
        relationship = self.get_relationship(relationship_id)
        type_data = self.conflict_types.require(conflict_type)

        conflict = Conflict(
            conflict_id=_new_id("conflict"),
            conflict_type=conflict_type,
            description=description,
            severity=severity,
            resolution_methods=list(type_data.resolution_methods),
            escalation_risk=type_data.escalation_risk,
        )
        relationship.conflicts.append(conflict)
        relationship.adjust_trust(CONFLICT_SEVERITY_IMPACT.get(severity, SEVERE_CONFLICT_IMPACT))
        logger.debug(f"Conflict {conflict.conflict_id} ({severity}) in {relationship_id}, trust now {relationship.trust_level}")
        return conflict

    def resolve_conflict(
        self,
        relationship_id: str,
        conflict_id: str,
        resolution_method: str,
        outcome: str = "resolved",
    ) -> Conflict:
        """
        Close a conflict with an outcome.

        "resolved" restores 20 trust for forgiveness and 10 otherwise,
        "escalated" costs 30, any other outcome leaves trust unchanged.
        """
        relationship = self.get_relationship(relationship_id)
        conflict = next((c for c in relationship.conflicts if c.conflict_id == conflict_id), None)
        if conflict is None:
            raise ConflictNotFoundError(conflict_id, relationship_id)

        conflict.status = outcome
        conflict.resolved_at = datetime.now()
        conflict.resolution_method = resolution_method

        adjustment = 0
        if outcome == "resolved":
            adjustment = FORGIVENESS_IMPACT if resolution_method == "forgiveness" else RESOLUTION_IMPACT
        elif outcome == "escalated":
            adjustment = ESCALATION_IMPACT
        relationship.adjust_trust(adjustment)
        return conflict

    def form_alliance(
        self,
        relationship_id: str,
        alliance_type: str,
        terms: Optional[dict[str, Any]] = None,
    ) -> Alliance:
        relationship = self.get_relationship(relationship_id)
        type_data = self.alliance_types.require(alliance_type)

        alliance = Alliance(
            alliance_id=_new_id("alliance"),
            alliance_type=alliance_type,
            terms=dict(terms or {}),
            benefits=list(type_data.benefits),
            risks=list(type_data.risks),
        )
        relationship.alliances.append(alliance)
        relationship.adjust_trust(ALLIANCE_FORMED_IMPACT)
        return alliance

    def dissolve_alliance(self, relationship_id: str, alliance_id: str, reason: str = "") -> Alliance:
        relationship = self.get_relationship(relationship_id)
        alliance = next((a for a in relationship.alliances if a.alliance_id == alliance_id), None)
        if alliance is None:
            raise AllianceNotFoundError(alliance_id, relationship_id)

        alliance.status = "dissolved"
        alliance.dissolved_at = datetime.now()
        alliance.dissolution_reason = reason
        relationship.adjust_trust(ALLIANCE_DISSOLVED_IMPACT)
        return alliance

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_relationship_status(self, relationship_id: str) -> Optional[dict[str, Any]]:
        """Summary of a relationship, or None if it is not tracked."""
        relationship = self.relationships.get(relationship_id)
        if relationship is None:
            return None
        return {
            "id": relationship.relationship_id,
            "characters": list(relationship.characters),
            "type": relationship.relationship_type,
            "status": relationship.status,
            "trust_level": relationship.trust_level,
            "trust_description": trust_description(relationship.trust_level),
            "active_conflicts": sum(1 for c in relationship.conflicts if c.is_active),
            "active_alliances": sum(1 for a in relationship.alliances if a.is_active),
            "last_interaction": relationship.last_interaction.isoformat(),
        }

    def get_character_relationships(self, character_id: str) -> list[dict[str, Any]]:
        results = []
        for relationship in self.relationships.values():
            if character_id in relationship.characters:
                status = self.get_relationship_status(relationship.relationship_id)
                status["other_character"] = relationship.other_character(character_id)
                results.append(status)
        return results

    # =========================================================================
    # GENERATION
    # =========================================================================

    def generate_social_encounter(
        self,
        character1_id: str,
        character2_id: str,
        context: str = "neutral",
    ) -> SocialEncounter:
        """Random interaction; an untracked pair gets a relationship of random type."""
        relationship_id = f"{character1_id}_{character2_id}"
        if relationship_id not in self.relationships:
            random_type = self.dice.choice(self.relationship_types.ids())
            self.create_relationship(character1_id, character2_id, random_type)

        encounter_type = self.dice.choice(SOCIAL_ENCOUNTER_TYPES)
        return SocialEncounter(
            relationship_id=relationship_id,
            encounter_type=encounter_type,
            description=self.dice.choice(SOCIAL_ENCOUNTER_DESCRIPTIONS[encounter_type]),
            possible_outcomes=list(SOCIAL_ENCOUNTER_OUTCOMES[encounter_type]),
            context=context,
        )

    def simulate_relationship_progression(self, relationship_id: str, days: int = 30) -> list[dict[str, Any]]:
        """
        Let time pass: one progression step per 30 days (at least one).

        Each step has a 30% chance of a positive event (+5 trust from one of
        the type's positive dynamics), 30% of a neutral maintenance event,
        and otherwise a 20% chance of a new minor conflict.
        """
        relationship = self.get_relationship(relationship_id)
        type_data = self.relationship_types.get(relationship.relationship_type)
        if type_data is None:
            return []

        events: list[dict[str, Any]] = []
        for _ in range(max(1, days // DAYS_PER_PROGRESSION_STEP)):
            roll = self.dice.random()
            if roll < 0.3:
                positive = [d for d in type_data.dynamics if d in POSITIVE_DYNAMICS]
                if positive:
                    dynamic = self.dice.choice(positive)
                    event = self.add_relationship_event(
                        relationship_id, "positive_progression",
                        f"Relationship strengthened through {dynamic}", POSITIVE_PROGRESSION_IMPACT,
                    )
                    events.append(event.to_dict())
            elif roll < 0.6:
                event = self.add_relationship_event(
                    relationship_id, "maintenance", "Relationship continues with regular interaction", 0,
                )
                events.append(event.to_dict())
            elif self.dice.random() < 0.2 and type_data.common_conflicts:
                situation = self.dice.choice(type_data.common_conflicts)
                conflict = self.create_conflict(
                    relationship_id,
                    self.dice.choice(self.conflict_types.ids()),
                    f"A {situation} situation arises",
                    "minor",
                )
                events.append({"type": "conflict_created", "conflict": conflict.to_dict()})
        return events

    # =========================================================================
    # CATALOGS AND PERSISTENCE
    # =========================================================================

    def get_all_relationship_types(self) -> list[RelationshipType]:
        return self.relationship_types.all()

    def get_all_social_dynamics(self) -> list[SocialDynamic]:
        return self.social_dynamics.all()

    def get_all_conflict_types(self) -> list[ConflictType]:
        return self.conflict_types.all()

    def get_all_alliance_types(self) -> list[AllianceType]:
        return self.alliance_types.all()

    def export_relationship_data(self) -> dict[str, Any]:
        return {
            "relationships": {rid: r.to_dict() for rid, r in self.relationships.items()},
            "relationshipTypes": self.relationship_types.to_dict(),
            "socialDynamics": self.social_dynamics.to_dict(),
            "conflictTypes": self.conflict_types.to_dict(),
            "alliances": self.alliance_types.to_dict(),
            "exportedAt": datetime.now().isoformat(),
            "version": EXPORT_VERSION,
        }

    def import_relationship_data(self, data: dict[str, Any]) -> int:
        """
        Replace tracked relationships with those from an export.

        Catalogs in the export are ignored; they are static.

        Raises:
            RelationshipManagerError: if a relationship record is malformed
        """
        try:
            relationships = {
                rid: Relationship.from_dict(record)
                for rid, record in data.get("relationships", {}).items()
            }
        except (KeyError, TypeError, ValueError) as e:
            raise RelationshipManagerError(f"Invalid relationship data: {e}") from e

        self.relationships = relationships
        logger.info(f"Imported {len(relationships)} relationships")
        return len(relationships)
