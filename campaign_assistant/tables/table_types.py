"""
Table type definitions for the campaign assistant.

A RandomTable is a named, dice-indexed collection of TableEntry rows. How a
row is chosen depends on the table's ResolutionMethod: ranged tables match
the dice total against [roll_min, roll_max], weighted tables draw against
cumulative weights, conditional tables filter on the generation context,
and nested tables follow a row's sub_table reference.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional
import logging

from campaign_assistant.data_models import DiceResult

logger = logging.getLogger(__name__)


MISSED_ROLL_TEXT = "Unusual result (reroll or DM discretion)"
NO_VALID_ENTRIES_TEXT = "No suitable result (check parameters)"
UNKNOWN_TEXT = "Unknown"
DEFAULT_DESCRIPTION = "No description available"


class ResolutionMethod(str, Enum):
    """How an entry is selected from a table."""
    STANDARD = "standard"        # Dice total matched against entry ranges
    PERCENTILE = "percentile"    # Same as standard, d100 tables
    WEIGHTED = "weighted"        # Cumulative weights, uniform real draw
    CONDITIONAL = "conditional"  # Filter on context, uniform pick among survivors
    NESTED = "nested"            # Standard, then resolve the entry's sub_table

    @property
    def is_range_based(self) -> bool:
        return self in (ResolutionMethod.STANDARD, ResolutionMethod.PERCENTILE, ResolutionMethod.NESTED)


class ConditionType(str, Enum):
    """Entry condition kinds evaluated against the generation context."""
    PARAMETER = "parameter"  # context[key] == value
    RANGE = "range"          # min <= context[key] <= max
    EXISTS = "exists"        # key present in context


class TableCategory(str, Enum):
    """Categories of tables."""
    NAMES = "names"
    CHARACTER_GENERATION = "character-generation"
    NPCS = "npcs"
    LOCATIONS = "locations"
    DUNGEONS = "dungeons"
    PLOT_DEVELOPMENT = "plot-development"
    ADVENTURES = "adventures"
    ENCOUNTERS = "encounters"
    TREASURE = "treasure"
    ENVIRONMENT = "environment"
    GENERAL = "general"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "TableCategory":
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


# =============================================================================
# ENTRIES
# =============================================================================


@dataclass(frozen=True)
class EntryCondition:
    """
    A single predicate on the generation context.

    A condition with no type is unconditional. Range conditions with a
    missing or non-comparable context value evaluate false.
    """
    condition_type: Optional[ConditionType]
    key: str
    value: Any = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    def evaluate(self, parameters: dict[str, Any]) -> bool:
        if self.condition_type == ConditionType.PARAMETER:
            return self.key in parameters and parameters[self.key] == self.value
        if self.condition_type == ConditionType.EXISTS:
            return parameters.get(self.key) is not None
        if self.condition_type == ConditionType.RANGE:
            actual = parameters.get(self.key)
            if actual is None:
                return False
            try:
                if self.min_value is not None and actual < self.min_value:
                    return False
                if self.max_value is not None and actual > self.max_value:
                    return False
            except TypeError:
                return False
            return True
        return True

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.condition_type.value if self.condition_type else None,
            "key": self.key,
        }
        if self.condition_type == ConditionType.RANGE:
            data["min"] = self.min_value
            data["max"] = self.max_value
        elif self.value is not None:
            data["value"] = self.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EntryCondition":
        if not isinstance(data, dict):
            raise TypeError(f"condition must be an object, got {type(data).__name__}")
        try:
            condition_type: Optional[ConditionType] = ConditionType(data.get("type"))
        except ValueError:
            logger.warning(f"Unknown condition type '{data.get('type')}', treating as always true")
            condition_type = None
        return cls(
            condition_type=condition_type,
            key=data.get("key", ""),
            value=data.get("value"),
            min_value=data.get("min"),
            max_value=data.get("max"),
        )


def parameter_is(key: str, value: Any) -> EntryCondition:
    return EntryCondition(ConditionType.PARAMETER, key, value=value)


def parameter_between(key: str, min_value: Optional[float], max_value: Optional[float]) -> EntryCondition:
    return EntryCondition(ConditionType.RANGE, key, min_value=min_value, max_value=max_value)


def parameter_exists(key: str) -> EntryCondition:
    return EntryCondition(ConditionType.EXISTS, key)


@dataclass(frozen=True)
class AdditionalRoll:
    """A follow-up resolution triggered whenever an entry is chosen."""
    table_id: str
    parameters: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"table": self.table_id, "parameters": dict(self.parameters)}


# Keys with dedicated fields; anything else in a serialized entry is an attribute
_ENTRY_FIELD_KEYS = {
    "min", "max", "range", "text", "result", "weight", "subtable", "sub_table",
    "dice", "conditions", "additionalRolls", "additional_rolls", "roll_min", "roll_max",
}


@dataclass(frozen=True)
class TableEntry:
    """
    A single row of a random table.

    Table-specific data (race, gender, cr, value, services...) lives in the
    attributes bag and is read through get() or the typed accessors.
    """
    text: str
    roll_min: Optional[int] = None
    roll_max: Optional[int] = None
    weight: float = 1

    # Nested resolution
    sub_table: Optional[str] = None
    additional_rolls: tuple[AdditionalRoll, ...] = ()

    # Inline dice rolled whenever the entry is chosen (e.g. quantity of coins)
    dice: Optional[str] = None

    conditions: tuple[EntryCondition, ...] = ()
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def has_range(self) -> bool:
        return self.roll_min is not None and self.roll_max is not None

    def matches_roll(self, roll: int) -> bool:
        """Check if a roll value falls within this entry's range."""
        return self.has_range and self.roll_min <= roll <= self.roll_max

    def conditions_met(self, parameters: dict[str, Any]) -> bool:
        return all(condition.evaluate(parameters) for condition in self.conditions)

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def get_str(self, key: str, default: str = "") -> str:
        value = self.attributes.get(key)
        return str(value) if value is not None else default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self.attributes.get(key)
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @property
    def race(self) -> Optional[str]:
        return self.attributes.get("race")

    @property
    def gender(self) -> Optional[str]:
        return self.attributes.get("gender")

    @property
    def name(self) -> Optional[str]:
        return self.attributes.get("name")

    @property
    def description(self) -> Optional[str]:
        return self.attributes.get("description")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        if self.has_range:
            data["min"] = self.roll_min
            data["max"] = self.roll_max
        if self.weight != 1:
            data["weight"] = self.weight
        if self.sub_table:
            data["subtable"] = self.sub_table
        if self.dice:
            data["dice"] = self.dice
        if self.conditions:
            data["conditions"] = [c.to_dict() for c in self.conditions]
        if self.additional_rolls:
            data["additionalRolls"] = [r.to_dict() for r in self.additional_rolls]
        data.update(self.attributes)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableEntry":
        """
        Build an entry from a serialized row.

        Accepts both {min, max, text, ...} rows and {range: [min, max],
        result, description} rows.

        Raises:
            TypeError: if the row is not an object
            ValueError: if a range bound or weight is not numeric
        """
        if not isinstance(data, dict):
            raise TypeError(f"entry must be an object, got {type(data).__name__}")

        roll_min = data.get("min", data.get("roll_min"))
        roll_max = data.get("max", data.get("roll_max"))
        if "range" in data and data["range"] is not None:
            roll_min, roll_max = data["range"][0], data["range"][1]

        return cls(
            text=str(data.get("text", data.get("result", ""))),
            roll_min=int(roll_min) if roll_min is not None else None,
            roll_max=int(roll_max) if roll_max is not None else None,
            weight=float(data.get("weight", 1)),
            sub_table=data.get("subtable", data.get("sub_table")),
            dice=data.get("dice"),
            conditions=tuple(
                EntryCondition.from_dict(c) for c in data.get("conditions", [])
            ),
            additional_rolls=tuple(
                AdditionalRoll(table_id=r["table"], parameters=r.get("parameters", {}))
                for r in data.get("additionalRolls", data.get("additional_rolls", []))
            ),
            attributes={k: v for k, v in data.items() if k not in _ENTRY_FIELD_KEYS},
        )


# =============================================================================
# TABLES
# =============================================================================


@dataclass(frozen=True)
class RandomTable:
    """
    A random table.

    Frozen once constructed; the entries list is stored as a tuple.
    """
    table_id: str
    name: str
    dice_expression: str
    method: ResolutionMethod
    entries: tuple[TableEntry, ...]
    category: TableCategory = TableCategory.GENERAL
    description: str = DEFAULT_DESCRIPTION

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "method", ResolutionMethod(self.method))

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def min_roll(self) -> Optional[int]:
        ranged = [e.roll_min for e in self.entries if e.has_range]
        return min(ranged) if ranged else None

    @property
    def max_roll(self) -> Optional[int]:
        ranged = [e.roll_max for e in self.entries if e.has_range]
        return max(ranged) if ranged else None

    @property
    def total_weight(self) -> float:
        return sum(entry.weight for entry in self.entries)

    def find_entry(self, roll: int) -> Optional[TableEntry]:
        """First entry whose range contains the roll."""
        for entry in self.entries:
            if entry.matches_roll(roll):
                return entry
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.table_id,
            "name": self.name,
            "dice": self.dice_expression,
            "method": self.method.value,
            "category": self.category.value,
            "description": self.description,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RandomTable":
        entries = data.get("entries", data.get("results", []))
        return cls(
            table_id=data["id"],
            name=data.get("name", data["id"]),
            dice_expression=data.get("dice", data.get("diceExpression", "1d100")),
            method=ResolutionMethod(data.get("method", "standard")),
            entries=tuple(TableEntry.from_dict(e) for e in entries),
            category=TableCategory.from_value(data.get("category")),
            description=data.get("description") or DEFAULT_DESCRIPTION,
        )


# =============================================================================
# RESULTS
# =============================================================================


@dataclass
class ResolvedEntry:
    """
    The entry chosen by one resolution, with substitutions applied.

    Fallbacks carry fallback=True and a fallback_reason instead of raising.
    """
    text: str
    roll: Optional[int] = None
    entry: Optional[TableEntry] = None
    attributes: dict[str, Any] = field(default_factory=dict)
    fallback: bool = False
    fallback_reason: Optional[str] = None  # missed_roll, no_valid_entries, depth_exceeded, empty_table
    dice_result: Optional[DiceResult] = None
    subtable_result: Optional["ResolvedResult"] = None
    additional_results: list["ResolvedResult"] = field(default_factory=list)

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    @property
    def display_text(self) -> str:
        """Text, or the name attribute for entries with empty text."""
        return self.text or self.attributes.get("name") or UNKNOWN_TEXT

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.attributes)
        data["text"] = self.text
        if self.roll is not None:
            data["roll"] = self.roll
        if self.fallback:
            data["fallback"] = True
            data["fallback_reason"] = self.fallback_reason
        if self.dice_result is not None:
            data["dice_result"] = self.dice_result.to_dict()
        if self.subtable_result is not None:
            data["subtable_result"] = self.subtable_result.to_dict()
        if self.additional_results:
            data["additional_results"] = [r.to_dict() for r in self.additional_results]
        return data


@dataclass
class ResolvedResult:
    """Complete result of one resolution call."""
    table_id: str
    table_name: str
    result: ResolvedEntry
    parameters: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.result.text

    @property
    def fallback(self) -> bool:
        return self.result.fallback

    def get_full_description(self) -> str:
        """Result text followed by every nested result, indented."""
        parts = [self.result.text]
        nested = []
        if self.result.subtable_result is not None:
            nested.append(self.result.subtable_result)
        nested.extend(self.result.additional_results)
        for sub in nested:
            parts.append(f"  -> {sub.get_full_description()}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "table": self.table_id,
            "result": self.result.to_dict(),
            "parameters": dict(self.parameters),
            "timestamp": self.timestamp.isoformat(),
            "metadata": dict(self.metadata),
        }
