"""
Run log for table engine observability.

Records every dice roll, table lookup and composite generation performed
during a session so the sequence can be inspected or exported afterwards.
A RunLog is an ordinary object handed to the DiceRoller and the resolver;
nothing here is global.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional
import json
import logging

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Types of events that can be logged."""

    ROLL = "roll"  # Dice roll
    TABLE_LOOKUP = "table_lookup"  # Table resolution
    GENERATION = "generation"  # Composite generator output
    CUSTOM = "custom"


@dataclass
class LogEvent:
    """Base class for all logged events."""

    # Subclasses set the correct value in __post_init__
    event_type: EventType = EventType.CUSTOM
    timestamp: datetime = field(default_factory=datetime.now)
    sequence_number: int = 0
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "sequence_number": self.sequence_number,
            "context": self.context,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogEvent":
        return cls(
            event_type=EventType(data["event_type"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            sequence_number=data.get("sequence_number", 0),
            context=data.get("context", {}),
        )

    def __str__(self) -> str:
        return f"[{self.sequence_number}] {self.event_type.value.upper()} {self.context}"


@dataclass
class RollEvent(LogEvent):
    """A dice roll event."""

    notation: str = ""
    rolls: list[int] = field(default_factory=list)
    modifier: int = 0
    total: int = 0
    reason: str = ""

    def __post_init__(self):
        self.event_type = EventType.ROLL

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base.update(
            {
                "notation": self.notation,
                "rolls": self.rolls,
                "modifier": self.modifier,
                "total": self.total,
                "reason": self.reason,
            }
        )
        return base

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RollEvent":
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            sequence_number=data.get("sequence_number", 0),
            context=data.get("context", {}),
            notation=data.get("notation", ""),
            rolls=data.get("rolls", []),
            modifier=data.get("modifier", 0),
            total=data.get("total", 0),
            reason=data.get("reason", ""),
        )

    def __str__(self) -> str:
        return f"[{self.sequence_number}] ROLL {self.notation}: {self.rolls} = {self.total} ({self.reason})"


@dataclass
class TableLookupEvent(LogEvent):
    """A table resolution event."""

    table_id: str = ""
    table_name: str = ""
    method: str = ""
    roll_total: Optional[int] = None
    result_text: str = ""
    fallback: bool = False
    depth: int = 0

    def __post_init__(self):
        self.event_type = EventType.TABLE_LOOKUP

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base.update(
            {
                "table_id": self.table_id,
                "table_name": self.table_name,
                "method": self.method,
                "roll_total": self.roll_total,
                "result_text": self.result_text,
                "fallback": self.fallback,
                "depth": self.depth,
            }
        )
        return base

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableLookupEvent":
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            sequence_number=data.get("sequence_number", 0),
            context=data.get("context", {}),
            table_id=data.get("table_id", ""),
            table_name=data.get("table_name", ""),
            method=data.get("method", ""),
            roll_total=data.get("roll_total"),
            result_text=data.get("result_text", ""),
            fallback=data.get("fallback", False),
            depth=data.get("depth", 0),
        )

    def __str__(self) -> str:
        roll_str = f" rolled {self.roll_total}" if self.roll_total is not None else ""
        flag = " [FALLBACK]" if self.fallback else ""
        return f"[{self.sequence_number}] TABLE {self.table_name}{roll_str}: {self.result_text}{flag}"


@dataclass
class GenerationEvent(LogEvent):
    """A composite generator producing a record (NPC, backstory, outline)."""

    generator: str = ""
    summary: str = ""

    def __post_init__(self):
        self.event_type = EventType.GENERATION

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base.update({"generator": self.generator, "summary": self.summary})
        return base

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenerationEvent":
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            sequence_number=data.get("sequence_number", 0),
            context=data.get("context", {}),
            generator=data.get("generator", ""),
            summary=data.get("summary", ""),
        )

    def __str__(self) -> str:
        return f"[{self.sequence_number}] GENERATE {self.generator}: {self.summary}"


_EVENT_CLASSES: dict[EventType, type[LogEvent]] = {
    EventType.ROLL: RollEvent,
    EventType.TABLE_LOOKUP: TableLookupEvent,
    EventType.GENERATION: GenerationEvent,
}


class RunLog:
    """
    Session log of rolls, table lookups and generated records.

    Events receive increasing sequence numbers. Subscribers are notified of
    each event as it is logged; a failing subscriber is reported and
    skipped so it cannot break table resolution.
    """

    def __init__(self, seed: Optional[int] = None):
        self._events: list[LogEvent] = []
        self._sequence = 0
        self._seed = seed
        self._session_start = datetime.now()
        self._subscribers: list[Callable[[LogEvent], None]] = []
        self._paused = False

    def reset(self) -> None:
        """Clear all events and start a new session."""
        self._events = []
        self._sequence = 0
        self._session_start = datetime.now()

    def set_seed(self, seed: int) -> None:
        self._seed = seed

    def get_seed(self) -> Optional[int]:
        return self._seed

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def is_paused(self) -> bool:
        return self._paused

    def subscribe(self, callback: Callable[[LogEvent], None]) -> None:
        """Subscribe to receive events as they are logged."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[LogEvent], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _log_event(self, event: LogEvent) -> None:
        if self._paused:
            return

        self._sequence += 1
        event.sequence_number = self._sequence
        self._events.append(event)

        for subscriber in self._subscribers:
            try:
                subscriber(event)
            except Exception as e:
                logger.warning(f"Subscriber error: {e}")

    def log_roll(
        self,
        notation: str,
        rolls: list[int],
        modifier: int,
        total: int,
        reason: str = "",
        context: Optional[dict[str, Any]] = None,
    ) -> RollEvent:
        """Log a dice roll."""
        event = RollEvent(
            notation=notation,
            rolls=list(rolls),
            modifier=modifier,
            total=total,
            reason=reason,
            context=context or {},
        )
        self._log_event(event)
        return event

    def log_table_lookup(
        self,
        table_id: str,
        table_name: str,
        method: str,
        roll_total: Optional[int],
        result_text: str,
        fallback: bool = False,
        depth: int = 0,
        context: Optional[dict[str, Any]] = None,
    ) -> TableLookupEvent:
        """Log a table resolution."""
        event = TableLookupEvent(
            table_id=table_id,
            table_name=table_name,
            method=method,
            roll_total=roll_total,
            result_text=result_text,
            fallback=fallback,
            depth=depth,
            context=context or {},
        )
        self._log_event(event)
        return event

    def log_generation(
        self,
        generator: str,
        summary: str,
        context: Optional[dict[str, Any]] = None,
    ) -> GenerationEvent:
        event = GenerationEvent(generator=generator, summary=summary, context=context or {})
        self._log_event(event)
        return event

    def log_custom(self, event_name: str, details: dict[str, Any]) -> LogEvent:
        event = LogEvent(
            event_type=EventType.CUSTOM,
            context={"event_name": event_name, **details},
        )
        self._log_event(event)
        return event

    def get_events(
        self,
        event_type: Optional[EventType] = None,
        since_sequence: int = 0,
    ) -> list[LogEvent]:
        """
        Get logged events.

        Args:
            event_type: Filter by event type (None = all)
            since_sequence: Only events after this sequence number
        """
        events = [e for e in self._events if e.sequence_number > since_sequence]
        if event_type:
            events = [e for e in events if e.event_type == event_type]
        return events

    def get_rolls(self) -> list[RollEvent]:
        return [e for e in self._events if isinstance(e, RollEvent)]

    def get_table_lookups(self) -> list[TableLookupEvent]:
        return [e for e in self._events if isinstance(e, TableLookupEvent)]

    def get_generations(self) -> list[GenerationEvent]:
        return [e for e in self._events if isinstance(e, GenerationEvent)]

    def get_event_count(self) -> int:
        return len(self._events)

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of the run log."""
        lookups = self.get_table_lookups()
        return {
            "session_start": self._session_start.isoformat(),
            "seed": self._seed,
            "total_events": len(self._events),
            "rolls": len(self.get_rolls()),
            "table_lookups": len(lookups),
            "fallbacks": sum(1 for e in lookups if e.fallback),
            "generations": len(self.get_generations()),
            "last_sequence": self._sequence,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "session_start": self._session_start.isoformat(),
            "seed": self._seed,
            "sequence": self._sequence,
            "events": [e.to_dict() for e in self._events],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def save(self, filepath: str) -> None:
        """Save the log to a file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.to_json())
        logger.info(f"RunLog saved to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "RunLog":
        """Load a log previously written with save()."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        log = cls(seed=data.get("seed"))
        log._session_start = datetime.fromisoformat(data["session_start"])
        log._sequence = data.get("sequence", 0)

        for event_data in data.get("events", []):
            event_type = EventType(event_data["event_type"])
            event_cls = _EVENT_CLASSES.get(event_type, LogEvent)
            log._events.append(event_cls.from_dict(event_data))

        logger.info(f"RunLog loaded from {filepath}: {len(log._events)} events")
        return log

    def format_log(
        self,
        event_types: Optional[list[EventType]] = None,
        max_events: Optional[int] = None,
    ) -> str:
        """Format the log as a human-readable string."""
        lines = [
            "=== Run Log ===",
            f"Session: {self._session_start.isoformat()}",
            f"Seed: {self._seed if self._seed is not None else 'not set'}",
            f"Total Events: {len(self._events)}",
            "",
        ]

        events = self._events
        if event_types:
            events = [e for e in events if e.event_type in event_types]
        if max_events:
            events = events[-max_events:]

        for event in events:
            lines.append(str(event))

        return "\n".join(lines)
