"""
Observability for the campaign assistant.

Provides a run log of dice rolls, table lookups and generated records.
"""

from campaign_assistant.observability.run_log import (
    RunLog,
    LogEvent,
    EventType,
    RollEvent,
    TableLookupEvent,
    GenerationEvent,
)

__all__ = [
    "RunLog",
    "LogEvent",
    "EventType",
    "RollEvent",
    "TableLookupEvent",
    "GenerationEvent",
]
