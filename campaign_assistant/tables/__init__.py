"""
Random tables and resolution for the campaign assistant.

This module provides:
- Table, entry and result types
- The table registry with validation, search and JSON/CSV export
- The resolver (standard, percentile, weighted, conditional, nested)
- Text substitution for {param}, [TABLE:name] and [ROLL:expr] tokens
- Built-in D&D tables and the categorised table library
- The RandomTablesEngine facade with composite generators
"""

from campaign_assistant.tables.table_types import (
    ResolutionMethod,
    ConditionType,
    TableCategory,
    EntryCondition,
    AdditionalRoll,
    TableEntry,
    RandomTable,
    ResolvedEntry,
    ResolvedResult,
    parameter_is,
    parameter_between,
    parameter_exists,
)
from campaign_assistant.tables.table_registry import (
    TableError,
    TableNotFoundError,
    DuplicateTableError,
    InvalidTableError,
    TableRegistry,
    create_default_registry,
)
from campaign_assistant.tables.table_resolver import TableResolver
from campaign_assistant.tables.text_substitution import TextSubstituter
from campaign_assistant.tables.random_tables_engine import (
    RandomTablesEngine,
    GeneratedName,
    GeneratedNPC,
    GeneratedEncounter,
    GeneratedSettlement,
    GeneratedAdventure,
)

__all__ = [
    "ResolutionMethod",
    "ConditionType",
    "TableCategory",
    "EntryCondition",
    "AdditionalRoll",
    "TableEntry",
    "RandomTable",
    "ResolvedEntry",
    "ResolvedResult",
    "parameter_is",
    "parameter_between",
    "parameter_exists",
    "TableError",
    "TableNotFoundError",
    "DuplicateTableError",
    "InvalidTableError",
    "TableRegistry",
    "create_default_registry",
    "TableResolver",
    "TextSubstituter",
    "RandomTablesEngine",
    "GeneratedName",
    "GeneratedNPC",
    "GeneratedEncounter",
    "GeneratedSettlement",
    "GeneratedAdventure",
]
