"""
Table registry for the campaign assistant.

Holds every RandomTable keyed by id. Tables are registered once at startup
(from the built-in table modules, optionally followed by JSON files) and
are never mutated afterwards.
"""

from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional, Union
import csv
import io
import json
import logging

from campaign_assistant.data_models import DiceExpression
from campaign_assistant.tables.table_types import (
    RandomTable,
    ResolutionMethod,
    TableCategory,
)

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"


class TableError(Exception):
    """Base class for table registry and resolution errors."""
    pass


class TableNotFoundError(TableError):
    """Raised when a table id is not registered."""

    def __init__(self, table_id: str):
        self.table_id = table_id
        super().__init__(f"Table not found: {table_id}")


class DuplicateTableError(TableError):
    """Raised when registering a table id that already exists."""

    def __init__(self, table_id: str):
        self.table_id = table_id
        super().__init__(f"Table already registered: {table_id}")


class InvalidTableError(TableError):
    """Raised when table data cannot be parsed."""
    pass


class TableRegistry:
    """
    Mapping from table id to RandomTable.

    Registration rejects duplicate ids unless replace=True is passed.
    """

    def __init__(self, tables: Optional[Iterable[RandomTable]] = None):
        self._tables: dict[str, RandomTable] = {}
        self._by_category: dict[TableCategory, list[str]] = {cat: [] for cat in TableCategory}
        for table in tables or []:
            self.register(table)

    def __contains__(self, table_id: str) -> bool:
        return table_id in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def register(self, table: RandomTable, replace: bool = False) -> None:
        """
        Register a table.

        Raises:
            DuplicateTableError: if the id exists and replace is False
        """
        existing = self._tables.get(table.table_id)
        if existing is not None:
            if not replace:
                raise DuplicateTableError(table.table_id)
            self._by_category[existing.category].remove(table.table_id)
            logger.info(f"Replacing table {table.table_id}")

        self._tables[table.table_id] = table
        self._by_category[table.category].append(table.table_id)
        logger.debug(f"Registered table {table.table_id} ({table.method.value}, {table.entry_count} entries)")

    def register_all(self, tables: Iterable[RandomTable], replace: bool = False) -> int:
        count = 0
        for table in tables:
            self.register(table, replace=replace)
            count += 1
        return count

    def get(self, table_id: str) -> RandomTable:
        """
        Get a table by id.

        Raises:
            TableNotFoundError: if no table has that id
        """
        table = self._tables.get(table_id)
        if table is None:
            raise TableNotFoundError(table_id)
        return table

    def list_ids(self) -> list[str]:
        """All registered ids, in registration order."""
        return list(self._tables)

    def get_tables_by_category(self, category: Union[TableCategory, str]) -> list[RandomTable]:
        """Get all tables in a category; unknown categories yield an empty list."""
        if not isinstance(category, TableCategory):
            try:
                category = TableCategory(category)
            except ValueError:
                return []
        return [self._tables[tid] for tid in self._by_category[category]]

    def get_categories(self) -> list[TableCategory]:
        return [cat for cat, ids in self._by_category.items() if ids]

    def search_tables(self, query: str) -> list[RandomTable]:
        """Case-insensitive search over id, name, description and category."""
        needle = query.lower().strip()
        if not needle:
            return list(self._tables.values())
        return [
            table for table in self._tables.values()
            if needle in table.table_id.lower()
            or needle in table.name.lower()
            or needle in table.description.lower()
            or needle in table.category.value
        ]

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate_table(self, table: RandomTable) -> list[str]:
        """
        Check a table's structure.

        For range-based tables every total the dice can produce must be
        covered by exactly one entry. Returns a list of problems (empty when
        the table is valid).
        """
        issues: list[str] = []
        if not table.entries:
            return [f"{table.table_id}: table has no entries"]

        for entry in table.entries:
            if entry.sub_table and entry.sub_table not in self._tables:
                issues.append(f"{table.table_id}: sub-table '{entry.sub_table}' is not registered")
            for extra in entry.additional_rolls:
                if extra.table_id not in self._tables:
                    issues.append(f"{table.table_id}: additional roll table '{extra.table_id}' is not registered")

        if table.method == ResolutionMethod.WEIGHTED:
            if any(entry.weight < 0 for entry in table.entries):
                issues.append(f"{table.table_id}: negative weight")
            if table.total_weight <= 0:
                issues.append(f"{table.table_id}: total weight must be positive")
            return issues

        if not table.method.is_range_based:
            return issues

        expression = DiceExpression.parse(table.dice_expression)
        if expression is None:
            issues.append(f"{table.table_id}: unparseable dice expression '{table.dice_expression}'")
            return issues

        coverage: Counter = Counter()
        for entry in table.entries:
            if not entry.has_range:
                issues.append(f"{table.table_id}: entry '{entry.text}' has no roll range")
                continue
            if entry.roll_min > entry.roll_max:
                issues.append(f"{table.table_id}: entry '{entry.text}' has min > max")
                continue
            if entry.roll_min < expression.min_total or entry.roll_max > expression.max_total:
                issues.append(
                    f"{table.table_id}: entry '{entry.text}' range {entry.roll_min}-{entry.roll_max} "
                    f"outside {expression.min_total}-{expression.max_total}"
                )
            coverage.update(range(entry.roll_min, entry.roll_max + 1))

        # Multiplied dice only produce multiples; check every reachable total
        step = expression.multiplier if expression.multiplier > 0 else 1
        for total in range(expression.min_total, expression.max_total + 1, step):
            hits = coverage.get(total, 0)
            if hits == 0:
                issues.append(f"{table.table_id}: gap at roll {total}")
            elif hits > 1:
                issues.append(f"{table.table_id}: overlap at roll {total}")

        return issues

    def validate_all_tables(self) -> dict[str, list[str]]:
        """Validate every table; only tables with problems appear in the result."""
        report = {}
        for table_id, table in self._tables.items():
            issues = self.validate_table(table)
            if issues:
                report[table_id] = issues
        return report

    # =========================================================================
    # LOADING AND EXPORT
    # =========================================================================

    def load_tables_from_dict(self, data: Union[dict, list], replace: bool = False) -> int:
        """
        Register tables from parsed JSON data.

        Accepts a single table object, a list of tables, or {"tables": [...]}
        / {"tables": {id: table}}.

        Returns:
            Number of tables loaded
        """
        if isinstance(data, dict) and "tables" in data:
            tables_data = data["tables"]
            if isinstance(tables_data, dict):
                tables_data = [
                    {"id": tid, **tdata} if isinstance(tdata, dict) else tdata
                    for tid, tdata in tables_data.items()
                ]
        elif isinstance(data, dict):
            tables_data = [data]
        else:
            tables_data = data

        if not isinstance(tables_data, list):
            raise InvalidTableError(f"Expected a list of tables, got {type(tables_data).__name__}")

        count = 0
        for table_data in tables_data:
            if not isinstance(table_data, dict):
                raise InvalidTableError(f"Expected a table object, got {type(table_data).__name__}")
            try:
                table = RandomTable.from_dict(table_data)
            except (KeyError, TypeError, ValueError, IndexError) as e:
                raise InvalidTableError(f"Cannot parse table {table_data.get('id', '?')}: {e}") from e
            self.register(table, replace=replace)
            count += 1

        logger.info(f"Loaded {count} tables")
        return count

    def load_tables_from_json(self, file_path: Union[Path, str], replace: bool = False) -> int:
        """Load tables from a JSON file."""
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return self.load_tables_from_dict(data, replace=replace)

    def export_tables(self, format: str = "json") -> Union[dict[str, Any], str]:
        """
        Export all tables.

        json returns {"tables": {id: table}, "exportedAt", "version"};
        csv returns one row per entry.
        """
        if format == "json":
            return {
                "tables": {tid: table.to_dict() for tid, table in self._tables.items()},
                "exportedAt": datetime.now().isoformat(),
                "version": EXPORT_VERSION,
            }
        if format == "csv":
            buffer = io.StringIO()
            writer = csv.writer(buffer)
            writer.writerow(["table_id", "table_name", "category", "dice", "method", "min", "max", "weight", "text"])
            for table in self._tables.values():
                for entry in table.entries:
                    writer.writerow([
                        table.table_id, table.name, table.category.value, table.dice_expression,
                        table.method.value, entry.roll_min, entry.roll_max, entry.weight, entry.text,
                    ])
            return buffer.getvalue()
        raise ValueError(f"Unsupported export format: {format}")

    def get_statistics(self) -> dict[str, Any]:
        """Counts of tables by category and method, plus total entries."""
        by_category = Counter(t.category.value for t in self._tables.values())
        by_method = Counter(t.method.value for t in self._tables.values())
        return {
            "total_tables": len(self._tables),
            "total_entries": sum(t.entry_count for t in self._tables.values()),
            "by_category": dict(by_category),
            "by_method": dict(by_method),
        }


def create_default_registry() -> TableRegistry:
    """Registry holding every built-in table."""
    from campaign_assistant.tables.dnd_tables import create_dnd_tables
    from campaign_assistant.tables.module_tables import create_module_tables

    registry = TableRegistry()
    registry.register_all(create_dnd_tables())
    registry.register_all(create_module_tables())
    logger.info(f"Table registry initialized with {len(registry)} tables")
    return registry
