"""
Table resolution for the campaign assistant.

Turns a roll (or an explicit selection) on a registered table into one
ResolvedResult, applying the table's resolution method, rolling inline
dice, following sub-tables and additional rolls, and expanding text tokens.

Resolution problems that are part of normal play (a roll outside every
range, a context that filters out every entry, runaway nesting) come back
as fallback results. Only unknown table ids raise.
"""

from typing import Any, Optional
import logging

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.observability.run_log import RunLog
from campaign_assistant.tables.table_registry import TableError, TableRegistry
from campaign_assistant.tables.table_types import (
    MISSED_ROLL_TEXT,
    NO_VALID_ENTRIES_TEXT,
    UNKNOWN_TEXT,
    RandomTable,
    ResolutionMethod,
    ResolvedEntry,
    ResolvedResult,
    TableEntry,
)
from campaign_assistant.tables.text_substitution import DEFAULT_MAX_DEPTH, TextSubstituter

logger = logging.getLogger(__name__)


class TableResolver:
    """
    Resolves tables held in a TableRegistry.

    All randomness comes from the injected DiceRoller; a fresh unseeded
    roller is created when none is given.
    """

    def __init__(
        self,
        registry: TableRegistry,
        dice: Optional[DiceRoller] = None,
        run_log: Optional[RunLog] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.registry = registry
        self.dice = dice or DiceRoller()
        self.run_log = run_log
        self.max_depth = max_depth
        self.substituter = TextSubstituter(self, self.dice, max_depth=max_depth)

    def resolve(
        self,
        table_id: str,
        parameters: Optional[dict[str, Any]] = None,
        roll: Optional[int] = None,
        _depth: int = 0,
    ) -> ResolvedResult:
        """
        Resolve one entry from a table.

        Args:
            table_id: Registered table id
            parameters: Generation context for conditions and {key} tokens
            roll: Explicit roll for range-based tables, or a 1-based index
                among surviving entries for conditional tables
            _depth: Nesting depth, incremented by sub-table resolution

        Returns:
            ResolvedResult; check result.fallback for non-matches

        Raises:
            TableNotFoundError: if table_id is not registered
        """
        table = self.registry.get(table_id)
        params = dict(parameters or {})

        if _depth > self.max_depth:
            logger.warning(f"Resolution depth limit {self.max_depth} exceeded at table {table_id}")
            resolved = self._fallback(UNKNOWN_TEXT, "depth_exceeded", roll)
        elif not table.entries:
            resolved = self._fallback(NO_VALID_ENTRIES_TEXT, "empty_table", roll)
        elif table.method == ResolutionMethod.WEIGHTED:
            resolved = self._resolve_weighted(table, params, _depth)
        elif table.method == ResolutionMethod.CONDITIONAL:
            resolved = self._resolve_conditional(table, params, roll, _depth)
        else:
            resolved = self._resolve_ranged(table, params, roll, _depth)

        result = ResolvedResult(
            table_id=table.table_id,
            table_name=table.name,
            result=resolved,
            parameters=params,
            metadata={
                "table_size": table.entry_count,
                "method": table.method.value,
                "depth": _depth,
            },
        )
        self._log_table_lookup(table, resolved, _depth)
        return result

    def roll_table(self, table_id: str, parameters: Optional[dict[str, Any]] = None) -> str:
        """Resolve a table and return only the result text."""
        return self.resolve(table_id, parameters).text

    def substitute_text(self, text: str, parameters: Optional[dict[str, Any]] = None) -> str:
        """Expand {key}, [TABLE:] and [ROLL:] tokens outside any table."""
        return self.substituter.substitute(text, parameters)

    # =========================================================================
    # RESOLUTION METHODS
    # =========================================================================

    def _resolve_ranged(
        self,
        table: RandomTable,
        params: dict[str, Any],
        roll: Optional[int],
        depth: int,
    ) -> ResolvedEntry:
        """Standard, percentile and nested tables: match the roll against ranges."""
        if roll is None:
            roll = self.dice.roll(table.dice_expression, f"table roll: {table.table_id}").total

        entry = table.find_entry(roll)
        if entry is None:
            logger.warning(f"Roll {roll} missed every entry of {table.table_id}")
            return self._fallback(MISSED_ROLL_TEXT, "missed_roll", roll)

        resolved = self._process_entry(entry, roll, params, depth)

        if table.method == ResolutionMethod.NESTED and entry.sub_table:
            resolved.subtable_result = self.resolve(entry.sub_table, params, _depth=depth + 1)

        return resolved

    def _resolve_weighted(
        self,
        table: RandomTable,
        params: dict[str, Any],
        depth: int,
    ) -> ResolvedEntry:
        """Pick the first entry whose cumulative weight exceeds a uniform draw."""
        total_weight = table.total_weight
        if total_weight <= 0:
            return self._fallback(NO_VALID_ENTRIES_TEXT, "no_valid_entries", None)

        draw = self.dice.uniform(total_weight)
        cumulative = 0.0
        chosen: Optional[TableEntry] = None
        for entry in table.entries:
            cumulative += entry.weight
            if draw < cumulative:
                chosen = entry
                break

        if chosen is None:
            # Float rounding at the top end; take the last entry that can win
            chosen = next(e for e in reversed(table.entries) if e.weight > 0)

        return self._process_entry(chosen, None, params, depth)

    def _resolve_conditional(
        self,
        table: RandomTable,
        params: dict[str, Any],
        roll: Optional[int],
        depth: int,
    ) -> ResolvedEntry:
        """Filter entries on the context, then pick uniformly among survivors."""
        candidates = [entry for entry in table.entries if entry.conditions_met(params)]
        if not candidates:
            logger.warning(f"No entries of {table.table_id} match parameters {params}")
            return self._fallback(NO_VALID_ENTRIES_TEXT, "no_valid_entries", roll)

        if roll is None:
            roll = self.dice.roll(f"1d{len(candidates)}", f"table pick: {table.table_id}").total
        if not 1 <= roll <= len(candidates):
            logger.warning(f"Index {roll} outside {len(candidates)} candidates of {table.table_id}")
            return self._fallback(MISSED_ROLL_TEXT, "missed_roll", roll)

        return self._process_entry(candidates[roll - 1], roll, params, depth)

    # =========================================================================
    # ENTRY PROCESSING
    # =========================================================================

    def _process_entry(
        self,
        entry: TableEntry,
        roll: Optional[int],
        params: dict[str, Any],
        depth: int,
    ) -> ResolvedEntry:
        """Copy an entry into a result: substitute text, roll inline dice, run additional rolls."""
        resolved = ResolvedEntry(
            text=self.substituter.substitute(entry.text, params, depth),
            roll=roll,
            entry=entry,
            attributes=dict(entry.attributes),
        )

        if entry.dice:
            resolved.dice_result = self.dice.roll(entry.dice, f"entry dice: {entry.text}")

        for extra in entry.additional_rolls:
            extra_params = {**params, **extra.parameters}
            resolved.additional_results.append(
                self.resolve(extra.table_id, extra_params, _depth=depth + 1)
            )

        return resolved

    def _fallback(self, text: str, reason: str, roll: Optional[int]) -> ResolvedEntry:
        return ResolvedEntry(text=text, roll=roll, fallback=True, fallback_reason=reason)

    def _log_table_lookup(self, table: RandomTable, resolved: ResolvedEntry, depth: int) -> None:
        logger.debug(f"{table.table_id} [{table.method.value}] roll={resolved.roll} -> {resolved.text}")
        if self.run_log is not None:
            self.run_log.log_table_lookup(
                table_id=table.table_id,
                table_name=table.name,
                method=table.method.value,
                roll_total=resolved.roll,
                result_text=resolved.text,
                fallback=resolved.fallback,
                depth=depth,
            )

    # =========================================================================
    # BATCH AND METADATA
    # =========================================================================

    def generate_multiple(
        self,
        table_id: str,
        count: int,
        parameters: Optional[dict[str, Any]] = None,
    ) -> list[ResolvedResult]:
        """
        Resolve a table count times.

        Failed resolutions are logged and skipped, so fewer than count
        results may come back.
        """
        results = []
        for _ in range(count):
            try:
                results.append(self.resolve(table_id, parameters))
            except TableError as e:
                logger.warning(f"Skipping failed resolution of {table_id}: {e}")
        return results

    def get_table_info(self, table_id: str) -> dict[str, Any]:
        """
        Summary of a table.

        Raises:
            TableNotFoundError: if table_id is not registered
        """
        table = self.registry.get(table_id)
        return {
            "id": table.table_id,
            "name": table.name,
            "dice": table.dice_expression,
            "method": table.method.value,
            "entry_count": table.entry_count,
            "description": table.description,
            "category": table.category.value,
        }
