"""
Text substitution for resolved table entries.

Three token forms are expanded, one pass per form in this order:

    {key}          -> parameters[key], left literal when absent
    [TABLE:name]   -> text of a nested resolution of table `name`
    [ROLL:expr]    -> total of rolling `expr`

Nested [TABLE:] references may form cycles, so each nested resolution runs
one level deeper and anything past max_depth becomes "Unknown".
"""

from typing import TYPE_CHECKING, Any, Optional
import logging
import re

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.tables.table_registry import TableError
from campaign_assistant.tables.table_types import UNKNOWN_TEXT

if TYPE_CHECKING:
    from campaign_assistant.tables.table_resolver import TableResolver

logger = logging.getLogger(__name__)

PARAMETER_TOKEN = re.compile(r"\{(\w+)\}")
TABLE_TOKEN = re.compile(r"\[TABLE:([\w-]+)\]")
ROLL_TOKEN = re.compile(r"\[ROLL:([^\]]+)\]")

DEFAULT_MAX_DEPTH = 10


def has_tokens(text: str) -> bool:
    """True if any substitution token remains in the text."""
    return bool(PARAMETER_TOKEN.search(text) or TABLE_TOKEN.search(text) or ROLL_TOKEN.search(text))


class TextSubstituter:
    """
    Expands parameter, table and roll tokens inside entry text.

    Resolution failures inside [TABLE:] tokens are logged and replaced with
    "Unknown"; they never propagate to the caller.
    """

    def __init__(
        self,
        resolver: "TableResolver",
        dice: DiceRoller,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.resolver = resolver
        self.dice = dice
        self.max_depth = max_depth

    def substitute(
        self,
        text: str,
        parameters: Optional[dict[str, Any]] = None,
        depth: int = 0,
    ) -> str:
        """
        Expand all tokens in text.

        Args:
            text: Entry text possibly containing tokens
            parameters: Generation context used for {key} and nested tables
            depth: Nesting depth of the resolution that owns this text
        """
        if not text:
            return text
        params = parameters or {}

        text = self._substitute_parameters(text, params)
        text = self._substitute_tables(text, params, depth)
        text = self._substitute_rolls(text)
        return text

    def _substitute_parameters(self, text: str, params: dict[str, Any]) -> str:
        def replace(match: re.Match) -> str:
            value = params.get(match.group(1))
            return str(value) if value is not None else match.group(0)

        return PARAMETER_TOKEN.sub(replace, text)

    def _substitute_tables(self, text: str, params: dict[str, Any], depth: int) -> str:
        def replace(match: re.Match) -> str:
            table_id = match.group(1)
            if depth + 1 > self.max_depth:
                logger.warning(f"Substitution depth limit {self.max_depth} reached at [TABLE:{table_id}]")
                return UNKNOWN_TEXT
            try:
                nested = self.resolver.resolve(table_id, params, _depth=depth + 1)
            except TableError as e:
                logger.warning(f"Could not resolve [TABLE:{table_id}]: {e}")
                return UNKNOWN_TEXT
            return nested.result.display_text

        return TABLE_TOKEN.sub(replace, text)

    def _substitute_rolls(self, text: str) -> str:
        def replace(match: re.Match) -> str:
            return str(self.dice.roll(match.group(1), "text substitution").total)

        return ROLL_TOKEN.sub(replace, text)
