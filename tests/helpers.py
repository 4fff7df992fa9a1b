"""
Test helpers for the campaign assistant test suite.

Provides ScriptedDice, a DiceRoller whose rolls and uniform draws come from
queues set up by the test, and small table builders.
"""

from typing import Any, Iterable, Optional

from campaign_assistant.data_models import DiceResult, DiceRoller
from campaign_assistant.tables.table_types import (
    RandomTable,
    ResolutionMethod,
    TableCategory,
    TableEntry,
)


class ScriptedDice(DiceRoller):
    """
    DiceRoller returning queued totals.

    roll() pops from the totals queue and random() from the draws queue.
    When a queue is empty the seeded generator takes over, so tests only
    script the draws they care about.

    Usage:
        dice = ScriptedDice(totals=[3, 29])
        engine = RandomTablesEngine(dice=dice)
        engine.generate_name()  # Aerdrie Xiloscient
    """

    def __init__(
        self,
        totals: Iterable[int] = (),
        draws: Iterable[float] = (),
        seed: int = 0,
    ):
        super().__init__(seed=seed)
        self.totals = list(totals)
        self.draws = list(draws)
        self.notations: list[str] = []

    def queue(self, *totals: int) -> "ScriptedDice":
        self.totals.extend(totals)
        return self

    def queue_draws(self, *draws: float) -> "ScriptedDice":
        self.draws.extend(draws)
        return self

    def roll(self, dice: str, reason: str = "") -> DiceResult:
        self.notations.append(dice)
        if not self.totals:
            return super().roll(dice, reason)
        total = self.totals.pop(0)
        return self._record(DiceResult(notation=dice, rolls=[total], modifier=0, total=total, reason=reason))

    def random(self) -> float:
        if self.draws:
            return self.draws.pop(0)
        return super().random()


def make_table(
    table_id: str,
    rows: list[tuple[int, int, str]],
    dice: str = "1d6",
    method: ResolutionMethod = ResolutionMethod.STANDARD,
    category: TableCategory = TableCategory.GENERAL,
    description: Optional[str] = None,
    **entry_kwargs: Any,
) -> RandomTable:
    """Range-based table from (min, max, text) rows."""
    entries = [TableEntry(text=text, roll_min=low, roll_max=high, **entry_kwargs) for low, high, text in rows]
    kwargs: dict[str, Any] = {}
    if description is not None:
        kwargs["description"] = description
    return RandomTable(
        table_id=table_id,
        name=table_id.title(),
        dice_expression=dice,
        method=method,
        entries=entries,
        category=category,
        **kwargs,
    )


def make_weighted_table(table_id: str, weights: dict[str, float]) -> RandomTable:
    return RandomTable(
        table_id=table_id,
        name=table_id.title(),
        dice_expression="1d100",
        method=ResolutionMethod.WEIGHTED,
        entries=[TableEntry(text=text, weight=weight) for text, weight in weights.items()],
    )
