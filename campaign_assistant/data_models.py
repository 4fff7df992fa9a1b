"""
Core data models for the D&D campaign assistant.

Holds the dice notation parser and the DiceRoller that every table,
generator and tracker draws its randomness from. A roller is an ordinary
instance passed into whatever needs it, so tests can seed it or replace it
with a scripted double.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, MutableSequence, Optional, Sequence, TypeVar
import logging
import random
import re

if TYPE_CHECKING:
    from campaign_assistant.observability.run_log import RunLog

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Most recent rolls kept in a roller's own log; a RunLog keeps the full history
ROLL_LOG_LIMIT = 1000


# =============================================================================
# DICE NOTATION
# =============================================================================


# NdM, NdMxK, NdM+K, d%, with optional whitespace
STRICT_DICE_PATTERN = re.compile(
    r"^\s*(\d*)\s*[dD]\s*(\d+|%)\s*(?:[xX*]\s*(\d+))?\s*(?:([+-])\s*(\d+))?\s*$"
)
CONSTANT_PATTERN = re.compile(r"^\s*([+-]?\d+)\s*$")
PERMISSIVE_DICE_PATTERN = re.compile(r"(\d*)[dD](\d+)\s*([+-]\s*\d+)?")


@dataclass(frozen=True)
class DiceExpression:
    """A parsed dice expression: (count)d(sides) x multiplier + modifier."""
    count: int
    sides: int
    modifier: int = 0
    multiplier: int = 1

    @classmethod
    def parse(cls, notation: str) -> Optional["DiceExpression"]:
        """
        Parse standard notation ('2d6', '1d20+5', '4d6x10', 'd%', '7').

        Returns None when the notation is not well formed.
        """
        if notation is None:
            return None
        constant = CONSTANT_PATTERN.match(notation)
        if constant:
            return cls(count=0, sides=0, modifier=int(constant.group(1)))

        match = STRICT_DICE_PATTERN.match(notation)
        if not match:
            return None
        count_str, sides_str, mult_str, sign, mod_str = match.groups()
        count = int(count_str) if count_str else 1
        sides = 100 if sides_str == "%" else int(sides_str)
        if count < 1 or sides < 1:
            return None
        modifier = int(mod_str) if mod_str else 0
        if sign == "-":
            modifier = -modifier
        multiplier = int(mult_str) if mult_str else 1
        return cls(count=count, sides=sides, modifier=modifier, multiplier=multiplier)

    @classmethod
    def parse_permissive(cls, notation: str) -> Optional["DiceExpression"]:
        """Find the first NdM(+K) fragment anywhere in the text."""
        match = PERMISSIVE_DICE_PATTERN.search(notation or "")
        if not match:
            return None
        count = int(match.group(1)) if match.group(1) else 1
        sides = int(match.group(2))
        if count < 1 or sides < 1:
            return None
        modifier = int(match.group(3).replace(" ", "")) if match.group(3) else 0
        return cls(count=count, sides=sides, modifier=modifier)

    @property
    def min_total(self) -> int:
        return self.count * self.multiplier + self.modifier

    @property
    def max_total(self) -> int:
        return self.count * self.sides * self.multiplier + self.modifier

    def __str__(self) -> str:
        if self.count == 0:
            return str(self.modifier)
        text = f"{self.count}d{self.sides}"
        if self.multiplier != 1:
            text += f"x{self.multiplier}"
        if self.modifier > 0:
            text += f"+{self.modifier}"
        elif self.modifier < 0:
            text += str(self.modifier)
        return text


@dataclass
class DiceResult:
    """Result of a dice roll with full information."""
    notation: str
    rolls: list[int]
    modifier: int
    total: int
    reason: str = ""
    multiplier: int = 1
    malformed: bool = False  # Resolved through the permissive parser
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "notation": self.notation,
            "rolls": list(self.rolls),
            "modifier": self.modifier,
            "multiplier": self.multiplier,
            "total": self.total,
            "reason": self.reason,
            "malformed": self.malformed,
        }

    def __str__(self) -> str:
        rolls = f"{self.rolls} x {self.multiplier}" if self.multiplier != 1 else f"{self.rolls}"
        if self.modifier > 0:
            return f"{self.notation}: {rolls} + {self.modifier} = {self.total}"
        elif self.modifier < 0:
            return f"{self.notation}: {rolls} - {abs(self.modifier)} = {self.total}"
        return f"{self.notation}: {rolls} = {self.total}"


# =============================================================================
# DICE ROLLER
# =============================================================================


class DiceRoller:
    """
    Randomization interface for the table engine and story generators.

    Every dice roll, uniform draw and shuffle goes through one instance so
    that a seed makes a whole session reproducible. Rolls are kept in a
    per-instance roll log and, when a RunLog is attached, recorded there too.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        run_log: Optional["RunLog"] = None,
        roll_log_limit: int = ROLL_LOG_LIMIT,
    ):
        self._seed = seed
        self._rng = random.Random(seed)
        self._roll_log: deque[DiceResult] = deque(maxlen=roll_log_limit)
        self.run_log = run_log

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Reseed the generator for reproducibility."""
        self._seed = seed
        self._rng.seed(seed)
        if self.run_log is not None:
            self.run_log.set_seed(seed)

    def roll(self, dice: str, reason: str = "") -> DiceResult:
        """
        Roll dice using standard notation (e.g., '2d6', '1d20+5', '4d6x10').

        Malformed notation goes through the permissive parser, which picks
        the first NdM fragment it can find. If there is none the result is a
        flat 1 flagged as malformed.

        Args:
            dice: Dice notation string
            reason: Why this roll is being made (for logging)

        Returns:
            DiceResult with individual rolls and total
        """
        expression = DiceExpression.parse(dice)
        malformed = False
        if expression is None:
            malformed = True
            expression = DiceExpression.parse_permissive(dice)
            if expression is None:
                logger.warning(f"Unparseable dice expression '{dice}', using 1")
                return self._record(DiceResult(
                    notation=str(dice), rolls=[], modifier=0, total=1,
                    reason=reason, malformed=True,
                ))
            logger.warning(f"Malformed dice expression '{dice}', read as {expression}")

        rolls = [self._rng.randint(1, expression.sides) for _ in range(expression.count)]
        total = sum(rolls) * expression.multiplier + expression.modifier

        return self._record(DiceResult(
            notation=str(dice),
            rolls=rolls,
            modifier=expression.modifier,
            total=total,
            reason=reason,
            multiplier=expression.multiplier,
            malformed=malformed,
        ))

    def _record(self, result: DiceResult) -> DiceResult:
        self._roll_log.append(result)
        if self.run_log is not None:
            self.run_log.log_roll(
                notation=result.notation,
                rolls=result.rolls,
                modifier=result.modifier,
                total=result.total,
                reason=result.reason,
            )
        return result

    def roll_d20(self, reason: str = "") -> DiceResult:
        """Convenience method for d20 rolls."""
        return self.roll("1d20", reason)

    def roll_2d6(self, reason: str = "") -> DiceResult:
        return self.roll("2d6", reason)

    def roll_d6(self, num_dice: int = 1, reason: str = "") -> DiceResult:
        return self.roll(f"{num_dice}d6", reason)

    def roll_percentile(self, reason: str = "") -> DiceResult:
        """Roll d100 for percentile checks."""
        return self.roll("1d100", reason)

    # -------------------------------------------------------------------------
    # Uniform draws used by weighted tables and catalog sampling
    # -------------------------------------------------------------------------

    def random(self) -> float:
        """Uniform real in [0, 1)."""
        return self._rng.random()

    def uniform(self, upper: float) -> float:
        """Uniform real in [0, upper)."""
        return self.random() * upper

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self.random() < probability

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self._rng.randrange(len(items))]

    def shuffle(self, items: MutableSequence[Any]) -> None:
        self._rng.shuffle(items)

    def sample(self, items: Sequence[T], count: int) -> list[T]:
        """
        Uniform sample without replacement, taken as shuffle-then-take.

        Returns every item (shuffled) when fewer than count exist.
        """
        pool = list(items)
        self._rng.shuffle(pool)
        return pool[:max(0, min(count, len(pool)))]

    def get_roll_log(self) -> list[DiceResult]:
        """Get the most recent rolls, oldest first."""
        return list(self._roll_log)

    def clear_roll_log(self) -> None:
        self._roll_log.clear()
