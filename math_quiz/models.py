from __future__ import annotations

import operator
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Callable

from .config import MAX_ANSWER, MAX_OPERAND, WRONG_ANSWER_WEIGHT
from .errors import InvalidProblemError

DEFAULT_SOLVE_TIME = timedelta(seconds=5)
_ONE_SECOND = timedelta(seconds=1)


class MathOp(str, Enum):
    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    # DIVIDE = "divide" is reserved, answers would not stay integral

    @property
    def symbol(self) -> str:
        return _OPS[self].symbol

    def apply(self, a: int, b: int) -> int:
        return _OPS[self].func(a, b)


@dataclass(frozen=True)
class _OpConfig:
    symbol: str
    func: Callable[[int, int], int]


_OPS = {
    MathOp.PLUS: _OpConfig("+", operator.add),
    MathOp.MINUS: _OpConfig("-", operator.sub),
    MathOp.MULTIPLY: _OpConfig("x", operator.mul),
}


@dataclass(eq=False)
class Problem:
    """
    One arithmetic fact plus the user's history with it.

    - `operands`: the two operands, in display order
    - `operator`: which operation joins them
    - `num_wrong`: wrong answers not yet worked off by correct ones
    - `latest_time`: how long the most recent correct answer took
    - `answer`: derived from operands/operator at construction, read-only

    Operands must be in [0, MAX_OPERAND] and the answer in [0, MAX_ANSWER];
    anything else raises InvalidProblemError instead of being clamped.
    """

    operands: tuple[int, int]
    operator: MathOp
    num_wrong: int = 0
    latest_time: timedelta = DEFAULT_SOLVE_TIME
    _answer: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        a, b = self.operands
        self.operands = (a, b)

        try:
            self.operator = MathOp(self.operator)
        except ValueError:
            raise InvalidProblemError(f"Unsupported operator: {self.operator!r}") from None

        for value in self.operands:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidProblemError(f"Operand must be an integer, got {value!r}")
            if not 0 <= value <= MAX_OPERAND:
                raise InvalidProblemError(
                    f"Operand {value} outside supported range 0..{MAX_OPERAND}"
                )

        if self.operator == MathOp.MINUS and a < b:
            raise InvalidProblemError(f"Subtraction {a} - {b} would be negative")

        answer = self.operator.apply(a, b)
        if answer > MAX_ANSWER:
            raise InvalidProblemError(
                f"Answer to {a} {self.operator.symbol} {b} exceeds {MAX_ANSWER}"
            )
        self._answer = answer

        if self.num_wrong < 0:
            raise InvalidProblemError(f"num_wrong cannot be negative: {self.num_wrong}")
        if self.latest_time < timedelta(0):
            raise InvalidProblemError(f"latest_time cannot be negative: {self.latest_time}")

    @property
    def answer(self) -> int:
        return self._answer

    def __str__(self) -> str:
        a, b = self.operands
        return f"{a} {self.operator.symbol} {b} = "

    @property
    def latest_seconds(self) -> int:
        """Whole seconds of the latest correct answer (truncated)."""
        return self.latest_time // _ONE_SECOND

    def score(self, wrong_weight: float = WRONG_ANSWER_WEIGHT) -> float:
        return float(self.num_wrong * wrong_weight + self.latest_seconds)

    def check_guess(self, guess: int, elapsed_time: timedelta) -> bool:
        if guess == self.answer:
            self.latest_time = elapsed_time
            # one correct answer works off one miss, but never the last one
            if self.num_wrong > 1:
                self.num_wrong -= 1
            return True

        self.num_wrong += 1
        return False
