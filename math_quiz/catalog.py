from __future__ import annotations

from typing import Callable, List

from .config import (
    ADDITION_SEED_TIME,
    MULTIPLICATION_SEED_TIME,
    SUBTRACTION_SEED_TIME,
)
from .errors import UnknownQuestionTypeError
from .models import MathOp, Problem

_QUESTION_TYPES = {
    "+": MathOp.PLUS,
    "plus": MathOp.PLUS,
    "-": MathOp.MINUS,
    "minus": MathOp.MINUS,
    "x": MathOp.MULTIPLY,
    "*": MathOp.MULTIPLY,
    "multiplication": MathOp.MULTIPLY,
}


def add_addition(problems: List[Problem]) -> None:
    """Append sums x + y for x in 1..15, y in 0..13, in both orders."""
    for x in range(1, 16):
        for y in range(0, 14):
            problems.append(Problem((x, y), MathOp.PLUS, 0, ADDITION_SEED_TIME))
            if x != y:
                problems.append(Problem((y, x), MathOp.PLUS, 0, ADDITION_SEED_TIME))


def add_subtraction(problems: List[Problem]) -> None:
    """Append differences x - y with 0 < y < x <= 15."""
    for x in range(0, 16):
        for y in range(1, x):
            problems.append(Problem((x, y), MathOp.MINUS, 0, SUBTRACTION_SEED_TIME))


def add_multiplication(problems: List[Problem]) -> None:
    """Append products x x y for x in 1..5, y in 1..3."""
    for x in range(1, 6):
        for y in range(1, 4):
            problems.append(Problem((x, y), MathOp.MULTIPLY, 0, MULTIPLICATION_SEED_TIME))


_BUILDERS: dict[MathOp, Callable[[List[Problem]], None]] = {
    MathOp.PLUS: add_addition,
    MathOp.MINUS: add_subtraction,
    MathOp.MULTIPLY: add_multiplication,
}


def init_problems(problems: List[Problem]) -> None:
    add_addition(problems)
    add_subtraction(problems)
    add_multiplication(problems)


def new_catalog() -> List[Problem]:
    problems: List[Problem] = []
    init_problems(problems)
    return problems


def parse_question_type(text: str) -> MathOp:
    try:
        return _QUESTION_TYPES[text.strip().lower()]
    except KeyError:
        raise UnknownQuestionTypeError(text) from None


def extend_catalog(problems: List[Problem], op: MathOp) -> int:
    """Append the built-in family for `op`; returns how many were added."""
    before = len(problems)
    _BUILDERS[op](problems)
    return len(problems) - before
