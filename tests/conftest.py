from __future__ import annotations

from typing import Callable, Iterable, List


class FixedRng:
    """Stand-in for random.Random whose uniform() always lands on one end."""

    def __init__(self, at_upper: bool = False) -> None:
        self.at_upper = at_upper
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return b if self.at_upper else a


def scripted_input(answers: Iterable[str], prompts: List[str]) -> Callable[[str], str]:
    it = iter(answers)

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


def ticking_clock(step: float) -> Callable[[], float]:
    now = [0.0]

    def _clock() -> float:
        value = now[0]
        now[0] += step
        return value

    return _clock
