from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Callable, List, Optional

from .config import FAST_ANSWER_SECONDS, MAX_QUESTIONS, STREAK_TARGET
from .models import MathOp, Problem
from .selector import select_problem


class StopReason(str, Enum):
    MASTERED = "mastered"
    QUESTION_LIMIT = "question_limit"
    END_OF_INPUT = "end_of_input"


@dataclass
class SessionSummary:
    questions: int = 0
    correct: int = 0
    wrong: int = 0
    stop_reason: Optional[StopReason] = None


@dataclass
class DrillSession:
    """
    Interactive drill over a catalog the session owns for its lifetime.

    The drill stops after `max_questions` problems, or earlier once the user
    has strung together `streak_target` fast correct answers and every
    operator in the catalog has been asked at least once. A problem is
    re-asked until it is answered correctly; the timer starts at its first
    prompt.
    """

    problems: List[Problem]
    rng: random.Random = field(default_factory=random.Random)
    input_fn: Callable[[str], str] = input
    output_fn: Callable[[str], None] = print
    clock: Callable[[], float] = time.monotonic
    max_questions: int = MAX_QUESTIONS
    streak_target: int = STREAK_TARGET
    fast_answer_seconds: int = FAST_ANSWER_SECONDS

    def __post_init__(self) -> None:
        self._seen: dict[MathOp, bool] = {p.operator: False for p in self.problems}
        self._streak = 0
        self.summary = SessionSummary()

    def _finished(self) -> bool:
        if self.summary.questions >= self.max_questions:
            self.summary.stop_reason = StopReason.QUESTION_LIMIT
            return True
        if self._streak >= self.streak_target and all(self._seen.values()):
            self.summary.stop_reason = StopReason.MASTERED
            return True
        return False

    def _read_guess(self, prompt: str) -> int:
        while True:
            text = self.input_fn(prompt).strip()
            try:
                guess = int(text)
            except ValueError:
                guess = -1
            if guess >= 0:
                return guess
            # not a wrong answer, just ask again
            self.output_fn(f"{text} is not a valid number!")

    def ask(self, idx: int) -> None:
        problem = self.problems[idx]
        self._seen[problem.operator] = True
        self.summary.questions += 1
        prompt = f"#{self.summary.questions}: {problem}"

        start = self.clock()
        while True:
            guess = self._read_guess(prompt)
            elapsed = timedelta(seconds=self.clock() - start)
            if problem.check_guess(guess, elapsed):
                self.summary.correct += 1
                seconds = problem.latest_seconds
                self.output_fn(f"Correct! It took you {seconds} seconds to solve.")
                if seconds <= self.fast_answer_seconds:
                    self._streak += 1
                return
            self.summary.wrong += 1
            self.output_fn("Sorry, that is not correct.")
            self._streak = 0

    def run(self) -> SessionSummary:
        try:
            while not self._finished():
                self.ask(select_problem(self.problems, self.rng))
        except EOFError:
            self.summary.stop_reason = StopReason.END_OF_INPUT
            return self.summary

        self.output_fn("Congratulations! You have finished for today.")
        return self.summary
