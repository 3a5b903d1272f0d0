from __future__ import annotations

import random
from typing import List, Sequence

from .config import WRONG_ANSWER_WEIGHT
from .errors import EmptyCatalogError
from .models import Problem

_default_rng = random.Random()


def problem_weights(
    problems: Sequence[Problem], wrong_weight: float = WRONG_ANSWER_WEIGHT
) -> List[float]:
    return [p.score(wrong_weight) for p in problems]


def select_problem(
    problems: Sequence[Problem],
    rng: random.Random | None = None,
    wrong_weight: float = WRONG_ANSWER_WEIGHT,
) -> int:
    """
    Pick the index of the next problem to ask.

    Index i is chosen with probability score(i) / sum(scores). Scores are
    recomputed from the problems on every call, so nothing is cached between
    draws. The draw is taken from the closed interval [0, total] and mapped
    back by a running sum: the first index whose running sum reaches the draw
    wins. A zero total therefore always picks index 0.
    """
    if not problems:
        raise EmptyCatalogError("Cannot select a problem from an empty catalog")

    if rng is None:
        rng = _default_rng
    weights = problem_weights(problems, wrong_weight)
    total = sum(weights)

    # uniform() reaches total only through float rounding, like any float draw
    pick = rng.uniform(0.0, total)

    running = 0.0
    for idx, weight in enumerate(weights):
        running += weight
        if running >= pick:
            return idx

    # float rounding can leave the running sum a hair short of the draw
    return len(problems) - 1


def selection_probabilities(
    problems: Sequence[Problem], wrong_weight: float = WRONG_ANSWER_WEIGHT
) -> List[float]:
    """Expected probability of each index under select_problem."""
    if not problems:
        raise EmptyCatalogError("Cannot compute probabilities for an empty catalog")

    weights = problem_weights(problems, wrong_weight)
    total = sum(weights)
    if total == 0:
        return [1.0] + [0.0] * (len(problems) - 1)
    return [w / total for w in weights]
