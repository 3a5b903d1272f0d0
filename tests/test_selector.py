import random
from collections import Counter
from datetime import timedelta

import pytest

from math_quiz import EmptyCatalogError, MathOp, Problem, select_problem
from math_quiz.selector import problem_weights, selection_probabilities

from .conftest import FixedRng


def _problem(num_wrong, seconds):
    return Problem((7, 6), MathOp.PLUS, num_wrong, timedelta(seconds=seconds))


@pytest.fixture
def weighted():
    return [_problem(30, 30), _problem(10, 20), _problem(5, 5)]


def _frequencies(problems, n, wrong_weight):
    rng = random.Random(1234)
    counts = Counter(select_problem(problems, rng, wrong_weight) for _ in range(n))
    return [counts[i] / n for i in range(len(problems))]


def test_empty_catalog_raises():
    with pytest.raises(EmptyCatalogError):
        select_problem([], random.Random(0))


def test_single_problem_always_first():
    rng = random.Random(7)
    problems = [_problem(3, 4)]
    assert all(select_problem(problems, rng) == 0 for _ in range(1000))


def test_index_always_in_range(weighted):
    rng = random.Random(99)
    for _ in range(5000):
        assert 0 <= select_problem(weighted, rng) < len(weighted)


def test_linear_weights_distribution(weighted):
    assert problem_weights(weighted, wrong_weight=1) == [60.0, 30.0, 10.0]
    freqs = _frequencies(weighted, 200_000, wrong_weight=1)
    for got, want in zip(freqs, [0.60, 0.30, 0.10]):
        assert abs(got - want) <= 0.01


def test_default_weights_distribution(weighted):
    # 930, 320, 155 out of 1405
    freqs = _frequencies(weighted, 200_000, wrong_weight=30)
    for got, want in zip(freqs, selection_probabilities(weighted)):
        assert abs(got - want) <= 0.01
    assert round(freqs[0] * 100) in (65, 66, 67)


def test_draw_uses_closed_range_of_total(weighted):
    rng = FixedRng()
    select_problem(weighted, rng, wrong_weight=1)
    assert rng.calls == [(0.0, 100.0)]


def test_pick_at_zero_selects_first(weighted):
    assert select_problem(weighted, FixedRng(at_upper=False)) == 0


def test_pick_at_total_selects_last(weighted):
    assert select_problem(weighted, FixedRng(at_upper=True)) == 2


def test_pick_at_total_skips_trailing_zero_scores():
    problems = [_problem(1, 1), _problem(0, 3), _problem(0, 0)]
    assert select_problem(problems, FixedRng(at_upper=True), wrong_weight=1) == 1


def test_all_zero_scores_select_first():
    problems = [_problem(0, 0) for _ in range(4)]
    rng = FixedRng(at_upper=True)
    assert select_problem(problems, rng) == 0
    assert rng.calls == [(0.0, 0.0)]
    assert selection_probabilities(problems) == [1.0, 0.0, 0.0, 0.0]


def test_rounding_shortfall_falls_back_to_last(weighted):
    class OvershootRng:
        def uniform(self, a, b):
            return b + 1e-9

    assert select_problem(weighted, OvershootRng()) == 2


def test_selection_sees_updated_history():
    problems = [_problem(0, 0), _problem(0, 0)]
    problems[1].check_guess(13, timedelta(seconds=1))
    # only the second problem carries weight now
    assert select_problem(problems, FixedRng(at_upper=True)) == 1
    assert selection_probabilities(problems) == [0.0, 1.0]


def test_duplicates_are_independent_entries():
    problems = [_problem(0, 5), _problem(0, 5)]
    assert selection_probabilities(problems) == [0.5, 0.5]
