import pytest

from unimodal_opt.random_problem import LOWER_BOUND, UPPER_BOUND, solve_random_problem


@pytest.mark.parametrize('seed', range(20))
def test_random_problem(seed):
    widths = []
    problem, x_min, val = solve_random_problem(xtol=2.0, rng=seed,
                                               callback=lambda lo, hi, w: widths.append(w))

    assert LOWER_BOUND <= x_min <= UPPER_BOUND
    assert widths[-1] <= 2.0
    assert val == problem(x_min)
    if problem.scale < 0:
        # singularity is the minimum
        assert abs(x_min - problem.offset) <= 2.0


def test_random_problem_is_reproducible():
    assert solve_random_problem(rng=7)[1:] == solve_random_problem(rng=7)[1:]
