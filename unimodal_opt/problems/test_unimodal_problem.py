import warnings

import numpy as np
import pytest

from unimodal_opt.problems import UnimodalProblem, UnimodalProblemBuilder


def test_builder_defaults():
    builder = UnimodalProblemBuilder()
    assert builder.offset == 0.0
    assert builder.scale == 0.0

    problem = builder.build()
    assert problem.offset == 0.0
    assert problem.scale == 0.0
    assert problem.calc(3.0) == 0.0


def test_calc():
    problem = UnimodalProblemBuilder().with_offset(5.0).with_scale(2.0).build()
    assert problem.calc(7.0) == pytest.approx(1.0)
    assert problem.calc(3.0) == pytest.approx(1.0)
    assert problem.calc(4.0) == pytest.approx(2.0)
    assert problem(4.0) == problem.calc(4.0)

    flipped = UnimodalProblem(offset=5.0, scale=-2.0)
    assert flipped.calc(7.0) == pytest.approx(-1.0)


def test_calc_at_singularity_follows_ieee():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert UnimodalProblem(5.0, 2.0).calc(5.0) == np.inf
        assert UnimodalProblem(5.0, -2.0).calc(5.0) == -np.inf
        assert np.isnan(UnimodalProblem(5.0, 0.0).calc(5.0))


def test_problem_is_read_only():
    problem = UnimodalProblem(1.0, 2.0)
    with pytest.raises(AttributeError):
        problem.offset = 3.0
    with pytest.raises(AttributeError):
        problem.other = 3.0
    assert problem.offset == 1.0


def test_build_is_a_snapshot():
    builder = UnimodalProblemBuilder().with_offset(1.0).with_scale(-1.0)
    first = builder.build()
    builder.with_offset(2.0)
    second = builder.build()

    assert first.offset == 1.0
    assert second.offset == 2.0
    assert second.scale == -1.0


def test_randomize_ranges():
    for seed in range(100):
        builder = UnimodalProblemBuilder()
        assert builder.randomize(seed) is builder
        assert -50.0 <= builder.offset < 50.0
        assert -10.0 <= builder.scale < 10.0


def test_randomize_with_generator_is_reproducible():
    first = UnimodalProblemBuilder().randomize(np.random.default_rng(42)).build()
    second = UnimodalProblemBuilder().randomize(np.random.default_rng(42)).build()
    assert (first.offset, first.scale) == (second.offset, second.scale)

    third = UnimodalProblemBuilder().randomize(np.random.default_rng(43)).build()
    assert (first.offset, first.scale) != (third.offset, third.scale)


def test_repr():
    assert repr(UnimodalProblem(1.5, -2.0)) == 'UnimodalProblem(offset=1.5, scale=-2.0)'
