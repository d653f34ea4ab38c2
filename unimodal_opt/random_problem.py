"""
Golden section search on a randomly generated unimodal problem.
"""

from unimodal_opt.drivers.optimizers import golden_section_search
from unimodal_opt.problems import UnimodalProblemBuilder

LOWER_BOUND = -200.0
UPPER_BOUND = 200.0


def solve_random_problem(xtol=2.0, rng=None, callback=None):
    """
    Build a random problem and search [-200, 200] for its minimum.

    Parameters
    ----------
    xtol : float
        Tolerance on the final bracket width.
    rng : numpy.random.Generator, int or None
        Generator, or seed, used to draw the problem.
    callback : callable or None
        Progress callback passed to the search.

    Returns
    -------
    tuple
        The problem, the estimated minimizer and the objective value there.
    """
    problem = UnimodalProblemBuilder().randomize(rng).build()
    x_min, val = golden_section_search(problem, LOWER_BOUND, UPPER_BOUND, xtol=xtol,
                                       callback=callback)
    return problem, x_min, val


if __name__ == '__main__':
    problem, x_min, val = solve_random_problem(callback=print)
    print('Random offset: {} Offset estimate: {} minimum value: {}'.format(problem.offset, x_min,
                                                                         val))
