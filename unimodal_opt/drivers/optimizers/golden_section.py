import logging

import numpy as np

from unimodal_opt.drivers.optimizers.errors import (InvalidBracket, InvalidIterationLimit,
                                                   InvalidTolerance)

logger = logging.getLogger(__name__)

## Constants
PHI = (1 + np.sqrt(5)) / 2
RESPHI = 2 - PHI   # 1/phi**2, fraction of the bracket between a bound and its probe


def _log_progress(lower_bound, upper_bound, width):
    logger.debug('%s %s %s', lower_bound, upper_bound, width)


def golden_section(fhandle, a, b, xtol=1E-6, callback=None, max_iter=None, dtype=np.float64):
    ## Read Input and Check Algorithm settings
    with np.errstate(over='ignore', invalid='ignore'):
        lower_bound = dtype(a)
        upper_bound = dtype(b)
        x_bracket_length = upper_bound - lower_bound
    xtol = dtype(xtol)
    if not lower_bound < upper_bound:
        raise InvalidBracket('Lower bound ({}) must be strictly less than upper bound ({}).'
                             .format(a, b))
    if not np.isfinite(x_bracket_length):
        raise InvalidBracket('Bracket [{}, {}] must be finite with a width representable as {}.'
                             .format(a, b, np.dtype(dtype).name))
    if not xtol > 0:
        raise InvalidTolerance('Bracket tolerance must be strictly positive, got {}.'
                               .format(xtol))
    if max_iter is not None and (isinstance(max_iter, bool)
                                 or not isinstance(max_iter, (int, np.integer)) or max_iter < 0):
        raise InvalidIterationLimit('Iteration limit must be a non-negative integer or None, '
                                    'got {!r}.'.format(max_iter))
    if callback is None:
        callback = _log_progress
    resphi = dtype(RESPHI)

    # Generate solution on both probes to choose initial direction
    lower_probe = lower_bound + resphi * (upper_bound - lower_bound)
    lower_value = fhandle(lower_probe)
    upper_probe = upper_bound - resphi * (upper_bound - lower_bound)
    upper_value = fhandle(upper_probe)
    n_eval = 2
    n_iter = 0
    converged = True

    # Iterate until bracketing distance is lower than xtol
    while np.abs(upper_bound - lower_bound) > xtol:
        if max_iter is not None and n_iter >= max_iter:
            converged = False
            logger.warning('Golden section search stopped after %d iterations with bracket '
                           'width %s > xtol %s', n_iter, np.abs(upper_bound - lower_bound), xtol)
            break
        if lower_value < upper_value:  # minimum in [lower_bound, upper_probe], compute next lower probe
            upper_bound = upper_probe
            upper_probe = lower_probe
            upper_value = lower_value
            lower_probe = lower_bound + resphi * (upper_bound - lower_bound)
            lower_value = fhandle(lower_probe)
        else:  # minimum in [lower_probe, upper_bound], compute next upper probe
            lower_bound = lower_probe
            lower_probe = upper_probe
            lower_value = upper_value
            upper_probe = upper_bound - resphi * (upper_bound - lower_bound)
            upper_value = fhandle(upper_probe)
        n_eval = n_eval + 1
        n_iter = n_iter + 1
        callback(lower_bound, upper_bound, np.abs(upper_bound - lower_bound))

    # Midpoint is always re-evaluated, never taken from a probe
    x = (upper_bound + lower_bound) / 2
    fval = fhandle(x)
    n_eval = n_eval + 1

    ## Additional output
    debug = {'n_iter': n_iter,
             'n_eval': n_eval,
             'x_bracket': [lower_bound, upper_bound],
             'x_bracket_length': upper_bound - lower_bound,
             'converged': converged}
    return x, fval, debug


def golden_section_search(fhandle, lower_bound, upper_bound, xtol=1E-6, callback=None,
                          max_iter=None, dtype=np.float64):
    """
    Minimize a unimodal scalar function on [lower_bound, upper_bound].

    Parameters
    ----------
    fhandle : callable
        Objective, called with a single float.
    lower_bound : float
        Lower end of the initial bracket.
    upper_bound : float
        Upper end of the initial bracket. Must be strictly greater than lower_bound, and
        the bracket width must be finite in dtype.
    xtol : float
        Stop once the bracket is no wider than this. Must be strictly positive and
        well above the floating point spacing around the minimizer, otherwise the
        loop may not terminate unless max_iter is given.
    callback : callable or None
        Called as callback(lower_bound, upper_bound, width) after every iteration.
        Defaults to logging the bracket at DEBUG level.
    max_iter : int or None
        Optional cap on the number of iterations, a non-negative integer. 0 evaluates only
        the initial probes and the midpoint. Unbounded by default.
    dtype : type
        Floating point type used for the bracket arithmetic.

    Returns
    -------
    tuple
        Midpoint of the final bracket and the objective value there.
    """
    x, fval, _ = golden_section(fhandle, lower_bound, upper_bound, xtol=xtol, callback=callback,
                                max_iter=max_iter, dtype=dtype)
    return x, fval
