"""
OpenMDAO Wrapper for the 1 dimensional optimizers/line search algorithms. Only functional for problems with one optimization variable
"""

import sys

import numpy as np

from openmdao.core.constants import INF_BOUND
from openmdao.core.driver import Driver, RecordingDebugging

from unimodal_opt.drivers.optimizers import golden_section

# Optimizers
_optimizers = {'golden_section'}
_bounds_optimizers = {'golden_section'}

CITATIONS = """
@article{Kiefer1953,
 author = {Kiefer, J.},
 title = "{Sequential Minimax Search for a Maximum}",
 journal = "{Proceedings of the American Mathematical Society}",
 volume = {4},
 number = {3},
 year = {1953},
 pages = {502--506},
 doi = {10.2307/2032161},
}
"""


class LineSearchDriver(Driver):
    """
    Driver wrapper for the derivative free line search optimizers.

    The model must have exactly one scalar design variable with finite lower and upper
    bounds, which form the initial bracket, and a single objective. Constraints are not
    supported.

    Parameters
    ----------
    **kwargs : dict of keyword arguments
        Keyword arguments that will be mapped into the Driver options.

    Attributes
    ----------
    fail : bool
        Flag that indicates failure of most recent optimization.
    iter_count : int
        Counter for model executions.
    search_result : tuple
        Minimizer and objective value found by the most recent optimization.
    search_debug : dict
        Iteration and evaluation bookkeeping returned by the optimizer.
    _exc_info : 3 item tuple
        Storage for exception and traceback information.
    """

    def __init__(self, **kwargs):
        """
        Initialize the LineSearchDriver.
        """
        super().__init__(**kwargs)

        # What we support
        self.supports['optimization'] = True

        # What we don't support
        self.supports['inequality_constraints'] = False
        self.supports['equality_constraints'] = False
        self.supports['two_sided_constraints'] = False
        self.supports['linear_constraints'] = False
        self.supports['multiple_objectives'] = False
        self.supports['gradients'] = False
        self.supports['active_set'] = False
        self.supports['integer_design_vars'] = False
        self.supports['distributed_design_vars'] = False
        self.supports._read_only = True

        self.search_result = None
        self.search_debug = None
        self.fail = False
        self.iter_count = 0
        self._exc_info = None

        self.cite = CITATIONS

    def _declare_options(self):
        """
        Declare options before kwargs are processed in the init method.
        """
        self.options.declare('optimizer', 'golden_section', values=_optimizers,
                             desc='Name of optimizer to use')
        self.options.declare('tol', 1.0e-6, lower=0.0,
                             desc='Tolerance on the final bracket width.')
        self.options.declare('maxiter', default=None, types=int, allow_none=True,
                             desc='Maximum number of iterations. Unbounded if None.')
        self.options.declare('disp', default=False, types=bool,
                             desc='Set to True to print the bracket after each iteration.')

    def _get_name(self):
        """
        Get name of current optimizer.

        Returns
        -------
        str
            The name of the current optimizer.
        """
        return "LineSearchDriver_" + self.options['optimizer']

    def _setup_driver(self, problem):
        """
        Prepare the driver for execution.

        This is the final thing to run during setup.

        Parameters
        ----------
        problem : <Problem>
            Pointer
        """
        super()._setup_driver(problem)

        # Raises error if multiple objectives are not supported, but more objectives were defined.
        if not self.supports['multiple_objectives'] and len(self._objs) > 1:
            msg = '{} currently does not support multiple objectives.'
            raise RuntimeError(msg.format(self.msginfo))

        if len(self._designvars) != 1:
            msg = '{} requires exactly one design variable, but {} were declared.'
            raise RuntimeError(msg.format(self.msginfo, len(self._designvars)))

        for name, meta in self._designvars.items():
            if meta['size'] != 1:
                msg = "{} requires a scalar design variable, but '{}' has size {}."
                raise RuntimeError(msg.format(self.msginfo, name, meta['size']))

    def get_driver_objective_calls(self):
        """
        Return number of objective evaluations made during a driver run.

        Returns
        -------
        int
            Number of objective evaluations made during a driver run.
        """
        if self.search_debug is None:
            return 0
        return self.search_debug['n_eval']

    def _print_progress(self, lower_bound, upper_bound, width):
        """
        Print the current bracket, used as the optimizer callback when disp is set.

        Parameters
        ----------
        lower_bound : float
            Lower end of the current bracket.
        upper_bound : float
            Upper end of the current bracket.
        width : float
            Width of the current bracket.
        """
        print(lower_bound, upper_bound, width)

    def run(self):
        """
        Optimize the problem using the selected line search optimizer.

        Returns
        -------
        bool
            Failure flag; True if failed to converge, False is successful.
        """
        problem = self._problem()
        opt = self.options['optimizer']
        model = problem.model
        self.iter_count = 0
        self._exc_info = None

        self._check_for_missing_objective()

        # Initial Run
        with RecordingDebugging(self._get_name(), self.iter_count, self):
            model.run_solve_nonlinear()
            self.iter_count += 1

        # Bounds of the single design variable form the bracket
        bounds = []
        if opt in _bounds_optimizers:
            for name, meta in self._designvars.items():
                p_low = meta['lower']
                p_high = meta['upper']
                if isinstance(p_low, np.ndarray):
                    p_low = p_low[0]
                if isinstance(p_high, np.ndarray):
                    p_high = p_high[0]

                if (p_low is None or p_high is None
                        or p_low <= -INF_BOUND or p_high >= INF_BOUND):
                    msg = "{} requires finite lower and upper bounds on design variable '{}'."
                    raise RuntimeError(msg.format(self.msginfo, name))

                bounds.append(p_low)
                bounds.append(p_high)

        if self.options['disp']:
            callback = self._print_progress
        else:
            callback = None

        # optimize
        try:
            if opt == 'golden_section':
                x, f, debug = golden_section(self._objfunc, bounds[0], bounds[1],
                                             xtol=self.options['tol'], callback=callback,
                                             max_iter=self.options['maxiter'])
            else:
                msg = 'Optimizer "{}" is not implemented yet. Choose from: {}'
                raise NotImplementedError(msg.format(opt, _optimizers))

        # If an exception was swallowed in one of our callbacks, we want to raise it
        # rather than the message from the optimizer.
        except Exception:
            if self._exc_info is None:
                raise

        if self._exc_info is not None:
            self._reraise()

        self.search_result = (x, f)
        self.search_debug = debug
        self.fail = not debug['converged']

        return self.fail

    def _objfunc(self, x_new):
        """
        Evaluate and return the objective function.

        Model is executed here.

        Parameters
        ----------
        x_new : float
            New value of the design variable.

        Returns
        -------
        float
            Value of the objective function evaluated at the new design point.
        """
        model = self._problem().model

        try:

            # Pass in new inputs
            for name in self._designvars:
                self._set_design_var(name, np.atleast_1d(x_new))

            with RecordingDebugging(self._get_name(), self.iter_count, self):
                self.iter_count += 1
                model.run_solve_nonlinear()

            # Get the objective function evaluations
            for obj in self.get_objective_values().values():
                f_new = np.asarray(obj).ravel()[0]
                break

        except Exception:
            self._exc_info = sys.exc_info()
            return 0

        return f_new

    def _reraise(self):
        """
        Reraise any exception encountered when the optimizer calls back into our method.
        """
        raise self._exc_info[1].with_traceback(self._exc_info[2])
