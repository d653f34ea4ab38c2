"""
Scalar test problems for the line search optimizers.
"""

import numpy as np


class UnimodalProblem:
    """
    Objective of the form scale * |1 / (x - offset)|.

    The function is singular at x == offset. A negative scale turns the singularity into
    the minimum; a positive scale makes it the maximum. Instances are immutable and can be
    shared between searches.

    Parameters
    ----------
    offset : float
        Location of the singularity.
    scale : float
        Multiplier applied to the absolute reciprocal distance.
    """

    __slots__ = ('_offset', '_scale')

    def __init__(self, offset, scale):
        object.__setattr__(self, '_offset', float(offset))
        object.__setattr__(self, '_scale', float(scale))

    def __setattr__(self, name, value):
        raise AttributeError("'{}' object is read-only".format(type(self).__name__))

    @property
    def offset(self):
        return self._offset

    @property
    def scale(self):
        return self._scale

    def calc(self, x):
        """
        Evaluate the objective at x.

        Evaluating at the singularity returns inf (nan when scale is 0), following
        IEEE-754 rules rather than raising.

        Parameters
        ----------
        x : float
            Point at which to evaluate.

        Returns
        -------
        float
            Objective value.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._scale * np.abs(np.divide(1.0, x - self._offset))

    def __call__(self, x):
        return self.calc(x)

    def __repr__(self):
        return '{}(offset={!r}, scale={!r})'.format(type(self).__name__, self._offset,
                                                    self._scale)


class UnimodalProblemBuilder:
    """
    Fluent builder for UnimodalProblem.

    Starts from offset=0 and scale=0, which builds a degenerate problem; set the values or
    call randomize() before build().
    """

    def __init__(self):
        self.offset = 0.0
        self.scale = 0.0

    def with_offset(self, offset):
        self.offset = float(offset)
        return self

    def with_scale(self, scale):
        self.scale = float(scale)
        return self

    def randomize(self, rng=None):
        """
        Draw offset from U[-50, 50) and scale from U[-10, 10).

        Parameters
        ----------
        rng : numpy.random.Generator, int or None
            Generator, or seed for a new one.

        Returns
        -------
        UnimodalProblemBuilder
            This builder.
        """
        rng = np.random.default_rng(rng)
        self.offset = float((rng.random() - 0.5) * 100.0)
        self.scale = float((rng.random() - 0.5) * 20.0)
        return self

    def build(self):
        return UnimodalProblem(self.offset, self.scale)
