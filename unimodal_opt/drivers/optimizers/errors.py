"""Input errors raised by the line search optimizers."""


class SearchInputError(ValueError):
    """
    Base class for line search inputs that break the optimizer contract.
    """

    pass


class InvalidBracket(SearchInputError):
    """
    Raised when the initial bracket is empty, inverted or not a number.
    """

    pass


class InvalidTolerance(SearchInputError):
    """
    Raised when the bracket tolerance is not strictly positive.
    """

    pass


class InvalidIterationLimit(SearchInputError):
    """
    Raised when the iteration cap is negative or not an integer.
    """

    pass
