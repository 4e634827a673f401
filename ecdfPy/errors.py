class ECDFError(ValueError):
    """Base class for errors raised by ecdfPy"""


class InvalidInputError(ECDFError):
    """Input values cannot be totally ordered (NaN/Inf, non-numeric, not 1-D)"""


class InvalidArgumentError(ECDFError):
    """Arguments are inconsistent with each other (shape, permutation, settings)"""
