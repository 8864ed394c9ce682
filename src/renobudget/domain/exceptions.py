"""Errors raised by the estimation core.

All errors are fatal to the calculation in progress: the core never returns
a partial wall list, ledger or breakdown once one of these has been raised.
"""


class EstimationError(ValueError):
    """Base class for errors raised while estimating a room."""

    pass


class InvalidGeometry(EstimationError):
    """Raised when shape, dimension, corner or opening inputs are unusable.

    Covers missing or non-positive dimensions, an L-shape without a corner,
    openings bound to walls the room does not have, and openings whose
    combined area exceeds the gross wall area.
    """

    pass


class InvalidOptions(EstimationError):
    """Raised when numeric calculation options are out of range."""

    pass
