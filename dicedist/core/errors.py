"""Error types for dicedist."""


class NotationError(ValueError):
    """Raised when a dice notation string cannot be parsed."""


class DistributionError(RuntimeError):
    """Raised when a distribution could not be computed.

    Fatal for the whole computation: no partial distribution is ever returned.
    """
