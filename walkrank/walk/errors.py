"""Errors raised by the score accessor."""


class PagerankError(Exception):
    """Base class for PageRank query failures."""


class NotCalculatedError(PagerankError):
    """Raised when scores are requested before calculate() has completed."""


class NoTraversalsError(PagerankError):
    """Raised when no traversals were recorded, so scores are undefined.

    Happens after calculate() ran with zero rounds or without any starter
    nodes.
    """
