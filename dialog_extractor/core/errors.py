"""Exceptions raised by the pure interval engine."""


class MalformedTimestamp(ValueError):
    """Raised when a timestamp is not in ``HH:MM:SS.mmm`` form or out of range."""


class NoIntervalsError(Exception):
    """Raised when there are no subtitle intervals to consolidate."""
