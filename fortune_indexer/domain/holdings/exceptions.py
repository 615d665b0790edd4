"""Holding domain specific exceptions."""


class HoldingError(Exception):
    """Base class for holding related domain errors."""


class UnknownTokenTypeError(HoldingError):
    """Raised when a holders lookup names a token type that is not tracked."""
