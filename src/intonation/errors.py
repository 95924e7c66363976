"""Exceptions raised by intonation."""


class IntonationError(Exception):
    """Base class for all intonation errors."""


class DivideByZeroError(IntonationError, ZeroDivisionError):
    """Ratio built with a zero denominator."""


class InvalidRatioError(IntonationError, ValueError):
    """Ratio that is not a positive nonzero interval."""


class DimensionMismatchError(IntonationError, ValueError):
    """Lattice queried with the wrong number of coordinates."""


class InvalidBoundsError(IntonationError, ValueError):
    """Lattice dimension bounds that do not describe any indices."""


class IntegerOverflowError(IntonationError, OverflowError):
    """Result of a checked operation does not fit in the chosen integer width."""
