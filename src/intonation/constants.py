"""Constants used in multiple modules."""
from enum import Enum

CENTS_PER_OCTAVE = 1200
"""
Number of cents in the octave 2/1.
"""

CENTS_PER_SEMITONE = 100
"""
Number of cents in one step of 12EDO.
"""

SEMITONES_PER_OCTAVE = CENTS_PER_OCTAVE // CENTS_PER_SEMITONE


class IntegerWidth(Enum):
    """
    Widths of signed integers that checked ratio operations can target.

    Python integers never overflow, so ordinary ratio arithmetic is exact
    however large the numerator and denominator grow. Checked operations take
    one of these widths and raise if a result would not fit, which lets
    callers find out when a ratio is out of reach of fixed width code.
    """

    I32 = 32
    I64 = 64

    @property
    def bits(self) -> int:
        """Number of bits in the integer, including the sign bit."""
        return int(self.value)

    @property
    def min(self) -> int:
        """Smallest representable integer."""
        return -(2 ** (self.bits - 1))

    @property
    def max(self) -> int:
        """Largest representable integer."""
        return 2 ** (self.bits - 1) - 1
