"""
Conversion between cents values and approximate 12EDO intervals.

Also defines some common just intervals as numerator, denominator pairs.
"""
import math
from enum import Enum
from typing import NamedTuple

from intonation.constants import CENTS_PER_SEMITONE, SEMITONES_PER_OCTAVE

UNISON = (1, 1)
MAJOR_SECOND = (9, 8)
MAJOR_THIRD = (5, 4)
PERFECT_FOURTH = (4, 3)
PERFECT_FIFTH = (3, 2)
MAJOR_SIXTH = (5, 3)
MAJOR_SEVENTH = (15, 8)
OCTAVE = (2, 1)
SYNTONIC_COMMA = (81, 80)
"""
Difference between four just fifths and a just major third two octaves up.
"""


class TwelveEdoInterval(Enum):
    """
    Intervals of 12EDO, the common equal temperament.

    The value of each member is its number of semitones above the tonic.
    """

    PERFECT_UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    AUGMENTED_FOURTH = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11

    @property
    def semitones(self) -> int:
        """Number of semitones above the tonic."""
        return int(self.value)

    @property
    def cents(self) -> int:
        """Size of the interval in cents."""
        return self.semitones * CENTS_PER_SEMITONE

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()


class Approximation(NamedTuple):
    """
    Nearest 12EDO interval to some other interval.

    Attributes
    ----------
    interval : TwelveEdoInterval
        Closest 12EDO interval, with the octave folded onto the unison.
    cents : float
        Signed number of cents by which the approximated interval is larger
        than `interval`.
    """

    interval: TwelveEdoInterval
    cents: float

    def __str__(self) -> str:
        return f"{self.interval} {self.cents:+.3f}"


def nearest_semitone(cents: float) -> int:
    """
    Round a cents value to a whole number of semitones.

    Halfway values round up, towards the higher interval.

    Examples
    --------
    >>> nearest_semitone(701.955)
    7
    >>> nearest_semitone(50.0)
    1
    >>> nearest_semitone(-50.0)
    0
    """
    return math.floor(cents / CENTS_PER_SEMITONE + 0.5)


def approximate_12_edo_interval(cents: float) -> Approximation:
    """
    Find the 12EDO interval nearest to an interval of `cents` cents.

    Parameters
    ----------
    cents : float
        Size of the interval to approximate, in cents above the tonic.

    Returns
    -------
    Approximation
        Nearest 12EDO interval and the deviation from it in cents. Intervals
        which round to a whole number of octaves are named as unisons, with
        the deviation measured from that octave.

    Examples
    --------
    >>> approximate_12_edo_interval(386.0)
    Approximation(interval=<TwelveEdoInterval.MAJOR_THIRD: 4>, cents=-14.0)

    >>> approximate_12_edo_interval(1190.0)
    Approximation(interval=<TwelveEdoInterval.PERFECT_UNISON: 0>, cents=-10.0)
    """
    semitones = nearest_semitone(cents)
    interval = TwelveEdoInterval(semitones % SEMITONES_PER_OCTAVE)
    return Approximation(interval, cents - semitones * CENTS_PER_SEMITONE)
