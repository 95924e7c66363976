"""
Temperaments made by equal divisions of the octave (EDO).

Each step of an EDO can be compared with the nearest interval of 12EDO, the
common equal temperament.
"""
from dataclasses import dataclass
from typing import Iterator

from intonation.constants import CENTS_PER_OCTAVE
from intonation.interval import Approximation, approximate_12_edo_interval


@dataclass(frozen=True)
class Edo:
    """
    Temperament dividing the octave into `divisions` equal steps.

    Attributes
    ----------
    divisions : int
        Number of steps in one octave. Must be positive.
    """

    divisions: int

    def __post_init__(self) -> None:
        assert self.divisions > 0, f"EDO must have positive divisions, got {self.divisions}"

    def interval(self, steps: int) -> "EdoInterval":
        """
        Interval of `steps` steps in this EDO.

        Examples
        --------
        >>> Edo(12).interval(7).cents
        700.0
        """
        return EdoInterval(self, steps)

    def intervals(self) -> Iterator["EdoInterval"]:
        """Iterate over each step from the unison up to and including the octave."""
        for steps in range(self.divisions + 1):
            yield self.interval(steps)


@dataclass(frozen=True)
class EdoInterval:
    """
    Interval of a whole number of steps in an EDO.

    Attributes
    ----------
    edo : Edo
        Temperament the interval belongs to.
    steps : int
        Number of steps in the interval.
    """

    edo: Edo
    steps: int

    @property
    def cents(self) -> float:
        """Size of the interval in cents."""
        return CENTS_PER_OCTAVE * self.steps / self.edo.divisions

    def __str__(self) -> str:
        return f"{self.steps}/{self.edo.divisions}"

    def to_approximate_12_edo_interval(self) -> Approximation:
        """
        Find the nearest 12EDO interval.

        Examples
        --------
        Quarter tones sit exactly between two semitones and round up.

        >>> Edo(24).interval(1).to_approximate_12_edo_interval()
        Approximation(interval=<TwelveEdoInterval.MINOR_SECOND: 1>, cents=-50.0)

        The fifth of 53EDO is very close to a just fifth.

        >>> approximation = Edo(53).interval(31).to_approximate_12_edo_interval()
        >>> approximation.interval
        <TwelveEdoInterval.PERFECT_FIFTH: 7>
        >>> round(approximation.cents, 4)
        1.8868
        """
        return approximate_12_edo_interval(self.cents)
