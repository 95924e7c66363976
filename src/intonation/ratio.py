"""
Just intonation ratios.

A `Ratio` is an interval within one octave, held exactly as a fraction in
lowest terms. Any positive fraction can be used to build a `Ratio`; it is
scaled by a power of two into the range [1, 2) so that intervals an octave
apart compare equal.

Ordinary arithmetic uses Python integers and so never overflows, but very
large exponents and lattice coordinates give very large numerators and
denominators. The `checked_*` methods take an `IntegerWidth` and raise
`IntegerOverflowError` if any integer involved would not fit in it.
"""
import math
from dataclasses import dataclass
from fractions import Fraction

from intonation.arithmetic import check_width, largest_prime_factor, normalize_octave
from intonation.constants import CENTS_PER_OCTAVE, IntegerWidth
from intonation.errors import IntegerOverflowError
from intonation.interval import Approximation, approximate_12_edo_interval


@dataclass(frozen=True)
class Ratio:
    """
    Interval in just intonation, reduced into the octave [1, 2).

    Attributes
    ----------
    numerator : int
        Numerator of the ratio, coprime with `denominator`.
    denominator : int
        Denominator of the ratio, always positive.

    Examples
    --------
    >>> Ratio(3, 2)
    Ratio(3, 2)

    Fractions are reduced to lowest terms and into the octave.

    >>> Ratio(10, 5)
    Ratio(1, 1)
    >>> Ratio(25, 7)
    Ratio(25, 14)
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        numerator, denominator = normalize_octave(self.numerator, self.denominator)
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    @classmethod
    def checked(
        cls, numerator: int, denominator: int = 1, width: IntegerWidth = IntegerWidth.I32
    ) -> "Ratio":
        """
        Build a ratio, checking every integer involved fits in `width`.

        Parameters
        ----------
        numerator : int
            Numerator of the unnormalized fraction.
        denominator : int
            Denominator of the unnormalized fraction.
        width : IntegerWidth
            Integer width the inputs and the normalized result must fit in.

        Returns
        -------
        Ratio
            Normalized ratio.

        Raises
        ------
        IntegerOverflowError
            If the inputs or the normalized numerator or denominator do not
            fit in `width`.

        Examples
        --------
        >>> Ratio.checked(3, 2**31 - 1)
        Traceback (most recent call last):
          ...
        intonation.errors.IntegerOverflowError: value of 32 bits does not fit in a 32 bit integer
        """
        check_width(width, numerator, denominator)
        ratio = cls(numerator, denominator)
        check_width(width, ratio.numerator, ratio.denominator)
        return ratio

    def __repr__(self) -> str:
        return f"Ratio({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __float__(self) -> float:
        return self.numerator / self.denominator

    @property
    def value(self) -> Fraction:
        """Exact value of the ratio."""
        return Fraction(self.numerator, self.denominator)

    def __lt__(self, other: "Ratio") -> bool:
        return self.value < other.value

    def __le__(self, other: "Ratio") -> bool:
        return self.value <= other.value

    def __gt__(self, other: "Ratio") -> bool:
        return self.value > other.value

    def __ge__(self, other: "Ratio") -> bool:
        return self.value >= other.value

    def __mul__(self, other: "Ratio") -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self.numerator * other.numerator, self.denominator * other.denominator
        )

    def __truediv__(self, other: "Ratio") -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self.numerator * other.denominator, self.denominator * other.numerator
        )

    def __pow__(self, exponent: int) -> "Ratio":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "Ratio":
        return self.complement()

    def pow(self, exponent: int) -> "Ratio":
        """
        Raise the ratio to an integer power.

        Negative powers give the reciprocal of the corresponding positive
        power, reduced back into the octave.

        Examples
        --------
        >>> fifth = Ratio(3, 2)
        >>> fifth.pow(0), fifth.pow(2), fifth.pow(-2)
        (Ratio(1, 1), Ratio(9, 8), Ratio(16, 9))
        """
        if exponent == 0:
            return UNISON
        if exponent < 0:
            return self.pow(-exponent).reciprocal()
        return Ratio(self.numerator**exponent, self.denominator**exponent)

    def reciprocal(self) -> "Ratio":
        """Swap numerator and denominator, reducing back into the octave."""
        return Ratio(self.denominator, self.numerator)

    def complement(self) -> "Ratio":
        """
        Find the interval which makes up an octave together with this one.

        Examples
        --------
        >>> Ratio(3, 2).complement()
        Ratio(4, 3)
        >>> -Ratio(10, 9)
        Ratio(9, 5)
        """
        return Ratio(2 * self.denominator, self.numerator)

    def limit(self) -> int:
        """
        Find the prime limit of the ratio.

        Returns
        -------
        int
            Largest prime factor of the numerator or denominator. The unison
            1/1 has no prime factors and is given limit 1.

        Examples
        --------
        >>> Ratio(5, 4).limit()
        5
        >>> Ratio(1, 1).limit()
        1
        """
        return max(
            largest_prime_factor(self.numerator), largest_prime_factor(self.denominator)
        )

    @property
    def cents(self) -> float:
        """
        Calculate number of cents in the interval from 1 to the ratio.

        Examples
        --------
        >>> round(Ratio(3, 2).cents, 3)
        701.955
        """
        return CENTS_PER_OCTAVE * (
            math.log2(self.numerator) - math.log2(self.denominator)
        )

    def to_approximate_equal_tempered_interval(self) -> Approximation:
        """
        Find the nearest 12EDO interval to the ratio.

        Returns
        -------
        Approximation
            Nearest 12EDO interval and the number of cents by which the ratio
            is larger than it. Ratios just under the octave are approximated
            by the unison with a negative deviation.

        Examples
        --------
        >>> approximation = Ratio(5, 4).to_approximate_equal_tempered_interval()
        >>> approximation.interval
        <TwelveEdoInterval.MAJOR_THIRD: 4>
        >>> round(approximation.cents, 3)
        -13.686
        """
        return approximate_12_edo_interval(self.cents)

    def checked_mul(
        self, other: "Ratio", width: IntegerWidth = IntegerWidth.I32
    ) -> "Ratio":
        """Multiply, raising `IntegerOverflowError` if `width` is exceeded."""
        return Ratio.checked(
            self.numerator * other.numerator, self.denominator * other.denominator, width
        )

    def checked_div(
        self, other: "Ratio", width: IntegerWidth = IntegerWidth.I32
    ) -> "Ratio":
        """Divide, raising `IntegerOverflowError` if `width` is exceeded."""
        return Ratio.checked(
            self.numerator * other.denominator, self.denominator * other.numerator, width
        )

    def checked_pow(
        self, exponent: int, width: IntegerWidth = IntegerWidth.I32
    ) -> "Ratio":
        """
        Raise to an integer power, raising `IntegerOverflowError` if `width` is exceeded.

        Examples
        --------
        >>> Ratio(3, 2).checked_pow(-2)
        Ratio(16, 9)
        >>> Ratio(3, 2).checked_pow(21)
        Traceback (most recent call last):
          ...
        intonation.errors.IntegerOverflowError: value of 34 bits does not fit in a 32 bit integer
        """
        if exponent == 0:
            return UNISON
        # A base of at least 2 raised this far is past the largest value of `width`
        largest = max(self.numerator, self.denominator)
        if abs(exponent) * (largest.bit_length() - 1) >= width.bits - 1:
            raise IntegerOverflowError(
                f"{self} to the power {exponent} does not fit in a "
                f"{width.bits} bit integer"
            )
        power = Ratio.checked(
            self.numerator ** abs(exponent), self.denominator ** abs(exponent), width
        )
        if exponent > 0:
            return power
        return Ratio.checked(power.denominator, power.numerator, width)


UNISON = Ratio(1)
