"""
Integer arithmetic underlying ratios.

Includes reduction of fractions to lowest terms, octave normalization, prime
factorization, and checks against fixed integer widths.
"""
import math
from typing import Tuple

from intonation.constants import IntegerWidth
from intonation.errors import DivideByZeroError, IntegerOverflowError, InvalidRatioError


def reduce_fraction(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Reduce a fraction to lowest terms with a positive denominator.

    Parameters
    ----------
    numerator : int
        Numerator of the fraction.
    denominator : int
        Denominator of the fraction. The signs of both parts are flipped if
        this is negative.

    Returns
    -------
    tuple of int
        Coprime numerator and positive denominator.

    Raises
    ------
    DivideByZeroError
        If `denominator` is zero.

    Examples
    --------
    >>> reduce_fraction(6, 4)
    (3, 2)
    >>> reduce_fraction(5, -10)
    (-1, 2)
    """
    if denominator == 0:
        raise DivideByZeroError(f"Zero denominator in {numerator}/{denominator}")
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    g = math.gcd(numerator, denominator)
    return numerator // g, denominator // g


def normalize_octave(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Scale a positive fraction by a power of two into the octave [1, 2).

    The result is in lowest terms, so calling this on an already normalized
    pair returns it unchanged.

    Parameters
    ----------
    numerator : int
        Numerator of the fraction.
    denominator : int
        Denominator of the fraction.

    Returns
    -------
    tuple of int
        Numerator and denominator of the octave reduced fraction.

    Raises
    ------
    DivideByZeroError
        If `denominator` is zero.
    InvalidRatioError
        If the fraction is zero or negative, which no power of two can bring
        into the octave.

    Examples
    --------
    >>> normalize_octave(1, 2)
    (1, 1)
    >>> normalize_octave(25, 7)
    (25, 14)
    >>> normalize_octave(5, 6)
    (5, 3)
    """
    numerator, denominator = reduce_fraction(numerator, denominator)
    if numerator <= 0:
        raise InvalidRatioError(
            f"{numerator}/{denominator} is not a positive nonzero interval"
        )

    # Equal bit lengths put the fraction strictly between 1/2 and 2
    shift = numerator.bit_length() - denominator.bit_length()
    if shift > 0:
        denominator <<= shift
    elif shift < 0:
        numerator <<= -shift
    if numerator < denominator:
        numerator <<= 1

    return reduce_fraction(numerator, denominator)


def largest_prime_factor(n: int) -> int:
    """
    Find the largest prime factor of `n` by trial division.

    Parameters
    ----------
    n : int
        Integer to factorize. The sign is ignored.

    Returns
    -------
    int
        Largest prime dividing `n`, or 1 if `n` is 1 (which has no prime
        factors).

    Examples
    --------
    >>> largest_prime_factor(360)
    5
    >>> largest_prime_factor(1)
    1
    """
    n = abs(n)
    assert n > 0
    largest = 1
    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            largest = factor
            n //= factor
        factor += 1 if factor == 2 else 2
    return max(largest, n)


def check_width(width: IntegerWidth, *values: int) -> None:
    """
    Check that integers fit in a signed integer of the given width.

    Parameters
    ----------
    width : IntegerWidth
        Integer width to check against.
    *values : int
        Integers to check.

    Raises
    ------
    IntegerOverflowError
        If any of `values` is out of range for `width`.
    """
    for value in values:
        if not width.min <= value <= width.max:
            raise IntegerOverflowError(
                f"value of {value.bit_length()} bits does not fit in a "
                f"{width.bits} bit integer"
            )
