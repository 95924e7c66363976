"""Tests for intonation.arithmetic."""
import pytest

from intonation.arithmetic import (
    check_width,
    largest_prime_factor,
    normalize_octave,
    reduce_fraction,
)
from intonation.constants import IntegerWidth
from intonation.errors import DivideByZeroError, IntegerOverflowError, InvalidRatioError


@pytest.mark.parametrize(
    "fraction, expected",
    [((6, 4), (3, 2)), ((3, -6), (-1, 2)), ((-4, -8), (1, 2)), ((7, 1), (7, 1))],
)
def test_reduce_fraction(fraction, expected):
    assert reduce_fraction(*fraction) == expected


def test_reduce_fraction_zero_denominator():
    with pytest.raises(DivideByZeroError):
        reduce_fraction(1, 0)


@pytest.mark.parametrize(
    "fraction, expected",
    [
        ((1, 1), (1, 1)),
        ((2, 1), (1, 1)),
        ((1, 2), (1, 1)),
        ((3, 1), (3, 2)),
        ((255, 256), (255, 128)),
        ((257, 256), (257, 256)),
        ((2**100 * 3, 1), (3, 2)),
        ((1, 2**100 * 3), (4, 3)),
    ],
)
def test_normalize_octave(fraction, expected):
    assert normalize_octave(*fraction) == expected


@pytest.mark.parametrize("fraction", [(0, 1), (-1, 2)])
def test_normalize_octave_invalid(fraction):
    with pytest.raises(InvalidRatioError):
        normalize_octave(*fraction)


@pytest.mark.parametrize(
    "n, expected",
    [(1, 1), (2, 2), (3, 3), (4, 2), (15, 5), (49, 7), (97, 97), (2 * 3 * 101, 101), (-10, 5)],
)
def test_largest_prime_factor(n, expected):
    assert largest_prime_factor(n) == expected


def test_integer_width():
    assert IntegerWidth.I32.max == 2**31 - 1
    assert IntegerWidth.I32.min == -(2**31)
    assert IntegerWidth.I64.bits == 64


def test_check_width():
    check_width(IntegerWidth.I32, 0, 2**31 - 1, -(2**31))
    with pytest.raises(IntegerOverflowError):
        check_width(IntegerWidth.I32, 1, 2**31)
    with pytest.raises(IntegerOverflowError):
        check_width(IntegerWidth.I64, -(2**63) - 1)


def test_check_width_reports_bit_length():
    with pytest.raises(IntegerOverflowError, match="value of 32 bits"):
        check_width(IntegerWidth.I32, 2**31)


def test_check_width_of_huge_integer():
    # Too many digits to convert to a decimal string
    with pytest.raises(IntegerOverflowError, match="value of 20001 bits"):
        check_width(IntegerWidth.I64, 2**20_000)
