"""Tests for intonation.lattice."""
import pytest

from intonation.constants import IntegerWidth
from intonation.errors import DimensionMismatchError, IntegerOverflowError, InvalidBoundsError
from intonation.lattice import (
    Infinite,
    Lattice,
    LatticeDimension,
    LengthBounded,
    RangeBounded,
    resolve_index,
)
from intonation.ratio import Ratio


@pytest.mark.parametrize(
    "index, expected", [(0, 0), (1, 1), (-42, -42), (103, 103)]
)
def test_resolve_index_for_infinite_bounds(index, expected):
    assert resolve_index(Infinite(), index) == expected


@pytest.mark.parametrize(
    "index, expected", [(0, 0), (1, 1), (2, 0), (3, 1), (-1, 1), (-42, 0), (103, 1)]
)
def test_resolve_index_for_length_bounded(index, expected):
    assert resolve_index(LengthBounded(2), index) == expected


@pytest.mark.parametrize(
    "index, expected", [(0, 0), (1, -1), (2, 0), (-1, -1), (-2, 0), (-3, -1), (5, -1)]
)
def test_resolve_index_for_negative_length_bounded(index, expected):
    assert resolve_index(LengthBounded(-2), index) == expected


@pytest.mark.parametrize(
    "index, expected",
    [(0, 0), (1, 1), (2, 2), (3, 3), (4, -2), (5, -1), (-2, -2), (-3, 3), (-8, -2)],
)
def test_resolve_index_for_range_bounded(index, expected):
    assert resolve_index(RangeBounded(-2, 3), index) == expected


@pytest.mark.parametrize(
    "index, expected", [(2, 2), (4, 4), (5, 2), (1, 4), (0, 3), (-1, 2)]
)
def test_resolve_index_for_positive_range_bounded(index, expected):
    assert resolve_index(RangeBounded(2, 4), index) == expected


def test_single_index_range():
    assert all(resolve_index(RangeBounded(3, 3), i) == 3 for i in range(-5, 5))


def test_invalid_bounds():
    with pytest.raises(InvalidBoundsError):
        LengthBounded(0)
    with pytest.raises(InvalidBoundsError):
        RangeBounded(3, 2)


def test_bounds_str():
    assert str(Infinite()) == "inf"
    assert str(LengthBounded(-12)) == "len:-12"
    assert str(RangeBounded(-2, 3)) == "range:-2,3"


def test_at_for_unbounded_dimension():
    dim = LatticeDimension(Ratio(3, 2), Infinite())

    assert dim.at(0) == Ratio(1, 1)
    assert dim.at(1) == Ratio(3, 2)
    assert dim.at(2) == Ratio(9, 8)
    assert dim.at(-1) == Ratio(4, 3)


def test_default_bounds_are_infinite():
    assert LatticeDimension(Ratio(3, 2)).bounds == Infinite()


def test_at_for_length_bounded_dimension():
    dim = LatticeDimension(Ratio(3, 2), LengthBounded(2))

    assert dim.at(0) == Ratio(1, 1)
    assert dim.at(1) == Ratio(3, 2)
    assert dim.at(2) == Ratio(1, 1)
    assert dim.at(-1) == Ratio(3, 2)


def test_at_for_negative_length_bounded_dimension():
    dim = LatticeDimension(Ratio(3, 2), LengthBounded(-2))

    assert dim.at(0) == Ratio(1, 1)
    assert dim.at(1) == Ratio(4, 3)
    assert dim.at(2) == Ratio(1, 1)
    assert dim.at(-1) == Ratio(4, 3)
    assert dim.at(-2) == Ratio(1, 1)


def test_at_for_range_bounded_dimension():
    dim = LatticeDimension(Ratio(3, 2), RangeBounded(-2, 3))

    assert dim.resolve(0) == Ratio(1, 1)
    assert dim.resolve(1) == Ratio(3, 2)
    assert dim.resolve(2) == Ratio(9, 8)
    assert dim.resolve(3) == Ratio(27, 16)
    assert dim.resolve(4) == Ratio(16, 9)
    assert dim.resolve(-1) == Ratio(4, 3)
    assert dim.resolve(-2) == Ratio(16, 9)
    assert dim.resolve(-3) == Ratio(27, 16)


def test_twelve_fifths_wrap():
    dim = LatticeDimension(Ratio(3, 2), LengthBounded(12))

    assert dim.resolve(12) == dim.resolve(0)
    assert dim.resolve(19) == Ratio(3, 2).pow(7)
    assert dim.resolve(-1) == Ratio(3, 2).pow(11)


def test_checked_resolve():
    dim = LatticeDimension(Ratio(3, 2), Infinite())
    assert dim.checked_resolve(-2) == Ratio(16, 9)
    with pytest.raises(IntegerOverflowError):
        dim.checked_resolve(30)
    assert dim.checked_resolve(30, IntegerWidth.I64) == dim.resolve(30)


def test_checked_resolve_wraps_before_power():
    dim = LatticeDimension(Ratio(3, 2), LengthBounded(12))
    assert dim.checked_resolve(1_000_001) == Ratio(3, 2).pow(5)


def test_one_dimensional_unbounded_lattice():
    lattice = Lattice([LatticeDimension(Ratio(3, 2), Infinite())])

    assert len(lattice) == 1
    assert lattice.at([0]) == Ratio(1, 1)
    assert lattice.at([1]) == Ratio(3, 2)


def test_two_dimensional_unbounded_lattice():
    lattice = Lattice(
        [
            LatticeDimension(Ratio(3, 2), Infinite()),
            LatticeDimension(Ratio(5, 4), Infinite()),
        ]
    )

    assert lattice.at([0, 0]) == Ratio(1, 1)
    assert lattice.at([1, 0]) == Ratio(3, 2)
    assert lattice.at([1, 1]) == Ratio(15, 8)
    assert lattice.at((0, -1)) == Ratio(8, 5)


@pytest.fixture
def seven_limit_lattice():
    return Lattice.from_ratios([Ratio(3, 2), Ratio(5, 4), Ratio(7, 4)])


@pytest.mark.parametrize(
    "coordinates, expected",
    [
        ([0, 0, 0], Ratio(1, 1)),
        ([1, 0, 0], Ratio(3, 2)),
        ([1, 1, 0], Ratio(15, 8)),
        ([1, 1, 1], Ratio(105, 32)),
        ([-1, -1, -1], Ratio(256, 105)),
        ([0, 0, 1], Ratio(7, 4)),
        ([-1, 0, 2], Ratio(49, 48)),
    ],
)
def test_three_dimensional_unbounded_lattice(seven_limit_lattice, coordinates, expected):
    assert seven_limit_lattice.at(coordinates) == expected
    assert seven_limit_lattice.checked_at(coordinates) == expected


@pytest.mark.parametrize("coordinates", [[], [0], [0, 0], [0, 0, 0, 0]])
def test_dimension_mismatch(seven_limit_lattice, coordinates):
    with pytest.raises(DimensionMismatchError):
        seven_limit_lattice.at(coordinates)
    with pytest.raises(DimensionMismatchError):
        seven_limit_lattice.checked_at(coordinates)


def test_mixed_bounds_lattice():
    lattice = Lattice.from_ratios(
        [Ratio(3, 2), Ratio(5, 4), Ratio(7, 4)],
        [LengthBounded(2), RangeBounded(-1, 1)],
    )

    assert lattice.dimensions[2].bounds == Infinite()
    assert lattice.at([2, 2, 0]) == Ratio(8, 5)
    assert lattice.at([3, -2, 1]) == Ratio(3, 2) * Ratio(5, 4) * Ratio(7, 4)


def test_checked_at_overflow(seven_limit_lattice):
    with pytest.raises(IntegerOverflowError):
        seven_limit_lattice.checked_at([10, 10, 10])
    assert seven_limit_lattice.checked_at([3, 3, 3], IntegerWidth.I64) == (
        seven_limit_lattice.at([3, 3, 3])
    )


def test_empty_lattice():
    lattice = Lattice(())
    assert lattice.at([]) == Ratio(1, 1)


def test_too_many_bounds():
    with pytest.raises(InvalidBoundsError):
        Lattice.from_ratios([Ratio(3, 2)], [LengthBounded(2), Infinite()])


def test_checked_at_far_from_origin(seven_limit_lattice):
    with pytest.raises(IntegerOverflowError):
        seven_limit_lattice.checked_at([10_000, 0, 0])
    with pytest.raises(IntegerOverflowError):
        seven_limit_lattice.checked_at([0, -20_000_000, 0], IntegerWidth.I64)


def test_checked_at_far_from_origin_in_bounded_dimension():
    lattice = Lattice.from_ratios([Ratio(3, 2)], [LengthBounded(12)])
    assert lattice.checked_at([20_000_001]) == Ratio(3, 2).pow(20_000_001 % 12)
