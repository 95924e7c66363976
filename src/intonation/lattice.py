"""
N-dimensional lattices of just intonation ratios.

Each dimension of a lattice is generated by a single ratio: moving one step
along the dimension multiplies by that ratio. The ratio at a point of the
lattice is the product of each generator raised to the corresponding
coordinate.

Dimensions can be bounded, in which case coordinates outside the bounds wrap
around, so a bounded dimension repeats the same few ratios forever.
"""
import logging
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Optional, Sequence, Tuple, Union

from intonation.constants import IntegerWidth
from intonation.errors import DimensionMismatchError, InvalidBoundsError
from intonation.ratio import UNISON, Ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Infinite:
    """
    No bounding, the dimension extends infinitely in both directions.

    Indexing into the dimension uses the index given.
    """

    def __str__(self) -> str:
        return "inf"


@dataclass(frozen=True)
class LengthBounded:
    """
    Length bounded, the dimension extends through the range [0, n).

    Indexing at `n` gives the same ratio as indexing at 0.

    If `n` is negative the dimension extends through (n, 0] instead, so
    indexing at 1 wraps around to `n + 1`. For example with `n = -2`
    indexing at 1 gives the same ratio as indexing at -1.

    Attributes
    ----------
    n : int
        Number of distinct indices in the dimension, signed to give the
        direction the dimension extends in from zero. Must be nonzero.
    """

    n: int

    def __post_init__(self) -> None:
        if self.n == 0:
            raise InvalidBoundsError("Length bound must be nonzero")

    def __str__(self) -> str:
        return f"len:{self.n}"


@dataclass(frozen=True)
class RangeBounded:
    """
    Range bounded, the dimension extends through the inclusive range [a, b].

    Indexing at `b + 1` gives the same ratio as indexing at `a`, and
    indexing at `a - 1` gives the same ratio as indexing at `b`.

    Note that `RangeBounded(0, 2)` is not the same as `LengthBounded(2)`:
    the range bound is inclusive so covers three indices, while the length
    bound covers two.

    Attributes
    ----------
    a : int
        Lowest index in the dimension.
    b : int
        Highest index in the dimension. Must be at least `a`.
    """

    a: int
    b: int

    def __post_init__(self) -> None:
        if self.a > self.b:
            raise InvalidBoundsError(f"Empty range [{self.a}, {self.b}]")

    def __str__(self) -> str:
        return f"range:{self.a},{self.b}"


Bounds = Union[Infinite, LengthBounded, RangeBounded]


def resolve_index(bounds: Bounds, index: int) -> int:
    """
    Wrap an index into the indices allowed by `bounds`.

    Parameters
    ----------
    bounds : Bounds
        Bounds of a lattice dimension.
    index : int
        Index to wrap.

    Returns
    -------
    int
        Index within `bounds` equivalent to `index`.

    Examples
    --------
    >>> resolve_index(Infinite(), -42)
    -42
    >>> resolve_index(LengthBounded(2), 103)
    1
    >>> resolve_index(LengthBounded(-2), 1)
    -1
    >>> resolve_index(RangeBounded(-2, 3), 4)
    -2
    """
    if isinstance(bounds, Infinite):
        return index

    # Python's % takes the sign of the divisor, so negative lengths wrap into (n, 0]
    if isinstance(bounds, LengthBounded):
        return index % bounds.n

    if isinstance(bounds, RangeBounded):
        width = bounds.b - bounds.a + 1
        return (index - bounds.a) % width + bounds.a

    raise ValueError(bounds)


@dataclass(frozen=True)
class LatticeDimension:
    """
    One dimension of a lattice.

    Attributes
    ----------
    ratio : Ratio
        Generator of the dimension. The ratio at index `i` is `ratio` raised
        to the power `i` once `i` has been wrapped into `bounds`.
    bounds : Bounds
        Rule for wrapping indices. Defaults to `Infinite()`.
    """

    ratio: Ratio
    bounds: Bounds = Infinite()

    def resolve(self, index: int) -> Ratio:
        """
        Find the ratio at `index` along this dimension.

        Examples
        --------
        >>> dimension = LatticeDimension(Ratio(3, 2), RangeBounded(-2, 3))
        >>> dimension.resolve(3), dimension.resolve(4)
        (Ratio(27, 16), Ratio(16, 9))
        """
        return self.ratio.pow(resolve_index(self.bounds, index))

    at = resolve

    def checked_resolve(
        self, index: int, width: IntegerWidth = IntegerWidth.I32
    ) -> Ratio:
        """Find the ratio at `index`, raising `IntegerOverflowError` if `width` is exceeded."""
        return self.ratio.checked_pow(resolve_index(self.bounds, index), width)


@dataclass(frozen=True)
class Lattice:
    """
    N-dimensional lattice of just intonation ratios.

    Attributes
    ----------
    dimensions : tuple of LatticeDimension
        Dimensions of the lattice. Their order sets the order of coordinates
        when indexing into the lattice.

    Examples
    --------
    >>> lattice = Lattice.from_ratios([Ratio(3, 2), Ratio(5, 4), Ratio(7, 4)])
    >>> lattice.at([1, 1, 0])
    Ratio(15, 8)
    >>> lattice.at([-1, -1, -1]) == Ratio(256, 105)
    True
    """

    dimensions: Tuple[LatticeDimension, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimensions", tuple(self.dimensions))
        logger.debug("Built lattice with dimensions %s", self.dimensions)

    @classmethod
    def from_ratios(
        cls,
        ratios: Iterable[Ratio],
        bounds: Optional[Sequence[Bounds]] = None,
    ) -> "Lattice":
        """
        Build a lattice with one dimension generated by each ratio.

        Parameters
        ----------
        ratios : iterable of Ratio
            Generators of each dimension.
        bounds : sequence of Bounds, optional
            Bounds of each dimension, in the same order as `ratios`. Dimensions
            without bounds given are unbounded.

        Returns
        -------
        Lattice
            Lattice generated by `ratios`.

        Raises
        ------
        InvalidBoundsError
            If more bounds are given than ratios.
        """
        generators = tuple(ratios)
        bounds = bounds if bounds is not None else ()
        if len(bounds) > len(generators):
            raise InvalidBoundsError(
                f"Got {len(bounds)} bounds for {len(generators)} dimensions"
            )
        return cls(
            tuple(
                LatticeDimension(r, bounds[i] if i < len(bounds) else Infinite())
                for i, r in enumerate(generators)
            )
        )

    def __len__(self) -> int:
        return len(self.dimensions)

    def _check_coordinates(self, coordinates: Sequence[int]) -> None:
        if len(coordinates) != len(self.dimensions):
            raise DimensionMismatchError(
                f"Expected {len(self.dimensions)} coordinates, got {len(coordinates)}"
            )

    def at(self, coordinates: Sequence[int]) -> Ratio:
        """
        Find the ratio at a point in the lattice.

        Parameters
        ----------
        coordinates : sequence of int
            Index along each dimension of the lattice.

        Returns
        -------
        Ratio
            Product of the ratios at each index, multiplied in dimension order.

        Raises
        ------
        DimensionMismatchError
            If the number of coordinates is not the number of dimensions.
        """
        self._check_coordinates(coordinates)
        return reduce(
            Ratio.__mul__,
            (d.resolve(i) for d, i in zip(self.dimensions, coordinates)),
            UNISON,
        )

    def checked_at(
        self, coordinates: Sequence[int], width: IntegerWidth = IntegerWidth.I32
    ) -> Ratio:
        """
        Find the ratio at a point, checking all integers fit in `width`.

        Raises
        ------
        DimensionMismatchError
            If the number of coordinates is not the number of dimensions.
        IntegerOverflowError
            If any power or product along the way does not fit in `width`.
        """
        self._check_coordinates(coordinates)
        product = UNISON
        for dimension, index in zip(self.dimensions, coordinates):
            product = product.checked_mul(dimension.checked_resolve(index, width), width)
        return product
