"""
Tonality diamonds.

A tonality diamond is built from a set of limits, usually odd numbers. Each
pair of limits gives a ratio, reduced into the octave. Laid out as a diamond,
the otonalities (ratios over a common denominator) run up from the shared
unison row, and the utonalities (ratios under a common numerator) run down
from it.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from intonation.errors import InvalidRatioError
from intonation.ratio import Ratio

logger = logging.getLogger(__name__)

ROW_SEPARATOR = "\n\n"
CELL_SEPARATOR = "\t\t"
INDENT = "\t"


@dataclass(frozen=True)
class Diamond:
    """
    Tonality diamond built from a sequence of limits.

    Attributes
    ----------
    limits : tuple of int
        Identities making up the diamond, in the order given. Must be positive.

    Examples
    --------
    >>> diamond = Diamond([1, 5, 3])
    >>> for row in diamond.grid(): print(" ".join(str(x) for x in row))
    1/1 5/4 3/2
    8/5 1/1 6/5
    4/3 5/3 1/1
    """

    limits: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "limits", tuple(self.limits))
        for limit in self.limits:
            if limit <= 0:
                raise InvalidRatioError(f"Diamond limit {limit} is not positive")
        logger.debug("Built diamond with limits %s", self.limits)

    def __len__(self) -> int:
        return len(self.limits)

    def ratio(self, i: int, j: int) -> Ratio:
        """Ratio of limit `i` over limit `j`, reduced into the octave."""
        return Ratio(self.limits[i], self.limits[j])

    def entries(self) -> Iterator[Tuple[int, int, Ratio]]:
        """
        Iterate over every ordered pair of limits.

        Yields
        ------
        tuple of (int, int, Ratio)
            Indices `i` and `j` of two limits along with the ratio of limit `i`
            over limit `j`. Entries where `i == j` are unisons.
        """
        for i in range(len(self.limits)):
            for j in range(len(self.limits)):
                yield i, j, self.ratio(i, j)

    def grid(self) -> List[List[Ratio]]:
        """
        Square table of the diamond's ratios.

        Returns
        -------
        list of list of Ratio
            Row `i` holds each limit over limit `i`, so that rows are
            otonalities and columns are utonalities.
        """
        return [
            [self.ratio(j, i) for j in range(len(self.limits))]
            for i in range(len(self.limits))
        ]

    def rows(self) -> List[List[Tuple[int, int]]]:
        """
        Positions of the grid's ratios in each row of the diamond layout.

        Returns
        -------
        list of list of tuple of (int, int)
            Rows from top to bottom of (row, column) indices into `grid`. The
            top half shortens upwards to the single ratio of the last limit
            over the first, the middle row is all unisons, and the bottom half
            mirrors the top with utonal ratios.

        Examples
        --------
        >>> Diamond([1, 3, 5]).rows()
        [[(0, 2)], [(0, 1), (1, 2)], [(0, 0), (1, 1), (2, 2)], [(1, 0), (2, 1)], [(2, 0)]]
        """
        last = len(self.limits) - 1
        otonal = [list(enumerate(range(i, last + 1))) for i in range(last, -1, -1)]
        utonal = [
            [(b, a) for a, b in enumerate(range(i, last + 1))]
            for i in range(1, last + 1)
        ]
        return otonal + utonal

    def display(self) -> str:
        """
        Render the diamond as text.

        Rows are indented with tabs so that each ratio sits between the two
        ratios either side of it in the row below.
        """
        grid = self.grid()
        lines = []
        for row in self.rows():
            indent = INDENT * (len(self.limits) - len(row))
            lines.append(indent + CELL_SEPARATOR.join(str(grid[a][b]) for a, b in row))
        return ROW_SEPARATOR.join(lines)

    def __str__(self) -> str:
        return self.display()
