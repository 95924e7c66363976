"""
Parsing of ratios, lattice points, and lattice bounds from text.

Ratios are written as `n/d`, or just `n` for a whole number. Lattice points
are comma-separated coordinates, with whitespace between points. Bounds are
one of `inf`, `len:N`, or `range:A,B`.
"""
import logging
from typing import Any, Iterable, List, Optional, Tuple

from lark import Lark, Token, Transformer
from lark.exceptions import VisitError
from lark.tree import Tree

from intonation.lattice import Bounds, Infinite, LengthBounded, RangeBounded
from intonation.ratio import Ratio

logger = logging.getLogger(__name__)

GRAMMAR = r"""
ratio: INT ["/" INT]

points: point+
point: SIGNED_INT ("," SIGNED_INT)*

bounds: "inf"i -> infinite
      | "len"i ":" SIGNED_INT -> length_bounded
      | "range"i ":" SIGNED_INT "," SIGNED_INT -> range_bounded

%import common.INT
%import common.SIGNED_INT
%import common.WS
%ignore WS
"""

PARSER = Lark(
    GRAMMAR,
    start=["ratio", "points", "bounds"],
    parser="lalr",
    maybe_placeholders=True,
)


class TextTransformer(Transformer[Token, Any]):
    """
    Transformer to convert a parse tree into ratios, points, or bounds.

    Each method is called on the node in the tree with the same name. For more
    information see the Lark docs
    `here <https://lark-parser.readthedocs.io/en/latest/visitors.html#transformer>`_.
    """

    def ratio(self, children: List[Optional[Token]]) -> Ratio:
        """
        Convert a numerator and optional denominator into a ratio.

        Parameters
        ----------
        children : list of (Token or None)
            Numerator and denominator. The denominator is None for a whole
            number such as "3".

        Returns
        -------
        Ratio
            Ratio of the two integers, reduced into the octave.
        """
        numerator, denominator = children
        assert numerator is not None
        return Ratio(int(numerator), int(denominator) if denominator is not None else 1)

    def point(self, children: List[Token]) -> Tuple[int, ...]:
        """Convert coordinates into a tuple of integers."""
        return tuple(int(x) for x in children)

    def points(self, children: List[Tuple[int, ...]]) -> List[Tuple[int, ...]]:
        """Collect points into a list."""
        return list(children)

    def infinite(self, children: List[Token]) -> Infinite:  # noqa: ARG002
        """Unbounded dimension."""
        return Infinite()

    def length_bounded(self, children: List[Token]) -> LengthBounded:
        """Dimension bounded by its length."""
        (n,) = children
        return LengthBounded(int(n))

    def range_bounded(self, children: List[Token]) -> RangeBounded:
        """Dimension bounded by an inclusive range."""
        a, b = children
        return RangeBounded(int(a), int(b))


def _transform(tree: Tree) -> Any:  # noqa: ANN401
    try:
        return TextTransformer().transform(tree)
    except VisitError as e:
        # Errors from building ratios or bounds are more useful than lark's wrapper
        raise e.orig_exc from e


def parse_ratio(text: str) -> Ratio:
    """
    Parse text into a ratio.

    Parameters
    ----------
    text : str
        Ratio written as "n/d" or "n".

    Returns
    -------
    Ratio
        Ratio corresponding to `text`.

    Raises
    ------
    lark.exceptions.LarkError
        If `text` is not a ratio.
    IntonationError
        If `text` is a ratio with a zero numerator or denominator.

    Examples
    --------
    >>> parse_ratio("3/2")
    Ratio(3, 2)
    >>> parse_ratio("5")
    Ratio(5, 4)
    """
    ratio: Ratio = _transform(PARSER.parse(text, start="ratio"))
    return ratio


def parse_ratios(texts: Iterable[str]) -> List[Ratio]:
    """Parse each of `texts` into a ratio."""
    return [parse_ratio(x) for x in texts]


def parse_points(text: str) -> List[Tuple[int, ...]]:
    """
    Parse text into lattice points.

    Examples
    --------
    >>> parse_points("0,0,1 1,1,1 -1,0,2")
    [(0, 0, 1), (1, 1, 1), (-1, 0, 2)]
    """
    if not text.strip():
        return []
    points: List[Tuple[int, ...]] = _transform(PARSER.parse(text, start="points"))
    logger.debug("Parsed %d lattice points", len(points))
    return points


def parse_bounds(text: str) -> Bounds:
    """
    Parse text into lattice dimension bounds.

    Examples
    --------
    >>> parse_bounds("len:12")
    LengthBounded(n=12)
    >>> parse_bounds("range:-2,3")
    RangeBounded(a=-2, b=3)
    """
    bounds: Bounds = _transform(PARSER.parse(text, start="bounds"))
    return bounds
