"""
Intonation is a small library for working with just intonation ratios.

Ratios are held exactly, in lowest terms, and reduced into a single octave.

Main features
-------------
    - Ratio arithmetic, complements, prime limits, and 12EDO approximations.
    - N-dimensional ratio lattices with per-axis wraparound bounds.
    - Tonality diamonds built from sets of odd limits.
    - Comparison of other equal divisions of the octave with 12EDO.
"""
from intonation.diamond import Diamond
from intonation.lattice import (
    Infinite,
    Lattice,
    LatticeDimension,
    LengthBounded,
    RangeBounded,
)
from intonation.ratio import Ratio

__version__ = "0.1.0"

__all__ = [
    "Diamond",
    "Infinite",
    "Lattice",
    "LatticeDimension",
    "LengthBounded",
    "RangeBounded",
    "Ratio",
]
