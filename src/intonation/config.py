"""Config for intonation."""
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Type, TypeVar, Union

from intonation.constants import IntegerWidth

DEFAULT_LIMITS = [1, 5, 3]
DEFAULT_RATIOS = ["3/2", "5/4"]

T = TypeVar("T", bound="Config")


def _as_int_list(x: Union[str, List[Any]]) -> List[int]:
    if isinstance(x, str):
        return [int(y) for y in x.split(",")]
    return [int(y) for y in x]


def _as_str_list(x: Union[str, List[Any]]) -> List[str]:
    if isinstance(x, str):
        return x.split()
    return [str(y) for y in x]


@dataclass
class Config:
    """
    Overall config controlling intonation.

    Attributes
    ----------
    width : IntegerWidth
        Integer width that lattice points must fit in. Points whose ratio has
        a numerator or denominator too large for this width are reported as
        overflowing rather than printed. Defaults to I32.
    limits : list of int
        Limits to build tonality diamonds from. Defaults to 1, 5, 3.
    ratios : list of str
        Generating ratios, written as "n/d", for each lattice dimension.
        Defaults to 3/2 and 5/4.
    bounds : list of str
        Bounds for each lattice dimension, written as "inf", "len:N" or
        "range:A,B". Dimensions without bounds are unbounded.
    precision : int
        Number of decimal places to print cents deviations with. Defaults to 3.
    verbose : bool
        Whether to show logs. Defaults to False.
    """

    width: IntegerWidth = IntegerWidth.I32
    limits: List[int] = field(default_factory=lambda: list(DEFAULT_LIMITS))
    ratios: List[str] = field(default_factory=lambda: list(DEFAULT_RATIOS))
    bounds: List[str] = field(default_factory=list)
    precision: int = 3
    verbose: bool = False

    def __post_init__(self) -> None:
        assert self.limits, "At least one limit is needed for a diamond"
        assert all(x > 0 for x in self.limits)
        assert self.ratios, "At least one ratio is needed for a lattice"
        assert len(self.bounds) <= len(self.ratios)
        assert 0 <= self.precision <= 15

    @classmethod
    def from_dict(cls: Type[T], config_dict: Dict[str, Any]) -> T:
        """Build Config from dictionary."""
        field_names = {x.name for x in fields(cls)}
        attrs = {k: v for k, v in config_dict.items() if k in field_names}
        if "width" in attrs:
            attrs["width"] = _as_width(config_dict["width"])
        if "limits" in attrs:
            attrs["limits"] = _as_int_list(config_dict["limits"])
        if "ratios" in attrs:
            attrs["ratios"] = _as_str_list(config_dict["ratios"])
        if "bounds" in attrs:
            attrs["bounds"] = _as_str_list(config_dict["bounds"])
        if "precision" in attrs:
            attrs["precision"] = int(config_dict["precision"])
        return cls(**attrs)


def _as_width(x: Union[str, int, IntegerWidth]) -> IntegerWidth:
    if isinstance(x, IntegerWidth):
        return x
    if isinstance(x, int) or x.isdigit():
        return IntegerWidth(int(x))
    return _to_enum(x, IntegerWidth)


V = TypeVar("V", bound=Enum)


def _to_enum(x: str, enum: Type[V]) -> V:
    try:
        return enum[x.upper()]
    except KeyError:
        print(
            f"\n{enum.__name__} '{x}' not recognized."
            + f"\n\nSupported {enum.__name__}s: {[x.name for x in enum]}\n"
        )
        raise
