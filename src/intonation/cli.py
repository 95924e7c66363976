"""Command line interface for intonation."""
import json
import logging
import logging.config
import sys
from argparse import ArgumentParser, Namespace
from typing import Callable, Dict, Optional, Sequence

from lark.exceptions import LarkError

from intonation.config import Config
from intonation.diamond import Diamond
from intonation.edo import Edo
from intonation.errors import IntonationError
from intonation.interval import Approximation
from intonation.lattice import Lattice
from intonation.parser import parse_bounds, parse_points, parse_ratio, parse_ratios
from intonation.ratio import Ratio

logger = logging.getLogger(__name__)


LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": True,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "level": "DEBUG",
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "intonation": {"handlers": ["default"], "level": "DEBUG", "propagate": False},
        "__main__": {"handlers": ["default"], "level": "DEBUG", "propagate": False},
    },
}


def get_parser() -> ArgumentParser:
    """Build parser for running intonation command line interface."""
    parser = ArgumentParser(
        description="Intonation - tools for just intonation ratios, lattices, and tonality diamonds."
    )
    parser.add_argument("-c", "--config", help="Config file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="Show logs"
    )
    parser.add_argument(
        "-w",
        "--width",
        type=str,
        help="Integer width (i32 or i64) that lattice ratios must fit in",
    )
    parser.add_argument(
        "--precision", type=int, help="Decimal places for cents deviations"
    )

    subparsers = parser.add_subparsers(dest="command")

    ratios = subparsers.add_parser(
        "ratios",
        help="Find the nearest 12EDO intervals to ratios",
        description="Print each ratio with its nearest 12EDO interval, "
        + "the deviation from that interval in cents, and its prime limit.",
    )
    ratios.add_argument("texts", nargs="+", metavar="RATIO", help="Ratios, e.g. 3/2")

    diamond = subparsers.add_parser(
        "diamond",
        help="Show a tonality diamond",
        description="Print a tonality diamond, otonalities on top and "
        + "utonalities on the bottom, built from the given limits.",
    )
    diamond.add_argument(
        "-l", "--limits", type=int, nargs="+", help="Limits, e.g. 1 5 3"
    )

    lattice = subparsers.add_parser(
        "lattice",
        help="Query a ratio lattice",
        description="Build a lattice with one dimension per ratio and print "
        + "the ratio at each point. Points are comma-separated coordinates; "
        + "write a single point starting with a minus sign as --indices=-1,0.",
    )
    lattice.add_argument(
        "-r", "--ratios", type=str, nargs="+", help="Generating ratios, e.g. 3/2 5/4"
    )
    lattice.add_argument(
        "-b",
        "--bounds",
        type=str,
        nargs="+",
        help="Bounds for each dimension: inf, len:N, or range:A,B",
    )
    lattice.add_argument(
        "-i", "--indices", type=str, nargs="*", default=[], help="Points, e.g. 0,1 1,1"
    )

    edo = subparsers.add_parser(
        "edo",
        help="Compare an EDO with 12EDO",
        description="Print each step of an equal division of the octave with "
        + "its nearest 12EDO interval.",
    )
    edo.add_argument(
        "-e", "--edo", type=int, required=True, help="Number of divisions"
    )
    return parser


def format_approximation(approximation: Approximation, precision: int) -> str:
    """Format 12EDO interval and deviation as tab-separated columns."""
    return f"{approximation.interval}\t{approximation.cents:+.{precision}f}"


def format_ratio(ratio: Ratio, precision: int) -> str:
    """
    Format ratio with its nearest 12EDO interval.

    Examples
    --------
    >>> format_ratio(Ratio(3, 2), 3)
    '3/2\\tperfect fifth\\t+1.955'
    """
    approximation = ratio.to_approximate_equal_tempered_interval()
    return f"{ratio}\t{format_approximation(approximation, precision)}"


def print_ratios(args: Namespace, config: Config) -> None:
    """Print each ratio in `args.texts` with its approximation and limit."""
    for text in args.texts:
        ratio = parse_ratio(text)
        print(f"{format_ratio(ratio, config.precision)}\t{ratio.limit()}-limit")


def print_diamond(args: Namespace, config: Config) -> None:  # noqa: ARG001
    """Print tonality diamond built from `config.limits`."""
    print(Diamond(config.limits))


def print_lattice(args: Namespace, config: Config) -> None:
    """Print ratio at each point of `args.indices` in lattice from `config`."""
    lattice = Lattice.from_ratios(
        parse_ratios(config.ratios), [parse_bounds(x) for x in config.bounds]
    )
    for point in parse_points(" ".join(args.indices)):
        ratio = lattice.checked_at(point, config.width)
        coordinates = ",".join(str(x) for x in point)
        print(f"{coordinates}\t{format_ratio(ratio, config.precision)}")


def print_edo(args: Namespace, config: Config) -> None:
    """Print each step of `args.edo` EDO with its approximation."""
    for interval in Edo(args.edo).intervals():
        approximation = interval.to_approximate_12_edo_interval()
        print(f"{interval}\t{format_approximation(approximation, config.precision)}")


COMMANDS: Dict[str, Callable[[Namespace, Config], None]] = {
    "ratios": print_ratios,
    "diamond": print_diamond,
    "lattice": print_lattice,
    "edo": print_edo,
}
"""
Function run for each subcommand.
"""


def top_level(args: Namespace) -> None:
    """
    Top level function for running command line interface.

    Parameters
    ----------
    args : Namespace
        Command line arguments.
    """
    # Options can come from config file or command line args
    # Command line arguments override config values if both are used
    config_file_dict = {}
    if args.config is not None:
        with open(args.config, encoding="utf8") as f:
            config_file_dict = json.load(f)
    args_dict = {k: v for k, v in vars(args).items() if v is not None}
    config = Config.from_dict({**config_file_dict, **args_dict})

    if config.verbose:
        logging.config.dictConfig(LOGGING_CONFIG)

    logger.info("Running %s with %s", args.command, config)
    COMMANDS[args.command](args, config)


def main(cli_args: Optional[Sequence[str]] = None) -> None:
    """Get command line arguments and run `top_level`."""
    parser = get_parser()
    args = parser.parse_args(cli_args)
    if args.command is None:
        parser.print_help()
        return
    try:
        top_level(args)
    except (IntonationError, LarkError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
