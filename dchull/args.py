import argparse
import typing as t

from dchull import constants


def parse_args(argv: t.Optional[t.Sequence[str]] = None):
    parser = argparse.ArgumentParser("Divide and Conquer Convex Hull")
    parser.add_argument("--sizes", type=int, nargs="+",
                        default=list(constants.DEFAULT_SIZES))
    parser.add_argument("--seed", type=int, default=constants.DEFAULT_SEED)
    parser.add_argument("--datafile", type=str, default=None)
    parser.add_argument("--parallel", action="store_true")
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--verify", action="store_true")
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("--save", type=str, default=None)
    parser.add_argument("--verbose", action="store_true")
    parsed, _ = parser.parse_known_args(argv)
    return parsed
