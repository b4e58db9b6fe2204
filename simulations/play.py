# simulations/play.py

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import NoReturn, Optional

from astumian import SEED
from astumian.aggregator import simulate
from astumian.analytic import REFERENCE_RATIOS
from astumian.errors import InvalidParameter
from astumian.selector import GameMode

from .common import ExperimentSpec, format_ratio_line


logger = logging.getLogger(__name__)


class UsageParser(argparse.ArgumentParser):
    """
    ArgumentParser that prints the full usage text and exits with status 1
    on any bad invocation (argparse itself would exit with 2).
    """

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> UsageParser:
    parser = UsageParser(
        prog="astumian-play",
        description="Astumian's stochastic games: two losing games that win when alternated.",
    )
    parser.add_argument(
        "game",
        type=int,
        help="integer game-type of 0, 1, 2 (uniform) or 3 (correlated)",
    )
    parser.add_argument(
        "numsteps",
        type=int,
        help="integer number of steps (independent trials) to perform",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def parse_spec(parser: UsageParser, args: argparse.Namespace, seed: int) -> ExperimentSpec:
    if args.game not in [m.value for m in GameMode]:
        parser.error("invalid game-type requested, should be 0, 1, 2 or 3")
    try:
        return ExperimentSpec(mode=GameMode(args.game), trials=args.numsteps, seed=seed)
    except InvalidParameter:
        parser.error("invalid number of simulation steps provided")


def main(argv: list[str], seed: Optional[int] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    spec = parse_spec(parser, args, SEED if seed is None else seed)
    print(f"Running game-type {spec.mode.value}")
    print(f"Running {spec.trials} simulation steps")

    logger.debug("seeding rng with %d", spec.seed)
    outcome = simulate(spec.mode, spec.trials, random.Random(spec.seed))

    print(format_ratio_line(outcome))
    print(
        "analytic: game0 = {:f}, game1 = {:f}, uniform = {:f}".format(
            REFERENCE_RATIOS[GameMode.FIXED_A],
            REFERENCE_RATIOS[GameMode.FIXED_B],
            REFERENCE_RATIOS[GameMode.UNIFORM_SWITCH],
        )
    )
    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
