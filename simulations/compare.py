# simulations/compare.py

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt

from astumian import SEED

from .common import common_x_range, format_stats_line
from .run import run_pair


# Keep the tool intentionally opinionated:
# - seed is fixed unless you edit the file
DEFAULT_SEED = SEED


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two game modes via Monte Carlo (same x-axis plots of trial lengths)."
    )
    parser.add_argument("--mode-a", required=True, help="e.g. game_a | game_b | uniform | correlated | 0-3")
    parser.add_argument("--mode-b", required=True, help="e.g. game_a | game_b | uniform | correlated | 0-3")
    parser.add_argument("--trials", type=int, required=True, help="number of trials per mode")
    parser.add_argument("--no-plot", action="store_true", help="print stats only")

    args = parser.parse_args(argv)

    ra, rb = run_pair(args.mode_a, args.mode_b, trials=args.trials, seed=DEFAULT_SEED)

    # Print stats
    print(format_stats_line(ra))
    print(format_stats_line(rb))

    if args.no_plot or ra.stats is None or rb.stats is None:
        return 0

    # Plot with same x-axis
    xmin, xmax = common_x_range([ra, rb])
    bins = max(1, min(60, xmax - xmin + 1))

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.hist(ra.lengths, bins=bins, range=(xmin, xmax))
    plt.title(f"{ra.method} (losses/wins = {ra.outcome.ratio_text()})")
    plt.xlabel("Transitions until absorption")
    plt.ylabel("Number of trials")
    plt.xlim(xmin, xmax)

    plt.subplot(1, 2, 2)
    plt.hist(rb.lengths, bins=bins, range=(xmin, xmax))
    plt.title(f"{rb.method} (losses/wins = {rb.outcome.ratio_text()})")
    plt.xlabel("Transitions until absorption")
    plt.xlim(xmin, xmax)

    plt.suptitle(
        f"Compare: {ra.method} vs {rb.method}  (trials={args.trials}, seed={DEFAULT_SEED})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
