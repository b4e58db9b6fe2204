# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import math
import time

from astumian.aggregator import AggregateResult
from astumian.errors import InvalidParameter
from astumian.selector import GameMode, coerce_mode


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Parameters of one run: which game mode, how many trials, which seed.
    """
    mode: GameMode
    trials: int
    seed: int

    def __post_init__(self) -> None:
        # Normalize integer ids to GameMode (frozen, hence object.__setattr__)
        object.__setattr__(self, "mode", coerce_mode(self.mode))
        if isinstance(self.trials, bool) or not isinstance(self.trials, int):
            raise InvalidParameter(f"trials must be an int, got {self.trials!r}")
        if self.trials < 0:
            raise InvalidParameter("trials must be >= 0")


@dataclass(frozen=True)
class SummaryStats:
    """
    Basic summary stats for trial lengths (transitions until absorption).
    """
    min: int
    max: int
    mean: float
    std: float  # population stddev


def summarize_lengths(lengths: List[int]) -> Optional[SummaryStats]:
    """
    Compute min/max/mean/std over trial lengths (population stddev).
    Returns None for an empty run.
    """
    if not lengths:
        return None

    mn = min(lengths)
    mx = max(lengths)

    n = len(lengths)
    total = 0
    for x in lengths:
        total += x
    mean = total / n

    var_acc = 0.0
    for x in lengths:
        d = x - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(min=mn, max=mx, mean=mean, std=std)


@dataclass
class ExperimentResult:
    """
    Common return type for all experiment runs.
    """
    spec: ExperimentSpec
    outcome: AggregateResult
    lengths: List[int]

    stats: Optional[SummaryStats] = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.stats = summarize_lengths(self.lengths)

        # Sanity: one length per trial, one outcome per trial
        expected = self.spec.trials
        if self.outcome.trials != expected:
            raise ValueError(
                f"outcome count mismatch: expected {expected}, got {self.outcome.trials}"
            )
        if len(self.lengths) != expected:
            raise ValueError(
                f"length count mismatch: expected {expected}, got {len(self.lengths)}"
            )

    @property
    def method(self) -> str:
        return self.spec.mode.name.lower()


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def common_x_range(results: List[ExperimentResult]) -> Tuple[int, int]:
    """
    Compute a shared (xmin, xmax) of trial lengths across results, for
    'same x-axis' histogram comparisons. Empty runs are skipped.
    """
    stats = [r.stats for r in results if r.stats is not None]
    if not stats:
        raise ValueError("results must contain at least one non-empty run")

    xmin = stats[0].min
    xmax = stats[0].max
    for s in stats[1:]:
        if s.min < xmin:
            xmin = s.min
        if s.max > xmax:
            xmax = s.max
    return xmin, xmax


def format_ratio_line(outcome: AggregateResult) -> str:
    """
    The original program's result line, e.g. 'losses / wins = 5/4 = 1.250000'.
    """
    return f"losses / wins = {outcome.losses}/{outcome.wins} = {outcome.ratio_text()}"


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    line = f"{r.method}: {format_ratio_line(r.outcome)}"
    analytic = r.meta.get("analytic_ratio")
    if analytic is not None:
        line += f", analytic={analytic:.4f}"
    s = r.stats
    if s is not None:
        line += f", steps min={s.min}, max={s.max}, mean={s.mean:.3f}, std={s.std:.3f}"
    if r.runtime_s is not None:
        line += f", runtime={r.runtime_s:.3f}s"
    return line
