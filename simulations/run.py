# simulations/run.py

from __future__ import annotations

import random
from typing import List, Optional, Union

from astumian import SEED
from astumian.aggregator import simulate
from astumian.analytic import expected_ratio
from astumian.selector import GameMode
from astumian.walker import TrialRecord

from .common import ExperimentSpec, ExperimentResult, Timer
from .methods import get_method


def run_experiment(
    method: Union[str, int, GameMode],
    trials: int,
    seed: int = SEED,
    max_steps: Optional[int] = None,
) -> ExperimentResult:
    """
    Run a single simulation and return an ExperimentResult.

    Parameters
    ----------
    method:
        Method name ('game_a', 'game_b', 'uniform', 'correlated'), game-type
        id 0-3, or a GameMode.
    trials:
        Number of independent trials.
    seed:
        RNG seed. One random.Random is built from it and threaded through
        every trial.
    max_steps:
        Optional per-trial step cap (NonAbsorbingTrial when exceeded).

    Returns
    -------
    ExperimentResult
    """
    spec = ExperimentSpec(mode=get_method(method), trials=trials, seed=seed)
    rng = random.Random(spec.seed)
    lengths: List[int] = []

    def record(r: TrialRecord) -> None:
        lengths.append(r.steps)

    with Timer() as t:
        outcome = simulate(spec.mode, spec.trials, rng, max_steps=max_steps, on_trial=record)

    return ExperimentResult(
        spec=spec,
        outcome=outcome,
        lengths=lengths,
        runtime_s=t.elapsed_s,
        meta={"analytic_ratio": float(expected_ratio(spec.mode))},
    )


def run_pair(
    method_a: Union[str, int, GameMode],
    method_b: Union[str, int, GameMode],
    trials: int,
    seed: int = SEED,
    max_steps: Optional[int] = None,
):
    """
    Convenience helper: run two methods with the same trial count and seed.

    Returns (result_a, result_b).
    """
    ra = run_experiment(method=method_a, trials=trials, seed=seed, max_steps=max_steps)
    rb = run_experiment(method=method_b, trials=trials, seed=seed, max_steps=max_steps)
    return ra, rb
