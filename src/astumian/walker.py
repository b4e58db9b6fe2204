import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .errors import InvalidParameter, NonAbsorbingTrial
from .matrices import INITIAL_STATE, LOSE_STATE, WIN_STATE, matrix
from .selector import coerce_mode, select_game


class TrialOutcome(Enum):
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class TrialRecord:
    """
    Result of one walk: how it ended and how many transitions it took.
    """
    outcome: TrialOutcome
    steps: int


def sample_next_state(row: Sequence[float], r: float) -> int:
    """
    Inverse-CDF sampling over one row of a transition matrix.

    Returns the first column whose running cumulant strictly exceeds r,
    scanning columns in increasing order.
    """
    cumulant = 0.0
    last_positive = -1

    for state, p in enumerate(row):
        if p > 0:
            last_positive = state
        cumulant += p
        if r < cumulant:
            return state

    if last_positive < 0:
        raise ValueError("cannot sample from an all-zero (absorbing) row")

    # Numerical fallback: r landed above a row sum a hair below 1.0
    return last_positive


def walk(
    mode,
    rng: random.Random,
    max_steps: Optional[int] = None,
) -> TrialRecord:
    """
    Run a single trial from INITIAL_STATE until it is absorbed.

    Each step draws, in this order:
      1. the game selection (switching modes only),
      2. the transition draw r used for inverse-CDF sampling.

    Absorption is checked right after every transition, so the all-zero
    absorbing rows are never sampled.

    With max_steps set, a walk still transient after that many transitions
    raises NonAbsorbingTrial. Without it there is no bound; absorption happens
    with probability one.
    """
    mode = coerce_mode(mode)
    if max_steps is not None and max_steps <= 0:
        raise InvalidParameter("max_steps must be > 0")

    state = INITIAL_STATE
    steps = 0

    while True:
        if max_steps is not None and steps >= max_steps:
            raise NonAbsorbingTrial(
                f"{mode.name}: no absorption after {steps} steps (state={state})"
            )

        game = select_game(mode, state, rng)
        r = rng.random()
        state = sample_next_state(matrix(game)[state], r)
        steps += 1

        if state == LOSE_STATE:
            return TrialRecord(outcome=TrialOutcome.LOSE, steps=steps)
        if state == WIN_STATE:
            return TrialRecord(outcome=TrialOutcome.WIN, steps=steps)


def run_trial(
    mode,
    rng: random.Random,
    max_steps: Optional[int] = None,
) -> TrialOutcome:
    return walk(mode, rng, max_steps=max_steps).outcome
