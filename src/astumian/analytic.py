"""
Exact absorption probabilities for the four game modes.

Each mode is equivalent to a single Markov chain whose row s is the mixture

    (1 - b_s) * A[s] + b_s * B[s]

where b_s is the probability that game B governs a step taken from state s
(see selector.b_probability). The probability h_s of ending in WIN_STATE
satisfies h = P h on the transient states with h(LOSE) = 0, h(WIN) = 1.
This module solves that system with Fractions, so the reference values come
out exact (e.g. 5/4 for a single game, 81/100 for uniform switching).
"""

from fractions import Fraction
from typing import Dict, List

from .matrices import INITIAL_STATE, LOSE_STATE, NUM_STATES, WIN_STATE, is_absorbing
from .selector import GameMode, b_probability, coerce_mode


# The transition tables again, as exact numerators over 36.
_DENOMINATOR = 36

_GAME_A_NUMERATORS = (
    (0, 0, 0, 0, 0),
    (4, 24, 8, 0, 0),
    (0, 5, 29, 2, 0),
    (0, 0, 4, 24, 8),
    (0, 0, 0, 0, 0),
)

_GAME_B_NUMERATORS = (
    (0, 0, 0, 0, 0),
    (5, 29, 2, 0, 0),
    (0, 4, 24, 8, 0),
    (0, 0, 5, 29, 2),
    (0, 0, 0, 0, 0),
)

# losses / wins printed by the original program next to each run.
# No reference value was printed for correlated switching; expected_ratio()
# derives it instead.
REFERENCE_RATIOS: Dict[GameMode, float] = {
    GameMode.FIXED_A: 20.0 / 16.0,
    GameMode.FIXED_B: 20.0 / 16.0,
    GameMode.UNIFORM_SWITCH: 81.0 / 100.0,
}


def effective_matrix(mode) -> List[List[Fraction]]:
    mode = coerce_mode(mode)
    rows = []
    for s in range(NUM_STATES):
        b = b_probability(mode, s)
        rows.append([
            ((1 - b) * a + b * bb) / _DENOMINATOR
            for a, bb in zip(_GAME_A_NUMERATORS[s], _GAME_B_NUMERATORS[s])
        ])
    return rows


def win_probabilities(mode) -> List[Fraction]:
    """
    Probability of absorbing in WIN_STATE from each state, for `mode`.
    """
    p = effective_matrix(mode)
    transient = [s for s in range(NUM_STATES) if not is_absorbing(s)]
    n = len(transient)

    # (I - Q) h = p(s -> WIN), as an augmented matrix
    system = []
    for i, s in enumerate(transient):
        row = []
        for j, t in enumerate(transient):
            row.append((1 if i == j else 0) - p[s][t])
        row.append(p[s][WIN_STATE])
        system.append(row)

    # Gauss-Jordan elimination; exact arithmetic, so any nonzero pivot works
    for col in range(n):
        pivot = None
        for r in range(col, n):
            if system[r][col] != 0:
                pivot = r
                break
        if pivot is None:
            raise ValueError("singular system: some state never absorbs")
        system[col], system[pivot] = system[pivot], system[col]

        lead = system[col][col]
        system[col] = [x / lead for x in system[col]]
        for r in range(n):
            if r != col and system[r][col] != 0:
                factor = system[r][col]
                system[r] = [x - factor * y for x, y in zip(system[r], system[col])]

    h = [Fraction(0)] * NUM_STATES
    h[WIN_STATE] = Fraction(1)
    h[LOSE_STATE] = Fraction(0)
    for i, s in enumerate(transient):
        h[s] = system[i][n]
    return h


def expected_ratio(mode) -> Fraction:
    """
    Long-run losses / wins for trials started at INITIAL_STATE.
    """
    win = win_probabilities(mode)[INITIAL_STATE]
    return (1 - win) / win
