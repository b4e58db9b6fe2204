from enum import Enum
from typing import Tuple, Union

from .errors import InvalidGameId


NUM_STATES = 5
LOSE_STATE = 0
WIN_STATE = 4
INITIAL_STATE = 2

TOLERANCE = 1e-9

Row = Tuple[float, ...]
TransitionMatrix = Tuple[Row, ...]


class GameId(Enum):
    A = "A"
    B = "B"


# ------------------------------------------------------------
# Transition tables (row = current state, column = next state)
# ------------------------------------------------------------

GAME_A: TransitionMatrix = (
    (0.0, 0.0, 0.0, 0.0, 0.0),
    (4 / 36, 24 / 36, 8 / 36, 0.0, 0.0),
    (0.0, 5 / 36, 29 / 36, 2 / 36, 0.0),
    (0.0, 0.0, 4 / 36, 24 / 36, 8 / 36),
    (0.0, 0.0, 0.0, 0.0, 0.0),
)

GAME_B: TransitionMatrix = (
    (0.0, 0.0, 0.0, 0.0, 0.0),
    (5 / 36, 29 / 36, 2 / 36, 0.0, 0.0),
    (0.0, 4 / 36, 24 / 36, 8 / 36, 0.0),
    (0.0, 0.0, 5 / 36, 29 / 36, 2 / 36),
    (0.0, 0.0, 0.0, 0.0, 0.0),
)


def is_absorbing(state: int) -> bool:
    return state == LOSE_STATE or state == WIN_STATE


def check_stochastic(m: TransitionMatrix, tol: float = TOLERANCE) -> None:
    """
    Verify the stochastic invariant of a transition matrix.

    Every transient row must be non-negative and sum to 1 within `tol`.
    Absorbing rows must be identically zero: they are never sampled, since
    a walk halts as soon as it lands on an absorbing state.
    """
    if len(m) != NUM_STATES:
        raise ValueError(f"expected {NUM_STATES} rows, got {len(m)}")

    for state, row in enumerate(m):
        if len(row) != NUM_STATES:
            raise ValueError(
                f"row {state}: expected {NUM_STATES} columns, got {len(row)}"
            )
        for p in row:
            if p < 0:
                raise ValueError(f"row {state}: negative probability {p}")

        total = 0.0
        for p in row:
            total += p

        expected = 0.0 if is_absorbing(state) else 1.0
        if abs(total - expected) > tol:
            raise ValueError(
                f"row {state}: sums to {total!r}, expected {expected}"
            )


_REGISTRY = {
    GameId.A: GAME_A,
    GameId.B: GAME_B,
}

for _m in _REGISTRY.values():
    check_stochastic(_m)


def matrix(game_id: Union[GameId, str]) -> TransitionMatrix:
    """
    Return the transition matrix for game A or B.

    Accepts a GameId or its value ("A" / "B"). Anything else raises
    InvalidGameId.
    """
    try:
        key = GameId(game_id)
    except ValueError:
        raise InvalidGameId(f"unknown game id {game_id!r}") from None
    return _REGISTRY[key]
