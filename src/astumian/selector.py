import random
from enum import Enum
from fractions import Fraction

from .errors import InvalidGameMode
from .matrices import NUM_STATES, GameId


class GameMode(Enum):
    """
    Which transition matrix governs each step of a trial.

    Values double as the command-line game ids of the original program.
    """
    FIXED_A = 0
    FIXED_B = 1
    UNIFORM_SWITCH = 2
    CORRELATED_SWITCH = 3


def coerce_mode(mode) -> GameMode:
    """
    Accept a GameMode or its integer id; fail fast on anything else.
    """
    if isinstance(mode, GameMode):
        return mode
    # bool is an int subclass, but True is not a game id
    if isinstance(mode, int) and not isinstance(mode, bool):
        try:
            return GameMode(mode)
        except ValueError:
            pass
    raise InvalidGameMode(f"unknown game mode {mode!r}")


def _check_state(state: int) -> None:
    if state < 0 or state >= NUM_STATES:
        raise ValueError(f"state must be in [0, {NUM_STATES - 1}], got {state}")


def order_parameter(state: int) -> float:
    """phi = state / (NUM_STATES - 1), i.e. 0, 0.25, 0.5, 0.75 or 1."""
    _check_state(state)
    return state / (NUM_STATES - 1)


def select_game(mode, current_state: int, rng: random.Random) -> GameId:
    """
    Decide which game governs the next transition out of `current_state`.

    Fixed modes consume no draw. Switching modes consume exactly one draw u
    from `rng` and collapse it to a game with round():

      uniform:     B iff round(u) == 1
      correlated:  B iff round(phi * u) == 1

    round() is half-to-even, like C's rint(). Scaling the draw by phi keeps
    the choice on game A near the losing boundary; at phi == 0 it is always A.
    """
    mode = coerce_mode(mode)

    if mode is GameMode.FIXED_A:
        return GameId.A
    if mode is GameMode.FIXED_B:
        return GameId.B

    if mode is GameMode.UNIFORM_SWITCH:
        u = rng.random()
        return GameId.B if round(u) == 1 else GameId.A

    phi = order_parameter(current_state)
    u = rng.random()
    return GameId.B if round(phi * u) == 1 else GameId.A


def b_probability(mode, state: int) -> Fraction:
    """
    Exact probability that select_game() picks game B at `state`.

    For the switching modes u ~ U[0, 1), so round(x * u) == 1 iff
    x * u > 1/2 (the tie has probability zero).
    """
    mode = coerce_mode(mode)

    if mode is GameMode.FIXED_A:
        return Fraction(0)
    if mode is GameMode.FIXED_B:
        return Fraction(1)
    if mode is GameMode.UNIFORM_SWITCH:
        return Fraction(1, 2)

    _check_state(state)
    phi = Fraction(state, NUM_STATES - 1)
    if phi <= Fraction(1, 2):
        return Fraction(0)
    return 1 - Fraction(1, 2) / phi
