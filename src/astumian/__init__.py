"""
Astumian's stochastic games: two losing Markov chains that win when played
in random alternation (Parrondo's paradox).

D.R. Astumian, Am. J. Phys. 2005, 73(2):178-183
"""

from .aggregator import AggregateResult, simulate
from .errors import (
    AstumianError,
    InvalidGameId,
    InvalidGameMode,
    InvalidParameter,
    NonAbsorbingTrial,
)
from .matrices import (
    GAME_A,
    GAME_B,
    INITIAL_STATE,
    LOSE_STATE,
    NUM_STATES,
    WIN_STATE,
    GameId,
    matrix,
)
from .selector import GameMode, select_game
from .walker import TrialOutcome, TrialRecord, run_trial, walk

# Seed of the original program's drand48 stream
SEED = 2358

__all__ = [
    "SEED",
    "AggregateResult",
    "AstumianError",
    "GAME_A",
    "GAME_B",
    "GameId",
    "GameMode",
    "INITIAL_STATE",
    "InvalidGameId",
    "InvalidGameMode",
    "InvalidParameter",
    "LOSE_STATE",
    "NUM_STATES",
    "NonAbsorbingTrial",
    "TrialOutcome",
    "TrialRecord",
    "WIN_STATE",
    "matrix",
    "run_trial",
    "select_game",
    "simulate",
    "walk",
]
