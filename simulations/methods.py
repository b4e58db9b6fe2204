# simulations/methods.py

from __future__ import annotations

from typing import Dict, Union

from astumian.errors import InvalidParameter
from astumian.selector import GameMode


# --- Registry / dispatch -----------------------------------------------------

# METHODS maps method name -> game mode. The CLI also accepts the numeric
# game-type of the original program (0, 1, 2, 3), i.e. GameMode values.
METHODS: Dict[str, GameMode] = {
    "game_a": GameMode.FIXED_A,
    "game_b": GameMode.FIXED_B,
    "uniform": GameMode.UNIFORM_SWITCH,
    "correlated": GameMode.CORRELATED_SWITCH,
}


def get_method(name: Union[str, int, GameMode]) -> GameMode:
    """
    Resolve a method name ('uniform'), a game-type id (2 or '2') or a
    GameMode to a GameMode.
    """
    if isinstance(name, GameMode):
        return name

    key = str(name).strip().lower()
    if key in METHODS:
        return METHODS[key]

    try:
        return GameMode(int(key))
    except ValueError:
        pass

    raise InvalidParameter(
        f"unknown method '{name}'. Available: {sorted(METHODS.keys())} or 0-3"
    )
