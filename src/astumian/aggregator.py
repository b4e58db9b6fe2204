import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import InvalidParameter
from .selector import coerce_mode
from .walker import TrialOutcome, TrialRecord, walk


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateResult:
    """
    Win / loss tallies over a batch of independent trials.
    """
    wins: int
    losses: int

    @property
    def trials(self) -> int:
        return self.wins + self.losses

    @property
    def ratio(self) -> Optional[float]:
        """
        losses / wins, or None when no trial was won (the ratio is undefined).
        """
        if self.wins == 0:
            return None
        return self.losses / self.wins

    def ratio_text(self) -> str:
        ratio = self.ratio
        if ratio is None:
            return "undefined"
        return f"{ratio:f}"


def simulate(
    mode,
    num_trials: int,
    rng: random.Random,
    max_steps: Optional[int] = None,
    on_trial: Optional[Callable[[TrialRecord], None]] = None,
) -> AggregateResult:
    """
    Run `num_trials` independent trials of `mode` and tally the outcomes.

    All trials share `rng`, consumed strictly in order, so a fixed seed
    reproduces the exact same counts. `on_trial`, if given, sees every
    TrialRecord as it is produced.
    """
    mode = coerce_mode(mode)
    if isinstance(num_trials, bool) or not isinstance(num_trials, int):
        raise InvalidParameter(f"num_trials must be an int, got {num_trials!r}")
    if num_trials < 0:
        raise InvalidParameter("num_trials must be >= 0")

    logger.debug("simulating %d trials of %s", num_trials, mode.name)

    wins = 0
    losses = 0
    for _ in range(num_trials):
        record = walk(mode, rng, max_steps=max_steps)
        if record.outcome is TrialOutcome.WIN:
            wins += 1
        else:
            losses += 1
        if on_trial is not None:
            on_trial(record)

    result = AggregateResult(wins=wins, losses=losses)
    logger.info(
        "%s: losses/wins = %d/%d = %s",
        mode.name, losses, wins, result.ratio_text(),
    )
    return result
