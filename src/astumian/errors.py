class AstumianError(Exception):
    """Base class for every error raised by the simulation engine."""


class InvalidParameter(AstumianError, ValueError):
    """A caller-supplied parameter is out of range (e.g. negative trials)."""


class InvalidGameMode(AstumianError, ValueError):
    pass


class InvalidGameId(AstumianError, ValueError):
    pass


class NonAbsorbingTrial(AstumianError, RuntimeError):
    """A trial exceeded its step cap without reaching an absorbing state."""
