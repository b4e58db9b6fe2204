# simulations/__init__.py
"""
Monte Carlo runs of Astumian's stochastic games.

Reproduce the original program via:
    python -m simulations.play <game> <numsteps>

Compare two modes via:
    python -m simulations.compare --mode-a ... --mode-b ... --trials ...
"""
