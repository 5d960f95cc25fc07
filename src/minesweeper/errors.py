"""
Exceptions raised by the Minesweeper engine.
"""


class MinesweeperError(Exception):
    """Base class for recoverable engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot produce a playable board."""


class GenerationInfeasible(MinesweeperError, RuntimeError):
    """Not enough free cells outside the safe opening to place every mine."""
