"""
Board configuration for Minesweeper.

Holds board dimensions and mine count, the validation rules that make a
configuration playable, and the standard difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict

from .errors import InvalidConfiguration


# ============================================================================
# Validation
# ============================================================================

def opening_size(width: int, height: int) -> int:
    """Size of the largest safe opening any first click can need."""
    return min(3, width) * min(3, height)


def max_mines(width: int, height: int) -> int:
    """Largest mine count that still leaves room for a safe opening."""
    return width * height - opening_size(width, height)


def validate(width: int, height: int, mines: int) -> None:
    """
    Check that a configuration can produce a playable board.

    Args:
        width: Number of columns.
        height: Number of rows.
        mines: Number of mines to place.

    Raises:
        InvalidConfiguration: If the dimensions are not positive or the
            mine count leaves no room for a safe first click.
    """
    if width < 1 or height < 1:
        raise InvalidConfiguration("Board dimensions must be positive")
    if mines < 0:
        raise InvalidConfiguration("Number of mines cannot be negative")
    limit = max_mines(width, height)
    if mines > limit:
        raise InvalidConfiguration(
            f"Too many mines for this board size (max {limit})"
        )


# ============================================================================
# Configuration Data Class
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate(self.width, self.height, self.num_mines)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines

    @property
    def max_mines(self) -> int:
        return max_mines(self.width, self.height)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": BEGINNER,
    "medium": INTERMEDIATE,
    "hard": EXPERT,
}


def difficulty(name: str) -> BoardConfig:
    """
    Look up a preset by name.

    Accepts ``easy``/``medium``/``hard`` as well as
    ``beginner``/``intermediate``/``expert``, case-insensitively.
    """
    aliases = {"beginner": "easy", "intermediate": "medium", "expert": "hard"}
    key = name.strip().lower()
    key = aliases.get(key, key)
    if key not in DIFFICULTIES:
        raise InvalidConfiguration(f"Unknown difficulty: {name!r}")
    return DIFFICULTIES[key]
