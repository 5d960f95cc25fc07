"""
Cell module for Minesweeper.

A cell is a plain record of two independent tags: what it holds
(a mine, or the count of neighbouring mines) and what the player sees
(hidden, flagged, or uncovered).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellType(Enum):
    """What a cell contains."""

    MINE = auto()
    NEAR = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    UNCOVERED = auto()


# Observation codes shared by the board and the environment
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        kind: Whether this cell is a mine or a numbered cell.
        near: Count of mines in neighbouring cells (0-8), unused for mines.
        state: Current visual state.
    """

    kind: CellType = CellType.NEAR
    near: int = 0
    state: CellState = CellState.HIDDEN

    def uncover(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if the cell was hidden and is now uncovered, False if it
            was already uncovered or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.UNCOVERED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is uncovered.
        """
        if self.state == CellState.UNCOVERED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_mine(self) -> bool:
        return self.kind == CellType.MINE

    @property
    def is_empty(self) -> bool:
        """Check if cell is a safe cell with no neighbouring mines."""
        return self.kind == CellType.NEAR and self.near == 0

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_uncovered(self) -> bool:
        return self.state == CellState.UNCOVERED

    def to_observation(self) -> int:
        """
        Convert cell to the value a player is allowed to see.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Uncovered cell with neighbouring mine count
            9: Uncovered mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_CODE
        if self.state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.is_mine:
            return MINE_CODE
        return self.near
