"""
Board module for Minesweeper.

Implements the grid of cells, neighbour lookup, reveal propagation,
flag toggling and outcome evaluation. Boards are normally built by
``minesweeper.engine.generate``; ``Board.from_mines`` builds one from an
explicit mine layout.
"""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, CellType
from .errors import InvalidConfiguration

Coordinate = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameOutcome(Enum):
    """Terminal result of a game."""

    WIN = auto()
    LOSS = auto()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    The grid is stored as a list of rows and addressed by ``(x, y)``,
    where ``x`` is the column and ``y`` the row.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        seed: Seed the layout was generated from, if any.
        origin: First-click coordinate the layout was generated around.
        mines: Number of mine cells on the grid.
        flagged: Number of currently flagged cells.
    """

    width: int
    height: int
    seed: Optional[int] = None
    origin: Optional[Coordinate] = None
    mines: int = field(default=0, init=False)
    flagged: int = field(default=0, init=False)
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _uncovered: int = field(default=0, init=False, repr=False)
    _detonated: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Create an empty, mine-free grid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        self._grid = [
            [Cell() for _ in range(self.width)]
            for _ in range(self.height)
        ]

    @classmethod
    def from_mines(
        cls,
        width: int,
        height: int,
        mines: Iterable[Coordinate],
        seed: Optional[int] = None,
        origin: Optional[Coordinate] = None,
    ) -> "Board":
        """
        Build a hidden board with mines at the given positions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions of the mines. Duplicates are ignored.
            seed: Seed to record on the board.
            origin: First-click coordinate to record on the board.

        Returns:
            A board with every cell hidden and neighbour counts computed.
        """
        board = cls(width, height, seed=seed, origin=origin)
        positions = set(mines)
        if len(positions) >= width * height:
            raise InvalidConfiguration("A board needs at least one safe cell")
        for x, y in positions:
            board._cell_at(x, y).kind = CellType.MINE
        board.mines = len(positions)
        board._calculate_adjacent_mines()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _calculate_adjacent_mines(self) -> None:
        """Calculate neighbouring mine counts for all cells."""
        for y in range(self.height):
            for x in range(self.width):
                cell = self._grid[y][x]
                if cell.is_mine:
                    cell.near = 0
                else:
                    cell.near = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for nx, ny in self.neighbors(x, y):
            if self._grid[ny][nx].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        """
        Get valid neighbouring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbours, at most 8.
        """
        result = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    result.append((nx, ny))
        return result

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"({x}, {y}) is outside the {self.width}x{self.height} board"
            )
        return self._grid[y][x]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, x: int, y: int) -> Optional[GameOutcome]:
        """
        Uncover a cell, flooding outwards from cells with no adjacent mines.

        Uncovered and flagged cells are left untouched.

        Args:
            x: Column to uncover.
            y: Row to uncover.

        Returns:
            The board outcome after the move.

        Raises:
            IndexError: If the position is outside the board.
        """
        cell = self._cell_at(x, y)
        if not cell.is_hidden:
            return self.outcome

        self._uncover_cell(cell)
        if cell.is_empty:
            self._flood_from(x, y)
        return self.outcome

    def _uncover_cell(self, cell: Cell) -> None:
        cell.uncover()
        if cell.is_mine:
            self._detonated = True
        else:
            self._uncovered += 1

    def _flood_from(self, x: int, y: int) -> None:
        """Uncover the connected region of empty cells around (x, y)."""
        # A cell is uncovered when queued, so it is never queued twice
        pending = deque([(x, y)])
        while pending:
            cx, cy = pending.popleft()
            for nx, ny in self.neighbors(cx, cy):
                neighbor = self._grid[ny][nx]
                if not neighbor.is_hidden:
                    continue
                self._uncover_cell(neighbor)
                if neighbor.is_empty:
                    pending.append((nx, ny))

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False if the cell is uncovered.
        """
        cell = self._cell_at(x, y)
        if not cell.toggle_flag():
            return False
        self.flagged += 1 if cell.is_flagged else -1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def outcome(self) -> Optional[GameOutcome]:
        """LOSS once a mine is uncovered, WIN once every safe cell is."""
        if self._detonated:
            return GameOutcome.LOSS
        if self._uncovered == self.safe_cells:
            return GameOutcome.WIN
        return None

    @property
    def safe_cells(self) -> int:
        return self.width * self.height - self.mines

    @property
    def uncovered(self) -> int:
        """Number of safe cells uncovered so far."""
        return self._uncovered

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags, negative when the player over-flags."""
        return self.mines - self.flagged

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    def cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Iterate over ((x, y), cell) pairs in row-major order."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                yield (x, y), cell

    def mine_positions(self) -> List[Coordinate]:
        return [pos for pos, cell in self.cells() if cell.is_mine]

    def hidden_positions(self) -> List[Coordinate]:
        """Positions that can still be uncovered (hidden and unflagged)."""
        return [pos for pos, cell in self.cells() if cell.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get the player-visible board as a numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = uncovered with adjacent count
                9 = uncovered mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for (x, y), cell in self.cells():
            obs[y, x] = cell.to_observation()
        return obs

    def render_ascii(self, show_mines: bool = False) -> str:
        """
        Render board as text, one row per line.

        Hidden cells are ``.``, flags ``F``, mines ``*`` and empty
        uncovered cells a blank. With ``show_mines`` every mine is drawn,
        as after a lost game.
        """
        lines = []
        for row in self._grid:
            symbols = []
            for cell in row:
                if cell.is_mine and (show_mines or cell.is_uncovered):
                    symbols.append("*")
                elif cell.is_flagged:
                    symbols.append("F")
                elif cell.is_hidden:
                    symbols.append(".")
                elif cell.near == 0:
                    symbols.append(" ")
                else:
                    symbols.append(str(cell.near))
            lines.append(" ".join(symbols))
        return "\n".join(lines)
