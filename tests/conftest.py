"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, CellType, GameSession, generate


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def beginner_board() -> Board:
    """Generated 9x9 board with 10 mines, first click in the centre."""
    return generate(42, 9, 9, 10, 4, 4)


@pytest.fixture
def corner_mine_board() -> Board:
    """
    3x3 board with a single mine in the top-left corner.

        * 1 0
        1 1 0
        0 0 0
    """
    return Board.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x3 board split by a column of mines.

        0 2 * 2 0
        0 3 * 3 0
        0 2 * 2 0
    """
    return Board.from_mines(5, 3, [(2, 0), (2, 1), (2, 2)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=CellType.MINE)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def session() -> GameSession:
    """Beginner session with a fixed seed source."""
    return GameSession(BoardConfig(9, 9, 10), rng=random.Random(7))
