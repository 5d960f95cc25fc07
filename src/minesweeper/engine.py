"""
Functional surface of the Minesweeper engine.

Callers validate a configuration, generate a board on the first click
from an explicit seed, then feed reveal and flag moves through
``reveal`` and ``toggle_flag``. None of these functions keep state
between calls; the board belongs to the caller.
"""
import logging
import random
from typing import List, NamedTuple, Optional, Set

from .board import Board, Coordinate, GameOutcome
from .config import validate
from .errors import GenerationInfeasible

logger = logging.getLogger(__name__)

__all__ = [
    "RevealResult",
    "validate",
    "generate",
    "reveal",
    "toggle_flag",
    "exclusion_zone",
]


class RevealResult(NamedTuple):
    """Board after a reveal, and the outcome if the game has ended."""

    board: Board
    outcome: Optional[GameOutcome]


# ============================================================================
# Generation
# ============================================================================

def exclusion_zone(
    width: int, height: int, x: int, y: int
) -> Set[Coordinate]:
    """The first click and its in-bounds neighbours."""
    return {
        (x + dx, y + dy)
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if 0 <= x + dx < width and 0 <= y + dy < height
    }


def _candidate_positions(
    width: int, height: int, excluded: Set[Coordinate]
) -> List[Coordinate]:
    """All positions outside the exclusion zone, in row-major order."""
    return [
        (x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in excluded
    ]


def generate(
    seed: int,
    width: int,
    height: int,
    mines: int,
    first_x: int,
    first_y: int,
) -> Board:
    """
    Build a hidden board that is safe around the first click.

    The same arguments always produce the same layout: ``seed`` drives a
    private ``random.Random`` and the global generator is never touched.

    Args:
        seed: Seed for mine placement.
        width: Number of columns.
        height: Number of rows.
        mines: Number of mines to place.
        first_x: Column of the first click.
        first_y: Row of the first click.

    Returns:
        A board with every cell hidden.

    Raises:
        InvalidConfiguration: If the configuration fails ``validate``.
        IndexError: If the first click is outside the board.
        GenerationInfeasible: If the cells outside the opening cannot
            hold every mine.
    """
    validate(width, height, mines)
    if not (0 <= first_x < width and 0 <= first_y < height):
        raise IndexError(
            f"({first_x}, {first_y}) is outside the {width}x{height} board"
        )

    logger.debug(
        "Generating grid at %d,%d (seed=%d, %dx%d, %d mines)",
        first_x, first_y, seed, width, height, mines,
    )
    excluded = exclusion_zone(width, height, first_x, first_y)
    candidates = _candidate_positions(width, height, excluded)
    if len(candidates) < mines:
        raise GenerationInfeasible(
            f"Only {len(candidates)} cells available for {mines} mines"
        )

    rng = random.Random(seed)
    positions = rng.sample(candidates, mines)
    return Board.from_mines(
        width, height, positions, seed=seed, origin=(first_x, first_y)
    )


# ============================================================================
# Moves
# ============================================================================

def reveal(x: int, y: int, board: Board) -> RevealResult:
    """
    Uncover a cell and report the outcome.

    Flagged and already uncovered cells are left alone. Uncovering a cell
    with no neighbouring mines floods the surrounding empty region. The
    engine does not stop moves after a game has ended; that is up to the
    caller.
    """
    outcome = board.uncover(x, y)
    if outcome is not None:
        logger.debug("Reveal at %d,%d ended the game: %s", x, y, outcome.name)
    return RevealResult(board, outcome)


def toggle_flag(x: int, y: int, board: Board) -> Board:
    """Flag or unflag a hidden cell. Uncovered cells are left alone."""
    board.toggle_flag(x, y)
    return board
