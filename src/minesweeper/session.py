"""
Game session for Minesweeper.

Drives one game at a time on top of the engine: keeps the chosen
configuration, generates the board lazily on the first uncover, stops
accepting moves once the game is decided, and runs the game timer.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from . import engine
from .board import Board, GameOutcome
from .config import BoardConfig, difficulty
from .errors import MinesweeperError

logger = logging.getLogger(__name__)

# Seeds are drawn from [0, SEED_RANGE) for every new game
SEED_RANGE = 10000


class GameState(Enum):
    """Possible states of a game."""

    NOT_STARTED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameSession:
    """
    One player's game, from configuration to outcome.

    Attributes:
        config: Configuration for the next or current board.
        rng: Source of per-game seeds.
        board: Current board, None until the first uncover.
        outcome: Result of the game once decided.
        time: Seconds elapsed while the game was in progress.
        error: Message from the last rejected configuration or failed
            generation, None otherwise.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    board: Optional[Board] = None
    outcome: Optional[GameOutcome] = None
    time: int = 0
    error: Optional[str] = None

    # ========================================================================
    # Configuration
    # ========================================================================

    def reset(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        mines: Optional[int] = None,
    ) -> bool:
        """
        Start over, optionally with a new configuration.

        Omitted values keep their current setting. An invalid configuration
        is rejected: the board is dropped, the previous configuration kept
        and the reason stored in ``error``.

        Returns:
            True if the configuration was accepted.
        """
        width = self.config.width if width is None else width
        height = self.config.height if height is None else height
        mines = self.config.num_mines if mines is None else mines

        self.board = None
        self.outcome = None
        try:
            config = BoardConfig(width, height, mines)
        except MinesweeperError as exc:
            logger.info("Rejected %dx%d with %d mines: %s", width, height, mines, exc)
            self.error = str(exc)
            return False

        self.config = config
        self.time = 0
        self.error = None
        logger.info("New game: %dx%d with %d mines", width, height, mines)
        return True

    def set_width(self, width: int) -> bool:
        return self.reset(width=width)

    def set_height(self, height: int) -> bool:
        return self.reset(height=height)

    def set_mine_count(self, mines: int) -> bool:
        return self.reset(mines=mines)

    def set_difficulty(self, name: str) -> bool:
        """Reset to a preset: easy, medium or hard."""
        try:
            preset = difficulty(name)
        except MinesweeperError as exc:
            self.error = str(exc)
            self.board = None
            self.outcome = None
            return False
        return self.reset(preset.width, preset.height, preset.num_mines)

    # ========================================================================
    # Moves
    # ========================================================================

    def uncover(self, x: int, y: int) -> Optional[GameOutcome]:
        """
        Uncover a cell, generating the board first if this is the first click.

        Ignored once the game is over.

        Returns:
            The game outcome after the move.
        """
        if self.is_over:
            return self.outcome

        if self.board is None:
            seed = self.rng.randrange(SEED_RANGE)
            logger.debug("Generating grid at %d,%d", x, y)
            try:
                self.board = engine.generate(
                    seed,
                    self.config.width,
                    self.config.height,
                    self.config.num_mines,
                    x,
                    y,
                )
            except MinesweeperError as exc:
                self.error = str(exc)
                return None

        result = engine.reveal(x, y, self.board)
        self.outcome = result.outcome
        if self.outcome is not None:
            logger.info("Game over after %ds: %s", self.time, self.outcome.name)
        return self.outcome

    def flag(self, x: int, y: int) -> None:
        """Toggle a flag. Ignored before the first click and after the game ends."""
        if self.board is None or self.is_over:
            return
        engine.toggle_flag(x, y, self.board)

    def tick(self) -> None:
        """Advance the timer by one second while the game is in progress."""
        if self.state == GameState.PLAYING:
            self.time += 1

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        if self.outcome == GameOutcome.WIN:
            return GameState.WON
        if self.outcome == GameOutcome.LOSS:
            return GameState.LOST
        if self.board is None:
            return GameState.NOT_STARTED
        return GameState.PLAYING

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def seed(self) -> Optional[int]:
        """Seed of the current board, if one has been generated."""
        return self.board.seed if self.board is not None else None

    @property
    def remaining_mines(self) -> int:
        """Mine counter for display: mines minus flags, not clamped."""
        if self.board is None:
            return self.config.num_mines
        return self.board.remaining_mines

    def render(self) -> str:
        """Text view of the board; every mine is shown once the game is lost."""
        if self.board is None:
            row = " ".join("." for _ in range(self.config.width))
            return "\n".join(row for _ in range(self.config.height))
        return self.board.render_ascii(show_mines=self.state == GameState.LOST)
